"""Domain errors."""


class InvalidInputError(ValueError):
    """Raised when a record handed to the engine is malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
