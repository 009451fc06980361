"""Reference date resolution for engine entry points."""

from datetime import UTC, date, datetime

from food_sustainability.domain.errors import InvalidInputError


def resolve_reference_date(value: date | str | None) -> date:
    """Return the reference date, falling back to today's UTC date."""
    if value is None:
        return datetime.now(tz=UTC).date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            raise InvalidInputError(
                "reference_date", f"expected an ISO date, got {value!r}"
            ) from None
    raise InvalidInputError("reference_date", f"expected a date, got {value!r}")
