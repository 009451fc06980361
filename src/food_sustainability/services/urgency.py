"""Expiry urgency weights."""

_URGENCY_STEPS = (
    (1, 100),
    (2, 80),
    (3, 60),
    (7, 40),
)
LOW_URGENCY = 20


def urgency(days_left: int) -> int:
    """Map days until expiry to an urgency weight; overdue items score highest."""
    for limit, weight in _URGENCY_STEPS:
        if days_left <= limit:
            return weight
    return LOW_URGENCY
