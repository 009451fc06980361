"""Domain models for consumption logs and inventory."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from food_sustainability.domain.errors import InvalidInputError


class LogStatus(StrEnum):
    """Outcome recorded for a logged food item."""

    CONSUMED = "consumed"
    WASTED = "wasted"


@dataclass(frozen=True)
class LogEntry:
    """A consumed or wasted food item from the user's history."""

    name: str
    price: float
    status: LogStatus
    quantity: int = 1
    logged_on: date | None = None

    def __post_init__(self) -> None:
        _require_name(self.name)
        _require_price(self.price)
        _require_quantity(self.quantity)
        if not isinstance(self.status, LogStatus):
            try:
                object.__setattr__(self, "status", LogStatus(self.status))
            except ValueError:
                raise InvalidInputError(
                    "status", f"expected consumed or wasted, got {self.status!r}"
                ) from None
        _set_date(self, "logged_on", required=False)

    @property
    def is_wasted(self) -> bool:
        return self.status is LogStatus.WASTED

    @property
    def is_consumed(self) -> bool:
        return self.status is LogStatus.CONSUMED


@dataclass(frozen=True)
class InventoryItem:
    """A food item currently held by the household."""

    name: str
    price: float
    quantity: int
    expiry: date
    unit: str = "units"
    purchased_on: date | None = None

    def __post_init__(self) -> None:
        _require_name(self.name)
        _require_price(self.price)
        _require_quantity(self.quantity)
        _set_date(self, "expiry", required=True)
        _set_date(self, "purchased_on", required=False)

    def days_left(self, reference_date: date) -> int:
        """Return whole days until expiry, rounded up; negative when overdue."""
        return math.ceil((self.expiry - reference_date).total_seconds() / 86400)

    @property
    def total_value(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True)
class RiskItem:
    """Inventory item expiring within the risk window."""

    name: str
    days_left: int
    risk_value: float


def _set_date(record: object, field: str, *, required: bool) -> None:
    """Store a calendar date, truncating datetimes."""
    value = getattr(record, field)
    if value is None and not required:
        return
    if isinstance(value, datetime):
        object.__setattr__(record, field, value.date())
        return
    if not isinstance(value, date):
        raise InvalidInputError(field, f"expected a date, got {value!r}")


def _require_name(value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError("name", "expected a non-empty string")


def _require_price(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidInputError("price", f"expected a number, got {value!r}")
    if math.isnan(value) or value < 0:
        raise InvalidInputError("price", f"expected a non-negative number, got {value}")


def _require_quantity(value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError("quantity", f"expected an integer, got {value!r}")
    if value <= 0:
        raise InvalidInputError("quantity", f"expected a positive integer, got {value}")
