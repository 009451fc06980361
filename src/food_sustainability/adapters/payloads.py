"""Pydantic models for raw records handed over by collaborators."""

import logging
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from food_sustainability.domain.errors import InvalidInputError
from food_sustainability.domain.inventory import InventoryItem, LogEntry, LogStatus
from food_sustainability.domain.recipes import Recipe
from food_sustainability.services.catalog import RecipeCatalog

_logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _reject_bool(value: object) -> object:
    if isinstance(value, bool):
        raise ValueError("expected a number, got a boolean")
    return value


def _to_calendar_date(value: object) -> object:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return value.strip()[:10]
    return value


class LogEntryPayload(BaseModel):
    """Consumption log payload."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(
        min_length=1, validation_alias=AliasChoices("name", "foodName", "item")
    )
    price: float = Field(ge=0, allow_inf_nan=False)
    status: LogStatus
    quantity: int = Field(default=1, gt=0)
    logged_on: date | None = Field(
        default=None, validation_alias=AliasChoices("logged_on", "date")
    )

    def to_domain(self) -> LogEntry:
        return LogEntry(
            name=self.name,
            price=self.price,
            status=self.status,
            quantity=self.quantity,
            logged_on=self.logged_on,
        )

    @field_validator("price", "quantity", mode="before")
    @classmethod
    def reject_bools(cls, value: object) -> object:
        return _reject_bool(value)

    @field_validator("logged_on", mode="before")
    @classmethod
    def truncate_timestamp(cls, value: object) -> object:
        return _to_calendar_date(value)


class InventoryItemPayload(BaseModel):
    """Inventory item payload.

    Timestamps for ``expiry`` and ``purchase_date`` are truncated to their date.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, validation_alias=AliasChoices("name", "item"))
    price: float = Field(ge=0, allow_inf_nan=False)
    quantity: int = Field(gt=0)
    unit: str = "units"
    expiry: date
    purchase_date: date | None = Field(
        default=None, validation_alias=AliasChoices("purchase_date", "purchaseDate")
    )

    def to_domain(self) -> InventoryItem:
        return InventoryItem(
            name=self.name,
            price=self.price,
            quantity=self.quantity,
            unit=self.unit,
            expiry=self.expiry,
            purchased_on=self.purchase_date,
        )

    @field_validator("price", "quantity", mode="before")
    @classmethod
    def reject_bools(cls, value: object) -> object:
        return _reject_bool(value)

    @field_validator("expiry", "purchase_date", mode="before")
    @classmethod
    def truncate_timestamps(cls, value: object) -> object:
        return _to_calendar_date(value)


class RecipePayload(BaseModel):
    """Recipe catalog entry payload."""

    name: str = Field(min_length=1)
    ingredients: list[str] = Field(min_length=1)
    time: str
    difficulty: str
    instructions: str = ""

    def to_domain(self) -> Recipe:
        return Recipe(
            name=self.name,
            ingredients=tuple(self.ingredients),
            time=self.time,
            difficulty=self.difficulty,
            instructions=self.instructions,
        )


def parse_log_entries(raw: Sequence[Mapping[str, object]]) -> list[LogEntry]:
    """Validate raw log records, rejecting the first malformed one."""
    return [
        _validate(LogEntryPayload, record, f"log[{index}]").to_domain()
        for index, record in enumerate(raw)
    ]


def parse_inventory(raw: Sequence[Mapping[str, object]]) -> list[InventoryItem]:
    """Validate raw inventory records, rejecting the first malformed one."""
    return [
        _validate(InventoryItemPayload, record, f"inventory[{index}]").to_domain()
        for index, record in enumerate(raw)
    ]


def parse_recipe_catalog(
    raw: Mapping[str, Sequence[Mapping[str, object]]],
) -> RecipeCatalog:
    """Validate a raw catalog keyed by primary ingredient."""
    recipes = {
        key: [
            _validate(RecipePayload, record, f"catalog.{key}[{index}]").to_domain()
            for index, record in enumerate(records)
        ]
        for key, records in raw.items()
    }
    return RecipeCatalog.from_mapping(recipes)


def _validate(
    model: type[ModelT], record: Mapping[str, object], prefix: str
) -> ModelT:
    try:
        return model.model_validate(record)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        field_name = f"{prefix}.{location}" if location else prefix
        _logger.warning("Rejected record: field=%s error=%s", field_name, first["msg"])
        raise InvalidInputError(field_name, first["msg"]) from exc
