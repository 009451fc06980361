"""Shared test fixtures."""

from datetime import date, timedelta

import pytest

from food_sustainability.config import Settings
from food_sustainability.domain.inventory import InventoryItem, LogEntry, LogStatus
from food_sustainability.domain.recipes import Recipe
from food_sustainability.services.catalog import DEFAULT_CATALOG, RecipeCatalog
from food_sustainability.services.meal_planning import MealPlanningService
from food_sustainability.services.profile import ProfileService

TODAY = date(2025, 11, 21)


def consumed(name: str, price: float = 1.0, quantity: int = 1) -> LogEntry:
    return LogEntry(
        name=name, price=price, status=LogStatus.CONSUMED, quantity=quantity
    )


def wasted(name: str, price: float = 1.0, quantity: int = 1) -> LogEntry:
    return LogEntry(name=name, price=price, status=LogStatus.WASTED, quantity=quantity)


def stocked(
    name: str,
    days: int,
    price: float = 1.0,
    quantity: int = 1,
    today: date = TODAY,
) -> InventoryItem:
    return InventoryItem(
        name=name,
        price=price,
        quantity=quantity,
        unit="units",
        expiry=today + timedelta(days=days),
        purchased_on=today - timedelta(days=3),
    )


def recipe(name: str, ingredients: list[str]) -> Recipe:
    return Recipe(
        name=name,
        ingredients=tuple(ingredients),
        time="10 min",
        difficulty="Easy",
        instructions="Combine and serve",
    )


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def settings() -> Settings:
    return Settings(debug=True)


@pytest.fixture
def history() -> list[LogEntry]:
    """Six logged items, oldest first."""
    return [
        wasted("Spinach", 2.50),
        consumed("Milk", 1.20),
        consumed("Chicken Breast", 5.00),
        wasted("Bread", 1.50),
        consumed("Tomatoes", 1.80),
        wasted("Cheese", 3.20),
    ]


@pytest.fixture
def fridge() -> list[InventoryItem]:
    return [
        stocked("Yogurt", days=1, price=1.00, quantity=2),
        stocked("Carrots", days=7, price=0.80, quantity=1),
        stocked("Rice", days=365, price=2.50, quantity=5),
        stocked("Apples", days=4, price=1.50, quantity=4),
    ]


@pytest.fixture
def catalog() -> RecipeCatalog:
    return DEFAULT_CATALOG


@pytest.fixture
def meal_planning_service(catalog: RecipeCatalog) -> MealPlanningService:
    return MealPlanningService(catalog=catalog)


@pytest.fixture
def profile_service() -> ProfileService:
    return ProfileService()
