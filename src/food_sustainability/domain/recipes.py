"""Domain models for recipes and meal plans."""

from dataclasses import dataclass
from enum import StrEnum

from food_sustainability.domain.errors import InvalidInputError


class DietaryPreference(StrEnum):
    """Dietary tags accepted by the meal planner."""

    VEGETARIAN = "Vegetarian"
    VEGAN = "Vegan"
    GLUTEN_FREE = "Gluten-Free"


@dataclass(frozen=True)
class Recipe:
    """Static catalog recipe."""

    name: str
    ingredients: tuple[str, ...]
    time: str
    difficulty: str
    instructions: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError("name", "expected a non-empty recipe name")
        ingredients = tuple(self.ingredients)
        if not ingredients:
            raise InvalidInputError("ingredients", f"recipe {self.name!r} has none")
        if any(not isinstance(item, str) or not item.strip() for item in ingredients):
            raise InvalidInputError(
                "ingredients", f"recipe {self.name!r} has a blank ingredient"
            )
        object.__setattr__(self, "ingredients", ingredients)


@dataclass(frozen=True)
class RecipeMatch:
    """A recipe scored against the current inventory."""

    recipe: Recipe
    match_score: int
    matched_ingredients: tuple[str, ...]
    missing_ingredients: tuple[str, ...]
    urgency: int | None = None
    focus_item: str | None = None

    @property
    def name(self) -> str:
        return self.recipe.name


@dataclass(frozen=True)
class MealPlan:
    """Ranked recipe recommendations for expiring items."""

    total_recommendations: int
    meals: list[RecipeMatch]
    summary: str


@dataclass(frozen=True)
class PlannedMeal:
    """A meal assigned to a weekday."""

    day: str
    meal: str
    time: str
    difficulty: str
    focus_item: str | None


@dataclass(frozen=True)
class ShoppingListItem:
    """A missing ingredient and how many planned meals need it."""

    item: str
    quantity: int


@dataclass(frozen=True)
class WeeklyMealPlan:
    """Weekday meal assignments with the aggregated shopping list."""

    weekly_plan: list[PlannedMeal]
    shopping_list: list[ShoppingListItem]
    total_meals: int


@dataclass(frozen=True)
class IngredientSearch:
    """Recipes that use a given ingredient."""

    ingredient: str
    count: int
    recipes: list[Recipe]
