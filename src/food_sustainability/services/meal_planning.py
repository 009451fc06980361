"""Recipe matching and meal planning from the current inventory."""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from datetime import date

from food_sustainability.domain.errors import InvalidInputError
from food_sustainability.domain.inventory import InventoryItem
from food_sustainability.domain.recipes import (
    DietaryPreference,
    IngredientSearch,
    MealPlan,
    PlannedMeal,
    Recipe,
    RecipeMatch,
    ShoppingListItem,
    WeeklyMealPlan,
)
from food_sustainability.services.catalog import RecipeCatalog
from food_sustainability.services.dates import resolve_reference_date
from food_sustainability.services.scoring import round_half_up
from food_sustainability.services.urgency import urgency

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Coarse ingredient-token exclusions; Gluten-Free has no rule yet.
_EXCLUDED_TOKENS = {
    DietaryPreference.VEGETARIAN: frozenset({"meat"}),
    DietaryPreference.VEGAN: frozenset({"meat", "dairy"}),
    DietaryPreference.GLUTEN_FREE: frozenset(),
}

_logger = logging.getLogger(__name__)


def score_recipe_match(
    recipe: Recipe, inventory: Sequence[InventoryItem]
) -> RecipeMatch:
    """Score a recipe by the share of its ingredients found in inventory names."""
    names = [item.name.lower() for item in inventory]
    matched: list[str] = []
    missing: list[str] = []
    for ingredient in recipe.ingredients:
        needle = ingredient.lower()
        if any(needle in name for name in names):
            matched.append(ingredient)
        else:
            missing.append(ingredient)
    return RecipeMatch(
        recipe=recipe,
        match_score=round_half_up(len(matched) / len(recipe.ingredients) * 100),
        matched_ingredients=tuple(matched),
        missing_ingredients=tuple(missing),
    )


def parse_preferences(
    preferences: Iterable[str | DietaryPreference] | None,
) -> frozenset[DietaryPreference]:
    """Validate dietary tags."""
    if not preferences:
        return frozenset()
    if isinstance(preferences, str):
        preferences = [preferences]
    parsed = set()
    for tag in preferences:
        try:
            parsed.add(DietaryPreference(tag))
        except ValueError:
            raise InvalidInputError(
                "preferences", f"unknown dietary preference {tag!r}"
            ) from None
    return frozenset(parsed)


def allowed_by_preferences(
    recipe: Recipe, preferences: frozenset[DietaryPreference]
) -> bool:
    """Return False when the ingredient list carries an excluded token."""
    excluded: set[str] = set()
    for preference in preferences:
        excluded |= _EXCLUDED_TOKENS[preference]
    return not excluded.intersection(recipe.ingredients)


@dataclass
class MealPlanningService:
    """Ranks catalog recipes against inventory and expiry urgency."""

    catalog: RecipeCatalog
    min_match_score: int = 50
    meal_plan_limit: int = 5
    weekly_meal_count: int = len(WEEKDAYS)
    debug: bool = False

    def generate_meal_plan(
        self,
        inventory: Sequence[InventoryItem],
        preferences: Iterable[str | DietaryPreference] | None = None,
        reference_date: date | str | None = None,
    ) -> MealPlan:
        """Return recipes that use the soonest-expiring items first."""
        today = resolve_reference_date(reference_date)
        selected = parse_preferences(preferences)

        meals = self._rank_matches(inventory, today)
        if DietaryPreference.GLUTEN_FREE in selected and self.debug:
            _logger.info("Meal plan: Gluten-Free preference is not enforced")
        filtered = [
            meal for meal in meals if allowed_by_preferences(meal.recipe, selected)
        ]
        if self.debug:
            _logger.info(
                "Meal plan: inventory=%s matches=%s after_filters=%s",
                len(inventory),
                len(meals),
                len(filtered),
            )
        return MealPlan(
            total_recommendations=len(filtered),
            meals=filtered[: self.meal_plan_limit],
            summary=f"Found {len(filtered)} recipes to use your expiring items",
        )

    def generate_weekly_meal_plan(
        self,
        inventory: Sequence[InventoryItem],
        meal_count: int | None = None,
        preferences: Iterable[str | DietaryPreference] | None = None,
        reference_date: date | str | None = None,
    ) -> WeeklyMealPlan:
        """Assign top meals to weekdays and list the missing ingredients to buy."""
        if meal_count is None:
            meal_count = self.weekly_meal_count
        if isinstance(meal_count, bool) or not isinstance(meal_count, int):
            raise InvalidInputError(
                "meal_count", f"expected an integer, got {meal_count!r}"
            )
        if not 0 < meal_count <= len(WEEKDAYS):
            raise InvalidInputError(
                "meal_count", f"expected 1-{len(WEEKDAYS)}, got {meal_count}"
            )

        plan = self.generate_meal_plan(inventory, preferences, reference_date)
        selected = plan.meals[:meal_count]

        needed: Counter[str] = Counter()
        for meal in selected:
            needed.update(meal.missing_ingredients)

        return WeeklyMealPlan(
            weekly_plan=[
                PlannedMeal(
                    day=day,
                    meal=meal.recipe.name,
                    time=meal.recipe.time,
                    difficulty=meal.recipe.difficulty,
                    focus_item=meal.focus_item,
                )
                for day, meal in zip(WEEKDAYS, selected, strict=False)
            ],
            shopping_list=[
                ShoppingListItem(item=item, quantity=count)
                for item, count in needed.items()
            ],
            total_meals=len(selected),
        )

    def get_recipe_details(self, name: str) -> Recipe | None:
        """Return a catalog recipe by name, if present."""
        return self.catalog.find(name)

    def get_recipes_by_ingredient(self, ingredient: str) -> IngredientSearch:
        """Return every catalog recipe that uses an ingredient."""
        recipes = self.catalog.search(ingredient)
        return IngredientSearch(
            ingredient=ingredient, count=len(recipes), recipes=recipes
        )

    def _rank_matches(
        self, inventory: Sequence[InventoryItem], today: date
    ) -> list[RecipeMatch]:
        matches: list[RecipeMatch] = []
        for item in sorted(inventory, key=lambda entry: entry.expiry):
            weight = urgency(item.days_left(today))
            for recipe in self.catalog.recipes_for(item.name):
                scored = score_recipe_match(recipe, inventory)
                if scored.match_score < self.min_match_score:
                    continue
                matches.append(replace(scored, urgency=weight, focus_item=item.name))
        return sorted(
            matches, key=lambda match: (-(match.urgency or 0), -match.match_score)
        )
