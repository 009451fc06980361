"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from food_sustainability.config import Settings
from food_sustainability.services.catalog import DEFAULT_CATALOG, RecipeCatalog
from food_sustainability.services.meal_planning import MealPlanningService
from food_sustainability.services.profile import ProfileService


@dataclass
class AppContainer:
    """Holds engine-wide dependencies."""

    settings: Settings
    catalog: RecipeCatalog
    meal_planning_service: MealPlanningService
    profile_service: ProfileService


def build_container(
    settings: Settings | None = None, catalog: RecipeCatalog | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_catalog = catalog or DEFAULT_CATALOG
    meal_planning_service = MealPlanningService(
        catalog=resolved_catalog,
        min_match_score=resolved_settings.min_match_score,
        meal_plan_limit=resolved_settings.meal_plan_limit,
        weekly_meal_count=resolved_settings.weekly_meal_count,
        debug=resolved_settings.debug,
    )
    profile_service = ProfileService(
        risk_window_days=resolved_settings.risk_window_days,
        recommendation_limit=resolved_settings.recommendation_limit,
        improvement_cap=resolved_settings.improvement_cap,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog=resolved_catalog,
        meal_planning_service=meal_planning_service,
        profile_service=profile_service,
    )
