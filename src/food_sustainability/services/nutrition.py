"""Dietary-diversity scoring of consumed items."""

import math
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from food_sustainability.domain.analytics import CategoryBreakdown, NutritionMetrics
from food_sustainability.domain.inventory import LogEntry
from food_sustainability.services.scoring import clamp_score

BASELINE_SCORE = 50
CATEGORY_COUNT = 5

# Checked in insertion order; the first category with a matching keyword wins.
DEFAULT_CATEGORY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "fruits": ("apple", "orange", "banana", "berries", "mango", "grape"),
        "vegetables": (
            "carrot",
            "lettuce",
            "broccoli",
            "spinach",
            "tomato",
            "cucumber",
        ),
        "proteins": ("egg", "chicken", "fish", "meat", "tofu", "bean", "lentil"),
        "grains": ("bread", "rice", "wheat", "oat", "pasta", "cereal"),
        "dairy": ("milk", "cheese", "yogurt", "butter"),
    }
)

GENERIC_SUGGESTIONS = ("Add more vegetables", "Include proteins", "Eat whole grains")
POSITIVE_SUGGESTION = "Great variety! Keep it up!"

# (category, message, divisor of the per-category target below which it fires)
_SUGGESTION_RULES = (
    ("vegetables", "Boost vegetables to 25% of meals", 2),
    ("fruits", "Add more fruits for vitamins", 2),
    ("proteins", "Include proteins in every meal", 2),
    ("grains", "Choose whole grains", 2),
    ("dairy", "Add dairy for calcium", 3),
)


def classify_food(
    name: str,
    keywords: Mapping[str, Sequence[str]] = DEFAULT_CATEGORY_KEYWORDS,
) -> str | None:
    """Return the food group for an item name, or None when no keyword matches."""
    lowered = name.lower()
    for category, words in keywords.items():
        if any(word in lowered for word in words):
            return category
    return None


def calculate_nutrition_score(
    log: Sequence[LogEntry],
    keywords: Mapping[str, Sequence[str]] = DEFAULT_CATEGORY_KEYWORDS,
) -> NutritionMetrics:
    """Score how evenly consumed items spread across the five food groups."""
    if not log:
        return NutritionMetrics(
            nutrition_score=BASELINE_SCORE,
            categories=CategoryBreakdown(),
            total_consumed=0,
            suggestions=list(GENERIC_SUGGESTIONS),
        )

    consumed = [entry for entry in log if entry.is_consumed]
    if not consumed:
        return NutritionMetrics(
            nutrition_score=0,
            categories=CategoryBreakdown(),
            total_consumed=0,
            suggestions=list(GENERIC_SUGGESTIONS),
        )

    counts = dict.fromkeys(CategoryBreakdown().as_dict(), 0)
    for entry in consumed:
        category = classify_food(entry.name, keywords)
        if category in counts:
            counts[category] += 1

    target = math.ceil(len(consumed) / CATEGORY_COUNT)
    total = sum(min(count / target * 100, 100) for count in counts.values())
    return NutritionMetrics(
        nutrition_score=clamp_score(total / CATEGORY_COUNT),
        categories=CategoryBreakdown(**counts),
        total_consumed=len(consumed),
        suggestions=_suggestions(counts, target),
    )


def _suggestions(counts: dict[str, int], target: int) -> list[str]:
    suggestions = [
        message
        for category, message, divisor in _SUGGESTION_RULES
        if counts[category] < target / divisor
    ]
    return suggestions or [POSITIVE_SUGGESTION]
