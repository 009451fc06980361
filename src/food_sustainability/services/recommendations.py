"""Ranked improvement recommendations."""

from dataclasses import dataclass

from food_sustainability.domain.analytics import (
    NutritionMetrics,
    Priority,
    Recommendation,
    RecommendationSet,
    SDGMetrics,
)
from food_sustainability.services.scoring import MAX_SCORE, round_half_up

WASTE_POINTS_PER_ITEM = 10
WASTE_IMPACT_SHARE = 0.25
NUTRITION_GAP_THRESHOLD = 15
NUTRITION_IMPACT_SHARE = 0.3
NUTRITION_PROJECTION_SHARE = 0.15
MIN_CATEGORY_COUNT = 2
VEGETABLE_IMPACT = 10
PROTEIN_IMPACT = 15
PROTEIN_PROJECTION = 5


@dataclass
class _Candidate:
    recommendation: Recommendation
    projected_gain: float


def generate_recommendations(
    sdg: SDGMetrics,
    nutrition: NutritionMetrics,
    limit: int = 3,
    improvement_cap: float = 30,
) -> RecommendationSet:
    """Return up to ``limit`` actions in generation order with a projected score.

    Every candidate contributes to the projection, including those cut by
    ``limit``; the projection is capped at ``improvement_cap``.
    """
    candidates = [
        candidate
        for candidate in (
            _waste_candidate(sdg),
            _nutrition_candidate(nutrition),
            _vegetable_candidate(nutrition),
            _protein_candidate(nutrition),
        )
        if candidate is not None
    ]

    projected = min(sum(c.projected_gain for c in candidates), improvement_cap)
    potential_improvement = round_half_up(projected)
    return RecommendationSet(
        recommendations=[c.recommendation for c in candidates[:limit]],
        potential_improvement=potential_improvement,
        estimated_new_score=min(sdg.sdg_score + potential_improvement, MAX_SCORE),
    )


def _waste_candidate(sdg: SDGMetrics) -> _Candidate | None:
    potential = min(sdg.wasted_count * WASTE_POINTS_PER_ITEM, MAX_SCORE - sdg.sdg_score)
    if potential <= 0:
        return None
    gain = potential * WASTE_IMPACT_SHARE
    impact = round_half_up(gain)
    return _Candidate(
        Recommendation(
            action="Focus on waste reduction",
            description=f"Reduce waste by 25% to boost your score by {impact}%",
            impact=impact,
            priority=Priority.HIGH,
            steps=[
                "Check fridge daily for expiring items",
                "Plan meals with expiring items first",
                "Use the meal suggestions for expiring items",
            ],
        ),
        projected_gain=gain,
    )


def _nutrition_candidate(nutrition: NutritionMetrics) -> _Candidate | None:
    gap = MAX_SCORE - nutrition.nutrition_score
    if gap <= NUTRITION_GAP_THRESHOLD:
        return None
    impact = round_half_up(gap * NUTRITION_IMPACT_SHARE)
    lead = (
        nutrition.suggestions[0] if nutrition.suggestions else "Vary your food groups"
    )
    return _Candidate(
        Recommendation(
            action="Improve nutrition diversity",
            description=f"{lead} to boost nutrition score by {impact}%",
            impact=impact,
            priority=Priority.MEDIUM,
            steps=list(nutrition.suggestions[:2]),
        ),
        projected_gain=gap * NUTRITION_PROJECTION_SHARE,
    )


def _vegetable_candidate(nutrition: NutritionMetrics) -> _Candidate | None:
    if nutrition.categories.vegetables >= MIN_CATEGORY_COUNT:
        return None
    return _Candidate(
        Recommendation(
            action="Add more vegetables",
            description="Boost SDG score by 10% with vegetable-based meals",
            impact=VEGETABLE_IMPACT,
            priority=Priority.HIGH,
            steps=[
                "Try carrot salad",
                "Make veggie stir-fry",
                "Add veggies to every meal",
            ],
        ),
        projected_gain=VEGETABLE_IMPACT,
    )


def _protein_candidate(nutrition: NutritionMetrics) -> _Candidate | None:
    if nutrition.categories.proteins >= MIN_CATEGORY_COUNT:
        return None
    # Displayed impact is higher than the projected gain.
    return _Candidate(
        Recommendation(
            action="Include more proteins",
            description="Protein-rich meals reduce waste by 15%",
            impact=PROTEIN_IMPACT,
            priority=Priority.MEDIUM,
            steps=[
                "Add eggs to breakfast",
                "Include beans in lunch",
                "Choose protein for dinner",
            ],
        ),
        projected_gain=PROTEIN_PROJECTION,
    )
