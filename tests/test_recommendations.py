"""Tests for improvement recommendations."""

from food_sustainability.domain.analytics import (
    CategoryBreakdown,
    NutritionMetrics,
    Priority,
    SDGMetrics,
)
from food_sustainability.services.nutrition import calculate_nutrition_score
from food_sustainability.services.recommendations import generate_recommendations
from food_sustainability.services.sdg import calculate_sdg_score


def _sdg(score: int, wasted: int) -> SDGMetrics:
    return SDGMetrics(
        sdg_score=score,
        success_rate=score,
        wasted_count=wasted,
        consumed_count=10 - wasted,
        total_items=10,
    )


def _nutrition(score: int, vegetables: int = 2, proteins: int = 2) -> NutritionMetrics:
    return NutritionMetrics(
        nutrition_score=score,
        categories=CategoryBreakdown(vegetables=vegetables, proteins=proteins),
        total_consumed=10,
        suggestions=["Add more fruits for vitamins", "Choose whole grains"],
    )


def test_no_recommendations_for_perfect_profile() -> None:
    result = generate_recommendations(_sdg(100, 0), _nutrition(100))

    assert result.recommendations == []
    assert result.potential_improvement == 0
    assert result.estimated_new_score == 100


def test_recommendations_for_sample_history(history) -> None:
    result = generate_recommendations(
        calculate_sdg_score(history), calculate_nutrition_score(history)
    )

    assert [r.action for r in result.recommendations] == [
        "Focus on waste reduction",
        "Improve nutrition diversity",
        "Add more vegetables",
    ]
    waste, nutrition, vegetables = result.recommendations
    assert waste.impact == 8
    assert waste.priority is Priority.HIGH
    assert nutrition.impact == 12
    assert nutrition.priority is Priority.MEDIUM
    assert nutrition.steps == ["Add more fruits for vitamins", "Choose whole grains"]
    assert nutrition.description.startswith("Add more fruits for vitamins")
    assert vegetables.impact == 10
    # 7.5 + 6 + 10 + 5 from the protein candidate that did not make the top three
    assert result.potential_improvement == 29
    assert result.estimated_new_score == 79


def test_projection_is_capped() -> None:
    result = generate_recommendations(
        _sdg(0, 5), _nutrition(0, vegetables=0, proteins=0)
    )

    assert len(result.recommendations) == 3
    assert result.recommendations[0].impact == 13
    assert result.recommendations[1].impact == 30
    assert result.potential_improvement == 30
    assert result.estimated_new_score == 30


def test_waste_potential_is_bounded_by_score_headroom() -> None:
    result = generate_recommendations(_sdg(95, 3), _nutrition(100))

    assert len(result.recommendations) == 1
    assert result.recommendations[0].impact == 1
    assert result.potential_improvement == 1
    assert result.estimated_new_score == 96


def test_small_nutrition_gap_is_ignored() -> None:
    result = generate_recommendations(_sdg(100, 0), _nutrition(85))
    assert result.recommendations == []


def test_protein_candidate_weighs_less_than_its_impact() -> None:
    result = generate_recommendations(_sdg(90, 0), _nutrition(100, proteins=1))

    assert [r.action for r in result.recommendations] == ["Include more proteins"]
    assert result.recommendations[0].impact == 15
    assert result.potential_improvement == 5
    assert result.estimated_new_score == 95


def test_estimated_score_never_exceeds_hundred() -> None:
    result = generate_recommendations(_sdg(90, 1), _nutrition(0, vegetables=0))

    assert len(result.recommendations) <= 3
    assert result.estimated_new_score == 100
