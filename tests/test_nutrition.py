"""Tests for the nutrition diversity score."""

from food_sustainability.services.nutrition import (
    GENERIC_SUGGESTIONS,
    POSITIVE_SUGGESTION,
    calculate_nutrition_score,
    classify_food,
)
from tests.conftest import consumed, wasted


def test_empty_log_returns_baseline() -> None:
    metrics = calculate_nutrition_score([])

    assert metrics.nutrition_score == 50
    assert metrics.total_consumed == 0
    assert metrics.categories.as_dict() == {
        "fruits": 0,
        "vegetables": 0,
        "proteins": 0,
        "grains": 0,
        "dairy": 0,
    }
    assert metrics.suggestions == list(GENERIC_SUGGESTIONS)


def test_one_item_per_group_scores_full_marks() -> None:
    log = [
        consumed("Apple"),
        consumed("Carrot"),
        consumed("Chicken"),
        consumed("Bread"),
        consumed("Milk"),
    ]

    metrics = calculate_nutrition_score(log)

    assert metrics.nutrition_score == 100
    assert metrics.suggestions == [POSITIVE_SUGGESTION]


def test_only_consumed_items_are_classified(history) -> None:
    metrics = calculate_nutrition_score(history)

    assert metrics.total_consumed == 3
    assert metrics.categories.dairy == 1
    assert metrics.categories.proteins == 1
    assert metrics.categories.vegetables == 1
    assert metrics.nutrition_score == 60
    assert metrics.suggestions == [
        "Add more fruits for vitamins",
        "Choose whole grains",
    ]


def test_first_matching_group_wins() -> None:
    assert classify_food("Pineapple") == "fruits"
    assert classify_food("Butter beans") == "proteins"
    assert classify_food("Oat milk") == "grains"
    assert classify_food("Soda") is None


def test_unmatched_items_count_towards_consumption_only() -> None:
    metrics = calculate_nutrition_score([consumed("Soda")])

    assert metrics.total_consumed == 1
    assert metrics.nutrition_score == 0
    assert len(metrics.suggestions) == 5
    assert metrics.suggestions[-1] == "Add dairy for calcium"


def test_over_represented_group_is_capped() -> None:
    log = [consumed("Apple")] * 10

    metrics = calculate_nutrition_score(log)

    assert metrics.categories.fruits == 10
    assert metrics.nutrition_score == 20


def test_dairy_uses_looser_threshold() -> None:
    # fifteen consumed items put the per-group target at three
    log = (
        [consumed("Apple")] * 3
        + [consumed("Carrot")] * 3
        + [consumed("Egg")] * 3
        + [consumed("Rice")] * 3
        + [consumed("Cheese")]
        + [consumed("Soda")] * 2
    )

    metrics = calculate_nutrition_score(log)

    assert metrics.nutrition_score == 87
    assert metrics.suggestions == [POSITIVE_SUGGESTION]


def test_all_wasted_log_scores_zero() -> None:
    metrics = calculate_nutrition_score([wasted("Apple"), wasted("Milk")])

    assert metrics.nutrition_score == 0
    assert metrics.total_consumed == 0
    assert metrics.suggestions == list(GENERIC_SUGGESTIONS)


def test_custom_keyword_table() -> None:
    keywords = {"fruits": ("durian",), "dairy": ("kefir",)}

    metrics = calculate_nutrition_score(
        [consumed("Durian"), consumed("Kefir"), consumed("Apple")], keywords
    )

    assert metrics.categories.fruits == 1
    assert metrics.categories.dairy == 1
