"""SDG sustainability score."""

from collections.abc import Sequence

from food_sustainability.domain.analytics import (
    ScoreBand,
    ScoreInterpretation,
    SDGMetrics,
)
from food_sustainability.domain.inventory import LogEntry
from food_sustainability.services.scoring import clamp_score

BASELINE_SCORE = 50

_BANDS = (
    (85, ScoreBand.EXCELLENT, "Excellent! You're a waste-fighting champion!"),
    (70, ScoreBand.GOOD, "Great! You're doing well with food sustainability."),
    (50, ScoreBand.FAIR, "Good effort! There's room to improve your waste habits."),
)
_NEEDS_IMPROVEMENT_LABEL = "Time to make a change! Let's reduce that waste."


def calculate_sdg_score(log: Sequence[LogEntry]) -> SDGMetrics:
    """Score sustainability as the share of logged items that were consumed."""
    if not log:
        return SDGMetrics(
            sdg_score=BASELINE_SCORE,
            success_rate=0,
            wasted_count=0,
            consumed_count=0,
            total_items=0,
        )

    wasted_count = sum(1 for entry in log if entry.is_wasted)
    consumed_count = sum(1 for entry in log if entry.is_consumed)
    total_items = len(log)
    success_rate = clamp_score(consumed_count / total_items * 100)
    return SDGMetrics(
        sdg_score=success_rate,
        success_rate=success_rate,
        wasted_count=wasted_count,
        consumed_count=consumed_count,
        total_items=total_items,
    )


def interpret_sdg_score(score: int) -> ScoreInterpretation:
    """Return the display band for a score."""
    for threshold, band, label in _BANDS:
        if score >= threshold:
            return ScoreInterpretation(band=band, label=label)
    return ScoreInterpretation(
        band=ScoreBand.NEEDS_IMPROVEMENT, label=_NEEDS_IMPROVEMENT_LABEL
    )
