"""Week-over-week trend insights."""

import math
from collections.abc import Sequence

from food_sustainability.domain.analytics import SDGMetrics, WeeklyInsights
from food_sustainability.domain.inventory import LogEntry
from food_sustainability.services.sdg import calculate_sdg_score


def split_log(log: Sequence[LogEntry]) -> tuple[list[LogEntry], list[LogEntry]]:
    """Bisect the log at its midpoint into earlier and later halves.

    This is not calendar-aligned; callers wanting calendar weeks should filter
    the log before calling.
    """
    midpoint = math.ceil(len(log) / 2)
    return list(log[:midpoint]), list(log[midpoint:])


def generate_weekly_insights(
    log: Sequence[LogEntry], current: SDGMetrics
) -> WeeklyInsights:
    """Compare current metrics with a baseline computed over the earlier half."""
    earlier, _ = split_log(log)
    baseline = calculate_sdg_score(earlier)

    score_improvement = current.sdg_score - baseline.sdg_score
    waste_reduction = baseline.wasted_count - current.wasted_count

    insights: list[str] = []
    if score_improvement > 0:
        insights.append(f"Your score improved by {score_improvement}% this week.")
    elif score_improvement < 0:
        insights.append(f"Your score dropped by {abs(score_improvement)}%.")
    else:
        insights.append("Your score remained stable this week.")

    if waste_reduction > 0:
        insights.append(f"You wasted {waste_reduction} fewer items than last week.")
    elif waste_reduction < 0:
        insights.append(f"You wasted {abs(waste_reduction)} more items than last week.")

    consumed_increase = current.consumed_count - baseline.consumed_count
    if consumed_increase > 0:
        insights.append(f"You consumed {consumed_increase} more items this week.")

    return WeeklyInsights(
        weekly_change=score_improvement,
        waste_reduction=waste_reduction,
        insights=insights,
        previous_score=baseline.sdg_score,
        current_score=current.sdg_score,
    )
