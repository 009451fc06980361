"""Sustainability profile aggregation."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date

from food_sustainability.domain.analytics import (
    MetricsSummary,
    SDGMetrics,
    SDGProfile,
    WasteMetrics,
)
from food_sustainability.domain.inventory import InventoryItem, LogEntry
from food_sustainability.services.dates import resolve_reference_date
from food_sustainability.services.insights import generate_weekly_insights
from food_sustainability.services.nutrition import (
    DEFAULT_CATEGORY_KEYWORDS,
    calculate_nutrition_score,
)
from food_sustainability.services.recommendations import generate_recommendations
from food_sustainability.services.sdg import calculate_sdg_score, interpret_sdg_score
from food_sustainability.services.waste import calculate_waste_metrics

_logger = logging.getLogger(__name__)


@dataclass
class ProfileService:
    """Builds the complete SDG profile from a log and inventory snapshot."""

    risk_window_days: int = 2
    recommendation_limit: int = 3
    improvement_cap: float = 30
    category_keywords: Mapping[str, Sequence[str]] = field(
        default_factory=lambda: DEFAULT_CATEGORY_KEYWORDS
    )
    debug: bool = False

    def build_profile(
        self,
        log: Sequence[LogEntry],
        inventory: Sequence[InventoryItem],
        reference_date: date | str | None = None,
    ) -> SDGProfile:
        """Compose waste, score, nutrition, trend and recommendation results."""
        today = resolve_reference_date(reference_date)
        waste = calculate_waste_metrics(
            log, inventory, today, risk_window_days=self.risk_window_days
        )
        sdg = calculate_sdg_score(log)
        nutrition = calculate_nutrition_score(log, self.category_keywords)
        weekly = generate_weekly_insights(log, sdg)
        recommendations = generate_recommendations(
            sdg,
            nutrition,
            limit=self.recommendation_limit,
            improvement_cap=self.improvement_cap,
        )
        if self.debug:
            _logger.info(
                "Profile: date=%s log=%s inventory=%s sdg=%s nutrition=%s",
                today.isoformat(),
                len(log),
                len(inventory),
                sdg.sdg_score,
                nutrition.nutrition_score,
            )

        return SDGProfile(
            personal_sdg_score=sdg.sdg_score,
            score_interpretation=interpret_sdg_score(sdg.sdg_score),
            waste=waste,
            success_rate=sdg.success_rate,
            nutrition=nutrition,
            weekly_insights=weekly,
            recommendations=recommendations.recommendations,
            potential_improvement=recommendations.potential_improvement,
            estimated_new_score=recommendations.estimated_new_score,
            items_consumed=sdg.consumed_count,
            items_wasted=sdg.wasted_count,
            total_items=sdg.total_items,
        )


def summarize_metrics(waste: WasteMetrics, sdg: SDGMetrics) -> MetricsSummary:
    """Flatten waste and score metrics into one display record."""
    return MetricsSummary(
        sdg_score=sdg.sdg_score,
        total_wasted_money=waste.total_wasted_money,
        risk_value=waste.risk_value,
        risk_items=waste.risk_items,
        wasted_count=sdg.wasted_count,
        consumed_count=sdg.consumed_count,
        total_logged_items=sdg.total_items,
        success_rate=sdg.success_rate,
        score_interpretation=interpret_sdg_score(sdg.sdg_score),
    )
