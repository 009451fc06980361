"""Domain models for sustainability analytics."""

from dataclasses import dataclass, field
from enum import StrEnum

from food_sustainability.domain.inventory import RiskItem


class ScoreBand(StrEnum):
    """Interpretation band for an SDG score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_IMPROVEMENT = "needs_improvement"


class Priority(StrEnum):
    """Recommendation priority tier."""

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"


@dataclass(frozen=True)
class WasteMetrics:
    """Historical waste cost and value at risk in the current inventory."""

    total_wasted_money: float
    risk_value: float
    risk_items: list[RiskItem]

    @property
    def risk_item_names(self) -> list[str]:
        return [item.name for item in self.risk_items]


@dataclass(frozen=True)
class SDGMetrics:
    """Consumption-rate score with the counts it was derived from."""

    sdg_score: int
    success_rate: int
    wasted_count: int
    consumed_count: int
    total_items: int


@dataclass(frozen=True)
class ScoreInterpretation:
    """User-facing label for a score."""

    band: ScoreBand
    label: str


@dataclass(frozen=True)
class CategoryBreakdown:
    """Consumed item counts per food group."""

    fruits: int = 0
    vegetables: int = 0
    proteins: int = 0
    grains: int = 0
    dairy: int = 0

    def as_dict(self) -> dict[str, int]:
        return {
            "fruits": self.fruits,
            "vegetables": self.vegetables,
            "proteins": self.proteins,
            "grains": self.grains,
            "dairy": self.dairy,
        }


@dataclass(frozen=True)
class NutritionMetrics:
    """Dietary-diversity score of consumed items."""

    nutrition_score: int
    categories: CategoryBreakdown
    total_consumed: int
    suggestions: list[str]


@dataclass(frozen=True)
class WeeklyInsights:
    """Trend comparison between the earlier half of the log and current metrics."""

    weekly_change: int
    waste_reduction: int
    insights: list[str]
    previous_score: int
    current_score: int


@dataclass(frozen=True)
class Recommendation:
    """An improvement action with its estimated impact."""

    action: str
    description: str
    impact: int
    priority: Priority
    steps: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RecommendationSet:
    """Ranked recommendations and the projected score."""

    recommendations: list[Recommendation]
    potential_improvement: int
    estimated_new_score: int


@dataclass(frozen=True)
class MetricsSummary:
    """Flat display record of waste and SDG metrics."""

    sdg_score: int
    total_wasted_money: float
    risk_value: float
    risk_items: list[RiskItem]
    wasted_count: int
    consumed_count: int
    total_logged_items: int
    success_rate: int
    score_interpretation: ScoreInterpretation


@dataclass(frozen=True)
class SDGProfile:
    """Complete sustainability profile for one user snapshot."""

    personal_sdg_score: int
    score_interpretation: ScoreInterpretation
    waste: WasteMetrics
    success_rate: int
    nutrition: NutritionMetrics
    weekly_insights: WeeklyInsights
    recommendations: list[Recommendation]
    potential_improvement: int
    estimated_new_score: int
    items_consumed: int
    items_wasted: int
    total_items: int
