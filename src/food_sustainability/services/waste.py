"""Historical waste cost and inventory risk analysis."""

from collections.abc import Sequence
from datetime import date

from food_sustainability.domain.analytics import WasteMetrics
from food_sustainability.domain.inventory import InventoryItem, LogEntry, RiskItem
from food_sustainability.services.scoring import round_money

DEFAULT_RISK_WINDOW_DAYS = 2


def calculate_waste_metrics(
    log: Sequence[LogEntry],
    inventory: Sequence[InventoryItem],
    reference_date: date,
    risk_window_days: int = DEFAULT_RISK_WINDOW_DAYS,
) -> WasteMetrics:
    """Return money already lost to waste and value expiring within the window.

    Realized waste sums unit prices only; quantity scales the forward-looking
    risk value. Items already past expiry are not counted as at risk.
    """
    total_wasted = sum(entry.price for entry in log if entry.is_wasted)

    risk_value = 0.0
    risk_items: list[RiskItem] = []
    for item in inventory:
        days_left = item.days_left(reference_date)
        if 0 < days_left <= risk_window_days:
            value = item.total_value
            risk_value += value
            risk_items.append(
                RiskItem(name=item.name, days_left=days_left, risk_value=value)
            )

    return WasteMetrics(
        total_wasted_money=round_money(total_wasted),
        risk_value=round_money(risk_value),
        risk_items=risk_items,
    )
