"""Tests for waste and risk analysis."""

from food_sustainability.services.waste import calculate_waste_metrics
from tests.conftest import consumed, stocked, wasted


def test_wasted_money_sums_prices_of_wasted_entries(today) -> None:
    log = [wasted("Spinach", 2.50), consumed("Milk", 1.20)]

    metrics = calculate_waste_metrics(log, [], today)

    assert metrics.total_wasted_money == 2.50
    assert metrics.risk_value == 0
    assert metrics.risk_items == []


def test_wasted_money_ignores_quantity(today) -> None:
    metrics = calculate_waste_metrics([wasted("Bread", 1.50, quantity=3)], [], today)
    assert metrics.total_wasted_money == 1.50


def test_item_expiring_tomorrow_is_at_risk(today) -> None:
    item = stocked("Yogurt", days=1, price=1.00, quantity=2)

    metrics = calculate_waste_metrics([], [item], today)

    assert metrics.risk_value == 2.00
    assert len(metrics.risk_items) == 1
    assert metrics.risk_items[0].name == "Yogurt"
    assert metrics.risk_items[0].days_left == 1
    assert metrics.risk_items[0].risk_value == 2.00
    assert metrics.risk_item_names == ["Yogurt"]


def test_overdue_and_later_items_are_not_at_risk(today) -> None:
    inventory = [
        stocked("Expired milk", days=-1),
        stocked("Due today", days=0),
        stocked("Lettuce", days=2, price=0.5, quantity=3),
        stocked("Carrots", days=3),
    ]

    metrics = calculate_waste_metrics([], inventory, today)

    assert metrics.risk_item_names == ["Lettuce"]
    assert metrics.risk_value == 1.50


def test_money_is_rounded_to_cents(today) -> None:
    log = [wasted("A", 0.1), wasted("B", 0.2)]
    inventory = [stocked("C", days=1, price=0.333, quantity=3)]

    metrics = calculate_waste_metrics(log, inventory, today)

    assert metrics.total_wasted_money == 0.3
    assert metrics.risk_value == 1.0


def test_risk_window_is_configurable(today) -> None:
    inventory = [stocked("Carrots", days=3)]

    metrics = calculate_waste_metrics([], inventory, today, risk_window_days=3)

    assert metrics.risk_item_names == ["Carrots"]
