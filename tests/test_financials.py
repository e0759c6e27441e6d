from datetime import datetime, timezone

import pytest

from coal_logistics.models.domain import Route, Shipment
from coal_logistics.services.analytics.financials import (
    aggregate_financials,
    month_name,
    previous_month_name,
    round_cents,
)
from coal_logistics.services.analytics.route_index import RouteIndex

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def _route(rid: str, source: str, destination: str, billing: float, vendor: float) -> Route:
    return Route(id=rid, source=source, destination=destination, billing_rate_per_ton=billing, vendor_rate_per_ton=vendor)


def _shipment(
    sid: str,
    quantity: float,
    created_at: datetime,
    route_id: str | None = "R1",
    source: str = "Jharia",
    destination: str = "Delhi",
) -> Shipment:
    return Shipment(
        id=sid,
        route_id=route_id,
        source=source,
        destination=destination,
        quantity_tons=quantity,
        status="Completed",
        created_at=created_at,
    )


def _index() -> RouteIndex:
    return RouteIndex.build(
        [
            _route("R1", "Jharia", "Delhi", 850, 750),
            _route("R2", "Dhanbad", "Kolkata", 412.35, 301.1),
        ]
    )


def test_lane_fallback_uses_route_rates():
    shipment = _shipment("S1", 10, datetime(2024, 3, 2, tzinfo=timezone.utc), route_id=None, source="jharia", destination="DELHI")

    series = aggregate_financials([shipment], _index(), NOW)

    assert len(series.months) == 1
    march = series.months[0]
    assert march.month == "Mar"
    assert march.revenue == 8500
    assert march.cost == 7500
    assert march.profit == 1000


def test_months_sorted_by_calendar_not_appearance():
    shipments = [
        _shipment("S1", 1, datetime(2024, 11, 3, tzinfo=timezone.utc)),
        _shipment("S2", 1, datetime(2024, 2, 3, tzinfo=timezone.utc)),
        _shipment("S3", 1, datetime(2024, 7, 3, tzinfo=timezone.utc)),
        _shipment("S4", 1, datetime(2023, 1, 3, tzinfo=timezone.utc)),
    ]

    series = aggregate_financials(shipments, _index(), NOW)

    assert [item.month for item in series.months] == ["Jan", "Feb", "Jul", "Nov"]


def test_unresolvable_shipments_are_excluded():
    shipments = [
        _shipment("S1", 10, datetime(2024, 3, 2, tzinfo=timezone.utc)),
        _shipment("S2", 99, datetime(2024, 3, 2, tzinfo=timezone.utc), route_id=None, source="Ranchi", destination="Patna"),
    ]

    series = aggregate_financials(shipments, _index(), NOW)

    assert series.months[0].revenue == 8500
    assert series.current_month_shipments == 1


def test_profit_equals_revenue_minus_cost_across_months():
    shipments = [
        _shipment(f"S{i}", 3.333 * (i + 1), datetime(2024, (i % 12) + 1, 10, tzinfo=timezone.utc), route_id="R2" if i % 2 else "R1")
        for i in range(30)
    ]

    series = aggregate_financials(shipments, _index(), NOW)

    total_profit = sum(item.profit for item in series.months)
    total_margin = sum(item.revenue - item.cost for item in series.months)
    assert round(total_profit, 2) == pytest.approx(round(total_margin, 2), abs=0.011)
    for item in series.months:
        assert item.profit == pytest.approx(item.revenue - item.cost, abs=0.011)


def test_current_and_previous_month_totals():
    shipments = [
        _shipment("S1", 10, datetime(2024, 3, 1, tzinfo=timezone.utc)),
        _shipment("S2", 20, datetime(2024, 3, 14, tzinfo=timezone.utc)),
        _shipment("S3", 5, datetime(2024, 2, 20, tzinfo=timezone.utc)),
        _shipment("S4", 5, datetime(2024, 1, 20, tzinfo=timezone.utc)),
    ]

    series = aggregate_financials(shipments, _index(), NOW)

    assert series.current_month_revenue == 25500
    assert series.current_month_shipments == 2
    assert series.previous_month_revenue == 4250
    assert series.previous_month_shipments == 1


def test_trend_months_match_on_name_regardless_of_year():
    shipments = [
        _shipment("S1", 10, datetime(2024, 2, 1, tzinfo=timezone.utc)),
        _shipment("S2", 10, datetime(2022, 2, 1, tzinfo=timezone.utc)),
    ]

    series = aggregate_financials(shipments, _index(), NOW)

    assert series.previous_month_shipments == 2
    assert series.previous_month_revenue == 17000
    assert [item.month for item in series.months] == ["Feb"]


def test_month_names_wrap_at_january():
    january = datetime(2025, 1, 10, tzinfo=timezone.utc)

    assert month_name(january) == "Jan"
    assert previous_month_name(january) == "Dec"


def test_amounts_rounded_to_cents_before_accumulating():
    index = RouteIndex.build([_route("R1", "A", "B", 0.335, 0.111)])
    shipments = [_shipment(f"S{i}", 1, datetime(2024, 3, 1, tzinfo=timezone.utc), source="A", destination="B") for i in range(3)]

    series = aggregate_financials(shipments, index, NOW)

    assert series.months[0].revenue == pytest.approx(3 * round(0.335, 2))
    assert series.months[0].cost == pytest.approx(0.33)


def test_half_cent_amounts_round_up():
    index = RouteIndex.build([_route("R1", "Jharia", "Delhi", 850.5, 700.25)])
    shipment = _shipment("S1", 10.25, datetime(2024, 3, 2, tzinfo=timezone.utc))

    series = aggregate_financials([shipment], index, NOW)

    march = series.months[0]
    assert march.revenue == 8717.63
    assert march.cost == 7177.56
    assert march.profit == 1540.07
    assert series.current_month_revenue == 8717.63


def test_round_cents_follows_binary_value():
    assert round_cents(8717.625) == 8717.63
    assert round_cents(0.125) == 0.13
    assert round_cents(1.005) == 1.0
