"""Dashboard headline figures."""

from __future__ import annotations

from typing import Iterable, Optional

from .counters import is_in_transit
from .models import DashboardSummary, FinancialSeries
from ...models.domain import Shipment


def trend(current: float, previous: float) -> float:
    """Percentage change from ``previous`` to ``current``; 0 when there is no previous value."""
    if previous > 0:
        return (current - previous) / previous * 100
    return 0.0


def build_summary(
    shipments: Iterable[Shipment],
    series: FinancialSeries,
    transporters_count: Optional[int],
    vehicles_count: Optional[int],
) -> DashboardSummary:
    return DashboardSummary(
        active_shipments=sum(1 for shipment in shipments if is_in_transit(shipment)),
        total_vehicles=vehicles_count or 0,
        total_transporters=transporters_count or 0,
        revenue_this_month=series.current_month_revenue,
        shipment_trend=trend(series.current_month_shipments, series.previous_month_shipments),
        revenue_trend=trend(series.current_month_revenue, series.previous_month_revenue),
    )
