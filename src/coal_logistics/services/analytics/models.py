"""Analytics result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class MonthlyFinancial:
    month: str
    revenue: float = 0.0
    cost: float = 0.0
    profit: float = 0.0


@dataclass(slots=True)
class StatusCount:
    status: str
    count: int


@dataclass(slots=True)
class WeeklyCount:
    week: str
    count: int


@dataclass(slots=True)
class DashboardSummary:
    active_shipments: int = 0
    total_vehicles: int = 0
    total_transporters: int = 0
    revenue_this_month: float = 0.0
    shipment_trend: float = 0.0
    revenue_trend: float = 0.0


@dataclass(slots=True)
class FinancialSeries:
    """Monthly series plus the current/previous month totals used for trends."""

    months: List[MonthlyFinancial] = field(default_factory=list)
    current_month_revenue: float = 0.0
    previous_month_revenue: float = 0.0
    current_month_shipments: int = 0
    previous_month_shipments: int = 0


@dataclass(slots=True)
class AnalyticsReport:
    revenue_data: List[MonthlyFinancial]
    shipment_status_data: List[StatusCount]
    weekly_shipment_data: List[WeeklyCount]
    dashboard_stats: DashboardSummary
    is_sample_data: bool = False
