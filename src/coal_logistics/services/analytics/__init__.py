"""Dashboard analytics: route join, monthly financials, counters and summary."""

from .counters import count_statuses, count_weekly, normalize_status
from .financials import MONTH_NAMES, aggregate_financials
from .models import (
    AnalyticsReport,
    DashboardSummary,
    FinancialSeries,
    MonthlyFinancial,
    StatusCount,
    WeeklyCount,
)
from .reports import summarize_report
from .route_index import RouteIndex
from .sample_data import create_sample_series
from .service import build_analytics, compute_analytics
from .summary import build_summary, trend

__all__ = [
    "AnalyticsReport",
    "DashboardSummary",
    "FinancialSeries",
    "MONTH_NAMES",
    "MonthlyFinancial",
    "RouteIndex",
    "StatusCount",
    "WeeklyCount",
    "aggregate_financials",
    "build_analytics",
    "build_summary",
    "compute_analytics",
    "count_statuses",
    "count_weekly",
    "create_sample_series",
    "normalize_status",
    "summarize_report",
    "trend",
]
