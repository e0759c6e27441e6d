"""Totals for the reports page, derived from an analytics report."""

from __future__ import annotations

from .counters import COMPLETED, IN_TRANSIT, PENDING
from .models import AnalyticsReport


def summarize_report(report: AnalyticsReport) -> dict:
    total_revenue = round(sum(item.revenue for item in report.revenue_data), 2)
    total_cost = round(sum(item.cost for item in report.revenue_data), 2)

    status_counts = {item.status: item.count for item in report.shipment_status_data}
    total_shipments = sum(status_counts.values())
    completed = status_counts.get(COMPLETED, 0)
    in_transit = status_counts.get(IN_TRANSIT, 0)

    # everything not completed or moving is reported as pending
    breakdown = [
        {"name": COMPLETED, "value": completed},
        {"name": IN_TRANSIT, "value": in_transit},
        {"name": PENDING, "value": total_shipments - completed - in_transit},
    ]

    return {
        "totalRevenue": total_revenue,
        "totalCost": total_cost,
        "totalProfit": round(total_revenue - total_cost, 2),
        "totalShipments": total_shipments,
        "completedShipments": completed,
        "inTransitShipments": in_transit,
        "statusBreakdown": [entry for entry in breakdown if entry["value"] > 0],
        "isSampleData": report.is_sample_data,
    }
