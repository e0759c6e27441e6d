"""Monthly revenue, cost and profit from shipments joined to routes."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable

from .models import FinancialSeries, MonthlyFinancial
from .route_index import RouteIndex
from ...models.domain import Shipment

logger = logging.getLogger(__name__)

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def round_cents(value: float) -> float:
    """Round to 2 dp with halves going up, judged on the exact binary value of ``value``."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def month_name(moment: datetime) -> str:
    return MONTH_NAMES[moment.month - 1]


def previous_month_name(moment: datetime) -> str:
    return MONTH_NAMES[(moment.month - 2) % 12]


def aggregate_financials(shipments: Iterable[Shipment], index: RouteIndex, now: datetime) -> FinancialSeries:
    """Fold resolvable shipments into per-month buckets sorted Jan..Dec.

    Current and previous month totals are matched on the month name alone, so
    shipments from the same month of another year count towards them too.
    """
    current_month = month_name(now)
    previous_month = previous_month_name(now)
    series = FinancialSeries()
    buckets: Dict[str, MonthlyFinancial] = {}

    for shipment in shipments:
        route = index.resolve(shipment)
        if route is None:
            logger.debug(
                f"Shipment {shipment.id} has no route for {shipment.source} to {shipment.destination}; "
                "excluded from financials"
            )
            continue

        revenue = round_cents(shipment.quantity_tons * route.billing_rate_per_ton)
        cost = round_cents(shipment.quantity_tons * route.vendor_rate_per_ton)
        profit = round_cents(revenue - cost)
        logger.debug(f"Calculated for shipment {shipment.id}: revenue={revenue}, cost={cost}, profit={profit}")

        month = month_name(shipment.created_at)
        if month == current_month:
            series.current_month_revenue += revenue
            series.current_month_shipments += 1
        elif month == previous_month:
            series.previous_month_revenue += revenue
            series.previous_month_shipments += 1

        bucket = buckets.setdefault(month, MonthlyFinancial(month=month))
        bucket.revenue += revenue
        bucket.cost += cost
        bucket.profit += profit

    for bucket in buckets.values():
        bucket.revenue = round_cents(bucket.revenue)
        bucket.cost = round_cents(bucket.cost)
        bucket.profit = round_cents(bucket.profit)
    series.current_month_revenue = round_cents(series.current_month_revenue)
    series.previous_month_revenue = round_cents(series.previous_month_revenue)

    series.months = sorted(buckets.values(), key=lambda item: MONTH_NAMES.index(item.month))
    return series
