"""Fetch-and-aggregate entry points for the dashboard analytics."""

from __future__ import annotations

import logging
import random
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Optional, Sequence

from .counters import count_statuses, count_weekly
from .financials import aggregate_financials
from .models import AnalyticsReport, FinancialSeries
from .route_index import RouteIndex
from .sample_data import create_sample_series
from .summary import build_summary
from ...config import Settings, settings as default_settings
from ...data.analytics_source import AnalyticsDataSource
from ...models.domain import Route, Shipment

logger = logging.getLogger(__name__)


def compute_analytics(
    routes: Sequence[Route],
    shipments: Sequence[Shipment],
    transporters_count: Optional[int],
    vehicles_count: Optional[int],
    *,
    now: datetime,
    sample_fallback: bool = True,
    rng: Optional[random.Random] = None,
) -> AnalyticsReport:
    """Aggregate already-fetched records into the dashboard report. No I/O."""
    index = RouteIndex.build(routes)
    is_sample = False

    series: Optional[FinancialSeries] = None
    if shipments and len(index):
        series = aggregate_financials(shipments, index, now)
        if not series.months:
            logger.info("Failed to generate revenue data from actual shipments")
    else:
        logger.info("No proper data found (shipments or routes missing)")

    if (series is None or not series.months) and sample_fallback:
        logger.info("Using sample data for the financial series")
        series = create_sample_series(now, rng)
        is_sample = True
    elif series is None:
        series = FinancialSeries()

    return AnalyticsReport(
        revenue_data=series.months,
        shipment_status_data=count_statuses(shipments),
        weekly_shipment_data=count_weekly(shipments, now),
        dashboard_stats=build_summary(shipments, series, transporters_count, vehicles_count),
        is_sample_data=is_sample,
    )


def build_analytics(
    source: AnalyticsDataSource,
    *,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
    rng: Optional[random.Random] = None,
) -> AnalyticsReport:
    """Fetch routes, shipments and counts from ``source`` concurrently, then aggregate.

    Any fetch failure propagates unchanged; there is no partial result.
    """
    settings = settings or default_settings
    now = now or datetime.now(timezone.utc)
    if rng is None and settings.sample_data_seed is not None:
        rng = random.Random(settings.sample_data_seed)

    logger.info("Fetching analytics data...")
    with ThreadPoolExecutor(max_workers=settings.analytics_fetch_workers) as executor:
        routes_future = executor.submit(source.list_routes)
        shipments_future = executor.submit(source.list_shipments)
        transporters_future = executor.submit(source.count_transporters)
        vehicles_future = executor.submit(source.count_vehicles)

        routes = routes_future.result()
        shipments = shipments_future.result()
        transporters_count = transporters_future.result()
        vehicles_count = vehicles_future.result()

    logger.info(f"Fetched {len(routes)} routes and {len(shipments)} shipments")
    return compute_analytics(
        routes,
        shipments,
        transporters_count,
        vehicles_count,
        now=now,
        sample_fallback=settings.sample_data_fallback,
        rng=rng,
    )
