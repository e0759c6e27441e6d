"""Synthetic financial series shown when there is no usable shipment data."""

from __future__ import annotations

import math
import random
from datetime import datetime
from typing import Optional

from .financials import MONTH_NAMES, month_name, previous_month_name
from .models import FinancialSeries, MonthlyFinancial

SAMPLE_MONTHS = 6
MIN_REVENUE = 100_000
REVENUE_SPREAD = 200_000
MIN_COST_RATIO = 0.5
COST_RATIO_SPREAD = 0.3


def create_sample_series(now: datetime, rng: Optional[random.Random] = None) -> FinancialSeries:
    """Six consecutive months ending at ``now``'s month, oldest first.

    Revenue falls in [100000, 300000); cost is 50-80% of revenue, floored.
    Shipment counts stay at zero.
    """
    rng = rng or random.Random()
    current_month = month_name(now)
    previous_month = previous_month_name(now)
    series = FinancialSeries()

    for offset in range(SAMPLE_MONTHS - 1, -1, -1):
        month = MONTH_NAMES[(now.month - 1 - offset) % 12]
        revenue = math.floor(rng.random() * REVENUE_SPREAD) + MIN_REVENUE
        cost = math.floor(revenue * (rng.random() * COST_RATIO_SPREAD + MIN_COST_RATIO))
        series.months.append(
            MonthlyFinancial(month=month, revenue=float(revenue), cost=float(cost), profit=float(revenue - cost))
        )

        if month == current_month:
            series.current_month_revenue = float(revenue)
        elif month == previous_month:
            series.previous_month_revenue = float(revenue)

    return series
