"""Status distribution and weekly shipment counts."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Dict, Iterable, List

from .models import StatusCount, WeeklyCount
from ...models.domain import Shipment

COMPLETED = "Completed"
IN_TRANSIT = "In Transit"
PENDING = "Pending"
CANCELLED = "Cancelled"

CANONICAL_STATUSES = (COMPLETED, IN_TRANSIT, PENDING, CANCELLED)

_STATUS_ALIASES = {
    "completed": COMPLETED,
    "in transit": IN_TRANSIT,
    "in_transit": IN_TRANSIT,
    "pending": PENDING,
    "cancelled": CANCELLED,
}

WEEK_LABELS = ("W1", "W2", "W3", "W4", "W5")


def normalize_status(raw: str) -> str:
    """Map free-text status onto the canonical labels; capitalize anything else."""
    text = (raw or "").strip()
    canonical = _STATUS_ALIASES.get(text.lower())
    if canonical:
        return canonical
    return text[:1].upper() + text[1:].lower()


def is_in_transit(shipment: Shipment) -> bool:
    return normalize_status(shipment.status) == IN_TRANSIT


def count_statuses(shipments: Iterable[Shipment]) -> List[StatusCount]:
    """Counts per normalized status, canonical labels first, zero counts dropped."""
    counts: Dict[str, int] = {status: 0 for status in CANONICAL_STATUSES}
    for shipment in shipments:
        status = normalize_status(shipment.status)
        counts[status] = counts.get(status, 0) + 1
    return [StatusCount(status=status, count=count) for status, count in counts.items() if count > 0]


def week_of_month(day: int) -> str:
    return WEEK_LABELS[min(math.ceil(day / 7), len(WEEK_LABELS)) - 1]


def count_weekly(shipments: Iterable[Shipment], now: datetime) -> List[WeeklyCount]:
    """Shipments created in ``now``'s calendar month, by week of month. Always W1..W5."""
    counts: Dict[str, int] = {label: 0 for label in WEEK_LABELS}
    for shipment in shipments:
        created = shipment.created_at
        if created.year == now.year and created.month == now.month:
            counts[week_of_month(created.day)] += 1
    return [WeeklyCount(week=week, count=count) for week, count in counts.items()]
