"""Transporter and vehicle tables."""

from __future__ import annotations

from typing import Any

from .base import TableRepository
from .records import transporter_from_row, vehicle_from_row
from ..models.domain import Transporter, Vehicle


def transporters_repository(client: Any = None) -> TableRepository[Transporter]:
    return TableRepository("transporters", transporter_from_row, order_by="name", client=client)


def vehicles_repository(client: Any = None) -> TableRepository[Vehicle]:
    return TableRepository(
        "vehicles",
        vehicle_from_row,
        select="*, transporters:transporter_id (name)",
        order_by="vehicle_number",
        client=client,
    )


def count_transporters(client: Any = None) -> int:
    return transporters_repository(client).count()


def count_vehicles(client: Any = None) -> int:
    return vehicles_repository(client).count()
