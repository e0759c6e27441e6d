"""Reads feeding the dashboard analytics."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from .base import TableRepository
from .fleet_repository import count_transporters, count_vehicles
from .records import route_from_row, shipment_from_row
from ..models.domain import Route, Shipment


class AnalyticsDataSource(Protocol):
    """The four reads the aggregator needs. Implementations raise DataAccessError on failure."""

    def list_routes(self) -> Sequence[Route]: ...

    def list_shipments(self) -> Sequence[Shipment]: ...

    def count_transporters(self) -> int: ...

    def count_vehicles(self) -> int: ...


class SupabaseAnalyticsSource:
    """AnalyticsDataSource backed by the Supabase tables."""

    def __init__(self, client: Any = None) -> None:
        self._client = client

    def list_routes(self) -> list[Route]:
        return TableRepository("routes", route_from_row, client=self._client).list()

    def list_shipments(self) -> list[Shipment]:
        return TableRepository("shipments", shipment_from_row, client=self._client).list()

    def count_transporters(self) -> int:
        return count_transporters(self._client)

    def count_vehicles(self) -> int:
        return count_vehicles(self._client)


def get_analytics_source() -> AnalyticsDataSource:
    return SupabaseAnalyticsSource()
