"""Route table access and source/destination matching."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .base import TableRepository
from .records import route_from_row
from ..models.domain import Route


def routes_repository(client: Any = None) -> TableRepository[Route]:
    return TableRepository(
        "routes",
        route_from_row,
        select="*, packages:assigned_package_id (name)",
        order_by="source",
        client=client,
    )


def find_matching_route(
    routes: Iterable[Route],
    source: str,
    destination: str,
    package_id: Optional[str] = None,
) -> Optional[Route]:
    """Find the first route whose source and destination match case-insensitively.

    When a package is given only routes assigned to that package qualify.
    """
    normalized_source = source.strip().lower()
    normalized_destination = destination.strip().lower()
    for route in routes:
        if route.source.strip().lower() != normalized_source:
            continue
        if route.destination.strip().lower() != normalized_destination:
            continue
        if package_id and route.assigned_package_id != package_id:
            continue
        return route
    return None
