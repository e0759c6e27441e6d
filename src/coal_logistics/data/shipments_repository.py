"""Shipment table access."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .base import TableRepository
from .records import shipment_from_row
from .routes_repository import find_matching_route, routes_repository
from ..models.domain import Shipment

logger = logging.getLogger(__name__)

DEFAULT_SHIPMENT_STATUS = "Pending"

SHIPMENT_SELECT = (
    "*, "
    "transporters:transporter_id (name), "
    "vehicles:vehicle_id (vehicle_number), "
    "routes:route_id (billing_rate_per_ton, vendor_rate_per_ton)"
)


def shipments_repository(client: Any = None) -> TableRepository[Shipment]:
    return TableRepository(
        "shipments",
        shipment_from_row,
        select=SHIPMENT_SELECT,
        order_by="created_at",
        descending=True,
        client=client,
    )


def attach_route(payload: Mapping[str, Any], client: Any = None) -> dict[str, Any]:
    """Fill in route_id from source/destination when the caller did not pick a route."""
    data = dict(payload)
    source = data.get("source")
    destination = data.get("destination")
    if data.get("route_id") or not source or not destination:
        return data

    route = find_matching_route(
        routes_repository(client).list(),
        source,
        destination,
        package_id=data.get("package_id"),
    )
    if route is not None:
        data["route_id"] = route.id
        logger.info(f"Found matching route: {route.id} for {source} to {destination}")
    return data


def create_shipment(payload: Mapping[str, Any], client: Any = None) -> Shipment:
    data = attach_route(payload, client)
    if not data.get("status"):
        data["status"] = DEFAULT_SHIPMENT_STATUS
    logger.debug(f"Creating shipment with data: {data}")
    return shipments_repository(client).insert(data)


def update_shipment(shipment_id: str, payload: Mapping[str, Any], client: Any = None) -> Shipment:
    data = attach_route(payload, client)
    logger.debug(f"Updating shipment {shipment_id} with data: {data}")
    return shipments_repository(client).update(shipment_id, data)
