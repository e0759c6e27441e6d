"""Shipment endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Path, Query, status

from ..errors import to_http_exception
from ...data.shipments_repository import create_shipment, shipments_repository, update_shipment
from ...schemas.shipments import ShipmentCreate, ShipmentModel, ShipmentUpdate

router = APIRouter(prefix="/shipments", tags=["shipments"])


@router.get("", response_model=List[ShipmentModel], status_code=status.HTTP_200_OK)
def list_shipments(
    status_filter: str | None = Query(default=None, alias="status", description="Optional exact status filter"),
    transporter_id: str | None = Query(default=None, description="Optional transporter filter"),
) -> List[ShipmentModel]:
    try:
        shipments = shipments_repository().list(status=status_filter, transporter_id=transporter_id)
    except Exception as exc:
        raise to_http_exception(exc, "fetching shipments") from exc
    return [ShipmentModel.model_validate(item) for item in shipments]


@router.post("", response_model=ShipmentModel, status_code=status.HTTP_201_CREATED)
def add_shipment(payload: ShipmentCreate) -> ShipmentModel:
    try:
        shipment = create_shipment(payload.model_dump(mode="json"))
    except Exception as exc:
        raise to_http_exception(exc, "adding shipment") from exc
    return ShipmentModel.model_validate(shipment)


@router.put("/{shipment_id}", response_model=ShipmentModel, status_code=status.HTTP_200_OK)
def edit_shipment(payload: ShipmentUpdate, shipment_id: str = Path(..., description="Shipment identifier")) -> ShipmentModel:
    try:
        shipment = update_shipment(shipment_id, payload.model_dump(mode="json", exclude_unset=True))
    except Exception as exc:
        raise to_http_exception(exc, "updating shipment") from exc
    return ShipmentModel.model_validate(shipment)


@router.delete("/{shipment_id}", status_code=status.HTTP_200_OK)
def delete_shipment(shipment_id: str = Path(..., description="Shipment identifier")) -> dict:
    try:
        shipments_repository().delete(shipment_id)
    except Exception as exc:
        raise to_http_exception(exc, "deleting shipment") from exc
    return {"success": True, "id": shipment_id}
