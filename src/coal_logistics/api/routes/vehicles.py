"""Vehicle endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Path, Query, status

from ..errors import to_http_exception
from ...data.fleet_repository import vehicles_repository
from ...schemas.fleet import VehicleCreate, VehicleModel, VehicleUpdate

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("", response_model=List[VehicleModel], status_code=status.HTTP_200_OK)
def list_vehicles(
    transporter_id: str | None = Query(default=None, description="Optional transporter filter"),
) -> List[VehicleModel]:
    try:
        vehicles = vehicles_repository().list(transporter_id=transporter_id)
    except Exception as exc:
        raise to_http_exception(exc, "fetching vehicles") from exc
    return [VehicleModel.model_validate(item) for item in vehicles]


@router.post("", response_model=VehicleModel, status_code=status.HTTP_201_CREATED)
def create_vehicle(payload: VehicleCreate) -> VehicleModel:
    try:
        vehicle = vehicles_repository().insert(payload.model_dump(mode="json"))
    except Exception as exc:
        raise to_http_exception(exc, "adding vehicle") from exc
    return VehicleModel.model_validate(vehicle)


@router.put("/{vehicle_id}", response_model=VehicleModel, status_code=status.HTTP_200_OK)
def update_vehicle(payload: VehicleUpdate, vehicle_id: str = Path(..., description="Vehicle identifier")) -> VehicleModel:
    try:
        vehicle = vehicles_repository().update(vehicle_id, payload.model_dump(mode="json", exclude_unset=True))
    except Exception as exc:
        raise to_http_exception(exc, "updating vehicle") from exc
    return VehicleModel.model_validate(vehicle)


@router.delete("/{vehicle_id}", status_code=status.HTTP_200_OK)
def delete_vehicle(vehicle_id: str = Path(..., description="Vehicle identifier")) -> dict:
    try:
        vehicles_repository().delete(vehicle_id)
    except Exception as exc:
        raise to_http_exception(exc, "deleting vehicle") from exc
    return {"success": True, "id": vehicle_id}
