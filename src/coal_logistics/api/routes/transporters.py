"""Transporter endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Path, status

from ..errors import to_http_exception
from ...data.fleet_repository import transporters_repository
from ...schemas.fleet import TransporterCreate, TransporterModel, TransporterUpdate

router = APIRouter(prefix="/transporters", tags=["transporters"])


@router.get("", response_model=List[TransporterModel], status_code=status.HTTP_200_OK)
def list_transporters() -> List[TransporterModel]:
    try:
        transporters = transporters_repository().list()
    except Exception as exc:
        raise to_http_exception(exc, "fetching transporters") from exc
    return [TransporterModel.model_validate(item) for item in transporters]


@router.post("", response_model=TransporterModel, status_code=status.HTTP_201_CREATED)
def create_transporter(payload: TransporterCreate) -> TransporterModel:
    try:
        transporter = transporters_repository().insert(payload.model_dump(mode="json"))
    except Exception as exc:
        raise to_http_exception(exc, "adding transporter") from exc
    return TransporterModel.model_validate(transporter)


@router.put("/{transporter_id}", response_model=TransporterModel, status_code=status.HTTP_200_OK)
def update_transporter(
    payload: TransporterUpdate,
    transporter_id: str = Path(..., description="Transporter identifier"),
) -> TransporterModel:
    try:
        transporter = transporters_repository().update(transporter_id, payload.model_dump(mode="json", exclude_unset=True))
    except Exception as exc:
        raise to_http_exception(exc, "updating transporter") from exc
    return TransporterModel.model_validate(transporter)


@router.delete("/{transporter_id}", status_code=status.HTTP_200_OK)
def delete_transporter(transporter_id: str = Path(..., description="Transporter identifier")) -> dict:
    try:
        transporters_repository().delete(transporter_id)
    except Exception as exc:
        raise to_http_exception(exc, "deleting transporter") from exc
    return {"success": True, "id": transporter_id}
