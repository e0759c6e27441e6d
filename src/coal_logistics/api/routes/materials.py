"""Material endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Path, status

from ..errors import to_http_exception
from ...data.catalog_repository import materials_repository
from ...schemas.catalog import MaterialCreate, MaterialModel, MaterialUpdate

router = APIRouter(prefix="/materials", tags=["materials"])


@router.get("", response_model=List[MaterialModel], status_code=status.HTTP_200_OK)
def list_materials() -> List[MaterialModel]:
    try:
        materials = materials_repository().list()
    except Exception as exc:
        raise to_http_exception(exc, "fetching materials") from exc
    return [MaterialModel.model_validate(item) for item in materials]


@router.post("", response_model=MaterialModel, status_code=status.HTTP_201_CREATED)
def create_material(payload: MaterialCreate) -> MaterialModel:
    try:
        material = materials_repository().insert(payload.model_dump(mode="json"))
    except Exception as exc:
        raise to_http_exception(exc, "adding material") from exc
    return MaterialModel.model_validate(material)


@router.put("/{material_id}", response_model=MaterialModel, status_code=status.HTTP_200_OK)
def update_material(payload: MaterialUpdate, material_id: str = Path(..., description="Material identifier")) -> MaterialModel:
    try:
        material = materials_repository().update(material_id, payload.model_dump(mode="json", exclude_unset=True))
    except Exception as exc:
        raise to_http_exception(exc, "updating material") from exc
    return MaterialModel.model_validate(material)


@router.delete("/{material_id}", status_code=status.HTTP_200_OK)
def delete_material(material_id: str = Path(..., description="Material identifier")) -> dict:
    try:
        materials_repository().delete(material_id)
    except Exception as exc:
        raise to_http_exception(exc, "deleting material") from exc
    return {"success": True, "id": material_id}
