"""Package endpoints."""

from __future__ import annotations

from typing import List
from uuid import UUID

from fastapi import APIRouter, Path, Query, status

from ..errors import to_http_exception
from ...data.catalog_repository import list_packages as fetch_packages, packages_repository
from ...schemas.catalog import PackageCreate, PackageModel, PackageUpdate

router = APIRouter(prefix="/packages", tags=["packages"])


@router.get("", response_model=List[PackageModel], status_code=status.HTTP_200_OK)
def list_packages(
    user_id: UUID | None = Query(default=None, description="Only packages assigned to or created by this user"),
) -> List[PackageModel]:
    try:
        packages = fetch_packages(user_id=str(user_id) if user_id else None)
    except Exception as exc:
        raise to_http_exception(exc, "fetching packages") from exc
    return [PackageModel.model_validate(item) for item in packages]


@router.post("", response_model=PackageModel, status_code=status.HTTP_201_CREATED)
def create_package(payload: PackageCreate) -> PackageModel:
    try:
        package = packages_repository().insert(payload.model_dump(mode="json"))
    except Exception as exc:
        raise to_http_exception(exc, "adding package") from exc
    return PackageModel.model_validate(package)


@router.put("/{package_id}", response_model=PackageModel, status_code=status.HTTP_200_OK)
def update_package(payload: PackageUpdate, package_id: str = Path(..., description="Package identifier")) -> PackageModel:
    try:
        package = packages_repository().update(package_id, payload.model_dump(mode="json", exclude_unset=True))
    except Exception as exc:
        raise to_http_exception(exc, "updating package") from exc
    return PackageModel.model_validate(package)


@router.delete("/{package_id}", status_code=status.HTTP_200_OK)
def delete_package(package_id: str = Path(..., description="Package identifier")) -> dict:
    try:
        packages_repository().delete(package_id)
    except Exception as exc:
        raise to_http_exception(exc, "deleting package") from exc
    return {"success": True, "id": package_id}
