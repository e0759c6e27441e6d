"""User profile management endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Path, status

from ..errors import to_http_exception
from ...data.users_repository import assign_packages, delete_user as remove_user, profiles_repository
from ...schemas.users import AssignPackagesRequest, ProfileModel, ProfileUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[ProfileModel], status_code=status.HTTP_200_OK)
def list_users() -> List[ProfileModel]:
    try:
        profiles = profiles_repository().list()
    except Exception as exc:
        raise to_http_exception(exc, "fetching users") from exc
    return [ProfileModel.model_validate(item) for item in profiles]


@router.put("/{user_id}", response_model=ProfileModel, status_code=status.HTTP_200_OK)
def update_user(payload: ProfileUpdate, user_id: str = Path(..., description="User identifier")) -> ProfileModel:
    try:
        profile = profiles_repository().update(user_id, payload.model_dump(mode="json", exclude_unset=True))
    except Exception as exc:
        raise to_http_exception(exc, "updating user") from exc
    return ProfileModel.model_validate(profile)


@router.delete("/{user_id}", status_code=status.HTTP_200_OK)
def delete_user(user_id: str = Path(..., description="User identifier")) -> dict:
    try:
        remove_user(user_id)
    except Exception as exc:
        raise to_http_exception(exc, "deleting user") from exc
    return {"success": True, "id": user_id}


@router.post("/{user_id}/packages", status_code=status.HTTP_200_OK)
def assign_user_packages(
    payload: AssignPackagesRequest,
    user_id: str = Path(..., description="User identifier"),
) -> dict:
    try:
        assign_packages(user_id, payload.package_ids)
    except Exception as exc:
        raise to_http_exception(exc, "assigning packages") from exc
    return {"success": True, "id": user_id, "package_ids": payload.package_ids}
