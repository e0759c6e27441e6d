"""Route (lane) endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Path, status

from ..errors import to_http_exception
from ...data.routes_repository import routes_repository
from ...schemas.routes import RouteCreate, RouteModel, RouteUpdate

router = APIRouter(prefix="/routes", tags=["routes"])


@router.get("", response_model=List[RouteModel], status_code=status.HTTP_200_OK)
def list_routes() -> List[RouteModel]:
    try:
        routes = routes_repository().list()
    except Exception as exc:
        raise to_http_exception(exc, "fetching routes") from exc
    return [RouteModel.model_validate(item) for item in routes]


@router.post("", response_model=RouteModel, status_code=status.HTTP_201_CREATED)
def create_route(payload: RouteCreate) -> RouteModel:
    try:
        route = routes_repository().insert(payload.model_dump(mode="json"))
    except Exception as exc:
        raise to_http_exception(exc, "adding route") from exc
    return RouteModel.model_validate(route)


@router.put("/{route_id}", response_model=RouteModel, status_code=status.HTTP_200_OK)
def update_route(payload: RouteUpdate, route_id: str = Path(..., description="Route identifier")) -> RouteModel:
    try:
        route = routes_repository().update(route_id, payload.model_dump(mode="json", exclude_unset=True))
    except Exception as exc:
        raise to_http_exception(exc, "updating route") from exc
    return RouteModel.model_validate(route)


@router.delete("/{route_id}", status_code=status.HTTP_200_OK)
def delete_route(route_id: str = Path(..., description="Route identifier")) -> dict:
    try:
        routes_repository().delete(route_id)
    except Exception as exc:
        raise to_http_exception(exc, "deleting route") from exc
    return {"success": True, "id": route_id}
