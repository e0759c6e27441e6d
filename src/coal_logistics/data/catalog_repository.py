"""Material and package tables."""

from __future__ import annotations

from typing import Any, Optional

from .base import TableRepository, execute
from .records import material_from_row, package_from_row, parse_rows
from ..models.domain import Material, Package


def materials_repository(client: Any = None) -> TableRepository[Material]:
    return TableRepository(
        "materials",
        material_from_row,
        order_by="created_at",
        descending=True,
        client=client,
    )


def packages_repository(client: Any = None) -> TableRepository[Package]:
    return TableRepository("packages", package_from_row, order_by="created_at", descending=True, client=client)


def _quoted(value: str) -> str:
    """Quote a filter value so PostgREST reads reserved characters in it literally."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def list_packages(user_id: Optional[str] = None, client: Any = None) -> list[Package]:
    """List packages, restricted to those assigned to or created by ``user_id`` when given."""
    repository = packages_repository(client)
    if not user_id:
        return repository.list()

    quoted = _quoted(user_id)
    query = (
        repository.query()
        .select(repository.select_clause)
        .or_(f"assigned_user_id.eq.{quoted},created_by_id.eq.{quoted}")
        .order("created_at", desc=True)
    )
    response = execute(query, "fetching packages")
    return parse_rows(response.data or [], package_from_row, "packages")
