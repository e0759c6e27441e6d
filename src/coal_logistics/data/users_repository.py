"""User profile access and the user management RPCs."""

from __future__ import annotations

from typing import Any, Sequence

from .base import TableRepository, execute, require_client
from .records import profile_from_row
from ..models.domain import Profile


def profiles_repository(client: Any = None) -> TableRepository[Profile]:
    return TableRepository("profiles", profile_from_row, order_by="created_at", descending=True, client=client)


def delete_user(user_id: str, client: Any = None) -> str:
    execute(require_client(client).rpc("delete_user", {"user_id": user_id}), f"deleting user {user_id}")
    return user_id


def assign_packages(user_id: str, package_ids: Sequence[str], client: Any = None) -> None:
    execute(
        require_client(client).rpc(
            "assign_packages_to_user",
            {"user_id": user_id, "package_ids": list(package_ids)},
        ),
        f"assigning packages to user {user_id}",
    )
