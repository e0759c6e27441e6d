"""Generic table access over the Supabase client."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

import httpx
from postgrest.exceptions import APIError

from .errors import DataAccessError, DatabaseNotConfiguredError, RecordNotFoundError
from .records import parse_rows
from ..db.supabase import get_supabase_client

logger = logging.getLogger(__name__)

T = TypeVar("T")


def require_client(client: Any = None) -> Any:
    """Return the given client or the shared one; raise if Supabase is not configured."""
    resolved = client if client is not None else get_supabase_client()
    if resolved is None:
        raise DatabaseNotConfiguredError()
    return resolved


def execute(query: Any, action: str) -> Any:
    """Run a query builder and re-raise upstream failures as DataAccessError.

    The upstream message is passed through unchanged.
    """
    try:
        return query.execute()
    except APIError as exc:
        message = exc.message or str(exc)
        logger.error(f"Error {action}: {message}")
        raise DataAccessError(message) from exc
    except httpx.HTTPError as exc:
        logger.error(f"Network error {action}: {exc}")
        raise DataAccessError(str(exc)) from exc


class TableRepository(Generic[T]):
    """CRUD helpers for a single Supabase table."""

    def __init__(
        self,
        table: str,
        parser: Callable[[Mapping[str, Any]], T],
        *,
        select: str = "*",
        order_by: Optional[str] = None,
        descending: bool = False,
        client: Any = None,
    ) -> None:
        self.table = table
        self.parser = parser
        self.select_clause = select
        self.order_by = order_by
        self.descending = descending
        self._client = client

    @property
    def client(self) -> Any:
        return require_client(self._client)

    def query(self) -> Any:
        return self.client.table(self.table)

    def list(self, **filters: Any) -> list[T]:
        query = self.query().select(self.select_clause)
        for column, value in filters.items():
            if value is not None:
                query = query.eq(column, value)
        if self.order_by:
            query = query.order(self.order_by, desc=self.descending)
        response = execute(query, f"fetching {self.table}")
        rows = response.data or []
        logger.info(f"Fetched {len(rows)} {self.table} rows")
        return parse_rows(rows, self.parser, self.table)

    def get(self, record_id: str) -> T:
        query = self.query().select(self.select_clause).eq("id", record_id).limit(1)
        response = execute(query, f"fetching {self.table} {record_id}")
        if not response.data:
            raise RecordNotFoundError(self.table, record_id)
        return self.parser(response.data[0])

    def insert(self, payload: Mapping[str, Any]) -> T:
        response = execute(self.query().insert(dict(payload)), f"adding {self.table} row")
        if not response.data:
            raise DataAccessError(f"Insert into {self.table} returned no row")
        # Re-read so joined columns are populated
        return self.get(str(response.data[0]["id"]))

    def update(self, record_id: str, payload: Mapping[str, Any]) -> T:
        response = execute(
            self.query().update(dict(payload)).eq("id", record_id),
            f"updating {self.table} {record_id}",
        )
        if not response.data:
            raise RecordNotFoundError(self.table, record_id)
        return self.get(record_id)

    def delete(self, record_id: str) -> str:
        response = execute(self.query().delete().eq("id", record_id), f"deleting {self.table} {record_id}")
        if not response.data:
            raise RecordNotFoundError(self.table, record_id)
        return record_id

    def count(self) -> int:
        response = execute(
            self.query().select("*", count="exact", head=True),
            f"counting {self.table}",
        )
        return response.count or 0
