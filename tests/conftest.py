from __future__ import annotations

import copy
import itertools
from typing import Any

import pytest


class FakeResponse:
    def __init__(self, data: list[dict] | None = None, count: int | None = None) -> None:
        self.data = data
        self.count = count


def _split_clauses(expression: str) -> list[str]:
    """Split on commas that sit outside double quotes."""
    clauses, current, quoted, escaped = [], "", False, False
    for char in expression:
        if escaped:
            escaped = False
        elif char == "\\" and quoted:
            escaped = True
        elif char == '"':
            quoted = not quoted
        elif char == "," and not quoted:
            clauses.append(current)
            current = ""
            continue
        current += char
    clauses.append(current)
    return clauses


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1].replace('\\"', '"').replace("\\\\", "\\")
    return value


class FakeQuery:
    """Enough of the postgrest query builder for the repositories."""

    def __init__(self, db: "FakeSupabase", table: str) -> None:
        self.db = db
        self.table = table
        self.action = "select"
        self.payload: dict | None = None
        self.filters: list[tuple[str, Any]] = []
        self.any_of: list[tuple[str, Any]] = []
        self.order_by: tuple[str, bool] | None = None
        self.limit_to: int | None = None
        self.count_mode: str | None = None
        self.head = False

    def select(self, *columns: str, count: str | None = None, head: bool | None = None) -> "FakeQuery":
        self.db.selects.append((self.table, columns))
        self.action = "select"
        self.count_mode = count
        self.head = bool(head)
        return self

    def insert(self, payload: dict) -> "FakeQuery":
        self.action = "insert"
        self.payload = payload
        return self

    def update(self, payload: dict) -> "FakeQuery":
        self.action = "update"
        self.payload = payload
        return self

    def delete(self) -> "FakeQuery":
        self.action = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def or_(self, expression: str) -> "FakeQuery":
        for clause in _split_clauses(expression):
            column, _, value = clause.split(".", 2)
            self.any_of.append((column, _unquote(value)))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.order_by = (column, desc)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self.limit_to = size
        return self

    def _matches(self, row: dict) -> bool:
        if not all(str(row.get(column)) == str(value) for column, value in self.filters):
            return False
        if self.any_of:
            return any(str(row.get(column)) == str(value) for column, value in self.any_of)
        return True

    def execute(self) -> FakeResponse:
        if self.db.error is not None:
            raise self.db.error
        rows = self.db.tables.setdefault(self.table, [])
        matched = [row for row in rows if self._matches(row)]

        if self.action == "select":
            if self.order_by:
                column, desc = self.order_by
                matched.sort(key=lambda row: str(row.get(column) or ""), reverse=desc)
            if self.limit_to is not None:
                matched = matched[: self.limit_to]
            count = len(matched) if self.count_mode else None
            return FakeResponse([] if self.head else copy.deepcopy(matched), count)

        if self.action == "insert":
            row = {"id": f"{self.table}-{next(self.db.ids)}", "created_at": "2024-03-15T08:00:00+00:00"}
            row.update(self.payload or {})
            rows.append(row)
            return FakeResponse([copy.deepcopy(row)])

        if self.action == "update":
            for row in matched:
                row.update(self.payload or {})
            return FakeResponse(copy.deepcopy(matched))

        for row in matched:
            rows.remove(row)
        return FakeResponse(copy.deepcopy(matched))


class FakeRpc:
    def __init__(self, db: "FakeSupabase", name: str, params: dict) -> None:
        self.db = db
        self.name = name
        self.params = params

    def execute(self) -> FakeResponse:
        if self.db.error is not None:
            raise self.db.error
        self.db.rpc_calls.append((self.name, self.params))
        return FakeResponse(None)


class FakeSupabase:
    def __init__(self, tables: dict[str, list[dict]] | None = None) -> None:
        self.tables = tables or {}
        self.error: Exception | None = None
        self.rpc_calls: list[tuple[str, dict]] = []
        self.selects: list[tuple[str, tuple]] = []
        self.ids = itertools.count(1)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def rpc(self, name: str, params: dict) -> FakeRpc:
        return FakeRpc(self, name, params)


@pytest.fixture
def fake_supabase(monkeypatch: pytest.MonkeyPatch) -> FakeSupabase:
    """Replace the shared Supabase client with an in-memory fake."""
    from coal_logistics.data import base

    client = FakeSupabase()
    monkeypatch.setattr(base, "get_supabase_client", lambda: client)
    return client
