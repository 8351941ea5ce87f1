"""In-memory StoreClient for tests and offline use.

Rows are kept in insertion order per table; overwriting a key keeps its
position. Every call is appended to :attr:`InMemoryStoreClient.calls`.
"""

from __future__ import annotations

import copy
from collections import Counter
from typing import Any

from dynagraph.infrastructure.store.base import (
    ScanPage,
    StoreClient,
    TableExistsError,
    TableNotFoundError,
)


class _MemoryTable:
    def __init__(self, definition: dict[str, Any]) -> None:
        self.definition = copy.deepcopy(definition)
        self.key_names = [k["AttributeName"] for k in definition.get("KeySchema", [])]
        self.rows: dict[tuple[str, ...], dict[str, str]] = {}

    def key_of(self, item: dict[str, Any]) -> tuple[str, ...]:
        missing = [name for name in self.key_names if name not in item]
        if missing:
            msg = f"Item is missing key attribute(s): {', '.join(missing)}"
            raise ValueError(msg)
        return tuple(str(item[name]) for name in self.key_names)


class InMemoryStoreClient(StoreClient):
    """Dict-backed fake with DynamoDB-like table and scan semantics."""

    def __init__(self) -> None:
        self._tables: dict[str, _MemoryTable] = {}
        self.calls: list[tuple[str, Any]] = []

    # -- Introspection helpers -------------------------------------------

    def call_counts(self) -> Counter[str]:
        """Number of calls per operation name."""
        return Counter(op for op, _ in self.calls)

    def definition(self, name: str) -> dict[str, Any]:
        return copy.deepcopy(self._table(name).definition)

    def items(self, name: str) -> list[dict[str, str]]:
        return [dict(row) for row in self._table(name).rows.values()]

    # -- StoreClient -----------------------------------------------------

    def describe_table(self, name: str) -> dict[str, Any]:
        self.calls.append(("describe_table", name))
        table = self._table(name)
        return {
            "TableName": name,
            "TableStatus": "ACTIVE",
            "ItemCount": len(table.rows),
            "KeySchema": copy.deepcopy(table.definition.get("KeySchema", [])),
        }

    def create_table(self, definition: dict[str, Any]) -> None:
        name = definition["TableName"]
        self.calls.append(("create_table", name))
        if name in self._tables:
            raise TableExistsError(f"Table '{name}' already exists", code="ResourceInUseException")
        self._tables[name] = _MemoryTable(definition)

    def delete_table(self, name: str) -> None:
        self.calls.append(("delete_table", name))
        self._table(name)
        del self._tables[name]

    def scan_page(
        self,
        table_name: str,
        limit: int,
        start_token: Any | None = None,
    ) -> ScanPage:
        self.calls.append(("scan_page", {"table": table_name, "limit": limit}))
        table = self._table(table_name)
        keys = list(table.rows)
        start = 0
        if start_token is not None:
            start = keys.index(table.key_of(start_token)) + 1
        selected = keys[start : start + limit]
        items = [dict(table.rows[key]) for key in selected]
        next_token = None
        if start + limit < len(keys) and selected:
            next_token = {name: table.rows[selected[-1]][name] for name in table.key_names}
        return ScanPage(items=items, count=len(items), next_token=next_token)

    def put_item(self, table_name: str, item: dict[str, str]) -> None:
        self.calls.append(("put_item", table_name))
        table = self._table(table_name)
        table.rows[table.key_of(item)] = dict(item)

    def _table(self, name: str) -> _MemoryTable:
        try:
            return self._tables[name]
        except KeyError:
            raise TableNotFoundError(
                f"Table '{name}' not found", code="ResourceNotFoundException"
            ) from None
