"""Store client capability interface and its error taxonomy.

Everything above this module talks to the backing table service through
:class:`StoreClient`, which has five operations. Concrete clients
(DynamoDB, in-memory) translate their native failures into
:class:`StoreError` subclasses.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class StoreError(Exception):
    """Any failure originating from the backing store.

    Attributes:
        code: Native error code reported by the store (e.g. a DynamoDB
            exception name), or ``""`` when none is available.
    """

    def __init__(self, message: str, *, code: str = "") -> None:
        super().__init__(message)
        self.code = code


class TableNotFoundError(StoreError):
    """The target table does not exist."""


class TableExistsError(StoreError):
    """A table with the requested name is already present."""


@dataclass
class ScanPage:
    """One scan round-trip.

    ``next_token`` is opaque. ``None`` means the scan is exhausted.
    """

    items: list[dict[str, str]] = field(default_factory=list)
    count: int = 0
    next_token: Any | None = None


class StoreClient(ABC):
    """Minimal table-service capability set used by the graph table."""

    @abstractmethod
    def describe_table(self, name: str) -> dict[str, Any]:
        """Return the table description or raise :class:`TableNotFoundError`."""

    @abstractmethod
    def create_table(self, definition: dict[str, Any]) -> None:
        """Create a table from a ``CreateTable``-shaped definition."""

    @abstractmethod
    def delete_table(self, name: str) -> None:
        """Drop a table and all of its items."""

    @abstractmethod
    def scan_page(
        self,
        table_name: str,
        limit: int,
        start_token: Any | None = None,
    ) -> ScanPage:
        """Return at most *limit* items, resuming after *start_token*."""

    @abstractmethod
    def put_item(self, table_name: str, item: dict[str, str]) -> None:
        """Insert or overwrite a single item."""
