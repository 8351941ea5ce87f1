"""GraphTable: schema, lifecycle and paginated access for one graph table.

A GraphTable is just a table name bound to a :class:`StoreClient`. It holds
no cached schema or rows, so constructing one per command is free and
there is nothing to tear down.

Errors are raised, not wrapped: store failures surface as
:class:`~dynagraph.infrastructure.store.StoreError` subclasses and bad
page sizes as :class:`pydantic.ValidationError`. The operation services
translate them into ServiceResult.

Scan order is whatever the store returns. DynamoDB does not guarantee a
stable order across scans, so two walks over the same data may visit
records in different orders.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field

from dynagraph.domain.edges import (
    SOURCE_KEY_ATTRIBUTE,
    TARGET_KEY_ATTRIBUTE,
    EdgeRecord,
    render_edge,
)
from dynagraph.infrastructure.store import StoreClient, StoreError
from dynagraph.services.telemetry import trace_span

logger = logging.getLogger(__name__)

REVERSE_INDEX_NAME = "reverse-search"
DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 1000

EdgeFilter = Callable[[EdgeRecord], bool]


def graph_table_definition(name: str) -> dict[str, Any]:
    """``CreateTable`` request for a graph table named *name*.

    Primary key is ``source-key`` (hash) + ``target-key`` (range). The
    ``reverse-search`` index swaps the two so inbound edges of a node can be
    looked up without a full scan; it projects keys only. Billing is
    on-demand, so no throughput is provisioned.
    """
    return {
        "TableName": name,
        "AttributeDefinitions": [
            {"AttributeName": SOURCE_KEY_ATTRIBUTE, "AttributeType": "S"},
            {"AttributeName": TARGET_KEY_ATTRIBUTE, "AttributeType": "S"},
        ],
        "KeySchema": [
            {"AttributeName": SOURCE_KEY_ATTRIBUTE, "KeyType": "HASH"},
            {"AttributeName": TARGET_KEY_ATTRIBUTE, "KeyType": "RANGE"},
        ],
        "BillingMode": "PAY_PER_REQUEST",
        "GlobalSecondaryIndexes": [
            {
                "IndexName": REVERSE_INDEX_NAME,
                "KeySchema": [
                    {"AttributeName": TARGET_KEY_ATTRIBUTE, "KeyType": "HASH"},
                    {"AttributeName": SOURCE_KEY_ATTRIBUTE, "KeyType": "RANGE"},
                ],
                "Projection": {"ProjectionType": "KEYS_ONLY"},
            }
        ],
    }


class ReadWalkInput(BaseModel):
    """Validated read-walk parameters.

    ``page_size`` 0 means "use the default" (100).
    """

    model_config = {"frozen": True}

    page_size: int = Field(default=0, ge=0, le=MAX_PAGE_SIZE)

    @property
    def limit(self) -> int:
        return self.page_size or DEFAULT_PAGE_SIZE


@dataclass
class EdgePage:
    """One scan round-trip, decoded.

    Attributes:
        items: Records that passed the filter (all records if none).
        count: ``len(items)``.
        scanned: Records the store returned for this round-trip.
        last: The store reported no further pages.
    """

    items: list[EdgeRecord] = field(default_factory=list)
    count: int = 0
    scanned: int = 0
    last: bool = False


class GraphTable:
    """Graph-shaped operations over a single table."""

    def __init__(self, store: StoreClient, name: str) -> None:
        self.name = name
        self._store = store

    def __repr__(self) -> str:
        return f"GraphTable(name={self.name!r})"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        """True iff the table can be described.

        Any store error, including throttling or an unreachable endpoint,
        reads as "does not exist".
        """
        try:
            self._store.describe_table(self.name)
        except StoreError as exc:
            logger.debug("describe_table(%s) failed: %s", self.name, exc)
            return False
        return True

    def create(self) -> None:
        """Create the table. Raises TableExistsError if it is already there."""
        self._store.create_table(graph_table_definition(self.name))
        logger.info("Created graph table %s", self.name)

    def delete(self) -> None:
        """Drop the table and every record in it. Raises TableNotFoundError."""
        self._store.delete_table(self.name)
        logger.info("Deleted graph table %s", self.name)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def iter_pages(
        self,
        page_size: int = 0,
        *,
        where: EdgeFilter | None = None,
    ) -> Iterator[EdgePage]:
        """Lazily scan the table page by page.

        *page_size* is validated before this returns, so a bad value fails
        without touching the store. The iterator is finite and cannot be
        restarted; stop consuming it to stop scanning.
        """
        params = ReadWalkInput(page_size=page_size)
        return self._scan(params.limit, where)

    def _scan(self, limit: int, where: EdgeFilter | None) -> Iterator[EdgePage]:
        token: Any | None = None
        number = 0
        while True:
            number += 1
            with trace_span(f"scan_page[{number}]") as span:
                scan = self._store.scan_page(self.name, limit, token)
                if span:
                    span.annotate("count", scan.count)
            records = [EdgeRecord.from_item(item) for item in scan.items]
            if where is not None:
                records = [record for record in records if where(record)]
            last = scan.next_token is None
            yield EdgePage(items=records, count=len(records), scanned=scan.count, last=last)
            if last:
                return
            token = scan.next_token

    def read_walk(
        self,
        page_size: int,
        on_page: Callable[[EdgePage, bool], bool],
        *,
        where: EdgeFilter | None = None,
    ) -> int:
        """Full-table scan handing each page to *on_page*.

        ``on_page(page, is_last_page)`` returns True to fetch the next page
        and False to stop. The final page is delivered exactly once and
        the walk then ends regardless of the return value. Nothing is
        accumulated across pages.

        *where* is applied client-side to each page; the store still scans
        everything.

        Returns:
            Number of pages handed to *on_page*.
        """
        delivered = 0
        for page in self.iter_pages(page_size, where=where):
            delivered += 1
            if not on_page(page, page.last):
                break
        return delivered

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def put(self, record: EdgeRecord) -> None:
        """Insert or overwrite *record* (last write wins)."""
        self._store.put_item(self.name, record.to_item())

    @staticmethod
    def render(record: EdgeRecord) -> str:
        return render_edge(record)
