"""EdgeService: read, bulk-load and single-put of graph edges.

Reads stream through :meth:`GraphTable.read_walk`; the caller's page
callback decides whether to keep going. Loads are row-at-a-time puts with
no batching: the first failing row aborts everything after it, and rows
already written stay written.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from dynagraph.domain.edges import EdgeRecord, render_edge
from dynagraph.infrastructure.csv_source import ImportFormatError, iter_edge_rows
from dynagraph.infrastructure.store import StoreError
from dynagraph.services.base import BaseService
from dynagraph.services.result import ServiceResult
from dynagraph.services.table import EdgeFilter, EdgePage, ReadWalkInput
from dynagraph.services.telemetry import traced

logger = logging.getLogger(__name__)


def key_filter(source: str | None = None, target: str | None = None) -> EdgeFilter | None:
    """Exact-match predicate on either or both keys; None when both are unset."""
    if source is None and target is None:
        return None

    def matches(record: EdgeRecord) -> bool:
        if source is not None and record.source != source:
            return False
        return target is None or record.target == target

    return matches


def _edge_dict(record: EdgeRecord) -> dict[str, Any]:
    return {
        "source": record.source,
        "target": record.target,
        "attributes": dict(record.attributes),
        "edge": render_edge(record),
    }


class EdgeService(BaseService):
    """Edge-level operations returning ServiceResult."""

    @traced
    def read(
        self,
        page_size: int,
        *,
        on_page: Callable[[EdgePage, bool], bool] | None = None,
        source: str | None = None,
        target: str | None = None,
        collect: bool = False,
    ) -> ServiceResult:
        """Walk the table, optionally filtered to matching keys.

        Args:
            page_size: Records per scan round-trip (0 = default 100, max 1000).
            on_page: Continuation decision per page; None reads everything.
            source: Only keep edges whose source equals this.
            target: Only keep edges whose target equals this.
            collect: Include every delivered edge in ``data["items"]``.
        """
        op = "read_edges"
        try:
            ReadWalkInput(page_size=page_size)
        except ValidationError as exc:
            return self._failure(op, exc)

        if not self._table.exists():
            return self._missing_table(op)

        total = 0
        complete = False
        items: list[dict[str, Any]] = []

        def walk(page: EdgePage, last: bool) -> bool:
            nonlocal total, complete
            total += page.count
            complete = last
            if collect:
                items.extend(_edge_dict(record) for record in page.items)
            return True if on_page is None else on_page(page, last)

        try:
            pages = self._table.read_walk(page_size, walk, where=key_filter(source, target))
        except StoreError as exc:
            return self._failure(op, exc, count=total)

        data: dict[str, Any] = {
            "table": self._table.name,
            "count": total,
            "pages": pages,
            "complete": complete,
        }
        if collect:
            data["items"] = items
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def load(
        self,
        paths: Sequence[Path],
        *,
        source_column: str = "source",
        target_column: str = "target",
    ) -> ServiceResult:
        """Import CSV files, one put per row, aborting on the first failure."""
        op = "load_edges"
        if not self._table.exists():
            return self._missing_table(op)

        loaded = 0
        files: list[str] = []
        for path in paths:
            try:
                rows = iter_edge_rows(
                    path, source_column=source_column, target_column=target_column
                )
                for source, target, attributes in rows:
                    record = EdgeRecord(source=source, target=target, attributes=attributes)
                    self._table.put(record)
                    loaded += 1
            except (ImportFormatError, OSError, ValidationError, StoreError) as exc:
                return self._failure(op, exc, loaded=loaded, file=str(path))
            logger.info("Loaded %s into %s (running total %d)", path, self._table.name, loaded)
            files.append(str(path))

        return ServiceResult(
            ok=True,
            op=op,
            data={"table": self._table.name, "loaded": loaded, "files": files},
        )

    @traced
    def put_edge(
        self,
        source: str,
        target: str,
        attributes: dict[str, str] | None = None,
    ) -> ServiceResult:
        op = "put_edge"
        try:
            record = EdgeRecord(source=source, target=target, attributes=attributes or {})
            self._table.put(record)
        except (ValidationError, StoreError) as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "table": self._table.name,
                "source": source,
                "target": target,
                "edge": render_edge(record),
            },
        )
