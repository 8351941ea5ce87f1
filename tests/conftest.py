"""Shared pytest fixtures and test helpers for dynagraph tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from dynagraph.domain.edges import EdgeRecord
from dynagraph.infrastructure.store import InMemoryStoreClient
from dynagraph.services.table import GraphTable
from dynagraph.services.telemetry import disable_telemetry

TABLE_NAME = "example-table"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep developer env vars out of settings and reset --verbose telemetry."""
    for key in ("DYNAGRAPH_CONFIG", "DYNAGRAPH_STORE__TABLE", "DYNAGRAPH_READ__PAGE_SIZE"):
        monkeypatch.delenv(key, raising=False)
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def memory_store() -> InMemoryStoreClient:
    """Empty in-memory store (no tables)."""
    return InMemoryStoreClient()


@pytest.fixture
def graph_table(memory_store: InMemoryStoreClient) -> GraphTable:
    """GraphTable on the in-memory store, already created."""
    table = GraphTable(memory_store, TABLE_NAME)
    table.create()
    return table


@pytest.fixture
def _isolated_store(
    memory_store: InMemoryStoreClient,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Route the CLI's store factory to the in-memory store.

    Also changes CWD to a temp dir so no stray ``dynagraph.toml`` is found.
    Use via ``@pytest.mark.usefixtures("_isolated_store")`` on command test
    classes and request ``memory_store`` to seed or inspect data.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "dynagraph.infrastructure.store.build_store_client",
        lambda config: memory_store,
    )


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def seed_edges(table: GraphTable, count: int, *, source: str = "n") -> list[EdgeRecord]:
    """Put *count* edges ``{source} -> t{i}`` and return them."""
    records = [
        EdgeRecord(source=source, target=f"t{i:04d}", attributes={"index": str(i)})
        for i in range(count)
    ]
    for record in records:
        table.put(record)
    return records


def write_csv(path: Path, rows: list[list[str]]) -> Path:
    """Write rows (first row = header) as a CSV file."""
    path.write_text("\n".join(",".join(row) for row in rows) + "\n", encoding="utf-8")
    return path
