"""Tests for the read command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from dynagraph.cli import cli
from dynagraph.domain.edges import EdgeRecord
from dynagraph.infrastructure.store import InMemoryStoreClient
from dynagraph.services.table import GraphTable
from tests.conftest import TABLE_NAME, seed_edges


@pytest.fixture
def table(memory_store: InMemoryStoreClient) -> GraphTable:
    table = GraphTable(memory_store, TABLE_NAME)
    table.create()
    return table


def _edge_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if " -> " in line or line.startswith("[")]


@pytest.mark.usefixtures("_isolated_store")
class TestReadCommand:
    def test_renders_edges_and_nodes(self, cli_runner: CliRunner, table: GraphTable) -> None:
        table.put(EdgeRecord(source="a", target="b", attributes={"tag": "x"}))
        table.put(EdgeRecord(source="c", target="c", attributes={"data": "y"}))
        result = cli_runner.invoke(cli, ["read"])
        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert lines[:3] == ["a -> b tag:x", "[c] data:y", "Total: 2 rows"]
        assert "count: 2" in result.stdout

    def test_prompts_between_full_pages(
        self, cli_runner: CliRunner, table: GraphTable, memory_store: InMemoryStoreClient
    ) -> None:
        seed_edges(table, 25)
        result = cli_runner.invoke(cli, ["read", "--limit", "10"], input="\n\n")
        assert result.exit_code == 0
        assert result.stdout.count("Press Enter to continue") == 2
        assert "Total: 10 rows" in result.stdout
        assert "Total: 25 rows" in result.stdout
        assert memory_store.call_counts()["scan_page"] == 3

    def test_other_input_stops(
        self, cli_runner: CliRunner, table: GraphTable, memory_store: InMemoryStoreClient
    ) -> None:
        seed_edges(table, 25)
        result = cli_runner.invoke(cli, ["read", "-l", "10"], input="q\n")
        assert result.exit_code == 0
        assert len(_edge_lines(result.stdout)) == 10
        assert "Total: 20 rows" not in result.stdout
        assert "stopped before the end of the table" in result.stdout
        assert memory_store.call_counts()["scan_page"] == 1

    def test_eof_stops(self, cli_runner: CliRunner, table: GraphTable) -> None:
        seed_edges(table, 25)
        result = cli_runner.invoke(cli, ["read", "-l", "10"], input="")
        assert result.exit_code == 0
        assert len(_edge_lines(result.stdout)) == 10

    def test_no_interact_reads_everything(
        self, cli_runner: CliRunner, table: GraphTable
    ) -> None:
        seed_edges(table, 25)
        result = cli_runner.invoke(cli, ["--no-interact", "read", "-l", "10"])
        assert result.exit_code == 0
        assert "Press Enter" not in result.stdout
        assert len(_edge_lines(result.stdout)) == 25

    def test_page_size_from_config(self, cli_runner: CliRunner, table: GraphTable) -> None:
        seed_edges(table, 5)
        with open("dynagraph.toml", "w", encoding="utf-8") as fh:
            fh.write("[read]\npage_size = 2\n")
        result = cli_runner.invoke(cli, ["read"], input="\n\n")
        assert result.exit_code == 0
        assert "Total: 2 rows" in result.stdout
        assert result.stdout.count("Press Enter to continue") == 2

    def test_quiet_streams_edges_only(self, cli_runner: CliRunner, table: GraphTable) -> None:
        seed_edges(table, 2)
        result = cli_runner.invoke(cli, ["-q", "--no-interact", "read"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "n -> t0000 index:0",
            "n -> t0001 index:1",
            "OK: read_edges",
        ]

    def test_filters(self, cli_runner: CliRunner, table: GraphTable) -> None:
        seed_edges(table, 3, source="a")
        seed_edges(table, 3, source="b")
        result = cli_runner.invoke(cli, ["--no-interact", "read", "-s", "b", "-d", "t0002"])
        assert result.exit_code == 0
        assert _edge_lines(result.stdout) == ["b -> t0002 index:2"]

    def test_json(self, cli_runner: CliRunner, table: GraphTable) -> None:
        seed_edges(table, 3)
        result = cli_runner.invoke(cli, ["--json", "read", "-l", "2"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["op"] == "read_edges"
        assert data["data"]["count"] == 3
        assert data["data"]["pages"] == 2
        assert [item["edge"] for item in data["data"]["items"]] == [
            "n -> t0000 index:0",
            "n -> t0001 index:1",
            "n -> t0002 index:2",
        ]

    @pytest.mark.parametrize("limit", ["-1", "1001"])
    def test_invalid_limit(
        self,
        cli_runner: CliRunner,
        table: GraphTable,
        memory_store: InMemoryStoreClient,
        limit: str,
    ) -> None:
        memory_store.calls.clear()
        result = cli_runner.invoke(cli, ["read", "--limit", limit])
        assert result.exit_code == 1
        assert "VALIDATION" in result.stderr
        assert memory_store.calls == []

    def test_missing_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["read"])
        assert result.exit_code == 1
        assert "Could not locate table 'example-table'" in result.stderr
        assert result.stdout == ""
