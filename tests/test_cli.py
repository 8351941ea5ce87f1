"""Tests for the root CLI group and its global flags."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dynagraph import __version__
from dynagraph.cli import cli
from dynagraph.commands._context import AppContext
from dynagraph.config.settings import DynagraphSettings
from dynagraph.infrastructure.store import InMemoryStoreClient
from dynagraph.services.table import GraphTable
from tests.conftest import TABLE_NAME, seed_edges


class TestRootGroup:
    def test_help_lists_commands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("init", "read", "load", "put", "drop", "status"):
            assert name in result.output

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["-c", str(tmp_path / "nope.toml"), "status"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output


@pytest.mark.usefixtures("_isolated_store")
class TestGlobalFlags:
    def test_verbose_attaches_telemetry(
        self, cli_runner: CliRunner, memory_store: InMemoryStoreClient
    ) -> None:
        table = GraphTable(memory_store, TABLE_NAME)
        table.create()
        seed_edges(table, 3)
        result = cli_runner.invoke(cli, ["--json", "-v", "read", "-l", "2"])
        assert result.exit_code == 0, result.output
        telemetry = json.loads(result.stdout)["meta"]["telemetry"]
        assert telemetry["name"] == "EdgeService.read"
        names = [child["name"] for child in telemetry["children"]]
        assert names == ["scan_page[1]", "scan_page[2]"]

    def test_endpoint_and_region_reach_store_config(
        self, monkeypatch: pytest.MonkeyPatch, cli_runner: CliRunner
    ) -> None:
        seen = {}

        def fake_build(config):
            seen["config"] = config
            return InMemoryStoreClient()

        monkeypatch.setattr("dynagraph.infrastructure.store.build_store_client", fake_build)
        result = cli_runner.invoke(
            cli, ["-e", "", "-r", "eu-west-1", "-t", "people", "status"]
        )
        assert result.exit_code == 0
        config = seen["config"]
        assert config.endpoint == ""
        assert config.region == "eu-west-1"
        assert config.table == "people"


class TestAppContext:
    def test_interactive(self, tmp_path: Path) -> None:
        assert AppContext(DynagraphSettings.from_cli(start=tmp_path)).interactive
        assert not AppContext(
            DynagraphSettings.from_cli(start=tmp_path, no_interact=True)
        ).interactive
        assert not AppContext(
            DynagraphSettings.from_cli(start=tmp_path, json_output=True)
        ).interactive

    def test_store_is_lazy(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        built: list[object] = []
        monkeypatch.setattr(
            "dynagraph.infrastructure.store.build_store_client",
            lambda config: built.append(config) or InMemoryStoreClient(),
        )
        app = AppContext(DynagraphSettings.from_cli(start=tmp_path))
        assert built == []
        assert app.table.name == "example-table"
        assert app.store is app.table._store
        assert len(built) == 1
