"""Tests for DynagraphSettings: CLI flags, env vars and TOML in one object."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from dynagraph.config.settings import DynagraphSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = DynagraphSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.store.table == "example-table"
        assert settings.store.endpoint == "http://localhost:8000"
        assert settings.store.region == "us-east-1"
        assert settings.read.page_size == 100
        assert settings.load.source_column == "source"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DynagraphSettings.from_cli(start=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        (tmp_path / "dynagraph.toml").write_text(
            '[store]\ntable = "graph"\n[read]\npage_size = 25\n'
        )
        settings = DynagraphSettings.from_cli(start=tmp_path)
        assert settings.store.table == "graph"
        assert settings.store.region == "us-east-1"
        assert settings.read.page_size == 25
        assert settings.config_path == tmp_path / "dynagraph.toml"

    def test_found_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "dynagraph.toml").write_text('[load]\nsource_column = "from"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = DynagraphSettings.from_cli(start=nested)
        assert settings.load.source_column == "from"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "conf" / "graph.toml"
        custom.parent.mkdir()
        custom.write_text('[store]\nendpoint = ""\n')
        settings = DynagraphSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.store.endpoint == ""
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "dynagraph.toml").write_text("[store\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DynagraphSettings.from_cli(start=tmp_path)

    def test_out_of_range_page_size(self, tmp_path: Path) -> None:
        (tmp_path / "dynagraph.toml").write_text("[read]\npage_size = 5000\n")
        with pytest.raises(ValidationError):
            DynagraphSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "dynagraph.toml").write_text('[store]\ntable = "from-toml"\n')
        monkeypatch.setenv("DYNAGRAPH_STORE__TABLE", "from-env")
        settings = DynagraphSettings.from_cli(start=tmp_path)
        assert settings.store.table == "from-env"

    def test_cli_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DYNAGRAPH_STORE__TABLE", "from-env")
        settings = DynagraphSettings.from_cli(start=tmp_path, table="from-cli")
        assert settings.store.table == "from-cli"

    def test_store_override_keeps_other_fields(self, tmp_path: Path) -> None:
        (tmp_path / "dynagraph.toml").write_text(
            '[store]\nregion = "eu-west-1"\nmax_attempts = 7\n'
        )
        settings = DynagraphSettings.from_cli(start=tmp_path, endpoint="http://db:8000")
        assert settings.store.endpoint == "http://db:8000"
        assert settings.store.region == "eu-west-1"
        assert settings.store.max_attempts == 7

    def test_flags(self, tmp_path: Path) -> None:
        settings = DynagraphSettings.from_cli(
            start=tmp_path, json_output=True, quiet=True, no_interact=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.no_interact is True
