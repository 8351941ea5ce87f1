"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. CLI flags passed by Click
  2. ``DYNAGRAPH_*`` env vars (``DYNAGRAPH_STORE__TABLE=...``)
  3. ``dynagraph.toml`` discovered via walk-up
  4. Defaults baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dynagraph.config.discovery import resolve_config_path
from dynagraph.config.models import LoadConfig, ReadConfig, StoreConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``dynagraph.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class DynagraphSettings(BaseSettings):
    """Unified settings for the dynagraph CLI.

    Stored on the :class:`~dynagraph.commands._context.AppContext` created
    by the root command group.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DYNAGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    store: StoreConfig = Field(default_factory=StoreConfig)
    read: ReadConfig = Field(default_factory=ReadConfig)
    load: LoadConfig = Field(default_factory=LoadConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        table: str | None = None,
        endpoint: str | None = None,
        region: str | None = None,
        **cli_flags: Any,
    ) -> DynagraphSettings:
        """Construct settings from a CLI invocation.

        *table*, *endpoint* and *region* override single ``[store]`` fields;
        the rest of the section keeps its TOML/env/default values.
        """
        toml_path = resolve_config_path(config_path, start)

        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

        overrides = {
            key: value
            for key, value in (("table", table), ("endpoint", endpoint), ("region", region))
            if value is not None
        }
        if not overrides:
            return settings
        store = settings.store.model_copy(update=overrides)
        return settings.model_copy(update={"store": store})
