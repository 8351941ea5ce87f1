"""Config file discovery.

Resolution order for ``dynagraph.toml``:
  1. ``--config PATH`` (must exist, otherwise an error)
  2. ``DYNAGRAPH_CONFIG`` env var
  3. Walk up from the working directory, like git looking for ``.git/``
"""

from __future__ import annotations

import os
from pathlib import Path

import click

CONFIG_FILENAME = "dynagraph.toml"
CONFIG_ENV_VAR = "DYNAGRAPH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for dynagraph.toml.

    ``DYNAGRAPH_CONFIG`` short-circuits the walk; if it names a missing
    file, no config is used.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        return candidate if candidate.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(explicit: str | None, start: Path | None = None) -> Path | None:
    """Return the config file to load, honouring an explicit ``--config``."""
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise click.ClickException(f"Config file not found: {path}")
        return path
    return find_config(start)
