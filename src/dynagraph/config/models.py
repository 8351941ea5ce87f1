"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dynagraph.toml only contains
overrides. A local DynamoDB on port 8000 needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- dynagraph.toml sections ---


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    table: str = "example-table"
    endpoint: str = "http://localhost:8000"
    region: str = "us-east-1"
    max_attempts: int = Field(default=3, ge=1)
    connect_timeout: float = 5.0
    read_timeout: float = 30.0
    wait_for_status: bool = True


class ReadConfig(BaseModel):
    """[read] section."""

    model_config = {"frozen": True}

    page_size: int = Field(default=100, ge=0, le=1000)


class LoadConfig(BaseModel):
    """[load] section."""

    model_config = {"frozen": True}

    source_column: str = "source"
    target_column: str = "target"

