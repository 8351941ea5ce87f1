"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: Operation services return ServiceResult for expected failures
(missing table, bad input, store errors) instead of raising.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is one of ``VALIDATION``, ``NOT_FOUND``, ``ALREADY_EXISTS``,
    ``STORE_ERROR`` or ``INVALID_INPUT``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for operation services.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"read_edges"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry spans).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
