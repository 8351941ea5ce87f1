"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from dynagraph.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="put_edge", data={"edge": "a -> b "})
        assert result.ok is True
        assert result.op == "put_edge"
        assert result.data == {"edge": "a -> b "}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        result = ServiceResult(
            ok=False,
            op="drop_table",
            error=ServiceError(code="NOT_FOUND", message="Table 'x' not found"),
        )
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="read_edges", data={"count": 3}, meta={"x": 1})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["count"] == 3
        assert parsed["meta"]["x"] == 1

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
