"""Tests for shared service helpers."""

from datetime import datetime

import pytest

from dynagraph.services._helpers import now_iso, parse_assignment


class TestNowIso:
    def test_parses_as_utc(self) -> None:
        stamp = datetime.fromisoformat(now_iso())
        assert stamp.utcoffset() is not None
        assert stamp.utcoffset().total_seconds() == 0  # type: ignore[union-attr]
        assert stamp.microsecond == 0


class TestParseAssignment:
    def test_simple(self) -> None:
        assert parse_assignment("weight=3") == ("weight", "3")

    def test_value_keeps_equals(self) -> None:
        assert parse_assignment("expr=a=b") == ("expr", "a=b")

    def test_empty_value_allowed(self) -> None:
        assert parse_assignment("flag=") == ("flag", "")

    @pytest.mark.parametrize("raw", ["novalue", "=x", "  =x"])
    def test_invalid(self, raw: str) -> None:
        with pytest.raises(ValueError):
            parse_assignment(raw)
