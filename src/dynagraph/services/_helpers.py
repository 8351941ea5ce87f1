"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def now_iso() -> str:
    """Current UTC time as ISO 8601, second precision (edge timestamps)."""
    return datetime.now(UTC).replace(microsecond=0).isoformat()


def parse_assignment(text: str) -> tuple[str, str]:
    """Split a ``key=value`` assignment; the value may itself contain ``=``.

    Examples:
        >>> parse_assignment("weight=3")
        ('weight', '3')
        >>> parse_assignment("expr=a=b")
        ('expr', 'a=b')

    Raises:
        ValueError: No ``=`` present or the key is empty.
    """
    key, sep, value = text.partition("=")
    key = key.strip()
    if not sep or not key:
        msg = f"expected key=value, got {text!r}"
        raise ValueError(msg)
    return key, value
