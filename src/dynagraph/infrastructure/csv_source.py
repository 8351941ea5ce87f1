"""CSV edge source for bulk import.

The header row names the columns. Two of them (exact, case-sensitive
match) hold the source and target identifiers; every other column becomes
a string attribute keyed by its header.
"""

from __future__ import annotations

import csv
from collections.abc import Iterator
from pathlib import Path
from typing import Any


class ImportFormatError(ValueError):
    """The import file does not have the expected shape."""

    def __init__(self, message: str, *, path: Path, line: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.line = line


def _column_index(headers: list[str], name: str, path: Path) -> int:
    try:
        return headers.index(name)
    except ValueError:
        msg = f"{path}: missing required column '{name}' (found: {', '.join(headers)})"
        raise ImportFormatError(msg, path=path, line=1) from None


def iter_edge_rows(
    path: Path,
    *,
    source_column: str = "source",
    target_column: str = "target",
) -> Iterator[tuple[str, str, dict[str, str]]]:
    """Yield ``(source, target, attributes)`` for each data row of *path*.

    Raises:
        ImportFormatError: No header, a repeated or missing column name, a
            row whose field count differs from the header's, bytes that are
            not UTF-8, or a field the csv module refuses to parse.
        OSError: The file cannot be opened.
    """
    with path.open(newline="", encoding="utf-8") as fh:
        reader = csv.reader(fh)
        try:
            yield from _rows(reader, path, source_column, target_column)
        except (UnicodeDecodeError, csv.Error) as exc:
            msg = f"{path}:{reader.line_num}: unreadable CSV ({exc})"
            raise ImportFormatError(msg, path=path, line=reader.line_num) from exc


def _rows(
    reader: Any,
    path: Path,
    source_column: str,
    target_column: str,
) -> Iterator[tuple[str, str, dict[str, str]]]:
    headers = next(reader, None)
    if headers is None:
        raise ImportFormatError(f"{path}: file is empty (no header row)", path=path)

    duplicates = sorted({name for name in headers if headers.count(name) > 1})
    if duplicates:
        msg = f"{path}: duplicate column name(s) in header: {', '.join(duplicates)}"
        raise ImportFormatError(msg, path=path, line=1)

    source_idx = _column_index(headers, source_column, path)
    target_idx = _column_index(headers, target_column, path)

    for row in reader:
        if not row:
            continue
        if len(row) != len(headers):
            msg = f"{path}:{reader.line_num}: expected {len(headers)} fields, got {len(row)}"
            raise ImportFormatError(msg, path=path, line=reader.line_num)
        attributes = {
            headers[i]: value
            for i, value in enumerate(row)
            if i not in (source_idx, target_idx)
        }
        yield row[source_idx], row[target_idx], attributes
