"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.text import Text

from dynagraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from dynagraph.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "edge" in result.data:
        return str(result.data["edge"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="dg.ok"), Text(f"  {result.op}", style="dg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="dg.key")
    if key == "table":
        v = Text(str(value), style="dg.table")
    elif key in ("count", "loaded", "pages"):
        v = Text(str(value), style="dg.count")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    name = escape(str(span.get("name", "?")))
    line = f"{' ' * indent}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    code = f" [{err.code}]" if err else ""
    label = Text("ERROR", style="dg.error")
    op = Text(f"  {result.op}{code}", style="dg.op")
    console.print(label, op, "—", Text(msg))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    _render_warnings(console, result)


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="dg.warning"), Text(warning), sep="")


def _render_status(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    name = result.data.get("table", "?")
    if result.data.get("exists"):
        console.print(Text(name, style="dg.table"), Text("exists", style="dg.ok"))
    else:
        console.print(Text(name, style="dg.table"), Text("does not exist", style="dg.warning"))


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "table", result.data.get("table", ""))
    if result.data.get("created"):
        action = "replaced" if result.data.get("replaced") else "created"
    else:
        action = "unchanged"
    _field(console, "action", action)
    _render_warnings(console, result)


def _render_read(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Summarise a read; the command has already streamed the edges."""
    _status_line(console, result)
    _field(console, "table", result.data.get("table", ""))
    _field(console, "count", result.data.get("count", 0))
    if verbose:
        _field(console, "pages", result.data.get("pages", 0))
    if not result.data.get("complete", True):
        console.print(Text("  stopped before the end of the table", style="dim"))


def _render_load(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "table", result.data.get("table", ""))
    _field(console, "loaded", result.data.get("loaded", 0))
    files = result.data.get("files", [])
    if verbose:
        for path in files:
            console.print(Text(f"    {path}", style="dim"))
    else:
        _field(console, "files", len(files))


def _render_put(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "table", result.data.get("table", ""))
    _field(console, "edge", str(result.data.get("edge", "")).rstrip())


_OP_RENDERERS = {
    "table_status": _render_status,
    "init_table": _render_init,
    "drop_table": _render_generic,
    "read_edges": _render_read,
    "load_edges": _render_load,
    "put_edge": _render_put,
}
