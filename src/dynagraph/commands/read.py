"""Command: stream edges out of the graph table, page by page."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dynagraph.commands._base import DgCommand
from dynagraph.domain.edges import render_edge
from dynagraph.services.edges import EdgeService
from dynagraph.services.table import DEFAULT_PAGE_SIZE

if TYPE_CHECKING:
    from dynagraph.commands._context import AppContext
    from dynagraph.services.table import EdgePage

_READ_EXAMPLES = """\
  dynagraph read
  dynagraph read --limit 25
  dynagraph read --source alice
  dynagraph read -s alice -d bob
  dynagraph --json read --limit 1000
  dynagraph --no-interact read | grep tag:friend"""


def _keep_going() -> bool:
    """Pause until Enter; any other input (or Ctrl-C/EOF) stops the read."""
    try:
        answer = click.prompt(
            "Press Enter to continue",
            default="",
            show_default=False,
            prompt_suffix=" ",
        )
    except click.Abort:
        return False
    return answer.strip() == ""


@click.command(cls=DgCommand, examples=_READ_EXAMPLES)
@click.option(
    "-l",
    "--limit",
    type=int,
    default=None,
    help="Entries per page, 0-1000 (0 means 100). Defaults to [read] page_size.",
)
@click.option("-s", "--source", default=None, help="Only show edges from this source key.")
@click.option(
    "-d", "--destination", default=None, help="Only show edges to this destination key."
)
@click.pass_obj
def read(
    app: AppContext,
    limit: int | None,
    source: str | None,
    destination: str | None,
) -> None:
    """Read edges out of the table.

    After each full page you are asked whether to continue. Filters are
    applied client-side; the whole table is still scanned.
    """
    page_size = app.settings.read.page_size if limit is None else limit
    service = EdgeService(app.table)

    if app.settings.json_output:
        app.emit(service.read(page_size, source=source, target=destination, collect=True))
        return

    full_page = page_size or DEFAULT_PAGE_SIZE
    total = 0

    def show(page: EdgePage, last: bool) -> bool:
        nonlocal total
        for record in page.items:
            click.echo(render_edge(record))
        total += page.count
        if not app.settings.quiet:
            click.echo(f"Total: {total} rows")
        if last or not app.interactive or page.scanned < full_page:
            return True
        return _keep_going()

    app.emit(service.read(page_size, on_page=show, source=source, target=destination))
