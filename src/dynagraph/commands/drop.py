"""Command: delete the graph table and all of its edges."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dynagraph.commands._base import DgCommand
from dynagraph.services.admin import TableAdminService
from dynagraph.services.result import ServiceResult

if TYPE_CHECKING:
    from dynagraph.commands._context import AppContext

_DROP_EXAMPLES = """\
  dynagraph drop
  dynagraph --table scratch drop --yes"""


@click.command(cls=DgCommand, examples=_DROP_EXAMPLES)
@click.option("-y", "--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def drop(app: AppContext, yes: bool) -> None:
    """Delete the table. This cannot be undone."""
    table = app.table
    if not yes:
        if not app.interactive:
            raise click.UsageError("Refusing to drop without --yes in non-interactive mode.")
        if not click.confirm(f"Delete table '{table.name}' and every edge in it?", default=False):
            app.emit(
                ServiceResult(
                    ok=True,
                    op="drop_table",
                    data={"table": table.name, "deleted": False},
                )
            )
            return
    app.emit(TableAdminService(table).drop_table())
