"""Command: create the graph table (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dynagraph.commands._base import DgCommand
from dynagraph.services.admin import TableAdminService

if TYPE_CHECKING:
    from dynagraph.commands._context import AppContext

_INIT_EXAMPLES = """\
  dynagraph init
  dynagraph --table people init --replace
  dynagraph -e https://dynamodb.eu-west-1.amazonaws.com -r eu-west-1 init
  dynagraph --no-interact init"""


@click.command("init", cls=DgCommand, examples=_INIT_EXAMPLES)
@click.option(
    "--replace/--keep",
    default=None,
    help="If the table exists, delete and recreate it (--replace) or leave it (--keep).",
)
@click.pass_obj
def init_cmd(app: AppContext, replace: bool | None) -> None:
    """Create the graph table, asking before replacing an existing one."""
    table = app.table
    if replace is None:
        replace = False
        if app.interactive and table.exists():
            replace = click.confirm(
                f"Table '{table.name}' already exists, would you like to delete and replace it?",
                default=False,
            )
    app.emit(TableAdminService(table).init_table(replace=replace))
