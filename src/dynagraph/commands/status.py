"""Command: report whether the graph table exists."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dynagraph.commands._base import DgCommand
from dynagraph.services.admin import TableAdminService

if TYPE_CHECKING:
    from dynagraph.commands._context import AppContext


@click.command(
    cls=DgCommand,
    examples="""\
  dynagraph status
  dynagraph --json --table people status""",
)
@click.pass_obj
def status(app: AppContext) -> None:
    """Show whether the table exists."""
    app.emit(TableAdminService(app.table).status())
