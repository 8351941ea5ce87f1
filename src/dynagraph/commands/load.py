"""Command: import CSV files as edges."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from dynagraph.commands._base import DgCommand
from dynagraph.services.edges import EdgeService

if TYPE_CHECKING:
    from dynagraph.commands._context import AppContext

_LOAD_EXAMPLES = """\
  dynagraph load edges.csv
  dynagraph load people.csv follows.csv
  dynagraph load --source-column from --target-column to flights.csv"""


@click.command(cls=DgCommand, examples=_LOAD_EXAMPLES)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option("--source-column", default=None, help="Header naming the source key column.")
@click.option("--target-column", default=None, help="Header naming the target key column.")
@click.pass_obj
def load(
    app: AppContext,
    files: tuple[Path, ...],
    source_column: str | None,
    target_column: str | None,
) -> None:
    """Load CSV files into the table, one edge per row.

    The header row names the columns. Every column other than the source
    and target becomes an edge attribute. Rows with an existing key
    overwrite it. The first bad row stops the load.
    """
    app.emit(
        EdgeService(app.table).load(
            list(files),
            source_column=source_column or app.settings.load.source_column,
            target_column=target_column or app.settings.load.target_column,
        )
    )
