"""Command: write a single edge."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dynagraph.commands._base import DgCommand
from dynagraph.domain.edges import DATA_ATTRIBUTE, TAG_ATTRIBUTE, TIMESTAMP_ATTRIBUTE
from dynagraph.services._helpers import now_iso, parse_assignment
from dynagraph.services.edges import EdgeService

if TYPE_CHECKING:
    from dynagraph.commands._context import AppContext

_PUT_EXAMPLES = """\
  dynagraph put alice bob --tag friend
  dynagraph put alice alice --data '{"age": 31}'
  dynagraph put alice bob -a weight=3 -a since=2019 --timestamp"""


def _parse_attrs(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for raw in values:
        try:
            key, value = parse_assignment(raw)
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc
        attrs[key] = value
    return attrs


@click.command(cls=DgCommand, examples=_PUT_EXAMPLES)
@click.argument("source")
@click.argument("target")
@click.option(
    "-a",
    "--attr",
    "attrs",
    multiple=True,
    callback=_parse_attrs,
    help="Extra attribute as key=value (repeatable).",
)
@click.option("--tag", default=None, help="Set the 'tag' attribute.")
@click.option("--data", default=None, help="Set the 'data' attribute.")
@click.option("--timestamp", is_flag=True, help="Set 'timestamp' to the current UTC time.")
@click.pass_obj
def put(
    app: AppContext,
    source: str,
    target: str,
    attrs: dict[str, str],
    tag: str | None,
    data: str | None,
    timestamp: bool,
) -> None:
    """Insert or overwrite the edge SOURCE -> TARGET.

    Give the same key twice to store a node rather than an edge.
    """
    attributes = dict(attrs)
    if tag is not None:
        attributes[TAG_ATTRIBUTE] = tag
    if data is not None:
        attributes[DATA_ATTRIBUTE] = data
    if timestamp:
        attributes[TIMESTAMP_ATTRIBUTE] = now_iso()
    app.emit(EdgeService(app.table).put_edge(source, target, attributes))
