"""Subcommand modules for dynagraph.

Provides register_commands(). boto3 is only imported once a command
actually touches the store, so ``--help`` and ``--version`` stay fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from dynagraph.commands.drop import drop
    from dynagraph.commands.init_cmd import init_cmd
    from dynagraph.commands.load import load
    from dynagraph.commands.put import put
    from dynagraph.commands.read import read
    from dynagraph.commands.status import status

    cli.add_command(init_cmd)
    cli.add_command(read)
    cli.add_command(load)
    cli.add_command(put)
    cli.add_command(drop)
    cli.add_command(status)
