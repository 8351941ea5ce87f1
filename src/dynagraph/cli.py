"""Root CLI group for dynagraph with global flags and command registration."""

from __future__ import annotations

import click

from dynagraph import __version__
from dynagraph.commands import register_commands
from dynagraph.commands._context import AppContext
from dynagraph.config.settings import DynagraphSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dynagraph")
@click.option("-t", "--table", default=None, help="Table to work against [example-table].")
@click.option(
    "-e",
    "--endpoint",
    default=None,
    help="Store endpoint URL [http://localhost:8000]. Empty string for AWS.",
)
@click.option("-r", "--region", default=None, help="Store region [us-east-1].")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    table: str | None,
    endpoint: str | None,
    region: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """dynagraph: directed graph storage on DynamoDB tables."""
    settings = DynagraphSettings.from_cli(
        config_path=config_path,
        table=table,
        endpoint=endpoint,
        region=region,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
