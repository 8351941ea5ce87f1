"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Builds the store client and GraphTable lazily and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dynagraph.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from dynagraph.config.settings import DynagraphSettings
    from dynagraph.infrastructure.store import StoreClient
    from dynagraph.services.result import ServiceResult
    from dynagraph.services.table import GraphTable


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store client is created on first use so ``--help`` and
    ``--version`` never open a connection.
    """

    def __init__(self, settings: DynagraphSettings) -> None:
        self.settings = settings
        self._store: StoreClient | None = None
        self._table: GraphTable | None = None

        from dynagraph.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from dynagraph.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def interactive(self) -> bool:
        """Prompts are allowed (not --no-interact and not --json)."""
        return not (self.settings.no_interact or self.settings.json_output)

    @property
    def store(self) -> StoreClient:
        if self._store is None:
            from dynagraph.infrastructure.store import build_store_client

            self._store = build_store_client(self.settings.store)
        return self._store

    @property
    def table(self) -> GraphTable:
        """GraphTable bound to ``--table`` (created lazily on first access)."""
        if self._table is None:
            from dynagraph.services.table import GraphTable

            self._table = GraphTable(self.store, self.settings.store.table)
        return self._table

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if settings.quiet and not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
