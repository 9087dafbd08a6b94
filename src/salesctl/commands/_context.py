"""AppContext: the object every salesctl command receives via ``@click.pass_obj``.

It owns the resolved settings, opens the store on first use and turns a
ServiceResult into terminal output plus an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from salesctl.config.logging import configure_logging
from salesctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from salesctl.config.settings import SalesSettings
    from salesctl.infrastructure.store import Store
    from salesctl.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by the command tree.

    Opening the store is deferred until a command asks for it, so
    ``--help``, ``--examples`` and ``--version`` never create a database.
    """

    def __init__(self, settings: SalesSettings) -> None:
        self.settings = settings
        self._store: Store | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> Store:
        if self._store is None:
            from salesctl.infrastructure.store import Store

            self._store = Store(self.settings)
        return self._store

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def close(self) -> None:
        """Dispose of the store's engine, if one was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successes go to stdout. Outside JSON mode their warnings follow on
        stderr. Failures go to stderr and end the process with status 1.
        """
        output = format_result(result, settings=self.output_settings)
        if not result.ok:
            click.echo(output, err=True)
            raise SystemExit(1)

        click.echo(output)
        if not self.settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
