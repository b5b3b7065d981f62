"""AppContext — the object every rentctl subcommand receives.

The root group builds it from :class:`RentSettings`; subcommands take it
with ``@click.pass_obj``. It opens the fleet on demand, runs service
coroutines, and turns a ServiceResult into output and an exit code.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any

import click

from rentctl.config.logging import configure_logging
from rentctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rentctl.config.settings import RentSettings
    from rentctl.infrastructure.fleet import Fleet
    from rentctl.services.result import ServiceResult


class AppContext:
    """Per-invocation state shared by the command tree.

    Opening the fleet is deferred to the first command that needs it, so
    ``--help``, ``--examples``, and ``init`` work outside a fleet directory.
    """

    def __init__(self, settings: RentSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._fleet: Fleet | None = None
        configure_logging(
            verbose=settings.verbose, log_json=settings.log_json, quiet=settings.quiet
        )

    @property
    def fleet(self) -> Fleet:
        if self._fleet is None:
            from rentctl.infrastructure.fleet import Fleet

            self._fleet = Fleet(self.settings)
        return self._fleet

    def run(self, coro: Coroutine[Any, Any, ServiceResult]) -> ServiceResult:
        """Drive a service coroutine to completion on a fresh event loop."""
        return asyncio.run(coro)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successes go to stdout. Their warnings go to stderr, except in
        JSON mode where they are part of the payload and in quiet mode
        where they are dropped. Failures go to stderr and exit with 1.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if self.output.json_output or self.output.quiet:
            return
        for warning in result.warnings:
            click.echo(f"WARNING: {warning}", err=True)
