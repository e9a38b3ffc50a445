"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Opens the store lazily and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passmatch.errors import StoreConfigError
from passmatch.output.formatters import OutputSettings, format_result
from passmatch.services.result import ServiceResult

if TYPE_CHECKING:
    from passmatch.config.settings import PassSettings
    from passmatch.infrastructure.store import PasswordStore
    from passmatch.services.store import StoreService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store is opened on first use so ``--help`` and ``--version`` work
    without a password store on disk.
    """

    def __init__(self, settings: PassSettings) -> None:
        self.settings = settings
        self._store: PasswordStore | None = None

        from passmatch.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from passmatch.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> PasswordStore:
        """The password store (opened lazily).

        A store that cannot be resolved is a fatal configuration error:
        it is reported and the process exits with code 1.
        """
        if self._store is None:
            from passmatch.infrastructure.store import PasswordStore

            try:
                self._store = PasswordStore.from_settings(self.settings)
            except StoreConfigError as exc:
                self.emit(ServiceResult.failure("config", exc.code, str(exc)))
        assert self._store is not None
        return self._store

    def service(self) -> StoreService:
        """A StoreService bound to the store."""
        from passmatch.services.store import StoreService

        return StoreService(self.store)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally. Warnings go to
          stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
