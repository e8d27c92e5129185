"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy storage initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fleetctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from fleetctl.config.settings import FleetSettings
    from fleetctl.infrastructure.database.store import FleetStore
    from fleetctl.services.fleet import FleetService
    from fleetctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The database is opened lazily on first use so ``--help`` and
    ``--version`` never touch the filesystem.
    """

    def __init__(self, settings: FleetSettings) -> None:
        self.settings = settings
        self._store: FleetStore | None = None

        from fleetctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from fleetctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> FleetStore:
        """The storage backend (created lazily on first access)."""
        if self._store is None:
            from fleetctl.infrastructure.database.engine import init_database
            from fleetctl.infrastructure.database.store import FleetStore

            engine = init_database(
                self.settings.database_path,
                echo=self.settings.database.echo,
            )
            self._store = FleetStore(engine)
        return self._store

    @property
    def fleet_service(self) -> FleetService:
        from fleetctl.infrastructure.repositories.fleet import SqlFleetRepository
        from fleetctl.services.fleet import FleetService

        return FleetService(SqlFleetRepository(self.store))

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
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
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        """Dispose the database engine if one was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None
