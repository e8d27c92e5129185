"""Root CLI group for fleetctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from fleetctl import __version__
from fleetctl.commands import register_commands
from fleetctl.commands._context import AppContext
from fleetctl.config.settings import FleetSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="fleetctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Database file (overrides [database] path).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    db_path: Path | None,
) -> None:
    """fleetctl — manage vehicle fleets and their locations."""
    settings = FleetSettings.from_cli(
        config_path=config_path,
        db_path=db_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
