"""Command: show a fleet with its vehicles and their locations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fleetctl.commands._base import FleetCommand

if TYPE_CHECKING:
    from fleetctl.commands._context import AppContext


@click.command(
    cls=FleetCommand,
    examples="""\
  fleetctl info <fleet-id>
  fleetctl --json info <fleet-id>""",
)
@click.argument("fleet_id")
@click.pass_obj
def info(app: AppContext, fleet_id: str) -> None:
    """Show fleet FLEET_ID: owner, vehicle count, and registered vehicles."""
    app.emit(app.fleet_service.fleet_info(fleet_id))
