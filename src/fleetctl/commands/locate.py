"""Command: show the current location of a vehicle."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fleetctl.commands._base import FleetCommand

if TYPE_CHECKING:
    from fleetctl.commands._context import AppContext


@click.command(
    cls=FleetCommand,
    examples="""\
  fleetctl locate <fleet-id> AB-123-CD
  fleetctl --json locate <fleet-id> AB-123-CD""",
)
@click.argument("fleet_id")
@click.argument("plate_number")
@click.pass_obj
def locate(app: AppContext, fleet_id: str, plate_number: str) -> None:
    """Show the last recorded location of vehicle PLATE_NUMBER."""
    app.emit(app.fleet_service.vehicle_location(fleet_id, plate_number))
