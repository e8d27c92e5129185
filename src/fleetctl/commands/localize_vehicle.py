"""Command: set the current location of a vehicle."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fleetctl.commands._base import FleetCommand

if TYPE_CHECKING:
    from fleetctl.commands._context import AppContext


@click.command(
    "localize-vehicle",
    cls=FleetCommand,
    # Negative coordinates must parse as arguments, not options.
    context_settings={"ignore_unknown_options": True},
    examples="""\
  fleetctl localize-vehicle <fleet-id> AB-123-CD 48.8566 2.3522
  fleetctl localize-vehicle <fleet-id> AB-123-CD 48.8566 2.3522 35
  fleetctl localize-vehicle <fleet-id> AB-123-CD -33.8688 151.2093""",
)
@click.argument("fleet_id")
@click.argument("plate_number")
@click.argument("latitude", type=float)
@click.argument("longitude", type=float)
@click.argument("altitude", type=float, required=False)
@click.pass_obj
def localize_vehicle(
    app: AppContext,
    fleet_id: str,
    plate_number: str,
    latitude: float,
    longitude: float,
    altitude: float | None,
) -> None:
    """Set the location of vehicle PLATE_NUMBER (altitude in meters, optional)."""
    result = app.fleet_service.localize_vehicle(
        fleet_id, plate_number, latitude, longitude, altitude
    )
    app.emit(result)
