"""Command: register a vehicle into a fleet."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fleetctl.commands._base import FleetCommand

if TYPE_CHECKING:
    from fleetctl.commands._context import AppContext


@click.command(
    "register-vehicle",
    cls=FleetCommand,
    examples="""\
  fleetctl register-vehicle <fleet-id> AB-123-CD car
  fleetctl register-vehicle <fleet-id> TRK-42 truck""",
)
@click.argument("fleet_id")
@click.argument("plate_number")
@click.argument("vehicle_type")
@click.pass_obj
def register_vehicle(
    app: AppContext,
    fleet_id: str,
    plate_number: str,
    vehicle_type: str,
) -> None:
    """Register vehicle PLATE_NUMBER into fleet FLEET_ID.

    VEHICLE_TYPE is one of: car, truck, motorcycle (case-insensitive).
    """
    app.emit(app.fleet_service.register_vehicle(fleet_id, plate_number, vehicle_type))
