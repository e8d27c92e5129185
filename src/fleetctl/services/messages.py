"""Command and query messages handled by the application handlers."""

from __future__ import annotations

from dataclasses import dataclass

from fleetctl.domain.ids import FleetId, PlateNumber, UserId
from fleetctl.domain.location import Location


@dataclass(frozen=True)
class CreateFleetCommand:
    user_id: UserId


@dataclass(frozen=True)
class RegisterVehicleCommand:
    fleet_id: FleetId
    plate_number: PlateNumber
    vehicle_type: str


@dataclass(frozen=True)
class LocalizeVehicleCommand:
    fleet_id: FleetId
    plate_number: PlateNumber
    location: Location


@dataclass(frozen=True)
class FleetInfoQuery:
    fleet_id: FleetId


@dataclass(frozen=True)
class VehicleLocationQuery:
    fleet_id: FleetId
    plate_number: PlateNumber
