"""FleetService — raw inputs in, ServiceResult out.

Builds identifiers and locations from CLI strings, dispatches to the
use-case handlers, and shapes their outcome into a ServiceResult.
"""

from __future__ import annotations

from typing import Any

from fleetctl.domain.errors import FleetError
from fleetctl.domain.fleet import Fleet
from fleetctl.domain.ids import FleetId, PlateNumber, UserId
from fleetctl.domain.location import Location
from fleetctl.services.base import BaseService
from fleetctl.services.handlers import (
    CreateFleetHandler,
    FleetInfoHandler,
    LocalizeVehicleHandler,
    RegisterVehicleHandler,
    VehicleLocationHandler,
)
from fleetctl.services.messages import (
    CreateFleetCommand,
    FleetInfoQuery,
    LocalizeVehicleCommand,
    RegisterVehicleCommand,
    VehicleLocationQuery,
)
from fleetctl.services.result import ServiceResult
from fleetctl.services.telemetry import traced


class FleetService(BaseService):
    """Fleet use cases exposed to the CLI."""

    @traced
    def create_fleet(self, user_id: str) -> ServiceResult:
        op = "create_fleet"
        try:
            command = CreateFleetCommand(user_id=UserId.make(user_id))
            fleet_id = CreateFleetHandler(self._repository).handle(command)
        except FleetError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": str(fleet_id), "user_id": str(command.user_id)},
        )

    @traced
    def register_vehicle(
        self, fleet_id: str, plate_number: str, vehicle_type: str
    ) -> ServiceResult:
        op = "register_vehicle"
        try:
            command = RegisterVehicleCommand(
                fleet_id=FleetId.make(fleet_id),
                plate_number=PlateNumber.make(plate_number),
                vehicle_type=vehicle_type,
            )
            RegisterVehicleHandler(self._repository).handle(command)
        except FleetError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "fleet_id": str(command.fleet_id),
                "plate_number": str(command.plate_number),
                "vehicle_type": vehicle_type.lower(),
            },
        )

    @traced
    def localize_vehicle(
        self,
        fleet_id: str,
        plate_number: str,
        latitude: float,
        longitude: float,
        altitude: float | None = None,
    ) -> ServiceResult:
        op = "localize_vehicle"
        try:
            command = LocalizeVehicleCommand(
                fleet_id=FleetId.make(fleet_id),
                plate_number=PlateNumber.make(plate_number),
                location=Location(latitude, longitude, altitude),
            )
            LocalizeVehicleHandler(self._repository).handle(command)
        except FleetError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "fleet_id": str(command.fleet_id),
                "plate_number": str(command.plate_number),
                **command.location.as_dict(),
            },
        )

    @traced
    def fleet_info(self, fleet_id: str) -> ServiceResult:
        op = "fleet_info"
        try:
            fleet = FleetInfoHandler(self._repository).handle(
                FleetInfoQuery(fleet_id=FleetId.make(fleet_id))
            )
        except FleetError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=_fleet_payload(fleet))

    @traced
    def vehicle_location(self, fleet_id: str, plate_number: str) -> ServiceResult:
        op = "vehicle_location"
        try:
            query = VehicleLocationQuery(
                fleet_id=FleetId.make(fleet_id),
                plate_number=PlateNumber.make(plate_number),
            )
            location = VehicleLocationHandler(self._repository).handle(query)
        except FleetError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "fleet_id": str(query.fleet_id),
                "plate_number": str(query.plate_number),
                **location.as_dict(),
            },
        )


def _fleet_payload(fleet: Fleet) -> dict[str, Any]:
    vehicles: list[dict[str, Any]] = []
    for vehicle in fleet.get_registered_vehicles():
        location = fleet.get_vehicle_location(vehicle.plate_number)
        vehicles.append(
            {
                "plate_number": str(vehicle.plate_number),
                "type": vehicle.type,
                "location": location.as_dict() if location is not None else None,
            }
        )
    return {
        "id": str(fleet.id),
        "user_id": str(fleet.user_id),
        "vehicle_count": fleet.get_vehicle_count(),
        "vehicles": vehicles,
    }
