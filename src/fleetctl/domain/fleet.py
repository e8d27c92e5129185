"""Fleet aggregate root — vehicle registry and current locations.

All registry and location changes flow through :class:`Fleet` methods.
INVARIANT: A plate number appears at most once in the registry, and a
location only ever exists for a registered plate number.
"""

from __future__ import annotations

import uuid

from fleetctl.domain.errors import VehicleAlreadyRegisteredError, VehicleNotFoundError
from fleetctl.domain.ids import FleetId, PlateNumber, UserId
from fleetctl.domain.location import Location
from fleetctl.domain.vehicles import Vehicle


class Fleet:
    """A user's fleet of vehicles.

    Locations are sparse: a registered vehicle has either no location or
    exactly one, the most recently set.  There is no location history.
    """

    def __init__(self, fleet_id: FleetId, user_id: UserId) -> None:
        self._id = fleet_id
        self._user_id = user_id
        self._vehicles: dict[PlateNumber, Vehicle] = {}
        self._locations: dict[PlateNumber, Location] = {}

    @classmethod
    def create(cls, user_id: UserId) -> Fleet:
        """Create an empty fleet for *user_id* with a freshly generated id."""
        return cls(FleetId(str(uuid.uuid4())), user_id)

    @property
    def id(self) -> FleetId:
        return self._id

    @property
    def user_id(self) -> UserId:
        return self._user_id

    def register_vehicle(self, vehicle: Vehicle) -> None:
        if vehicle.plate_number in self._vehicles:
            raise VehicleAlreadyRegisteredError(vehicle.plate_number)
        self._vehicles[vehicle.plate_number] = vehicle

    def is_vehicle_registered(self, plate_number: PlateNumber) -> bool:
        return plate_number in self._vehicles

    def localize_vehicle(self, plate_number: PlateNumber, location: Location) -> None:
        """Set (or overwrite) the current location of a registered vehicle."""
        if plate_number not in self._vehicles:
            raise VehicleNotFoundError(plate_number)
        self._locations[plate_number] = location

    def get_vehicle_location(self, plate_number: PlateNumber) -> Location | None:
        """Return the current location, or None if the vehicle was never localized.

        Raises:
            VehicleNotFoundError: If *plate_number* is not registered.
        """
        if plate_number not in self._vehicles:
            raise VehicleNotFoundError(plate_number)
        return self._locations.get(plate_number)

    def get_registered_vehicles(self) -> list[Vehicle]:
        return list(self._vehicles.values())

    def get_vehicle_count(self) -> int:
        return len(self._vehicles)

    def __repr__(self) -> str:
        return f"Fleet(id={self._id!r}, user_id={self._user_id!r}, vehicles={len(self._vehicles)})"
