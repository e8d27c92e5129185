"""Domain error taxonomy.

Every user-facing failure is a :class:`FleetError` carrying a stable
``code``.  The service layer maps these onto ``ServiceError`` payloads;
anything that is not a ``FleetError`` propagates as a genuine fault.
"""

from __future__ import annotations


class FleetError(Exception):
    """Base class for domain and application failures."""

    code = "FLEET_ERROR"

    @property
    def detail(self) -> dict[str, str]:
        """Identifying values of the failure, e.g. ``{"plate_number": "AB-1"}``."""
        return {key: str(value) for key, value in vars(self).items() if not key.startswith("_")}


class InvalidIdentifierError(FleetError):
    code = "INVALID_IDENTIFIER"

    def __init__(self, kind: str, reason: str = "empty") -> None:
        super().__init__(f"Invalid {kind}: {reason}")
        self.kind = kind


class InvalidLocationError(FleetError):
    code = "INVALID_LOCATION"


class UnsupportedVehicleTypeError(FleetError):
    code = "UNSUPPORTED_VEHICLE_TYPE"

    def __init__(self, vehicle_type: str) -> None:
        super().__init__(f"Unsupported vehicle type: {vehicle_type}")
        self.vehicle_type = vehicle_type


class VehicleAlreadyRegisteredError(FleetError):
    code = "VEHICLE_ALREADY_REGISTERED"

    def __init__(self, plate_number: str) -> None:
        super().__init__(f"Vehicle with plate number {plate_number} is already registered")
        self.plate_number = plate_number


class VehicleNotFoundError(FleetError):
    code = "VEHICLE_NOT_FOUND"

    def __init__(self, plate_number: str) -> None:
        super().__init__(f"Vehicle with plate number {plate_number} not found")
        self.plate_number = plate_number


class VehicleLocationNotFoundError(FleetError):
    code = "VEHICLE_LOCATION_NOT_FOUND"

    def __init__(self, plate_number: str) -> None:
        super().__init__(f"Vehicle location with plate number {plate_number} not found")
        self.plate_number = plate_number


class FleetNotFoundError(FleetError):
    code = "FLEET_NOT_FOUND"

    def __init__(self, fleet_id: str) -> None:
        super().__init__(f"Fleet with ID {fleet_id} not found")
        self.fleet_id = fleet_id


class FleetAlreadyExistsError(FleetError):
    code = "FLEET_ALREADY_EXISTS"

    def __init__(self, user_id: str) -> None:
        super().__init__(f"Fleet for user {user_id} already exists")
        self.user_id = user_id


class RepositoryIntegrityError(RuntimeError):
    """Storage returned data that violates the repository contract.

    Never user-facing: a fleet header without any detail rows means the
    storage layer itself is inconsistent.
    """
