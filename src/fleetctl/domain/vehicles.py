"""Vehicle variants and the vehicle factory.

The variant set is closed: Car, Truck, Motorcycle.  Each carries only a
plate number and reports its discriminant through its ``type`` property.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from fleetctl.domain.errors import UnsupportedVehicleTypeError
from fleetctl.domain.ids import PlateNumber


class VehicleType(StrEnum):
    """Discriminants for the supported vehicle variants."""

    CAR = "car"
    TRUCK = "truck"
    MOTORCYCLE = "motorcycle"


@dataclass(frozen=True)
class _BaseVehicle:
    """Fields and behaviour shared by every vehicle variant."""

    plate_number: PlateNumber

    vehicle_type: ClassVar[VehicleType]

    @property
    def type(self) -> str:
        return self.vehicle_type.value


@dataclass(frozen=True)
class Car(_BaseVehicle):
    vehicle_type: ClassVar[VehicleType] = VehicleType.CAR


@dataclass(frozen=True)
class Truck(_BaseVehicle):
    vehicle_type: ClassVar[VehicleType] = VehicleType.TRUCK


@dataclass(frozen=True)
class Motorcycle(_BaseVehicle):
    vehicle_type: ClassVar[VehicleType] = VehicleType.MOTORCYCLE


Vehicle = Car | Truck | Motorcycle
"""A vehicle identified by its plate number within a fleet."""

_VEHICLE_CLASSES: dict[VehicleType, type[Vehicle]] = {
    VehicleType.CAR: Car,
    VehicleType.TRUCK: Truck,
    VehicleType.MOTORCYCLE: Motorcycle,
}


def create_vehicle(kind: str, plate_number: PlateNumber) -> Vehicle:
    """Build the vehicle variant named by *kind* (case-insensitive).

    Raises:
        UnsupportedVehicleTypeError: If *kind* names no known variant.
            The message carries *kind* exactly as given.
    """
    try:
        vehicle_type = VehicleType(kind.lower())
    except ValueError:
        raise UnsupportedVehicleTypeError(kind) from None
    return _VEHICLE_CLASSES[vehicle_type](plate_number)
