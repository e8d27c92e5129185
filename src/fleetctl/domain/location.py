"""Location value object — a validated geographic coordinate.

Bounds are checked eagerly in a fixed order (latitude, longitude,
altitude) so the first violated bound is the one reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fleetctl.domain.errors import InvalidLocationError

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
# Deepest point of the Mariana Trench, rounded.
MIN_ALTITUDE = -11000.0


@dataclass(frozen=True)
class Location:
    """Immutable latitude/longitude pair with an optional altitude in meters."""

    latitude: float
    longitude: float
    altitude: float | None = None

    def __post_init__(self) -> None:
        if not MIN_LATITUDE <= self.latitude <= MAX_LATITUDE:
            raise InvalidLocationError("Latitude must be between -90 and 90 degrees")
        if not MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE:
            raise InvalidLocationError("Longitude must be between -180 and 180 degrees")
        if self.altitude is not None and not self.altitude >= MIN_ALTITUDE:
            raise InvalidLocationError("Altitude cannot be below -11000 meters (Mariana Trench)")

    def as_dict(self) -> dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "altitude": self.altitude,
        }
