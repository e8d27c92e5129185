"""SqlFleetRepository — Fleet aggregates over flattened storage rows.

Reads rebuild aggregates from left-outer-joined rows; writes diff the
in-memory aggregate against stored vehicles inside one transaction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fleetctl.domain.errors import RepositoryIntegrityError
from fleetctl.domain.fleet import Fleet
from fleetctl.domain.ids import FleetId, PlateNumber, UserId
from fleetctl.domain.location import Location
from fleetctl.domain.vehicles import create_vehicle

if TYPE_CHECKING:
    from fleetctl.infrastructure.database.store import FleetStore

logger = logging.getLogger(__name__)


class SqlFleetRepository:
    """Implements the :class:`~fleetctl.domain.repository.FleetRepository` port."""

    def __init__(self, store: FleetStore) -> None:
        self._store = store

    def save(self, fleet: Fleet) -> None:
        """Persist *fleet* as a diff against what storage currently holds.

        Stored vehicles missing from the aggregate are deleted, every
        aggregate vehicle is upserted, and each vehicle's location row is
        upserted or removed to match.  All statements share one transaction.
        """
        current = fleet.get_registered_vehicles()
        current_plates = {vehicle.plate_number for vehicle in current}

        with self._store.transaction() as txn:
            txn.upsert_fleet(fleet.id, fleet.user_id)

            stored_plates = {row["plate_number"] for row in txn.find_vehicles_by_fleet_id(fleet.id)}
            removed = stored_plates - current_plates
            for plate_number in removed:
                txn.delete_vehicle(fleet.id, plate_number)

            for vehicle in current:
                txn.upsert_vehicle(fleet.id, vehicle.plate_number, vehicle.type)
                location = fleet.get_vehicle_location(vehicle.plate_number)
                if location is not None:
                    txn.upsert_location(
                        fleet.id,
                        vehicle.plate_number,
                        location.latitude,
                        location.longitude,
                        location.altitude,
                    )
                else:
                    txn.delete_location(fleet.id, vehicle.plate_number)

        logger.debug(
            "Saved fleet %s (%d vehicles, %d removed)", fleet.id, len(current), len(removed)
        )

    def find_one_by_id(self, fleet_id: FleetId) -> Fleet | None:
        header, rows = self._store.find_fleet(fleet_id)
        if header is None:
            return None
        if not rows:
            msg = f"Fleet {fleet_id} has a header row but no detail rows"
            raise RepositoryIntegrityError(msg)
        return self._to_domain(rows)

    def find_many_by_user_id(self, user_id: UserId) -> list[Fleet]:
        groups: dict[str, list[dict[str, Any]]] = {}
        for row in self._store.find_many(user_id=user_id):
            groups.setdefault(row["fleet_id"], []).append(row)
        return [self._to_domain(rows) for rows in groups.values()]

    def exists(
        self,
        *,
        fleet_id: FleetId | None = None,
        user_id: UserId | None = None,
    ) -> bool:
        return self._store.exists(fleet_id=fleet_id, user_id=user_id)

    @staticmethod
    def _to_domain(rows: list[dict[str, Any]]) -> Fleet:
        """Rebuild one aggregate from rows sharing a fleet id.

        The first row for a plate number wins; later duplicates (join
        fan-out) are skipped together with any location they carry.
        """
        if not rows:
            msg = "Cannot rebuild a fleet from zero rows"
            raise RepositoryIntegrityError(msg)

        first = rows[0]
        fleet = Fleet(FleetId(first["fleet_id"]), UserId(first["fleet_user_id"]))

        seen: set[str] = set()
        for row in rows:
            plate = row.get("vehicle_plate_number")
            vehicle_type = row.get("vehicle_type")
            if not plate or not vehicle_type or plate in seen:
                continue
            seen.add(plate)

            plate_number = PlateNumber(plate)
            fleet.register_vehicle(create_vehicle(vehicle_type, plate_number))

            latitude = row.get("latitude")
            longitude = row.get("longitude")
            if latitude is not None and longitude is not None:
                location = Location(latitude, longitude, row.get("altitude"))
                fleet.localize_vehicle(plate_number, location)

        return fleet
