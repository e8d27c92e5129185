"""FleetStore — row-level storage backend for fleets, vehicles, locations.

The store knows nothing about aggregates.  It reads and writes flattened
rows; :class:`~fleetctl.infrastructure.repositories.fleet.SqlFleetRepository`
turns them into :class:`~fleetctl.domain.fleet.Fleet` objects.

Writes go through :meth:`FleetStore.transaction`, which yields a
:class:`StoreTransaction` bound to a single connection:

- **Commit**: on normal exit of the ``with`` block.
- **Rollback**: on any exception, undoing every statement issued in the block.

Flattened rows (from :meth:`FleetStore.find_many`) use the keys
``fleet_id, fleet_user_id, vehicle_plate_number, vehicle_type,
latitude, longitude, altitude``.  Vehicle and location keys are None
when the outer join finds nothing.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.sqlite import insert

from fleetctl.infrastructure.database.schema import fleets, vehicle_locations, vehicles

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection, Select
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


def _vehicles_stmt(fleet_id: str) -> Select[Any]:
    return select(vehicles.c.fleet_id, vehicles.c.plate_number, vehicles.c.vehicle_type).where(
        vehicles.c.fleet_id == fleet_id
    )


def _header_stmt(fleet_id: str) -> Select[Any]:
    return (
        select(fleets.c.id.label("fleet_id"), fleets.c.user_id.label("fleet_user_id"))
        .where(fleets.c.id == fleet_id)
        .limit(1)
    )


def _rows_stmt(*, fleet_id: str | None = None, user_id: str | None = None) -> Select[Any]:
    joined = fleets.outerjoin(vehicles, vehicles.c.fleet_id == fleets.c.id).outerjoin(
        vehicle_locations,
        and_(
            vehicle_locations.c.fleet_id == vehicles.c.fleet_id,
            vehicle_locations.c.plate_number == vehicles.c.plate_number,
        ),
    )
    stmt = select(
        fleets.c.id.label("fleet_id"),
        fleets.c.user_id.label("fleet_user_id"),
        vehicles.c.plate_number.label("vehicle_plate_number"),
        vehicles.c.vehicle_type,
        vehicle_locations.c.latitude,
        vehicle_locations.c.longitude,
        vehicle_locations.c.altitude,
    ).select_from(joined)

    if fleet_id is not None:
        stmt = stmt.where(fleets.c.id == fleet_id)
    if user_id is not None:
        stmt = stmt.where(fleets.c.user_id == user_id)

    return stmt.order_by(fleets.c.user_id, fleets.c.id, vehicles.c.plate_number)


# ---------------------------------------------------------------------------
# StoreTransaction: yielded to callers within transaction()
# ---------------------------------------------------------------------------


@dataclass
class StoreTransaction:
    """Active write transaction.  All methods share :attr:`conn`."""

    conn: Connection

    def upsert_fleet(self, fleet_id: str, user_id: str) -> None:
        stmt = insert(fleets).values(id=fleet_id, user_id=user_id)
        self.conn.execute(
            stmt.on_conflict_do_update(
                index_elements=[fleets.c.id],
                set_={"user_id": stmt.excluded.user_id},
            )
        )

    def delete_fleet(self, fleet_id: str) -> None:
        """Delete a fleet; its vehicles and locations cascade."""
        self.conn.execute(delete(fleets).where(fleets.c.id == fleet_id))

    def upsert_vehicle(self, fleet_id: str, plate_number: str, vehicle_type: str) -> None:
        stmt = insert(vehicles).values(
            fleet_id=fleet_id,
            plate_number=plate_number,
            vehicle_type=vehicle_type,
        )
        self.conn.execute(
            stmt.on_conflict_do_update(
                index_elements=[vehicles.c.fleet_id, vehicles.c.plate_number],
                set_={"vehicle_type": stmt.excluded.vehicle_type},
            )
        )

    def delete_vehicle(self, fleet_id: str, plate_number: str) -> None:
        """Delete a vehicle; its location cascades."""
        self.conn.execute(
            delete(vehicles).where(
                vehicles.c.fleet_id == fleet_id,
                vehicles.c.plate_number == plate_number,
            )
        )

    def find_vehicles_by_fleet_id(self, fleet_id: str) -> list[dict[str, Any]]:
        rows = self.conn.execute(_vehicles_stmt(fleet_id)).mappings().all()
        return [dict(row) for row in rows]

    def upsert_location(
        self,
        fleet_id: str,
        plate_number: str,
        latitude: float,
        longitude: float,
        altitude: float | None = None,
    ) -> None:
        stmt = insert(vehicle_locations).values(
            fleet_id=fleet_id,
            plate_number=plate_number,
            latitude=latitude,
            longitude=longitude,
            altitude=altitude,
        )
        self.conn.execute(
            stmt.on_conflict_do_update(
                index_elements=[vehicle_locations.c.fleet_id, vehicle_locations.c.plate_number],
                set_={
                    "latitude": stmt.excluded.latitude,
                    "longitude": stmt.excluded.longitude,
                    "altitude": stmt.excluded.altitude,
                },
            )
        )

    def delete_location(self, fleet_id: str, plate_number: str) -> None:
        self.conn.execute(
            delete(vehicle_locations).where(
                vehicle_locations.c.fleet_id == fleet_id,
                vehicle_locations.c.plate_number == plate_number,
            )
        )


# ---------------------------------------------------------------------------
# FleetStore: the storage backend
# ---------------------------------------------------------------------------


class FleetStore:
    """Storage backend over a SQLAlchemy engine.

    Constructed once per CLI invocation and handed to the repository.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (for direct access when needed)."""
        return self._engine

    @contextmanager
    def transaction(self) -> Iterator[StoreTransaction]:
        """Atomic write scope.

        Usage::

            with store.transaction() as txn:
                txn.upsert_fleet(fleet_id, user_id)
                txn.upsert_vehicle(fleet_id, "AB-123-CD", "car")
                # Both commit on success, both roll back on failure.
        """
        with self._engine.begin() as conn:
            yield StoreTransaction(conn=conn)

    def find_one(self, fleet_id: str) -> dict[str, Any] | None:
        """Fetch the fleet header row (``fleet_id``, ``fleet_user_id``)."""
        with self._engine.connect() as conn:
            row = conn.execute(_header_stmt(fleet_id)).mappings().first()
        return dict(row) if row is not None else None

    def find_fleet(self, fleet_id: str) -> tuple[dict[str, Any] | None, list[dict[str, Any]]]:
        """Fetch the header row and the flattened rows of one fleet on a single connection.

        Returns ``(None, [])`` when no fleet matches.
        """
        with self._engine.connect() as conn:
            header = conn.execute(_header_stmt(fleet_id)).mappings().first()
            if header is None:
                return None, []
            rows = conn.execute(_rows_stmt(fleet_id=fleet_id)).mappings().all()
        return dict(header), [dict(row) for row in rows]

    def find_many(
        self,
        *,
        fleet_id: str | None = None,
        user_id: str | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch flattened fleet/vehicle/location rows.

        Left outer joins: a fleet without vehicles still yields one row, a
        vehicle without a location yields one row with null location keys.
        """
        with self._engine.connect() as conn:
            rows = conn.execute(_rows_stmt(fleet_id=fleet_id, user_id=user_id)).mappings().all()
        return [dict(row) for row in rows]

    def find_vehicles_by_fleet_id(self, fleet_id: str) -> list[dict[str, Any]]:
        with self._engine.connect() as conn:
            rows = conn.execute(_vehicles_stmt(fleet_id)).mappings().all()
        return [dict(row) for row in rows]

    def exists(self, *, fleet_id: str | None = None, user_id: str | None = None) -> bool:
        """True if a fleet row matches *fleet_id* (checked first) or *user_id*."""
        if fleet_id is not None:
            stmt = select(fleets.c.id).where(fleets.c.id == fleet_id)
        elif user_id is not None:
            stmt = select(fleets.c.id).where(fleets.c.user_id == user_id)
        else:
            return False

        with self._engine.connect() as conn:
            return conn.execute(stmt.limit(1)).first() is not None

    def delete_fleet(self, fleet_id: str) -> None:
        """Delete a fleet with its vehicles and locations in one transaction."""
        with self.transaction() as txn:
            txn.delete_fleet(fleet_id)
        logger.debug("Deleted fleet %s", fleet_id)

    def close(self) -> None:
        """Release pooled connections."""
        self._engine.dispose()
