"""SQLite database engine, schema, and row-level store via SQLAlchemy Core."""

from fleetctl.infrastructure.database.engine import create_db_engine, init_database
from fleetctl.infrastructure.database.schema import (
    fleets,
    metadata,
    vehicle_locations,
    vehicles,
)
from fleetctl.infrastructure.database.store import FleetStore, StoreTransaction

__all__ = [
    "FleetStore",
    "StoreTransaction",
    "create_db_engine",
    "fleets",
    "init_database",
    "metadata",
    "vehicle_locations",
    "vehicles",
]
