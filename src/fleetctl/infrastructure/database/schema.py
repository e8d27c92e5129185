"""SQLAlchemy Core table definitions for the fleetctl database.

Three tables, one per aggregate part.  Column names are part of the
storage contract: existing fleet databases must keep working.
"""

from __future__ import annotations

from sqlalchemy import (
    REAL,
    Column,
    ForeignKey,
    ForeignKeyConstraint,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    Table,
    Text,
)

metadata = MetaData()

fleets = Table(
    "fleets",
    metadata,
    Column("id", Text, primary_key=True),
    Column("user_id", Text, nullable=False),
)

vehicles = Table(
    "vehicles",
    metadata,
    Column("fleet_id", Text, ForeignKey("fleets.id", ondelete="CASCADE"), nullable=False),
    Column("plate_number", Text, nullable=False),
    Column("vehicle_type", Text, nullable=False),  # car | truck | motorcycle
    PrimaryKeyConstraint("fleet_id", "plate_number"),
)

vehicle_locations = Table(
    "vehicle_locations",
    metadata,
    Column("fleet_id", Text, nullable=False),
    Column("plate_number", Text, nullable=False),
    Column("latitude", REAL, nullable=False),
    Column("longitude", REAL, nullable=False),
    Column("altitude", REAL),
    PrimaryKeyConstraint("fleet_id", "plate_number"),
    ForeignKeyConstraint(
        ["fleet_id", "plate_number"],
        ["vehicles.fleet_id", "vehicles.plate_number"],
        ondelete="CASCADE",
    ),
)

Index("ix_fleets_user_id", fleets.c.user_id)
