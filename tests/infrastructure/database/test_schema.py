"""Tests for the table definitions and their constraints."""

from __future__ import annotations

import pytest
from sqlalchemy import insert, inspect, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from fleetctl.infrastructure.database.schema import fleets, vehicle_locations, vehicles


class TestColumns:
    def test_fleet_columns(self, db_engine: Engine) -> None:
        cols = {c["name"] for c in inspect(db_engine).get_columns("fleets")}
        assert cols == {"id", "user_id"}

    def test_vehicle_columns(self, db_engine: Engine) -> None:
        cols = {c["name"] for c in inspect(db_engine).get_columns("vehicles")}
        assert cols == {"fleet_id", "plate_number", "vehicle_type"}

    def test_location_columns(self, db_engine: Engine) -> None:
        cols = {c["name"]: c for c in inspect(db_engine).get_columns("vehicle_locations")}
        assert set(cols) == {"fleet_id", "plate_number", "latitude", "longitude", "altitude"}
        assert cols["altitude"]["nullable"] is True
        assert cols["latitude"]["nullable"] is False

    def test_user_id_indexed(self, db_engine: Engine) -> None:
        indexes = inspect(db_engine).get_indexes("fleets")
        assert any(ix["column_names"] == ["user_id"] for ix in indexes)


class TestConstraints:
    def test_vehicle_requires_fleet(self, db_engine: Engine) -> None:
        with pytest.raises(IntegrityError), db_engine.begin() as conn:
            conn.execute(
                insert(vehicles).values(fleet_id="nope", plate_number="A", vehicle_type="car")
            )

    def test_location_requires_vehicle(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            conn.execute(insert(fleets).values(id="f1", user_id="u1"))
        with pytest.raises(IntegrityError), db_engine.begin() as conn:
            conn.execute(
                insert(vehicle_locations).values(
                    fleet_id="f1", plate_number="A", latitude=1.0, longitude=2.0
                )
            )

    def test_duplicate_plate_in_fleet(self, db_engine: Engine) -> None:
        with db_engine.begin() as conn:
            conn.execute(insert(fleets).values(id="f1", user_id="u1"))
            conn.execute(
                insert(vehicles).values(fleet_id="f1", plate_number="A", vehicle_type="car")
            )
        with pytest.raises(IntegrityError), db_engine.begin() as conn:
            conn.execute(
                insert(vehicles).values(fleet_id="f1", plate_number="A", vehicle_type="truck")
            )
        with db_engine.connect() as conn:
            assert conn.execute(select(vehicles.c.vehicle_type)).scalar_one() == "car"
