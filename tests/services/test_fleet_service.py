"""Tests for FleetService — raw inputs in, ServiceResult out."""

from __future__ import annotations

import pytest

from fleetctl.services.fleet import FleetService
from fleetctl.services.telemetry import enable_telemetry
from tests.conftest import create_fleet


class TestCreateFleet:
    def test_success(self, service: FleetService) -> None:
        result = service.create_fleet("user-1")
        assert result.ok
        assert result.op == "create_fleet"
        assert result.data["user_id"] == "user-1"
        assert type(result.data["id"]) is str
        assert result.data["id"]

    def test_duplicate_user(self, service: FleetService) -> None:
        create_fleet(service)
        result = service.create_fleet("user-1")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "FLEET_ALREADY_EXISTS"
        assert result.error.message == "Fleet for user user-1 already exists"

    @pytest.mark.parametrize("user_id", ["", "   "])
    def test_blank_user(self, service: FleetService, user_id: str) -> None:
        result = service.create_fleet(user_id)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_IDENTIFIER"


class TestRegisterVehicle:
    def test_success(self, service: FleetService) -> None:
        fleet_id = create_fleet(service)
        result = service.register_vehicle(fleet_id, "AB-123-CD", "CAR")
        assert result.ok
        assert result.data == {
            "fleet_id": fleet_id,
            "plate_number": "AB-123-CD",
            "vehicle_type": "car",
        }

    @pytest.mark.parametrize(
        ("fleet_id", "plate", "vehicle_type", "code"),
        [
            (None, "AB-123-CD", "boat", "UNSUPPORTED_VEHICLE_TYPE"),
            ("missing", "AB-123-CD", "car", "FLEET_NOT_FOUND"),
            (None, "", "car", "INVALID_IDENTIFIER"),
        ],
    )
    def test_failures(
        self,
        service: FleetService,
        fleet_id: str | None,
        plate: str,
        vehicle_type: str,
        code: str,
    ) -> None:
        real_id = create_fleet(service)
        result = service.register_vehicle(fleet_id or real_id, plate, vehicle_type)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == code

    def test_duplicate(self, service: FleetService) -> None:
        fleet_id = create_fleet(service)
        assert service.register_vehicle(fleet_id, "AB-123-CD", "car").ok
        result = service.register_vehicle(fleet_id, "AB-123-CD", "truck")
        assert result.error is not None
        assert result.error.code == "VEHICLE_ALREADY_REGISTERED"


class TestLocalizeVehicle:
    def test_success_with_altitude(self, service: FleetService) -> None:
        fleet_id = create_fleet(service)
        service.register_vehicle(fleet_id, "AB-123-CD", "car")
        result = service.localize_vehicle(fleet_id, "AB-123-CD", 48.8566, 2.3522, 35.0)
        assert result.ok
        assert result.data["latitude"] == 48.8566
        assert result.data["altitude"] == 35.0

    def test_out_of_range(self, service: FleetService) -> None:
        fleet_id = create_fleet(service)
        service.register_vehicle(fleet_id, "AB-123-CD", "car")
        result = service.localize_vehicle(fleet_id, "AB-123-CD", 91.0, 0.0)
        assert result.error is not None
        assert result.error.code == "INVALID_LOCATION"
        assert "Latitude" in result.error.message

    def test_unregistered(self, service: FleetService) -> None:
        fleet_id = create_fleet(service)
        result = service.localize_vehicle(fleet_id, "AB-123-CD", 1.0, 2.0)
        assert result.error is not None
        assert result.error.code == "VEHICLE_NOT_FOUND"


class TestQueries:
    def test_fleet_info(self, service: FleetService) -> None:
        fleet_id = create_fleet(service)
        service.register_vehicle(fleet_id, "AB-123-CD", "car")
        service.register_vehicle(fleet_id, "XY-987-ZW", "motorcycle")
        service.localize_vehicle(fleet_id, "AB-123-CD", 48.8566, 2.3522)

        result = service.fleet_info(fleet_id)
        assert result.ok
        assert result.data["id"] == fleet_id
        assert result.data["user_id"] == "user-1"
        assert result.data["vehicle_count"] == 2
        vehicles = {v["plate_number"]: v for v in result.data["vehicles"]}
        assert vehicles["AB-123-CD"]["location"] == {
            "latitude": 48.8566,
            "longitude": 2.3522,
            "altitude": None,
        }
        assert vehicles["XY-987-ZW"]["type"] == "motorcycle"
        assert vehicles["XY-987-ZW"]["location"] is None

    def test_fleet_info_missing(self, service: FleetService) -> None:
        result = service.fleet_info("missing")
        assert result.error is not None
        assert result.error.code == "FLEET_NOT_FOUND"

    def test_vehicle_location(self, service: FleetService) -> None:
        fleet_id = create_fleet(service)
        service.register_vehicle(fleet_id, "AB-123-CD", "car")
        service.localize_vehicle(fleet_id, "AB-123-CD", -33.8688, 151.2093)
        result = service.vehicle_location(fleet_id, "AB-123-CD")
        assert result.ok
        assert result.data["longitude"] == 151.2093
        assert result.data["altitude"] is None

    def test_vehicle_location_not_localized(self, service: FleetService) -> None:
        fleet_id = create_fleet(service)
        service.register_vehicle(fleet_id, "AB-123-CD", "car")
        result = service.vehicle_location(fleet_id, "AB-123-CD")
        assert result.error is not None
        assert result.error.code == "VEHICLE_LOCATION_NOT_FOUND"


class TestTelemetry:
    def test_meta_absent_by_default(self, service: FleetService) -> None:
        assert service.create_fleet("user-1").meta is None

    def test_span_tree_when_enabled(self, service: FleetService) -> None:
        fleet_id = create_fleet(service)
        enable_telemetry()
        result = service.register_vehicle(fleet_id, "AB-123-CD", "car")
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "FleetService.register_vehicle"
        assert [c["name"] for c in tree["children"]] == ["load_fleet", "save_fleet"]

    def test_failures_also_carry_meta(self, service: FleetService) -> None:
        enable_telemetry()
        result = service.fleet_info("missing")
        assert not result.ok
        assert result.meta is not None
        assert "telemetry" in result.meta
