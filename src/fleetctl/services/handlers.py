"""Application handlers — one per use case.

Handlers load aggregates through the :class:`FleetRepository` port, call
domain methods, and save.  They translate only missing-lookup results
into not-found errors; domain errors propagate untouched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fleetctl.domain.errors import (
    FleetAlreadyExistsError,
    FleetNotFoundError,
    VehicleLocationNotFoundError,
)
from fleetctl.domain.fleet import Fleet
from fleetctl.domain.vehicles import create_vehicle
from fleetctl.services.telemetry import trace_span

if TYPE_CHECKING:
    from fleetctl.domain.ids import FleetId
    from fleetctl.domain.location import Location
    from fleetctl.domain.repository import FleetRepository
    from fleetctl.services.messages import (
        CreateFleetCommand,
        FleetInfoQuery,
        LocalizeVehicleCommand,
        RegisterVehicleCommand,
        VehicleLocationQuery,
    )

logger = logging.getLogger(__name__)


class _Handler:
    def __init__(self, repository: FleetRepository) -> None:
        self._repository = repository

    def _load(self, fleet_id: FleetId) -> Fleet:
        with trace_span("load_fleet"):
            fleet = self._repository.find_one_by_id(fleet_id)
        if fleet is None:
            raise FleetNotFoundError(fleet_id)
        return fleet

    def _save(self, fleet: Fleet) -> None:
        with trace_span("save_fleet"):
            self._repository.save(fleet)


class CreateFleetHandler(_Handler):
    """Create the (single) fleet of a user and return its new id."""

    def handle(self, command: CreateFleetCommand) -> FleetId:
        if self._repository.exists(user_id=command.user_id):
            raise FleetAlreadyExistsError(command.user_id)

        fleet = Fleet.create(command.user_id)
        self._save(fleet)
        logger.info("Created fleet %s for user %s", fleet.id, fleet.user_id)
        return fleet.id


class RegisterVehicleHandler(_Handler):
    def handle(self, command: RegisterVehicleCommand) -> None:
        fleet = self._load(command.fleet_id)
        fleet.register_vehicle(create_vehicle(command.vehicle_type, command.plate_number))
        self._save(fleet)


class LocalizeVehicleHandler(_Handler):
    def handle(self, command: LocalizeVehicleCommand) -> None:
        fleet = self._load(command.fleet_id)
        fleet.localize_vehicle(command.plate_number, command.location)
        self._save(fleet)


class FleetInfoHandler(_Handler):
    def handle(self, query: FleetInfoQuery) -> Fleet:
        return self._load(query.fleet_id)


class VehicleLocationHandler(_Handler):
    """Return a vehicle's current location.

    A registered vehicle that was never localized is reported as
    :class:`VehicleLocationNotFoundError`, distinct from an unknown plate.
    """

    def handle(self, query: VehicleLocationQuery) -> Location:
        fleet = self._load(query.fleet_id)
        location = fleet.get_vehicle_location(query.plate_number)
        if location is None:
            raise VehicleLocationNotFoundError(query.plate_number)
        return location
