"""Shared pytest fixtures and test helpers for fleetctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from fleetctl.infrastructure.database.engine import init_database
from fleetctl.infrastructure.database.store import FleetStore
from fleetctl.infrastructure.repositories.fleet import SqlFleetRepository
from fleetctl.services.fleet import FleetService
from fleetctl.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    fleet_logger = logging.getLogger("fleetctl")
    fleet_level = fleet_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    fleet_logger.setLevel(fleet_level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "fleet.db"


@pytest.fixture
def db_engine(db_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(db_path)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(db_engine: Engine) -> FleetStore:
    return FleetStore(db_engine)


@pytest.fixture
def repository(store: FleetStore) -> SqlFleetRepository:
    return SqlFleetRepository(store)


@pytest.fixture
def service(repository: SqlFleetRepository) -> FleetService:
    return FleetService(repository)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from a temp directory with no ambient fleetctl config.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.  The database lands at ``tmp_path/data/fleet.db``.
    """
    for var in ("FLEETCTL_CONFIG", "FLEETCTL_DB_PATH", "FLEETCTL_DATABASE__PATH"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def create_fleet(service: FleetService, user_id: str = "user-1") -> str:
    """Create a fleet via FleetService, asserting success. Returns its id."""
    result = service.create_fleet(user_id)
    assert result.ok, result.error
    return str(result.data["id"])
