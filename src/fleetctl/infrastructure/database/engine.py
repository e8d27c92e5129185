"""Database engine setup for SQLite with WAL mode.

SQLAlchemy Core (not ORM) is used because fleetctl is a short-lived
CLI process and the repository maps rows to aggregates by hand.
Foreign keys are switched on per connection so vehicle and location
rows cascade away with their fleet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from fleetctl.infrastructure.database.schema import metadata

logger = logging.getLogger(__name__)


def create_db_engine(db_path: Path, *, echo: bool = False) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled."""
    engine = create_engine(f"sqlite:///{db_path}", echo=echo)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(db_path: Path, *, echo: bool = False) -> Engine:
    """Initialize the fleet database at *db_path*.

    Creates the parent directory and all tables from
    :data:`schema.metadata`.  Idempotent; safe to call on an existing
    database.

    Returns the engine ready for use.
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path, echo=echo)
    metadata.create_all(engine)
    logger.debug("Fleet database ready at %s", db_path)
    return engine
