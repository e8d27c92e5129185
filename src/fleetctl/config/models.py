"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fleetctl.toml only contains
overrides.  A fresh project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_DB_PATH = "data/fleet.db"


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    path: str = DEFAULT_DB_PATH
    echo: bool = False

