"""Locate the fleetctl.toml that applies to the current invocation."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "fleetctl.toml"
CONFIG_ENV_VAR = "FLEETCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for a fleetctl run started in *start* (default: cwd).

    ``FLEETCTL_CONFIG`` pins the file outright; if it names a missing file
    no config is used.  Otherwise the nearest ``fleetctl.toml`` in *start*
    or one of its parents wins, and its directory becomes the project root
    that relative database paths resolve against.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
