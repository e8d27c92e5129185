"""fleetctl — fleet and vehicle location tracking CLI."""

__version__ = "0.1.0"
