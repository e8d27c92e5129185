"""Command: create the fleet of a user."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fleetctl.commands._base import FleetCommand

if TYPE_CHECKING:
    from fleetctl.commands._context import AppContext


@click.command(
    cls=FleetCommand,
    examples="""\
  fleetctl create user-1
  fleetctl -q create user-1        # prints only the new fleet id
  fleetctl --json create user-1""",
)
@click.argument("user_id")
@click.pass_obj
def create(app: AppContext, user_id: str) -> None:
    """Create a new fleet owned by USER_ID (one fleet per user)."""
    app.emit(app.fleet_service.create_fleet(user_id))
