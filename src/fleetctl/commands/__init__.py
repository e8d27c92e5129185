"""Subcommand modules for fleetctl.

Provides register_commands() which uses deferred imports to keep
``fleetctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from fleetctl.commands.create import create
    from fleetctl.commands.info import info
    from fleetctl.commands.localize_vehicle import localize_vehicle
    from fleetctl.commands.locate import locate
    from fleetctl.commands.register_vehicle import register_vehicle

    cli.add_command(create)
    cli.add_command(register_vehicle)
    cli.add_command(localize_vehicle)
    cli.add_command(info)
    cli.add_command(locate)
