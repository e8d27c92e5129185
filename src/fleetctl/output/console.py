"""Rich Console factory and theme for fleetctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FLEET_THEME = Theme(
    {
        "fleet.ok": "bold green",
        "fleet.error": "bold red",
        "fleet.op": "bold cyan",
        "fleet.key": "dim",
        "fleet.id": "bold blue",
        "fleet.plate": "bold",
        "fleet.coord": "magenta",
        "fleet.missing": "dim italic",
        "fleet.type.car": "green",
        "fleet.type.truck": "yellow",
        "fleet.type.motorcycle": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=FLEET_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_vehicle_type(vehicle_type: str) -> str:
    return f"fleet.type.{vehicle_type}" if vehicle_type in {"car", "truck", "motorcycle"} else ""
