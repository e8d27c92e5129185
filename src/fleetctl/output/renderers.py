"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from fleetctl.output.console import create_console, get_output, style_for_vehicle_type

if TYPE_CHECKING:
    from rich.console import Console

    from fleetctl.services.result import ServiceResult

_Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    A created fleet prints just its id so the output can be captured
    by shell scripts.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "create_fleet":
        return str(result.data.get("id", ""))
    if result.op == "fleet_info":
        return "\n".join(str(v["plate_number"]) for v in result.data.get("vehicles", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="fleet.ok")
    op = Text(f"  {result.op}", style="fleet.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fleet.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="fleet.id")
    elif key == "plate_number":
        v = Text(str(value), style="fleet.plate")
    elif key in {"latitude", "longitude", "altitude"}:
        v = Text(str(value), style="fleet.coord")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _format_location(location: dict[str, Any] | None) -> Text:
    if location is None:
        return Text("no location", style="fleet.missing")
    text = f"{location['latitude']}, {location['longitude']}"
    if location.get("altitude") is not None:
        text += f", {location['altitude']}m"
    return Text(text, style="fleet.coord")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(console: Console, span_data: dict[str, Any], indent: int = 4) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    console.print(f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}")

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="fleet.error")
    op = Text(f"  {result.op}", style="fleet.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err:
        _field(console, "code", err.code)
        for key, value in err.detail.items():
            _field(console, key, value)


# ── Operation renderers ───────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create-fleet / register / localize results."""
    _status_line(console, result)
    for key, value in result.data.items():
        if value is not None:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_fleet_info(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fleet header fields followed by a table of registered vehicles."""
    _status_line(console, result)
    data = result.data
    _field(console, "id", data.get("id", ""))
    _field(console, "user_id", data.get("user_id", ""))
    _field(console, "vehicle_count", data.get("vehicle_count", 0))

    vehicles = data.get("vehicles", [])
    if vehicles:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Plate", style="fleet.plate", no_wrap=True)
        table.add_column("Type")
        table.add_column("Location")
        for vehicle in vehicles:
            vehicle_type = str(vehicle.get("type", ""))
            table.add_row(
                str(vehicle.get("plate_number", "")),
                Text(vehicle_type, style=style_for_vehicle_type(vehicle_type)),
                _format_location(vehicle.get("location")),
            )
        console.print()
        console.print(table)

    if verbose:
        _render_meta(console, result)


def _render_vehicle_location(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    data = result.data
    for key in ("fleet_id", "plate_number", "latitude", "longitude"):
        _field(console, key, data.get(key, ""))
    if data.get("altitude") is not None:
        _field(console, "altitude", f"{data['altitude']}m")
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "create_fleet": _render_mutation,
    "register_vehicle": _render_mutation,
    "localize_vehicle": _render_mutation,
    "fleet_info": _render_fleet_info,
    "vehicle_location": _render_vehicle_location,
}
