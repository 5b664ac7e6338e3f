"""Human, quiet, and JSON rendering of ServiceResult.

Renderers are dispatched by ``result.op``. Unknown ops fall through to a
generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.table import Table
from rich.text import Text

from loadtok.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from loadtok.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags taken from the global CLI options."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; takes precedence over *json_output*.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: the rendered value(s) or type names only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "rendered" in result.data:
        return str(result.data["rendered"])
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("rendered", item.get("name", ""))) for item in items)
    return f"OK: {result.op}"


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    if verbose and result.meta:
        for key, value in result.meta.items():
            console.print(Text(f"  {key}: ", style="lt.key"), Text(str(value)), sep="")
    return get_output(console).rstrip("\n")


# ── Renderers ─────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="lt.ok"), Text(f"  {result.op}", style="lt.op"), sep="")


def _render_decode(result: ServiceResult, console: Console) -> None:
    data = result.data
    _status_line(console, result)
    console.print(Text("  type: ", style="lt.key"), Text(data["type"], style="lt.type"), sep="")
    console.print(
        Text("  tokens: ", style="lt.key"),
        Text(f"{data['consumed']} consumed, {data['remaining']} remaining"),
        sep="",
    )
    console.print(Text(str(data["rendered"]), style="lt.value"), soft_wrap=True)


def _render_demo(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Scenario", style="lt.key")
    table.add_column("Input", style="lt.input")
    table.add_column("Type", style="lt.type")
    table.add_column("Value", style="lt.value", overflow="fold")
    for item in result.data.get("items", []):
        table.add_row(*(Text(str(item[key])) for key in ("label", "input", "type", "rendered")))
    console.print(table)


def _render_types(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for item in result.data.get("items", []):
        console.print(
            Text(f"  {item['name']}", style="lt.type"),
            Text(f"  {item['capability']}", style="lt.key"),
            sep="",
        )


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(Text(f"  {key}: ", style="lt.key"), Text(str(value)), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    line = Text("ERROR", style="lt.error")
    line.append(f"  {result.op}", style="lt.op")
    line.append(f" — {message}")
    console.print(line)
    if error is not None:
        console.print(Text(f"  code: {error.code}", style="lt.key"))
        if verbose:
            for key, value in error.detail.items():
                console.print(Text(f"  {key}: {value}", style="lt.key"))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Any], None]] = {
    "decode": _render_decode,
    "demo": _render_demo,
    "types": _render_types,
}
