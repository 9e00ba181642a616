"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). Quiet mode prints only the status line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.text import Text

from gamechar.domain.rules import INVINCIBLE_HEALTH
from gamechar.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from gamechar.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="gc.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="gc.id")
    elif key == "name":
        v = Text(str(value), style="gc.name")
    elif key == "health" and value == INVINCIBLE_HEALTH:
        v = Text(f"{value} (invincible)", style="gc.invincible")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    console.print(Text("OK", style="gc.ok"), Text(result.op, style="gc.op"))
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for key, value in result.meta.items():
            console.print(f"    {key}: {value}")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="gc.error"),
        Text(result.op, style="gc.op"),
        Text(f"— {message}"),
    )
    if error is None:
        return
    _field(console, "code", error.code)
    if verbose:
        for key, value in error.detail.items():
            _field(console, key, value)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode; defaults to human-readable.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        if result.ok:
            return f"OK: {result.op}"
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"

    console = create_console()
    if result.ok:
        _render_ok(result, console, verbose=settings.verbose)
    else:
        _render_error(result, console, verbose=settings.verbose)
    return get_output(console).rstrip("\n")
