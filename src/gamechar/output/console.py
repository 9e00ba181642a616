"""Rich Console factory and theme for gamechar output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract. Outside a terminal (tests, pipes) Rich emits no
color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GAMECHAR_THEME = Theme(
    {
        "gc.ok": "bold green",
        "gc.error": "bold red",
        "gc.op": "bold cyan",
        "gc.key": "dim",
        "gc.id": "bold blue",
        "gc.name": "bold",
        "gc.invincible": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=GAMECHAR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
