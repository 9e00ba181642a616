"""Locating and reading ``gamechar.toml``.

The file is looked up in the starting directory and then each parent,
stopping at the first hit. ``GAMECHAR_CONFIG`` names a file directly and
disables the search; if that file is missing no config is used.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "gamechar.toml"
CONFIG_ENV_VAR = "GAMECHAR_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``gamechar.toml`` at or above *start* (default: cwd)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: If the file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
