"""Subcommand modules for gamechar.

Provides register_commands() which uses deferred imports to keep
``gamechar --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from gamechar.commands.create import create
    from gamechar.commands.demo import demo
    from gamechar.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(create)
    cli.add_command(demo)
