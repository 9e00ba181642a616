"""Command: dry-run validation of a candidate character."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gamechar.commands._base import GameCharCommand

if TYPE_CHECKING:
    from gamechar.commands._context import AppContext


@click.command(
    cls=GameCharCommand,
    examples="""\
  gamechar validate "Leonardo da Vinci" 1000 20
  gamechar validate Name -1 0
  gamechar --json validate "Jack" 0 30""",
)
@click.argument("name")
@click.argument("health", type=int)
@click.argument("attack_power", type=int)
@click.pass_obj
def validate(app: AppContext, name: str, health: int, attack_power: int) -> None:
    """Check NAME, HEALTH and ATTACK_POWER without creating a character."""
    app.emit(app.service().validate(name, health, attack_power))
