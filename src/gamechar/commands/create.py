"""Command: construct a character, show it, and release it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gamechar.commands._base import GameCharCommand

if TYPE_CHECKING:
    from gamechar.commands._context import AppContext


@click.command(
    cls=GameCharCommand,
    examples="""\
  gamechar create "Leonardo da Vinci" 1000 20
  gamechar create --default
  gamechar --json create Jack 10 30""",
)
@click.argument("name", required=False)
@click.argument("health", type=int, required=False)
@click.argument("attack_power", type=int, required=False)
@click.option("--default", "use_default", is_flag=True, help="Use the default character.")
@click.pass_obj
def create(
    app: AppContext,
    name: str | None,
    health: int | None,
    attack_power: int | None,
    use_default: bool,
) -> None:
    """Create a character from NAME, HEALTH and ATTACK_POWER (or --default)."""
    svc = app.service()
    if use_default:
        if name is not None:
            raise click.UsageError("--default takes no arguments.")
        result = svc.create_default()
    else:
        if name is None or health is None or attack_power is None:
            raise click.UsageError("NAME, HEALTH and ATTACK_POWER are required.")
        result = svc.create(name, health, attack_power)

    try:
        app.emit(result)
    finally:
        if result.ok:
            svc.release(result.value)
