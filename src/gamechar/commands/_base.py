"""Custom Click command class with --examples support.

When ``--examples`` is passed, the command prints usage examples and exits.
Numeric arguments may be negative (``-1`` is the invincible health), so
dash-prefixed integers are passed through as arguments. Any other unknown
dash-prefixed token is still rejected as a misspelled option.
"""

from __future__ import annotations

import re
from typing import Any

import click

_NEGATIVE_INT = re.compile(r"^-\d+$")


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class GameCharCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        context_settings = dict(kwargs.pop("context_settings", None) or {})
        context_settings.setdefault("ignore_unknown_options", True)
        super().__init__(*args, context_settings=context_settings, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        known: set[str] = set()
        for param in self.get_params(ctx):
            if isinstance(param, click.Option):
                known.update(param.opts)
                known.update(param.secondary_opts)
        for arg in [] if ctx.resilient_parsing else args:
            if arg == "--":
                break
            if not arg.startswith("-") or arg == "-" or _NEGATIVE_INT.match(arg):
                continue
            if arg.split("=", 1)[0] not in known:
                raise click.NoSuchOption(arg, possibilities=sorted(known), ctx=ctx)
        return super().parse_args(ctx, args)
