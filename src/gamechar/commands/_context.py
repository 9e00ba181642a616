"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns the roster for this process and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gamechar.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gamechar.config.settings import GameCharSettings
    from gamechar.domain.roster import Roster
    from gamechar.services.result import ServiceResult
    from gamechar.services.roster import RosterService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The roster is built lazily so ``--help`` and ``--version`` never
    touch it.
    """

    def __init__(self, settings: GameCharSettings) -> None:
        self.settings = settings
        self._roster: Roster | None = None

        from gamechar.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            level=settings.log_level,
        )

    @property
    def roster(self) -> Roster:
        """The roster for this invocation, using the configured limits."""
        if self._roster is None:
            from gamechar.domain.roster import Roster

            self._roster = Roster(limits=self.settings.limits)
        return self._roster

    def service(self) -> RosterService:
        from gamechar.services.roster import RosterService

        return RosterService(self.roster)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
