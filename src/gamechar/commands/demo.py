"""Command: run the reference lifecycle scenario against a fresh roster.

Creates three characters, renames one, attempts an invalid rename and an
invalid construction, releases everything, and checks the counters at
each step. Each scenario step reports ``passed`` or what it observed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from gamechar.commands._base import GameCharCommand
from gamechar.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from gamechar.commands._context import AppContext
    from gamechar.domain.character import Character
    from gamechar.domain.roster import Roster
    from gamechar.services.roster import RosterService


class _Checks:
    """Collects expectation failures per scenario step."""

    def __init__(self) -> None:
        self.steps: dict[str, str] = {}
        self.failures: list[str] = []

    def fail(self, step: str, failure: str) -> None:
        self.failures.append(f"{step}: {failure}")
        if self.steps.get(step, "passed") == "passed":
            self.steps[step] = failure

    def expect(self, step: str, label: str, observed: Any, expected: Any) -> None:
        self.steps.setdefault(step, "passed")
        if observed != expected:
            self.fail(step, f"{label}: expected {expected!r}, got {observed!r}")

    def created(self, step: str, result: ServiceResult) -> Character | None:
        """Return the character *result* carries, or record why it has none."""
        if result.ok and result.value is not None:
            return result.value
        code = result.error.code if result.error else "UNKNOWN"
        message = result.error.message if result.error else "no character returned"
        self.fail(step, f"create rejected: {code}: {message}")
        return None


def _outcome(checks: _Checks, roster: Roster) -> ServiceResult:
    data: dict[str, Any] = dict(checks.steps)
    data["live_count"] = roster.live_count
    data["id_count"] = roster.id_count
    if checks.failures:
        return ServiceResult(
            ok=False,
            op="demo",
            data=data,
            error=ServiceError(
                code="SCENARIO_FAILED",
                message=f"{len(checks.failures)} expectation(s) not met",
                detail={"failures": checks.failures},
            ),
        )
    return ServiceResult(ok=True, op="demo", data=data)


def run_scenario(svc: RosterService) -> ServiceResult:
    """Drive the scenario through *svc*, which must start from an empty roster.

    A rejected construction stops the scenario early; characters created
    up to that point are released before the failed result is returned.
    """
    checks = _Checks()
    roster = svc.roster
    alive: list[Character] = []

    def abort() -> ServiceResult:
        for character in alive:
            svc.release(character)
        return _outcome(checks, roster)

    leonardo = checks.created("A", svc.create("Leonardo da Vinci", 1000, 20))
    if leonardo is None:
        return abort()
    alive.append(leonardo)
    checks.expect("A", "display", leonardo.to_string(), "Leonardo da Vinci 1000 20")
    checks.expect("A", "id", leonardo.personal_id, 0)
    checks.expect("A", "live_count", roster.live_count, 1)

    default = checks.created("B", svc.create_default())
    if default is None:
        return abort()
    alive.append(default)
    checks.expect("B", "display", default.to_string(), "Name -1 0")
    checks.expect("B", "id", default.personal_id, 1)
    checks.expect("B", "id_count", roster.id_count, 2)

    svc.rename(default, "B")
    checks.expect("C", "name", default.name, "B")
    rejected = svc.rename(default, "")
    code = rejected.error.code if rejected.error else None
    checks.expect("C", "empty rename", code, "INVALID_NAME")
    checks.expect("C", "name after rejection", default.name, "B")

    jack = checks.created("D", svc.create("Jack", 10, 30))
    if jack is None:
        return abort()
    alive.append(jack)
    checks.expect("D", "id", jack.personal_id, 2)
    checks.expect("D", "live_count", roster.live_count, 3)

    for character in alive:
        svc.release(character)
    checks.expect("E", "live_count", roster.live_count, 0)
    checks.expect("E", "id_count", roster.id_count, 3)

    failed = svc.create("Zero", 0, 10)
    code = failed.error.code if failed.error else None
    checks.expect("F", "code", code, "INVALID_HEALTH")
    checks.expect("F", "id_count", roster.id_count, 3)

    return _outcome(checks, roster)


@click.command(
    cls=GameCharCommand,
    examples="""\
  gamechar demo
  gamechar --json demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Run the reference character lifecycle scenario.

    Uses a fresh roster with the standard limits, ignoring any configured
    overrides, so the expected values always apply.
    """
    from gamechar.domain.roster import Roster
    from gamechar.services.roster import RosterService

    app.emit(run_scenario(RosterService(Roster())))
