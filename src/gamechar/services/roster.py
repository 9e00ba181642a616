"""RosterService — character operations expressed as results.

Wraps the raising domain API: validation failures become
``ServiceResult(ok=False)`` with one of the codes ``INVALID_NAME``,
``INVALID_HEALTH``, ``INVALID_ATTACK_POWER``; releasing a record twice
becomes ``ALREADY_RELEASED``. A failed create consumes no identifier.
"""

from __future__ import annotations

import logging
from typing import Any

from gamechar.domain.character import Character
from gamechar.domain.errors import CharacterReleasedError, CharacterValidationError
from gamechar.domain.roster import Roster, default_roster
from gamechar.domain.rules import validate_character
from gamechar.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

ALREADY_RELEASED = "ALREADY_RELEASED"


def _describe(character: Character) -> dict[str, Any]:
    return {
        "id": character.personal_id,
        "name": character.name,
        "health": character.health,
        "attack_power": character.attack_power,
        "display": character.to_string(),
    }


def _rejected(op: str, exc: CharacterValidationError, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=str(exc.kind), message=exc.message, detail=detail),
    )


def _released(op: str, exc: CharacterReleasedError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(
            code=ALREADY_RELEASED,
            message=str(exc),
            detail={"id": exc.personal_id},
        ),
    )


class RosterService:
    """Create, rename, and release characters against one roster.

    Usage::

        svc = RosterService(Roster())
        result = svc.create("Jack", 10, 30)
        if result.ok:
            jack = result.value
    """

    def __init__(self, roster: Roster | None = None) -> None:
        self._roster = roster or default_roster()

    @property
    def roster(self) -> Roster:
        return self._roster

    def _counts_meta(self) -> dict[str, Any]:
        return {"live_count": self._roster.live_count, "id_count": self._roster.id_count}

    def create(self, name: str, health: int, attack_power: int) -> ServiceResult:
        """Construct a character from explicit fields."""
        op = "create_character"
        try:
            character = Character(name, health, attack_power, roster=self._roster)
        except CharacterValidationError as exc:
            return _rejected(op, exc, name=name, health=health, attack_power=attack_power)
        logger.debug("Created character %d", character.personal_id)
        return ServiceResult(
            ok=True,
            op=op,
            data=_describe(character),
            value=character,
            meta=self._counts_meta(),
        )

    def create_default(self) -> ServiceResult:
        """Construct a character with the default name, health, and attack power."""
        try:
            character = Character(roster=self._roster)
        except CharacterValidationError as exc:
            return _rejected("create_character", exc)
        logger.debug("Created default character %d", character.personal_id)
        return ServiceResult(
            ok=True,
            op="create_character",
            data=_describe(character),
            value=character,
            meta=self._counts_meta(),
        )

    def rename(self, character: Character, candidate: str) -> ServiceResult:
        """Change a character's name; on rejection the old name is kept."""
        op = "rename_character"
        try:
            previous = character.name
            character.set_name(candidate)
        except CharacterReleasedError as exc:
            return _released(op, exc)
        except CharacterValidationError as exc:
            return _rejected(op, exc, id=character.personal_id, name=candidate)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": character.personal_id, "name": character.name, "previous_name": previous},
            value=character,
        )

    def release(self, character: Character) -> ServiceResult:
        """End a character's lifetime."""
        op = "release_character"
        try:
            personal_id = character.personal_id
            character.release()
        except CharacterReleasedError as exc:
            return _released(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": personal_id, "live_count": self._roster.live_count},
            meta=self._counts_meta(),
        )

    def validate(self, name: str, health: int, attack_power: int) -> ServiceResult:
        """Check a candidate triple without creating a record."""
        op = "validate_character"
        violation = validate_character(name, health, attack_power, self._roster.limits)
        if violation is not None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=str(violation.kind),
                    message=violation.message,
                    detail={"name": name, "health": health, "attack_power": attack_power},
                ),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": name,
                "health": health,
                "attack_power": attack_power,
                "display": f"{name} {health} {attack_power}",
            },
        )

    def counts(self) -> ServiceResult:
        """Report live and total record counts."""
        return ServiceResult(ok=True, op="roster_counts", data=self._counts_meta())

