"""Character — a validated record with a managed lifetime.

Default and explicit construction share one initializer, so every record
passes the same fail-fast validation before an identifier is claimed.
A rejected construction raises and leaves the roster untouched.

Lifetime ends with :meth:`Character.release` or on leaving a ``with``
block. A released record cannot be used or released again.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import NoReturn, Self

from gamechar.domain.errors import (
    ERRORS_BY_KIND,
    CharacterReleasedError,
    CharacterValidationError,
)
from gamechar.domain.roster import Roster, default_roster
from gamechar.domain.rules import (
    DEFAULT_ATTACK_POWER,
    DEFAULT_HEALTH,
    DEFAULT_NAME,
    INVINCIBLE_HEALTH,
    RuleViolation,
    validate_character,
    validate_name,
)

logger = logging.getLogger(__name__)


def _raise_for(violation: RuleViolation) -> NoReturn:
    error_cls: type[CharacterValidationError] = ERRORS_BY_KIND[violation.kind]
    raise error_cls(violation.message)


class Character:
    """A named character with health and attack power.

    Health and attack power are fixed at construction. The name can be
    changed with :meth:`set_name`, which re-runs name validation.

    Usage::

        with Character("Jack", 10, 30) as jack:
            print(jack)  # "Jack 10 30"
    """

    __slots__ = ("_attack_power", "_health", "_name", "_personal_id", "_released", "_roster")

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        health: int = DEFAULT_HEALTH,
        attack_power: int = DEFAULT_ATTACK_POWER,
        *,
        roster: Roster | None = None,
    ) -> None:
        roster = roster or default_roster()
        violation = validate_character(name, health, attack_power, roster.limits)
        if violation is not None:
            logger.debug("Rejected character %r: %s", name, violation.message)
            _raise_for(violation)

        self._roster = roster
        self._name = name
        self._health = health
        self._attack_power = attack_power
        self._released = False
        self._personal_id = roster.claim()

    # --- Process-wide counters ---

    @staticmethod
    def object_count(roster: Roster | None = None) -> int:
        """Number of live records in *roster* (default: process-wide)."""
        return (roster or default_roster()).live_count

    @staticmethod
    def id_count(roster: Roster | None = None) -> int:
        """Number of records ever created in *roster* (default: process-wide)."""
        return (roster or default_roster()).id_count

    # --- Accessors ---

    def _check_alive(self) -> None:
        if self._released:
            raise CharacterReleasedError(self._personal_id)

    @property
    def name(self) -> str:
        self._check_alive()
        return self._name

    @property
    def health(self) -> int:
        self._check_alive()
        return self._health

    @property
    def attack_power(self) -> int:
        self._check_alive()
        return self._attack_power

    @property
    def personal_id(self) -> int:
        self._check_alive()
        return self._personal_id

    @property
    def released(self) -> bool:
        return self._released

    @property
    def is_invincible(self) -> bool:
        return self.health == INVINCIBLE_HEALTH

    def to_string(self) -> str:
        """Debug form: ``"<name> <health> <attack_power>"``."""
        self._check_alive()
        return f"{self._name} {self._health} {self._attack_power}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._released:
            return f"Character(id={self._personal_id}, released)"
        return (
            f"Character(id={self._personal_id}, name={self._name!r}, "
            f"health={self._health}, attack_power={self._attack_power})"
        )

    # --- Mutation ---

    def set_name(self, candidate: str) -> None:
        """Replace the name after validating *candidate*.

        Raises:
            InvalidName: If *candidate* breaks the name grammar. The
                current name is kept.
            CharacterReleasedError: If the record was released.
        """
        self._check_alive()
        violation = validate_name(candidate, self._roster.limits)
        if violation is not None:
            logger.debug("Rejected rename of %d to %r", self._personal_id, candidate)
            _raise_for(violation)
        logger.debug("Renamed %d: %r -> %r", self._personal_id, self._name, candidate)
        self._name = candidate

    # --- Lifetime ---

    def release(self) -> None:
        """End this record's lifetime and decrement the live count.

        Raises:
            CharacterReleasedError: If already released.
        """
        self._check_alive()
        self._released = True
        self._roster.discharge(self._personal_id)

    def __enter__(self) -> Self:
        self._check_alive()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._released:
            self.release()
