"""Validation rules for character names, health, and attack power.

Each validator returns ``None`` when the candidate is legal, or a
:class:`RuleViolation` naming the first rule it breaks.
:func:`validate_character` runs them fail-fast in the fixed order
name, health, attack power.

INVARIANT: validators are pure. They never touch the roster counters.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from pydantic import BaseModel, Field

from gamechar.domain.errors import ErrorKind

INVINCIBLE_HEALTH = -1

DEFAULT_NAME = "Name"
DEFAULT_HEALTH = INVINCIBLE_HEALTH
DEFAULT_ATTACK_POWER = 0

_NAME_INITIALS = frozenset(string.ascii_uppercase)
_NAME_CHARACTERS = frozenset(string.ascii_letters + " ")


class CharacterLimits(BaseModel):
    """Upper bounds applied by the validators.

    Attack power has no lower bound. Each limit is floored so the
    default record (``"Name" -1 0``) always stays constructible.
    """

    model_config = {"frozen": True}

    max_name_length: int = Field(default=32, ge=len(DEFAULT_NAME))
    max_health: int = Field(default=1000, ge=1)
    max_attack_power: int = Field(default=500, ge=DEFAULT_ATTACK_POWER)


DEFAULT_LIMITS = CharacterLimits()


@dataclass(frozen=True)
class RuleViolation:
    """A single broken rule: which kind of error, and why."""

    kind: ErrorKind
    message: str


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_name(
    candidate: object, limits: CharacterLimits = DEFAULT_LIMITS
) -> RuleViolation | None:
    """Check a candidate name against the name grammar.

    A legal name starts with an uppercase ASCII letter, holds at most
    ``limits.max_name_length`` characters, contains only ASCII letters
    and single spaces, and does not end with a space.
    """

    def reject(message: str) -> RuleViolation:
        return RuleViolation(ErrorKind.INVALID_NAME, message)

    if not isinstance(candidate, str):
        return reject(f"Name must be a string, got {type(candidate).__name__}")
    if candidate == "":
        return reject("Character name cannot be empty")
    if candidate[0] not in _NAME_INITIALS:
        return reject("Name must start with an uppercase letter")
    if len(candidate) > limits.max_name_length:
        return reject(f"Name length cannot exceed {limits.max_name_length} characters")
    if candidate[-1] == " ":
        return reject("Name cannot end with a space")
    for char in candidate:
        if char not in _NAME_CHARACTERS:
            return reject(f"Name must contain only letters and spaces, found {char!r}")
    if "  " in candidate:
        return reject("Name cannot contain consecutive spaces")
    return None


def validate_health(
    candidate: object, limits: CharacterLimits = DEFAULT_LIMITS
) -> RuleViolation | None:
    """Check health: exactly ``-1`` (invincible) or ``1..limits.max_health``."""
    if not _is_int(candidate):
        return RuleViolation(
            ErrorKind.INVALID_HEALTH,
            f"Health must be an integer, got {type(candidate).__name__}",
        )
    assert isinstance(candidate, int)
    if candidate == INVINCIBLE_HEALTH:
        return None
    if candidate <= 0:
        return RuleViolation(
            ErrorKind.INVALID_HEALTH,
            f"Health must be positive or {INVINCIBLE_HEALTH} for an invincible character",
        )
    if candidate > limits.max_health:
        return RuleViolation(
            ErrorKind.INVALID_HEALTH,
            f"Health cannot exceed {limits.max_health}",
        )
    return None


def validate_attack_power(
    candidate: object, limits: CharacterLimits = DEFAULT_LIMITS
) -> RuleViolation | None:
    """Check attack power against the upper bound only."""
    if not _is_int(candidate):
        return RuleViolation(
            ErrorKind.INVALID_ATTACK_POWER,
            f"Attack power must be an integer, got {type(candidate).__name__}",
        )
    assert isinstance(candidate, int)
    if candidate > limits.max_attack_power:
        return RuleViolation(
            ErrorKind.INVALID_ATTACK_POWER,
            f"Attack power cannot exceed {limits.max_attack_power}",
        )
    return None


def validate_character(
    name: object,
    health: object,
    attack_power: object,
    limits: CharacterLimits = DEFAULT_LIMITS,
) -> RuleViolation | None:
    """Validate a full triple, returning the first violation found."""
    return (
        validate_name(name, limits)
        or validate_health(health, limits)
        or validate_attack_power(attack_power, limits)
    )
