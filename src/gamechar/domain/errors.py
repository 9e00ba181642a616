"""Error kinds and the exception hierarchy for character records.

Validation failures are rejected input: they carry an :class:`ErrorKind`
so the service layer can turn them into ``ServiceError`` codes.
Lifecycle misuse (use after release) is a programming error and is
never converted into a result.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """The three ways a candidate record can be rejected."""

    INVALID_NAME = "INVALID_NAME"
    INVALID_HEALTH = "INVALID_HEALTH"
    INVALID_ATTACK_POWER = "INVALID_ATTACK_POWER"


class CharacterValidationError(ValueError):
    """Base class for rejected character input."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidName(CharacterValidationError):
    kind = ErrorKind.INVALID_NAME


class InvalidHealth(CharacterValidationError):
    kind = ErrorKind.INVALID_HEALTH


class InvalidAttackPower(CharacterValidationError):
    kind = ErrorKind.INVALID_ATTACK_POWER


ERRORS_BY_KIND: dict[ErrorKind, type[CharacterValidationError]] = {
    ErrorKind.INVALID_NAME: InvalidName,
    ErrorKind.INVALID_HEALTH: InvalidHealth,
    ErrorKind.INVALID_ATTACK_POWER: InvalidAttackPower,
}


class CharacterReleasedError(RuntimeError):
    """Raised when a released character is used or released again."""

    def __init__(self, personal_id: int) -> None:
        super().__init__(f"Character {personal_id} has already been released")
        self.personal_id = personal_id
