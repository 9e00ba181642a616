"""Roster — the identifier generator and live-instance counter.

Two counters, both zero at construction:

- ``next_id``: claimed once per successfully constructed record, never
  decremented. Doubles as the total number of records ever created.
- ``live_count``: incremented on construction, decremented on release.

INVARIANT: ``next_id`` only grows, and ``live_count`` never goes negative.
Both are updated under a single lock so concurrent construction and
release keep them consistent.

A process-wide roster is created at import time and used whenever a
caller does not inject its own.
"""

from __future__ import annotations

import logging
import threading

from gamechar.domain.rules import DEFAULT_LIMITS, CharacterLimits

logger = logging.getLogger(__name__)


class Roster:
    """Process-wide state shared by every record created against it."""

    def __init__(self, limits: CharacterLimits | None = None) -> None:
        self.limits = limits or DEFAULT_LIMITS
        self._lock = threading.Lock()
        self._next_id = 0
        self._live_count = 0

    @property
    def next_id(self) -> int:
        """Identifier the next record will receive."""
        return self._next_id

    @property
    def id_count(self) -> int:
        """Total number of records ever constructed."""
        return self._next_id

    @property
    def live_count(self) -> int:
        """Number of constructed records not yet released."""
        return self._live_count

    def claim(self) -> int:
        """Assign the next identifier and count a new live record."""
        with self._lock:
            personal_id = self._next_id
            self._next_id += 1
            self._live_count += 1
        logger.debug("Claimed id %d (live=%d)", personal_id, self._live_count)
        return personal_id

    def discharge(self, personal_id: int) -> None:
        """Count one record as released.

        Raises:
            RuntimeError: If no records are live.
        """
        with self._lock:
            if self._live_count == 0:
                msg = f"Cannot release id {personal_id}: no live records in roster"
                raise RuntimeError(msg)
            self._live_count -= 1
        logger.debug("Released id %d (live=%d)", personal_id, self._live_count)

    def __repr__(self) -> str:
        return f"Roster(next_id={self._next_id}, live_count={self._live_count})"


_default_roster = Roster()


def default_roster() -> Roster:
    """Return the process-wide roster."""
    return _default_roster
