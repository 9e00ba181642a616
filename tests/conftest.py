"""Shared pytest fixtures for gamechar tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from gamechar.domain.roster import Roster
from gamechar.services.roster import RosterService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host GAMECHAR_* variables out of settings resolution."""
    for var in ("GAMECHAR_CONFIG", "GAMECHAR_VERBOSE", "GAMECHAR_LOG_LEVEL", "GAMECHAR_QUIET"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def roster() -> Roster:
    """A fresh roster: ids start at 0, nothing live."""
    return Roster()


@pytest.fixture
def service(roster: Roster) -> RosterService:
    """RosterService bound to the fresh roster."""
    return RosterService(roster)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no gamechar.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
