"""GameCharSettings — one frozen object for flags, env vars, and TOML.

Sources, strongest first: CLI flags, ``GAMECHAR_*`` variables (nested
fields use ``__``, e.g. ``GAMECHAR_LIMITS__MAX_HEALTH``), the discovered
``gamechar.toml``, then the code defaults on :class:`CharacterLimits`.

Limits outside their allowed range are reported as a
``click.ClickException`` so the CLI exits cleanly instead of crashing.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from gamechar.config.discovery import find_config, read_config
from gamechar.domain.rules import CharacterLimits

# The TOML file chosen by from_cli, visible to settings_customise_sources
# only while that call is constructing the settings object.
_active_config: ContextVar[Path | None] = ContextVar("gamechar_active_config", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the sections of one ``gamechar.toml`` into settings resolution."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = read_config(path) if path and path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class GameCharSettings(BaseSettings):
    """Resolved settings for one gamechar invocation.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        limits: Bounds handed to the roster's validators.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GAMECHAR_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    log_level: str | None = None

    limits: CharacterLimits = Field(default_factory=CharacterLimits)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Flags, then env, then TOML; dotenv and secret files are not read."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _active_config.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> GameCharSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist means no TOML file;
        otherwise ``gamechar.toml`` is searched for from *cwd* upwards.

        Raises:
            click.ClickException: On unreadable TOML or out-of-range values.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(cwd)

        token = _active_config.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            msg = f"Invalid configuration ({source}):\n{exc}"
            raise click.ClickException(msg) from exc
        finally:
            _active_config.reset(token)
