"""Application configuration

Settings are read from the environment. The listen port uses the plain
``PORT`` variable; everything else is prefixed with ``CALC_API_``.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from calculator_api.exceptions import ConfigurationError

_ENV_PREFIX = "CALC_API"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


def _env_name(name: str) -> str:
    return f"{_ENV_PREFIX}_{name}"


@dataclass(frozen=True)
class ServerSettings:
    """Where the HTTP listener binds."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        env = os.environ if environ is None else environ

        raw_port = env.get("PORT", "").strip()
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError as e:
                raise ConfigurationError(
                    f"PORT must be an integer, got {raw_port!r}",
                    details={"variable": "PORT", "value": raw_port},
                ) from e
        else:
            port = DEFAULT_PORT

        host = env.get(_env_name("HOST"), DEFAULT_HOST)
        return cls(host=host, port=port)


@dataclass(frozen=True)
class LogSettings:
    """Log level and sinks for the shared session logger."""

    level: int = logging.INFO
    file: Optional[str] = None
    json_format: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogSettings":
        env = os.environ if environ is None else environ

        level_name = env.get(_env_name("LOG_LEVEL"), DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO

        return cls(
            level=level,
            file=env.get(_env_name("LOG_FILE")) or None,
            json_format=env.get(_env_name("LOG_JSON"), "false").lower() == "true",
        )


@dataclass(frozen=True)
class Settings:
    server: ServerSettings = field(default_factory=ServerSettings)
    log: LogSettings = field(default_factory=LogSettings)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        return cls(
            server=ServerSettings.from_env(environ),
            log=LogSettings.from_env(environ),
        )


_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """Get settings from the environment, cached after the first call."""
    global _settings
    if _settings is None or reload:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "ServerSettings",
    "LogSettings",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "get_settings",
    "reset_settings",
]
