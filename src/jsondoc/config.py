"""Runtime configuration read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

DEFAULT_MAX_INSTANCES = 2048

_TRUE = {"1", "yes", "true", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must be >= 0, got {value}")
    return value


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUE


@dataclass(frozen=True)
class Config:
    """Engine settings.

    ``max_instances`` bounds the handle slot space (``0`` = unbounded);
    ``escape_strings`` turns on JSON escaping of keys and string values.
    """

    max_instances: int = DEFAULT_MAX_INSTANCES
    escape_strings: bool = False
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.max_instances < 0:
            raise ConfigError(f"max_instances must be >= 0, got {self.max_instances}")
        level = str(self.log_level).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"unknown log level: {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            max_instances=_env_int("JSONDOC_MAX_INSTANCES", DEFAULT_MAX_INSTANCES),
            escape_strings=_env_flag("JSONDOC_ESCAPE_STRINGS"),
            log_level=os.getenv("JSONDOC_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
        )

    @property
    def bounded(self) -> bool:
        return self.max_instances > 0
