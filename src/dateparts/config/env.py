"""Environment variable loaders for configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Final

from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR: Final[str] = "DATEPARTS_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


@dataclass(frozen=True, slots=True)
class CliConfig:
    log_level: int = DEFAULT_LOG_LEVEL


def _parse_log_level(value: str) -> int:
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level for {LOG_LEVEL_ENV_VAR}: {value!r}")
    return level


def get_cli_config() -> CliConfig:
    """Read CLI settings from the environment, falling back to defaults when unset or blank."""

    raw_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if raw_level is None or not raw_level.strip():
        return CliConfig()
    return CliConfig(log_level=_parse_log_level(raw_level))
