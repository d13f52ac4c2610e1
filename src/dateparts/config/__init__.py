"""Application configuration helpers."""

from __future__ import annotations

from .env import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, CliConfig, get_cli_config
from .errors import ConfigurationError
from .logging import configure_logging

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV_VAR",
    "CliConfig",
    "ConfigurationError",
    "configure_logging",
    "get_cli_config",
]
