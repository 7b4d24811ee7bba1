"""Application configuration helpers."""

from __future__ import annotations

from .constants import (
    EPOCH,
    INVALID_EXPIRATION,
    LEGACY_CODE,
    LEGACY_EXPIRATION,
    REDACTED_SUFFIX,
)
from .env import load_env_file, read_env_var, read_env_vars
from .errors import ConfigurationError, InvalidConfigurationError
from .logging import configure_logging, resolve_log_level
from .settings import SettingsConfig, get_settings_config

__all__ = [
    "EPOCH",
    "INVALID_EXPIRATION",
    "LEGACY_CODE",
    "LEGACY_EXPIRATION",
    "REDACTED_SUFFIX",
    "ConfigurationError",
    "InvalidConfigurationError",
    "SettingsConfig",
    "configure_logging",
    "get_settings_config",
    "load_env_file",
    "read_env_var",
    "read_env_vars",
    "resolve_log_level",
]
