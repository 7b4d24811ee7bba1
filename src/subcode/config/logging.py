"""Logging setup for hosts that embed subcode."""

from __future__ import annotations

import logging

from .env import read_env_var
from .errors import InvalidConfigurationError

LOG_LEVEL_ENV = "SUBCODE_LOG_LEVEL"


def resolve_log_level(value: str | None = None) -> int:
    """Translate a level name (or ``SUBCODE_LOG_LEVEL``) into a ``logging`` level."""

    name = value if value is not None else (read_env_var(LOG_LEVEL_ENV) or "INFO")
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise InvalidConfigurationError(f"Unknown log level for {LOG_LEVEL_ENV}: {name}")
    return level


def configure_logging(*, level: int | str | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    ``level`` may be a ``logging`` constant or a level name; when omitted the
    ``SUBCODE_LOG_LEVEL`` environment variable is consulted, falling back to INFO.
    Pass ``force=True`` to reconfigure during tests or specialised entry points.
    """

    resolved = level if isinstance(level, int) else resolve_log_level(level)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
