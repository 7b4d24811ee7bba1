"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from dotenv import find_dotenv, load_dotenv

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def load_env_file(path: str | Path | None = None) -> bool:
    """Load a ``.env`` file without overriding variables already in the environment.

    Without ``path`` the nearest ``.env`` at or above the working directory is used.
    """

    return load_dotenv(dotenv_path=path or find_dotenv(usecwd=True), override=False)


def read_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return whichever of the given environment variables are set and not blank."""

    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if value is None or not value.strip():
            continue
        values[name] = value.strip()
    return values


def read_env_var(name: str, default: str | None = None) -> str | None:
    return read_env_vars([name]).get(name, default)
