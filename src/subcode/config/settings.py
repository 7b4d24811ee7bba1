"""Stored subscription settings supplied through the environment."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_BRANDING
from .env import load_env_file, read_env_vars

SUBSCRIPTION_CODE_ENV = "SUBCODE_SUBSCRIPTION_CODE"
BRANDING_PROJECT_NAME_ENV = "SUBCODE_BRANDING_PROJECT_NAME"


@dataclass(frozen=True, slots=True)
class SettingsConfig:
    """What the settings store would hand over: the raw code and legacy branding."""

    subscription_code: str | None = None
    branding_project_name: str = DEFAULT_BRANDING


def get_settings_config(*, env_file: bool = True) -> SettingsConfig:
    if env_file:
        load_env_file()
    values = read_env_vars((SUBSCRIPTION_CODE_ENV, BRANDING_PROJECT_NAME_ENV))
    return SettingsConfig(
        subscription_code=values.get(SUBSCRIPTION_CODE_ENV),
        branding_project_name=values.get(BRANDING_PROJECT_NAME_ENV, DEFAULT_BRANDING),
    )
