"""Public interface for the settings-store adapter."""

from __future__ import annotations

from .schema import SettingsPayloadInput, SubscriptionSettingsPayload
from .translator import (
    settings_for_publication,
    subscription_from_config,
    subscription_from_settings,
)

__all__ = [
    "SettingsPayloadInput",
    "SubscriptionSettingsPayload",
    "settings_for_publication",
    "subscription_from_config",
    "subscription_from_settings",
]
