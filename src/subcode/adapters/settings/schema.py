"""Pydantic model describing the subscription fields of a settings file."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from subcode.config.constants import DEFAULT_BRANDING


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class SubscriptionSettingsPayload(BaseModel):
    """``<SubscriptionCode>`` and ``<BrandingProjectName>`` as the store hands them over."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    subscription_code: str | None = Field(default=None, alias="SubscriptionCode")
    branding_project_name: str = Field(default=DEFAULT_BRANDING, alias="BrandingProjectName")

    _normalize_code = field_validator("subscription_code", mode="before")(_blank_to_none)

    @field_validator("branding_project_name", mode="before")
    @classmethod
    def _default_branding(cls, value: object) -> object:
        normalized = _blank_to_none(value)
        return DEFAULT_BRANDING if normalized is None else normalized


SettingsPayloadInput = SubscriptionSettingsPayload | Mapping[str, object]
