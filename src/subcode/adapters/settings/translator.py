"""Translate between settings payloads and :class:`Subscription` values."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from subcode.domain.expiration import utcnow
from subcode.domain.subscription import Subscription

from .schema import SettingsPayloadInput, SubscriptionSettingsPayload

if TYPE_CHECKING:
    from subcode.config.settings import SettingsConfig
    from subcode.domain.expiration import Clock


log = getLogger(__name__)


def _ensure_payload(payload: SettingsPayloadInput) -> SubscriptionSettingsPayload:
    if isinstance(payload, SubscriptionSettingsPayload):
        return payload
    return SubscriptionSettingsPayload.model_validate(payload)


def subscription_from_settings(
    payload: SettingsPayloadInput,
    *,
    editing_published_book: bool = False,
    clock: Clock = utcnow,
) -> Subscription:
    settings = _ensure_payload(payload)
    subscription = Subscription.from_settings(
        settings.subscription_code,
        settings.branding_project_name,
        editing_published_book=editing_published_book,
        clock=clock,
    )
    log.debug(
        "Loaded subscription %s: tier=%s, integrity=%s",
        subscription.redacted_code() or "<none>",
        subscription.tier.name,
        subscription.integrity_label(),
    )
    return subscription


def subscription_from_config(config: SettingsConfig, *, clock: Clock = utcnow) -> Subscription:
    return subscription_from_settings(
        SubscriptionSettingsPayload(
            subscription_code=config.subscription_code,
            branding_project_name=config.branding_project_name,
        ),
        clock=clock,
    )


def settings_for_publication(subscription: Subscription) -> SubscriptionSettingsPayload:
    """Settings to embed in a published book: never the real date or checksum."""

    return SubscriptionSettingsPayload(
        subscription_code=subscription.redacted_code() or None,
        branding_project_name=subscription.branding_key,
    )
