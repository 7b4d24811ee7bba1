"""Interpreting the descriptor part of a subscription code."""

from __future__ import annotations

from subcode.config.constants import (
    COMMUNITY_MARKER,
    DEFAULT_BRANDING,
    LOCAL_COMMUNITY,
    LOCAL_COMMUNITY_PRE_4_4,
)
from subcode.domain.enums import SubscriptionTier


def normalize_descriptor(descriptor: str | None) -> str:
    """Collapse legacy spellings onto their current form.

    Collections created before 4.4 spell the Community branding with a space.
    """

    if not descriptor:
        return ""
    if descriptor == LOCAL_COMMUNITY_PRE_4_4:
        return LOCAL_COMMUNITY
    return descriptor


def is_community_descriptor(descriptor: str | None) -> bool:
    normalized = normalize_descriptor(descriptor)
    return normalized == LOCAL_COMMUNITY or normalized.endswith(COMMUNITY_MARKER)


def classify_tier(descriptor: str | None) -> SubscriptionTier:
    normalized = normalize_descriptor(descriptor)
    if not normalized.strip() or normalized == DEFAULT_BRANDING:
        return SubscriptionTier.NONE
    if is_community_descriptor(normalized):
        return SubscriptionTier.COMMUNITY
    return SubscriptionTier.ENTERPRISE


def branding_key(descriptor: str | None) -> str:
    """Name of the branding folder to use for ``descriptor``.

    Every Community descriptor (``Acme-LC``, ``Acme-LC-PNG``) shares the
    Local-Community branding; an enterprise descriptor, possibly carrying a
    region or flavor, names its own folder.
    """

    normalized = normalize_descriptor(descriptor)
    if COMMUNITY_MARKER in normalized or normalized == LOCAL_COMMUNITY:
        return LOCAL_COMMUNITY
    if not normalized.strip():
        return DEFAULT_BRANDING
    return normalized


def personalization(descriptor: str | None) -> str:
    """Subscriber name in a Community descriptor: ``Kanga Roo`` for ``Kanga-Roo-LC``."""

    if not descriptor or not descriptor.strip():
        return ""
    parts = descriptor.split("-")
    if "LC" not in parts:
        return ""
    return " ".join(parts[: parts.index("LC")])


__all__ = [
    "branding_key",
    "classify_tier",
    "is_community_descriptor",
    "normalize_descriptor",
    "personalization",
]
