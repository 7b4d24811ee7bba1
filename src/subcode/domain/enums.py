"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class SubscriptionTier(IntEnum):
    """Entitlement level unlocked by a subscription.

    Tiers are ordered: a higher tier can use every feature of the lower ones.
    """

    NONE = 0
    COMMUNITY = 1
    ENTERPRISE = 2

    def includes(self, other: SubscriptionTier) -> bool:
        return self >= other


class IntegrityLabel(StrEnum):
    """Coarse validation state of a code, for display next to an input field."""

    NONE = "none"
    INCOMPLETE = "incomplete"
    INVALID = "invalid"
    OK = "ok"
