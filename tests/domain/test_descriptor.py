from __future__ import annotations

import pytest

from subcode.domain.descriptor import (
    branding_key,
    classify_tier,
    is_community_descriptor,
    normalize_descriptor,
    personalization,
)
from subcode.domain.enums import SubscriptionTier


@pytest.mark.parametrize(
    ("descriptor", "tier"),
    [
        (None, SubscriptionTier.NONE),
        ("", SubscriptionTier.NONE),
        ("   ", SubscriptionTier.NONE),
        ("Default", SubscriptionTier.NONE),
        ("Local-Community", SubscriptionTier.COMMUNITY),
        ("Local Community", SubscriptionTier.COMMUNITY),
        ("Something-LC", SubscriptionTier.COMMUNITY),
        ("Legacy-LC", SubscriptionTier.COMMUNITY),
        ("Foo-Bar", SubscriptionTier.ENTERPRISE),
        ("PNG-RISE", SubscriptionTier.ENTERPRISE),
        ("Acme-LC-PNG", SubscriptionTier.ENTERPRISE),
        ("Local-Community-Lae", SubscriptionTier.ENTERPRISE),
    ],
)
def test_classify_tier(descriptor: str | None, tier: SubscriptionTier) -> None:
    assert classify_tier(descriptor) is tier


def test_normalize_descriptor_maps_pre_4_4_spelling() -> None:
    assert normalize_descriptor("Local Community") == "Local-Community"
    assert normalize_descriptor("Acme") == "Acme"
    assert normalize_descriptor(None) == ""


def test_is_community_descriptor_uses_one_rule_for_all_spellings() -> None:
    assert is_community_descriptor("Local Community")
    assert is_community_descriptor("Local-Community")
    assert is_community_descriptor("Kanga-LC")
    assert not is_community_descriptor("Kanga-LCX")
    assert not is_community_descriptor("")


@pytest.mark.parametrize(
    ("descriptor", "key"),
    [
        ("", "Default"),
        (" ", "Default"),
        ("Acme-LC", "Local-Community"),
        ("Acme-LC-PNG", "Local-Community"),
        ("Local Community", "Local-Community"),
        ("PNG-RISE", "PNG-RISE"),
        ("Acme-Literacy-Lae", "Acme-Literacy-Lae"),
    ],
)
def test_branding_key(descriptor: str, key: str) -> None:
    assert branding_key(descriptor) == key


@pytest.mark.parametrize(
    ("descriptor", "expected"),
    [
        ("Kanga-Roo-LC", "Kanga Roo"),
        ("Kanga-LC-PNG", "Kanga"),
        ("LC-Kanga", ""),
        ("Acme-Literacy", ""),
        ("", ""),
    ],
)
def test_personalization(descriptor: str, expected: str) -> None:
    assert personalization(descriptor) == expected


def test_tiers_are_ordered() -> None:
    assert SubscriptionTier.ENTERPRISE.includes(SubscriptionTier.COMMUNITY)
    assert SubscriptionTier.COMMUNITY.includes(SubscriptionTier.NONE)
    assert not SubscriptionTier.NONE.includes(SubscriptionTier.COMMUNITY)
