"""Subscription code domain: parsing, classification and the entitlement record."""

from __future__ import annotations

from .code import (
    ParsedCode,
    build_code,
    compute_checksum,
    is_checksum_correct,
    looks_incomplete,
    parse_code,
    redact_code,
)
from .descriptor import branding_key, classify_tier, is_community_descriptor, normalize_descriptor
from .enums import IntegrityLabel, SubscriptionTier
from .expiration import Clock, decode_expiration, encode_expiration, is_expired
from .subscription import Subscription

__all__ = [
    "Clock",
    "IntegrityLabel",
    "ParsedCode",
    "Subscription",
    "SubscriptionTier",
    "branding_key",
    "build_code",
    "classify_tier",
    "compute_checksum",
    "decode_expiration",
    "encode_expiration",
    "is_checksum_correct",
    "is_community_descriptor",
    "is_expired",
    "looks_incomplete",
    "normalize_descriptor",
    "parse_code",
    "redact_code",
]
