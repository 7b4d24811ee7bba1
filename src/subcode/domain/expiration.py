"""Decoding the expiration date carried by a subscription code."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from typing import Protocol

from subcode.config.constants import (
    DATE_FIELD_WIDTH,
    DATE_NUMBER_OFFSET,
    EPOCH,
    INVALID_EXPIRATION,
    LEGACY_EXPIRATION,
    LOCAL_COMMUNITY,
    RETIRED_NO_EXPIRY_YEAR,
)
from subcode.domain.code import ParsedCode, is_checksum_correct


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def utcnow() -> datetime:
    return datetime.now(UTC)


def tomorrow(*, clock: Clock = utcnow) -> datetime:
    return clock() + timedelta(days=1)


def decode_expiration(code: str | None, parsed: ParsedCode) -> datetime:
    """Return the expiration encoded in ``code``, or ``INVALID_EXPIRATION``."""

    if code is None:
        return INVALID_EXPIRATION
    # Deprecated marker code from before the checksum scheme.
    if code == LOCAL_COMMUNITY:
        return LEGACY_EXPIRATION
    if not is_checksum_correct(parsed):
        return INVALID_EXPIRATION

    expiration = EPOCH + timedelta(days=parsed.date_part + DATE_NUMBER_OFFSET)
    # At one time some subscriptions never ended; those have been retired.
    if expiration.year == RETIRED_NO_EXPIRY_YEAR:
        return LEGACY_EXPIRATION
    return expiration


def encode_expiration(day: date) -> int:
    """Return the date field that decodes to ``day``."""

    date_part = (day - EPOCH.date()).days - DATE_NUMBER_OFFSET
    if not 0 < date_part < 10**DATE_FIELD_WIDTH:
        raise ValueError(f"Cannot encode {day.isoformat()} in a date field")
    return date_part


def is_valid_expiration(expiration: datetime) -> bool:
    return expiration != INVALID_EXPIRATION


def is_expired(expiration: datetime, *, clock: Clock = utcnow) -> bool:
    if not is_valid_expiration(expiration):
        return True
    return expiration < clock()


__all__ = [
    "Clock",
    "decode_expiration",
    "encode_expiration",
    "is_expired",
    "is_valid_expiration",
    "tomorrow",
    "utcnow",
]
