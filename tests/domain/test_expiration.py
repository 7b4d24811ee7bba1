from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import pytest

from subcode.config.constants import EPOCH, INVALID_EXPIRATION, LEGACY_CODE, LEGACY_EXPIRATION
from subcode.domain.code import EMPTY_CODE, build_code, parse_code
from subcode.domain.expiration import (
    decode_expiration,
    encode_expiration,
    is_expired,
    is_valid_expiration,
    tomorrow,
)
from tests.support.codes import (
    BEFORE_LEGACY_CUTOFF,
    TAMPERED_CODE,
    VALID_CODE,
    VALID_CODE_EXPIRATION,
    make_clock,
)


def _decode(code: str | None) -> datetime:
    return decode_expiration(code, parse_code(code))


def test_decode_expiration_counts_days_from_epoch() -> None:
    expiration = _decode(VALID_CODE)

    assert expiration == EPOCH + timedelta(days=163456)
    assert expiration == VALID_CODE_EXPIRATION
    assert expiration.tzinfo is UTC


def test_decode_expiration_of_legacy_code() -> None:
    assert _decode(LEGACY_CODE) == LEGACY_EXPIRATION == datetime(2025, 7, 1, tzinfo=UTC)


@pytest.mark.parametrize("code", [None, "", "Foo-Bar", "Foo-Bar-***-***", TAMPERED_CODE])
def test_decode_expiration_is_invalid_without_verified_checksum(code: str | None) -> None:
    assert _decode(code) == INVALID_EXPIRATION


def test_decode_expiration_of_local_community_marker_skips_checksum() -> None:
    assert decode_expiration("Local-Community", EMPTY_CODE) == LEGACY_EXPIRATION


def test_decode_expiration_retires_year_3000_codes() -> None:
    code = build_code("PNG-RISE", encode_expiration(date(3000, 6, 1)))

    assert _decode(code) == LEGACY_EXPIRATION


def test_encode_expiration_inverts_decoding() -> None:
    assert encode_expiration(date(2025, 7, 1)) == 5839
    assert _decode(build_code("Acme", encode_expiration(date(2031, 2, 3)))).date() == date(
        2031, 2, 3
    )


@pytest.mark.parametrize("day", [date(1999, 1, 1), date(2009, 7, 6), date(4999, 1, 1)])
def test_encode_expiration_rejects_dates_outside_field(day: date) -> None:
    with pytest.raises(ValueError, match="Cannot encode"):
        encode_expiration(day)


def test_is_expired_for_invalid_sentinel() -> None:
    assert not is_valid_expiration(INVALID_EXPIRATION)
    assert is_expired(INVALID_EXPIRATION, clock=make_clock(BEFORE_LEGACY_CUTOFF))


def test_is_expired_only_strictly_after_expiration() -> None:
    assert not is_expired(LEGACY_EXPIRATION, clock=make_clock(BEFORE_LEGACY_CUTOFF))
    assert not is_expired(LEGACY_EXPIRATION, clock=make_clock(LEGACY_EXPIRATION))
    assert is_expired(
        LEGACY_EXPIRATION, clock=make_clock(LEGACY_EXPIRATION + timedelta(microseconds=1))
    )


def test_tomorrow_is_one_day_after_clock() -> None:
    assert tomorrow(clock=make_clock(BEFORE_LEGACY_CUTOFF)) == BEFORE_LEGACY_CUTOFF + timedelta(
        days=1
    )
