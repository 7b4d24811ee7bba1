"""Splitting and checking raw subscription codes.

A code looks like ``PNG-RISE-361769-2630``: a descriptor (which may itself
contain hyphens), a six digit date field and a four digit checksum field.
The checksum only makes casual forgery inconvenient; anyone who reads this
module can mint codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt

from subcode.config.constants import (
    CHECKSUM_FIELD_WIDTH,
    CHECKSUM_MODULUS,
    DATE_FIELD_WIDTH,
    REDACTED_SUFFIX,
)


@dataclass(frozen=True, slots=True)
class ParsedCode:
    """The three fields of a code. Zero means the field is absent or unreadable."""

    descriptor: str = ""
    date_part: int = 0
    checksum_part: int = 0


EMPTY_CODE = ParsedCode()


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def parse_code(code: str | None) -> ParsedCode:
    """Split ``code`` into descriptor, date field and checksum field.

    Anything without a well formed ``-dddddd-dddd`` tail is all descriptor.
    A redacted code (``Foo-***-***``) yields its descriptor with both numbers zeroed.
    """

    if not code:
        return EMPTY_CODE
    if code.endswith(REDACTED_SUFFIX):
        return ParsedCode(descriptor=code.removesuffix(REDACTED_SUFFIX))

    parts = code.split("-")
    if len(parts) < 3:
        return ParsedCode(descriptor=code)

    *leading, date_field, checksum_field = parts
    if (
        len(date_field) == DATE_FIELD_WIDTH
        and len(checksum_field) == CHECKSUM_FIELD_WIDTH
        and _is_digits(date_field)
        and _is_digits(checksum_field)
    ):
        return ParsedCode(
            descriptor="-".join(leading),
            date_part=int(date_field),
            checksum_part=int(checksum_field),
        )
    return ParsedCode(descriptor=code)


def compute_checksum(descriptor: str) -> int:
    # Must match the formula in the code generation sheet.
    return sum(ord(char) * index for index, char in enumerate(descriptor.upper()))


def is_checksum_correct(parsed: ParsedCode) -> bool:
    if not parsed.descriptor or parsed.date_part == 0 or parsed.checksum_part == 0:
        return False
    check = isqrt(parsed.date_part) + compute_checksum(parsed.descriptor)
    return check % CHECKSUM_MODULUS == parsed.checksum_part


def build_code(descriptor: str, date_part: int) -> str:
    """Issue a code for ``descriptor`` whose date field is ``date_part``."""

    if not descriptor:
        raise ValueError("Descriptor must not be empty")
    if not 0 < date_part < 10**DATE_FIELD_WIDTH:
        raise ValueError(f"Date part out of range: {date_part}")
    checksum = (isqrt(date_part) + compute_checksum(descriptor)) % CHECKSUM_MODULUS
    return (
        f"{descriptor}-{date_part:0{DATE_FIELD_WIDTH}d}-{checksum:0{CHECKSUM_FIELD_WIDTH}d}"
    )


def looks_incomplete(code: str | None) -> bool:
    """Guess whether ``code`` is still being typed rather than simply wrong.

    Descriptors are free to contain hyphens and digits, so a descriptor segment
    that happens to look like a date field can fool this check either way.
    """

    if code is None:
        return True
    parts = code.split("-")
    if len(parts) < 3:
        return True

    date_field, checksum_field = parts[-2], parts[-1]
    if not _is_digits(date_field):
        # still typing the descriptor
        return True
    return (
        len(date_field) == DATE_FIELD_WIDTH
        and len(checksum_field) < CHECKSUM_FIELD_WIDTH
        and (not checksum_field or _is_digits(checksum_field))
    )


def redact_code(code: str | None) -> str:
    """Replace the date and checksum of ``code`` with a fixed mask."""

    if not code:
        return ""
    return parse_code(code).descriptor + REDACTED_SUFFIX


__all__ = [
    "EMPTY_CODE",
    "ParsedCode",
    "build_code",
    "compute_checksum",
    "is_checksum_correct",
    "looks_incomplete",
    "parse_code",
    "redact_code",
]
