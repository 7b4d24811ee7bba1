"""Fixed values shared by every subscription code, past and present."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Final

# Day zero of the spreadsheet that generates codes.
EPOCH: Final[datetime] = datetime(1899, 12, 30, tzinfo=UTC)
# Date fields are stored relative to this day number so they fit in six digits.
DATE_NUMBER_OFFSET: Final[int] = 40000

DATE_FIELD_WIDTH: Final[int] = 6
CHECKSUM_FIELD_WIDTH: Final[int] = 4
CHECKSUM_MODULUS: Final[int] = 10000

REDACTED_SUFFIX: Final[str] = "-***-***"

DEFAULT_BRANDING: Final[str] = "Default"
LOCAL_COMMUNITY: Final[str] = "Local-Community"
LOCAL_COMMUNITY_PRE_4_4: Final[str] = "Local Community"
COMMUNITY_MARKER: Final[str] = "-LC"

# Every deprecated Community code, and every retired "never expires" code, ends here.
LEGACY_EXPIRATION: Final[datetime] = datetime(2025, 7, 1, tzinfo=UTC)
RETIRED_NO_EXPIRY_YEAR: Final[int] = 3000

# Replacement for collections that only carry the legacy Local-Community branding.
LEGACY_CODE: Final[str] = "Legacy-LC-005839-2533"  # expires 2025-07-01

# Sentinel for "never valid"; compares before any real date.
INVALID_EXPIRATION: Final[datetime] = datetime.min.replace(tzinfo=UTC)
