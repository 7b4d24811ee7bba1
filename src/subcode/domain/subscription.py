"""The entitlement record derived from a subscription code."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from subcode.config.constants import (
    DEFAULT_BRANDING,
    LEGACY_CODE,
    LOCAL_COMMUNITY,
    REDACTED_SUFFIX,
)
from subcode.domain import code as codes
from subcode.domain import descriptor as descriptors
from subcode.domain import expiration as expirations
from subcode.domain.code import EMPTY_CODE, ParsedCode, parse_code
from subcode.domain.descriptor import classify_tier, is_community_descriptor, normalize_descriptor
from subcode.domain.enums import IntegrityLabel, SubscriptionTier
from subcode.domain.expiration import decode_expiration, tomorrow, utcnow

if TYPE_CHECKING:
    from datetime import datetime

    from subcode.domain.expiration import Clock


log = getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True, slots=True)
class Subscription:
    """Immutable view of what a subscription code entitles the user to.

    Everything except ``editing_published_book`` normally derives from ``code``;
    use the classmethods rather than the constructor. ``code`` is left out of
    ``repr`` so instances can be logged; use :meth:`redacted_code` for display.
    """

    code: str | None = field(repr=False)
    descriptor: str
    expiration: datetime
    tier: SubscriptionTier
    editing_published_book: bool = False
    _parsed: ParsedCode = field(default=EMPTY_CODE, repr=False, compare=False)

    @classmethod
    def from_code(cls, code: str | None) -> Subscription:
        parsed = parse_code(code)
        return cls(
            code=code,
            descriptor=parsed.descriptor,
            expiration=decode_expiration(code, parsed),
            tier=classify_tier(parsed.descriptor),
            _parsed=parsed,
        )

    @classmethod
    def from_settings(
        cls,
        code: str | None,
        branding_project_name: str | None = DEFAULT_BRANDING,
        *,
        editing_published_book: bool = False,
        clock: Clock = utcnow,
    ) -> Subscription:
        """Build a subscription from what a collection's settings file stores.

        The code alone is not always enough:

        * collections predating codes store only a ``Local-Community`` branding;
        * books downloaded for editing carry a redacted code, and should keep the
          tier and branding they were published with even if that has expired.
        """

        branding = normalize_descriptor(branding_project_name) or DEFAULT_BRANDING

        if (
            editing_published_book
            and branding == DEFAULT_BRANDING
            and code == LOCAL_COMMUNITY + REDACTED_SUFFIX
        ):
            log.debug("Migrating downloaded Local-Community book to the legacy code")
            code = LEGACY_CODE
        if _is_blank(code) and branding == LOCAL_COMMUNITY:
            log.debug("Migrating Local-Community collection to the legacy code")
            code = LEGACY_CODE

        if editing_published_book:
            return cls._for_published_book(code, branding, clock=clock)
        return cls.from_code(code)

    @classmethod
    def _for_published_book(
        cls,
        code: str | None,
        branding: str,
        *,
        clock: Clock,
    ) -> Subscription:
        # The checksum is not consulted: published books only carry redacted codes.
        effective_code = branding + REDACTED_SUFFIX if _is_blank(code) else code
        parsed = parse_code(effective_code)

        if _is_blank(code) and branding == DEFAULT_BRANDING:
            tier = SubscriptionTier.NONE
        elif is_community_descriptor(parsed.descriptor) or branding == LOCAL_COMMUNITY:
            tier = SubscriptionTier.COMMUNITY
        else:
            tier = SubscriptionTier.ENTERPRISE

        expiration = max(decode_expiration(effective_code, parsed), tomorrow(clock=clock))
        log.debug(
            "Editing published book: descriptor=%s, tier=%s, expiration=%s",
            parsed.descriptor,
            tier.name,
            expiration.date(),
        )
        return cls(
            code=effective_code,
            descriptor=parsed.descriptor,
            expiration=expiration,
            tier=tier,
            editing_published_book=True,
            _parsed=parsed,
        )

    @classmethod
    def from_legacy_branding(cls, branding: str | None) -> Subscription:
        # Local-Community is the only legacy branding that still means anything.
        if normalize_descriptor(branding) == LOCAL_COMMUNITY:
            return cls.from_code(LOCAL_COMMUNITY)
        return cls.from_code("")

    @classmethod
    def for_unit_test(
        cls,
        *,
        tier: SubscriptionTier = SubscriptionTier.NONE,
        descriptor: str = "",
        expiration: datetime | None = None,
        clock: Clock = utcnow,
    ) -> Subscription:
        """Skip code parsing entirely and set the fields callers depend on.

        If a test breaks because a subscription expired, build it with this.
        """

        return cls(
            code="",
            descriptor=descriptor,
            expiration=expiration if expiration is not None else tomorrow(clock=clock),
            tier=tier,
        )

    @property
    def branding_key(self) -> str:
        return descriptors.branding_key(self.descriptor)

    @property
    def personalization(self) -> str:
        return descriptors.personalization(self.descriptor)

    @property
    def has_active_subscription(self) -> bool:
        """True for any paid tier; combine with :meth:`is_expired` where it matters."""

        return self.tier in (SubscriptionTier.COMMUNITY, SubscriptionTier.ENTERPRISE)

    def is_expired(self, *, clock: Clock = utcnow) -> bool:
        if self.code is None:
            return True
        return expirations.is_expired(self.expiration, clock=clock)

    def looks_incomplete(self) -> bool:
        return codes.looks_incomplete(self.code)

    def is_checksum_correct(self) -> bool:
        if self.code is None:
            return False
        return codes.is_checksum_correct(self._parsed)

    def integrity_label(self) -> IntegrityLabel:
        # Incompleteness wins so a half-typed code is not reported as invalid.
        if _is_blank(self.code):
            return IntegrityLabel.NONE
        if self.looks_incomplete():
            return IntegrityLabel.INCOMPLETE
        if not self.is_checksum_correct():
            return IntegrityLabel.INVALID
        return IntegrityLabel.OK

    def redacted_code(self) -> str:
        if not self.code:
            return ""
        return self.descriptor + REDACTED_SUFFIX

    def is_different(self, code: str | None) -> bool:
        if not self.code and not code:
            return False
        return self.code != code


__all__ = ["Subscription"]
