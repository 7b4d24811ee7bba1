from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.support.codes import AFTER_LEGACY_CUTOFF, BEFORE_LEGACY_CUTOFF, make_clock

if TYPE_CHECKING:
    from subcode.domain.expiration import Clock


@pytest.fixture
def before_cutoff() -> Clock:
    return make_clock(BEFORE_LEGACY_CUTOFF)


@pytest.fixture
def after_cutoff() -> Clock:
    return make_clock(AFTER_LEGACY_CUTOFF)
