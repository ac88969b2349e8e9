from __future__ import annotations

from datetime import timedelta

import pytest

from datetimetz.codec import DateTimeTzType
from datetimetz.resolvers.fixed import FixedOffsetResolver


@pytest.fixture
def fixed_resolver() -> FixedOffsetResolver:
    """Hermetic resolver: fixed offsets, no tz database lookups."""
    return FixedOffsetResolver(
        {
            "Europe/Helsinki": "+02:00",
            "America/New_York": timedelta(hours=-5),
            "Asia/Kolkata": 330,
        }
    )


@pytest.fixture
def codec(fixed_resolver: FixedOffsetResolver) -> DateTimeTzType:
    return DateTimeTzType(resolver=fixed_resolver)
