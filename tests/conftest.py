"""
Shared fixtures: the reference rate table used throughout the tests.
"""

from decimal import Decimal

import pytest

from parkinvoice.domain.models import RateProfile, TariffEntry


def build_reference_profile(facility_id: str = "pf001") -> RateProfile:
    """Weekday and weekend tariffs the invoice amounts below are based on."""
    return RateProfile(
        facility_id=facility_id,
        weekday_prices=[
            TariffEntry(0, 7, Decimal("0.50")),
            TariffEntry(7, 18, Decimal("2.50")),
            TariffEntry(18, 24, Decimal("1.50")),
        ],
        weekend_prices=[
            TariffEntry(0, 10, Decimal("1.80")),
            TariffEntry(10, 22, Decimal("2.20")),
            TariffEntry(22, 24, Decimal("1.40")),
        ],
    )


@pytest.fixture
def reference_profile() -> RateProfile:
    return build_reference_profile()
