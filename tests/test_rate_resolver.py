"""
Tests for the tariff lookup.
"""

from decimal import Decimal

import pendulum
import pytest

from parkinvoice.domain.exceptions import ScheduleCoverageError
from parkinvoice.domain.models import RateProfile, TariffEntry
from parkinvoice.domain.rate_resolver import RateScheduleResolver


class TestRateScheduleResolver:
    """Tests for RateScheduleResolver."""

    def test_weekday_hours(self, reference_profile):
        resolver = RateScheduleResolver()

        assert resolver.resolve(pendulum.THURSDAY, 0, reference_profile) == Decimal("0.50")
        assert resolver.resolve(pendulum.THURSDAY, 6, reference_profile) == Decimal("0.50")
        assert resolver.resolve(pendulum.THURSDAY, 7, reference_profile) == Decimal("2.50")
        assert resolver.resolve(pendulum.MONDAY, 17, reference_profile) == Decimal("2.50")
        assert resolver.resolve(pendulum.FRIDAY, 18, reference_profile) == Decimal("1.50")
        assert resolver.resolve(pendulum.FRIDAY, 23, reference_profile) == Decimal("1.50")

    def test_weekend_days_use_weekend_list(self, reference_profile):
        resolver = RateScheduleResolver()

        assert resolver.resolve(pendulum.SATURDAY, 0, reference_profile) == Decimal("1.80")
        assert resolver.resolve(pendulum.SUNDAY, 10, reference_profile) == Decimal("2.20")
        assert resolver.resolve(pendulum.SUNDAY, 23, reference_profile) == Decimal("1.40")

    def test_resolve_at_instant(self, reference_profile):
        resolver = RateScheduleResolver()

        thursday_morning = pendulum.datetime(2025, 4, 24, 10, 1)
        sunday_night = pendulum.datetime(2025, 4, 20, 22, 59)

        assert resolver.resolve_at(thursday_morning, reference_profile) == Decimal("2.50")
        assert resolver.resolve_at(sunday_night, reference_profile) == Decimal("1.40")

    def test_first_matching_entry_wins(self):
        """Overlapping entries are resolved by list order only."""
        profile = RateProfile(
            facility_id="pf009",
            weekday_prices=[TariffEntry(0, 12, Decimal("1.00")), TariffEntry(6, 24, Decimal("9.00"))],
            weekend_prices=[TariffEntry(0, 24, Decimal("1.00"))],
        )

        assert RateScheduleResolver().resolve(pendulum.MONDAY, 8, profile) == Decimal("1.00")

    def test_gap_raises_schedule_coverage_error(self):
        profile = RateProfile(
            facility_id="pf009",
            weekday_prices=[TariffEntry(0, 24, Decimal("1.00"))],
            weekend_prices=[TariffEntry(0, 20, Decimal("1.00"))],
        )

        with pytest.raises(ScheduleCoverageError) as exc_info:
            RateScheduleResolver().resolve(pendulum.SATURDAY, 21, profile)

        error = exc_info.value
        assert error.facility_id == "pf009"
        assert error.day_class == "weekend"
        assert error.hour == 21
        assert "pf009" in str(error)

    def test_every_hour_of_the_week_resolves(self, reference_profile):
        resolver = RateScheduleResolver()
        days = [
            pendulum.MONDAY, pendulum.TUESDAY, pendulum.WEDNESDAY, pendulum.THURSDAY,
            pendulum.FRIDAY, pendulum.SATURDAY, pendulum.SUNDAY,
        ]

        for day in days:
            for hour in range(24):
                assert resolver.resolve(day, hour, reference_profile) >= 0
