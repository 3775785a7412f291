"""
Tariff lookup by day of week and hour of day.
"""

from datetime import datetime
from decimal import Decimal

from pendulum import DateTime

from .exceptions import ScheduleCoverageError
from .models import DayClass, RateProfile, TariffEntry, WEEKEND_DAYS, to_utc


class RateScheduleResolver:
    """
    Finds the price per hour in effect at a given day and hour.

    Entries are scanned in list order and the first one containing the
    hour wins. Overlapping entries are a configuration defect and are not
    resolved by any priority.
    """

    def resolve(self, day_of_week: int, hour_of_day: int, profile: RateProfile) -> Decimal:
        """
        Resolve the price per hour.

        Args:
            day_of_week: Day of week as returned by ``DateTime.day_of_week``
            hour_of_day: Hour of day, 0..23
            profile: Rate profile of the facility

        Returns:
            Price per hour

        Raises:
            ScheduleCoverageError: If no entry contains the hour
        """
        day_class = DayClass.WEEKEND if day_of_week in WEEKEND_DAYS else DayClass.WEEKDAY
        return self.find_entry(day_class, hour_of_day, profile).price_per_hour

    def resolve_at(self, instant: datetime, profile: RateProfile) -> Decimal:
        """Resolve the price per hour in effect at a (UTC) instant."""
        moment: DateTime = to_utc(instant)
        return self.resolve(moment.day_of_week, moment.hour, profile)

    def find_entry(self, day_class: DayClass, hour_of_day: int, profile: RateProfile) -> TariffEntry:
        for entry in profile.prices_for(day_class):
            if entry.covers(hour_of_day):
                return entry

        raise ScheduleCoverageError(profile.facility_id, day_class.value, hour_of_day)
