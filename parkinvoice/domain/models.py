"""
Domain models for parking sessions, tariffs and invoices.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import FrozenSet, List

import pendulum
from pendulum import DateTime

from .exceptions import ScheduleCoverageError

HOURS_PER_DAY = 24


class DayClass(str, Enum):
    """Which tariff list applies on a given day."""
    WEEKDAY = "weekday"
    WEEKEND = "weekend"


WEEKEND_DAYS = (pendulum.SATURDAY, pendulum.SUNDAY)


def to_utc(value: datetime) -> DateTime:
    """
    Normalize a datetime to a UTC pendulum DateTime.

    Naive datetimes are interpreted as UTC.
    """
    return pendulum.instance(value, tz="UTC").in_timezone("UTC")


def classify_day(instant: DateTime) -> DayClass:
    """Classify the day of an instant as weekday or weekend."""
    if instant.day_of_week in WEEKEND_DAYS:
        return DayClass.WEEKEND
    return DayClass.WEEKDAY


@dataclass(frozen=True)
class Session:
    """
    A single parking session of one customer at one facility.

    Start and end are stored in UTC. A session whose end is not after its
    start is accepted here and priced at zero by the calculator.
    """
    customer_id: str
    facility_id: str
    start: DateTime
    end: DateTime
    session_id: str | None = None

    def __post_init__(self):
        if not self.customer_id:
            raise ValueError("Session customer_id must not be empty")
        object.__setattr__(self, "start", to_utc(self.start))
        object.__setattr__(self, "end", to_utc(self.end))

    def describe(self) -> str:
        """Short identification used in warnings."""
        label = f"session {self.session_id}" if self.session_id else "session"
        return (
            f"{label} (customer '{self.customer_id}', "
            f"facility '{self.facility_id}')"
        )


@dataclass(frozen=True)
class TariffEntry:
    """
    Price per hour for the hours ``[start_hour, end_hour)`` of a day.
    """
    start_hour: int
    end_hour: int
    price_per_hour: Decimal

    def __post_init__(self):
        if not 0 <= self.start_hour <= 23:
            raise ValueError(f"start_hour must be between 0 and 23, got {self.start_hour}")
        if not 1 <= self.end_hour <= HOURS_PER_DAY:
            raise ValueError(f"end_hour must be between 1 and 24, got {self.end_hour}")
        if self.start_hour >= self.end_hour:
            raise ValueError(
                f"start_hour {self.start_hour} must be before end_hour {self.end_hour}"
            )
        price = Decimal(str(self.price_per_hour))
        if price < 0:
            raise ValueError(f"price_per_hour must not be negative, got {price}")
        object.__setattr__(self, "price_per_hour", price)

    def covers(self, hour: int) -> bool:
        """Check if this entry applies to the given hour of day."""
        return self.start_hour <= hour < self.end_hour


@dataclass
class RateProfile:
    """
    Weekday and weekend tariff lists of one parking facility.

    Each list is expected to cover hours 0..23 without gaps or overlaps.
    That is not enforced on construction; see ``coverage_problems``.
    """
    facility_id: str
    weekday_prices: List[TariffEntry] = field(default_factory=list)
    weekend_prices: List[TariffEntry] = field(default_factory=list)

    def prices_for(self, day_class: DayClass) -> List[TariffEntry]:
        """Get the tariff list for a day class."""
        if day_class is DayClass.WEEKEND:
            return self.weekend_prices
        return self.weekday_prices

    def coverage_problems(self) -> List[str]:
        """
        Describe every uncovered and every doubly covered hour.

        Returns:
            Human readable problems, empty for a well-formed profile
        """
        problems: List[str] = []

        for day_class in DayClass:
            entries = self.prices_for(day_class)
            for hour in range(HOURS_PER_DAY):
                matches = sum(1 for entry in entries if entry.covers(hour))
                if matches == 0:
                    problems.append(f"{day_class.value} hour {hour} is not covered")
                elif matches > 1:
                    problems.append(
                        f"{day_class.value} hour {hour} is covered by {matches} entries"
                    )

        return problems

    def validate_coverage(self) -> None:
        """
        Ensure both tariff lists cover every hour of the day.

        Raises:
            ScheduleCoverageError: For the first uncovered hour found
        """
        for day_class in DayClass:
            entries = self.prices_for(day_class)
            for hour in range(HOURS_PER_DAY):
                if not any(entry.covers(hour) for entry in entries):
                    raise ScheduleCoverageError(self.facility_id, day_class.value, hour)


@dataclass(frozen=True)
class Customer:
    """A registered customer and the facilities they have a contract with."""
    id: str
    contracted_facility_ids: FrozenSet[str] = frozenset()

    def is_contracted(self, facility_id: str) -> bool:
        return facility_id in self.contracted_facility_ids


@dataclass(frozen=True)
class Invoice:
    """Total amount owed by one customer at one facility."""
    facility_id: str
    customer_id: str
    amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class SegmentCharge:
    """Price of one billed hour, starting at ``start``."""
    start: DateTime
    day_class: DayClass
    hour: int
    price: Decimal


@dataclass
class SessionCost:
    """
    Result of pricing one session: the amount plus any data warnings.
    """
    amount: Decimal
    warnings: List[str] = field(default_factory=list)
    segments: List[SegmentCharge] = field(default_factory=list)
