"""
Pricing of a single parking session.

Pure domain logic: a session and a rate profile in, an amount out. No
repositories or I/O are involved, so sessions can be priced independently
of each other.
"""

import logging
from decimal import Decimal
from typing import List

from .models import RateProfile, SegmentCharge, Session, SessionCost, classify_day
from .rate_resolver import RateScheduleResolver

logger = logging.getLogger(__name__)


class SessionCostCalculator:
    """
    Calculates the charge of a parking session.

    Algorithm:
    1. Reject sessions whose end is not after their start (amount 0, warning)
    2. Split the session into one-hour billing segments anchored at its start
    3. Price each segment at the tariff in effect when the segment starts
    4. Sum the segment prices

    Every segment, the last partial one included, is charged as a full hour.
    """

    def __init__(self, resolver: RateScheduleResolver | None = None):
        self.resolver = resolver or RateScheduleResolver()

    def calculate(self, session: Session, profile: RateProfile) -> SessionCost:
        """
        Price one session.

        Args:
            session: The parking session (UTC instants)
            profile: Rate profile of the session's facility

        Returns:
            SessionCost with total amount, warnings and priced segments

        Raises:
            ScheduleCoverageError: If a segment starts in an hour the profile
                does not cover
        """
        if session.end <= session.start:
            warning = (
                f"non-positive duration: {session.describe()} ends at "
                f"{session.end.to_iso8601_string()}, not after its start "
                f"{session.start.to_iso8601_string()}"
            )
            logger.warning("Cannot calculate amount, %s", warning)
            return SessionCost(amount=Decimal("0"), warnings=[warning])

        segments = self._price_segments(session, profile)
        total = sum((segment.price for segment in segments), Decimal("0"))

        return SessionCost(amount=total, segments=segments)

    def _price_segments(self, session: Session, profile: RateProfile) -> List[SegmentCharge]:
        """
        Walk the session hour by hour from its start.

        Segment boundaries are ``start + k hours``, not clock hours.
        """
        segments: List[SegmentCharge] = []
        cursor = session.start

        while cursor < session.end:
            price = self.resolver.resolve(cursor.day_of_week, cursor.hour, profile)
            segments.append(
                SegmentCharge(
                    start=cursor,
                    day_class=classify_day(cursor),
                    hour=cursor.hour,
                    price=price,
                )
            )
            cursor = cursor.add(hours=1)

        return segments
