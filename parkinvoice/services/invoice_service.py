"""
Application service for computing parking invoices.

The service loads rate profiles, sessions and customers through small
source protocols and delegates pricing to the domain-level
``SessionCostCalculator`` and grouping to ``InvoiceAggregator``. Invoices are
computed on every call and never stored.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Protocol, Tuple

from ..domain.cost_calculator import SessionCostCalculator
from ..domain.exceptions import UnknownFacility
from ..domain.invoice_aggregator import InvoiceAggregator
from ..domain.models import Invoice, RateProfile, Session, SessionCost
from .customer_policy import AdmitAllPolicy, CustomerPolicy, CustomerSource, customer_advisories

logger = logging.getLogger(__name__)


class SessionSource(Protocol):
    """Protocol describing the session lookup needed by the service."""

    def get_sessions(self, facility_id: str) -> List[Session]:
        """Return all sessions of a facility (empty list if none)."""


class RateProfileSource(Protocol):
    """Protocol describing the rate profile lookup needed by the service."""

    def get_rate_profile(self, facility_id: str) -> RateProfile | None:
        """Return the facility's rate profile, or None if unknown."""


class InvoiceService:
    """
    Orchestrates facility validation, session pricing and aggregation.

    Dependency inversion toward protocols lets the in-memory repositories,
    the seed-data repository or test stubs be plugged in.
    """

    def __init__(
        self,
        session_source: SessionSource,
        rate_profile_source: RateProfileSource,
        customer_source: CustomerSource,
        calculator: SessionCostCalculator | None = None,
        customer_policy: CustomerPolicy | None = None,
    ) -> None:
        self._sessions = session_source
        self._rate_profiles = rate_profile_source
        self._customers = customer_source
        self._calculator = calculator or SessionCostCalculator()
        self._aggregator = InvoiceAggregator(customer_policy or AdmitAllPolicy())

    def get_invoices(self, facility_id: str) -> List[Invoice]:
        """
        Compute one invoice per customer with sessions at the facility.

        Raises:
            UnknownFacility: If the facility has no rate profile
            ScheduleCoverageError: If a session hits an uncovered hour
        """
        profile = self._load_profile(facility_id)
        sessions = self._facility_sessions(facility_id)

        charges: List[Tuple[str, Decimal]] = [
            (session.customer_id, self._calculator.calculate(session, profile).amount)
            for session in sessions
        ]

        return self._aggregator.aggregate(facility_id, charges)

    def get_invoice(self, facility_id: str, customer_id: str) -> Invoice:
        """
        Compute the invoice of a single customer at the facility.

        Customer problems are only logged; a customer without sessions gets
        a zero-amount invoice.

        Raises:
            UnknownFacility: If the facility has no rate profile
            ScheduleCoverageError: If a session hits an uncovered hour
        """
        profile = self._load_profile(facility_id)

        for message in customer_advisories(facility_id, customer_id, self._customers):
            logger.warning("%s", message)

        total = Decimal("0")
        for session in self._facility_sessions(facility_id):
            if session.customer_id == customer_id:
                total += self._calculator.calculate(session, profile).amount

        return Invoice(facility_id=facility_id, customer_id=customer_id, amount=total)

    def quote(self, facility_id: str, session: Session) -> SessionCost:
        """Price an ad-hoc session against a facility's rate profile."""
        profile = self._load_profile(facility_id)
        return self._calculator.calculate(session, profile)

    def _load_profile(self, facility_id: str) -> RateProfile:
        profile = self._rate_profiles.get_rate_profile(facility_id)
        if profile is None:
            raise UnknownFacility(facility_id)
        return profile

    def _facility_sessions(self, facility_id: str) -> List[Session]:
        """
        Fetch the facility's sessions, dropping any that belong elsewhere.

        A source is expected to filter by facility already; this keeps
        invoices correct when it does not.
        """
        sessions = self._sessions.get_sessions(facility_id) or []
        foreign = [s for s in sessions if s.facility_id != facility_id]
        if foreign:
            logger.warning(
                "Ignoring %d session(s) of other facilities returned for '%s'",
                len(foreign),
                facility_id,
            )
        return [s for s in sessions if s.facility_id == facility_id]
