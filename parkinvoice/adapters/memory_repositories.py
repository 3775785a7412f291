"""
In-memory data sources for sessions, rate profiles and customers.
"""

from typing import Dict, Iterable, List

from ..domain.models import Customer, RateProfile, Session


class InMemorySessionRepository:
    """Session store keyed by nothing; filtered on read."""

    def __init__(self, sessions: Iterable[Session] = ()):
        self._sessions: List[Session] = list(sessions)

    def add_session(self, session: Session) -> None:
        self._sessions.append(session)

    def get_sessions(self, facility_id: str) -> List[Session]:
        """Return the sessions of a facility in insertion order."""
        return [s for s in self._sessions if s.facility_id == facility_id]

    def __len__(self) -> int:
        return len(self._sessions)


class InMemoryFacilityRepository:
    """Rate profiles keyed by facility id."""

    def __init__(self, profiles: Iterable[RateProfile] = ()):
        self._profiles: Dict[str, RateProfile] = {p.facility_id: p for p in profiles}

    def add_rate_profile(self, profile: RateProfile) -> None:
        self._profiles[profile.facility_id] = profile

    def get_rate_profile(self, facility_id: str) -> RateProfile | None:
        return self._profiles.get(facility_id)

    def list_rate_profiles(self) -> List[RateProfile]:
        return list(self._profiles.values())


class InMemoryCustomerRepository:
    """Customers keyed by id."""

    def __init__(self, customers: Iterable[Customer] = ()):
        self._customers: Dict[str, Customer] = {c.id: c for c in customers}

    def add_customer(self, customer: Customer) -> None:
        self._customers[customer.id] = customer

    def get_customer(self, customer_id: str) -> Customer | None:
        return self._customers.get(customer_id)

    def list_customers(self) -> List[Customer]:
        return list(self._customers.values())
