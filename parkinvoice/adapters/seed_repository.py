"""
Seed data loader backed by a JSON file.

The file provides facilities with their tariff tables, customers and
sessions, so the application can run without any external data service.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import List

import pendulum
from pendulum import DateTime
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..domain.exceptions import DataSourceError
from ..domain.models import Customer, RateProfile, Session, TariffEntry
from .memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryFacilityRepository,
    InMemorySessionRepository,
)

logger = logging.getLogger(__name__)

DEFAULT_SEED_FILE = Path(__file__).parent / "seed_data.json"


class _SeedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TariffEntryRecord(_SeedModel):
    """Tariff entry as stored in the seed file."""
    start_hour: int = Field(alias="startHour")
    end_hour: int = Field(alias="endHour")
    price_per_hour: Decimal = Field(alias="pricePerHour")

    def to_domain(self) -> TariffEntry:
        return TariffEntry(
            start_hour=self.start_hour,
            end_hour=self.end_hour,
            price_per_hour=self.price_per_hour,
        )


class FacilityRecord(_SeedModel):
    """Facility with its weekday and weekend tariff lists."""
    id: str
    weekday_prices: List[TariffEntryRecord] = Field(default_factory=list, alias="weekdayPrices")
    weekend_prices: List[TariffEntryRecord] = Field(default_factory=list, alias="weekendPrices")

    def to_domain(self) -> RateProfile:
        return RateProfile(
            facility_id=self.id,
            weekday_prices=[entry.to_domain() for entry in self.weekday_prices],
            weekend_prices=[entry.to_domain() for entry in self.weekend_prices],
        )


class CustomerRecord(_SeedModel):
    id: str
    contracted_facility_ids: List[str] = Field(default_factory=list, alias="contractedFacilityIds")

    def to_domain(self) -> Customer:
        return Customer(id=self.id, contracted_facility_ids=frozenset(self.contracted_facility_ids))


class SessionRecord(_SeedModel):
    """Parking session; timestamps are ISO 8601, UTC if no offset is given."""
    id: str | None = None
    customer_id: str = Field(alias="customerId")
    facility_id: str = Field(alias="facilityId")
    start: str
    end: str

    @field_validator("start", "end")
    @classmethod
    def validate_timestamp(cls, value: str) -> str:
        """Ensure the value parses as a date-time."""
        try:
            parsed = pendulum.parse(value, tz="UTC")
        except ValueError as exc:
            raise ValueError(f"Invalid timestamp '{value}': {exc}") from exc
        if not isinstance(parsed, DateTime):
            raise ValueError(f"Timestamp '{value}' must include a time of day")
        return value

    def to_domain(self) -> Session:
        return Session(
            customer_id=self.customer_id,
            facility_id=self.facility_id,
            start=pendulum.parse(self.start, tz="UTC"),
            end=pendulum.parse(self.end, tz="UTC"),
            session_id=self.id,
        )


class SeedFile(_SeedModel):
    facilities: List[FacilityRecord] = Field(default_factory=list)
    customers: List[CustomerRecord] = Field(default_factory=list)
    sessions: List[SessionRecord] = Field(default_factory=list)


class SeedDataRepository:
    """
    Serves sessions, rate profiles and customers loaded from a seed file.

    Implements all three source protocols, so one instance can be handed to
    ``InvoiceService`` for each of them.
    """

    def __init__(
        self,
        sessions: InMemorySessionRepository,
        facilities: InMemoryFacilityRepository,
        customers: InMemoryCustomerRepository,
    ):
        self.sessions = sessions
        self.facilities = facilities
        self.customers = customers

    @classmethod
    def from_file(cls, path: Path | None = None, strict: bool = False) -> "SeedDataRepository":
        """
        Load seed data from a JSON file.

        Args:
            path: Path to the seed file; defaults to the bundled seed data
            strict: Raise instead of warn when a tariff list has gaps

        Returns:
            SeedDataRepository instance

        Raises:
            DataSourceError: If the file is missing or invalid
            ScheduleCoverageError: If ``strict`` and a profile has a gap
        """
        seed_path = path or DEFAULT_SEED_FILE

        if not seed_path.exists():
            raise DataSourceError(f"Seed data file not found: {seed_path}")

        try:
            with open(seed_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise DataSourceError(f"Invalid JSON in {seed_path}: {exc}") from exc

        try:
            seed = SeedFile.model_validate(data)
            profiles = [facility.to_domain() for facility in seed.facilities]
            customers = [customer.to_domain() for customer in seed.customers]
            sessions = [session.to_domain() for session in seed.sessions]
        except (ValidationError, ValueError) as exc:
            raise DataSourceError(f"Invalid seed data in {seed_path}: {exc}") from exc

        for profile in profiles:
            cls._check_profile(profile, strict)

        logger.info(
            "Loaded %d facilities, %d customers and %d sessions from %s",
            len(profiles),
            len(customers),
            len(sessions),
            seed_path,
        )

        return cls(
            sessions=InMemorySessionRepository(sessions),
            facilities=InMemoryFacilityRepository(profiles),
            customers=InMemoryCustomerRepository(customers),
        )

    @staticmethod
    def _check_profile(profile: RateProfile, strict: bool) -> None:
        if strict:
            profile.validate_coverage()

        for problem in profile.coverage_problems():
            logger.warning("Rate profile of facility '%s': %s", profile.facility_id, problem)

    def get_sessions(self, facility_id: str) -> List[Session]:
        return self.sessions.get_sessions(facility_id)

    def get_rate_profile(self, facility_id: str) -> RateProfile | None:
        return self.facilities.get_rate_profile(facility_id)

    def get_customer(self, customer_id: str) -> Customer | None:
        return self.customers.get_customer(customer_id)

