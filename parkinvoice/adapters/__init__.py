"""
Adapters layer - Data sources for sessions, rate profiles and customers.
"""

from .memory_repositories import (
    InMemoryCustomerRepository,
    InMemoryFacilityRepository,
    InMemorySessionRepository,
)
from .seed_repository import DEFAULT_SEED_FILE, SeedDataRepository

__all__ = [
    "DEFAULT_SEED_FILE",
    "InMemoryCustomerRepository",
    "InMemoryFacilityRepository",
    "InMemorySessionRepository",
    "SeedDataRepository",
]
