"""
Domain layer - Pure pricing and aggregation logic without external dependencies.
"""

from .cost_calculator import SessionCostCalculator
from .exceptions import DataSourceError, InvoicingError, ScheduleCoverageError, UnknownFacility
from .invoice_aggregator import InvoiceAggregator
from .models import (
    Customer,
    DayClass,
    Invoice,
    RateProfile,
    SegmentCharge,
    Session,
    SessionCost,
    TariffEntry,
)
from .rate_resolver import RateScheduleResolver

__all__ = [
    "Customer",
    "DataSourceError",
    "DayClass",
    "Invoice",
    "InvoiceAggregator",
    "InvoicingError",
    "RateProfile",
    "RateScheduleResolver",
    "ScheduleCoverageError",
    "SegmentCharge",
    "Session",
    "SessionCost",
    "SessionCostCalculator",
    "TariffEntry",
    "UnknownFacility",
]
