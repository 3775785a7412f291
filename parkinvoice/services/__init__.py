"""
Service layer helpers that orchestrate data sources and domain logic.
"""

from .customer_policy import (
    AdmitAllPolicy,
    CustomerPolicy,
    CustomerSource,
    RequireContractedCustomerPolicy,
    RequireKnownCustomerPolicy,
    build_customer_policy,
)
from .invoice_service import InvoiceService, RateProfileSource, SessionSource

__all__ = [
    "AdmitAllPolicy",
    "CustomerPolicy",
    "CustomerSource",
    "InvoiceService",
    "RateProfileSource",
    "RequireContractedCustomerPolicy",
    "RequireKnownCustomerPolicy",
    "SessionSource",
    "build_customer_policy",
]
