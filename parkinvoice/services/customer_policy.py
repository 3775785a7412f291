"""
Customer validity policies used when building invoices.

Which customers receive an invoice is a configuration decision. The
default admits every customer that appears in the sessions; the stricter
variants consult the customer source and log what they find.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Protocol, Sequence

from ..domain.models import Customer

logger = logging.getLogger(__name__)


ADMIT_ALL = "admit_all"
REQUIRE_KNOWN = "require_known"
REQUIRE_CONTRACTED = "require_contracted"


class CustomerSource(Protocol):
    """Protocol describing the customer lookup needed by the policies."""

    def get_customer(self, customer_id: str) -> Customer | None:
        """Return the customer, or None if unknown."""


class CustomerPolicy(Protocol):
    """Decides which customers of a facility are invoiced."""

    def admit(self, facility_id: str, customer_ids: Sequence[str]) -> List[str]:
        """Return the admitted customer ids, order preserved."""


def unknown_customer_message(customer_id: str) -> str:
    return f"Invalid customer id '{customer_id}', not found in customer repository"


def not_contracted_message(facility_id: str, customer_id: str) -> str:
    return (
        f"Parking facility id '{facility_id}' not found in contracted "
        f"facility ids of customer '{customer_id}'"
    )


def customer_advisories(
    facility_id: str,
    customer_id: str,
    customers: CustomerSource,
) -> List[str]:
    """
    Collect advisory findings about one customer at one facility.

    Returns:
        Zero or one message: unknown customer, or customer not contracted
    """
    customer = customers.get_customer(customer_id)
    if customer is None:
        return [unknown_customer_message(customer_id)]
    if not customer.is_contracted(facility_id):
        return [not_contracted_message(facility_id, customer_id)]
    return []


class AdmitAllPolicy:
    """Invoice every customer found in the sessions."""

    def admit(self, facility_id: str, customer_ids: Sequence[str]) -> List[str]:
        return list(customer_ids)


class RequireKnownCustomerPolicy:
    """
    Invoice only customers that exist in the customer source.

    Unknown customers are excluded and logged as a warning.
    """

    def __init__(self, customers: CustomerSource):
        self._customers = customers

    def admit(self, facility_id: str, customer_ids: Sequence[str]) -> List[str]:
        admitted: List[str] = []

        for customer_id in customer_ids:
            customer = self._customers.get_customer(customer_id)
            if customer is None:
                logger.warning("%s, excluding from invoices", unknown_customer_message(customer_id))
                continue

            self._check_known(facility_id, customer)
            admitted.append(customer_id)

        return admitted

    def _check_known(self, facility_id: str, customer: Customer) -> None:
        """Hook for additional, non-excluding checks on a known customer."""


class RequireContractedCustomerPolicy(RequireKnownCustomerPolicy):
    """
    Like ``RequireKnownCustomerPolicy``, and also warns (without excluding)
    about customers without a contract for the facility.
    """

    def _check_known(self, facility_id: str, customer: Customer) -> None:
        if not customer.is_contracted(facility_id):
            logger.warning("%s", not_contracted_message(facility_id, customer.id))


POLICY_FACTORIES: Dict[str, Callable[[CustomerSource], CustomerPolicy]] = {
    ADMIT_ALL: lambda customers: AdmitAllPolicy(),
    REQUIRE_KNOWN: RequireKnownCustomerPolicy,
    REQUIRE_CONTRACTED: RequireContractedCustomerPolicy,
}


def build_customer_policy(name: str, customers: CustomerSource) -> CustomerPolicy:
    """
    Create the policy configured under ``name``.

    Raises:
        ValueError: If the name is not a known policy
    """
    try:
        factory = POLICY_FACTORIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown customer policy '{name}'. "
            f"Choose one of: {', '.join(POLICY_FACTORIES)}"
        ) from None

    return factory(customers)
