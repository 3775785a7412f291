"""
Grouping of per-session charges into per-customer invoices.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Protocol, Sequence, Tuple

from .models import Invoice


class CustomerFilter(Protocol):
    """Anything that can decide which customers get an invoice."""

    def admit(self, facility_id: str, customer_ids: Sequence[str]) -> List[str]:
        """Return the admitted subset of ``customer_ids``, order preserved."""


class _AdmitEveryone:
    def admit(self, facility_id: str, customer_ids: Sequence[str]) -> List[str]:
        return list(customer_ids)


class InvoiceAggregator:
    """
    Sums charges per customer and emits one invoice per admitted customer.

    The reduction is sequential and ordered: invoices come out in the order
    customers were first seen in the charges.
    """

    def __init__(self, customer_filter: CustomerFilter | None = None):
        self.customer_filter = customer_filter or _AdmitEveryone()

    def aggregate(
        self,
        facility_id: str,
        charges: Iterable[Tuple[str, Decimal]],
        candidate_customer_ids: Sequence[str] | None = None,
    ) -> List[Invoice]:
        """
        Build invoices for a facility.

        Args:
            facility_id: The facility the charges belong to
            charges: ``(customer_id, amount)`` pairs, one per session
            candidate_customer_ids: Customers to consider; defaults to the
                distinct customers of ``charges``

        Returns:
            One Invoice per admitted customer
        """
        totals: Dict[str, Decimal] = {}

        for customer_id, amount in charges:
            totals[customer_id] = totals.get(customer_id, Decimal("0")) + amount

        if candidate_customer_ids is None:
            candidates = list(totals)
        else:
            candidates = [c for c in dict.fromkeys(candidate_customer_ids) if c in totals]

        admitted = set(self.customer_filter.admit(facility_id, candidates))

        return [
            Invoice(facility_id=facility_id, customer_id=customer_id, amount=totals[customer_id])
            for customer_id in candidates
            if customer_id in admitted
        ]
