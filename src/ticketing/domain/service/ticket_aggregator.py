"""Domain service: totals for a validated purchase.

Everything is integer arithmetic over the policy's per-type rules; adding
a ticket type to a policy needs no change here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ticketing.domain.model.policy import TicketPolicy
from ticketing.domain.model.ticket_type import TicketTypeRequest
from ticketing.domain.model.value_objects import Money


@dataclass(frozen=True)
class PurchaseTotals:
    ticket_count: int
    total_price: Money  # minor units
    seat_count: int


def aggregate(policy: TicketPolicy, requests: Iterable[TicketTypeRequest]) -> PurchaseTotals:
    """Sum tickets, price and seats over every line item.

    Zero-seat types (infants on a lap) add nothing to ``seat_count`` but
    still count as tickets and are still priced.
    """
    ticket_count = 0
    total_price = Money.zero(policy.currency)
    seat_count = 0

    for request in requests:
        rule = policy.rule_for(request.ticket_type)
        ticket_count += request.count
        total_price = total_price + policy.unit_price(request.ticket_type) * request.count
        seat_count += rule.seat_allocation * request.count

    return PurchaseTotals(
        ticket_count=ticket_count,
        total_price=total_price,
        seat_count=seat_count,
    )
