"""Application service: Show Policy use case (query)."""

from __future__ import annotations

from ticketing.application.dto import PolicyDTO, PolicyLineDTO
from ticketing.domain.model.policy import TicketPolicy


class ShowPolicyHandler:

    def __init__(self, policy: TicketPolicy) -> None:
        self._policy = policy

    def handle(self) -> PolicyDTO:
        policy = self._policy
        return PolicyDTO(
            currency=policy.currency,
            maximum_tickets=policy.maximum_tickets,
            lines=[
                PolicyLineDTO(
                    ticket_type=type_id,
                    price=policy.unit_price(type_id).format(policy.minor_units_per_major),
                    seat_allocation=rule.seat_allocation,
                )
                for type_id, rule in policy.ticket_types.items()
            ],
        )
