"""Domain service: Purchase Request Validation.

Checks a purchase request against a TicketPolicy before anything is
priced or any external service is called.  The first rule that fails
is reported; validation has no side effects.
"""

from __future__ import annotations

from collections.abc import Sequence

from ticketing.domain.exceptions import PurchaseError
from ticketing.domain.model.policy import TicketPolicy
from ticketing.domain.model.ticket_type import TicketTypeRequest
from ticketing.domain.model.value_objects import is_strict_int


class PurchaseValidator:

    def __init__(self, policy: TicketPolicy) -> None:
        self._policy = policy

    def validate(self, account_id: object, requests: Sequence[object]) -> None:
        """Raise PurchaseError unless the request may be purchased.

        Rules, in order:
          1. at least one line item
          2. ``account_id`` is an integer greater than zero
          3. every line item is a TicketTypeRequest
          4. every ticket type is defined by the policy
          5. at least one ADULT line item
          6. total ticket count within ``maximum_tickets``
        """
        if not requests:
            raise PurchaseError("At least one ticket type request must be provided")

        if not is_strict_int(account_id) or account_id <= 0:
            raise PurchaseError(
                f"Account ID must be an integer greater than 0, got {account_id!r}"
            )

        for request in requests:
            if not isinstance(request, TicketTypeRequest):
                raise PurchaseError(
                    f"Each ticket request must be a TicketTypeRequest, "
                    f"got {type(request).__name__}"
                )

        for request in requests:
            if not self._policy.defines(request.ticket_type):
                raise PurchaseError(f"Unknown ticket type: {request.ticket_type}")

        if not any(request.is_adult for request in requests):
            raise PurchaseError("At least one ADULT ticket must be purchased")

        total = sum(request.count for request in requests)
        if total > self._policy.maximum_tickets:
            raise PurchaseError(
                f"Cannot purchase {total} tickets, the maximum per purchase is "
                f"{self._policy.maximum_tickets}"
            )
