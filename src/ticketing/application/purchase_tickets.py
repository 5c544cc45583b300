"""Application service: Purchase Tickets use case.

Validates a purchase against the ticket policy, works out what it costs
and how many seats it needs, then hands off to the seat reservation and
payment services.

Seats are reserved before payment is taken, so a failed reservation
means no payment is attempted.  A payment failure after a successful
reservation leaves the seats reserved; releasing them is up to the
reservation service or the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ticketing.application.dto import PurchaseResult
from ticketing.domain.exceptions import CollaboratorError, PurchaseError, SetupError
from ticketing.domain.gateway.payment_service import TicketPaymentService
from ticketing.domain.gateway.seat_reservation_service import SeatReservationService
from ticketing.domain.model.policy import DEFAULT_POLICY, TicketPolicy
from ticketing.domain.model.ticket_type import TicketTypeRequest
from ticketing.domain.model.value_objects import currency_symbol
from ticketing.domain.service.purchase_validator import PurchaseValidator
from ticketing.domain.service.ticket_aggregator import PurchaseTotals, aggregate

logger = logging.getLogger(__name__)


def _require_operation(collaborator: object, operation: str, role: str) -> None:
    if collaborator is None:
        raise SetupError(f"A {role} must be provided")
    if isinstance(collaborator, type):
        raise SetupError(
            f"The {role} must be an instance, got the class {collaborator.__name__}"
        )
    if not callable(getattr(collaborator, operation, None)):
        raise SetupError(
            f"The {role} must provide a callable '{operation}' operation, "
            f"got {type(collaborator).__name__}"
        )


@dataclass(frozen=True, eq=False)
class PurchaseTicketsHandler:
    """Purchase engine.

    The policy and both services are fixed at construction; assigning to
    any of them afterwards raises ``dataclasses.FrozenInstanceError``.
    Nothing is remembered between purchases.
    """

    payment_service: TicketPaymentService
    seat_reservation_service: SeatReservationService
    policy: TicketPolicy = DEFAULT_POLICY

    def __post_init__(self) -> None:
        _require_operation(self.payment_service, "make_payment", "payment service")
        _require_operation(
            self.seat_reservation_service, "reserve_seat", "seat reservation service"
        )

        policy = self.policy
        if isinstance(policy, Mapping):
            policy = TicketPolicy.from_dict(policy)
        elif not isinstance(policy, TicketPolicy):
            raise SetupError(
                f"Policy must be a TicketPolicy or a mapping, got {type(policy).__name__}"
            )
        object.__setattr__(self, "policy", policy)

    def handle(self, account_id: int, *requests: TicketTypeRequest) -> PurchaseResult:
        """Purchase tickets for an account.

        Steps:
        1. Validate the request (no service is called if this fails).
        2. Total up tickets, price and seats.
        3. Reserve seats, then take payment.
        4. Return a PurchaseResult.
        """
        try:
            PurchaseValidator(self.policy).validate(account_id, requests)
        except PurchaseError:
            logger.warning(
                "Rejected purchase for account %r: %s",
                account_id,
                ", ".join(str(r) for r in requests),
            )
            raise

        totals = aggregate(self.policy, requests)
        amount = totals.total_price.to_major(self.policy.minor_units_per_major)

        try:
            self.seat_reservation_service.reserve_seat(account_id, totals.seat_count)
        except Exception as exc:
            logger.error("Seat reservation failed for account %s: %s", account_id, exc)
            raise CollaboratorError("Seat reservation", exc) from exc

        try:
            self.payment_service.make_payment(account_id, amount)
        except Exception as exc:
            logger.error(
                "Payment failed for account %s after reserving %d seats: %s",
                account_id,
                totals.seat_count,
                exc,
            )
            raise CollaboratorError("Payment", exc) from exc

        logger.info(
            "Account %s purchased %d tickets for %s, %d seats reserved",
            account_id,
            totals.ticket_count,
            amount,
            totals.seat_count,
        )
        return self._to_result(totals)

    # --- Mapping --------------------------------------------------------------

    def _to_result(self, totals: PurchaseTotals) -> PurchaseResult:
        amount = totals.total_price.to_major(self.policy.minor_units_per_major)
        symbol = currency_symbol(self.policy.currency)
        return PurchaseResult(
            message=(
                f"You have purchased {totals.ticket_count} tickets for a total of "
                f"{symbol}{amount} and reserved {totals.seat_count} seats."
            ),
            ticket_count=totals.ticket_count,
            total_cost=amount,
            seats_reserved=totals.seat_count,
        )
