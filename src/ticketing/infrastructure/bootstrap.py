"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ticketing.application.purchase_tickets import PurchaseTicketsHandler
from ticketing.domain.model.policy import DEFAULT_POLICY, TicketPolicy
from ticketing.infrastructure.config.json_policy_loader import JsonPolicyLoader
from ticketing.infrastructure.thirdparty.payment_gateway import LoggingPaymentGateway
from ticketing.infrastructure.thirdparty.seat_booking import (
    LoggingSeatReservationService,
)

logger = logging.getLogger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_POLICY_FILE = _DATA_DIR / "policy.json"


def ticket_policy(policy_file: Path | None = None) -> TicketPolicy:
    """Return the policy from ``policy_file``, the project policy file, or the default."""
    if policy_file is not None:
        return JsonPolicyLoader(policy_file).load()
    if DEFAULT_POLICY_FILE.exists():
        return JsonPolicyLoader(DEFAULT_POLICY_FILE).load()
    logger.debug("No policy file at %s, using built-in policy", DEFAULT_POLICY_FILE)
    return DEFAULT_POLICY


def purchase_handler(policy: TicketPolicy) -> PurchaseTicketsHandler:
    return PurchaseTicketsHandler(
        payment_service=LoggingPaymentGateway(),
        seat_reservation_service=LoggingSeatReservationService(),
        policy=policy,
    )
