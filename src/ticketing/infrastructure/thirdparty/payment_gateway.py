"""Stand-in payment gateway.

Checks its arguments the way a real provider client would and logs the
charge instead of moving money.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ticketing.domain.gateway.payment_service import TicketPaymentService

logger = logging.getLogger(__name__)


class LoggingPaymentGateway(TicketPaymentService):

    def make_payment(self, account_id: int, amount: Decimal) -> None:
        if not isinstance(account_id, int) or isinstance(account_id, bool):
            raise TypeError("account_id must be an integer")
        if not isinstance(amount, (int, Decimal)) or isinstance(amount, bool):
            raise TypeError("amount must be an integer or Decimal")
        if amount < 0:
            raise ValueError("amount cannot be negative")
        logger.info("Charged %s to account %s", amount, account_id)
