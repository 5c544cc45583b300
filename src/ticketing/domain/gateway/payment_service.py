"""Abstract gateway for taking payment for tickets.

Defined in the domain layer so the domain never depends on a concrete
payment provider.  Implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class TicketPaymentService(ABC):

    @abstractmethod
    def make_payment(self, account_id: int, amount: Decimal) -> None:
        """Charge ``amount`` (major currency units) to the account.

        Returns nothing on success and raises on failure.
        """
