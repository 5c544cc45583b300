"""Stand-in seat reservation service; logs the reservation."""

from __future__ import annotations

import logging

from ticketing.domain.gateway.seat_reservation_service import SeatReservationService

logger = logging.getLogger(__name__)


class LoggingSeatReservationService(SeatReservationService):

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        if not isinstance(account_id, int) or isinstance(account_id, bool):
            raise TypeError("account_id must be an integer")
        if not isinstance(seat_count, int) or isinstance(seat_count, bool):
            raise TypeError("seat_count must be an integer")
        if seat_count < 0:
            raise ValueError("seat_count cannot be negative")
        logger.info("Reserved %d seats for account %s", seat_count, account_id)
