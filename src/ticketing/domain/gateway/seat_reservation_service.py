"""Abstract gateway for reserving seats."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SeatReservationService(ABC):

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account, raising on failure."""
