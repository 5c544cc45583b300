"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PurchaseResult:
    """Output: what was bought, charged and reserved."""

    message: str
    ticket_count: int
    total_cost: Decimal  # major units, e.g. Decimal("30") for £30
    seats_reserved: int


@dataclass(frozen=True)
class PolicyLineDTO:
    ticket_type: str
    price: str  # formatted, e.g. "£20"
    seat_allocation: int


@dataclass(frozen=True)
class PolicyDTO:
    """Output: the active ticket policy as displayed to the user."""

    currency: str
    maximum_tickets: int
    lines: list[PolicyLineDTO]
