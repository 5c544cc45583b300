"""Ticket types and the per-line purchase request."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from ticketing.domain.exceptions import PurchaseError
from ticketing.domain.model.value_objects import is_strict_int

# Upper-case identifier, e.g. ADULT or SENIOR_CITIZEN
_TYPE_ID = re.compile(r"[A-Z][A-Z0-9_]*")


class TicketType(str, Enum):
    """Ticket types every policy must define.

    Policies may add further identifiers; those are plain strings.
    """

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


def normalize_type_id(value: object) -> str | None:
    """Return the identifier as a plain string, or None if it is not one."""
    if isinstance(value, TicketType):
        return value.value
    if isinstance(value, str) and _TYPE_ID.fullmatch(value):
        return value
    return None


@dataclass(frozen=True)
class TicketTypeRequest:
    """A line item: how many tickets of one type the customer wants.

    Requests of the same type within one purchase are added together,
    never merged or deduplicated.
    """

    ticket_type: str
    count: int

    def __post_init__(self) -> None:
        type_id = normalize_type_id(self.ticket_type)
        if type_id is None:
            raise PurchaseError(
                f"Ticket type must be an upper-case identifier such as "
                f"ADULT, CHILD or INFANT, got {self.ticket_type!r}"
            )
        if not is_strict_int(self.count) or self.count <= 0:
            raise PurchaseError(
                f"Ticket count must be a positive integer, got {self.count!r}"
            )
        # Store enum members as their plain identifier
        object.__setattr__(self, "ticket_type", type_id)

    @property
    def is_adult(self) -> bool:
        return self.ticket_type == TicketType.ADULT.value

    def __str__(self) -> str:
        return f"{self.ticket_type}:{self.count}"
