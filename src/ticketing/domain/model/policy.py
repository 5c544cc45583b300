"""TicketPolicy: prices, seat allocations and the per-purchase ceiling.

A policy is built once and never changes afterwards.  Its per-type rules
are copied into a read-only mapping, so a handler holding a policy can
rely on it for its whole lifetime.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ticketing.domain.exceptions import InvalidPolicyError
from ticketing.domain.model.ticket_type import TicketType, normalize_type_id
from ticketing.domain.model.value_objects import Money, is_strict_int


def _is_power_of_ten(value: int) -> bool:
    # Keeps the minor-to-major division exact
    return value >= 1 and str(value).rstrip("0") == "1"


@dataclass(frozen=True)
class TicketTypeRule:
    """Unit price (minor currency units) and seats taken by one ticket."""

    price: int
    seat_allocation: int

    def __post_init__(self) -> None:
        if not is_strict_int(self.price) or self.price < 0:
            raise InvalidPolicyError(
                f"price must be a non-negative integer, got {self.price!r}"
            )
        if not is_strict_int(self.seat_allocation) or self.seat_allocation < 0:
            raise InvalidPolicyError(
                f"seatAllocation must be a non-negative integer, "
                f"got {self.seat_allocation!r}"
            )


@dataclass(frozen=True)
class TicketPolicy:
    """Aggregate of the rules a purchase is checked and priced against.

    Invariants:
    - ``maximum_tickets`` >= 1
    - ``ticket_types`` defines at least ADULT, CHILD and INFANT
    - every price and seat allocation is a non-negative integer
    """

    maximum_tickets: int
    ticket_types: Mapping[str, TicketTypeRule]
    currency: str = "GBP"
    minor_units_per_major: int = 100

    def __post_init__(self) -> None:
        if not is_strict_int(self.maximum_tickets) or self.maximum_tickets < 1:
            raise InvalidPolicyError(
                f"maximumTickets must be a positive integer, "
                f"got {self.maximum_tickets!r}"
            )
        if not isinstance(self.ticket_types, Mapping) or not self.ticket_types:
            raise InvalidPolicyError("ticketTypes must be a non-empty mapping")
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise InvalidPolicyError("currency must be a non-empty string")
        if (
            not is_strict_int(self.minor_units_per_major)
            or not _is_power_of_ten(self.minor_units_per_major)
        ):
            raise InvalidPolicyError(
                f"minorUnitsPerMajor must be a power of ten (1, 10, 100, ...), "
                f"got {self.minor_units_per_major!r}"
            )

        rules: dict[str, TicketTypeRule] = {}
        for key, rule in self.ticket_types.items():
            type_id = normalize_type_id(key)
            if type_id is None:
                raise InvalidPolicyError(
                    f"Ticket type {key!r} must be an upper-case identifier"
                )
            if not isinstance(rule, TicketTypeRule):
                raise InvalidPolicyError(
                    f"Rule for {type_id} must be a TicketTypeRule, "
                    f"got {type(rule).__name__}"
                )
            rules[type_id] = rule

        missing = [t.value for t in TicketType if t.value not in rules]
        if missing:
            raise InvalidPolicyError(
                f"ticketTypes is missing required types: {', '.join(missing)}"
            )

        # Copy so later changes to the caller's dict cannot leak in
        object.__setattr__(self, "ticket_types", MappingProxyType(rules))

    def __hash__(self) -> int:
        return hash(
            (
                self.maximum_tickets,
                tuple(sorted(self.ticket_types.items())),
                self.currency,
                self.minor_units_per_major,
            )
        )

    # --- Lookups --------------------------------------------------------------

    def defines(self, ticket_type: str) -> bool:
        return ticket_type in self.ticket_types

    def rule_for(self, ticket_type: str) -> TicketTypeRule:
        try:
            return self.ticket_types[ticket_type]
        except KeyError:
            raise KeyError(f"Policy does not define ticket type {ticket_type!r}") from None

    def unit_price(self, ticket_type: str) -> Money:
        return Money(self.rule_for(ticket_type).price, self.currency)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def from_dict(raw: Mapping) -> TicketPolicy:
        """Build a policy from its JSON shape.

        Expected keys: ``maximumTickets``, ``ticketTypes`` (type ->
        ``{"price", "seatAllocation"}``) and optionally ``currency`` and
        ``minorUnitsPerMajor``.
        """
        if not isinstance(raw, Mapping):
            raise InvalidPolicyError(
                f"Policy must be a mapping, got {type(raw).__name__}"
            )
        try:
            raw_types = raw["ticketTypes"]
            maximum = raw["maximumTickets"]
        except KeyError as exc:
            raise InvalidPolicyError(f"Policy is missing {exc.args[0]!r}") from exc
        if not isinstance(raw_types, Mapping):
            raise InvalidPolicyError("ticketTypes must be a non-empty mapping")

        rules: dict[str, TicketTypeRule] = {}
        for type_id, entry in raw_types.items():
            if not isinstance(entry, Mapping):
                raise InvalidPolicyError(f"Rule for {type_id!r} must be a mapping")
            try:
                rules[type_id] = TicketTypeRule(
                    price=entry["price"],
                    seat_allocation=entry["seatAllocation"],
                )
            except KeyError as exc:
                raise InvalidPolicyError(
                    f"Rule for {type_id!r} is missing {exc.args[0]!r}"
                ) from exc

        return TicketPolicy(
            maximum_tickets=maximum,
            ticket_types=rules,
            currency=raw.get("currency", "GBP"),
            minor_units_per_major=raw.get("minorUnitsPerMajor", 100),
        )

    def to_dict(self) -> dict:
        return {
            "maximumTickets": self.maximum_tickets,
            "ticketTypes": {
                type_id: {"price": rule.price, "seatAllocation": rule.seat_allocation}
                for type_id, rule in self.ticket_types.items()
            },
            "currency": self.currency,
            "minorUnitsPerMajor": self.minor_units_per_major,
        }


DEFAULT_POLICY = TicketPolicy(
    maximum_tickets=20,
    ticket_types={
        TicketType.ADULT.value: TicketTypeRule(price=2000, seat_allocation=1),
        TicketType.CHILD.value: TicketTypeRule(price=1000, seat_allocation=1),
        TicketType.INFANT.value: TicketTypeRule(price=0, seat_allocation=0),
    },
)
