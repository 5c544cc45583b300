"""Unit tests for TicketTypeRequest."""

import dataclasses

import pytest

from ticketing.domain.exceptions import PurchaseError
from ticketing.domain.model.ticket_type import TicketType, TicketTypeRequest


class TestTicketTypeRequest:

    @pytest.mark.parametrize("ticket_type", ["ADULT", "CHILD", "INFANT"])
    def test_canonical_types(self, ticket_type):
        request = TicketTypeRequest(ticket_type, 1)
        assert request.ticket_type == ticket_type
        assert request.count == 1

    def test_enum_member_stored_as_plain_identifier(self):
        request = TicketTypeRequest(TicketType.CHILD, 2)
        assert request.ticket_type == "CHILD"
        assert type(request.ticket_type) is str

    def test_custom_type_identifier_allowed(self):
        assert TicketTypeRequest("SENIOR", 1).ticket_type == "SENIOR"

    @pytest.mark.parametrize("ticket_type", ["ADULTS", "CHILDREN"])
    def test_near_miss_identifier_constructs(self, ticket_type):
        # Whether the type exists is decided by the policy at purchase time
        assert TicketTypeRequest(ticket_type, 1).ticket_type == ticket_type

    @pytest.mark.parametrize(
        "ticket_type",
        [0, None, "", " ", "adult", "Child", "ADULT ", " INFANT ", "AD-ULT"],
    )
    def test_malformed_type_rejected(self, ticket_type):
        with pytest.raises(PurchaseError, match="upper-case identifier"):
            TicketTypeRequest(ticket_type, 1)

    @pytest.mark.parametrize("count", ["1", 0, -1, 1.5, True])
    def test_non_positive_integer_count_rejected(self, count):
        with pytest.raises(PurchaseError, match="positive integer"):
            TicketTypeRequest("ADULT", count)

    def test_count_above_ceiling_still_constructs(self):
        # The ceiling belongs to the policy, not the line item
        assert TicketTypeRequest("ADULT", 21).count == 21

    def test_immutable(self):
        request = TicketTypeRequest("ADULT", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.ticket_type = "CHILD"
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.count = 2

    def test_is_adult(self):
        assert TicketTypeRequest("ADULT", 1).is_adult
        assert not TicketTypeRequest("INFANT", 1).is_adult

    def test_str(self):
        assert str(TicketTypeRequest("CHILD", 3)) == "CHILD:3"
