"""Unit tests for the PurchaseValidator domain service."""

import pytest

from ticketing.domain.exceptions import PurchaseError
from ticketing.domain.model.policy import DEFAULT_POLICY
from ticketing.domain.model.ticket_type import TicketTypeRequest
from ticketing.domain.service.purchase_validator import PurchaseValidator


def _validate(account_id, *requests):
    PurchaseValidator(DEFAULT_POLICY).validate(account_id, requests)


class TestValidRequests:

    def test_single_adult(self):
        _validate(1, TicketTypeRequest("ADULT", 1))

    def test_mixed_types(self):
        _validate(
            42,
            TicketTypeRequest("ADULT", 2),
            TicketTypeRequest("CHILD", 3),
            TicketTypeRequest("INFANT", 1),
        )

    def test_exactly_maximum_allowed(self):
        _validate(1, TicketTypeRequest("ADULT", 1), TicketTypeRequest("INFANT", 19))


class TestInvalidRequests:

    def test_no_line_items(self):
        with pytest.raises(PurchaseError, match="At least one ticket type request"):
            _validate(1)

    @pytest.mark.parametrize("account_id", [0, -5, 1.0, "1", None, True])
    def test_bad_account_id(self, account_id):
        with pytest.raises(PurchaseError, match="Account ID must be an integer"):
            _validate(account_id, TicketTypeRequest("ADULT", 1))

    @pytest.mark.parametrize("line_item", [("ADULT", 1), {"type": "ADULT"}, "ADULT:1", None])
    def test_line_item_must_be_ticket_type_request(self, line_item):
        with pytest.raises(PurchaseError, match="must be a TicketTypeRequest"):
            _validate(1, TicketTypeRequest("ADULT", 1), line_item)

    def test_type_unknown_to_policy(self):
        with pytest.raises(PurchaseError, match="Unknown ticket type: SENIOR"):
            _validate(1, TicketTypeRequest("ADULT", 1), TicketTypeRequest("SENIOR", 1))

    @pytest.mark.parametrize(
        "requests",
        [
            [TicketTypeRequest("CHILD", 1)],
            [TicketTypeRequest("INFANT", 1)],
            [TicketTypeRequest("CHILD", 2), TicketTypeRequest("INFANT", 2)],
        ],
    )
    def test_no_adult(self, requests):
        with pytest.raises(PurchaseError, match="At least one ADULT"):
            _validate(1, *requests)

    def test_single_line_over_maximum(self):
        with pytest.raises(PurchaseError, match="Cannot purchase 21 tickets"):
            _validate(1, TicketTypeRequest("ADULT", 21))

    def test_infants_count_toward_maximum(self):
        with pytest.raises(PurchaseError, match="maximum per purchase is 20"):
            _validate(1, TicketTypeRequest("ADULT", 1), TicketTypeRequest("INFANT", 20))

    def test_repeated_types_are_additive(self):
        with pytest.raises(PurchaseError, match="Cannot purchase 30 tickets"):
            _validate(
                1,
                TicketTypeRequest("ADULT", 10),
                TicketTypeRequest("ADULT", 10),
                TicketTypeRequest("ADULT", 10),
            )


class TestFirstFailureWins:

    def test_account_checked_before_adult_rule(self):
        with pytest.raises(PurchaseError, match="Account ID"):
            _validate(0, TicketTypeRequest("CHILD", 1))

    def test_shape_checked_before_adult_rule(self):
        with pytest.raises(PurchaseError, match="TicketTypeRequest"):
            _validate(1, object())

    def test_adult_rule_checked_before_maximum(self):
        with pytest.raises(PurchaseError, match="At least one ADULT"):
            _validate(1, TicketTypeRequest("CHILD", 25))
