"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ticketing.domain.model.value_objects import Money, currency_symbol, is_strict_int


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(2000)
        assert m.minor_units == 2000
        assert m.currency == "GBP"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            Money(-1)

    def test_float_amount_rejected(self):
        with pytest.raises(ValueError, match="must be an int"):
            Money(20.5)

    def test_addition(self):
        assert Money(2000) + Money(1000) == Money(3000)

    def test_multiplication_by_int(self):
        assert Money(1000) * 3 == Money(3000)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError, match="Can only multiply"):
            Money(1000) * 1.5

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValueError, match="Cannot combine"):
            Money(100, "GBP") + Money(100, "EUR")

    def test_to_major_is_exact(self):
        assert Money(2050).to_major(100) == Decimal("20.5")
        assert Money(40000).to_major(100) == Decimal("400")
        assert Money(1).to_major(100) == Decimal("0.01")

    def test_format(self):
        assert Money(2000).format(100) == "£20"
        assert Money(1999, "USD").format(100) == "$19.99"
        assert Money(500, "JPY").format(1) == "JPY 500"


# ── Helpers ──────────────────────────────────────────────────────────────────


class TestHelpers:

    def test_is_strict_int(self):
        assert is_strict_int(3)
        assert not is_strict_int(True)
        assert not is_strict_int(3.0)
        assert not is_strict_int("3")

    def test_currency_symbol(self):
        assert currency_symbol("GBP") == "£"
        assert currency_symbol("CHF") == "CHF "
