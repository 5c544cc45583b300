"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


_CURRENCY_SYMBOLS = {"GBP": "£", "USD": "$", "EUR": "€"}


def is_strict_int(value: object) -> bool:
    """True for real integers; ``bool`` is an ``int`` subclass and is refused."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Money:
    """Monetary amount held in minor currency units (e.g. pence).

    All arithmetic stays in integers.  Conversion to a major-unit Decimal
    happens once, through ``to_major``, when a value is presented.
    """

    minor_units: int
    currency: str = "GBP"

    def __post_init__(self) -> None:
        if not is_strict_int(self.minor_units):
            raise ValueError(
                f"Money amount must be an int of minor units, "
                f"got {type(self.minor_units).__name__}"
            )
        if self.minor_units < 0:
            raise ValueError(
                f"Money amount cannot be negative, got {self.minor_units}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.minor_units + other.minor_units, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not is_strict_int(factor):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.minor_units * factor, self.currency)

    # --- Conversion -----------------------------------------------------------

    def to_major(self, minor_units_per_major: int) -> Decimal:
        """Return the amount in major units, e.g. 2050 pence -> Decimal('20.5')."""
        return Decimal(self.minor_units) / Decimal(minor_units_per_major)

    def format(self, minor_units_per_major: int) -> str:
        return f"{currency_symbol(self.currency)}{self.to_major(minor_units_per_major)}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "GBP") -> Money:
        return Money(0, currency)


def currency_symbol(currency: str) -> str:
    """Display prefix for a currency code; unknown codes are shown as-is."""
    return _CURRENCY_SYMBOLS.get(currency, f"{currency} ")
