"""Exact rational amounts, prices and percentages.

All values are ``fractions.Fraction`` over raw on-chain units; floats never
enter the calculation. ``quotient`` truncates toward zero, matching the
integer division used on-chain.
"""

from __future__ import annotations

from decimal import Decimal, localcontext
from enum import Enum
from fractions import Fraction

from v4sdk.currency import Currency
from v4sdk.errors import (
    AmountOverflowError,
    InputCurrencyMismatchError,
    OutputCurrencyMismatchError,
)
from v4sdk.types import UINT256_MAX

Rational = int | Fraction


class TradeType(Enum):
    """Whether the input or the output amount of a trade is fixed."""

    EXACT_INPUT = 0
    EXACT_OUTPUT = 1


def _to_fraction(value: Rational | Percent | CurrencyAmount) -> Fraction:
    if isinstance(value, (Percent, CurrencyAmount)):
        return value.fraction
    return Fraction(value)


def _quotient(value: Fraction) -> int:
    return int(value)


def _significant(value: Fraction, significant_digits: int) -> str:
    with localcontext() as ctx:
        ctx.prec = significant_digits
        result = Decimal(value.numerator) / Decimal(value.denominator)
    return format(result.normalize(), "f")


class Percent:
    """A percentage stored as an exact fraction (1 == 100%)."""

    __slots__ = ("fraction",)

    def __init__(self, numerator: Rational, denominator: int = 1) -> None:
        self.fraction = Fraction(numerator) / denominator

    def __add__(self, other: Percent | Rational) -> Percent:
        return Percent(self.fraction + _to_fraction(other))

    def __sub__(self, other: Percent | Rational) -> Percent:
        return Percent(self.fraction - _to_fraction(other))

    def __mul__(self, other: Percent | Rational) -> Percent:
        return Percent(self.fraction * _to_fraction(other))

    def __truediv__(self, other: Percent | Rational) -> Percent:
        return Percent(self.fraction / _to_fraction(other))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Percent, int, Fraction)):
            return self.fraction == _to_fraction(other)
        return NotImplemented

    def __lt__(self, other: Percent | Rational) -> bool:
        return self.fraction < _to_fraction(other)

    def __le__(self, other: Percent | Rational) -> bool:
        return self.fraction <= _to_fraction(other)

    def __gt__(self, other: Percent | Rational) -> bool:
        return self.fraction > _to_fraction(other)

    def __ge__(self, other: Percent | Rational) -> bool:
        return self.fraction >= _to_fraction(other)

    def __hash__(self) -> int:
        return hash(self.fraction)

    def __repr__(self) -> str:
        return f"Percent({self.fraction})"

    def to_significant(self, significant_digits: int = 5) -> str:
        """Percentage value (e.g. "0.5" for 0.5%)."""
        return _significant(self.fraction * 100, significant_digits)


class CurrencyAmount:
    """An amount of a currency in raw units (no decimals applied).

    Raises:
        AmountOverflowError: If the amount's quotient exceeds uint256
    """

    __slots__ = ("currency", "fraction")

    def __init__(self, currency: Currency, numerator: Rational, denominator: int = 1) -> None:
        self.currency = currency
        self.fraction = Fraction(numerator) / denominator
        if _quotient(self.fraction) > UINT256_MAX:
            raise AmountOverflowError(f"Amount {self.fraction} exceeds uint256")

    @classmethod
    def from_raw_amount(cls, currency: Currency, raw_amount: int) -> CurrencyAmount:
        return cls(currency, raw_amount)

    @classmethod
    def from_fractional_amount(
        cls, currency: Currency, numerator: int, denominator: int
    ) -> CurrencyAmount:
        return cls(currency, numerator, denominator)

    @property
    def numerator(self) -> int:
        return self.fraction.numerator

    @property
    def denominator(self) -> int:
        return self.fraction.denominator

    @property
    def quotient(self) -> int:
        return _quotient(self.fraction)

    @property
    def wrapped(self) -> CurrencyAmount:
        if self.currency.is_token:
            return self
        return CurrencyAmount(self.currency.wrapped, self.numerator, self.denominator)

    def _check_currency(self, other: CurrencyAmount) -> None:
        if not self.currency.equals(other.currency):
            raise InputCurrencyMismatchError(
                f"Cannot combine amounts of {self.currency} and {other.currency}"
            )

    def add(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.fraction + other.fraction)

    def subtract(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_currency(other)
        return CurrencyAmount(self.currency, self.fraction - other.fraction)

    def multiply(self, other: Rational | Percent) -> CurrencyAmount:
        return CurrencyAmount(self.currency, self.fraction * _to_fraction(other))

    def divide(self, other: Rational | Percent) -> CurrencyAmount:
        return CurrencyAmount(self.currency, self.fraction / _to_fraction(other))

    def equal_to(self, other: CurrencyAmount | Rational) -> bool:
        return self.fraction == _to_fraction(other)

    def less_than(self, other: CurrencyAmount | Rational) -> bool:
        return self.fraction < _to_fraction(other)

    def greater_than(self, other: CurrencyAmount | Rational) -> bool:
        return self.fraction > _to_fraction(other)

    def to_exact(self) -> str:
        """Amount in whole units of the currency, without rounding."""
        value = Fraction(self.quotient, 10**self.currency.decimals)
        with localcontext() as ctx:
            ctx.prec = 80
            result = Decimal(value.numerator) / Decimal(value.denominator)
        return format(result.normalize(), "f")

    def to_significant(self, significant_digits: int = 6) -> str:
        return _significant(self.fraction / 10**self.currency.decimals, significant_digits)

    def __repr__(self) -> str:
        return f"CurrencyAmount({self.currency}, {self.fraction})"


class Price:
    """Exchange rate of quote currency per base currency in raw units.

    ``Price(base, quote, denominator, numerator)`` means ``denominator`` raw
    units of base are worth ``numerator`` raw units of quote.
    """

    __slots__ = ("base_currency", "quote_currency", "fraction", "scalar")

    def __init__(
        self,
        base_currency: Currency,
        quote_currency: Currency,
        denominator: int,
        numerator: int,
    ) -> None:
        self.base_currency = base_currency
        self.quote_currency = quote_currency
        self.fraction = Fraction(numerator, denominator)
        self.scalar = Fraction(10**base_currency.decimals, 10**quote_currency.decimals)

    @classmethod
    def from_fraction(
        cls, base_currency: Currency, quote_currency: Currency, value: Fraction
    ) -> Price:
        return cls(base_currency, quote_currency, value.denominator, value.numerator)

    @property
    def numerator(self) -> int:
        return self.fraction.numerator

    @property
    def denominator(self) -> int:
        return self.fraction.denominator

    def invert(self) -> Price:
        return Price(self.quote_currency, self.base_currency, self.numerator, self.denominator)

    def multiply(self, other: Price) -> Price:
        """Chain two prices: (A→B) * (B→C) = (A→C)."""
        if not self.quote_currency.equals(other.base_currency):
            raise OutputCurrencyMismatchError(
                f"Cannot multiply {self.quote_currency} price by {other.base_currency} price"
            )
        return Price.from_fraction(
            self.base_currency, other.quote_currency, self.fraction * other.fraction
        )

    def quote(self, currency_amount: CurrencyAmount) -> CurrencyAmount:
        """Value of a base-currency amount in the quote currency."""
        if not currency_amount.currency.equals(self.base_currency):
            raise InputCurrencyMismatchError(
                f"Price base is {self.base_currency}, got {currency_amount.currency}"
            )
        return CurrencyAmount(self.quote_currency, currency_amount.fraction * self.fraction)

    @property
    def adjusted_for_decimals(self) -> Fraction:
        return self.fraction * self.scalar

    def to_significant(self, significant_digits: int = 6) -> str:
        return _significant(self.adjusted_for_decimals, significant_digits)

    def __repr__(self) -> str:
        return f"Price({self.base_currency}->{self.quote_currency}, {self.fraction})"


__all__ = ["TradeType", "Percent", "CurrencyAmount", "Price"]
