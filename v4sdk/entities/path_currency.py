"""Matching a currency to the form a pool actually holds.

A v4 pool may hold the native currency or its wrapped token. Routes and
trades are expressed in the caller's currency, so every hop first resolves
which of the pool's two currencies that currency stands for.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from v4sdk.currency import Currency
from v4sdk.errors import CurrencyNotInPoolError
from v4sdk.fractions import CurrencyAmount

if TYPE_CHECKING:
    from v4sdk.entities.pool import Pool


def get_path_currency(currency: Currency, pool: Pool) -> Currency:
    """Return the pool currency that ``currency`` is traded as.

    Raises:
        CurrencyNotInPoolError: If neither the currency nor its wrapped or
            unwrapped form is one of the pool's currencies
    """
    if pool.involves_currency(currency):
        return currency
    if pool.involves_currency(currency.wrapped):
        return currency.wrapped
    if pool.currency0.wrapped.equals(currency):
        return pool.currency0
    if pool.currency1.wrapped.equals(currency):
        return pool.currency1
    raise CurrencyNotInPoolError(
        f"Expected currency {currency} to be either {pool.currency0} or {pool.currency1}"
    )


def amount_with_path_currency(amount: CurrencyAmount, pool: Pool) -> CurrencyAmount:
    """Re-tag an amount with the pool currency it is traded as."""
    return CurrencyAmount(
        get_path_currency(amount.currency, pool), amount.numerator, amount.denominator
    )


__all__ = ["get_path_currency", "amount_with_path_currency"]
