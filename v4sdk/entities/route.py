"""A validated chain of pools from an input to an output currency."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property

from v4sdk.currency import Currency
from v4sdk.entities.path_currency import get_path_currency
from v4sdk.entities.pool import Pool
from v4sdk.errors import (
    ChainMismatchError,
    CurrencyNotInPoolError,
    EmptyRouteError,
    InputNotInvolvedError,
    OutputNotInvolvedError,
    PathNotContinuousError,
)
from v4sdk.fractions import Price


class Route:
    """Ordered pools connecting ``input`` to ``output``.

    ``input``/``output`` are the caller's currencies. ``path_input`` and
    ``path_output`` are the forms the first and last pools actually hold,
    which differ when the caller trades native currency through a pool of
    its wrapped token (or the reverse). ``currency_path`` lists every
    currency visited, starting at ``path_input``.

    Raises:
        EmptyRouteError: If no pools are given
        ChainMismatchError: If pools span more than one chain
        InputNotInvolvedError: If the first pool does not hold the input
        PathNotContinuousError: If a pool does not hold the currency the
            previous pool produced
        OutputNotInvolvedError: If the last pool does not hold the output
    """

    def __init__(self, pools: Sequence[Pool], input: Currency, output: Currency) -> None:
        if not pools:
            raise EmptyRouteError("Route must have at least one pool")
        chain_id = pools[0].chain_id
        if any(pool.chain_id != chain_id for pool in pools):
            raise ChainMismatchError("All pools must be on the same chain")

        try:
            path_input = get_path_currency(input, pools[0])
        except CurrencyNotInPoolError as e:
            raise InputNotInvolvedError(f"Input {input} not in first pool") from e

        currency_path = [path_input]
        for i, pool in enumerate(pools):
            current = currency_path[i]
            if not pool.involves_currency(current):
                raise PathNotContinuousError(f"Pool {i} does not hold {current}")
            currency_path.append(pool.currency1 if current.equals(pool.currency0) else pool.currency0)

        if not pools[-1].v4_involves_token(output):
            raise OutputNotInvolvedError(f"Output {output} not in last pool")
        try:
            path_output = get_path_currency(output, pools[-1])
        except CurrencyNotInPoolError as e:
            raise OutputNotInvolvedError(f"Output {output} not in last pool") from e

        self.pools: tuple[Pool, ...] = tuple(pools)
        self.currency_path: tuple[Currency, ...] = tuple(currency_path)
        self.input = input
        self.output = output
        self.path_input = path_input
        self.path_output = path_output

    @property
    def chain_id(self) -> int:
        return self.pools[0].chain_id

    @cached_property
    def mid_price(self) -> Price:
        """Spot price of output per input, composed across all pools."""
        first = self.pools[0]
        if first.currency0.equals(self.path_input):
            next_input, price = first.currency1, first.currency0_price
        else:
            next_input, price = first.currency0, first.currency1_price

        for pool in self.pools[1:]:
            if next_input.equals(pool.currency0):
                next_input, price = pool.currency1, price.multiply(pool.currency0_price)
            else:
                next_input, price = pool.currency0, price.multiply(pool.currency1_price)

        return Price(self.input, self.output, price.denominator, price.numerator)

    def __repr__(self) -> str:
        path = " -> ".join(str(c) for c in self.currency_path)
        return f"Route({path})"


__all__ = ["Route"]
