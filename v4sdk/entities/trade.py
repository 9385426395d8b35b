"""Trades: one or more routes executed for a single logical swap."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import cached_property

from v4sdk.entities.path_currency import amount_with_path_currency
from v4sdk.entities.route import Route
from v4sdk.errors import (
    DuplicatePoolsError,
    EmptyRouteError,
    InputCurrencyMismatchError,
    InsufficientLiquidityError,
    InvalidAmountForRouteError,
    InvalidSlippageToleranceError,
    OutputCurrencyMismatchError,
    TradeHasMultipleRoutesError,
)
from v4sdk.fractions import CurrencyAmount, Percent, Price, TradeType


@dataclass(frozen=True)
class Swap:
    """One route of a trade with its realized amounts."""

    route: Route
    input_amount: CurrencyAmount
    output_amount: CurrencyAmount


def _check_tolerance(slippage_tolerance: Percent) -> None:
    if slippage_tolerance < 0:
        raise InvalidSlippageToleranceError(
            f"Slippage tolerance must not be negative: {slippage_tolerance}"
        )


class Trade:
    """A set of swaps sharing input and output currency and trade type.

    Amounts, execution price and price impact are computed on first access
    and cached; a trade is never modified after construction.
    """

    def __init__(self, swaps: Sequence[Swap], trade_type: TradeType) -> None:
        self.swaps: tuple[Swap, ...] = tuple(swaps)
        for swap in self.swaps:
            if swap.input_amount.quotient <= 0:
                raise InvalidAmountForRouteError(
                    f"Swap input must be positive, got {swap.input_amount.quotient}"
                )
        self.trade_type = trade_type

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_route(cls, route: Route, amount: CurrencyAmount, trade_type: TradeType) -> Trade:
        """Simulate ``amount`` through every pool of ``route``.

        For exact input the amount must be in the route's input currency and
        is walked forward; for exact output it must be in the output
        currency and is walked backward.

        Raises:
            InvalidAmountForRouteError: If the amount is not positive or its
                currency does not fit
            InsufficientLiquidityError: If a pool cannot fill the carried amount
        """
        if amount.quotient <= 0:
            raise InvalidAmountForRouteError(
                f"Trade amount must be positive, got {amount.quotient}"
            )
        if trade_type == TradeType.EXACT_INPUT:
            if not amount.currency.equals(route.input):
                raise InvalidAmountForRouteError(
                    f"Exact input amount must be in {route.input}, got {amount.currency}"
                )
            token_amount = amount_with_path_currency(amount, route.pools[0])
            for pool in route.pools:
                quote = pool.get_output_amount(token_amount)
                if quote.remaining.quotient != 0:
                    raise InsufficientLiquidityError(
                        f"Pool {pool.pool_id.hex()} left {quote.remaining.quotient} unfilled"
                    )
                token_amount = quote.amount
            input_amount = CurrencyAmount(route.input, amount.numerator, amount.denominator)
            output_amount = CurrencyAmount(
                route.output, token_amount.numerator, token_amount.denominator
            )
        else:
            if not amount.currency.equals(route.output):
                raise InvalidAmountForRouteError(
                    f"Exact output amount must be in {route.output}, got {amount.currency}"
                )
            token_amount = amount_with_path_currency(amount, route.pools[-1])
            for pool in reversed(route.pools):
                quote = pool.get_input_amount(token_amount)
                if quote.remaining.quotient != 0:
                    raise InsufficientLiquidityError(
                        f"Pool {pool.pool_id.hex()} left {quote.remaining.quotient} unfilled"
                    )
                token_amount = quote.amount
            input_amount = CurrencyAmount(
                route.input, token_amount.numerator, token_amount.denominator
            )
            output_amount = CurrencyAmount(route.output, amount.numerator, amount.denominator)

        return cls([Swap(route, input_amount, output_amount)], trade_type)

    @classmethod
    def exact_in(cls, route: Route, amount_in: CurrencyAmount) -> Trade:
        return cls.from_route(route, amount_in, TradeType.EXACT_INPUT)

    @classmethod
    def exact_out(cls, route: Route, amount_out: CurrencyAmount) -> Trade:
        return cls.from_route(route, amount_out, TradeType.EXACT_OUTPUT)

    @classmethod
    def from_routes(
        cls, routes: Sequence[tuple[Route, CurrencyAmount]], trade_type: TradeType
    ) -> Trade:
        """Simulate each (route, amount) pair and combine the swaps.

        Pools shared between routes are not detected here; use
        ``create_unchecked_trade_with_multiple_routes`` for that check.
        """
        swaps = [cls.from_route(route, amount, trade_type).swaps[0] for route, amount in routes]
        return cls(swaps, trade_type)

    @classmethod
    def create_unchecked_trade(
        cls,
        route: Route,
        input_amount: CurrencyAmount,
        output_amount: CurrencyAmount,
        trade_type: TradeType,
    ) -> Trade:
        """Build a trade from precomputed amounts without simulating."""
        return cls([Swap(route, input_amount, output_amount)], trade_type)

    @classmethod
    def create_unchecked_trade_with_multiple_routes(
        cls, swaps: Sequence[Swap], trade_type: TradeType
    ) -> Trade:
        """Build a multi-route trade from precomputed swaps.

        Raises:
            EmptyRouteError: If no swaps are given
            InputCurrencyMismatchError: If swaps disagree on input currency
            OutputCurrencyMismatchError: If swaps disagree on output currency
            DuplicatePoolsError: If a pool appears in more than one place
        """
        if not swaps:
            raise EmptyRouteError("Trade must have at least one swap")

        input_currency = swaps[0].input_amount.currency.wrapped
        output_currency = swaps[0].output_amount.currency.wrapped
        for swap in swaps:
            if not input_currency.equals(swap.route.input.wrapped):
                raise InputCurrencyMismatchError(
                    f"Route input {swap.route.input} does not match {input_currency}"
                )
            if not output_currency.equals(swap.route.output.wrapped):
                raise OutputCurrencyMismatchError(
                    f"Route output {swap.route.output} does not match {output_currency}"
                )

        pool_count = sum(len(swap.route.pools) for swap in swaps)
        pool_ids = {pool.pool_id for swap in swaps for pool in swap.route.pools}
        if len(pool_ids) != pool_count:
            raise DuplicatePoolsError(f"{pool_count - len(pool_ids)} pool(s) used more than once")

        return cls(swaps, trade_type)

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    @property
    def route(self) -> Route:
        """The only route of a single-swap trade."""
        if len(self.swaps) != 1:
            raise TradeHasMultipleRoutesError(f"Trade has {len(self.swaps)} routes")
        return self.swaps[0].route

    @cached_property
    def input_amount(self) -> CurrencyAmount:
        total = CurrencyAmount(self.swaps[0].input_amount.currency, 0)
        for swap in self.swaps:
            total = total.add(swap.input_amount)
        return total

    @cached_property
    def output_amount(self) -> CurrencyAmount:
        total = CurrencyAmount(self.swaps[0].output_amount.currency, 0)
        for swap in self.swaps:
            total = total.add(swap.output_amount)
        return total

    @cached_property
    def execution_price(self) -> Price:
        """Output per input, from the raw totals."""
        return Price(
            self.input_amount.currency,
            self.output_amount.currency,
            self.input_amount.quotient,
            self.output_amount.quotient,
        )

    @cached_property
    def price_impact(self) -> Percent:
        """Shortfall of the realized output against each route's spot price.

        Computed per swap so that mixing routes with different mid prices
        does not distort the result.
        """
        spot_output = CurrencyAmount(self.output_amount.currency, 0)
        for swap in self.swaps:
            spot_output = spot_output.add(swap.route.mid_price.quote(swap.input_amount))

        impact = (spot_output.fraction - self.output_amount.fraction) / spot_output.fraction
        return Percent(impact)

    # -------------------------------------------------------------------------
    # Slippage
    # -------------------------------------------------------------------------

    def minimum_amount_out(
        self, slippage_tolerance: Percent, amount_out: CurrencyAmount | None = None
    ) -> CurrencyAmount:
        """Least output acceptable at the given tolerance.

        Exact-output trades return their output unchanged.
        """
        _check_tolerance(slippage_tolerance)
        if amount_out is None:
            amount_out = self.output_amount
        if self.trade_type == TradeType.EXACT_OUTPUT:
            return amount_out
        adjusted = amount_out.fraction / (1 + slippage_tolerance.fraction)
        return CurrencyAmount(amount_out.currency, int(adjusted))

    def maximum_amount_in(
        self, slippage_tolerance: Percent, amount_in: CurrencyAmount | None = None
    ) -> CurrencyAmount:
        """Most input acceptable at the given tolerance.

        Exact-input trades return their input unchanged.
        """
        _check_tolerance(slippage_tolerance)
        if amount_in is None:
            amount_in = self.input_amount
        if self.trade_type == TradeType.EXACT_INPUT:
            return amount_in
        adjusted = amount_in.fraction * (1 + slippage_tolerance.fraction)
        return CurrencyAmount(amount_in.currency, int(adjusted))

    def worst_execution_price(self, slippage_tolerance: Percent) -> Price:
        return Price(
            self.input_amount.currency,
            self.output_amount.currency,
            self.maximum_amount_in(slippage_tolerance).quotient,
            self.minimum_amount_out(slippage_tolerance).quotient,
        )

    @property
    def num_hops(self) -> int:
        """Total currency-path length across swaps, used as a tie-breaker."""
        return sum(len(swap.route.currency_path) for swap in self.swaps)

    def __repr__(self) -> str:
        return (
            f"Trade({self.trade_type.name}, in={self.input_amount.fraction}, "
            f"out={self.output_amount.fraction}, swaps={len(self.swaps)})"
        )


__all__ = ["Swap", "Trade"]
