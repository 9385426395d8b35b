"""Best-trade search over a set of pools.

Depth-first enumeration of every path of at most ``max_hops`` pools from
the input currency to the output currency. Each complete path is turned
into a ``Trade`` and kept in a bounded list ranked by ``trade_comparator``.

A pool that cannot serve a branch (hooks acting on swaps, liquidity
exhausted, nothing received) is skipped and the search continues; any
other error aborts the search.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

import structlog

from v4sdk.config import DEFAULT_BEST_TRADE_OPTIONS, BestTradeOptions
from v4sdk.currency import Currency
from v4sdk.entities.pool import Pool, PoolQuote
from v4sdk.entities.route import Route
from v4sdk.entities.trade import Trade
from v4sdk.errors import (
    InputCurrencyMismatchError,
    InvalidMaxHopsError,
    InvalidMaxSizeError,
    InvalidRecursionError,
    MaxSizeExceededError,
    NoPoolsError,
    OutputCurrencyMismatchError,
    PoolUnusableError,
)
from v4sdk.fractions import CurrencyAmount, TradeType

logger = structlog.get_logger()

T = TypeVar("T")


# =============================================================================
# Ranking
# =============================================================================


def trade_comparator(a: Trade, b: Trade) -> int:
    """Order trades best-first.

    More output ranks first; on equal output, less input; on equal amounts,
    fewer hops. Returns a negative number if ``a`` ranks before ``b``.

    Raises:
        InputCurrencyMismatchError: If the trades have different inputs
        OutputCurrencyMismatchError: If the trades have different outputs
    """
    if not a.input_amount.currency.equals(b.input_amount.currency):
        raise InputCurrencyMismatchError(
            f"Cannot compare trades from {a.input_amount.currency} and {b.input_amount.currency}"
        )
    if not a.output_amount.currency.equals(b.output_amount.currency):
        raise OutputCurrencyMismatchError(
            f"Cannot compare trades to {a.output_amount.currency} and {b.output_amount.currency}"
        )

    if a.output_amount.equal_to(b.output_amount):
        if a.input_amount.equal_to(b.input_amount):
            return a.num_hops - b.num_hops
        return -1 if a.input_amount.less_than(b.input_amount) else 1
    return 1 if a.output_amount.less_than(b.output_amount) else -1


def sorted_insert(
    items: list[T], add: T, max_size: int, comparator: Callable[[T, T], int]
) -> T | None:
    """Insert into a sorted list capped at ``max_size`` entries.

    The list is modified in place. Equal items keep insertion order.

    Returns:
        The item that no longer fits (the new one when it ranks no better
        than the current tail of a full list), or None

    Raises:
        InvalidMaxSizeError: If max_size <= 0
        MaxSizeExceededError: If the list already holds more than max_size
    """
    if max_size <= 0:
        raise InvalidMaxSizeError(f"max_size must be positive: {max_size}")
    if len(items) > max_size:
        raise MaxSizeExceededError(f"List holds {len(items)} items, max_size is {max_size}")

    is_full = len(items) == max_size
    if is_full and comparator(items[-1], add) <= 0:
        return add

    lo, hi = 0, len(items)
    while lo < hi:
        mid = (lo + hi) // 2
        if comparator(items[mid], add) <= 0:
            lo = mid + 1
        else:
            hi = mid
    items.insert(lo, add)
    return items.pop() if is_full else None


# =============================================================================
# Search
# =============================================================================


def _is_relevant(pool: Pool, currency: Currency, first_hop: bool) -> bool:
    # Only the caller's own currency may be matched through its wrapped form;
    # intermediate hops carry the pool's exact currency.
    if first_hop:
        return pool.v4_involves_token(currency)
    return pool.involves_currency(currency)


def _quote(pool: Pool, amount: CurrencyAmount, exact_input: bool) -> PoolQuote | None:
    """Quote one hop, or None when this pool cannot serve the branch."""
    try:
        if exact_input:
            quote = pool.get_output_amount(amount)
        else:
            quote = pool.get_input_amount(amount)
    except PoolUnusableError as e:
        logger.debug("best_trade_pool_skipped", pool_id=pool.pool_id.hex(), reason=str(e))
        return None

    if quote.remaining.quotient != 0 or quote.amount.quotient == 0:
        logger.debug(
            "best_trade_pool_skipped",
            pool_id=pool.pool_id.hex(),
            reason="partial_fill",
            remaining=quote.remaining.quotient,
        )
        return None
    return quote


def _check_search_args(
    pools: Sequence[Pool],
    options: BestTradeOptions,
    top_amount: CurrencyAmount,
    next_amount: CurrencyAmount,
    current_pools: Sequence[Pool],
) -> None:
    if not pools:
        raise NoPoolsError("Best-trade search needs at least one pool")
    if options.max_hops <= 0:
        raise InvalidMaxHopsError(f"max_hops must be positive: {options.max_hops}")
    if not current_pools and not (
        next_amount.currency.equals(top_amount.currency) and next_amount.equal_to(top_amount)
    ):
        raise InvalidRecursionError("Carried amount must equal the requested amount on entry")


def best_trade_exact_in(
    pools: Sequence[Pool],
    currency_amount_in: CurrencyAmount,
    currency_out: Currency,
    options: BestTradeOptions | None = None,
    current_pools: Sequence[Pool] = (),
    next_amount_in: CurrencyAmount | None = None,
    best_trades: list[Trade] | None = None,
) -> list[Trade]:
    """Find the best trades for an exact input amount, highest output first.

    Args:
        pools: Candidate pools
        currency_amount_in: Exact amount to sell
        currency_out: Currency to buy
        options: Result count and hop bounds (default: 3 results, 3 hops)
        current_pools: Pools already on the path (recursion only)
        next_amount_in: Amount carried to the path frontier (recursion only)
        best_trades: Ranked results so far (recursion only)

    Returns:
        At most ``options.max_num_results`` trades, best first
    """
    options = options or DEFAULT_BEST_TRADE_OPTIONS
    if next_amount_in is None:
        next_amount_in = currency_amount_in
    _check_search_args(pools, options, currency_amount_in, next_amount_in, current_pools)
    if best_trades is None:
        best_trades = []

    for i, pool in enumerate(pools):
        if not _is_relevant(pool, next_amount_in.currency, first_hop=not current_pools):
            continue
        quote = _quote(pool, next_amount_in, exact_input=True)
        if quote is None:
            continue

        amount_out = quote.amount
        if amount_out.currency.wrapped.equals(currency_out.wrapped):
            route = Route([*current_pools, pool], currency_amount_in.currency, currency_out)
            trade = Trade.from_route(route, currency_amount_in, TradeType.EXACT_INPUT)
            sorted_insert(best_trades, trade, options.max_num_results, trade_comparator)
        elif options.max_hops > 1 and len(pools) > 1:
            best_trade_exact_in(
                [*pools[:i], *pools[i + 1 :]],
                currency_amount_in,
                currency_out,
                options.next_hop(),
                [*current_pools, pool],
                amount_out,
                best_trades,
            )

    if not current_pools:
        logger.debug(
            "best_trade_exact_in_complete",
            num_pools=len(pools),
            num_results=len(best_trades),
        )
    return best_trades


def best_trade_exact_out(
    pools: Sequence[Pool],
    currency_in: Currency,
    currency_amount_out: CurrencyAmount,
    options: BestTradeOptions | None = None,
    current_pools: Sequence[Pool] = (),
    next_amount_out: CurrencyAmount | None = None,
    best_trades: list[Trade] | None = None,
) -> list[Trade]:
    """Find the best trades for an exact output amount, lowest input first.

    Mirrors ``best_trade_exact_in`` walking backward from the output: each
    recursion prepends a pool to the path.
    """
    options = options or DEFAULT_BEST_TRADE_OPTIONS
    if next_amount_out is None:
        next_amount_out = currency_amount_out
    _check_search_args(pools, options, currency_amount_out, next_amount_out, current_pools)
    if best_trades is None:
        best_trades = []

    for i, pool in enumerate(pools):
        if not _is_relevant(pool, next_amount_out.currency, first_hop=not current_pools):
            continue
        quote = _quote(pool, next_amount_out, exact_input=False)
        if quote is None:
            continue

        amount_in = quote.amount
        if amount_in.currency.wrapped.equals(currency_in.wrapped):
            route = Route([pool, *current_pools], currency_in, currency_amount_out.currency)
            trade = Trade.from_route(route, currency_amount_out, TradeType.EXACT_OUTPUT)
            sorted_insert(best_trades, trade, options.max_num_results, trade_comparator)
        elif options.max_hops > 1 and len(pools) > 1:
            best_trade_exact_out(
                [*pools[:i], *pools[i + 1 :]],
                currency_in,
                currency_amount_out,
                options.next_hop(),
                [pool, *current_pools],
                amount_in,
                best_trades,
            )

    if not current_pools:
        logger.debug(
            "best_trade_exact_out_complete",
            num_pools=len(pools),
            num_results=len(best_trades),
        )
    return best_trades


__all__ = [
    "trade_comparator",
    "sorted_insert",
    "best_trade_exact_in",
    "best_trade_exact_out",
]
