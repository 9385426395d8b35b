"""Pool state and the tick-crossing swap simulation.

A ``Pool`` is an immutable snapshot of one v4 pool. ``swap`` replays the
PoolManager's swap loop exactly (same rounding, same tick transitions) and
never mutates the snapshot; callers get a fresh ``Pool`` back from the
quoting helpers.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from functools import cached_property
from typing import NamedTuple

import structlog
from eth_abi import encode
from eth_utils import keccak

from v4sdk.constants import ADDRESS_ZERO, FEE_DENOMINATOR, Q192
from v4sdk.currency import Currency, sorts_before, to_address
from v4sdk.entities.path_currency import get_path_currency
from v4sdk.errors import (
    CurrencyNotInPoolError,
    FeeTooHighError,
    InvalidCurrencyError,
    InvalidSqrtPriceError,
    SqrtPriceLimitTooHighError,
    SqrtPriceLimitTooLowError,
    UnsupportedHookError,
)
from v4sdk.fractions import CurrencyAmount, Price
from v4sdk.hooks import has_swap_permissions
from v4sdk.math.liquidity_math import add_delta
from v4sdk.math.swap_math import compute_swap_step
from v4sdk.math.tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)
from v4sdk.ticks.provider import NoTickDataProvider, TickDataProvider
from v4sdk.types import address_to_bytes, normalize_address

logger = structlog.get_logger()

POOL_KEY_ABI_TYPES = ["address", "address", "uint24", "int24", "address"]


# =============================================================================
# Pool key and id
# =============================================================================


@dataclass(frozen=True)
class PoolKey:
    """Identifying parameters of a v4 pool, currencies in canonical order."""

    currency0: str
    currency1: str
    fee: int
    tick_spacing: int
    hooks: str

    def to_abi_tuple(self) -> tuple[bytes, bytes, int, int, bytes]:
        """Values ready for eth_abi encoding as (address,address,uint24,int24,address)."""
        return (
            address_to_bytes(self.currency0),
            address_to_bytes(self.currency1),
            self.fee,
            self.tick_spacing,
            address_to_bytes(self.hooks),
        )


def _sort_currencies(currency_a: Currency, currency_b: Currency) -> tuple[Currency, Currency]:
    if sorts_before(currency_a, currency_b):
        return currency_a, currency_b
    return currency_b, currency_a


def get_pool_key(
    currency_a: Currency,
    currency_b: Currency,
    fee: int,
    tick_spacing: int,
    hooks: str = ADDRESS_ZERO,
) -> PoolKey:
    """Build the pool key; the two currencies may be given in either order."""
    currency0, currency1 = _sort_currencies(currency_a, currency_b)
    return PoolKey(
        currency0=to_address(currency0),
        currency1=to_address(currency1),
        fee=fee,
        tick_spacing=tick_spacing,
        hooks=normalize_address(hooks, validate=True),
    )


def get_pool_id(
    currency_a: Currency,
    currency_b: Currency,
    fee: int,
    tick_spacing: int,
    hooks: str = ADDRESS_ZERO,
) -> bytes:
    """keccak256 of the ABI-encoded pool key."""
    key = get_pool_key(currency_a, currency_b, fee, tick_spacing, hooks)
    return keccak(encode(POOL_KEY_ABI_TYPES, key.to_abi_tuple()))


# =============================================================================
# Swap results
# =============================================================================


@dataclass(frozen=True)
class SwapResult:
    """Raw outcome of ``Pool.swap``.

    ``amount_calculated`` follows the pool's sign convention: negative for the
    output of an exact-input swap, positive for the input of an exact-output
    swap.
    """

    amount_calculated: int
    sqrt_price_x96: int
    liquidity: int
    tick_current: int
    amount_specified_remaining: int
    initialized_ticks_crossed: int


@dataclass(frozen=True)
class PoolQuote:
    """Result of quoting an amount through a pool.

    Attributes:
        amount: Output (exact input) or required input (exact output)
        remaining: Part of the given amount the pool could not fill; non-zero
            means liquidity ran out before the price limit was reached
        pool: Pool state after the swap
        initialized_ticks_crossed: Number of initialized ticks crossed
    """

    amount: CurrencyAmount
    remaining: CurrencyAmount
    pool: Pool
    initialized_ticks_crossed: int


class _SwapState(NamedTuple):
    amount_specified_remaining: int
    amount_calculated: int
    sqrt_price_x96: int
    tick: int
    liquidity: int
    initialized_ticks_crossed: int


# =============================================================================
# Pool
# =============================================================================


@dataclass(frozen=True)
class Pool:
    """Immutable snapshot of a v4 concentrated liquidity pool.

    The two currencies may be passed in any order; they are stored sorted.
    ``sqrt_price_x96`` must lie within [sqrt ratio at tick_current, sqrt
    ratio at tick_current + 1].
    """

    currency0: Currency
    currency1: Currency
    fee: int  # pips, e.g. 3000 for 0.3%
    tick_spacing: int
    hooks: str
    sqrt_price_x96: int
    liquidity: int
    tick_current: int
    tick_data_provider: TickDataProvider = field(
        default_factory=NoTickDataProvider, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.currency0.equals(self.currency1):
            raise InvalidCurrencyError(f"Pool currencies must differ: {self.currency0}")
        currency0, currency1 = _sort_currencies(self.currency0, self.currency1)
        object.__setattr__(self, "currency0", currency0)
        object.__setattr__(self, "currency1", currency1)
        object.__setattr__(self, "hooks", normalize_address(self.hooks, validate=True))

        if self.fee >= FEE_DENOMINATOR:
            raise FeeTooHighError(f"Fee {self.fee} must be below {FEE_DENOMINATOR}")

        lower = get_sqrt_ratio_at_tick(self.tick_current)
        upper = get_sqrt_ratio_at_tick(min(self.tick_current + 1, MAX_TICK))
        if not lower <= self.sqrt_price_x96 <= upper:
            raise InvalidSqrtPriceError(
                f"sqrtPriceX96 {self.sqrt_price_x96} outside tick {self.tick_current} range"
            )

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    @cached_property
    def pool_key(self) -> PoolKey:
        return get_pool_key(
            self.currency0, self.currency1, self.fee, self.tick_spacing, self.hooks
        )

    @cached_property
    def pool_id(self) -> bytes:
        return get_pool_id(self.currency0, self.currency1, self.fee, self.tick_spacing, self.hooks)

    @property
    def chain_id(self) -> int:
        return self.currency0.chain_id

    def involves_currency(self, currency: Currency) -> bool:
        return self.currency0.equals(currency) or self.currency1.equals(currency)

    def v4_involves_token(self, currency: Currency) -> bool:
        """Like involves_currency, but also matches through wrapped forms (ETH <-> WETH)."""
        wrapped = currency.wrapped
        return (
            self.involves_currency(currency)
            or wrapped.equals(self.currency0)
            or wrapped.equals(self.currency1)
            or wrapped.equals(self.currency0.wrapped)
            or wrapped.equals(self.currency1.wrapped)
        )

    # -------------------------------------------------------------------------
    # Prices
    # -------------------------------------------------------------------------

    @cached_property
    def currency0_price(self) -> Price:
        """Price of currency0 in terms of currency1."""
        return Price(self.currency0, self.currency1, Q192, self.sqrt_price_x96 * self.sqrt_price_x96)

    @cached_property
    def currency1_price(self) -> Price:
        """Price of currency1 in terms of currency0."""
        return Price(self.currency1, self.currency0, self.sqrt_price_x96 * self.sqrt_price_x96, Q192)

    def price_of(self, currency: Currency) -> Price:
        if not self.involves_currency(currency):
            raise CurrencyNotInPoolError(f"{currency} is not in pool {self.pool_id.hex()}")
        if self.currency0.equals(currency):
            return self.currency0_price
        return self.currency1_price

    # -------------------------------------------------------------------------
    # Quoting
    # -------------------------------------------------------------------------

    def get_output_amount(
        self, input_amount: CurrencyAmount, sqrt_price_limit_x96: int | None = None
    ) -> PoolQuote:
        """Output for an exact input amount, plus the pool state after the swap."""
        input_currency = get_path_currency(input_amount.currency, self)
        zero_for_one = input_currency.equals(self.currency0)

        result = self.swap(zero_for_one, input_amount.quotient, sqrt_price_limit_x96)
        output_currency = self.currency1 if zero_for_one else self.currency0

        if result.amount_specified_remaining != 0:
            logger.debug(
                "pool_partial_fill",
                pool_id=self.pool_id.hex(),
                exact_input=True,
                remaining=result.amount_specified_remaining,
            )

        return PoolQuote(
            amount=CurrencyAmount(output_currency, -result.amount_calculated),
            remaining=CurrencyAmount(input_currency, result.amount_specified_remaining),
            pool=self._after_swap(result),
            initialized_ticks_crossed=result.initialized_ticks_crossed,
        )

    def get_input_amount(
        self, output_amount: CurrencyAmount, sqrt_price_limit_x96: int | None = None
    ) -> PoolQuote:
        """Input required for an exact output amount, plus the pool state after the swap."""
        output_currency = get_path_currency(output_amount.currency, self)
        zero_for_one = output_currency.equals(self.currency1)

        result = self.swap(zero_for_one, -output_amount.quotient, sqrt_price_limit_x96)
        input_currency = self.currency0 if zero_for_one else self.currency1

        if result.amount_specified_remaining != 0:
            logger.debug(
                "pool_partial_fill",
                pool_id=self.pool_id.hex(),
                exact_input=False,
                remaining=-result.amount_specified_remaining,
            )

        return PoolQuote(
            amount=CurrencyAmount(input_currency, result.amount_calculated),
            remaining=CurrencyAmount(output_currency, -result.amount_specified_remaining),
            pool=self._after_swap(result),
            initialized_ticks_crossed=result.initialized_ticks_crossed,
        )

    def _after_swap(self, result: SwapResult) -> Pool:
        # A swap that runs to MIN_SQRT_RATIO reports MIN_TICK - 1
        return dataclasses.replace(
            self,
            sqrt_price_x96=result.sqrt_price_x96,
            liquidity=result.liquidity,
            tick_current=max(MIN_TICK, result.tick_current),
        )

    # -------------------------------------------------------------------------
    # Swap
    # -------------------------------------------------------------------------

    def swap(
        self,
        zero_for_one: bool,
        amount_specified: int,
        sqrt_price_limit_x96: int | None = None,
    ) -> SwapResult:
        """Simulate a swap against this pool state.

        Args:
            zero_for_one: True to swap currency0 for currency1
            amount_specified: Exact input if >= 0, exact output magnitude if < 0
            sqrt_price_limit_x96: Price the swap may not move past. Defaults
                to just inside the protocol bound in the swap direction.

        Raises:
            UnsupportedHookError: If the hooks can act on swaps
            SqrtPriceLimitTooLowError: Limit below the allowed range
            SqrtPriceLimitTooHighError: Limit above the allowed range
        """
        if has_swap_permissions(self.hooks):
            raise UnsupportedHookError(f"Hook {self.hooks} has swap permissions")

        if sqrt_price_limit_x96 is None:
            sqrt_price_limit_x96 = MIN_SQRT_RATIO + 1 if zero_for_one else MAX_SQRT_RATIO - 1

        if zero_for_one:
            if sqrt_price_limit_x96 < MIN_SQRT_RATIO:
                raise SqrtPriceLimitTooLowError(f"Limit {sqrt_price_limit_x96} below minimum")
            if sqrt_price_limit_x96 >= self.sqrt_price_x96:
                raise SqrtPriceLimitTooHighError(
                    f"Limit {sqrt_price_limit_x96} not below price {self.sqrt_price_x96}"
                )
        else:
            if sqrt_price_limit_x96 > MAX_SQRT_RATIO:
                raise SqrtPriceLimitTooHighError(f"Limit {sqrt_price_limit_x96} above maximum")
            if sqrt_price_limit_x96 <= self.sqrt_price_x96:
                raise SqrtPriceLimitTooLowError(
                    f"Limit {sqrt_price_limit_x96} not above price {self.sqrt_price_x96}"
                )

        exact_input = amount_specified >= 0
        state = _SwapState(
            amount_specified_remaining=amount_specified,
            amount_calculated=0,
            sqrt_price_x96=self.sqrt_price_x96,
            tick=self.tick_current,
            liquidity=self.liquidity,
            initialized_ticks_crossed=0,
        )

        while state.amount_specified_remaining != 0 and state.sqrt_price_x96 != sqrt_price_limit_x96:
            state = self._swap_step(state, zero_for_one, exact_input, sqrt_price_limit_x96)

        return SwapResult(
            amount_calculated=state.amount_calculated,
            sqrt_price_x96=state.sqrt_price_x96,
            liquidity=state.liquidity,
            tick_current=state.tick,
            amount_specified_remaining=state.amount_specified_remaining,
            initialized_ticks_crossed=state.initialized_ticks_crossed,
        )

    def _swap_step(
        self,
        state: _SwapState,
        zero_for_one: bool,
        exact_input: bool,
        sqrt_price_limit_x96: int,
    ) -> _SwapState:
        """Advance the swap to the next initialized tick, the limit, or exhaustion."""
        sqrt_price_start_x96 = state.sqrt_price_x96

        tick_next, initialized = self.tick_data_provider.next_initialized_tick_index(
            state.tick, zero_for_one
        )
        tick_next = max(MIN_TICK, min(MAX_TICK, tick_next))
        sqrt_price_next_x96 = get_sqrt_ratio_at_tick(tick_next)

        if zero_for_one:
            target = max(sqrt_price_next_x96, sqrt_price_limit_x96)
        else:
            target = min(sqrt_price_next_x96, sqrt_price_limit_x96)

        step = compute_swap_step(
            state.sqrt_price_x96,
            target,
            state.liquidity,
            state.amount_specified_remaining,
            self.fee,
        )

        if exact_input:
            state = state._replace(
                amount_specified_remaining=state.amount_specified_remaining
                - (step.amount_in + step.fee_amount),
                amount_calculated=state.amount_calculated - step.amount_out,
            )
        else:
            state = state._replace(
                amount_specified_remaining=state.amount_specified_remaining + step.amount_out,
                amount_calculated=state.amount_calculated + step.amount_in + step.fee_amount,
            )
        state = state._replace(sqrt_price_x96=step.sqrt_price_next_x96)

        if step.sqrt_price_next_x96 == sqrt_price_next_x96:
            # Reached the tick boundary: cross it
            if initialized:
                liquidity_net = self.tick_data_provider.get_tick(tick_next).liquidity_net
                if zero_for_one:
                    liquidity_net = -liquidity_net
                state = state._replace(
                    liquidity=add_delta(state.liquidity, liquidity_net),
                    initialized_ticks_crossed=state.initialized_ticks_crossed + 1,
                )
            return state._replace(tick=tick_next - 1 if zero_for_one else tick_next)

        if step.sqrt_price_next_x96 != sqrt_price_start_x96:
            # Stopped inside the range; the price alone determines the tick
            return state._replace(tick=get_tick_at_sqrt_ratio(step.sqrt_price_next_x96))

        return state


__all__ = [
    "POOL_KEY_ABI_TYPES",
    "PoolKey",
    "get_pool_key",
    "get_pool_id",
    "SwapResult",
    "PoolQuote",
    "Pool",
]
