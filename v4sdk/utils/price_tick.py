"""Conversions between ticks, sqrt prices and human prices."""

from __future__ import annotations

from math import isqrt

from v4sdk.constants import Q192
from v4sdk.currency import Currency, sorts_before
from v4sdk.errors import ConfigurationError, TickOutOfBoundsError
from v4sdk.fractions import Price
from v4sdk.math.tick_math import (
    MAX_TICK,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)


def encode_sqrt_ratio_x96(amount1: int, amount0: int) -> int:
    """Q64.96 sqrt of amount1/amount0, rounded down.

    Raises:
        ConfigurationError: If amount0 is not positive
    """
    if amount0 <= 0:
        raise ConfigurationError(f"amount0 must be positive: {amount0}")
    return isqrt((amount1 << 192) // amount0)


def tick_to_price(base_currency: Currency, quote_currency: Currency, tick: int) -> Price:
    """Price of base in quote at ``tick``.

    Raises:
        TickOutOfBoundsError: If tick is outside [MIN_TICK, MAX_TICK]
    """
    sqrt_ratio_x96 = get_sqrt_ratio_at_tick(tick)
    ratio_x192 = sqrt_ratio_x96 * sqrt_ratio_x96
    if sorts_before(base_currency, quote_currency):
        return Price(base_currency, quote_currency, Q192, ratio_x192)
    return Price(base_currency, quote_currency, ratio_x192, Q192)


def price_to_closest_tick(price: Price) -> int:
    """Greatest tick whose price does not exceed ``price``.

    For prices quoted in currency0 per currency1 the comparison runs the
    other way, since the tick measures currency1 per currency0.
    """
    base, quote = price.base_currency, price.quote_currency
    sorted_ = sorts_before(base, quote)
    if sorted_:
        sqrt_ratio_x96 = encode_sqrt_ratio_x96(price.numerator, price.denominator)
    else:
        sqrt_ratio_x96 = encode_sqrt_ratio_x96(price.denominator, price.numerator)

    tick = get_tick_at_sqrt_ratio(sqrt_ratio_x96)
    next_tick_price = tick_to_price(base, quote, tick + 1)
    if sorted_:
        if price.fraction >= next_tick_price.fraction:
            tick += 1
    elif price.fraction <= next_tick_price.fraction:
        tick += 1
    return tick


def nearest_usable_tick(tick: int, tick_spacing: int) -> int:
    """Closest multiple of ``tick_spacing`` within the tick bounds.

    Raises:
        ConfigurationError: If tick_spacing is not positive
        TickOutOfBoundsError: If tick is outside [MIN_TICK, MAX_TICK]
    """
    if tick_spacing <= 0:
        raise ConfigurationError(f"tick_spacing must be positive: {tick_spacing}")
    if not MIN_TICK <= tick <= MAX_TICK:
        raise TickOutOfBoundsError(f"Tick {tick} outside [{MIN_TICK}, {MAX_TICK}]")
    # round half up, like Math.round
    rounded = ((2 * tick + tick_spacing) // (2 * tick_spacing)) * tick_spacing
    if rounded < MIN_TICK:
        return rounded + tick_spacing
    if rounded > MAX_TICK:
        return rounded - tick_spacing
    return rounded


__all__ = [
    "encode_sqrt_ratio_x96",
    "tick_to_price",
    "price_to_closest_tick",
    "nearest_usable_tick",
]
