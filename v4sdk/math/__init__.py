"""Integer-exact concentrated-liquidity math.

This package provides the protocol's math libraries on Python integers:
- full_math: mul_div with rounding modes
- liquidity_math: signed liquidity deltas
- tick_math: tick <-> sqrt price conversion
- sqrt_price_math: amount deltas and next prices
- swap_math: a single swap step within one range
"""

from v4sdk.math.full_math import div_rounding_up, mul_div, mul_div_rounding_up
from v4sdk.math.liquidity_math import add_delta
from v4sdk.math.swap_math import SwapStep, compute_swap_step
from v4sdk.math.tick_math import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
)

__all__ = [
    "mul_div",
    "mul_div_rounding_up",
    "div_rounding_up",
    "add_delta",
    "SwapStep",
    "compute_swap_step",
    "MIN_TICK",
    "MAX_TICK",
    "MIN_SQRT_RATIO",
    "MAX_SQRT_RATIO",
    "get_sqrt_ratio_at_tick",
    "get_tick_at_sqrt_ratio",
]
