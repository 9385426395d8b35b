"""Conversion between ticks and Q64.96 square-root prices.

Exact port of the protocol's TickMath library. Every tick ``i`` maps to the
price ``1.0001 ** i``; ``get_sqrt_ratio_at_tick`` returns its square root as
a Q64.96 fixed-point integer, computed from a table of precomputed
``1 / sqrt(1.0001 ** (2 ** k))`` factors in Q128.128.
"""

from __future__ import annotations

from v4sdk.errors import SqrtRatioOutOfBoundsError, TickOutOfBoundsError
from v4sdk.types import UINT256_MAX

__all__ = [
    "MIN_TICK",
    "MAX_TICK",
    "MIN_SQRT_RATIO",
    "MAX_SQRT_RATIO",
    "get_sqrt_ratio_at_tick",
    "get_tick_at_sqrt_ratio",
]

# =============================================================================
# Bounds
# =============================================================================

MIN_TICK = -887272
MAX_TICK = -MIN_TICK

# get_sqrt_ratio_at_tick(MIN_TICK) and get_sqrt_ratio_at_tick(MAX_TICK)
MIN_SQRT_RATIO = 4295128739
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342

# Factor for bit k of |tick|, in Q128.128
_RATIO_FACTORS = (
    0xFFFCB933BD6FAD37AA2D162D1A594001,
    0xFFF97272373D413259A46990580E213A,
    0xFFF2E50F5F656932EF12357CF3C7FDCC,
    0xFFE5CACA7E10E4E61C3624EAA0941CD0,
    0xFFCB9843D60F6159C9DB58835C926644,
    0xFF973B41FA98C081472E6896DFB254C0,
    0xFF2EA16466C96A3843EC78B326B52861,
    0xFE5DEE046A99A2A811C461F1969C3053,
    0xFCBE86C7900A88AEDCFFC83B479AA3A4,
    0xF987A7253AC413176F2B074CF7815E54,
    0xF3392B0822B70005940C7A398E4B70F3,
    0xE7159475A2C29B7443B29C7FA6E889D9,
    0xD097F3BDFD2022B8845AD8F792AA5825,
    0xA9F746462D870FDF8A65DC1F90E061E5,
    0x70D869A156D2A1B890BB3DF62BAF32F7,
    0x31BE135F97D08FD981231505542FCFA6,
    0x9AA508B5B7A84E1C677DE54F3E99BC9,
    0x5D6AF8DEDB81196699C329225EE604,
    0x2216E584F5FA1EA926041BEDFE98,
    0x48A170391F7DC42444E8FA2,
)

_Q128 = 1 << 128


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """Return sqrt(1.0001 ** tick) * 2**96, rounded up.

    Raises:
        TickOutOfBoundsError: If tick is outside [MIN_TICK, MAX_TICK]
    """
    if tick < MIN_TICK or tick > MAX_TICK:
        raise TickOutOfBoundsError(f"Tick {tick} outside [{MIN_TICK}, {MAX_TICK}]")

    abs_tick = abs(tick)
    ratio = _Q128
    for bit, factor in enumerate(_RATIO_FACTORS):
        if abs_tick & (1 << bit):
            ratio = (ratio * factor) >> 128

    if tick > 0:
        ratio = UINT256_MAX // ratio

    # Q128.128 -> Q64.96, rounding up so the result never underestimates
    return (ratio >> 32) + (1 if ratio % (1 << 32) else 0)


def get_tick_at_sqrt_ratio(sqrt_ratio_x96: int) -> int:
    """Return the greatest tick whose sqrt ratio is <= sqrt_ratio_x96.

    Binary search over the tick range using the forward mapping, so the
    result is consistent with ``get_sqrt_ratio_at_tick`` by construction.

    Raises:
        SqrtRatioOutOfBoundsError: If the ratio is outside
            [MIN_SQRT_RATIO, MAX_SQRT_RATIO)
    """
    if sqrt_ratio_x96 < MIN_SQRT_RATIO or sqrt_ratio_x96 >= MAX_SQRT_RATIO:
        raise SqrtRatioOutOfBoundsError(
            f"sqrt ratio {sqrt_ratio_x96} outside [{MIN_SQRT_RATIO}, {MAX_SQRT_RATIO})"
        )

    low, high = MIN_TICK, MAX_TICK
    while low < high:
        mid = (low + high + 1) // 2
        if get_sqrt_ratio_at_tick(mid) <= sqrt_ratio_x96:
            low = mid
        else:
            high = mid - 1
    return low
