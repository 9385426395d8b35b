"""Signed liquidity deltas applied to uint128 liquidity."""

from v4sdk.errors import LiquidityOverflowError, LiquidityUnderflowError
from v4sdk.types import UINT128_MAX

__all__ = ["add_delta"]


def add_delta(x: int, y: int) -> int:
    """Add a signed liquidity delta to a liquidity value.

    Raises:
        LiquidityUnderflowError: If the result would be negative
        LiquidityOverflowError: If the result would exceed uint128
    """
    result = x + y
    if result < 0:
        raise LiquidityUnderflowError(f"Liquidity {x} cannot absorb delta {y}")
    if result > UINT128_MAX:
        raise LiquidityOverflowError(f"Liquidity {x} + {y} exceeds uint128")
    return result
