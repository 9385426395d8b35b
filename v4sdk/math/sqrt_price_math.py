"""Token amount deltas and next prices for a liquidity range.

Port of the protocol's SqrtPriceMath library. Rounding always favours the
pool: amounts owed to the pool round up, amounts paid out round down, and
next prices round so the pool never gives away more than it received. The
uint160/uint256 range checks the contract performs are reproduced so that
inputs which would revert on-chain raise ``MathError`` here.
"""

from __future__ import annotations

from v4sdk.constants import Q96
from v4sdk.errors import MathError
from v4sdk.math.full_math import div_rounding_up, mul_div, mul_div_rounding_up
from v4sdk.types import UINT160_MAX, UINT256_MAX

__all__ = [
    "get_amount0_delta",
    "get_amount1_delta",
    "get_amount0_delta_signed",
    "get_amount1_delta_signed",
    "get_next_sqrt_price_from_input",
    "get_next_sqrt_price_from_output",
]

_RESOLUTION = 96


def _to_uint160(value: int) -> int:
    if value > UINT160_MAX:
        raise MathError(f"sqrt price {value} exceeds uint160")
    return value


# =============================================================================
# Next price
# =============================================================================


def _next_sqrt_price_from_amount0_rounding_up(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    if amount == 0:
        return sqrt_price_x96
    numerator1 = liquidity << _RESOLUTION
    product = amount * sqrt_price_x96

    if add:
        if product <= UINT256_MAX:
            denominator = numerator1 + product
            if denominator <= UINT256_MAX:
                return mul_div_rounding_up(numerator1, sqrt_price_x96, denominator)
        return div_rounding_up(numerator1, numerator1 // sqrt_price_x96 + amount)

    if product > UINT256_MAX or numerator1 <= product:
        raise MathError("Output amount exceeds the token0 reserve of the range")
    denominator = numerator1 - product
    return _to_uint160(mul_div_rounding_up(numerator1, sqrt_price_x96, denominator))


def _next_sqrt_price_from_amount1_rounding_down(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    if add:
        if amount <= UINT160_MAX:
            quotient = (amount << _RESOLUTION) // liquidity
        else:
            quotient = mul_div(amount, Q96, liquidity)
        return _to_uint160(sqrt_price_x96 + quotient)

    if amount <= UINT160_MAX:
        quotient = div_rounding_up(amount << _RESOLUTION, liquidity)
    else:
        quotient = mul_div_rounding_up(amount, Q96, liquidity)
    if sqrt_price_x96 <= quotient:
        raise MathError("Output amount exceeds the token1 reserve of the range")
    return sqrt_price_x96 - quotient


def get_next_sqrt_price_from_input(
    sqrt_price_x96: int, liquidity: int, amount_in: int, zero_for_one: bool
) -> int:
    """Price after adding amount_in of the input token to the range."""
    if sqrt_price_x96 <= 0 or liquidity <= 0:
        raise MathError("Price and liquidity must be positive")
    if zero_for_one:
        return _next_sqrt_price_from_amount0_rounding_up(sqrt_price_x96, liquidity, amount_in, True)
    return _next_sqrt_price_from_amount1_rounding_down(sqrt_price_x96, liquidity, amount_in, True)


def get_next_sqrt_price_from_output(
    sqrt_price_x96: int, liquidity: int, amount_out: int, zero_for_one: bool
) -> int:
    """Price after removing amount_out of the output token from the range."""
    if sqrt_price_x96 <= 0 or liquidity <= 0:
        raise MathError("Price and liquidity must be positive")
    if zero_for_one:
        return _next_sqrt_price_from_amount1_rounding_down(
            sqrt_price_x96, liquidity, amount_out, False
        )
    return _next_sqrt_price_from_amount0_rounding_up(sqrt_price_x96, liquidity, amount_out, False)


# =============================================================================
# Amount deltas
# =============================================================================


def get_amount0_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Amount of token0 between two prices: L * (sqrtB - sqrtA) / (sqrtA * sqrtB)."""
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96
    if sqrt_ratio_a_x96 <= 0:
        raise MathError("sqrt ratio must be positive")

    numerator1 = liquidity << _RESOLUTION
    numerator2 = sqrt_ratio_b_x96 - sqrt_ratio_a_x96

    if round_up:
        return div_rounding_up(
            mul_div_rounding_up(numerator1, numerator2, sqrt_ratio_b_x96), sqrt_ratio_a_x96
        )
    return mul_div(numerator1, numerator2, sqrt_ratio_b_x96) // sqrt_ratio_a_x96


def get_amount1_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Amount of token1 between two prices: L * (sqrtB - sqrtA)."""
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96
    if round_up:
        return mul_div_rounding_up(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)
    return mul_div(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)


def get_amount0_delta_signed(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int) -> int:
    """Signed token0 delta for a signed liquidity change."""
    if liquidity < 0:
        return -get_amount0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, -liquidity, False)
    return get_amount0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, True)


def get_amount1_delta_signed(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int) -> int:
    """Signed token1 delta for a signed liquidity change."""
    if liquidity < 0:
        return -get_amount1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, -liquidity, False)
    return get_amount1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity, True)
