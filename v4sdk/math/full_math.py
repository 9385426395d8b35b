"""Full-precision multiply-then-divide on uint256 values.

Python integers never overflow, so the only thing these helpers add over
plain ``//`` is the rounding mode and the on-chain domain checks: a zero
denominator or a result that does not fit in uint256 reverts on-chain and
raises ``MulDivOverflowError`` here.
"""

from __future__ import annotations

from v4sdk.errors import MulDivOverflowError
from v4sdk.types import UINT256_MAX

__all__ = ["mul_div", "mul_div_rounding_up", "div_rounding_up"]


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator) with uint256 result checks."""
    if denominator == 0:
        raise MulDivOverflowError("mul_div by zero")
    result = (a * b) // denominator
    if result > UINT256_MAX:
        raise MulDivOverflowError(f"mul_div result {result} exceeds uint256")
    return result


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """ceil(a * b / denominator) with uint256 result checks."""
    result = mul_div(a, b, denominator)
    if (a * b) % denominator > 0:
        if result >= UINT256_MAX:
            raise MulDivOverflowError("mul_div_rounding_up result exceeds uint256")
        result += 1
    return result


def div_rounding_up(x: int, y: int) -> int:
    """ceil(x / y) for non-negative x."""
    if y == 0:
        raise MulDivOverflowError("div_rounding_up by zero")
    quotient, remainder = divmod(x, y)
    return quotient + (1 if remainder > 0 else 0)
