"""Tests for mul_div rounding and uint256 domain checks."""

import pytest

from v4sdk.errors import LiquidityOverflowError, LiquidityUnderflowError, MulDivOverflowError
from v4sdk.math import add_delta, div_rounding_up, mul_div, mul_div_rounding_up
from v4sdk.types import UINT128_MAX, UINT256_MAX


class TestMulDiv:
    def test_rounds_down(self):
        assert mul_div(6, 7, 4) == 10

    def test_rounding_up(self):
        assert mul_div_rounding_up(6, 7, 4) == 11

    def test_exact_division_not_rounded_up(self):
        assert mul_div_rounding_up(6, 8, 4) == 12

    def test_intermediate_product_may_exceed_uint256(self):
        """Only the result must fit, as with the 512-bit on-chain version."""
        assert mul_div(UINT256_MAX, UINT256_MAX, UINT256_MAX) == UINT256_MAX

    def test_zero_denominator_raises(self):
        with pytest.raises(MulDivOverflowError):
            mul_div(1, 1, 0)

    def test_result_overflow_raises(self):
        with pytest.raises(MulDivOverflowError):
            mul_div(UINT256_MAX, 2, 1)

    def test_rounding_up_past_max_raises(self):
        with pytest.raises(MulDivOverflowError):
            mul_div_rounding_up(UINT256_MAX, UINT256_MAX - 1, UINT256_MAX - 2)


class TestDivRoundingUp:
    def test_rounds_up_with_remainder(self):
        assert div_rounding_up(7, 2) == 4

    def test_exact(self):
        assert div_rounding_up(8, 2) == 4

    def test_zero_divisor_raises(self):
        with pytest.raises(MulDivOverflowError):
            div_rounding_up(1, 0)


class TestAddDelta:
    def test_positive_delta(self):
        assert add_delta(1, 2) == 3

    def test_negative_delta_to_zero(self):
        assert add_delta(1, -1) == 0

    def test_underflow(self):
        with pytest.raises(LiquidityUnderflowError):
            add_delta(0, -1)

    def test_overflow(self):
        with pytest.raises(LiquidityOverflowError):
            add_delta(UINT128_MAX, 1)
