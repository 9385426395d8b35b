"""Tests for amount deltas, next prices and the single swap step.

Expected values are the protocol's own reference vectors for a range with
1e18 liquidity between prices 1 and 1.21.
"""

import pytest

from v4sdk.constants import Q96
from v4sdk.errors import MathError
from v4sdk.math import compute_swap_step
from v4sdk.math.sqrt_price_math import (
    get_amount0_delta,
    get_amount0_delta_signed,
    get_amount1_delta,
    get_amount1_delta_signed,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from v4sdk.utils import encode_sqrt_ratio_x96

ONE = 10**18
SQRT_1_21 = encode_sqrt_ratio_x96(121, 100)


class TestAmountDeltas:
    def test_sqrt_1_21(self):
        assert SQRT_1_21 == 87150978765690771352898345369

    def test_amount0_rounding_up(self):
        assert get_amount0_delta(Q96, SQRT_1_21, ONE, True) == 90909090909090910

    def test_amount0_rounding_down(self):
        assert get_amount0_delta(Q96, SQRT_1_21, ONE, False) == 90909090909090909

    def test_amount1_rounding_up(self):
        assert get_amount1_delta(Q96, SQRT_1_21, ONE, True) == 100000000000000000

    def test_amount1_rounding_down(self):
        assert get_amount1_delta(Q96, SQRT_1_21, ONE, False) == 99999999999999999

    def test_argument_order_does_not_matter(self):
        assert get_amount0_delta(SQRT_1_21, Q96, ONE, True) == get_amount0_delta(
            Q96, SQRT_1_21, ONE, True
        )

    def test_zero_liquidity(self):
        assert get_amount0_delta(Q96, SQRT_1_21, 0, True) == 0
        assert get_amount1_delta(Q96, SQRT_1_21, 0, True) == 0

    def test_signed_deltas(self):
        assert get_amount0_delta_signed(Q96, SQRT_1_21, ONE) == 90909090909090910
        assert get_amount0_delta_signed(Q96, SQRT_1_21, -ONE) == -90909090909090909
        assert get_amount1_delta_signed(Q96, SQRT_1_21, -ONE) == -99999999999999999

    def test_zero_price_raises(self):
        with pytest.raises(MathError):
            get_amount0_delta(0, Q96, ONE, True)


class TestNextSqrtPrice:
    def test_input_of_token1(self):
        assert get_next_sqrt_price_from_input(Q96, ONE, ONE // 10, False) == SQRT_1_21

    def test_input_of_token0(self):
        assert (
            get_next_sqrt_price_from_input(Q96, ONE, ONE // 10, True)
            == 72025602285694852357767227579
        )

    def test_zero_input_keeps_price(self):
        assert get_next_sqrt_price_from_input(Q96, ONE, 0, True) == Q96
        assert get_next_sqrt_price_from_input(Q96, ONE, 0, False) == Q96

    def test_zero_liquidity_raises(self):
        with pytest.raises(MathError):
            get_next_sqrt_price_from_input(Q96, 0, 1, True)

    def test_output_moves_price_away(self):
        assert get_next_sqrt_price_from_output(Q96, ONE, ONE // 10, True) < Q96
        assert get_next_sqrt_price_from_output(Q96, ONE, ONE // 10, False) > Q96

    def test_output_of_entire_token0_reserve_raises(self):
        with pytest.raises(MathError):
            get_next_sqrt_price_from_output(Q96, ONE, ONE, False)

    def test_output_of_entire_token1_reserve_raises(self):
        with pytest.raises(MathError):
            get_next_sqrt_price_from_output(Q96, ONE, ONE, True)


class TestComputeSwapStep:
    def test_exact_in_capped_at_target(self):
        target = encode_sqrt_ratio_x96(101, 100)
        step = compute_swap_step(Q96, target, 2 * ONE, ONE, 600)

        assert step.sqrt_price_next_x96 == target
        assert step.amount_in + step.fee_amount < ONE
        assert step.amount_out > 0

    def test_exact_out_capped_at_target(self):
        target = encode_sqrt_ratio_x96(101, 100)
        step = compute_swap_step(Q96, target, 2 * ONE, -ONE, 600)

        assert step.sqrt_price_next_x96 == target
        assert step.amount_out < ONE

    def test_exact_in_fully_spent(self):
        target = encode_sqrt_ratio_x96(1000, 100)
        step = compute_swap_step(Q96, target, 2 * ONE, ONE, 600)

        assert step.sqrt_price_next_x96 < target
        assert step.amount_in + step.fee_amount == ONE

    def test_exact_out_fully_received(self):
        target = encode_sqrt_ratio_x96(10000, 100)
        step = compute_swap_step(Q96, target, 2 * ONE, -ONE, 600)

        assert step.sqrt_price_next_x96 < target
        assert step.amount_out == ONE

    def test_entire_input_taken_as_fee(self):
        step = compute_swap_step(
            2413, 79887613182836312, 1985041575832132834610021537970, 10, 1872
        )
        assert step == (2413, 0, 0, 10)
