"""Tests for price/tick conversion helpers."""

from fractions import Fraction

import pytest

from v4sdk.constants import Q96
from v4sdk.errors import ConfigurationError, TickOutOfBoundsError, V4SdkError
from v4sdk.fractions import Price
from v4sdk.math import MAX_TICK, MIN_TICK
from v4sdk.utils import (
    encode_sqrt_ratio_x96,
    nearest_usable_tick,
    price_to_closest_tick,
    tick_to_price,
)
from tests.helpers import TOKEN_A, TOKEN_B


class TestEncodeSqrtRatio:
    def test_one(self):
        assert encode_sqrt_ratio_x96(1, 1) == Q96

    def test_hundred(self):
        assert encode_sqrt_ratio_x96(100, 1) == 10 * Q96

    def test_one_hundredth(self):
        assert encode_sqrt_ratio_x96(1, 100) == 7922816251426433759354395033

    def test_zero_denominator_raises(self):
        with pytest.raises(ConfigurationError):
            encode_sqrt_ratio_x96(1, 0)


class TestTickToPrice:
    def test_tick_zero(self):
        assert tick_to_price(TOKEN_A, TOKEN_B, 0).fraction == 1
        assert tick_to_price(TOKEN_B, TOKEN_A, 0).fraction == 1

    def test_orders_are_inverse(self):
        forward = tick_to_price(TOKEN_A, TOKEN_B, 1000)
        backward = tick_to_price(TOKEN_B, TOKEN_A, 1000)
        assert forward.fraction * backward.fraction == 1
        assert forward.fraction > 1

    def test_currencies_kept(self):
        price = tick_to_price(TOKEN_B, TOKEN_A, 10)
        assert price.base_currency.equals(TOKEN_B)
        assert price.quote_currency.equals(TOKEN_A)


class TestPriceToClosestTick:
    def test_price_one(self):
        assert price_to_closest_tick(Price(TOKEN_A, TOKEN_B, 1, 1)) == 0
        assert price_to_closest_tick(Price(TOKEN_B, TOKEN_A, 1, 1)) == 0

    @pytest.mark.parametrize("tick", [-74959, -1000, -1, 1, 1000, 74959])
    def test_inverse_of_tick_to_price(self, tick):
        assert price_to_closest_tick(tick_to_price(TOKEN_A, TOKEN_B, tick)) == tick
        assert price_to_closest_tick(tick_to_price(TOKEN_B, TOKEN_A, tick)) == tick

    def test_rounds_down_between_ticks(self):
        # Slightly above the tick 100 price, well below tick 101
        price = tick_to_price(TOKEN_A, TOKEN_B, 100)
        bumped = Price.from_fraction(TOKEN_A, TOKEN_B, price.fraction * Fraction(100001, 100000))
        assert price_to_closest_tick(bumped) == 100


class TestNearestUsableTick:
    @pytest.mark.parametrize(
        "tick,spacing,expected",
        [
            (0, 60, 0),
            (4, 10, 0),
            (5, 10, 10),
            (-5, 10, 0),
            (-6, 10, -10),
            (MIN_TICK, 60, -887220),
            (MAX_TICK, 60, 887220),
            (MIN_TICK, 1, MIN_TICK),
        ],
    )
    def test_rounding(self, tick, spacing, expected):
        assert nearest_usable_tick(tick, spacing) == expected

    def test_spacing_must_be_positive(self):
        with pytest.raises(ConfigurationError):
            nearest_usable_tick(0, 0)

    def test_tick_must_be_in_bounds(self):
        with pytest.raises(TickOutOfBoundsError):
            nearest_usable_tick(MAX_TICK + 1, 1)

    def test_errors_share_sdk_base(self):
        with pytest.raises(V4SdkError):
            nearest_usable_tick(MIN_TICK - 1, 60)
