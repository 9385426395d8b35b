"""Tests for Trade construction, aggregates and slippage bounds."""

from fractions import Fraction

import pytest

from v4sdk.entities import Route, Swap, Trade
from v4sdk.errors import (
    DuplicatePoolsError,
    EmptyRouteError,
    InputCurrencyMismatchError,
    InsufficientLiquidityError,
    InvalidAmountForRouteError,
    InvalidSlippageToleranceError,
    TradeHasMultipleRoutesError,
)
from v4sdk.fractions import Percent, TradeType
from v4sdk.ticks import Tick, TickListDataProvider
from tests.helpers import (
    ETHER,
    LIQUIDITY,
    SQRT_PRICE_4_1,
    SQRT_PRICE_9_1,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    make_amount,
    make_pool,
)


@pytest.fixture
def exact_in_trade(route_ab) -> Trade:
    return Trade.exact_in(route_ab, make_amount(TOKEN_A, 100))


@pytest.fixture
def exact_out_trade(route_ab) -> Trade:
    return Trade.exact_out(route_ab, make_amount(TOKEN_B, 98))


class TestFromRoute:
    def test_exact_in(self, exact_in_trade):
        assert exact_in_trade.trade_type == TradeType.EXACT_INPUT
        assert exact_in_trade.input_amount.quotient == 100
        assert exact_in_trade.output_amount.quotient == 98
        assert exact_in_trade.output_amount.currency.equals(TOKEN_B)

    def test_exact_out(self, exact_out_trade):
        assert exact_out_trade.trade_type == TradeType.EXACT_OUTPUT
        assert exact_out_trade.output_amount.quotient == 98
        assert exact_out_trade.input_amount.quotient == 100

    def test_multi_hop_loses_fee_twice(self, route_ab, route_abc):
        trade = Trade.exact_in(route_abc, make_amount(TOKEN_A, 10**6))
        single = Trade.exact_in(route_ab, make_amount(TOKEN_A, 10**6))
        assert trade.output_amount.currency.equals(TOKEN_C)
        assert trade.output_amount.quotient < single.output_amount.quotient

    def test_multi_hop_at_composed_price(self):
        """Through prices 4 and 9 a small trade yields about 36x, less two fees."""
        pool_ab = make_pool(TOKEN_A, TOKEN_B, SQRT_PRICE_4_1)
        pool_bc = make_pool(TOKEN_B, TOKEN_C, SQRT_PRICE_9_1)
        route = Route([pool_ab, pool_bc], TOKEN_A, TOKEN_C)

        trade = Trade.exact_in(route, make_amount(TOKEN_A, 10**9))

        assert route.mid_price.fraction == 36
        expected = 36 * 10**9 * Fraction(997, 1000) ** 2
        assert abs(trade.output_amount.fraction - expected) / expected < Fraction(1, 10**6)

    def test_zero_fee_multi_hop_is_exact(self):
        """Amounts chosen so every sqrt price lands on a power of two."""
        pool_ab = make_pool(TOKEN_A, TOKEN_B, liquidity=2**60, fee=0)
        pool_bc = make_pool(TOKEN_B, TOKEN_C, liquidity=2**59, fee=0)
        route = Route([pool_ab, pool_bc], TOKEN_A, TOKEN_C)

        trade = Trade.exact_in(route, make_amount(TOKEN_A, 2**60))

        assert trade.output_amount.quotient == 2**58
        assert trade.execution_price.fraction == Fraction(1, 4)
        assert trade.price_impact == Percent(3, 4)

    def test_zero_fee_multi_hop_exact_out(self):
        pool_ab = make_pool(TOKEN_A, TOKEN_B, liquidity=2**60, fee=0)
        pool_bc = make_pool(TOKEN_B, TOKEN_C, liquidity=2**59, fee=0)
        route = Route([pool_ab, pool_bc], TOKEN_A, TOKEN_C)

        trade = Trade.exact_out(route, make_amount(TOKEN_C, 2**58))

        assert trade.input_amount.quotient == 2**60

    def test_exact_out_multi_hop_walks_backward(self, route_abc):
        trade = Trade.exact_out(route_abc, make_amount(TOKEN_C, 10**6))
        assert trade.output_amount.quotient == 10**6
        assert trade.input_amount.currency.equals(TOKEN_A)
        assert trade.input_amount.quotient > 10**6

    @pytest.mark.parametrize("trade_type", [TradeType.EXACT_INPUT, TradeType.EXACT_OUTPUT])
    def test_zero_amount_rejected(self, route_ab, trade_type):
        currency = TOKEN_A if trade_type == TradeType.EXACT_INPUT else TOKEN_B
        with pytest.raises(InvalidAmountForRouteError):
            Trade.from_route(route_ab, make_amount(currency, 0), trade_type)

    def test_amount_in_wrong_currency(self, route_ab):
        with pytest.raises(InvalidAmountForRouteError):
            Trade.exact_in(route_ab, make_amount(TOKEN_B, 100))

    def test_exact_out_amount_in_wrong_currency(self, route_ab):
        with pytest.raises(InvalidAmountForRouteError):
            Trade.exact_out(route_ab, make_amount(TOKEN_A, 100))

    def test_insufficient_liquidity(self):
        ticks = TickListDataProvider(
            [Tick(-60, LIQUIDITY, LIQUIDITY), Tick(60, LIQUIDITY, -LIQUIDITY)], 60
        )
        route = Route([make_pool(TOKEN_A, TOKEN_B, ticks=ticks)], TOKEN_A, TOKEN_B)
        with pytest.raises(InsufficientLiquidityError):
            Trade.exact_in(route, make_amount(TOKEN_A, 10**30))

    def test_native_input(self, pool_eth_a):
        route = Route([pool_eth_a], ETHER, TOKEN_A)
        trade = Trade.exact_in(route, make_amount(ETHER, 100))
        assert trade.input_amount.currency.equals(ETHER)
        assert trade.output_amount.quotient == 98


class TestMultipleRoutes:
    def test_from_routes_sums_amounts(self, route_ab, pool_ac):
        pool_cb = make_pool(TOKEN_C, TOKEN_B)
        route_acb = Route([pool_ac, pool_cb], TOKEN_A, TOKEN_B)

        trade = Trade.from_routes(
            [(route_ab, make_amount(TOKEN_A, 100)), (route_acb, make_amount(TOKEN_A, 100))],
            TradeType.EXACT_INPUT,
        )

        assert len(trade.swaps) == 2
        assert trade.input_amount.quotient == 200
        assert trade.output_amount.quotient == sum(s.output_amount.quotient for s in trade.swaps)

    def test_route_of_multi_route_trade_raises(self, route_ab, pool_ac):
        route_acb = Route([pool_ac, make_pool(TOKEN_C, TOKEN_B)], TOKEN_A, TOKEN_B)
        trade = Trade.from_routes(
            [(route_ab, make_amount(TOKEN_A, 100)), (route_acb, make_amount(TOKEN_A, 100))],
            TradeType.EXACT_INPUT,
        )
        with pytest.raises(TradeHasMultipleRoutesError):
            _ = trade.route

    def test_duplicate_pools_rejected(self, route_ab):
        swap = Swap(route_ab, make_amount(TOKEN_A, 100), make_amount(TOKEN_B, 98))
        with pytest.raises(DuplicatePoolsError):
            Trade.create_unchecked_trade_with_multiple_routes([swap, swap], TradeType.EXACT_INPUT)

    def test_mismatched_inputs_rejected(self, route_ab, pool_bc):
        route_cb = Route([pool_bc], TOKEN_C, TOKEN_B)
        swaps = [
            Swap(route_ab, make_amount(TOKEN_A, 100), make_amount(TOKEN_B, 98)),
            Swap(route_cb, make_amount(TOKEN_C, 100), make_amount(TOKEN_B, 98)),
        ]
        with pytest.raises(InputCurrencyMismatchError):
            Trade.create_unchecked_trade_with_multiple_routes(swaps, TradeType.EXACT_INPUT)

    def test_no_swaps_rejected(self):
        with pytest.raises(EmptyRouteError):
            Trade.create_unchecked_trade_with_multiple_routes([], TradeType.EXACT_INPUT)

    def test_unchecked_trade_keeps_amounts(self, route_ab):
        trade = Trade.create_unchecked_trade(
            route_ab, make_amount(TOKEN_A, 5), make_amount(TOKEN_B, 7), TradeType.EXACT_INPUT
        )
        assert trade.route is route_ab
        assert trade.output_amount.quotient == 7

    def test_unchecked_trade_with_zero_input_rejected(self, route_ab):
        with pytest.raises(InvalidAmountForRouteError):
            Trade.create_unchecked_trade(
                route_ab, make_amount(TOKEN_A, 0), make_amount(TOKEN_B, 0), TradeType.EXACT_INPUT
            )


class TestPrices:
    def test_execution_price(self, exact_in_trade):
        assert exact_in_trade.execution_price.fraction == Fraction(98, 100)

    def test_price_impact(self, exact_in_trade):
        assert exact_in_trade.price_impact == Percent(2, 100)

    def test_num_hops(self, exact_in_trade, route_abc):
        assert exact_in_trade.num_hops == 2
        assert Trade.exact_in(route_abc, make_amount(TOKEN_A, 100)).num_hops == 3


class TestSlippage:
    def test_minimum_amount_out(self, exact_in_trade):
        assert exact_in_trade.minimum_amount_out(Percent(0)).quotient == 98
        # floor(98 / 1.05)
        assert exact_in_trade.minimum_amount_out(Percent(5, 100)).quotient == 93

    def test_maximum_amount_in_of_exact_in_is_input(self, exact_in_trade):
        assert exact_in_trade.maximum_amount_in(Percent(5, 100)).quotient == 100

    def test_maximum_amount_in(self, exact_out_trade):
        assert exact_out_trade.maximum_amount_in(Percent(5, 100)).quotient == 105

    def test_minimum_amount_out_of_exact_out_is_output(self, exact_out_trade):
        assert exact_out_trade.minimum_amount_out(Percent(5, 100)).quotient == 98

    def test_explicit_amount(self, exact_in_trade):
        amount = exact_in_trade.minimum_amount_out(Percent(1, 100), make_amount(TOKEN_B, 202))
        assert amount.quotient == 200

    def test_negative_tolerance_raises(self, exact_in_trade):
        with pytest.raises(InvalidSlippageToleranceError):
            exact_in_trade.minimum_amount_out(Percent(-1, 100))
        with pytest.raises(InvalidSlippageToleranceError):
            exact_in_trade.maximum_amount_in(Percent(-1, 100))

    def test_worst_execution_price(self, exact_in_trade):
        price = exact_in_trade.worst_execution_price(Percent(5, 100))
        assert price.fraction == Fraction(93, 100)
