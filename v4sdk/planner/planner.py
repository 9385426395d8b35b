"""Building v4 router calldata from a sequence of actions.

The router takes ``abi.encode(bytes actions, bytes[] params)``: one opcode
byte per action and, at the same index, that action's ABI-encoded
parameters.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog
from eth_abi import encode

from v4sdk.constants import FULL_DELTA_AMOUNT
from v4sdk.currency import Currency, to_address
from v4sdk.entities.trade import Trade
from v4sdk.errors import InvalidSlippageToleranceError, TradeHasMultipleRoutesError
from v4sdk.fractions import Percent, TradeType
from v4sdk.planner.actions import Actions, abi_types
from v4sdk.routing.path import encode_route_to_path
from v4sdk.types import address_to_bytes

logger = structlog.get_logger()


def currency_address_bytes(currency: Currency) -> bytes:
    """On-chain address of a currency as 20 raw bytes (zero for native)."""
    return address_to_bytes(to_address(currency))


def to_hook_data(hook_data: bytes | str) -> bytes:
    """Accept hook data as raw bytes or a 0x-prefixed hex string."""
    if isinstance(hook_data, str):
        return bytes.fromhex(hook_data.removeprefix("0x"))
    return hook_data


class V4Planner:
    """Accumulates router actions and encodes them as calldata.

    Methods return the planner so calls can be chained.
    """

    def __init__(self) -> None:
        self.actions = bytearray()
        self.params: list[bytes] = []

    def add_action(self, action: Actions, parameters: Sequence[Any]) -> V4Planner:
        """Append an action with parameters already in eth_abi form."""
        encoded = encode(abi_types(action), list(parameters))
        self.actions.append(int(action))
        self.params.append(encoded)
        return self

    def add_trade(self, trade: Trade, slippage_tolerance: Percent | None = None) -> V4Planner:
        """Append the swap action for a single-route trade.

        Exact-output trades need a slippage tolerance to bound the input.
        Exact-input trades without one get an output minimum of zero.

        Raises:
            InvalidSlippageToleranceError: If an exact-output trade has no
                tolerance
            TradeHasMultipleRoutesError: If the trade has more than one swap
        """
        exact_output = trade.trade_type == TradeType.EXACT_OUTPUT
        if exact_output and slippage_tolerance is None:
            raise InvalidSlippageToleranceError("Exact output trades require a slippage tolerance")
        if len(trade.swaps) != 1:
            raise TradeHasMultipleRoutesError(
                "Only trades with one swap are accepted; split the swaps into separate trades"
            )

        route = trade.route
        path = [key.to_abi_tuple() for key in encode_route_to_path(route, exact_output)]

        if exact_output:
            amount_in_maximum = trade.maximum_amount_in(slippage_tolerance).quotient
            self.add_action(
                Actions.SWAP_EXACT_OUT,
                [
                    (
                        currency_address_bytes(route.path_output),
                        path,
                        trade.output_amount.quotient,
                        amount_in_maximum,
                    )
                ],
            )
        else:
            amount_out_minimum = (
                trade.minimum_amount_out(slippage_tolerance).quotient
                if slippage_tolerance is not None
                else 0
            )
            self.add_action(
                Actions.SWAP_EXACT_IN,
                [
                    (
                        currency_address_bytes(route.path_input),
                        path,
                        trade.input_amount.quotient,
                        amount_out_minimum,
                    )
                ],
            )

        logger.debug(
            "planner_trade_added",
            exact_output=exact_output,
            hops=len(path),
        )
        return self

    def add_settle(
        self, currency: Currency, payer_is_user: bool, amount: int | None = None
    ) -> V4Planner:
        """Pay what is owed in ``currency``; no amount settles the full open delta."""
        return self.add_action(
            Actions.SETTLE,
            [
                currency_address_bytes(currency),
                FULL_DELTA_AMOUNT if amount is None else amount,
                payer_is_user,
            ],
        )

    def add_take(self, currency: Currency, recipient: str, amount: int | None = None) -> V4Planner:
        """Withdraw ``currency`` to recipient; no amount takes the full open delta."""
        return self.add_action(
            Actions.TAKE,
            [
                currency_address_bytes(currency),
                address_to_bytes(recipient),
                FULL_DELTA_AMOUNT if amount is None else amount,
            ],
        )

    def add_unwrap(self, amount: int) -> V4Planner:
        return self.add_action(Actions.UNWRAP, [amount])

    def finalize(self) -> str:
        """Encode all actions as 0x-prefixed router calldata."""
        return "0x" + encode(["bytes", "bytes[]"], [bytes(self.actions), self.params]).hex()


__all__ = ["V4Planner", "currency_address_bytes", "to_hook_data"]
