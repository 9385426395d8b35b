"""Position manager actions: minting, modifying and burning liquidity positions."""

from __future__ import annotations

from v4sdk.constants import EMPTY_BYTES
from v4sdk.currency import Currency
from v4sdk.entities.pool import Pool
from v4sdk.planner.actions import Actions
from v4sdk.planner.planner import V4Planner, currency_address_bytes, to_hook_data
from v4sdk.types import address_to_bytes


class V4PositionPlanner(V4Planner):
    """Planner with the position manager's liquidity actions."""

    def add_mint(
        self,
        pool: Pool,
        tick_lower: int,
        tick_upper: int,
        liquidity: int,
        amount0_max: int,
        amount1_max: int,
        owner: str,
        hook_data: bytes | str = EMPTY_BYTES,
    ) -> V4PositionPlanner:
        self.add_action(
            Actions.MINT_POSITION,
            [
                pool.pool_key.to_abi_tuple(),
                tick_lower,
                tick_upper,
                liquidity,
                amount0_max,
                amount1_max,
                address_to_bytes(owner),
                to_hook_data(hook_data),
            ],
        )
        return self

    def add_increase(
        self,
        token_id: int,
        liquidity: int,
        amount0_max: int,
        amount1_max: int,
        hook_data: bytes | str = EMPTY_BYTES,
    ) -> V4PositionPlanner:
        self.add_action(
            Actions.INCREASE_LIQUIDITY,
            [token_id, liquidity, amount0_max, amount1_max, to_hook_data(hook_data)],
        )
        return self

    def add_decrease(
        self,
        token_id: int,
        liquidity: int,
        amount0_min: int,
        amount1_min: int,
        hook_data: bytes | str = EMPTY_BYTES,
    ) -> V4PositionPlanner:
        self.add_action(
            Actions.DECREASE_LIQUIDITY,
            [token_id, liquidity, amount0_min, amount1_min, to_hook_data(hook_data)],
        )
        return self

    def add_burn(
        self,
        token_id: int,
        amount0_min: int,
        amount1_min: int,
        hook_data: bytes | str = EMPTY_BYTES,
    ) -> V4PositionPlanner:
        self.add_action(
            Actions.BURN_POSITION,
            [token_id, amount0_min, amount1_min, to_hook_data(hook_data)],
        )
        return self

    def add_settle_pair(self, currency0: Currency, currency1: Currency) -> V4PositionPlanner:
        self.add_action(
            Actions.SETTLE_PAIR,
            [currency_address_bytes(currency0), currency_address_bytes(currency1)],
        )
        return self

    def add_take_pair(
        self, currency0: Currency, currency1: Currency, recipient: str
    ) -> V4PositionPlanner:
        self.add_action(
            Actions.TAKE_PAIR,
            [
                currency_address_bytes(currency0),
                currency_address_bytes(currency1),
                address_to_bytes(recipient),
            ],
        )
        return self

    def add_sweep(self, currency: Currency, to: str) -> V4PositionPlanner:
        self.add_action(Actions.SWEEP, [currency_address_bytes(currency), address_to_bytes(to)])
        return self


__all__ = ["V4PositionPlanner"]
