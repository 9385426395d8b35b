"""Test helpers module for shared test utilities.

- constants: Tokens, hook addresses and default pool parameters
- factories: Pool and amount factory functions
"""

from tests.helpers.constants import (
    CHAIN_ID,
    ETHER,
    FEE,
    INITIALIZE_HOOK,
    LIQUIDITY,
    RECIPIENT,
    SQRT_PRICE_1_1,
    SQRT_PRICE_4_1,
    SQRT_PRICE_9_1,
    SWAP_HOOK,
    TICK_SPACING,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    USDC,
    WETH,
)
from tests.helpers.factories import make_amount, make_full_range_ticks, make_pool

__all__ = [
    # Constants
    "CHAIN_ID",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "TOKEN_D",
    "USDC",
    "ETHER",
    "WETH",
    "FEE",
    "TICK_SPACING",
    "LIQUIDITY",
    "SQRT_PRICE_1_1",
    "SQRT_PRICE_4_1",
    "SQRT_PRICE_9_1",
    "SWAP_HOOK",
    "INITIALIZE_HOOK",
    "RECIPIENT",
    # Factories
    "make_pool",
    "make_amount",
    "make_full_range_ticks",
]
