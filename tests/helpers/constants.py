"""Shared currency and pool constants for tests.

Token addresses are small and ordered so that currency0/currency1 order is
obvious: TOKEN_A < TOKEN_B < TOKEN_C < TOKEN_D.

Usage:
    from tests.helpers import TOKEN_A, TOKEN_B
"""

from v4sdk.constants import Q96, WETH9
from v4sdk.currency import Ether, Token

# =============================================================================
# Tokens (mainnet chain id)
# =============================================================================

CHAIN_ID = 1

TOKEN_A = Token(CHAIN_ID, "0x0000000000000000000000000000000000000001", 18, "A")
TOKEN_B = Token(CHAIN_ID, "0x0000000000000000000000000000000000000002", 18, "B")
TOKEN_C = Token(CHAIN_ID, "0x0000000000000000000000000000000000000003", 18, "C")
TOKEN_D = Token(CHAIN_ID, "0x0000000000000000000000000000000000000004", 18, "D")
USDC = Token(CHAIN_ID, "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", 6, "USDC")

ETHER = Ether.on_chain(CHAIN_ID)
WETH = ETHER.wrapped
WETH_ADDRESS = WETH9[CHAIN_ID]

# Same address as TOKEN_A on another chain
TOKEN_A_GOERLI = Token(5, "0x0000000000000000000000000000000000000001", 18, "A")
TOKEN_B_GOERLI = Token(5, "0x0000000000000000000000000000000000000002", 18, "B")

# =============================================================================
# Pool parameters
# =============================================================================

FEE = 3000
TICK_SPACING = 60
LIQUIDITY = 10**18

SQRT_PRICE_1_1 = Q96
SQRT_PRICE_4_1 = 2 * Q96
SQRT_PRICE_9_1 = 3 * Q96

# Hook addresses: the low 14 bits select callbacks
SWAP_HOOK = "0x0000000000000000000000000000000000000080"  # BEFORE_SWAP
INITIALIZE_HOOK = "0x0000000000000000000000000000000000002000"  # BEFORE_INITIALIZE

RECIPIENT = "0x00000000000000000000000000000000000000aa"
