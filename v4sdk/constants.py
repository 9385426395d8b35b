"""Protocol constants for the v4 SDK.

Centralizes well-known addresses and fixed-point parameters.
"""

from v4sdk.types import is_valid_address


def _validate_address(name: str, address: str) -> str:
    """Validate and return an address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address.lower()


ADDRESS_ZERO = "0x0000000000000000000000000000000000000000"
EMPTY_HOOK = ADDRESS_ZERO
EMPTY_BYTES = "0x"

# Fixed-point scales
Q96 = 2**96
Q192 = 2**192

# Fees are expressed in hundredths of a basis point (pips)
FEE_DENOMINATOR = 1_000_000

# Sentinel amount meaning "the full open delta" for settle/take actions
FULL_DELTA_AMOUNT = 0

# Common fee tiers and their usual tick spacing
FEE_LOWEST = 100  # 0.01%
FEE_LOW = 500  # 0.05%
FEE_MEDIUM = 3000  # 0.30%
FEE_HIGH = 10000  # 1.00%

TICK_SPACINGS = {
    FEE_LOWEST: 1,
    FEE_LOW: 10,
    FEE_MEDIUM: 60,
    FEE_HIGH: 200,
}

# Wrapped native token per chain id
WETH9: dict[int, str] = {
    1: _validate_address("WETH mainnet", "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"),
    10: _validate_address("WETH optimism", "0x4200000000000000000000000000000000000006"),
    8453: _validate_address("WETH base", "0x4200000000000000000000000000000000000006"),
    42161: _validate_address("WETH arbitrum", "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1"),
    11155111: _validate_address("WETH sepolia", "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14"),
}

__all__ = [
    "ADDRESS_ZERO",
    "EMPTY_HOOK",
    "EMPTY_BYTES",
    "Q96",
    "Q192",
    "FEE_DENOMINATOR",
    "FULL_DELTA_AMOUNT",
    "FEE_LOWEST",
    "FEE_LOW",
    "FEE_MEDIUM",
    "FEE_HIGH",
    "TICK_SPACINGS",
    "WETH9",
]
