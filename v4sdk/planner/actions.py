"""v4 router actions and the ABI layout of their parameters.

eth_abi type strings carry no field names, so every struct type is paired
with the tuple of its field names; the parser uses them to turn decoded
tuples back into mappings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Actions(IntEnum):
    """Action opcodes understood by the v4 router and position manager."""

    # liquidity actions
    INCREASE_LIQUIDITY = 0x00
    DECREASE_LIQUIDITY = 0x01
    MINT_POSITION = 0x02
    BURN_POSITION = 0x03

    # swapping
    SWAP_EXACT_IN_SINGLE = 0x06
    SWAP_EXACT_IN = 0x07
    SWAP_EXACT_OUT_SINGLE = 0x08
    SWAP_EXACT_OUT = 0x09

    # settling
    SETTLE = 0x0B
    SETTLE_ALL = 0x0C
    SETTLE_PAIR = 0x0D

    # taking
    TAKE = 0x0E
    TAKE_ALL = 0x0F
    TAKE_PORTION = 0x10
    TAKE_PAIR = 0x11

    CLOSE_CURRENCY = 0x12
    SWEEP = 0x14

    # wrapping/unwrapping native
    UNWRAP = 0x16


class Subparser(Enum):
    """How a decoded struct parameter is expanded."""

    V4_SWAP_EXACT_IN_SINGLE = "v4_swap_exact_in_single"
    V4_SWAP_EXACT_IN = "v4_swap_exact_in"
    V4_SWAP_EXACT_OUT_SINGLE = "v4_swap_exact_out_single"
    V4_SWAP_EXACT_OUT = "v4_swap_exact_out"
    POOL_KEY = "pool_key"


@dataclass(frozen=True)
class ParamType:
    name: str
    type: str
    subparser: Subparser | None = None


# =============================================================================
# Struct layouts
# =============================================================================

POOL_KEY_STRUCT = "(address,address,uint24,int24,address)"
POOL_KEY_FIELDS = ("currency0", "currency1", "fee", "tickSpacing", "hooks")

PATH_KEY_STRUCT = "(address,uint256,int24,address,bytes)"
PATH_KEY_FIELDS = ("intermediateCurrency", "fee", "tickSpacing", "hooks", "hookData")

SWAP_EXACT_IN_SINGLE_STRUCT = f"({POOL_KEY_STRUCT},bool,uint128,uint128,bytes)"
SWAP_EXACT_IN_SINGLE_FIELDS = ("poolKey", "zeroForOne", "amountIn", "amountOutMinimum", "hookData")

SWAP_EXACT_IN_STRUCT = f"(address,{PATH_KEY_STRUCT}[],uint128,uint128)"
SWAP_EXACT_IN_FIELDS = ("currencyIn", "path", "amountIn", "amountOutMinimum")

SWAP_EXACT_OUT_SINGLE_STRUCT = f"({POOL_KEY_STRUCT},bool,uint128,uint128,bytes)"
SWAP_EXACT_OUT_SINGLE_FIELDS = ("poolKey", "zeroForOne", "amountOut", "amountInMaximum", "hookData")

SWAP_EXACT_OUT_STRUCT = f"(address,{PATH_KEY_STRUCT}[],uint128,uint128)"
SWAP_EXACT_OUT_FIELDS = ("currencyOut", "path", "amountOut", "amountInMaximum")


V4_BASE_ACTIONS_ABI_DEFINITION: dict[Actions, tuple[ParamType, ...]] = {
    # liquidity
    Actions.INCREASE_LIQUIDITY: (
        ParamType("tokenId", "uint256"),
        ParamType("liquidity", "uint256"),
        ParamType("amount0Max", "uint128"),
        ParamType("amount1Max", "uint128"),
        ParamType("hookData", "bytes"),
    ),
    Actions.DECREASE_LIQUIDITY: (
        ParamType("tokenId", "uint256"),
        ParamType("liquidity", "uint256"),
        ParamType("amount0Min", "uint128"),
        ParamType("amount1Min", "uint128"),
        ParamType("hookData", "bytes"),
    ),
    Actions.MINT_POSITION: (
        ParamType("poolKey", POOL_KEY_STRUCT, Subparser.POOL_KEY),
        ParamType("tickLower", "int24"),
        ParamType("tickUpper", "int24"),
        ParamType("liquidity", "uint256"),
        ParamType("amount0Max", "uint128"),
        ParamType("amount1Max", "uint128"),
        ParamType("owner", "address"),
        ParamType("hookData", "bytes"),
    ),
    Actions.BURN_POSITION: (
        ParamType("tokenId", "uint256"),
        ParamType("amount0Min", "uint128"),
        ParamType("amount1Min", "uint128"),
        ParamType("hookData", "bytes"),
    ),
    # swapping
    Actions.SWAP_EXACT_IN_SINGLE: (
        ParamType("swap", SWAP_EXACT_IN_SINGLE_STRUCT, Subparser.V4_SWAP_EXACT_IN_SINGLE),
    ),
    Actions.SWAP_EXACT_IN: (ParamType("swap", SWAP_EXACT_IN_STRUCT, Subparser.V4_SWAP_EXACT_IN),),
    Actions.SWAP_EXACT_OUT_SINGLE: (
        ParamType("swap", SWAP_EXACT_OUT_SINGLE_STRUCT, Subparser.V4_SWAP_EXACT_OUT_SINGLE),
    ),
    Actions.SWAP_EXACT_OUT: (
        ParamType("swap", SWAP_EXACT_OUT_STRUCT, Subparser.V4_SWAP_EXACT_OUT),
    ),
    # settling
    Actions.SETTLE: (
        ParamType("currency", "address"),
        ParamType("amount", "uint256"),
        ParamType("payerIsUser", "bool"),
    ),
    Actions.SETTLE_ALL: (
        ParamType("currency", "address"),
        ParamType("maxAmount", "uint256"),
    ),
    Actions.SETTLE_PAIR: (
        ParamType("currency0", "address"),
        ParamType("currency1", "address"),
    ),
    # taking
    Actions.TAKE: (
        ParamType("currency", "address"),
        ParamType("recipient", "address"),
        ParamType("amount", "uint256"),
    ),
    Actions.TAKE_ALL: (
        ParamType("currency", "address"),
        ParamType("minAmount", "uint256"),
    ),
    Actions.TAKE_PORTION: (
        ParamType("currency", "address"),
        ParamType("recipient", "address"),
        ParamType("bips", "uint256"),
    ),
    Actions.TAKE_PAIR: (
        ParamType("currency0", "address"),
        ParamType("currency1", "address"),
        ParamType("recipient", "address"),
    ),
    Actions.CLOSE_CURRENCY: (ParamType("currency", "address"),),
    Actions.SWEEP: (
        ParamType("currency", "address"),
        ParamType("recipient", "address"),
    ),
    Actions.UNWRAP: (ParamType("amount", "uint256"),),
}


def abi_types(action: Actions) -> list[str]:
    """eth_abi type strings of an action's parameters, in order."""
    return [param.type for param in V4_BASE_ACTIONS_ABI_DEFINITION[action]]


__all__ = [
    "Actions",
    "Subparser",
    "ParamType",
    "POOL_KEY_STRUCT",
    "POOL_KEY_FIELDS",
    "PATH_KEY_STRUCT",
    "PATH_KEY_FIELDS",
    "SWAP_EXACT_IN_SINGLE_FIELDS",
    "SWAP_EXACT_IN_FIELDS",
    "SWAP_EXACT_OUT_SINGLE_FIELDS",
    "SWAP_EXACT_OUT_FIELDS",
    "V4_BASE_ACTIONS_ABI_DEFINITION",
    "abi_types",
]
