"""Hook permission decoding.

A v4 hook contract declares its callbacks through the low 14 bits of its
own address. Each ``HookOption`` is the mask of one such bit.
"""

from __future__ import annotations

from enum import IntFlag

from v4sdk.errors import InvalidAddressError
from v4sdk.types import is_valid_address


class HookOption(IntFlag):
    """Hook callbacks, valued by the address bit that enables them."""

    AFTER_REMOVE_LIQUIDITY_RETURNS_DELTA = 1 << 0
    AFTER_ADD_LIQUIDITY_RETURNS_DELTA = 1 << 1
    AFTER_SWAP_RETURNS_DELTA = 1 << 2
    BEFORE_SWAP_RETURNS_DELTA = 1 << 3
    AFTER_DONATE = 1 << 4
    BEFORE_DONATE = 1 << 5
    AFTER_SWAP = 1 << 6
    BEFORE_SWAP = 1 << 7
    AFTER_REMOVE_LIQUIDITY = 1 << 8
    BEFORE_REMOVE_LIQUIDITY = 1 << 9
    AFTER_ADD_LIQUIDITY = 1 << 10
    BEFORE_ADD_LIQUIDITY = 1 << 11
    AFTER_INITIALIZE = 1 << 12
    BEFORE_INITIALIZE = 1 << 13


INITIALIZE_OPTIONS = HookOption.BEFORE_INITIALIZE | HookOption.AFTER_INITIALIZE
# Delta-returning liquidity hooks can only fire alongside these
LIQUIDITY_OPTIONS = (
    HookOption.BEFORE_ADD_LIQUIDITY
    | HookOption.AFTER_ADD_LIQUIDITY
    | HookOption.BEFORE_REMOVE_LIQUIDITY
    | HookOption.AFTER_REMOVE_LIQUIDITY
)
SWAP_OPTIONS = HookOption.BEFORE_SWAP | HookOption.AFTER_SWAP
DONATE_OPTIONS = HookOption.BEFORE_DONATE | HookOption.AFTER_DONATE


def _address_bits(address: str) -> int:
    if not is_valid_address(address):
        raise InvalidAddressError(f"Invalid hook address: {address}")
    return int(address, 16)


def _has_any(address: str, options: HookOption) -> bool:
    return bool(_address_bits(address) & options)


def permissions(address: str) -> dict[HookOption, bool]:
    """Map every hook option to whether the address enables it.

    Raises:
        InvalidAddressError: If address is not a 20-byte hex address
    """
    bits = _address_bits(address)
    return {option: bool(bits & option) for option in HookOption}


def has_permission(address: str, option: HookOption) -> bool:
    return _has_any(address, option)


def has_initialize_permissions(address: str) -> bool:
    return _has_any(address, INITIALIZE_OPTIONS)


def has_liquidity_permissions(address: str) -> bool:
    return _has_any(address, LIQUIDITY_OPTIONS)


def has_swap_permissions(address: str) -> bool:
    """True if the hook runs before or after swaps and may alter their accounting."""
    return _has_any(address, SWAP_OPTIONS)


def has_donate_permissions(address: str) -> bool:
    return _has_any(address, DONATE_OPTIONS)


__all__ = [
    "HookOption",
    "permissions",
    "has_permission",
    "has_initialize_permissions",
    "has_liquidity_permissions",
    "has_swap_permissions",
    "has_donate_permissions",
]
