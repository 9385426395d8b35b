"""Integer bounds and address helpers shared by the entity and planner modules."""

# Maximum values of the fixed-width integers used on-chain
UINT128_MAX = 2**128 - 1
UINT160_MAX = 2**160 - 1
UINT256_MAX = 2**256 - 1


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises InvalidAddressError for invalid addresses.
                  If False (default), returns normalized form without validation.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        InvalidAddressError: If validate=True and address is not a valid Ethereum address
    """
    from v4sdk.errors import InvalidAddressError

    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise InvalidAddressError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def address_to_bytes(address: str) -> bytes:
    """Convert a 0x-prefixed address to its 20 raw bytes for ABI encoding."""
    return bytes.fromhex(normalize_address(address, validate=True)[2:])


__all__ = [
    "UINT128_MAX",
    "UINT160_MAX",
    "UINT256_MAX",
    "normalize_address",
    "is_valid_address",
    "address_to_bytes",
]
