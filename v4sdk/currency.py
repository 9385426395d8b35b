"""Currencies: ERC20 tokens and the chain's native currency.

v4 pools can hold the native currency directly (address zero), so most
entity code works on the ``Currency`` union and consults ``wrapped`` when
a native currency has to be matched against a pool holding the wrapped
token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from v4sdk.constants import ADDRESS_ZERO, WETH9
from v4sdk.errors import InvalidCurrencyError
from v4sdk.types import normalize_address


@dataclass(frozen=True)
class Token:
    """An ERC20 token on a specific chain."""

    chain_id: int
    address: str
    decimals: int = 18
    symbol: str | None = None
    name: str | None = field(default=None, compare=False)

    is_native = False
    is_token = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", normalize_address(self.address, validate=True))
        if not 0 <= self.decimals < 255:
            raise InvalidCurrencyError(f"Invalid decimals: {self.decimals}")

    @property
    def wrapped(self) -> Token:
        return self

    def equals(self, other: Currency) -> bool:
        """Tokens are equal when chain and address match."""
        return other.is_token and self.chain_id == other.chain_id and self.address == other.address

    def __str__(self) -> str:
        return self.symbol or self.address


@dataclass(frozen=True)
class NativeCurrency:
    """The chain's native currency (e.g. ETH), aliased by its wrapped token."""

    chain_id: int
    wrapped_token: Token
    decimals: int = 18
    symbol: str | None = "ETH"
    name: str | None = field(default="Ether", compare=False)

    is_native = True
    is_token = False

    def __post_init__(self) -> None:
        if self.wrapped_token.chain_id != self.chain_id:
            raise InvalidCurrencyError(
                f"Wrapped token chain {self.wrapped_token.chain_id} != native chain {self.chain_id}"
            )

    @property
    def address(self) -> str:
        return ADDRESS_ZERO

    @property
    def wrapped(self) -> Token:
        return self.wrapped_token

    def equals(self, other: Currency) -> bool:
        """Native currencies are equal when they live on the same chain."""
        return other.is_native and self.chain_id == other.chain_id

    def __str__(self) -> str:
        return self.symbol or "NATIVE"


Currency = Union[Token, NativeCurrency]


class Ether:
    """Factory for the native currency of chains listed in WETH9."""

    @staticmethod
    def on_chain(chain_id: int) -> NativeCurrency:
        weth = WETH9.get(chain_id)
        if weth is None:
            raise InvalidCurrencyError(f"No wrapped native token known for chain {chain_id}")
        wrapped = Token(chain_id, weth, 18, "WETH", "Wrapped Ether")
        return NativeCurrency(chain_id=chain_id, wrapped_token=wrapped)


def sorts_before(currency_a: Currency, currency_b: Currency) -> bool:
    """Return True if currency_a sorts before currency_b in a pool key.

    Native currency always sorts first; tokens sort by address.

    Raises:
        InvalidCurrencyError: If the currencies are on different chains or
            share an address
    """
    if currency_a.chain_id != currency_b.chain_id:
        raise InvalidCurrencyError(
            f"Chain ids differ: {currency_a.chain_id} != {currency_b.chain_id}"
        )
    if currency_a.is_native:
        return True
    if currency_b.is_native:
        return False
    if currency_a.address == currency_b.address:
        raise InvalidCurrencyError(f"Currencies share address {currency_a.address}")
    return int(currency_a.address, 16) < int(currency_b.address, 16)


def to_address(currency: Currency) -> str:
    """Address used on-chain for a currency (zero address for native)."""
    if currency.is_native:
        return ADDRESS_ZERO
    return currency.wrapped.address


__all__ = [
    "Token",
    "NativeCurrency",
    "Currency",
    "Ether",
    "sorts_before",
    "to_address",
]
