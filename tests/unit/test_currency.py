"""Tests for tokens, the native currency and currency ordering."""

import pytest

from v4sdk.constants import ADDRESS_ZERO
from v4sdk.currency import Ether, NativeCurrency, Token, sorts_before, to_address
from v4sdk.errors import InvalidAddressError, InvalidCurrencyError
from tests.helpers import ETHER, TOKEN_A, TOKEN_B, WETH
from tests.helpers.constants import TOKEN_A_GOERLI, WETH_ADDRESS


class TestToken:
    def test_address_normalized_to_lowercase(self):
        token = Token(1, "0xA0B86991C6218B36C1D19D4A2E9EB0CE3606EB48", 6)
        assert token.address == "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"

    def test_invalid_address_raises(self):
        with pytest.raises(InvalidAddressError):
            Token(1, "0x1234", 18)

    def test_equals_ignores_symbol(self):
        assert TOKEN_A.equals(Token(1, TOKEN_A.address, 18, "OTHER"))

    def test_different_chain_not_equal(self):
        assert not TOKEN_A.equals(TOKEN_A_GOERLI)

    def test_token_is_its_own_wrapped(self):
        assert TOKEN_A.wrapped is TOKEN_A

    def test_invalid_decimals_raises(self):
        with pytest.raises(InvalidCurrencyError):
            Token(1, TOKEN_A.address, 255)


class TestNativeCurrency:
    def test_on_chain_wraps_weth(self):
        assert ETHER.is_native
        assert ETHER.wrapped.address == WETH_ADDRESS

    def test_unknown_chain_raises(self):
        with pytest.raises(InvalidCurrencyError):
            Ether.on_chain(999_999)

    def test_wrapped_token_must_be_on_same_chain(self):
        with pytest.raises(InvalidCurrencyError):
            NativeCurrency(chain_id=5, wrapped_token=WETH)

    def test_native_not_equal_to_wrapped(self):
        assert not ETHER.equals(WETH)
        assert not WETH.equals(ETHER)

    def test_native_equal_on_same_chain(self):
        assert ETHER.equals(Ether.on_chain(1))

    def test_address_is_zero(self):
        assert to_address(ETHER) == ADDRESS_ZERO


class TestSortsBefore:
    def test_lower_address_first(self):
        assert sorts_before(TOKEN_A, TOKEN_B)
        assert not sorts_before(TOKEN_B, TOKEN_A)

    def test_native_first(self):
        assert sorts_before(ETHER, TOKEN_A)
        assert not sorts_before(TOKEN_A, ETHER)

    def test_same_address_raises(self):
        with pytest.raises(InvalidCurrencyError):
            sorts_before(TOKEN_A, Token(1, TOKEN_A.address, 18))

    def test_different_chains_raise(self):
        with pytest.raises(InvalidCurrencyError):
            sorts_before(TOKEN_A_GOERLI, TOKEN_B)

    def test_native_on_other_chain_raises(self):
        with pytest.raises(InvalidCurrencyError):
            sorts_before(ETHER, TOKEN_A_GOERLI)
        with pytest.raises(InvalidCurrencyError):
            sorts_before(TOKEN_A_GOERLI, ETHER)
