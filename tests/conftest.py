"""Pytest configuration and fixtures."""

import pytest

from v4sdk.entities import Pool, Route
from tests.helpers import (
    ETHER,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    WETH,
    make_pool,
)

# =============================================================================
# Pools at price 1 with full-range liquidity
# =============================================================================


@pytest.fixture
def pool_ab() -> Pool:
    return make_pool(TOKEN_A, TOKEN_B)


@pytest.fixture
def pool_bc() -> Pool:
    return make_pool(TOKEN_B, TOKEN_C)


@pytest.fixture
def pool_ac() -> Pool:
    return make_pool(TOKEN_A, TOKEN_C)


@pytest.fixture
def pool_cd() -> Pool:
    return make_pool(TOKEN_C, TOKEN_D)


@pytest.fixture
def pool_eth_a() -> Pool:
    """Pool holding the native currency directly."""
    return make_pool(ETHER, TOKEN_A)


@pytest.fixture
def pool_weth_b() -> Pool:
    """Pool holding the wrapped native token."""
    return make_pool(WETH, TOKEN_B)


# =============================================================================
# Routes
# =============================================================================


@pytest.fixture
def route_ab(pool_ab: Pool) -> Route:
    return Route([pool_ab], TOKEN_A, TOKEN_B)


@pytest.fixture
def route_abc(pool_ab: Pool, pool_bc: Pool) -> Route:
    return Route([pool_ab, pool_bc], TOKEN_A, TOKEN_C)
