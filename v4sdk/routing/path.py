"""Encoding a route as the router's multi-hop path."""

from __future__ import annotations

from dataclasses import dataclass

from v4sdk.constants import EMPTY_HOOK
from v4sdk.currency import to_address
from v4sdk.entities.route import Route
from v4sdk.types import address_to_bytes


@dataclass(frozen=True)
class PathKey:
    """One hop of a multi-hop path: the currency reached and the pool used to reach it."""

    intermediate_currency: str
    fee: int
    tick_spacing: int
    hooks: str = EMPTY_HOOK
    hook_data: bytes = b""

    def to_abi_tuple(self) -> tuple[bytes, int, int, bytes, bytes]:
        """Values for eth_abi encoding as (address,uint256,int24,address,bytes)."""
        return (
            address_to_bytes(self.intermediate_currency),
            self.fee,
            self.tick_spacing,
            address_to_bytes(self.hooks),
            self.hook_data,
        )


def encode_route_to_path(route: Route, exact_output: bool) -> list[PathKey]:
    """Describe ``route`` as path keys in swap order.

    For exact output the router walks the path from the output side, so the
    keys are built over the pools in reverse and the result is reversed back.
    The route itself is never modified.
    """
    if exact_output:
        pools = list(reversed(route.pools))
        current = route.path_output
    else:
        pools = list(route.pools)
        current = route.path_input

    path_keys = []
    for pool in pools:
        next_currency = pool.currency1 if current.equals(pool.currency0) else pool.currency0
        path_keys.append(
            PathKey(
                intermediate_currency=to_address(next_currency),
                fee=pool.fee,
                tick_spacing=pool.tick_spacing,
                hooks=pool.hooks,
            )
        )
        current = next_currency

    if exact_output:
        path_keys.reverse()
    return path_keys


__all__ = ["PathKey", "encode_route_to_path"]
