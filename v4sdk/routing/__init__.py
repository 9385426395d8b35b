"""Best-trade search and router path encoding."""

from v4sdk.routing.best_trade import (
    best_trade_exact_in,
    best_trade_exact_out,
    sorted_insert,
    trade_comparator,
)
from v4sdk.routing.path import PathKey, encode_route_to_path

__all__ = [
    "best_trade_exact_in",
    "best_trade_exact_out",
    "sorted_insert",
    "trade_comparator",
    "PathKey",
    "encode_route_to_path",
]
