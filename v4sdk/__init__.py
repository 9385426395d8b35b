"""Uniswap v4 client SDK - pools, routes, trades and router calldata."""

from v4sdk.config import BestTradeOptions
from v4sdk.currency import Ether, NativeCurrency, Token
from v4sdk.entities import Pool, PoolKey, Route, Trade, get_pool_id, get_pool_key
from v4sdk.fractions import CurrencyAmount, Percent, Price, TradeType
from v4sdk.planner import V4Planner, V4PositionPlanner, parse_calldata
from v4sdk.routing import best_trade_exact_in, best_trade_exact_out, encode_route_to_path
from v4sdk.ticks import Tick, TickListDataProvider

__version__ = "0.1.0"
__all__ = [
    "BestTradeOptions",
    "Token",
    "NativeCurrency",
    "Ether",
    "CurrencyAmount",
    "Percent",
    "Price",
    "TradeType",
    "Pool",
    "PoolKey",
    "Route",
    "Trade",
    "get_pool_id",
    "get_pool_key",
    "Tick",
    "TickListDataProvider",
    "best_trade_exact_in",
    "best_trade_exact_out",
    "encode_route_to_path",
    "V4Planner",
    "V4PositionPlanner",
    "parse_calldata",
    "__version__",
]
