"""Pool, route and trade entities."""

from v4sdk.entities.path_currency import amount_with_path_currency, get_path_currency
from v4sdk.entities.pool import Pool, PoolKey, PoolQuote, SwapResult, get_pool_id, get_pool_key
from v4sdk.entities.route import Route
from v4sdk.entities.trade import Swap, Trade

__all__ = [
    "Pool",
    "PoolKey",
    "PoolQuote",
    "SwapResult",
    "get_pool_key",
    "get_pool_id",
    "get_path_currency",
    "amount_with_path_currency",
    "Route",
    "Swap",
    "Trade",
]
