"""Price and tick conversion helpers."""

from v4sdk.utils.price_tick import (
    encode_sqrt_ratio_x96,
    nearest_usable_tick,
    price_to_closest_tick,
    tick_to_price,
)

__all__ = [
    "encode_sqrt_ratio_x96",
    "tick_to_price",
    "price_to_closest_tick",
    "nearest_usable_tick",
]
