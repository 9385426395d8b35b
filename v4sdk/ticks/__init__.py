"""Tick data and the providers the swap engine reads from."""

from v4sdk.ticks.provider import NoTickDataProvider, TickDataProvider, TickListDataProvider
from v4sdk.ticks.tick import Tick

__all__ = ["Tick", "TickDataProvider", "NoTickDataProvider", "TickListDataProvider"]
