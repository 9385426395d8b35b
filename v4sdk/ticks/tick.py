"""Initialized tick data."""

from __future__ import annotations

from dataclasses import dataclass

from v4sdk.errors import TickOutOfBoundsError
from v4sdk.math.tick_math import MAX_TICK, MIN_TICK


@dataclass(frozen=True)
class Tick:
    """An initialized tick.

    Attributes:
        index: Tick index
        liquidity_gross: Total liquidity referencing this tick
        liquidity_net: Liquidity added when the price crosses the tick upward
            (removed when crossing downward)
    """

    index: int
    liquidity_gross: int
    liquidity_net: int

    def __post_init__(self) -> None:
        if self.index < MIN_TICK or self.index > MAX_TICK:
            raise TickOutOfBoundsError(f"Tick {self.index} outside [{MIN_TICK}, {MAX_TICK}]")


__all__ = ["Tick"]
