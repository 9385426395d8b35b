"""Tick data providers consumed by the swap engine.

The engine only needs two lookups, so any object with ``get_tick`` and
``next_initialized_tick_index`` can back a pool: an in-memory list, a lazy
on-chain fetcher supplied by the caller, or a test double.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from v4sdk.errors import InvalidTickListError, TickLookupError
from v4sdk.math.tick_math import MAX_TICK, MIN_TICK
from v4sdk.ticks.tick import Tick


@runtime_checkable
class TickDataProvider(Protocol):
    """Read access to a pool's initialized ticks."""

    def get_tick(self, tick: int) -> Tick:
        """Return the initialized tick at an index.

        Raises:
            TickLookupError: If the tick is not initialized
        """
        ...

    def next_initialized_tick_index(self, tick: int, lte: bool) -> tuple[int, bool]:
        """Find the next initialized tick from ``tick``.

        Args:
            tick: Starting tick
            lte: Search at or below ``tick`` if True, strictly above otherwise

        Returns:
            Tuple of (tick index, whether that tick is initialized). When no
            initialized tick exists in the direction, the protocol's tick
            bound is returned as uninitialized.
        """
        ...


class NoTickDataProvider:
    """Provider for pools whose ticks are unknown; every lookup fails."""

    def get_tick(self, tick: int) -> Tick:
        raise TickLookupError("No tick data provider was given")

    def next_initialized_tick_index(self, tick: int, lte: bool) -> tuple[int, bool]:
        raise TickLookupError("No tick data provider was given")


class TickListDataProvider:
    """In-memory provider over a sorted list of initialized ticks.

    Raises:
        InvalidTickListError: If the ticks are not strictly sorted, not
            multiples of tick_spacing, or their liquidity_net does not sum
            to zero
    """

    def __init__(self, ticks: Iterable[Tick], tick_spacing: int) -> None:
        self._ticks: tuple[Tick, ...] = tuple(ticks)
        self._tick_spacing = tick_spacing
        self._validate()
        self._indexes = [t.index for t in self._ticks]

    def _validate(self) -> None:
        if self._tick_spacing <= 0:
            raise InvalidTickListError(f"Tick spacing must be positive: {self._tick_spacing}")

        previous: int | None = None
        net_total = 0
        for t in self._ticks:
            if t.index % self._tick_spacing != 0:
                raise InvalidTickListError(
                    f"Tick {t.index} is not a multiple of spacing {self._tick_spacing}"
                )
            if previous is not None and t.index <= previous:
                raise InvalidTickListError(f"Ticks not sorted: {t.index} after {previous}")
            previous = t.index
            net_total += t.liquidity_net

        if net_total != 0:
            raise InvalidTickListError(f"Tick liquidity_net sums to {net_total}, expected 0")

    @property
    def ticks(self) -> tuple[Tick, ...]:
        return self._ticks

    @property
    def tick_spacing(self) -> int:
        return self._tick_spacing

    def get_tick(self, tick: int) -> Tick:
        i = bisect_right(self._indexes, tick) - 1
        if i < 0 or self._indexes[i] != tick:
            raise TickLookupError(f"Tick {tick} is not initialized")
        return self._ticks[i]

    def next_initialized_tick_index(self, tick: int, lte: bool) -> tuple[int, bool]:
        # Position of the first initialized tick strictly above `tick`
        i = bisect_right(self._indexes, tick)
        if lte:
            if i == 0:
                return MIN_TICK, False
            return self._indexes[i - 1], True
        if i == len(self._indexes):
            return MAX_TICK, False
        return self._indexes[i], True

    def __len__(self) -> int:
        return len(self._ticks)


__all__ = ["TickDataProvider", "NoTickDataProvider", "TickListDataProvider"]
