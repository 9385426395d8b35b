"""Search configuration for the SDK."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BestTradeOptions:
    """Bounds for the best-trade search.

    Attributes:
        max_num_results: Capacity of the ranked result list (default: 3)
        max_hops: Maximum number of pools in a returned route (default: 3)
    """

    max_num_results: int = 3
    max_hops: int = 3

    def next_hop(self) -> "BestTradeOptions":
        """Options for one level deeper in the search."""
        return BestTradeOptions(max_num_results=self.max_num_results, max_hops=self.max_hops - 1)


# Default configuration instance
DEFAULT_BEST_TRADE_OPTIONS = BestTradeOptions()
