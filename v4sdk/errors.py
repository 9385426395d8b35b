"""SDK error classes.

Errors are grouped by kind so callers can decide what to skip:
configuration mistakes, structural problems with routes and trades,
numeric/pool-state violations, and lookups that fail inside a tick
data provider. Nothing here is retryable.
"""


class V4SdkError(Exception):
    """Base error for all SDK operations."""

    pass


# =============================================================================
# Configuration errors
# =============================================================================


class ConfigurationError(V4SdkError):
    """Invalid option or argument supplied by the caller."""

    pass


class InvalidSlippageToleranceError(ConfigurationError):
    """Slippage tolerance must not be negative."""

    pass


class InvalidMaxHopsError(ConfigurationError):
    """max_hops must be positive."""

    pass


class InvalidMaxSizeError(ConfigurationError):
    """Result list capacity must be positive."""

    pass


class MaxSizeExceededError(ConfigurationError):
    """Result list already holds more items than its capacity."""

    pass


class FeeTooHighError(ConfigurationError):
    """Pool fee must be below 1,000,000 pips."""

    pass


class NoPoolsError(ConfigurationError):
    """Best-trade search needs at least one candidate pool."""

    pass


class InvalidRecursionError(ConfigurationError):
    """Search entered with a carried amount unrelated to the requested amount."""

    pass


# =============================================================================
# Structural errors
# =============================================================================


class StructuralError(V4SdkError):
    """Currencies, pools or routes that do not fit together."""

    pass


class InvalidAddressError(StructuralError):
    """String is not a 0x-prefixed 20-byte hex address."""

    pass


class InvalidCurrencyError(StructuralError):
    """Currencies cannot be ordered (same address or different chains)."""

    pass


class EmptyRouteError(StructuralError):
    """Route must have at least one pool."""

    pass


class ChainMismatchError(StructuralError):
    """All pools of a route must be on the same chain."""

    pass


class PathNotContinuousError(StructuralError):
    """Consecutive pools do not share the connecting currency."""

    pass


class InputNotInvolvedError(StructuralError):
    """First pool of the route does not involve the input currency."""

    pass


class OutputNotInvolvedError(StructuralError):
    """Last pool of the route does not involve the output currency."""

    pass


class DuplicatePoolsError(StructuralError):
    """A pool is used by more than one swap of the same trade."""

    pass


class InputCurrencyMismatchError(StructuralError):
    """Swaps or trades disagree on the input currency."""

    pass


class OutputCurrencyMismatchError(StructuralError):
    """Swaps or trades disagree on the output currency."""

    pass


class InvalidAmountForRouteError(StructuralError):
    """Amount currency is not the route's input (exact in) or output (exact out)."""

    pass


class CurrencyNotInPoolError(StructuralError):
    """Currency is neither currency0 nor currency1 of the pool."""

    pass


class TradeHasMultipleRoutesError(StructuralError):
    """Operation requires a trade with exactly one swap."""

    pass


class InvalidCalldataError(StructuralError):
    """Calldata could not be decoded as v4 router actions."""

    pass


# =============================================================================
# Numeric / pool-state errors
# =============================================================================


class PoolStateError(V4SdkError):
    """Pool parameters or swap inputs outside the protocol's bounds."""

    pass


class InvalidSqrtPriceError(PoolStateError):
    """sqrtPriceX96 is not inside the range of the current tick."""

    pass


class TickOutOfBoundsError(PoolStateError):
    """Tick is outside [MIN_TICK, MAX_TICK]."""

    pass


class SqrtRatioOutOfBoundsError(PoolStateError):
    """sqrt ratio is outside [MIN_SQRT_RATIO, MAX_SQRT_RATIO)."""

    pass


class SqrtPriceLimitTooLowError(PoolStateError):
    """Price limit is below the bound allowed for this swap direction."""

    pass


class SqrtPriceLimitTooHighError(PoolStateError):
    """Price limit is above the bound allowed for this swap direction."""

    pass


class MathError(PoolStateError, ArithmeticError):
    """Fixed-width integer arithmetic left its on-chain domain."""

    pass


class MulDivOverflowError(MathError):
    """mul_div result does not fit in uint256 or the denominator is zero."""

    pass


class LiquidityUnderflowError(MathError):
    """Liquidity delta would make liquidity negative."""

    pass


class LiquidityOverflowError(MathError):
    """Liquidity delta would overflow uint128."""

    pass


class AmountOverflowError(MathError):
    """Currency amount exceeds uint256."""

    pass


class PoolUnusableError(PoolStateError):
    """This pool cannot serve the requested swap; a router may skip it."""

    pass


class UnsupportedHookError(PoolUnusableError):
    """Pool hooks have before/after swap permissions."""

    pass


class InsufficientLiquidityError(PoolUnusableError):
    """Pool could not fill the full specified amount."""

    pass


# =============================================================================
# Tick data errors
# =============================================================================


class TickLookupError(V4SdkError):
    """Tick data provider could not answer a lookup."""

    pass


class InvalidTickListError(TickLookupError):
    """Tick list is unsorted, misaligned with the spacing, or does not net to zero."""

    pass


__all__ = [
    "V4SdkError",
    "ConfigurationError",
    "InvalidSlippageToleranceError",
    "InvalidMaxHopsError",
    "InvalidMaxSizeError",
    "MaxSizeExceededError",
    "FeeTooHighError",
    "NoPoolsError",
    "InvalidRecursionError",
    "StructuralError",
    "InvalidAddressError",
    "InvalidCurrencyError",
    "EmptyRouteError",
    "ChainMismatchError",
    "PathNotContinuousError",
    "InputNotInvolvedError",
    "OutputNotInvolvedError",
    "DuplicatePoolsError",
    "InputCurrencyMismatchError",
    "OutputCurrencyMismatchError",
    "InvalidAmountForRouteError",
    "CurrencyNotInPoolError",
    "TradeHasMultipleRoutesError",
    "InvalidCalldataError",
    "PoolStateError",
    "InvalidSqrtPriceError",
    "TickOutOfBoundsError",
    "SqrtRatioOutOfBoundsError",
    "SqrtPriceLimitTooLowError",
    "SqrtPriceLimitTooHighError",
    "MathError",
    "MulDivOverflowError",
    "LiquidityUnderflowError",
    "LiquidityOverflowError",
    "AmountOverflowError",
    "PoolUnusableError",
    "UnsupportedHookError",
    "InsufficientLiquidityError",
    "TickLookupError",
    "InvalidTickListError",
]
