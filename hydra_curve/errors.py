"""Hydra curve error classes.

Every failure of the pricing core maps to one of these four kinds. Callers
are expected to surface them, never to default to a zero liquidity value.
"""


class HydraCurveError(Exception):
    """Base error for Hydra curve operations."""

    #: Stable identifier used on the wire.
    kind: str = "hydra_curve_error"


class InvalidInput(HydraCurveError):
    """Zero, sub-floor, negative or otherwise nonsensical numeric argument."""

    kind = "invalid_input"


class PriceOutOfBounds(HydraCurveError):
    """A supplied price exceeds the maximum ratio, or the curve vanished."""

    kind = "price_out_of_bounds"


class InvalidConfig(HydraCurveError):
    """A curve configuration bundle failed validation."""

    kind = "invalid_config"


class MathOverflow(HydraCurveError, ArithmeticError):
    """An intermediate value cannot be represented in the working width."""

    kind = "math_overflow"
