"""18-decimal fixed-point arithmetic for the Hydra curve.

All values are unsigned integers scaled by 10^18. Products are computed at
full width and then narrowed back to uint256, so a*b/P never loses
precision to an intermediate overflow; it only fails when the final result
itself does not fit.

Rounding is truncation (floor for the non-negative operands used here).
Callers must not assume round-to-nearest.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from math import isqrt

from hydra_curve.constants import PRECISION
from hydra_curve.errors import InvalidInput
from hydra_curve.safe_int import S

__all__ = [
    # Functions
    "mul_div",
    "fmul",
    "fdiv",
    "geometric_mean",
    "from_decimal",
    "to_decimal",
    # Constants
    "ONE",
    "HALF",
]

ONE = PRECISION
HALF = PRECISION // 2


def mul_div(a: int, b: int, denominator: int) -> int:
    """Compute a * b // denominator with a widened intermediate.

    Args:
        a: First factor (non-negative)
        b: Second factor (non-negative)
        denominator: Divisor (positive)

    Returns:
        floor(a * b / denominator) as a uint256

    Raises:
        InvalidInput: If an operand is negative or the denominator is zero
        MathOverflow: If the narrowed result exceeds uint256
    """
    if a < 0 or b < 0 or denominator < 0:
        raise InvalidInput(f"mul_div operands must be non-negative: {a}, {b}, {denominator}")
    return ((S(a) * S(b)) // S(denominator)).to_uint256()


def fmul(a: int, b: int) -> int:
    """Fixed-point multiply: (a * b) // 10^18."""
    return mul_div(a, b, ONE)


def fdiv(a: int, b: int) -> int:
    """Fixed-point divide: (a * 10^18) // b.

    Raises:
        InvalidInput: If b is zero
    """
    if b == 0:
        raise InvalidInput(f"Fixed-point division by zero: {a} / 0")
    return mul_div(a, ONE, b)


def geometric_mean(a: int, b: int) -> int:
    """Return floor(sqrt(a * b)), the constant-product baseline.

    Raises:
        InvalidInput: If an operand is negative
        MathOverflow: If a * b does not fit in uint256
    """
    if a < 0 or b < 0:
        raise InvalidInput(f"geometric_mean operands must be non-negative: {a}, {b}")
    product = (S(a) * S(b)).to_uint256()
    return isqrt(product)


def from_decimal(d: Decimal | str) -> int:
    """Scale a decimal by 10^18 (ROUND_HALF_UP).

    Requires non-negative input.
    """
    d = Decimal(d)
    if d < 0:
        raise ValueError(f"from_decimal requires non-negative input, got {d}")
    return int((d * ONE).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_decimal(value: int) -> Decimal:
    """Convert a fixed-point value to Decimal for display."""
    return Decimal(value) / Decimal(ONE)
