"""Mathematical primitives for the Hydra curve.

This package provides:
- 18-decimal fixed-point multiply/divide with uint256 narrowing
- A bounded fixed-point approximation of e^z
"""

from hydra_curve.math.exponential import MAX_EXPONENT, MIN_EXPONENT, exp
from hydra_curve.math.fixed_point import ONE, fdiv, fmul, geometric_mean, mul_div

__all__ = [
    "ONE",
    "fmul",
    "fdiv",
    "mul_div",
    "geometric_mean",
    "exp",
    "MIN_EXPONENT",
    "MAX_EXPONENT",
]
