"""Fixed-point natural exponential.

exp(z) approximates e^z * 10^18 for a signed 18-decimal exponent z.

Algorithm (z >= 0):
    z = shift * ln2 + frac,  0 <= frac < ln2
    e^z = 2^shift * e^frac

2^shift is a bit shift. e^frac is one Horner-evaluated polynomial
correction of degree POLYNOMIAL_DEGREE:

    e^f ~= 1 + f(1 + f/2(1 + f/3(1 + f/4(1 + f/5(1 + f/6)))))

For f < ln2 the truncated series underestimates e^f by a relative
f^7/7! < 1.6e-5. Negative exponents return the fixed-point reciprocal of
exp(-z), which overestimates by the same relative amount. Integer
truncation adds at most one unit (10^-18) of absolute error. The documented
bound is MAX_EXP_RELATIVE_ERROR (5e-5) relative plus one unit absolute.

Domain:
    z < MIN_EXPONENT  -> 0 (vanishing contribution, not an error)
    z > MAX_EXPONENT  -> MathOverflow
"""

from __future__ import annotations

from hydra_curve.errors import MathOverflow
from hydra_curve.math.fixed_point import ONE, mul_div
from hydra_curve.safe_int import S

__all__ = [
    "exp",
    "LN2",
    "MIN_EXPONENT",
    "MAX_EXPONENT",
    "POLYNOMIAL_DEGREE",
    "MAX_EXP_RELATIVE_ERROR",
]

# ln(2) in 18-decimal fixed point (truncated)
LN2 = 693_147_180_559_945_309

MAX_EXPONENT = 130 * ONE  # e^130 * 10^18 still fits in int256
MIN_EXPONENT = -41 * ONE  # e^-41 * 10^18 is ~1 unit

POLYNOMIAL_DEGREE = 6

# 5e-5 in fixed point
MAX_EXP_RELATIVE_ERROR = 5 * 10**13


def _exp_non_negative(z: int) -> int:
    shift, frac = divmod(z, LN2)

    acc = ONE
    for k in range(POLYNOMIAL_DEGREE, 0, -1):
        acc = ONE + (frac * acc) // (k * ONE)

    return (S(acc) << shift).to_int256()


def exp(z: int) -> int:
    """Compute e^z where z is 18-decimal fixed-point.

    Args:
        z: Exponent in 18-decimal fixed-point (can be negative).

    Returns:
        e^z as 18-decimal fixed-point integer, or 0 below MIN_EXPONENT.

    Raises:
        MathOverflow: If z > MAX_EXPONENT
    """
    if z > MAX_EXPONENT:
        raise MathOverflow(f"Exponent {z} above {MAX_EXPONENT}")
    if z < MIN_EXPONENT:
        return 0

    if z < 0:
        # e^-z = 1 / e^z
        return mul_div(ONE, ONE, _exp_non_negative(-z))

    return _exp_non_negative(z)
