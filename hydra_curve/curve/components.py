"""Shape functions of the composite curve.

Each component maps a non-negative deviation d (18-decimal fixed point)
to a fixed-point value. sigmoid and gaussian stay within [0, ONE];
rational starts at ONE and decays slowly, dominating the tails once the
other two have vanished.
"""

from __future__ import annotations

from math import isqrt

from hydra_curve.errors import InvalidConfig, InvalidInput
from hydra_curve.math.exponential import MIN_EXPONENT, exp
from hydra_curve.math.fixed_point import ONE, fdiv, fmul
from hydra_curve.safe_int import S

__all__ = [
    "sigmoid",
    "centered_sigmoid",
    "gaussian",
    "rational",
    "GAUSSIAN_EXPONENT_CEILING",
]

# Largest squared term fed to exp(); beyond it the gaussian has fully decayed.
GAUSSIAN_EXPONENT_CEILING = -MIN_EXPONENT

# Any d/width ratio at or above this squares past the ceiling
_GAUSSIAN_RATIO_CAP = isqrt(GAUSSIAN_EXPONENT_CEILING * ONE) + 1


def _check_deviation(d: int) -> None:
    if d < 0:
        raise InvalidInput(f"Deviation must be non-negative, got {d}")


def sigmoid(d: int, steepness: int) -> int:
    """Logistic component: ONE / (ONE + e^(-steepness * d)).

    d = 0 gives ONE / 2 and the value rises toward ONE as d grows.
    steepness = 0 degenerates to the constant ONE / 2.
    """
    _check_deviation(d)
    if steepness < 0:
        raise InvalidConfig(f"Steepness must be non-negative, got {steepness}")

    exponent = S(steepness) * S(d)
    # exp() is 0 below MIN_EXPONENT anyway
    decay = 0 if exponent > -MIN_EXPONENT else exp(-exponent.value)
    return fdiv(ONE, ONE + decay)


def centered_sigmoid(d: int, steepness: int) -> int:
    """Sigmoid re-centred on zero deviation: 2 * (ONE - sigmoid(d)).

    ONE at d = 0, decaying monotonically to 0. This is the form the engine
    weights, so that every component peaks at parity.
    """
    return 2 * (S(ONE) - sigmoid(d, steepness)).value


def gaussian(d: int, width: int) -> int:
    """Bell component: e^(-(d / width)^2).

    ONE at d = 0, decaying monotonically. The squared term saturates at
    GAUSSIAN_EXPONENT_CEILING, which yields a near-zero value rather than
    an overflow.
    """
    _check_deviation(d)
    if width <= 0:
        raise InvalidConfig(f"Gaussian width must be positive, got {width}")

    # Compare d / width against the cap at full width, before any narrowing
    if S(d) * ONE >= S(_GAUSSIAN_RATIO_CAP) * width:
        squared = GAUSSIAN_EXPONENT_CEILING
    else:
        ratio = fdiv(d, width)
        squared = min(fmul(ratio, ratio), GAUSSIAN_EXPONENT_CEILING)
    return exp(-squared)


def rational(d: int, power: int) -> int:
    """Tail component: ONE^2 / (ONE + d)^power.

    Computed as `power` successive fixed-point divisions by (ONE + d), so
    the cost is bounded by power and not by the size of d.
    """
    _check_deviation(d)
    if power <= 0:
        raise InvalidConfig(f"Rational power must be positive, got {power}")

    denominator = ONE + d
    acc = ONE
    for _ in range(power):
        acc = fdiv(acc, denominator)
    return acc
