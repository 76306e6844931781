"""Composite liquidity curve engine.

Blends the three weighted components with a dynamic amplification factor
and clamps the result under the constant-product baseline:

    baseline  = floor(sqrt(reserve_a * reserve_b))
    deviation = |current_price / target_price - 1|
    composite = wS * centered_sigmoid + wG * gaussian + wR * rational
    amp       = base_amplification * (1 - min(deviation, amplification_range))
    raw       = baseline * composite * amp
    liquidity = min(raw, baseline)

The upper clamp is mandatory: approximation error in exp() can otherwise
push raw slightly above the baseline. The constant-sum lower bound
(reserve_a + reserve_b) is not enforced.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from hydra_curve.constants import MAX_PRICE_RATIO, MIN_LIQUIDITY
from hydra_curve.curve.components import centered_sigmoid, gaussian, rational
from hydra_curve.curve.config import CurveConfig, validate_config
from hydra_curve.errors import InvalidInput, PriceOutOfBounds
from hydra_curve.math.fixed_point import ONE, fdiv, fmul, geometric_mean
from hydra_curve.safe_int import S

logger = structlog.get_logger()


@dataclass(frozen=True)
class CurveEvaluation:
    """Every intermediate of one engine evaluation.

    All values except baseline, raw and liquidity (raw token units) are
    18-decimal fixed point.
    """

    baseline: int
    price_ratio: int
    deviation: int
    sigmoid: int
    gaussian: int
    rational: int
    composite: int
    amplification: int
    raw: int
    liquidity: int

    @property
    def clamped(self) -> bool:
        """True if the baseline ceiling was applied."""
        return self.raw > self.baseline


def _check_inputs(
    reserve_a: int,
    reserve_b: int,
    current_price: int,
    target_price: int,
) -> None:
    for name, value in (
        ("reserve_a", reserve_a),
        ("reserve_b", reserve_b),
        ("current_price", current_price),
        ("target_price", target_price),
    ):
        if value <= 0:
            raise InvalidInput(f"{name} must be positive, got {value}")

    for name, value in (("reserve_a", reserve_a), ("reserve_b", reserve_b)):
        if value <= MIN_LIQUIDITY:
            raise InvalidInput(f"{name} {value} not above minimum liquidity {MIN_LIQUIDITY}")

    for name, value in (("current_price", current_price), ("target_price", target_price)):
        if value > MAX_PRICE_RATIO:
            raise PriceOutOfBounds(f"{name} {value} exceeds maximum {MAX_PRICE_RATIO}")


def composite_value(deviation: int, config: CurveConfig) -> tuple[int, int, int, int]:
    """Weighted blend of the three components at a deviation.

    Returns:
        Tuple of (composite, sigmoid, gaussian, rational). Since the weights
        sum to ONE and each component is at most ONE, composite <= ONE.
    """
    sig = centered_sigmoid(deviation, config.sigmoid_steepness)
    gau = gaussian(deviation, config.gaussian_width)
    rat = rational(deviation, config.rational_power)
    composite = (
        fmul(config.weight_sigmoid, sig)
        + fmul(config.weight_gaussian, gau)
        + fmul(config.weight_rational, rat)
    )
    return composite, sig, gau, rat


def amplification(deviation: int, config: CurveConfig) -> int:
    """Dynamic amplification: linear decay from full strength at parity.

    Clamped at its floor, base * (1 - amplification_range), once deviation
    reaches amplification_range. Never negative, never increasing.
    """
    remaining = S(ONE) - S(deviation).min(config.amplification_range)
    return fmul(config.base_amplification, remaining.value)


def evaluate_curve(
    reserve_a: int,
    reserve_b: int,
    current_price: int,
    target_price: int,
    config: CurveConfig,
) -> CurveEvaluation:
    """Evaluate the composite curve and keep every intermediate.

    Args:
        reserve_a: Pool balance of the first asset (raw units)
        reserve_b: Pool balance of the second asset (raw units)
        current_price: Reserve-implied price (18-decimal fixed point)
        target_price: Reference price (18-decimal fixed point)
        config: Curve parameters, validated on every call

    Returns:
        CurveEvaluation with 0 < liquidity <= baseline

    Raises:
        InvalidInput: If an argument is zero or a reserve is not above
            MIN_LIQUIDITY
        PriceOutOfBounds: If a price exceeds MAX_PRICE_RATIO, or the curve
            has decayed to zero at this deviation
        InvalidConfig: If config fails validation
        MathOverflow: If reserve_a * reserve_b does not fit in uint256
    """
    _check_inputs(reserve_a, reserve_b, current_price, target_price)
    validate_config(config)

    baseline = geometric_mean(reserve_a, reserve_b)

    price_ratio = fdiv(current_price, target_price)
    deviation = S(price_ratio).abs_diff(ONE).value

    composite, sig, gau, rat = composite_value(deviation, config)
    amp = amplification(deviation, config)

    raw = fmul(fmul(baseline, composite), amp)
    if raw == 0:
        raise PriceOutOfBounds(
            f"Liquidity vanishes at deviation {deviation} (price ratio {price_ratio})"
        )
    liquidity = min(raw, baseline)

    logger.debug(
        "curve_evaluated",
        baseline=baseline,
        deviation=deviation,
        composite=composite,
        amplification=amp,
        raw=raw,
        liquidity=liquidity,
        clamped=raw > baseline,
    )

    return CurveEvaluation(
        baseline=baseline,
        price_ratio=price_ratio,
        deviation=deviation,
        sigmoid=sig,
        gaussian=gau,
        rational=rat,
        composite=composite,
        amplification=amp,
        raw=raw,
        liquidity=liquidity,
    )


def calculate_liquidity(
    reserve_a: int,
    reserve_b: int,
    current_price: int,
    target_price: int,
    config: CurveConfig,
) -> int:
    """Effective liquidity for a reserve pair at a price.

    Pure and deterministic: identical arguments always give the same
    result. See evaluate_curve for arguments and errors.
    """
    return evaluate_curve(reserve_a, reserve_b, current_price, target_price, config).liquidity
