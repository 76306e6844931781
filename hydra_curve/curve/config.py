"""Curve configuration bundles, validation and named presets."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType

from hydra_curve.constants import (
    MAX_AMPLIFICATION,
    MAX_AMPLIFICATION_RANGE,
    MAX_POWER,
    MAX_STEEPNESS,
    MAX_WIDTH,
    MIN_AMPLIFICATION,
    MIN_AMPLIFICATION_RANGE,
    MIN_STEEPNESS,
    MIN_WIDTH,
    PRECISION,
)
from hydra_curve.errors import InvalidConfig
from hydra_curve.math.fixed_point import from_decimal


@dataclass(frozen=True)
class CurveConfig:
    """Parameter bundle for the composite liquidity curve.

    Bundles are never edited in place. To reconfigure, build a new one
    (e.g. with dataclasses.replace) and validate it.

    Attributes:
        sigmoid_steepness: Concentration sharpness (plain integer)
        gaussian_width: Spread of the bell component (fixed point)
        rational_power: Tail decay power of the rational component
        weight_sigmoid: Share of the sigmoid component (fixed point)
        weight_gaussian: Share of the gaussian component (fixed point)
        weight_rational: Share of the rational component (fixed point)
        base_amplification: Multiplier at zero deviation (fixed point, >= 1.0)
        amplification_range: Deviation at which amplification reaches its
            floor (fixed point fraction)
    """

    sigmoid_steepness: int
    gaussian_width: int
    rational_power: int
    weight_sigmoid: int
    weight_gaussian: int
    weight_rational: int
    base_amplification: int
    amplification_range: int

    @classmethod
    def from_decimals(
        cls,
        *,
        sigmoid_steepness: int,
        gaussian_width: Decimal | str,
        rational_power: int,
        weight_sigmoid: Decimal | str,
        weight_gaussian: Decimal | str,
        weight_rational: Decimal | str,
        base_amplification: Decimal | str,
        amplification_range: Decimal | str,
    ) -> CurveConfig:
        """Build a bundle from human-readable decimal values (e.g. "0.25")."""
        return cls(
            sigmoid_steepness=sigmoid_steepness,
            gaussian_width=from_decimal(gaussian_width),
            rational_power=rational_power,
            weight_sigmoid=from_decimal(weight_sigmoid),
            weight_gaussian=from_decimal(weight_gaussian),
            weight_rational=from_decimal(weight_rational),
            base_amplification=from_decimal(base_amplification),
            amplification_range=from_decimal(amplification_range),
        )

    @property
    def weight_sum(self) -> int:
        return self.weight_sigmoid + self.weight_gaussian + self.weight_rational


def _check_range(name: str, value: object, low: int, high: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidConfig(f"{name} must be an integer, got {type(value).__name__}")
    if not (low <= value <= high):
        raise InvalidConfig(f"{name} {value} outside [{low}, {high}]")


def validate_config(config: CurveConfig) -> None:
    """Validate a configuration bundle.

    Rules are checked in order and the first failure is raised:
    steepness, width, power, weights (each non-negative, sum exactly
    PRECISION with no tolerance), base amplification, amplification range.

    Has no side effects. Must be called wherever a caller-supplied bundle
    is accepted, not only when presets are built.

    Raises:
        InvalidConfig: If any rule is violated
    """
    if not isinstance(config, CurveConfig):
        raise InvalidConfig(f"Expected CurveConfig, got {type(config).__name__}")

    _check_range("sigmoid_steepness", config.sigmoid_steepness, MIN_STEEPNESS, MAX_STEEPNESS)
    _check_range("gaussian_width", config.gaussian_width, MIN_WIDTH, MAX_WIDTH)
    _check_range("rational_power", config.rational_power, 1, MAX_POWER)

    for name in ("weight_sigmoid", "weight_gaussian", "weight_rational"):
        _check_range(name, getattr(config, name), 0, PRECISION)
    if config.weight_sum != PRECISION:
        raise InvalidConfig(f"Weights sum to {config.weight_sum}, expected exactly {PRECISION}")

    _check_range(
        "base_amplification", config.base_amplification, MIN_AMPLIFICATION, MAX_AMPLIFICATION
    )
    _check_range(
        "amplification_range",
        config.amplification_range,
        MIN_AMPLIFICATION_RANGE,
        MAX_AMPLIFICATION_RANGE,
    )


# =============================================================================
# Named presets
# =============================================================================


def _validated(config: CurveConfig) -> CurveConfig:
    validate_config(config)
    return config


# Pegged pairs: sharp concentration, strong amplification over a narrow band
STABLE = "stable"
# General pairs
STANDARD = "standard"
# Uncorrelated pairs: wide bell, heavy rational tail, no boost
VOLATILE = "volatile"

PRESETS: Mapping[str, CurveConfig] = MappingProxyType(
    {
        STABLE: _validated(
            CurveConfig.from_decimals(
                sigmoid_steepness=50,
                gaussian_width="0.05",
                rational_power=4,
                weight_sigmoid="0.5",
                weight_gaussian="0.3",
                weight_rational="0.2",
                base_amplification="10",
                amplification_range="0.05",
            )
        ),
        STANDARD: _validated(
            CurveConfig.from_decimals(
                sigmoid_steepness=10,
                gaussian_width="0.25",
                rational_power=2,
                weight_sigmoid="0.4",
                weight_gaussian="0.4",
                weight_rational="0.2",
                base_amplification="2",
                amplification_range="0.5",
            )
        ),
        VOLATILE: _validated(
            CurveConfig.from_decimals(
                sigmoid_steepness=2,
                gaussian_width="1",
                rational_power=1,
                weight_sigmoid="0.2",
                weight_gaussian="0.3",
                weight_rational="0.5",
                base_amplification="1",
                amplification_range="0.9",
            )
        ),
    }
)


def get_preset(name: str) -> CurveConfig:
    """Look up a named preset.

    Raises:
        InvalidConfig: If no preset has this name
    """
    try:
        return PRESETS[name]
    except KeyError:
        raise InvalidConfig(
            f"Unknown preset '{name}' (available: {', '.join(sorted(PRESETS))})"
        ) from None


def stable_config() -> CurveConfig:
    return PRESETS[STABLE]


def standard_config() -> CurveConfig:
    return PRESETS[STANDARD]


def volatile_config() -> CurveConfig:
    return PRESETS[VOLATILE]
