"""Hydra composite liquidity curve.

Usage:
    from hydra_curve.curve import calculate_liquidity, standard_config

    liquidity = calculate_liquidity(reserve_a, reserve_b, price, target, standard_config())
"""

from hydra_curve.curve.components import centered_sigmoid, gaussian, rational, sigmoid
from hydra_curve.curve.config import (
    PRESETS,
    CurveConfig,
    get_preset,
    stable_config,
    standard_config,
    validate_config,
    volatile_config,
)
from hydra_curve.curve.engine import CurveEvaluation, calculate_liquidity, evaluate_curve

__all__ = [
    # Components
    "sigmoid",
    "centered_sigmoid",
    "gaussian",
    "rational",
    # Config
    "CurveConfig",
    "validate_config",
    "PRESETS",
    "get_preset",
    "stable_config",
    "standard_config",
    "volatile_config",
    # Engine
    "CurveEvaluation",
    "calculate_liquidity",
    "evaluate_curve",
]
