"""Hydra Curve - composite liquidity curve pricing engine."""

from hydra_curve.curve import (
    CurveConfig,
    CurveEvaluation,
    calculate_liquidity,
    evaluate_curve,
    get_preset,
    stable_config,
    standard_config,
    validate_config,
    volatile_config,
)
from hydra_curve.errors import (
    HydraCurveError,
    InvalidConfig,
    InvalidInput,
    MathOverflow,
    PriceOutOfBounds,
)
from hydra_curve.pricing import PricingAdapter, PricingConfig, quote_input, quote_output

__version__ = "0.1.0"
__all__ = [
    "CurveConfig",
    "CurveEvaluation",
    "calculate_liquidity",
    "evaluate_curve",
    "get_preset",
    "stable_config",
    "standard_config",
    "volatile_config",
    "validate_config",
    "PricingAdapter",
    "PricingConfig",
    "quote_output",
    "quote_input",
    "HydraCurveError",
    "InvalidInput",
    "PriceOutOfBounds",
    "InvalidConfig",
    "MathOverflow",
    "__version__",
]
