"""Swap pricing for the Hydra curve.

Usage:
    from hydra_curve.pricing import quote_output
    from hydra_curve.curve import standard_config

    amount_out = quote_output(amount_in, reserve_in, reserve_out, target_price, standard_config())

With a non-default fee:
    from hydra_curve.pricing import PricingAdapter, PricingConfig

    adapter = PricingAdapter(PricingConfig.from_bps(25))
"""

from hydra_curve.pricing.adapter import (
    DEFAULT_PRICING_ADAPTER,
    PricingAdapter,
    SwapQuote,
    quote_input,
    quote_output,
)
from hydra_curve.pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig

__all__ = [
    "PricingAdapter",
    "SwapQuote",
    "DEFAULT_PRICING_ADAPTER",
    "quote_output",
    "quote_input",
    "PricingConfig",
    "DEFAULT_PRICING_CONFIG",
]
