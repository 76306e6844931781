"""Pricing configuration."""

from dataclasses import dataclass

from hydra_curve.constants import FEE_DENOMINATOR, FEE_NUMERATOR, PRECISION
from hydra_curve.errors import InvalidConfig


@dataclass(frozen=True)
class PricingConfig:
    """Fee settings for the pricing adapter.

    Attributes:
        fee_numerator: Fee numerator (default: 3)
        fee_denominator: Fee denominator (default: 1000, i.e. 0.3%)
    """

    fee_numerator: int = FEE_NUMERATOR
    fee_denominator: int = FEE_DENOMINATOR

    def __post_init__(self) -> None:
        if self.fee_denominator <= 0:
            raise InvalidConfig(f"Fee denominator must be positive, got {self.fee_denominator}")
        if not (0 <= self.fee_numerator < self.fee_denominator):
            raise InvalidConfig(
                f"Fee {self.fee_numerator}/{self.fee_denominator} must be in [0, 1)"
            )

    @classmethod
    def from_bps(cls, fee_bps: int) -> "PricingConfig":
        """Build from a fee in basis points (30 = 0.3%)."""
        return cls(fee_numerator=fee_bps, fee_denominator=10_000)

    @property
    def fee(self) -> int:
        """Fee as an 18-decimal fixed-point fraction."""
        return PRECISION * self.fee_numerator // self.fee_denominator


# Default configuration instance
DEFAULT_PRICING_CONFIG = PricingConfig()
