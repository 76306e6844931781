"""Request and response models for the quote service.

Amounts and fixed-point values travel as uint256 decimal strings, field
names are camelCase on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from hydra_curve.curve.config import STANDARD, CurveConfig, get_preset
from hydra_curve.curve.engine import CurveEvaluation
from hydra_curve.models.types import Uint256
from hydra_curve.pricing.adapter import SwapQuote


class CurveConfigModel(BaseModel):
    """Explicit curve parameters (fixed-point values scaled by 10^18)."""

    sigmoid_steepness: int = Field(alias="sigmoidSteepness")
    gaussian_width: Uint256 = Field(alias="gaussianWidth")
    rational_power: int = Field(alias="rationalPower")
    weight_sigmoid: Uint256 = Field(alias="weightSigmoid")
    weight_gaussian: Uint256 = Field(alias="weightGaussian")
    weight_rational: Uint256 = Field(alias="weightRational")
    base_amplification: Uint256 = Field(alias="baseAmplification")
    amplification_range: Uint256 = Field(alias="amplificationRange")

    model_config = {"populate_by_name": True}

    def to_config(self) -> CurveConfig:
        """Build an (unvalidated) CurveConfig."""
        return CurveConfig(
            sigmoid_steepness=self.sigmoid_steepness,
            gaussian_width=int(self.gaussian_width),
            rational_power=self.rational_power,
            weight_sigmoid=int(self.weight_sigmoid),
            weight_gaussian=int(self.weight_gaussian),
            weight_rational=int(self.weight_rational),
            base_amplification=int(self.base_amplification),
            amplification_range=int(self.amplification_range),
        )

    @classmethod
    def from_config(cls, config: CurveConfig) -> CurveConfigModel:
        return cls(
            sigmoid_steepness=config.sigmoid_steepness,
            gaussian_width=str(config.gaussian_width),
            rational_power=config.rational_power,
            weight_sigmoid=str(config.weight_sigmoid),
            weight_gaussian=str(config.weight_gaussian),
            weight_rational=str(config.weight_rational),
            base_amplification=str(config.base_amplification),
            amplification_range=str(config.amplification_range),
        )


class _CurveSelection(BaseModel):
    """Either a named preset or explicit parameters (explicit wins)."""

    preset: str = Field(default=STANDARD, description="Named preset (stable/standard/volatile)")
    config: CurveConfigModel | None = Field(
        default=None, description="Explicit parameters, overriding the preset."
    )

    def resolve_config(self) -> CurveConfig:
        """Return the selected bundle.

        Raises:
            InvalidConfig: If the preset name is unknown
        """
        if self.config is not None:
            return self.config.to_config()
        return get_preset(self.preset)


class LiquidityRequest(_CurveSelection):
    """Evaluate the curve for a reserve pair at a price."""

    reserve_a: Uint256 = Field(alias="reserveA")
    reserve_b: Uint256 = Field(alias="reserveB")
    current_price: Uint256 = Field(alias="currentPrice")
    target_price: Uint256 = Field(alias="targetPrice")

    model_config = {"populate_by_name": True}


class LiquidityResponse(BaseModel):
    """Curve evaluation with its intermediates."""

    liquidity: Uint256
    baseline: Uint256
    price_ratio: Uint256 = Field(alias="priceRatio")
    deviation: Uint256
    composite: Uint256
    amplification: Uint256
    clamped: bool

    model_config = {"populate_by_name": True}

    @classmethod
    def from_evaluation(cls, evaluation: CurveEvaluation) -> LiquidityResponse:
        return cls(
            liquidity=str(evaluation.liquidity),
            baseline=str(evaluation.baseline),
            price_ratio=str(evaluation.price_ratio),
            deviation=str(evaluation.deviation),
            composite=str(evaluation.composite),
            amplification=str(evaluation.amplification),
            clamped=evaluation.clamped,
        )


class QuoteRequest(_CurveSelection):
    """Quote an exact-input swap."""

    amount_in: Uint256 = Field(alias="amountIn")
    reserve_in: Uint256 = Field(alias="reserveIn")
    reserve_out: Uint256 = Field(alias="reserveOut")
    target_price: Uint256 = Field(alias="targetPrice")

    model_config = {"populate_by_name": True}


class QuoteResponse(BaseModel):
    """Quoted swap amounts."""

    amount_in: Uint256 = Field(alias="amountIn")
    amount_out: Uint256 = Field(alias="amountOut")
    liquidity: Uint256
    current_price: Uint256 = Field(alias="currentPrice")
    fee: Uint256

    model_config = {"populate_by_name": True}

    @classmethod
    def from_quote(cls, quote: SwapQuote) -> QuoteResponse:
        return cls(
            amount_in=str(quote.amount_in),
            amount_out=str(quote.amount_out),
            liquidity=str(quote.liquidity),
            current_price=str(quote.current_price),
            fee=str(quote.fee),
        )


class ErrorResponse(BaseModel):
    """Error body returned for rejected requests."""

    error: str = Field(description="Error kind (e.g. invalid_input)")
    detail: str
