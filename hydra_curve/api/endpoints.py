"""API endpoints for the Hydra curve quote service."""

import os
from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends

from hydra_curve.curve.config import PRESETS, get_preset
from hydra_curve.curve.engine import evaluate_curve
from hydra_curve.models.quote import (
    CurveConfigModel,
    LiquidityRequest,
    LiquidityResponse,
    QuoteRequest,
    QuoteResponse,
)
from hydra_curve.pricing.adapter import PricingAdapter
from hydra_curve.pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig

logger = structlog.get_logger()

router = APIRouter()


@lru_cache(maxsize=1)
def _default_adapter() -> PricingAdapter:
    # Fee override via environment variable HYDRA_FEE_BPS (e.g. "25" = 0.25%)
    fee_bps = os.environ.get("HYDRA_FEE_BPS")
    config = PricingConfig.from_bps(int(fee_bps)) if fee_bps else DEFAULT_PRICING_CONFIG
    return PricingAdapter(config)


def get_adapter() -> PricingAdapter:
    """Dependency provider for the pricing adapter.

    Override this in tests to inject a different fee:
        app.dependency_overrides[get_adapter] = lambda: PricingAdapter(config)
    """
    return _default_adapter()


@router.get("/presets")
async def list_presets() -> dict[str, CurveConfigModel]:
    """All named presets."""
    return {name: CurveConfigModel.from_config(config) for name, config in PRESETS.items()}


@router.get("/presets/{name}")
async def preset(name: str) -> CurveConfigModel:
    """One named preset. Unknown names are rejected as invalid_config."""
    return CurveConfigModel.from_config(get_preset(name))


@router.post("/liquidity")
async def liquidity(request: LiquidityRequest) -> LiquidityResponse:
    """Evaluate the composite curve for a reserve pair at a price."""
    evaluation = evaluate_curve(
        int(request.reserve_a),
        int(request.reserve_b),
        int(request.current_price),
        int(request.target_price),
        request.resolve_config(),
    )
    logger.info(
        "liquidity_evaluated",
        preset=request.preset if request.config is None else None,
        liquidity=evaluation.liquidity,
        clamped=evaluation.clamped,
    )
    return LiquidityResponse.from_evaluation(evaluation)


@router.post("/quote")
async def quote(
    request: QuoteRequest,
    adapter: PricingAdapter = Depends(get_adapter),
) -> QuoteResponse:
    """Quote an exact-input swap against the supplied reserve snapshot."""
    swap = adapter.simulate_swap(
        int(request.amount_in),
        int(request.reserve_in),
        int(request.reserve_out),
        int(request.target_price),
        request.resolve_config(),
    )
    logger.info(
        "quote_served",
        preset=request.preset if request.config is None else None,
        amount_in=swap.amount_in,
        amount_out=swap.amount_out,
    )
    return QuoteResponse.from_quote(swap)
