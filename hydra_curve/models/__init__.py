"""Pydantic models for the quote service."""

from hydra_curve.models.quote import (
    CurveConfigModel,
    ErrorResponse,
    LiquidityRequest,
    LiquidityResponse,
    QuoteRequest,
    QuoteResponse,
)
from hydra_curve.models.types import Uint256, validate_uint256

__all__ = [
    "Uint256",
    "validate_uint256",
    "CurveConfigModel",
    "LiquidityRequest",
    "LiquidityResponse",
    "QuoteRequest",
    "QuoteResponse",
    "ErrorResponse",
]
