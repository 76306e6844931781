"""Swap pricing on top of the Hydra curve.

The effective liquidity from the engine scales a constant-fee formula:

    current_price = reserve_in / reserve_out
    amount_out    = amount_in * liquidity * (1 - fee) / reserve_in

Liquidity is recomputed on every call. Reserves change between trades, so
a quote is only valid for the reserve snapshot it was computed from.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from hydra_curve.curve.config import CurveConfig
from hydra_curve.curve.engine import calculate_liquidity
from hydra_curve.errors import InvalidInput
from hydra_curve.math.fixed_point import ONE, fdiv
from hydra_curve.pricing.config import DEFAULT_PRICING_CONFIG, PricingConfig
from hydra_curve.safe_int import S

logger = structlog.get_logger()


@dataclass(frozen=True)
class SwapQuote:
    """Result of quoting a swap against a reserve snapshot."""

    amount_in: int
    amount_out: int
    liquidity: int
    current_price: int
    fee: int


class PricingAdapter:
    """Quotes swaps through the composite curve.

    Attributes:
        config: Fee settings
    """

    def __init__(self, config: PricingConfig | None = None) -> None:
        self.config = config or DEFAULT_PRICING_CONFIG

    def _liquidity(
        self,
        reserve_in: int,
        reserve_out: int,
        target_price: int,
        curve_config: CurveConfig,
    ) -> tuple[int, int]:
        if reserve_in <= 0 or reserve_out <= 0:
            raise InvalidInput(f"Reserves must be positive, got ({reserve_in}, {reserve_out})")
        current_price = fdiv(reserve_in, reserve_out)
        liquidity = calculate_liquidity(
            reserve_in, reserve_out, current_price, target_price, curve_config
        )
        return liquidity, current_price

    def simulate_swap(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        target_price: int,
        curve_config: CurveConfig,
    ) -> SwapQuote:
        """Quote an exact-input swap.

        Args:
            amount_in: Input token amount
            reserve_in: Pool balance of the input token
            reserve_out: Pool balance of the output token
            target_price: Reference price (18-decimal fixed point)
            curve_config: Curve parameters

        Returns:
            SwapQuote for this reserve snapshot

        Raises:
            InvalidInput: If amount_in or a reserve is zero, or the output
                would drain reserve_out
            PriceOutOfBounds, InvalidConfig, MathOverflow: From the engine
        """
        if amount_in <= 0:
            raise InvalidInput(f"amount_in must be positive, got {amount_in}")
        liquidity, current_price = self._liquidity(
            reserve_in, reserve_out, target_price, curve_config
        )

        fee = self.config.fee
        numerator = S(amount_in) * S(liquidity) * (S(ONE) - S(fee))
        amount_out = (numerator // (S(reserve_in) * S(ONE))).to_uint256()

        if amount_out >= reserve_out:
            raise InvalidInput(f"Output {amount_out} would drain reserve {reserve_out}")

        logger.debug(
            "quote_output",
            amount_in=amount_in,
            amount_out=amount_out,
            liquidity=liquidity,
            current_price=current_price,
        )
        return SwapQuote(
            amount_in=amount_in,
            amount_out=amount_out,
            liquidity=liquidity,
            current_price=current_price,
            fee=fee,
        )

    def quote_output(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        target_price: int,
        curve_config: CurveConfig,
    ) -> int:
        """Output amount for an exact input. See simulate_swap."""
        return self.simulate_swap(
            amount_in, reserve_in, reserve_out, target_price, curve_config
        ).amount_out

    def quote_input(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        target_price: int,
        curve_config: CurveConfig,
    ) -> int:
        """Required input for an exact output (rounded up).

        Inverse of quote_output on the same snapshot: quoting the returned
        input yields at least amount_out.

        Raises:
            InvalidInput: If amount_out is zero or not below reserve_out, or
                a reserve is zero
        """
        if amount_out <= 0:
            raise InvalidInput(f"amount_out must be positive, got {amount_out}")
        if amount_out >= reserve_out:
            raise InvalidInput(f"Output {amount_out} would drain reserve {reserve_out}")
        liquidity, current_price = self._liquidity(
            reserve_in, reserve_out, target_price, curve_config
        )

        numerator = S(amount_out) * S(reserve_in) * S(ONE)
        denominator = S(liquidity) * (S(ONE) - S(self.config.fee))
        amount_in = ((numerator + denominator - 1) // denominator).to_uint256()

        logger.debug(
            "quote_input",
            amount_in=amount_in,
            amount_out=amount_out,
            liquidity=liquidity,
            current_price=current_price,
        )
        return amount_in


DEFAULT_PRICING_ADAPTER = PricingAdapter()


def quote_output(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    target_price: int,
    config: CurveConfig,
) -> int:
    """Output amount for an exact input, with the default 0.3% fee."""
    return DEFAULT_PRICING_ADAPTER.quote_output(
        amount_in, reserve_in, reserve_out, target_price, config
    )


def quote_input(
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
    target_price: int,
    config: CurveConfig,
) -> int:
    """Required input for an exact output, with the default 0.3% fee."""
    return DEFAULT_PRICING_ADAPTER.quote_input(
        amount_out, reserve_in, reserve_out, target_price, config
    )
