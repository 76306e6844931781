"""Tests for swap pricing through the composite curve."""

import pytest

from hydra_curve.curve.engine import calculate_liquidity
from hydra_curve.errors import InvalidConfig, InvalidInput, PriceOutOfBounds
from hydra_curve.pricing import (
    DEFAULT_PRICING_CONFIG,
    PricingAdapter,
    PricingConfig,
    quote_input,
    quote_output,
)
from tests.helpers import ONE, RESERVE


class TestPricingConfig:
    """Tests for fee settings."""

    def test_default_fee_is_thirty_bps(self):
        assert DEFAULT_PRICING_CONFIG.fee == 3 * 10**15

    def test_from_bps(self):
        assert PricingConfig.from_bps(30).fee == DEFAULT_PRICING_CONFIG.fee

    def test_zero_fee(self):
        assert PricingConfig(fee_numerator=0).fee == 0

    def test_full_fee_rejected(self):
        with pytest.raises(InvalidConfig):
            PricingConfig(fee_numerator=1000, fee_denominator=1000)

    def test_zero_denominator_rejected(self):
        with pytest.raises(InvalidConfig):
            PricingConfig(fee_numerator=0, fee_denominator=0)

    def test_negative_fee_rejected(self):
        with pytest.raises(InvalidConfig):
            PricingConfig(fee_numerator=-1)


class TestQuoteOutput:
    """Exact-input quotes."""

    def test_balanced_pool_at_parity(self, standard):
        """L equals the reserve, so only the fee is taken."""
        assert quote_output(ONE, RESERVE, RESERVE, ONE, standard) == 997 * 10**15

    def test_below_naive_constant_product(self, standard):
        naive = ONE * RESERVE // (RESERVE + ONE)
        assert quote_output(ONE, RESERVE, RESERVE, ONE, standard) < naive

    def test_zero_fee_adapter(self, standard):
        adapter = PricingAdapter(PricingConfig(fee_numerator=0))
        assert adapter.quote_output(ONE, RESERVE, RESERVE, ONE, standard) == ONE

    def test_deviation_reduces_output(self, standard):
        """Same reserves, target far from the implied price."""
        on_target = quote_output(ONE, RESERVE, RESERVE, ONE, standard)
        off_target = quote_output(ONE, RESERVE, RESERVE, 2 * ONE, standard)
        assert off_target < on_target

    def test_larger_input_larger_output(self, standard):
        small = quote_output(ONE, RESERVE, RESERVE, ONE, standard)
        large = quote_output(10 * ONE, RESERVE, RESERVE, ONE, standard)
        assert large > small

    def test_drain_rejected(self, standard):
        with pytest.raises(InvalidInput, match="drain"):
            quote_output(2 * RESERVE, RESERVE, RESERVE, ONE, standard)

    def test_zero_amount_rejected(self, standard):
        with pytest.raises(InvalidInput, match="amount_in"):
            quote_output(0, RESERVE, RESERVE, ONE, standard)

    def test_zero_reserve_rejected(self, standard):
        with pytest.raises(InvalidInput, match="Reserves must be positive"):
            quote_output(ONE, RESERVE, 0, ONE, standard)

    def test_engine_errors_propagate(self, standard):
        """A reserve ratio above the price bound is reported by the engine."""
        with pytest.raises(PriceOutOfBounds):
            quote_output(ONE, 10**25, 10**18, ONE, standard)


class TestSimulateSwap:
    """Full quote details."""

    def test_fields(self, standard):
        quote = PricingAdapter().simulate_swap(ONE, RESERVE, RESERVE, ONE, standard)
        assert quote.amount_in == ONE
        assert quote.amount_out == 997 * 10**15
        assert quote.liquidity == RESERVE
        assert quote.current_price == ONE
        assert quote.fee == 3 * 10**15

    def test_liquidity_recomputed_from_reserves(self, standard):
        """Each quote reflects its own reserve snapshot."""
        adapter = PricingAdapter()
        quote = adapter.simulate_swap(ONE, RESERVE, 2 * RESERVE, ONE, standard)
        expected = calculate_liquidity(RESERVE, 2 * RESERVE, ONE // 2, ONE, standard)
        assert quote.current_price == ONE // 2
        assert quote.liquidity == expected
        assert quote.amount_out == ONE * expected * (ONE - quote.fee) // (RESERVE * ONE)

    def test_matches_quote_output(self, standard):
        adapter = PricingAdapter()
        quote = adapter.simulate_swap(5 * ONE, RESERVE, RESERVE, ONE, standard)
        assert quote.amount_out == adapter.quote_output(5 * ONE, RESERVE, RESERVE, ONE, standard)


class TestQuoteInput:
    """Exact-output quotes."""

    def test_inverse_at_parity(self, standard):
        assert quote_input(997 * 10**15, RESERVE, RESERVE, ONE, standard) == ONE

    def test_rounds_up(self, standard):
        """Quoting the returned input always covers the requested output."""
        for amount_out in (1, 12_345, ONE // 3, 7 * ONE):
            amount_in = quote_input(amount_out, RESERVE, 2 * RESERVE, ONE, standard)
            assert quote_output(amount_in, RESERVE, 2 * RESERVE, ONE, standard) >= amount_out

    def test_drain_rejected(self, standard):
        with pytest.raises(InvalidInput, match="drain"):
            quote_input(RESERVE, RESERVE, RESERVE, ONE, standard)

    def test_zero_amount_rejected(self, standard):
        with pytest.raises(InvalidInput, match="amount_out"):
            quote_input(0, RESERVE, RESERVE, ONE, standard)
