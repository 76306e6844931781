"""Tests for the fixed-point exponential approximation.

The approximation is compared against a 60-digit Decimal reference over
the whole supported domain, not just at spot values.
"""

from decimal import Decimal, localcontext

import pytest

from hydra_curve.errors import MathOverflow
from hydra_curve.math.exponential import (
    LN2,
    MAX_EXP_RELATIVE_ERROR,
    MAX_EXPONENT,
    MIN_EXPONENT,
    exp,
)
from hydra_curve.math.fixed_point import ONE

# e^1 and e^-1 at 18 decimals
E = 2_718_281_828_459_045_235
INV_E = 367_879_441_171_442_321


def reference_exp(z: int) -> Decimal:
    """e^z * 10^18 computed with 60 significant digits."""
    with localcontext() as ctx:
        ctx.prec = 60
        return (Decimal(z) / Decimal(ONE)).exp() * Decimal(ONE)


def within_bound(approx: int, z: int) -> bool:
    """Relative error bound plus two units of truncation."""
    with localcontext() as ctx:
        ctx.prec = 60
        ref = reference_exp(z)
        tolerance = ref * Decimal(MAX_EXP_RELATIVE_ERROR) / Decimal(ONE) + 2
        return abs(Decimal(approx) - ref) <= tolerance


class TestExactPoints:
    """Points where the decomposition is exact."""

    def test_zero(self):
        assert exp(0) == ONE

    def test_ln2_is_two(self):
        """z = ln2 is a pure bit shift."""
        assert exp(LN2) == 2 * ONE

    def test_multiple_of_ln2(self):
        assert exp(10 * LN2) == 1024 * ONE

    def test_negative_ln2_is_half(self):
        assert exp(-LN2) == ONE // 2


class TestSpotValues:
    """Well-known values within the documented bound."""

    def test_e(self):
        assert abs(exp(ONE) - E) <= E * MAX_EXP_RELATIVE_ERROR // ONE

    def test_inverse_e(self):
        assert abs(exp(-ONE) - INV_E) <= INV_E * MAX_EXP_RELATIVE_ERROR // ONE

    def test_small_exponent(self):
        """e^0.001 ~= 1.0010005."""
        assert within_bound(exp(ONE // 1000), ONE // 1000)


class TestDomain:
    """Saturation and overflow rules at the domain edges."""

    def test_below_minimum_is_zero(self):
        assert exp(MIN_EXPONENT - 1) == 0

    def test_far_below_minimum_is_zero(self):
        assert exp(-(10**40)) == 0

    def test_minimum_is_positive(self):
        """e^-41 is ~1.56e-18, i.e. one unit."""
        assert exp(MIN_EXPONENT) == 1

    def test_maximum_is_representable(self):
        assert within_bound(exp(MAX_EXPONENT), MAX_EXPONENT)

    def test_above_maximum_raises(self):
        with pytest.raises(MathOverflow):
            exp(MAX_EXPONENT + 1)


class TestAgainstReference:
    """Sweep of the full domain against a high-precision reference."""

    STEP = 37 * ONE // 100

    def test_full_domain_within_bound(self):
        failures = [
            z
            for z in range(MIN_EXPONENT, MAX_EXPONENT + 1, self.STEP)
            if not within_bound(exp(z), z)
        ]
        assert failures == []

    def test_fractional_remainders_within_bound(self):
        """Fine sweep across one ln2 interval, where the polynomial does its work."""
        step = LN2 // 50
        for z in range(0, LN2, step):
            assert within_bound(exp(z), z), z
            assert within_bound(exp(-z), -z), -z

    def test_strictly_increasing(self):
        values = [exp(z) for z in range(-20 * ONE, 100 * ONE, self.STEP)]
        assert all(a < b for a, b in zip(values, values[1:], strict=False))

    def test_reciprocal_symmetry(self):
        """exp(z) * exp(-z) ~= 1 within twice the bound."""
        for z in (ONE // 3, 2 * ONE, 7 * ONE, 25 * ONE):
            product = exp(z) * exp(-z) // ONE
            assert abs(product - ONE) <= 2 * MAX_EXP_RELATIVE_ERROR
