"""Shared numeric constants for tests.

Usage:
    from tests.helpers import ONE, RESERVE
"""

from hydra_curve.constants import MIN_LIQUIDITY, PRECISION

ONE = PRECISION

# 1000 tokens of an 18-decimal asset
RESERVE = 1000 * ONE

# Smallest reserve the engine accepts
SMALL_RESERVE = MIN_LIQUIDITY + 1


__all__ = [
    "ONE",
    "RESERVE",
    "SMALL_RESERVE",
]
