"""Test helpers module for shared test utilities.

- constants: fixed-point unit and common reserve sizes
"""

from tests.helpers.constants import ONE, RESERVE, SMALL_RESERVE

__all__ = [
    "ONE",
    "RESERVE",
    "SMALL_RESERVE",
]
