"""Protocol constants for the Hydra curve.

These values must match across implementations for quotes to agree.
All fixed-point values are scaled by PRECISION (10^18).
"""

# Fixed-point unit: 1.0 is stored as 10^18
PRECISION = 10**18

# Working integer width (EVM word)
UINT256_MAX = 2**256 - 1
INT256_MAX = 2**255 - 1
INT256_MIN = -(2**255)

# Swap fee: 3 / 1000 = 0.3%
FEE_NUMERATOR = 3
FEE_DENOMINATOR = 1000

# Sigmoid steepness (plain integer)
MIN_STEEPNESS = 1
MAX_STEEPNESS = 100

# Gaussian width (fixed point): 0.01 .. 10.0
MIN_WIDTH = PRECISION // 100
MAX_WIDTH = 10 * PRECISION

# Rational tail decay power
MAX_POWER = 8

# Base amplification (fixed point): 1.0 .. 100.0
MIN_AMPLIFICATION = PRECISION
MAX_AMPLIFICATION = 100 * PRECISION

# Deviation over which amplification decays to its floor: 0.001 .. 0.9
# Capped below 1.0 so the floor never reaches zero.
MIN_AMPLIFICATION_RANGE = PRECISION // 1000
MAX_AMPLIFICATION_RANGE = 9 * PRECISION // 10

# Reserves must be strictly above this floor (raw token units)
MIN_LIQUIDITY = 1000

# Prices above this bound are rejected: 10^6 in fixed point
MAX_PRICE_RATIO = 10**6 * PRECISION
