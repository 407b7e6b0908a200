__all__ = (
    "BPS_DECIMALS",
    "HALF_PERCENTAGE_FACTOR",
    "HALF_RAY",
    "HALF_WAD",
    "HALF_WAD_RAY_RATIO",
    "PERCENTAGE_FACTOR",
    "RAY",
    "RAY_DECIMALS",
    "SECONDS_PER_YEAR",
    "WAD",
    "WAD_DECIMALS",
    "WAD_RAY_RATIO",
)

# Wad: decimal numbers with 18 digits of precision
WAD_DECIMALS = 18
WAD = 10**WAD_DECIMALS
HALF_WAD = 5 * 10**17

# Ray: decimal numbers with 27 digits of precision
RAY_DECIMALS = 27
RAY = 10**RAY_DECIMALS
HALF_RAY = 5 * 10**26

# Ratio to convert between wad and ray
WAD_RAY_RATIO = 10**9
HALF_WAD_RAY_RATIO = 5 * 10**8

# Percentage: decimal numbers with 4 digits of precision (100.00%)
BPS_DECIMALS = 4
PERCENTAGE_FACTOR = 10**BPS_DECIMALS
HALF_PERCENTAGE_FACTOR = 5 * 10**3

# 365 days
SECONDS_PER_YEAR = 31_536_000
