from .config import settings
from .version import __version__

# isort: split

from .constants import SECONDS_PER_YEAR
from .exceptions import (
    DivisionByZero,
    FutureTimestamp,
    InvalidScale,
    LendMathError,
    MissingField,
    NegativeDuration,
    ParseError,
)
from .fixed_point import (
    HALF_RAY,
    HALF_WAD_RAY_RATIO,
    RAY,
    WAD_RAY_RATIO,
    Bps,
    Ray,
    ScaledDecimal,
    Wad,
    ray_div,
    ray_mul,
    ray_to_wad,
    wad_to_ray,
)
from .interest import (
    binomial_approximated_ray_pow,
    calculate_compounded_interest,
    calculate_compounded_rate,
    ray_pow,
)
from .logging import logger
from .reserve import ReserveRates

__all__ = (
    "HALF_RAY",
    "HALF_WAD_RAY_RATIO",
    "RAY",
    "SECONDS_PER_YEAR",
    "WAD_RAY_RATIO",
    "Bps",
    "DivisionByZero",
    "FutureTimestamp",
    "InvalidScale",
    "LendMathError",
    "MissingField",
    "NegativeDuration",
    "ParseError",
    "Ray",
    "ReserveRates",
    "ScaledDecimal",
    "Wad",
    "__version__",
    "binomial_approximated_ray_pow",
    "calculate_compounded_interest",
    "calculate_compounded_rate",
    "logger",
    "ray_div",
    "ray_mul",
    "ray_pow",
    "ray_to_wad",
    "settings",
    "wad_to_ray",
)
