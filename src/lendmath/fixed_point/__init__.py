from lendmath.fixed_point.ray_math import (
    HALF_RAY,
    HALF_WAD_RAY_RATIO,
    RAY,
    WAD_RAY_RATIO,
    ray_div,
    ray_mul,
    ray_to_wad,
    wad_to_ray,
)
from lendmath.fixed_point.scaled_decimal import ScaledDecimal, parse_integer
from lendmath.fixed_point.types import Bps, Ray, Wad

__all__ = (
    "HALF_RAY",
    "HALF_WAD_RAY_RATIO",
    "RAY",
    "WAD_RAY_RATIO",
    "Bps",
    "Ray",
    "ScaledDecimal",
    "Wad",
    "parse_integer",
    "ray_div",
    "ray_mul",
    "ray_to_wad",
    "wad_to_ray",
)
