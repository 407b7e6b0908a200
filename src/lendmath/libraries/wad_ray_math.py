"""
Integer implementation of the WadRayMath library.

All operations round half up and accept arbitrary-precision Python integers, so no overflow
checks are performed. Divisions truncate toward zero like the reference client's big-integer
arithmetic; for the non-negative values produced by the protocol this is floor division.
"""

from lendmath.constants import HALF_RAY, HALF_WAD, HALF_WAD_RAY_RATIO, RAY, WAD, WAD_RAY_RATIO
from lendmath.functions import div_toward_zero


def wad_mul(a: int, b: int) -> int:
    """
    Multiplies two wad, rounding half up to the nearest wad.
    """

    return div_toward_zero(HALF_WAD + a * b, WAD, "wad_mul")


def wad_div(a: int, b: int) -> int:
    """
    Divides two wad, rounding half up to the nearest wad.
    """

    return div_toward_zero(div_toward_zero(b, 2) + a * WAD, b, "wad_div")


def ray_mul(a: int, b: int) -> int:
    """
    Multiplies two ray, rounding half up to the nearest ray.
    """

    return div_toward_zero(HALF_RAY + a * b, RAY, "ray_mul")


def ray_div(a: int, b: int) -> int:
    """
    Divides two ray, rounding half up to the nearest ray.
    """

    return div_toward_zero(div_toward_zero(b, 2) + a * RAY, b, "ray_div")


def ray_to_wad(a: int) -> int:
    """
    Casts ray value down to wad, rounding half up to the nearest wad.
    """

    return div_toward_zero(HALF_WAD_RAY_RATIO + a, WAD_RAY_RATIO, "ray_to_wad")


def wad_to_ray(a: int) -> int:
    """
    Convert wad value up to ray.
    """

    return a * WAD_RAY_RATIO
