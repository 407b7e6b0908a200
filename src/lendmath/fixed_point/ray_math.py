"""
Ray-scale arithmetic on `ScaledDecimal` values.

The rounding contract matches the remote contract: multiplication adds `HALF_RAY` before dividing
by `RAY`, division adds half the divisor before dividing, and ray-to-wad conversion adds
`HALF_WAD_RAY_RATIO` before dividing by `WAD_RAY_RATIO`. The integer work is delegated to
`lendmath.libraries.wad_ray_math`; this module only tracks the result scales.
"""

from lendmath import constants
from lendmath.exceptions import DivisionByZero
from lendmath.fixed_point.scaled_decimal import ScaledDecimal
from lendmath.fixed_point.types import Ray
from lendmath.libraries import wad_ray_math

# Ratio between ray and wad, expressed as a count of decimal digits
WAD_RAY_DECIMALS = 9

RAY = Ray(constants.RAY)
HALF_RAY = Ray(constants.HALF_RAY)
WAD_RAY_RATIO = ScaledDecimal(constants.WAD_RAY_RATIO, 0)
HALF_WAD_RAY_RATIO = ScaledDecimal(constants.HALF_WAD_RAY_RATIO, 0)


def ray_mul(a: ScaledDecimal, b: ScaledDecimal) -> ScaledDecimal:
    """
    Multiply two values where the product carries one surplus ray factor, rounding half up.

    The result scale is `max(a.scale + b.scale, 27) - 27`, so two rays multiply to a ray.
    """

    return ScaledDecimal(
        wad_ray_math.ray_mul(a.value, b.value),
        max(a.scale + b.scale, constants.RAY_DECIMALS) - constants.RAY_DECIMALS,
    )


def ray_div(a: ScaledDecimal, b: ScaledDecimal) -> ScaledDecimal:
    """
    Divide `a` by `b`, scaling the numerator up by one ray first and rounding half up.

    The result scale is `max(a.scale + 27, b.scale) - b.scale`, so a ray divided by a ray is a ray.
    """

    if b.value == 0:
        raise DivisionByZero("ray_div")
    return ScaledDecimal(
        wad_ray_math.ray_div(a.value, b.value),
        max(a.scale + constants.RAY_DECIMALS, b.scale) - b.scale,
    )


def ray_to_wad(a: ScaledDecimal) -> ScaledDecimal:
    """
    Drop nine digits of precision, rounding half up.
    """

    return ScaledDecimal(
        wad_ray_math.ray_to_wad(a.value),
        max(a.scale, WAD_RAY_DECIMALS) - WAD_RAY_DECIMALS,
    )


def wad_to_ray(a: ScaledDecimal) -> ScaledDecimal:
    """
    Add nine digits of precision. Exact.
    """

    return ScaledDecimal(wad_ray_math.wad_to_ray(a.value), a.scale + WAD_RAY_DECIMALS)
