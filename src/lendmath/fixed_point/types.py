"""
Fixed-point conventions used by the lending protocol, expressed as `ScaledDecimal` values with a
fixed scale. Arithmetic on these values returns plain `ScaledDecimal` instances, since the result
scale is determined by the operation.
"""

from typing import Any, ClassVar

from lendmath.constants import BPS_DECIMALS, RAY_DECIMALS, WAD_DECIMALS
from lendmath.exceptions import InvalidScale
from lendmath.fixed_point.scaled_decimal import ScaledDecimal, parse_integer


class FixedScaleDecimal(ScaledDecimal):
    """
    A `ScaledDecimal` whose scale is set by the class. The `scale` keyword is accepted so that
    `dataclasses.replace` works, but it must match the class scale.
    """

    __slots__ = ()

    DECIMALS: ClassVar[int]

    def __init__(self, value: Any, field: str | None = None, *, scale: int | None = None) -> None:
        if scale is not None and (type(scale) is not int or scale != self.DECIMALS):
            raise InvalidScale(scale)
        super().__init__(parse_integer(value, field), self.DECIMALS)


class Ray(FixedScaleDecimal):
    """
    27 decimal fixed-point number, used for interest rates and indices.
    """

    __slots__ = ()

    DECIMALS = RAY_DECIMALS


class Wad(FixedScaleDecimal):
    """
    18 decimal fixed-point number.
    """

    __slots__ = ()

    DECIMALS = WAD_DECIMALS


class Bps(FixedScaleDecimal):
    """
    4 decimal fixed-point number for percentages in basis points, where 10000 is 100%.
    """

    __slots__ = ()

    DECIMALS = BPS_DECIMALS
