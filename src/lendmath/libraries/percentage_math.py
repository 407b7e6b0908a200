from lendmath.constants import HALF_PERCENTAGE_FACTOR, PERCENTAGE_FACTOR
from lendmath.functions import div_toward_zero


def percent_mul(value: int, percentage: int) -> int:
    """
    Multiplies a value by a percentage in basis points (10000 = 100%), rounding half up.
    """

    return div_toward_zero(value * percentage + HALF_PERCENTAGE_FACTOR, PERCENTAGE_FACTOR)


def percent_div(value: int, percentage: int) -> int:
    """
    Divides a value by a percentage in basis points (10000 = 100%), rounding half up.
    """

    return div_toward_zero(
        value * PERCENTAGE_FACTOR + div_toward_zero(percentage, 2),
        percentage,
        "percent_div",
    )
