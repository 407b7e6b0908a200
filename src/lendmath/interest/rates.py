import math
import time

from lendmath.constants import SECONDS_PER_YEAR
from lendmath.exceptions import (
    FutureTimestamp,
    LendMathTypeError,
    LendMathValueError,
    NegativeDuration,
)
from lendmath.fixed_point.ray_math import RAY
from lendmath.fixed_point.scaled_decimal import ScaledDecimal
from lendmath.functions import check_integer
from lendmath.interest.ray_pow import binomial_approximated_ray_pow, ray_pow
from lendmath.logging import logger


def _whole_seconds(duration: float) -> int:
    if isinstance(duration, bool) or not isinstance(duration, int | float):
        raise LendMathTypeError(
            message=f"Duration must be an int or float, got {type(duration).__name__}."
        )
    if isinstance(duration, float) and not math.isfinite(duration):
        raise LendMathValueError(message=f"Duration must be finite, got {duration}.")
    seconds = math.floor(duration)
    if seconds < 0:
        raise NegativeDuration(seconds)
    return seconds


def calculate_compounded_rate(rate: ScaledDecimal, duration: float) -> ScaledDecimal:
    """
    Compound a yearly rate per second over `duration` seconds and return the net growth.

    The yearly rate is divided by `SECONDS_PER_YEAR` (truncating) to get the per-second rate, the
    per-second growth factor is raised to the whole number of seconds with the exact `ray_pow`, and
    `RAY` is subtracted. With `duration == SECONDS_PER_YEAR` the result is the APY for an APR.
    """

    seconds = _whole_seconds(duration)
    growth_factor = rate.scale_div(SECONDS_PER_YEAR).add(RAY)
    return ray_pow(growth_factor, seconds).sub(RAY)


def calculate_compounded_interest(
    rate: ScaledDecimal,
    last_update_timestamp: int,
    current_timestamp: int | None = None,
) -> ScaledDecimal:
    """
    Calculate the interest factor accrued by a yearly rate since `last_update_timestamp`, using the
    binomial approximation that the pool contract applies to variable debt. The result includes the
    principal, so no elapsed time gives exactly `RAY`.

    The current time defaults to the system clock. A last update timestamp in the future raises
    `FutureTimestamp` instead of being treated as zero elapsed time.
    """

    check_integer(last_update_timestamp, "last_update_timestamp")
    if current_timestamp is None:
        current_timestamp = int(time.time())
    check_integer(current_timestamp, "current_timestamp")

    time_delta = current_timestamp - last_update_timestamp
    if time_delta < 0:
        raise FutureTimestamp(
            last_update_timestamp=last_update_timestamp,
            current_timestamp=current_timestamp,
        )

    rate_per_second = rate.scale_div(SECONDS_PER_YEAR)
    logger.debug(f"Compounding {rate_per_second} per second over {time_delta} seconds")
    return binomial_approximated_ray_pow(rate_per_second, time_delta)
