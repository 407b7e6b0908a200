import math
import time

import pytest

from lendmath.constants import SECONDS_PER_YEAR
from lendmath.exceptions import (
    FutureTimestamp,
    LendMathTypeError,
    LendMathValueError,
    NegativeDuration,
)
from lendmath.fixed_point import RAY, Ray, ScaledDecimal
from lendmath.interest import (
    binomial_approximated_ray_pow,
    calculate_compounded_interest,
    calculate_compounded_rate,
)
from lendmath.libraries import wad_ray_math

FIVE_PERCENT = Ray(5 * 10**25)


def test_seconds_per_year() -> None:
    assert SECONDS_PER_YEAR == 365 * 24 * 60 * 60


def test_compounded_rate_over_one_year() -> None:
    compounded = calculate_compounded_rate(FIVE_PERCENT, SECONDS_PER_YEAR)

    assert compounded.scale == 27
    assert compounded > FIVE_PERCENT
    # Per-second compounding is within ~4e-11 of continuous compounding at this rate
    assert compounded.to_float() == pytest.approx(math.expm1(0.05), abs=1e-9)


def test_compounded_rate_for_one_second() -> None:
    compounded = calculate_compounded_rate(FIVE_PERCENT, 1)
    assert compounded == FIVE_PERCENT.scale_div(SECONDS_PER_YEAR)
    assert compounded.value == 5 * 10**25 // SECONDS_PER_YEAR


def test_compounded_rate_zero_duration() -> None:
    assert calculate_compounded_rate(FIVE_PERCENT, 0) == 0


def test_compounded_rate_zero_rate() -> None:
    assert calculate_compounded_rate(Ray(0), SECONDS_PER_YEAR) == 0


def test_compounded_rate_floors_fractional_duration() -> None:
    assert calculate_compounded_rate(FIVE_PERCENT, 86_400.9) == calculate_compounded_rate(
        FIVE_PERCENT, 86_400
    )


def test_compounded_rate_accepts_other_scales() -> None:
    # 5% in wad precision gives the same result up to the per-second truncation at 18 digits
    compounded = calculate_compounded_rate(ScaledDecimal(5 * 10**16, 18), SECONDS_PER_YEAR)
    assert compounded.scale == 27
    assert compounded.to_float() == pytest.approx(math.expm1(0.05), abs=1e-7)


def test_compounded_rate_rejects_bad_durations() -> None:
    with pytest.raises(NegativeDuration):
        calculate_compounded_rate(FIVE_PERCENT, -1)
    with pytest.raises(NegativeDuration):
        calculate_compounded_rate(FIVE_PERCENT, -0.5)
    with pytest.raises(LendMathValueError):
        calculate_compounded_rate(FIVE_PERCENT, math.inf)
    with pytest.raises(LendMathValueError):
        calculate_compounded_rate(FIVE_PERCENT, math.nan)
    with pytest.raises(LendMathTypeError):
        calculate_compounded_rate(FIVE_PERCENT, "60")  # type: ignore[arg-type]


def test_compounded_interest_zero_elapsed_time() -> None:
    now = 1_700_000_000
    assert calculate_compounded_interest(FIVE_PERCENT, now, now) == RAY
    assert calculate_compounded_interest(FIVE_PERCENT, now, now) == binomial_approximated_ray_pow(
        FIVE_PERCENT.scale_div(SECONDS_PER_YEAR), 0
    )


def test_compounded_interest_over_one_year() -> None:
    accrued = calculate_compounded_interest(FIVE_PERCENT, 0, SECONDS_PER_YEAR)

    x = FIVE_PERCENT.value // SECONDS_PER_YEAR
    n = SECONDS_PER_YEAR
    x_squared = wad_ray_math.ray_mul(x, x)
    x_cubed = wad_ray_math.ray_mul(x_squared, x)
    expected = (
        RAY.value
        + x * n
        + x_squared * (n - 1) * n // 2
        + x_cubed * (n - 2) * (n - 1) * n // 6
    )

    assert accrued.scale == 27
    assert accrued.value == expected == 1_051_270_908_731_986_166_777_656_000

    # 1 + r + r**2 / 2 + r**3 / 6, before per-second rounding
    assert accrued.to_float() == pytest.approx(1 + 0.05 + 0.05**2 / 2 + 0.05**3 / 6, abs=1e-7)


def test_compounded_interest_matches_binomial_power() -> None:
    last_update = 1_700_000_000
    accrued = calculate_compounded_interest(FIVE_PERCENT, last_update, last_update + 3_600)
    assert accrued == binomial_approximated_ray_pow(FIVE_PERCENT.scale_div(SECONDS_PER_YEAR), 3_600)


def test_compounded_interest_future_timestamp() -> None:
    with pytest.raises(FutureTimestamp) as exc_info:
        calculate_compounded_interest(FIVE_PERCENT, 1_700_000_100, 1_700_000_000)

    assert exc_info.value.duration == -100
    assert exc_info.value.last_update_timestamp == 1_700_000_100
    assert exc_info.value.current_timestamp == 1_700_000_000

    # A future timestamp is a kind of negative duration
    with pytest.raises(NegativeDuration):
        calculate_compounded_interest(FIVE_PERCENT, 1_700_000_100, 1_700_000_000)


def test_compounded_interest_uses_system_clock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(time, "time", lambda: 1_700_000_000.75)
    assert calculate_compounded_interest(FIVE_PERCENT, 1_700_000_000) == RAY

    with pytest.raises(FutureTimestamp):
        calculate_compounded_interest(FIVE_PERCENT, 1_700_000_001)


def test_compounded_interest_rejects_non_integer_timestamps() -> None:
    with pytest.raises(LendMathTypeError):
        calculate_compounded_interest(FIVE_PERCENT, 1.5)  # type: ignore[arg-type]
