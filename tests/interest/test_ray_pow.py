import hypothesis
import hypothesis.strategies
import pytest

from lendmath.constants import SECONDS_PER_YEAR
from lendmath.exceptions import LendMathTypeError, LendMathValueError, NegativeDuration
from lendmath.fixed_point import RAY, Ray, ray_mul
from lendmath.interest import binomial_approximated_ray_pow, ray_pow

ray_values = hypothesis.strategies.integers(min_value=0, max_value=3 * 10**27).map(Ray)


@hypothesis.given(a=ray_values)
def test_zero_exponent_returns_ray(a: Ray) -> None:
    assert ray_pow(a, 0) == RAY
    assert ray_pow(a, 0).scale == 27
    assert binomial_approximated_ray_pow(a, 0) == RAY


def test_zero_base() -> None:
    assert ray_pow(Ray(0), 0) == RAY
    assert ray_pow(Ray(0), 5) == Ray(0)
    assert binomial_approximated_ray_pow(Ray(0), 5) == RAY


@hypothesis.given(a=ray_values)
def test_small_exponents_match_repeated_multiplication(a: Ray) -> None:
    assert ray_pow(a, 1) == a
    assert ray_pow(a, 2) == ray_mul(a, a)
    assert ray_pow(a, 3) == ray_mul(ray_mul(a, a), a)
    assert ray_pow(a, 4) == ray_mul(ray_mul(a, a), ray_mul(a, a))


def test_ray_pow_integer_bases_are_exact() -> None:
    assert ray_pow(Ray(2 * 10**27), 10) == Ray(1024 * 10**27)
    assert ray_pow(RAY, 1_000_000) == RAY
    assert ray_pow(Ray(5 * 10**26), 3) == Ray(125 * 10**24)


def test_ray_pow_rejects_bad_exponents() -> None:
    with pytest.raises(LendMathValueError):
        ray_pow(RAY, -1)
    with pytest.raises(LendMathTypeError):
        ray_pow(RAY, 1.0)  # type: ignore[arg-type]


def test_binomial_is_exact_through_third_order() -> None:
    # (1 + 0.5)**n has no terms beyond x**3 for n <= 3
    half = Ray(5 * 10**26)
    assert binomial_approximated_ray_pow(half, 1) == Ray(15 * 10**26)
    assert binomial_approximated_ray_pow(half, 2) == Ray(225 * 10**25)
    assert binomial_approximated_ray_pow(half, 3) == Ray(3375 * 10**24)


def test_binomial_result_scale() -> None:
    assert binomial_approximated_ray_pow(Ray(10**20), 1000).scale == 27


def test_binomial_truncates_higher_order_terms() -> None:
    # (1 + 0.5)**4 = 5.0625, the x**4 term (0.0625) is dropped
    half = Ray(5 * 10**26)
    assert binomial_approximated_ray_pow(half, 4) == Ray(5 * 10**27)


def test_binomial_rejects_negative_exponent() -> None:
    with pytest.raises(NegativeDuration):
        binomial_approximated_ray_pow(RAY, -1)


def test_binomial_underestimates_exact_power() -> None:
    rate_per_second = Ray(5 * 10**25).scale_div(SECONDS_PER_YEAR)

    exact = ray_pow(rate_per_second + RAY, SECONDS_PER_YEAR)
    approximated = binomial_approximated_ray_pow(rate_per_second, SECONDS_PER_YEAR)

    assert approximated < exact
    # The dropped terms start at x**4 / 24, about 2.6e-7 for a 5% yearly rate
    assert (exact - approximated) < Ray(10**21)
    assert (exact - approximated) > Ray(10**20)
