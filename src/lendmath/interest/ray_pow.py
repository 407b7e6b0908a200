from lendmath.exceptions import LendMathValueError, NegativeDuration
from lendmath.fixed_point.ray_math import RAY, ray_mul
from lendmath.fixed_point.scaled_decimal import ScaledDecimal
from lendmath.functions import check_integer


def ray_pow(base: ScaledDecimal, exponent: int) -> ScaledDecimal:
    """
    Raise a ray to an integer power by binary exponentiation, using `ray_mul` for every product.

    Any base raised to the zero power returns `RAY`. Each `ray_mul` rounds half up, so the result
    is identical to repeated multiplication for small exponents but may drift by a few units in the
    last place for large ones.
    """

    check_integer(exponent, "exponent")
    if exponent < 0:
        raise LendMathValueError(message=f"Exponent must be non-negative, got {exponent}.")

    x = base
    n = exponent
    z = RAY if n % 2 == 0 else x

    n //= 2
    while n != 0:
        x = ray_mul(x, x)
        if n % 2 != 0:
            z = ray_mul(z, x)
        n //= 2

    return z


def binomial_approximated_ray_pow(base: ScaledDecimal, exponent: int) -> ScaledDecimal:
    """
    Approximate `(1 + base) ** exponent` in ray with the first three terms of the binomial series:

        1 + n*x + n*(n-1)/2 * x**2 + n*(n-1)*(n-2)/6 * x**3

    This is the approximation the pool contract uses to accrue variable debt, which is cheaper than
    `ray_pow` and slightly underestimates it. The two are not interchangeable: results derived from
    on-chain accrual must use this function.
    """

    check_integer(exponent, "exponent")
    if exponent < 0:
        raise NegativeDuration(exponent)
    if exponent == 0:
        return RAY

    exp_minus_one = exponent - 1
    exp_minus_two = exponent - 2 if exponent > 2 else 0

    base_power_two = ray_mul(base, base)
    base_power_three = ray_mul(base_power_two, base)

    first_term = base.mul(exponent)
    second_term = base_power_two.mul(exp_minus_one).mul(exponent).scale_div(2)
    third_term = base_power_three.mul(exp_minus_two).mul(exp_minus_one).mul(exponent).scale_div(6)

    return RAY.add(first_term).add(second_term).add(third_term)
