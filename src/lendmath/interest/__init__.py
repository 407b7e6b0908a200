from lendmath.interest.ray_pow import binomial_approximated_ray_pow, ray_pow
from lendmath.interest.rates import calculate_compounded_interest, calculate_compounded_rate

__all__ = (
    "binomial_approximated_ray_pow",
    "calculate_compounded_interest",
    "calculate_compounded_rate",
    "ray_pow",
)
