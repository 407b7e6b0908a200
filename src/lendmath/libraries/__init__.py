from . import percentage_math, wad_ray_math

__all__ = (
    "percentage_math",
    "wad_ray_math",
)
