"""Catmull-Rom spline module with finite-difference tangents."""

from ._catmull_rom_spline import (
    CatmullRomSpline,
    catmull_rom_spline,
    catmull_rom_spline_from_points,
)
from ._catmull_rom_spline_derivative import catmull_rom_spline_derivative
from ._catmull_rom_spline_evaluate import catmull_rom_spline_evaluate
from ._catmull_rom_spline_fit import catmull_rom_spline_fit

__all__ = [
    "CatmullRomSpline",
    "catmull_rom_spline",
    "catmull_rom_spline_derivative",
    "catmull_rom_spline_evaluate",
    "catmull_rom_spline_fit",
    "catmull_rom_spline_from_points",
]
