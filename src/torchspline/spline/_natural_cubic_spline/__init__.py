"""Natural cubic spline module (zero curvature at both ends)."""

from ._natural_cubic_spline import (
    NaturalCubicSpline,
    natural_cubic_spline,
    natural_cubic_spline_from_points,
)
from ._natural_cubic_spline_derivative import natural_cubic_spline_derivative
from ._natural_cubic_spline_evaluate import natural_cubic_spline_evaluate
from ._natural_cubic_spline_fit import natural_cubic_spline_fit

__all__ = [
    "NaturalCubicSpline",
    "natural_cubic_spline",
    "natural_cubic_spline_derivative",
    "natural_cubic_spline_evaluate",
    "natural_cubic_spline_fit",
    "natural_cubic_spline_from_points",
]
