"""Differentiable spline interpolation for PyTorch tensors.

This module provides Hermite, Catmull-Rom and natural cubic splines over
scalar samples ``(x, y)``. Evaluation is vectorised over query tensors and
supports autograd; queries outside the sampled range raise instead of
extrapolating.

Hermite Splines
---------------
hermite_spline
    Create a Hermite spline interpolator from data (fit + callable).
hermite_spline_fit
    Fit a Hermite spline to values and derivatives.
hermite_spline_from_points
    Fit a Hermite spline to ``(x, y, dydx)`` tuples.
hermite_spline_evaluate
    Evaluate a Hermite spline at query points.
hermite_spline_derivative
    Evaluate a derivative of a Hermite spline.

Catmull-Rom Splines
-------------------
catmull_rom_spline
    Create a Catmull-Rom spline interpolator from data (fit + callable).
catmull_rom_spline_fit
    Fit a Catmull-Rom spline to data points.
catmull_rom_spline_from_points
    Fit a Catmull-Rom spline to ``(x, y)`` tuples.
catmull_rom_spline_evaluate
    Evaluate a Catmull-Rom spline at query points.
catmull_rom_spline_derivative
    Evaluate a derivative of a Catmull-Rom spline.

Natural Cubic Splines
---------------------
natural_cubic_spline
    Create a natural cubic spline interpolator from data (fit + callable).
natural_cubic_spline_fit
    Fit a natural cubic spline to data points.
natural_cubic_spline_from_points
    Fit a natural cubic spline to ``(x, y)`` tuples.
natural_cubic_spline_evaluate
    Evaluate a natural cubic spline at query points.
natural_cubic_spline_derivative
    Evaluate a derivative of a natural cubic spline.

Data Types
----------
HermiteSpline
    Cubic Hermite spline with explicit derivatives.
CatmullRomSpline
    Cubic spline with finite-difference tangents.
NaturalCubicSpline
    Cubic spline with zero end curvature.

Exceptions
----------
SplineError
    Base exception for spline operations.
PointOrderError
    Sample points not sorted by x.
InsufficientPointsError
    Too few sample points for the spline type.
ExtrapolationError
    Query point outside spline domain.
OutOfLowerBoundError
    Query point below the first knot.
OutOfUpperBoundError
    Query point above the last knot.
"""

# Import base exception first
from ._spline_error import SplineError

# Import spline implementations
from ._catmull_rom_spline import (
    CatmullRomSpline,
    catmull_rom_spline,
    catmull_rom_spline_derivative,
    catmull_rom_spline_evaluate,
    catmull_rom_spline_fit,
    catmull_rom_spline_from_points,
)

# Import exception subclasses
from ._extrapolation_error import (
    ExtrapolationError,
    OutOfLowerBoundError,
    OutOfUpperBoundError,
)
from ._hermite_spline import (
    HermiteSpline,
    hermite_spline,
    hermite_spline_derivative,
    hermite_spline_evaluate,
    hermite_spline_fit,
    hermite_spline_from_points,
)
from ._insufficient_points_error import InsufficientPointsError
from ._natural_cubic_spline import (
    NaturalCubicSpline,
    natural_cubic_spline,
    natural_cubic_spline_derivative,
    natural_cubic_spline_evaluate,
    natural_cubic_spline_fit,
    natural_cubic_spline_from_points,
)
from ._point_order_error import PointOrderError

__all__ = [
    "CatmullRomSpline",
    "ExtrapolationError",
    "HermiteSpline",
    "InsufficientPointsError",
    "NaturalCubicSpline",
    "OutOfLowerBoundError",
    "OutOfUpperBoundError",
    "PointOrderError",
    "SplineError",
    "catmull_rom_spline",
    "catmull_rom_spline_derivative",
    "catmull_rom_spline_evaluate",
    "catmull_rom_spline_fit",
    "catmull_rom_spline_from_points",
    "hermite_spline",
    "hermite_spline_derivative",
    "hermite_spline_evaluate",
    "hermite_spline_fit",
    "hermite_spline_from_points",
    "natural_cubic_spline",
    "natural_cubic_spline_derivative",
    "natural_cubic_spline_evaluate",
    "natural_cubic_spline_fit",
    "natural_cubic_spline_from_points",
]
