from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from ..._interpolation_value import InterpolationValue, constant
from .._segment import flatten_query, locate_segments, pin_to_knots

if TYPE_CHECKING:
    from ._natural_cubic_spline import NaturalCubicSpline


def natural_cubic_spline_evaluate(
    spline: NaturalCubicSpline,
    t: InterpolationValue,
) -> Tensor:
    """
    Evaluate a natural cubic spline at query points.

    On segment ``[x_i, x_{i+1}]`` with ``h = x_{i+1} - x_i``,
    ``a = x_{i+1} - t`` and ``b = t - x_i``:

        y(t) = a^3/(6h) z_i + b^3/(6h) z_{i+1}
               + a (y_i/h - h/6 z_i) + b (y_{i+1}/h - h/6 z_{i+1})

    where ``z`` are the knot curvatures solved at construction.

    Parameters
    ----------
    spline : NaturalCubicSpline
        Fitted spline from natural_cubic_spline_fit
    t : float or Tensor
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape). A query equal to a knot
        returns the stored value at that knot unchanged, with the segment
        derivative as its gradient in ``t``.

    Raises
    ------
    OutOfLowerBoundError
        If a query point is below the first knot.
    OutOfUpperBoundError
        If a query point is above the last knot.
    """
    knots = spline.knots
    z = spline.curvature

    t_flat, query_shape = flatten_query(t, knots)
    lookup = locate_segments(knots, t_flat)
    i = lookup.segment

    x_i = knots[i]
    x_ip1 = knots[i + 1]
    h = x_ip1 - x_i
    a = x_ip1 - t_flat
    b = t_flat - x_i
    two = constant(2, knots)
    six = constant(6, knots)

    y = (
        a * a * a / six / h * z[i]
        + b * b * b / six / h * z[i + 1]
        + a * (spline.y[i] / h - h / six * z[i])
        + b * (spline.y[i + 1] / h - h / six * z[i + 1])
    )

    slope = (
        (b * b * z[i + 1] - a * a * z[i]) / (two * h)
        + (spline.y[i + 1] - spline.y[i]) / h
        - h / six * (z[i + 1] - z[i])
    )
    y = pin_to_knots(lookup, spline.y, y, slope, t_flat)

    return y.reshape(query_shape)
