"""Natural cubic spline derivative computation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from ..._interpolation_value import InterpolationValue, constant
from .._segment import check_derivative_order, flatten_query, locate_segments

if TYPE_CHECKING:
    from ._natural_cubic_spline import NaturalCubicSpline


def natural_cubic_spline_derivative(
    spline: NaturalCubicSpline,
    t: InterpolationValue,
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of a natural cubic spline at query points.

    Parameters
    ----------
    spline : NaturalCubicSpline
        Fitted natural cubic spline
    t : float or Tensor
        Query points, shape (*query_shape) or scalar
    order : int
        Derivative order (1, 2 or 3). Default is 1.

    Returns
    -------
    Tensor
        Derivative values, shape (*query_shape).

    Notes
    -----
    With ``a = x_{i+1} - t`` and ``b = t - x_i``:

        y'(t)   = (b^2 z_{i+1} - a^2 z_i) / (2h)
                  + (y_{i+1} - y_i)/h - h/6 (z_{i+1} - z_i)
        y''(t)  = (a z_i + b z_{i+1}) / h
        y'''(t) = (z_{i+1} - z_i) / h

    The first and second derivatives are continuous across knots; the
    second derivative vanishes at both ends.
    """
    check_derivative_order(order)

    knots = spline.knots
    z = spline.curvature

    t_flat, query_shape = flatten_query(t, knots)
    i = locate_segments(knots, t_flat).segment

    x_i = knots[i]
    x_ip1 = knots[i + 1]
    h = x_ip1 - x_i
    a = x_ip1 - t_flat
    b = t_flat - x_i

    if order == 1:
        two = constant(2, knots)
        six = constant(6, knots)
        result = (
            (b * b * z[i + 1] - a * a * z[i]) / (two * h)
            + (spline.y[i + 1] - spline.y[i]) / h
            - h / six * (z[i + 1] - z[i])
        )
    elif order == 2:
        result = (a * z[i] + b * z[i + 1]) / h
    else:
        result = (z[i + 1] - z[i]) / h

    return result.reshape(query_shape)
