"""Hermite spline derivative computation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from ..._interpolation_value import InterpolationValue
from .._segment import (
    check_derivative_order,
    flatten_query,
    locate_segments,
    power_basis,
)
from ._hermite_spline_evaluate import hermite_segment_coefficients

if TYPE_CHECKING:
    from ._hermite_spline import HermiteSpline


def hermite_spline_derivative(
    spline: HermiteSpline,
    t: InterpolationValue,
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of a Hermite spline at query points.

    Parameters
    ----------
    spline : HermiteSpline
        Fitted Hermite spline
    t : float or Tensor
        Query points, shape (*query_shape) or scalar
    order : int
        Derivative order (1, 2 or 3). Default is 1.

    Returns
    -------
    Tensor
        Derivative values, shape (*query_shape).

    Raises
    ------
    ValueError
        If order is not 1, 2, or 3.
    OutOfLowerBoundError, OutOfUpperBoundError
        If a query point is outside ``[knots[0], knots[-1]]``.

    Notes
    -----
    At a knot the segment to the right is used. The last knot uses the
    segment ending at its first copy. The first derivative there equals the stored ``dydx``;
    second and third derivatives are in general discontinuous at knots.
    """
    check_derivative_order(order)

    t_flat, query_shape = flatten_query(t, spline.knots)
    lookup = locate_segments(spline.knots, t_flat)

    coefficients, x_i, h = hermite_segment_coefficients(spline, lookup.segment)
    u = (t_flat - x_i) / h

    # d/dt = (1/h) d/du
    result = (power_basis(u, order) * coefficients).sum(dim=-1) / h**order

    return result.reshape(query_shape)
