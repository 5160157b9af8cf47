"""Catmull-Rom spline derivative computation."""

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
from ._catmull_rom_spline_evaluate import catmull_rom_segment_coefficients

if TYPE_CHECKING:
    from ._catmull_rom_spline import CatmullRomSpline


def catmull_rom_spline_derivative(
    spline: CatmullRomSpline,
    t: InterpolationValue,
    order: int = 1,
) -> Tensor:
    """
    Evaluate a derivative of a Catmull-Rom spline at query points.

    The segment cubic is differentiated analytically, so unlike
    finite differences the result is exact up to rounding.

    Parameters
    ----------
    spline : CatmullRomSpline
        Catmull-Rom spline
    t : float or Tensor
        Query points, shape (*query_shape) or scalar
    order : int
        Derivative order (1, 2 or 3). Default is 1.

    Returns
    -------
    Tensor
        Derivative values, shape (*query_shape). At a knot the segment to
        its right is used. The last knot uses the segment ending at its first
        copy.
    """
    check_derivative_order(order)

    t_flat, query_shape = flatten_query(t, spline.knots)
    lookup = locate_segments(spline.knots, t_flat)

    coefficients, x_i, h = catmull_rom_segment_coefficients(
        spline, lookup.segment
    )
    u = (t_flat - x_i) / h
    result = (power_basis(u, order) * coefficients).sum(dim=-1) / h**order

    return result.reshape(query_shape)
