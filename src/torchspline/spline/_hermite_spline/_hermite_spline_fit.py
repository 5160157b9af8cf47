"""Hermite spline fitting."""

from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from ..._interpolation_value import as_interpolation_tensor
from .._insufficient_points_error import InsufficientPointsError
from .._points import check_point_order, check_samples

if TYPE_CHECKING:
    from ._hermite_spline import HermiteSpline


def hermite_spline_fit(
    x: Tensor,
    y: Tensor,
    dydx: Tensor,
) -> HermiteSpline:
    """
    Fit a cubic Hermite spline to data points with specified derivatives.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Must be non-decreasing.
    y : Tensor
        Values at knots, shape (n_points,).
    dydx : Tensor
        First derivatives at knots, shape (n_points,).

    Returns
    -------
    HermiteSpline
        Fitted spline owning copies of the inputs.

    Raises
    ------
    InsufficientPointsError
        If fewer than 2 points are given.
    PointOrderError
        If some ``x[i] < x[i-1]``.
    ValueError
        If the inputs are not 1-D tensors of the same length.
    """
    x = as_interpolation_tensor(x, name="x")
    y = as_interpolation_tensor(y, dtype=x.dtype, device=x.device, name="y")
    dydx = as_interpolation_tensor(
        dydx, dtype=x.dtype, device=x.device, name="dydx"
    )

    check_samples(x, y=y, dydx=dydx)

    n = x.shape[0]
    if n < 2:
        raise InsufficientPointsError(n)
    check_point_order(x)

    from ._hermite_spline import HermiteSpline

    return HermiteSpline(
        knots=x.clone(),
        y=y.clone(),
        dydx=dydx.clone(),
        batch_size=[],
    )
