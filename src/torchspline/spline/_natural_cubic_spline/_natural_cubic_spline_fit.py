from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

import torch
from torch import Tensor

from ..._interpolation_value import (
    LOW_PRECISION_DTYPES,
    as_interpolation_tensor,
    constant,
)
from ...linear_algebra import tridiagonal_solve, tridiagonal_system
from .._insufficient_points_error import InsufficientPointsError
from .._points import check_point_order, check_samples

if TYPE_CHECKING:
    from ._natural_cubic_spline import NaturalCubicSpline


def natural_cubic_spline_fit(
    x: Tensor,
    y: Tensor,
) -> NaturalCubicSpline:
    """
    Fit a natural cubic spline to data points.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Must be strictly increasing.
    y : Tensor
        Values at knots, shape (n_points,).

    Returns
    -------
    NaturalCubicSpline
        Fitted spline with the solved second derivatives.

    Raises
    ------
    InsufficientPointsError
        If fewer than 3 points are given.
    PointOrderError
        If x is not strictly increasing. Every segment width divides in
        the system below, so repeated knots are rejected too.

    Notes
    -----
    With ``h[i] = x[i+1] - x[i]`` the unknown second derivatives ``z``
    satisfy, for interior rows ``0 < i < n-1``,

        h[i-1]/6 z[i-1] + (h[i-1] + h[i])/3 z[i] + h[i]/6 z[i+1]
            = (y[i+1] - y[i])/h[i] - (y[i] - y[i-1])/h[i-1]

    while rows ``0`` and ``n-1`` read ``z = 0`` (natural boundary). The
    system is diagonally dominant and solved with the Thomas algorithm.
    """
    x = as_interpolation_tensor(x, name="x")
    y = as_interpolation_tensor(y, dtype=x.dtype, device=x.device, name="y")

    check_samples(x, y=y)

    n = x.shape[0]
    if n < 3:
        raise InsufficientPointsError(n)
    check_point_order(x, strict=True)

    if x.dtype in LOW_PRECISION_DTYPES:
        warnings.warn(
            f"Fitting a natural cubic spline in {x.dtype}; the second "
            "derivative solve may lose significant accuracy.",
            RuntimeWarning,
            stacklevel=2,
        )

    three = constant(3, x)
    six = constant(6, x)

    h = x[1:] - x[:-1]  # (n-1,)
    delta = (y[1:] - y[:-1]) / h  # (n-1,)

    zero = torch.zeros(1, dtype=x.dtype, device=x.device)
    one = torch.ones(1, dtype=x.dtype, device=x.device)

    lower = torch.cat([h[:-1] / six, zero])
    diagonal = torch.cat([one, (h[:-1] + h[1:]) / three, one])
    upper = torch.cat([zero, h[1:] / six])
    b = torch.cat([zero, delta[1:] - delta[:-1], zero])

    system = tridiagonal_system(lower, diagonal, upper)
    curvature = tridiagonal_solve(system, b)

    from ._natural_cubic_spline import NaturalCubicSpline

    return NaturalCubicSpline(
        knots=x.clone(),
        y=y.clone(),
        curvature=curvature,
        batch_size=[],
    )
