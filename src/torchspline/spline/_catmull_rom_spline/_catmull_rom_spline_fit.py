from __future__ import annotations

from typing import TYPE_CHECKING

from torch import Tensor

from ..._interpolation_value import as_interpolation_tensor
from .._insufficient_points_error import InsufficientPointsError
from .._points import check_point_order, check_samples

if TYPE_CHECKING:
    from ._catmull_rom_spline import CatmullRomSpline


def catmull_rom_spline_fit(
    x: Tensor,
    y: Tensor,
) -> CatmullRomSpline:
    """
    Fit a Catmull-Rom spline to data points.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n_points,). Must be non-decreasing.
    y : Tensor
        Values at knots, shape (n_points,).

    Returns
    -------
    CatmullRomSpline
        Fitted spline owning copies of the inputs.

    Raises
    ------
    InsufficientPointsError
        If fewer than 3 points are given.
    PointOrderError
        If some ``x[i] < x[i-1]``.
    """
    x = as_interpolation_tensor(x, name="x")
    y = as_interpolation_tensor(y, dtype=x.dtype, device=x.device, name="y")

    check_samples(x, y=y)

    n = x.shape[0]
    if n < 3:
        raise InsufficientPointsError(n)
    check_point_order(x)

    from ._catmull_rom_spline import CatmullRomSpline

    return CatmullRomSpline(
        knots=x.clone(),
        y=y.clone(),
        batch_size=[],
    )
