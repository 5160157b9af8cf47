"""Hermite spline evaluation using the cubic Hermite basis matrix."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Tuple

import torch
from torch import Tensor

from ..._interpolation_value import InterpolationValue
from .._segment import (
    flatten_query,
    locate_segments,
    pin_to_knots,
    power_basis,
)

if TYPE_CHECKING:
    from ._hermite_spline import HermiteSpline


@functools.lru_cache(maxsize=None)
def hermite_basis(dtype: torch.dtype, device: torch.device) -> Tensor:
    """The fixed Hermite basis matrix in ``dtype`` on ``device``.

    Rows map ``[y_i, y_{i+1}, h*d_i, h*d_{i+1}]`` to the coefficients of
    ``[u^3, u^2, u, 1]``. Callers must not modify the returned tensor.
    """
    return torch.tensor(
        [
            [2, -2, 1, 1],
            [-3, 3, -2, -1],
            [0, 0, 1, 0],
            [1, 0, 0, 0],
        ],
        dtype=dtype,
        device=device,
    )


def hermite_segment_coefficients(
    spline: HermiteSpline,
    segment: Tensor,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Power-basis coefficients of the Hermite cubic on each requested segment.

    Parameters
    ----------
    spline : HermiteSpline
        Fitted Hermite spline.
    segment : Tensor
        Segment indices, shape (m,).

    Returns
    -------
    coefficients : Tensor
        Shape (m, 4), coefficients of ``[u^3, u^2, u, 1]``.
    x_i : Tensor
        Left knot of each segment, shape (m,).
    h : Tensor
        Width of each segment, shape (m,).
    """
    knots = spline.knots
    x_i = knots[segment]
    h = knots[segment + 1] - x_i

    # Derivatives are scaled by the width of their own segment.
    f = torch.stack(
        [
            spline.y[segment],
            spline.y[segment + 1],
            spline.dydx[segment] * h,
            spline.dydx[segment + 1] * h,
        ],
        dim=-1,
    )
    m = hermite_basis(knots.dtype, knots.device)
    return f @ m.T, x_i, h


def hermite_spline_evaluate(
    spline: HermiteSpline,
    t: InterpolationValue,
) -> Tensor:
    """
    Evaluate a Hermite spline at query points.

    On segment ``[x_i, x_{i+1}]`` with ``h = x_{i+1} - x_i`` and
    ``u = (t - x_i) / h`` the interpolant is

        p(t) = [u^3, u^2, u, 1] @ M @ [y_i, y_{i+1}, h*d_i, h*d_{i+1}]

    with the Hermite basis matrix
    ``M = [[2, -2, 1, 1], [-3, 3, -2, -1], [0, 0, 1, 0], [1, 0, 0, 0]]``.

    Parameters
    ----------
    spline : HermiteSpline
        Fitted spline from hermite_spline_fit
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
    t_flat, query_shape = flatten_query(t, spline.knots)
    lookup = locate_segments(spline.knots, t_flat)

    coefficients, x_i, h = hermite_segment_coefficients(spline, lookup.segment)
    u = (t_flat - x_i) / h
    y = (power_basis(u) * coefficients).sum(dim=-1)

    slope = (power_basis(u, 1) * coefficients).sum(dim=-1) / h
    y = pin_to_knots(lookup, spline.y, y, slope, t_flat)

    return y.reshape(query_shape)
