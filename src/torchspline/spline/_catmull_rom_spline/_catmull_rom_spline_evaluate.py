"""Catmull-Rom spline evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

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
    from ._catmull_rom_spline import CatmullRomSpline


def _matrix(rows: List[List[Tensor]]) -> Tensor:
    # rows of (m,) tensors -> (m, 4, 4)
    return torch.stack([torch.stack(row, dim=-1) for row in rows], dim=-2)


def _apply(matrix: Tensor, f: List[Tensor]) -> Tensor:
    return (matrix @ torch.stack(f, dim=-1).unsqueeze(-1)).squeeze(-1)


def catmull_rom_segment_coefficients(
    spline: CatmullRomSpline,
    segment: Tensor,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Power-basis coefficients of the Catmull-Rom cubic on each segment.

    Parameters
    ----------
    spline : CatmullRomSpline
        Fitted Catmull-Rom spline.
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

    Notes
    -----
    With ``h = x[i+1] - x[i]`` the spacing ratios are

        beta  = h / (h + (x[i+2] - x[i+1]))
        alpha = h / (h + (x[i+1] - x[i-1]))

    The first segment has no sample before it and only uses ``beta``; the
    last segment has no sample after it and only uses ``alpha``; interior
    segments blend all four neighbouring samples. The missing sample of a
    boundary segment enters with weight zero.
    """
    knots = spline.knots
    y = spline.y
    n = knots.shape[0]

    previous = torch.clamp(segment - 1, min=0)
    following = torch.clamp(segment + 2, max=n - 1)

    x_i = knots[segment]
    x_ip1 = knots[segment + 1]
    h = x_ip1 - x_i

    # At the boundaries the clamped index makes the unused ratio finite.
    beta = h / (h + (knots[following] - x_ip1))
    alpha = h / (h + (x_ip1 - knots[previous]))

    y_im1 = y[previous]
    y_i = y[segment]
    y_ip1 = y[segment + 1]
    y_ip2 = y[following]

    one = torch.ones_like(h)
    zero = torch.zeros_like(h)

    first = _apply(
        _matrix(
            [
                [zero, one - beta, -one, beta],
                [zero, beta - one, one, -beta],
                [zero, -one, one, zero],
                [zero, one, zero, zero],
            ]
        ),
        [zero, y_i, y_ip1, y_ip2],
    )

    last = _apply(
        _matrix(
            [
                [-alpha, one, -alpha, zero],
                [2 * alpha, -2 * one, 2 * one - 2 * alpha, zero],
                [-alpha, zero, alpha, zero],
                [zero, one, zero, zero],
            ]
        ),
        [y_im1, y_i, y_ip1, zero],
    )

    interior = _apply(
        _matrix(
            [
                [-alpha, 2 * one - beta, alpha - 2 * one, beta],
                [2 * alpha, beta - 3 * one, 3 * one - 2 * alpha, -beta],
                [-alpha, zero, alpha, zero],
                [zero, one, zero, zero],
            ]
        ),
        [y_im1, y_i, y_ip1, y_ip2],
    )

    is_first = (segment == 0).unsqueeze(-1)
    is_last = (segment + 2 == n).unsqueeze(-1)
    coefficients = torch.where(
        is_first, first, torch.where(is_last, last, interior)
    )
    return coefficients, x_i, h


def catmull_rom_spline_evaluate(
    spline: CatmullRomSpline,
    t: InterpolationValue,
) -> Tensor:
    """
    Evaluate a Catmull-Rom spline at query points.

    Parameters
    ----------
    spline : CatmullRomSpline
        Catmull-Rom spline from catmull_rom_spline_fit
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

    Examples
    --------
    >>> x = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)
    >>> y = torch.tensor([1.0, 0.5, 0.0], dtype=torch.float64)
    >>> spline = catmull_rom_spline_fit(x, y)
    >>> catmull_rom_spline_evaluate(spline, 0.75)  # 13/48
    tensor(0.2708, dtype=torch.float64)
    """
    t_flat, query_shape = flatten_query(t, spline.knots)
    lookup = locate_segments(spline.knots, t_flat)

    coefficients, x_i, h = catmull_rom_segment_coefficients(
        spline, lookup.segment
    )
    u = (t_flat - x_i) / h
    y = (power_basis(u) * coefficients).sum(dim=-1)

    slope = (power_basis(u, 1) * coefficients).sum(dim=-1) / h
    y = pin_to_knots(lookup, spline.y, y, slope, t_flat)

    return y.reshape(query_shape)
