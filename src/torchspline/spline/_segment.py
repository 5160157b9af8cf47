"""Segment lookup and the out-of-range policy shared by all splines."""

from typing import NamedTuple, Tuple

import torch
from torch import Tensor

from .._interpolation_value import InterpolationValue, as_interpolation_tensor
from ._extrapolation_error import OutOfLowerBoundError, OutOfUpperBoundError


class SegmentLookup(NamedTuple):
    """Result of locating query points among the knots.

    ``segment[k]`` is the index ``i`` of the segment ``[x[i], x[i+1]]`` used
    for query ``k``; ``exact[k]`` is True when the query coincides with a
    knot and ``knot[k]`` is the index of the first knot equal to it.
    """

    segment: Tensor
    exact: Tensor
    knot: Tensor


def flatten_query(
    t: InterpolationValue, knots: Tensor
) -> Tuple[Tensor, torch.Size]:
    """Convert ``t`` to a flat tensor in the dtype and device of ``knots``."""
    t = as_interpolation_tensor(
        t, dtype=knots.dtype, device=knots.device, name="t"
    )
    if torch.isnan(t).any():
        raise ValueError("Query points contain NaN values.")
    return t.reshape(-1), t.shape


def _offenders(values: Tensor):
    if values.numel() == 1:
        return values.item()
    return values.detach()


def locate_segments(knots: Tensor, t: Tensor) -> SegmentLookup:
    """
    Locate flat query points ``t`` among sorted ``knots``.

    Parameters
    ----------
    knots : Tensor
        Sorted knot positions, shape (n,), n >= 2.
    t : Tensor
        Query points, shape (m,).

    Returns
    -------
    SegmentLookup
        Segment index, exact-match mask and matching knot index per query.

    Raises
    ------
    OutOfLowerBoundError
        If a query lies strictly below ``knots[0]``.
    OutOfUpperBoundError
        If a query lies strictly above ``knots[-1]``.

    Notes
    -----
    With the leftmost insertion position ``pos`` of a query that is not a
    knot, ``pos == 0`` is below the range and ``pos == n`` is above it: the
    segment ``[x[n-1], x[n]]`` does not exist, so both ends are rejected.

    As long as ``knots[0] < knots[-1]`` every query, including a query on a
    repeated knot, is assigned a segment of positive width.
    """
    n = knots.shape[0]
    knots = knots.detach()
    detached = t.detach()

    position = torch.searchsorted(knots, detached)
    knot = torch.clamp(position, max=n - 1)
    exact = knots[knot] == detached

    below = (position == 0) & ~exact
    if torch.any(below):
        raise OutOfLowerBoundError(_offenders(detached[below]))

    above = position >= n
    if torch.any(above):
        raise OutOfUpperBoundError(_offenders(detached[above]))

    # Knot queries use the segment to their right. The last knot, and every
    # copy of a repeated last knot, uses the segment ending at its first copy
    # so the segment width is never zero.
    segment = torch.searchsorted(knots, detached, right=True) - 1
    segment = torch.where(segment >= n - 1, knot - 1, segment)
    segment = torch.clamp(segment, 0, n - 2)

    return SegmentLookup(segment=segment, exact=exact, knot=knot)


def pin_to_knots(
    lookup: SegmentLookup,
    values: Tensor,
    y: Tensor,
    slope: Tensor,
    t: Tensor,
) -> Tensor:
    """
    Replace ``y`` at exact knot queries with the stored ``values``.

    Parameters
    ----------
    lookup : SegmentLookup
        Result of :func:`locate_segments` for ``t``.
    values : Tensor
        Values stored at the knots, shape (n,).
    y : Tensor
        Segment polynomial evaluated at ``t``, shape (m,).
    slope : Tensor
        Derivative of the segment polynomial at ``t``, shape (m,).
    t : Tensor
        Flat query points, shape (m,).

    Returns
    -------
    Tensor
        Shape (m,).

    Notes
    -----
    A pinned entry is differentiable in ``t`` with derivative ``slope`` and
    in ``values`` with derivative one. The term ``slope * (t - t.detach())``
    is zero in the forward pass, so the stored value is returned unchanged.
    """
    pinned = values[lookup.knot] + slope * (t - t.detach())
    return torch.where(lookup.exact, pinned, y)


def power_basis(u: Tensor, order: int = 0) -> Tensor:
    """
    Row vector ``[u^3, u^2, u, 1]`` or its ``order``-th derivative in ``u``.

    Parameters
    ----------
    u : Tensor
        Local segment parameter, shape (m,).
    order : int
        Derivative order, 0 to 3.

    Returns
    -------
    Tensor
        Shape (m, 4).
    """
    one = torch.ones_like(u)
    zero = torch.zeros_like(u)
    if order == 0:
        u2 = u * u
        return torch.stack([u2 * u, u2, u, one], dim=-1)
    if order == 1:
        return torch.stack([3 * u * u, 2 * u, one, zero], dim=-1)
    if order == 2:
        return torch.stack([6 * u, 2 * one, zero, zero], dim=-1)
    if order == 3:
        return torch.stack([6 * one, zero, zero, zero], dim=-1)
    raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")


def check_derivative_order(order: int) -> None:
    if order < 1 or order > 3:
        raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")
