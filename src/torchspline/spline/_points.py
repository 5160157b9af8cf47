"""Validation and unpacking of raw sample points."""

from typing import Optional, Sequence, Tuple, Union

import torch
from torch import Tensor

from .._interpolation_value import as_interpolation_tensor
from ._point_order_error import PointOrderError


def unpack_points(
    points: Union[Sequence[Sequence[float]], Tensor],
    width: int,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Tuple[Tensor, ...]:
    """
    Split a sequence of point tuples into one tensor per coordinate.

    Parameters
    ----------
    points : sequence of tuples or Tensor
        Either ``n`` tuples of length ``width`` such as ``(x, y)`` or
        ``(x, y, dydx)``, or a tensor of shape ``(n, width)``.
    width : int
        Number of coordinates per point.
    dtype : torch.dtype, optional
        Interpolation dtype of the result.
    device : str or torch.device, optional
        Device of the result.

    Returns
    -------
    tuple of Tensor
        ``width`` tensors of shape ``(n,)``.

    Raises
    ------
    ValueError
        If a point does not have exactly ``width`` coordinates.

    Notes
    -----
    Tuple coordinates go through ``float()``. ``Decimal`` and ``Fraction``
    values are rounded to the nearest float64 and then cast to ``dtype``;
    their exact value is not kept.
    """
    if isinstance(points, Tensor):
        if points.dim() != 2 or points.shape[-1] != width:
            raise ValueError(
                f"points must have shape (n, {width}), got {tuple(points.shape)}"
            )
        table = as_interpolation_tensor(
            points, dtype=dtype, device=device, name="points"
        )
    else:
        points = list(points)
        for index, point in enumerate(points):
            if len(point) != width:
                raise ValueError(
                    f"point {index} must have {width} coordinates, got {len(point)}"
                )
        # Coordinates go through float() so Decimal, Fraction and 0-d
        # tensors are accepted alongside plain numbers.
        rows = [[float(coordinate) for coordinate in point] for point in points]
        table = as_interpolation_tensor(
            torch.tensor(rows, dtype=torch.float64).reshape(len(rows), width),
            dtype=dtype or torch.get_default_dtype(),
            device=device,
            name="points",
        )

    return tuple(table[:, column].clone() for column in range(width))


def check_samples(x: Tensor, **values: Tensor) -> None:
    """Check that ``x`` and every tensor in ``values`` are 1-D and of equal length."""
    if x.dim() != 1:
        raise ValueError(f"x must be 1-dimensional, got shape {tuple(x.shape)}")
    for name, value in values.items():
        if value.dim() != 1:
            raise ValueError(
                f"{name} must be 1-dimensional, got shape {tuple(value.shape)}"
            )
        if value.shape[0] != x.shape[0]:
            raise ValueError(
                f"x and {name} must have the same length, "
                f"got {x.shape[0]} and {value.shape[0]}"
            )
    if torch.isnan(x).any():
        raise ValueError("x contains NaN values.")


def check_point_order(x: Tensor, strict: bool = False) -> None:
    """
    Check that knots are sorted.

    Parameters
    ----------
    x : Tensor
        Knot positions, shape (n,).
    strict : bool
        Also reject repeated knots.

    Raises
    ------
    PointOrderError
        If some ``x[i] < x[i-1]`` (or ``x[i] <= x[i-1]`` when ``strict``),
        or if every knot is equal.
    """
    if x.shape[0] < 2:
        return
    if strict:
        in_order = x[1:] > x[:-1]
    else:
        in_order = x[1:] >= x[:-1]
    if not torch.all(in_order):
        raise PointOrderError()
    if x[-1] == x[0]:
        raise PointOrderError("points must span a nonzero interval")
