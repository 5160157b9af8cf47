"""Catmull-Rom spline representation and convenience function."""

from typing import Callable, Optional, Sequence, Tuple, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._points import unpack_points
from ._catmull_rom_spline_evaluate import catmull_rom_spline_evaluate
from ._catmull_rom_spline_fit import catmull_rom_spline_fit


@tensorclass
class CatmullRomSpline:
    """Catmull-Rom spline through a sequence of samples.

    Unlike the Hermite spline no derivatives are stored: the tangent at
    each knot is reconstructed at evaluation time from the neighbouring
    samples, using the ratio of neighbouring segment widths. The first and
    last segments use one-sided estimates.

    Attributes
    ----------
    knots : Tensor
        Breakpoints, shape (n_knots,). Non-decreasing, n_knots >= 3.
    y : Tensor
        Values at knots, shape (n_knots,).
    """

    knots: Tensor
    y: Tensor


def catmull_rom_spline_from_points(
    points: Union[Sequence[Tuple[float, float]], Tensor],
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> CatmullRomSpline:
    """Fit a Catmull-Rom spline to a sequence of ``(x, y)`` tuples.

    Notes
    -----
    Coordinates are converted with ``float()``. ``Decimal`` and ``Fraction``
    values lose their exact representation.

    Examples
    --------
    >>> spline = catmull_rom_spline_from_points(
    ...     [(0.0, 1.0), (0.5, 0.5), (1.0, 0.0)], dtype=torch.float64
    ... )
    >>> catmull_rom_spline_evaluate(spline, 0.75)
    tensor(0.2708, dtype=torch.float64)
    """
    x, y = unpack_points(points, 2, dtype=dtype, device=device)
    return catmull_rom_spline_fit(x, y)


def catmull_rom_spline(
    x: torch.Tensor,
    y: torch.Tensor,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a Catmull-Rom spline interpolator from data.

    This is a convenience function that fits a Catmull-Rom spline and
    returns a callable that evaluates it.

    Parameters
    ----------
    x : Tensor
        Data x-coordinates, at least 3. Must be non-decreasing.
    y : Tensor
        Data y-values, same length as x.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points.
    """
    fitted = catmull_rom_spline_fit(x, y)
    return lambda t: catmull_rom_spline_evaluate(fitted, t)
