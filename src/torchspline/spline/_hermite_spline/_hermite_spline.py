"""Hermite spline interpolation with user-specified derivatives."""

from typing import Callable, Optional, Sequence, Tuple, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._points import unpack_points
from ._hermite_spline_evaluate import hermite_spline_evaluate
from ._hermite_spline_fit import hermite_spline_fit


@tensorclass
class HermiteSpline:
    """Cubic Hermite spline with user-specified derivatives.

    Hermite interpolation passes through data points with specified
    first derivatives at each point, providing full control over the
    shape of the curve.

    Attributes
    ----------
    knots : Tensor
        Breakpoints, shape (n_knots,). Non-decreasing, n_knots >= 2.
    y : Tensor
        Values at knots, shape (n_knots,).
    dydx : Tensor
        First derivatives at knots, shape (n_knots,).
    """

    knots: Tensor
    y: Tensor
    dydx: Tensor


def hermite_spline_from_points(
    points: Union[Sequence[Tuple[float, float, float]], Tensor],
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> HermiteSpline:
    """Fit a Hermite spline to a sequence of ``(x, y, dydx)`` tuples.

    See :func:`hermite_spline_fit` for validation rules.

    Notes
    -----
    Coordinates are converted with ``float()``, so ``Decimal`` and
    ``Fraction`` inputs are rounded to the nearest binary float and results
    are not exact decimal arithmetic.

    Examples
    --------
    >>> spline = hermite_spline_from_points(
    ...     [(0.0, 0.0, 1.0), (1.0, 1.0, 2.0), (2.0, 0.0, -1.0)]
    ... )
    >>> hermite_spline_evaluate(spline, 1.0)
    tensor(1.)
    """
    x, y, dydx = unpack_points(points, 3, dtype=dtype, device=device)
    return hermite_spline_fit(x, y, dydx)


def hermite_spline(
    x: torch.Tensor,
    y: torch.Tensor,
    dydx: torch.Tensor,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a cubic Hermite spline interpolator from data and derivatives.

    Parameters
    ----------
    x : Tensor
        Data x-coordinates. Must be non-decreasing.
    y : Tensor
        Data y-values, same length as x.
    dydx : Tensor
        First derivatives at each point, same length as x.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points. Raises
        ExtrapolationError for points outside ``[x[0], x[-1]]``.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 5)
    >>> y = torch.sin(x * 2 * torch.pi)
    >>> dydx = 2 * torch.pi * torch.cos(x * 2 * torch.pi)  # Exact derivative
    >>> f = hermite_spline(x, y, dydx)
    >>> f(torch.tensor([0.5]))  # Evaluate at x=0.5
    """
    fitted = hermite_spline_fit(x, y, dydx)
    return lambda t: hermite_spline_evaluate(fitted, t)
