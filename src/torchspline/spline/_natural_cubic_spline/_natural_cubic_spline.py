"""Natural cubic spline interpolation."""

from typing import Callable, Optional, Sequence, Tuple, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from .._points import unpack_points
from ._natural_cubic_spline_evaluate import natural_cubic_spline_evaluate
from ._natural_cubic_spline_fit import natural_cubic_spline_fit


@tensorclass
class NaturalCubicSpline:
    """Natural cubic spline.

    The second derivative at every knot is solved for once, at
    construction, under the natural boundary condition (zero curvature at
    the first and last knot).

    Attributes
    ----------
    knots : Tensor
        Breakpoints, shape (n_knots,). Strictly increasing, n_knots >= 3.
    y : Tensor
        Values at knots, shape (n_knots,).
    curvature : Tensor
        Second derivatives at knots, shape (n_knots,).
        ``curvature[0] == curvature[-1] == 0``.
    """

    knots: Tensor
    y: Tensor
    curvature: Tensor


def natural_cubic_spline_from_points(
    points: Union[Sequence[Tuple[float, float]], Tensor],
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> NaturalCubicSpline:
    """Fit a natural cubic spline to a sequence of ``(x, y)`` tuples.

    Notes
    -----
    Coordinates are converted with ``float()``. ``Decimal`` and ``Fraction``
    values lose their exact representation, so the result is a binary
    floating point approximation of the exact spline.

    Examples
    --------
    >>> spline = natural_cubic_spline_from_points(
    ...     [(0.0, 1.0), (0.5, 0.5), (1.0, 0.0)], dtype=torch.float64
    ... )
    >>> natural_cubic_spline_evaluate(spline, 0.75)
    tensor(0.2500, dtype=torch.float64)
    """
    x, y = unpack_points(points, 2, dtype=dtype, device=device)
    return natural_cubic_spline_fit(x, y)


def natural_cubic_spline(
    x: torch.Tensor,
    y: torch.Tensor,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a natural cubic spline interpolator from data.

    Parameters
    ----------
    x : Tensor
        Data x-coordinates, at least 3. Must be strictly increasing.
    y : Tensor
        Data y-values, same length as x.

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given points.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 10)
    >>> y = torch.sin(x * 2 * torch.pi)
    >>> f = natural_cubic_spline(x, y)
    >>> f(torch.tensor([0.5]))  # Evaluate at x=0.5
    """
    fitted = natural_cubic_spline_fit(x, y)
    return lambda t: natural_cubic_spline_evaluate(fitted, t)
