"""Tridiagonal linear systems."""

from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchspline._interpolation_value import as_interpolation_tensor

from ._shape_error import ShapeError
from ._solve_tridiagonal import (
    check_right_hand_side,
    check_tridiagonal_shapes,
    thomas_solve,
)


@tensorclass
class TridiagonalSystem:
    """Coefficients of a tridiagonal matrix A.

    Attributes
    ----------
    lower : Tensor
        Sub-diagonal, shape (n-1,).
    diagonal : Tensor
        Main diagonal, shape (n,).
    upper : Tensor
        Super-diagonal, shape (n-1,).

    Notes
    -----
    Build instances with :func:`tridiagonal_system`, which validates the
    shapes. A system can be solved any number of times for different
    right-hand sides.
    """

    lower: Tensor
    diagonal: Tensor
    upper: Tensor


def tridiagonal_system(
    lower: Union[Tensor, Sequence[float]],
    diagonal: Union[Tensor, Sequence[float]],
    upper: Union[Tensor, Sequence[float]],
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> TridiagonalSystem:
    """
    Create a tridiagonal system from its three diagonals.

    Parameters
    ----------
    lower : Tensor or sequence of float
        Sub-diagonal, length n-1.
    diagonal : Tensor or sequence of float
        Main diagonal, length n >= 1.
    upper : Tensor or sequence of float
        Super-diagonal, length n-1.
    dtype : torch.dtype, optional
        Interpolation dtype. Defaults to the dtype of ``diagonal``.
    device : str or torch.device, optional
        Device. Defaults to the device of ``diagonal``.

    Returns
    -------
    TridiagonalSystem
        Validated system owning copies of the diagonals.

    Raises
    ------
    ShapeError
        If ``len(lower) != len(upper)`` or ``len(upper) != len(diagonal) - 1``.

    Examples
    --------
    >>> system = tridiagonal_system([0.0, 0.0], [1.0, 1.0, 1.0], [0.0, 0.0])
    >>> tridiagonal_solve(system, torch.tensor([1.0, 2.0, 3.0]))
    tensor([1., 2., 3.])
    """
    diagonal = as_interpolation_tensor(
        diagonal, dtype=dtype, device=device, name="diagonal"
    )
    lower = as_interpolation_tensor(
        lower, dtype=diagonal.dtype, device=diagonal.device, name="lower"
    )
    upper = as_interpolation_tensor(
        upper, dtype=diagonal.dtype, device=diagonal.device, name="upper"
    )

    check_tridiagonal_shapes(lower, diagonal, upper)

    return TridiagonalSystem(
        lower=lower.clone(),
        diagonal=diagonal.clone(),
        upper=upper.clone(),
        batch_size=[],
    )


def tridiagonal_solve(
    system: TridiagonalSystem,
    b: Union[Tensor, Sequence[float]],
) -> Tensor:
    """
    Solve ``A x = b`` for a tridiagonal system.

    Parameters
    ----------
    system : TridiagonalSystem
        Coefficients of A, shape (n, n).
    b : Tensor or sequence of float
        Right-hand side, shape (*batch, n).

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n).

    Raises
    ------
    ShapeError
        If the trailing dimension of ``b`` is not n.
    """
    diagonal = system.diagonal
    b = as_interpolation_tensor(
        b, dtype=diagonal.dtype, device=diagonal.device, name="b"
    )
    check_right_hand_side(b, diagonal.shape[0])
    return thomas_solve(system.lower, diagonal, system.upper, b, stacklevel=3)


def tridiagonal_matmul(
    system: TridiagonalSystem,
    x: Union[Tensor, Sequence[float]],
) -> Tensor:
    """
    Compute ``A @ x`` for a tridiagonal system.

    Parameters
    ----------
    system : TridiagonalSystem
        Coefficients of A, shape (n, n).
    x : Tensor or sequence of float
        Vector(s), shape (*batch, n).

    Returns
    -------
    Tensor
        Product, shape (*batch, n).
    """
    diagonal = system.diagonal
    n = diagonal.shape[0]
    x = as_interpolation_tensor(
        x, dtype=diagonal.dtype, device=diagonal.device, name="x"
    )
    if x.dim() == 0 or x.shape[-1] != n:
        raise ShapeError(
            f"x must have trailing dimension {n}, got shape {tuple(x.shape)}"
        )

    result = diagonal * x
    if n > 1:
        zero = torch.zeros_like(x[..., :1])
        result = result + torch.cat([system.upper * x[..., 1:], zero], dim=-1)
        result = result + torch.cat([zero, system.lower * x[..., :-1]], dim=-1)
    return result
