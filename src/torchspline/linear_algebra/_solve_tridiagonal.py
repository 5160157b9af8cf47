import warnings

import torch
from torch import Tensor

from ._shape_error import ShapeError


def check_tridiagonal_shapes(
    lower: Tensor,
    diagonal: Tensor,
    upper: Tensor,
) -> None:
    """Raise ShapeError unless ``len(lower) == len(upper) == len(diagonal) - 1``."""
    if lower.dim() != 1 or diagonal.dim() != 1 or upper.dim() != 1:
        raise ShapeError(
            "lower, diagonal and upper must be 1-dimensional, got shapes "
            f"{tuple(lower.shape)}, {tuple(diagonal.shape)}, {tuple(upper.shape)}"
        )
    n = diagonal.shape[0]
    if n == 0:
        raise ShapeError("diagonal must not be empty")
    if lower.shape[0] != upper.shape[0] or upper.shape[0] + 1 != n:
        raise ShapeError(
            f"lower and upper must have length {n - 1} for a diagonal of "
            f"length {n}, got {lower.shape[0]} and {upper.shape[0]}"
        )


def check_right_hand_side(b: Tensor, n: int) -> None:
    """Raise ShapeError unless ``b`` has trailing dimension ``n``."""
    if b.dim() == 0 or b.shape[-1] != n:
        raise ShapeError(
            f"b must have trailing dimension {n}, got shape {tuple(b.shape)}"
        )


def _warn_if_not_diagonally_dominant(
    lower: Tensor,
    diagonal: Tensor,
    upper: Tensor,
    stacklevel: int,
) -> None:
    zero = torch.zeros(1, dtype=diagonal.dtype, device=diagonal.device)
    off_diagonal = torch.cat([zero, lower.detach().abs()]) + torch.cat(
        [upper.detach().abs(), zero]
    )
    if torch.any(diagonal.detach().abs() < off_diagonal):
        warnings.warn(
            "Tridiagonal matrix is not diagonally dominant; the Thomas "
            "algorithm does not pivot and the solution may be inaccurate.",
            RuntimeWarning,
            stacklevel=stacklevel,
        )


def solve_tridiagonal(
    lower: Tensor,
    diagonal: Tensor,
    upper: Tensor,
    b: Tensor,
) -> Tensor:
    """
    Solve a tridiagonal system Ax = b using the Thomas algorithm.

    The matrix A has the form:
        [d0  u0   0   0  ...  0   0 ]
        [l0  d1  u1   0  ...  0   0 ]
        [ 0  l1  d2  u2  ...  0   0 ]
        [        ...                ]
        [ 0   0   0   0  ... ln-2 dn-1]

    Parameters
    ----------
    lower : Tensor
        Lower diagonal, shape (n-1,)
    diagonal : Tensor
        Main diagonal, shape (n,)
    upper : Tensor
        Upper diagonal, shape (n-1,)
    b : Tensor
        Right-hand side, shape (*batch, n)

    Returns
    -------
    Tensor
        Solution x, shape (*batch, n)

    Raises
    ------
    ShapeError
        If the diagonals or ``b`` have inconsistent lengths.

    Notes
    -----
    No pivoting is performed. The caller is responsible for a matrix that is
    diagonally dominant or otherwise safe to eliminate in order; a
    RuntimeWarning is emitted when weak diagonal dominance does not hold.

    The sweep is written without in-place updates so autograd can
    differentiate through it.
    """
    check_tridiagonal_shapes(lower, diagonal, upper)
    check_right_hand_side(b, diagonal.shape[0])

    return thomas_solve(lower, diagonal, upper, b, stacklevel=3)


def thomas_solve(
    lower: Tensor,
    diagonal: Tensor,
    upper: Tensor,
    b: Tensor,
    stacklevel: int,
) -> Tensor:
    """Thomas sweeps for validated inputs.

    ``stacklevel`` counts frames as for :func:`warnings.warn` called here:
    entry points that call this directly pass 3 so the dominance warning
    points at their caller.
    """
    n = diagonal.shape[0]
    _warn_if_not_diagonally_dominant(
        lower, diagonal, upper, stacklevel=stacklevel + 1
    )

    # b: (*batch, n) -> (n, *batch)
    b_t = b.movedim(-1, 0)

    c_prime = [upper[0] / diagonal[0]] if n > 1 else []
    x = [b_t[0] / diagonal[0]]

    # Forward elimination
    for i in range(1, n):
        denominator = diagonal[i] - lower[i - 1] * c_prime[i - 1]
        if i < n - 1:
            c_prime.append(upper[i] / denominator)
        x.append((b_t[i] - lower[i - 1] * x[i - 1]) / denominator)

    # Back substitution
    for i in range(n - 2, -1, -1):
        x[i] = x[i] - c_prime[i] * x[i + 1]

    return torch.stack(x, dim=0).movedim(0, -1)
