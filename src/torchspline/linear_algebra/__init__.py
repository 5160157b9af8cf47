"""Linear algebra kernels used by the spline constructors.

Tridiagonal Systems
-------------------
TridiagonalSystem
    Coefficients of a tridiagonal matrix.
tridiagonal_system
    Validate diagonals and build a TridiagonalSystem.
tridiagonal_solve
    Solve a TridiagonalSystem for one or more right-hand sides.
tridiagonal_matmul
    Multiply a TridiagonalSystem with one or more vectors.
solve_tridiagonal
    Stateless Thomas algorithm kernel.

Exceptions
----------
ShapeError
    Inconsistent diagonal or right-hand side lengths.
"""

from ._shape_error import ShapeError
from ._solve_tridiagonal import solve_tridiagonal
from ._tridiagonal_system import (
    TridiagonalSystem,
    tridiagonal_matmul,
    tridiagonal_solve,
    tridiagonal_system,
)

__all__ = [
    "ShapeError",
    "TridiagonalSystem",
    "solve_tridiagonal",
    "tridiagonal_matmul",
    "tridiagonal_solve",
    "tridiagonal_system",
]
