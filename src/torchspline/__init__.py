"""torchspline: piecewise-cubic interpolation for PyTorch tensors."""

from . import (
    linear_algebra,
    spline,
)
from ._interpolation_value import (
    INTERPOLATION_DTYPES,
    as_interpolation_tensor,
    constant,
    is_interpolation_dtype,
)

__all__ = [
    "INTERPOLATION_DTYPES",
    "as_interpolation_tensor",
    "constant",
    "is_interpolation_dtype",
    "linear_algebra",
    "spline",
]

__version__ = "0.1.0"
