"""Numeric value abstraction shared by the spline and solver kernels.

Every algorithm in torchspline needs ordered field arithmetic, equality and
small integer constants (2, 3, 6, ...) in the representation chosen by the
caller. Here that representation is a floating-point torch dtype; the
constants are materialised in the same dtype and device as the data so no
implicit promotion happens inside the kernels.
"""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

INTERPOLATION_DTYPES = (
    torch.float16,
    torch.bfloat16,
    torch.float32,
    torch.float64,
)

LOW_PRECISION_DTYPES = (torch.float16, torch.bfloat16)

InterpolationValue = Union[float, int, Tensor]


def is_interpolation_dtype(dtype: torch.dtype) -> bool:
    """Return True if ``dtype`` satisfies the interpolation value contract."""
    return dtype in INTERPOLATION_DTYPES


def as_interpolation_tensor(
    value: Union[InterpolationValue, Sequence[float]],
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
    name: str = "value",
) -> Tensor:
    """
    Convert ``value`` to a tensor with an interpolation dtype.

    Parameters
    ----------
    value : float, int, sequence or Tensor
        Data to convert.
    dtype : torch.dtype, optional
        Target dtype. Defaults to the dtype of ``value`` when it is already a
        floating tensor, otherwise to ``torch.get_default_dtype()``.
    device : str or torch.device, optional
        Target device.
    name : str
        Argument name used in error messages.

    Returns
    -------
    Tensor
        Tensor holding ``value``.

    Raises
    ------
    TypeError
        If ``dtype`` (or the dtype of a tensor ``value``) is complex, or if
        ``dtype`` is not a floating-point dtype.
    """
    if dtype is not None and not is_interpolation_dtype(dtype):
        raise TypeError(
            f"{name} must use a floating-point dtype, got {dtype}"
        )

    if isinstance(value, Tensor):
        if value.is_complex():
            raise TypeError(
                f"{name} must be real-valued, got dtype {value.dtype}"
            )
        if dtype is None:
            if is_interpolation_dtype(value.dtype):
                dtype = value.dtype
            else:
                dtype = torch.get_default_dtype()
        return value.to(dtype=dtype, device=device)

    if dtype is None:
        dtype = torch.get_default_dtype()

    return torch.as_tensor(value, dtype=dtype, device=device)


def constant(value: int, like: Tensor) -> Tensor:
    """Small integer ``value`` as a 0-d tensor with ``like``'s dtype and device."""
    return torch.tensor(value, dtype=like.dtype, device=like.device)
