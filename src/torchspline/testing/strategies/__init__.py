"""Hypothesis strategies for spline testing."""

from ._interpolation_dtypes import interpolation_devices, interpolation_dtypes
from ._sample_values import knot_spacings, sample_values
from ._sorted_knots import sorted_knots
from ._spline_samples import spline_samples

__all__ = [
    # Value strategies
    "knot_spacings",
    "sample_values",
    # Knot strategies
    "sorted_knots",
    "spline_samples",
    # Dtype and device strategies
    "interpolation_devices",
    "interpolation_dtypes",
]
