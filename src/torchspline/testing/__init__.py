"""Testing helpers for torchspline.

Example usage:

    import hypothesis
    from torchspline.testing import spline_samples

    @hypothesis.given(spline_samples())
    def test_interpolates_knots(samples):
        x, y = samples
        ...
"""

from .strategies import (
    interpolation_devices,
    interpolation_dtypes,
    knot_spacings,
    sample_values,
    sorted_knots,
    spline_samples,
)

__all__ = [
    # Strategies - values
    "knot_spacings",
    "sample_values",
    # Strategies - knots
    "sorted_knots",
    "spline_samples",
    # Strategies - dtype and device
    "interpolation_devices",
    "interpolation_dtypes",
]
