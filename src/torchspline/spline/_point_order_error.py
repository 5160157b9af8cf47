from ._spline_error import SplineError


class PointOrderError(SplineError, ValueError):
    """Raised when sample points are not sorted by their x-coordinate."""

    def __init__(self, message: str = "points must be sorted"):
        super().__init__(message)
