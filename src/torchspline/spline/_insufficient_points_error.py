from ._spline_error import SplineError


class InsufficientPointsError(SplineError, ValueError):
    """Raised when fewer points are supplied than the spline type requires.

    Attributes
    ----------
    count : int
        Number of points that were supplied.
    """

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"length of inputs: {count} is not enough points for construction"
        )
