from ._spline_error import SplineError


class ExtrapolationError(SplineError):
    """Raised when a query point lies outside the sampled range.

    Attributes
    ----------
    x : float or Tensor
        The offending query value, or a 1-D tensor of them when several
        query points are out of range.
    """

    bound = "range"

    def __init__(self, x):
        self.x = x
        super().__init__(f"out of {self.bound}: {x}")


class OutOfLowerBoundError(ExtrapolationError):
    """Raised when a query point is below the first knot."""

    bound = "lower bound"


class OutOfUpperBoundError(ExtrapolationError):
    """Raised when a query point is above the last knot."""

    bound = "upper bound"
