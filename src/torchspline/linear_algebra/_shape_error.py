class ShapeError(ValueError):
    """Raised when tridiagonal system or right-hand side shapes disagree."""

    pass
