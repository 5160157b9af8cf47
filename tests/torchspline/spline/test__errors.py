"""Tests for the spline exception hierarchy."""

import pytest
import torch


class TestSplineErrors:
    @pytest.mark.parametrize(
        "name",
        [
            "PointOrderError",
            "InsufficientPointsError",
            "ExtrapolationError",
            "OutOfLowerBoundError",
            "OutOfUpperBoundError",
        ],
    )
    def test_subclass_of_spline_error(self, name):
        import torchspline.spline

        assert issubclass(
            getattr(torchspline.spline, name), torchspline.spline.SplineError
        )

    def test_construction_errors_are_value_errors(self):
        from torchspline.spline import InsufficientPointsError, PointOrderError

        assert issubclass(PointOrderError, ValueError)
        assert issubclass(InsufficientPointsError, ValueError)

    def test_point_order_message(self):
        from torchspline.spline import PointOrderError

        assert str(PointOrderError()) == "points must be sorted"

    def test_insufficient_points_count(self):
        from torchspline.spline import InsufficientPointsError

        error = InsufficientPointsError(1)

        assert error.count == 1
        assert str(error) == (
            "length of inputs: 1 is not enough points for construction"
        )

    def test_bound_errors_carry_value(self):
        from torchspline.spline import (
            ExtrapolationError,
            OutOfLowerBoundError,
            OutOfUpperBoundError,
        )

        lower = OutOfLowerBoundError(-1.5)
        upper = OutOfUpperBoundError(torch.tensor([3.0, 4.0]))

        assert isinstance(lower, ExtrapolationError)
        assert lower.x == -1.5
        assert str(lower) == "out of lower bound: -1.5"
        assert str(upper).startswith("out of upper bound: ")
        assert upper.x.tolist() == [3.0, 4.0]
