"""Tests for tridiagonal systems and the Thomas algorithm."""

import warnings

import pytest
import torch


class TestTridiagonalSystem:
    def test_returns_tridiagonal_system(self):
        """Test that tridiagonal_system returns a TridiagonalSystem tensorclass."""
        from torchspline.linear_algebra import (
            TridiagonalSystem,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [1.0, 1.0], [4.0, 4.0, 4.0], [1.0, 1.0], dtype=torch.float64
        )

        assert isinstance(system, TridiagonalSystem)
        assert system.diagonal.shape == (3,)
        assert system.lower.shape == (2,)
        assert system.upper.shape == (2,)
        assert system.diagonal.dtype == torch.float64

    def test_owns_copies_of_diagonals(self):
        """Test that modifying the inputs does not change the system."""
        from torchspline.linear_algebra import tridiagonal_system

        diagonal = torch.tensor([4.0, 4.0, 4.0], dtype=torch.float64)
        lower = torch.tensor([1.0, 1.0], dtype=torch.float64)
        upper = torch.tensor([1.0, 1.0], dtype=torch.float64)

        system = tridiagonal_system(lower, diagonal, upper)
        diagonal[0] = 100.0

        assert system.diagonal[0].item() == 4.0

    def test_lower_upper_length_mismatch(self):
        """Test that lower and upper of different lengths raise ShapeError."""
        from torchspline.linear_algebra import ShapeError, tridiagonal_system

        with pytest.raises(ShapeError):
            tridiagonal_system([1.0], [4.0, 4.0, 4.0], [1.0, 1.0])

    def test_off_diagonal_length_mismatch(self):
        """Test that off-diagonals not of length n-1 raise ShapeError."""
        from torchspline.linear_algebra import ShapeError, tridiagonal_system

        with pytest.raises(ShapeError):
            tridiagonal_system([1.0, 1.0, 1.0], [4.0, 4.0, 4.0], [1.0, 1.0, 1.0])

    def test_shape_error_is_value_error(self):
        """Test that ShapeError can be caught as ValueError."""
        from torchspline.linear_algebra import ShapeError

        assert issubclass(ShapeError, ValueError)

    def test_rejects_integer_dtype(self):
        """Test that a non-floating dtype is rejected."""
        from torchspline.linear_algebra import tridiagonal_system

        with pytest.raises(TypeError):
            tridiagonal_system(
                [0, 0], [1, 1, 1], [0, 0], dtype=torch.int64
            )


class TestTridiagonalSolve:
    def test_identity(self):
        """Test that the identity system returns the right-hand side."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [0.0, 0.0], [1.0, 1.0, 1.0], [0.0, 0.0], dtype=torch.float64
        )
        b = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)

        x = tridiagonal_solve(system, b)

        torch.testing.assert_close(x, b, rtol=0, atol=0)

    def test_simple_3x3_system(self):
        """Test a symmetric 3x3 system with a known solution."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        # [2 1 0] [x0]   [1]
        # [1 2 1] [x1] = [2]
        # [0 1 2] [x2]   [1]
        system = tridiagonal_system(
            [1.0, 1.0], [2.0, 2.0, 2.0], [1.0, 1.0], dtype=torch.float64
        )
        b = torch.tensor([1.0, 2.0, 1.0], dtype=torch.float64)

        x = tridiagonal_solve(system, b)

        expected = torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64)
        torch.testing.assert_close(x, expected, rtol=1e-12, atol=1e-12)

    def test_asymmetric_system(self):
        """Test that lower and upper are not interchanged."""
        from torchspline.linear_algebra import (
            tridiagonal_matmul,
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [1.0, 2.0, 0.5],
            [5.0, 6.0, 7.0, 4.0],
            [3.0, 1.0, 2.0],
            dtype=torch.float64,
        )
        b = torch.tensor([1.0, -2.0, 3.0, 0.5], dtype=torch.float64)

        x = tridiagonal_solve(system, b)

        dense = torch.tensor(
            [
                [5.0, 3.0, 0.0, 0.0],
                [1.0, 6.0, 1.0, 0.0],
                [0.0, 2.0, 7.0, 2.0],
                [0.0, 0.0, 0.5, 4.0],
            ],
            dtype=torch.float64,
        )
        expected = torch.linalg.solve(dense, b)

        torch.testing.assert_close(x, expected, rtol=1e-12, atol=1e-12)
        torch.testing.assert_close(
            tridiagonal_matmul(system, x), b, rtol=1e-12, atol=1e-12
        )

    def test_single_equation(self):
        """Test a 1x1 system with empty off-diagonals."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system([], [4.0], [], dtype=torch.float64)

        x = tridiagonal_solve(system, [2.0])

        torch.testing.assert_close(
            x, torch.tensor([0.5], dtype=torch.float64)
        )

    def test_batched_rhs(self):
        """Test that a stacked right-hand side is solved row by row."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [1.0, 1.0], [2.0, 2.0, 2.0], [1.0, 1.0], dtype=torch.float64
        )
        b = torch.tensor(
            [[1.0, 2.0, 1.0], [2.0, 4.0, 2.0]], dtype=torch.float64
        )

        x = tridiagonal_solve(system, b)

        assert x.shape == (2, 3)
        torch.testing.assert_close(x[1], 2 * x[0], rtol=1e-12, atol=1e-12)

    def test_larger_system(self):
        """Test a 50x50 diagonally dominant system against a dense solve."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        n = 50
        generator = torch.Generator().manual_seed(0)
        diagonal = 4 * torch.ones(n, dtype=torch.float64)
        upper = torch.rand(n - 1, dtype=torch.float64, generator=generator)
        lower = torch.rand(n - 1, dtype=torch.float64, generator=generator)
        b = torch.randn(n, dtype=torch.float64, generator=generator)

        system = tridiagonal_system(lower, diagonal, upper)
        x = tridiagonal_solve(system, b)

        dense = (
            torch.diag(diagonal)
            + torch.diag(upper, diagonal=1)
            + torch.diag(lower, diagonal=-1)
        )
        expected = torch.linalg.solve(dense, b)

        torch.testing.assert_close(x, expected, rtol=1e-10, atol=1e-10)

    def test_rhs_length_mismatch(self):
        """Test that a right-hand side of the wrong length raises ShapeError."""
        from torchspline.linear_algebra import (
            ShapeError,
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system([0.0, 0.0], [1.0, 1.0, 1.0], [0.0, 0.0])

        with pytest.raises(ShapeError):
            tridiagonal_solve(system, [1.0, 2.0])

    def test_system_can_be_reused(self):
        """Test that one system solves several right-hand sides."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [1.0, 1.0], [4.0, 4.0, 4.0], [1.0, 1.0], dtype=torch.float64
        )

        first = tridiagonal_solve(system, [1.0, 0.0, 0.0])
        second = tridiagonal_solve(system, [0.0, 0.0, 1.0])

        # The matrix is persymmetric, so the solutions mirror each other.
        torch.testing.assert_close(first, second.flip(0))

    def test_warns_when_not_diagonally_dominant(self):
        """Test that a system without diagonal dominance emits a warning."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [2.0, 2.0], [1.0, 1.0, 1.0], [2.0, 2.0], dtype=torch.float64
        )

        with pytest.warns(RuntimeWarning, match="diagonally dominant"):
            tridiagonal_solve(system, [1.0, 2.0, 3.0])

    def test_warning_points_at_caller(self):
        """Test that the dominance warning is attributed to the calling code."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [2.0, 2.0], [1.0, 1.0, 1.0], [2.0, 2.0], dtype=torch.float64
        )

        with pytest.warns(RuntimeWarning, match="diagonally dominant") as record:
            tridiagonal_solve(system, [1.0, 2.0, 3.0])

        filenames = [
            w.filename for w in record if "diagonally dominant" in str(w.message)
        ]
        assert filenames == [__file__]

    def test_direct_solve_warning_points_at_caller(self):
        """Test the warning location when calling solve_tridiagonal directly."""
        from torchspline.linear_algebra import solve_tridiagonal

        lower = torch.tensor([2.0, 2.0], dtype=torch.float64)
        diagonal = torch.tensor([1.0, 1.0, 1.0], dtype=torch.float64)
        upper = torch.tensor([2.0, 2.0], dtype=torch.float64)
        b = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)

        with pytest.warns(RuntimeWarning, match="diagonally dominant") as record:
            solve_tridiagonal(lower, diagonal, upper, b)

        filenames = [
            w.filename for w in record if "diagonally dominant" in str(w.message)
        ]
        assert filenames == [__file__]

    def test_no_warning_when_diagonally_dominant(self):
        """Test that a diagonally dominant system solves silently."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [1.0, 1.0], [2.0, 2.0, 2.0], [1.0, 1.0], dtype=torch.float64
        )

        with warnings.catch_warnings():
            warnings.simplefilter("error", RuntimeWarning)
            tridiagonal_solve(system, [1.0, 2.0, 1.0])

    def test_float32(self):
        """Test that the solve preserves float32."""
        from torchspline.linear_algebra import (
            tridiagonal_solve,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [1.0, 1.0], [2.0, 2.0, 2.0], [1.0, 1.0], dtype=torch.float32
        )

        x = tridiagonal_solve(system, [1.0, 2.0, 1.0])

        assert x.dtype == torch.float32

    def test_gradcheck(self):
        """Test gradients with respect to all diagonals and the right-hand side."""
        from torchspline.linear_algebra import solve_tridiagonal

        diagonal = torch.tensor(
            [4.0, 3.0, 5.0, 4.0], dtype=torch.float64, requires_grad=True
        )
        upper = torch.tensor(
            [1.0, 0.5, 1.0], dtype=torch.float64, requires_grad=True
        )
        lower = torch.tensor(
            [0.5, 1.0, 1.5], dtype=torch.float64, requires_grad=True
        )
        b = torch.tensor(
            [1.0, 2.0, -1.0, 0.5], dtype=torch.float64, requires_grad=True
        )

        assert torch.autograd.gradcheck(
            solve_tridiagonal, (lower, diagonal, upper, b), eps=1e-6
        )


class TestTridiagonalMatmul:
    def test_matches_dense_product(self):
        """Test that tridiagonal_matmul matches the dense matrix product."""
        from torchspline.linear_algebra import (
            tridiagonal_matmul,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0], dtype=torch.float64
        )
        x = torch.tensor([1.0, -1.0, 2.0], dtype=torch.float64)

        dense = torch.tensor(
            [[3.0, 6.0, 0.0], [1.0, 4.0, 7.0], [0.0, 2.0, 5.0]],
            dtype=torch.float64,
        )

        torch.testing.assert_close(tridiagonal_matmul(system, x), dense @ x)

    def test_batched(self):
        """Test tridiagonal_matmul with a batch of vectors."""
        from torchspline.linear_algebra import (
            tridiagonal_matmul,
            tridiagonal_system,
        )

        system = tridiagonal_system(
            [1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0], dtype=torch.float64
        )
        x = torch.randn(4, 3, dtype=torch.float64)

        result = tridiagonal_matmul(system, x)

        assert result.shape == (4, 3)
        torch.testing.assert_close(result[2], tridiagonal_matmul(system, x[2]))

    def test_length_mismatch(self):
        """Test that a vector of the wrong length raises ShapeError."""
        from torchspline.linear_algebra import (
            ShapeError,
            tridiagonal_matmul,
            tridiagonal_system,
        )

        system = tridiagonal_system([1.0, 2.0], [3.0, 4.0, 5.0], [6.0, 7.0])

        with pytest.raises(ShapeError):
            tridiagonal_matmul(system, [1.0, 2.0, 3.0, 4.0])
