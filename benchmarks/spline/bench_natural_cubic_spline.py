"""Benchmark natural cubic spline fitting and evaluation.

The fit runs one Thomas sweep over the knots, so its cost should grow
linearly with the number of knots; evaluation is a binary search per query.
"""

import time

import torch

from torchspline.spline import (
    natural_cubic_spline_evaluate,
    natural_cubic_spline_fit,
)


def benchmark_natural_cubic_spline(
    n_knots: int,
    n_queries: int = 10_000,
    n_iterations: int = 20,
    device: str = "cpu",
):
    """Benchmark fit and evaluation at the given number of knots.

    Parameters
    ----------
    n_knots : int
        Number of sample points.
    n_queries : int
        Number of query points per evaluation.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').

    Returns
    -------
    tuple of float
        Average fit and evaluation times in milliseconds.
    """
    x = torch.linspace(0, 1, n_knots, device=device, dtype=torch.float64)
    y = torch.randn(n_knots, device=device, dtype=torch.float64)
    t = torch.rand(n_queries, device=device, dtype=torch.float64)

    for _ in range(3):
        spline = natural_cubic_spline_fit(x, y)
        _ = natural_cubic_spline_evaluate(spline, t)

    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        spline = natural_cubic_spline_fit(x, y)
    if device == "cuda":
        torch.cuda.synchronize()
    fit_ms = (time.perf_counter() - start) / n_iterations * 1000

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = natural_cubic_spline_evaluate(spline, t)
    if device == "cuda":
        torch.cuda.synchronize()
    evaluate_ms = (time.perf_counter() - start) / n_iterations * 1000

    return fit_ms, evaluate_ms


def main():
    """Run natural cubic spline benchmarks across knot counts."""
    sizes = [8, 32, 128, 512, 2048]

    print("Natural Cubic Spline Benchmark")
    print("=" * 50)
    print(f"{'Knots':>8} {'Fit (ms)':>14} {'Evaluate (ms)':>16}")
    print("-" * 50)

    for n_knots in sizes:
        fit_ms, evaluate_ms = benchmark_natural_cubic_spline(n_knots)
        print(f"{n_knots:>8} {fit_ms:>14.4f} {evaluate_ms:>16.4f}")

    print()
    print("Notes:")
    print("- Fit solves for the knot curvatures with the Thomas algorithm")
    print("- Evaluation uses 10,000 uniformly drawn queries")


if __name__ == "__main__":
    main()
