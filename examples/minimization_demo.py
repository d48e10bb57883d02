"""
Example: one- and N-dimensional minimization with dfmin

Brackets the minimum of cos(x) near pi, compares the iteration counts of
golden-section search and both Brent variants on the same bracket, then
runs the downhill simplex on a shifted paraboloid from a distant start.
"""

import math

import numpy as np

from dfmin import (
    SearchConfig,
    brent_derivative_search,
    brent_search,
    find_bracket,
    golden_section_search,
    minimize_scalar,
    nelder_mead,
)


def example_one_dimensional():
    """Example: three 1-D searches on the same bracket."""
    print("=" * 60)
    print("Example 1: Minimum of cos(x) near pi")
    print("=" * 60)

    bracket = find_bracket(math.cos, 0.01, 0.99)
    print(f"Bracket: ({bracket.a:.4f}, {bracket.b:.4f}, {bracket.c:.4f})")

    golden = golden_section_search(math.cos, bracket)
    brent = brent_search(math.cos, bracket)
    brent_df = brent_derivative_search(lambda x: (math.cos(x), -math.sin(x)), bracket)

    for name, res in (("golden", golden), ("brent", brent), ("brent-df", brent_df)):
        print(f"{name:>9}: x = {res.x:.10f}  f(x) = {res.fun:.6f}  iterations = {res.nit}")
    print()


def example_configured_search():
    """Example: selecting the search through a configuration object."""
    print("=" * 60)
    print("Example 2: Configured search on (x - 1)(x - 2)")
    print("=" * 60)

    config = SearchConfig(method="golden", tol=1e-6)
    res = minimize_scalar(lambda x: (x - 1.0) * (x - 2.0), (10.0, 20.0), config)
    print(f"Method: {config.method}")
    print(f"Minimum: x = {res.x:.6f}, f(x) = {res.fun:.6f} ({res.message})")
    print()


def example_simplex():
    """Example: Nelder-Mead on a paraboloid far from its minimum."""
    print("=" * 60)
    print("Example 3: Downhill simplex on 10(x-1)^2 + 20(y-2)^2 + 30")
    print("=" * 60)

    def paraboloid(p: np.ndarray) -> float:
        return 10.0 * (p[0] - 1.0) ** 2 + 20.0 * (p[1] - 2.0) ** 2 + 30.0

    res = nelder_mead(paraboloid, [100.0, -100.0], scale=1.1, tol=1e-9)
    print(f"Nelder-Mead minimum: x = {np.round(res.x, 6)}, f(x) = {res.fun:.6f}")
    print(f"Iterations: {res.nit}, function evaluations: {res.nfev}")
    print()


if __name__ == "__main__":
    example_one_dimensional()
    example_configured_search()
    example_simplex()
