"""Identical inputs must give bit-identical outputs.

Every search is run twice on the same arguments and the results compared
with exact equality.
"""

import math

import numpy as np

from dfmin import (
    brent_derivative_search,
    brent_search,
    find_bracket,
    golden_section_search,
    nelder_mead,
)


def cosine(x: float) -> tuple[float, float]:
    return math.cos(x), -math.sin(x)


def test_find_bracket_is_deterministic() -> None:
    assert find_bracket(math.cos, 0.01, 0.99) == find_bracket(math.cos, 0.01, 0.99)


def test_one_dimensional_searches_are_deterministic() -> None:
    for search, fun in (
        (golden_section_search, math.cos),
        (brent_search, math.cos),
        (brent_derivative_search, cosine),
    ):
        first = search(fun, (0.01, 1.0), history=True)
        second = search(fun, (0.01, 1.0), history=True)
        assert first == second


def test_nelder_mead_is_deterministic(rng: np.random.Generator) -> None:
    x0 = rng.uniform(-5.0, 5.0, size=4)
    weights = np.arange(1.0, 5.0)

    def fun(p: np.ndarray) -> float:
        return float(weights @ (p - 1.0) ** 2) + 2.0

    first = nelder_mead(fun, x0, max_iter=300, history=True)
    second = nelder_mead(fun, x0.copy(), max_iter=300, history=True)

    assert np.array_equal(first.x, second.x)
    assert first.fun == second.fun
    assert (first.nit, first.nfev) == (second.nit, second.nfev)
    assert len(first.history) == len(second.history)
    assert all(np.array_equal(a, b) for a, b in zip(first.history, second.history))
