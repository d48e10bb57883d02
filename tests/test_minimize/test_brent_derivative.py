import math

import pytest

from dfmin import brent_derivative_search, brent_search, find_bracket, golden_section_search
from dfmin.errors import InvalidInputError


def cosine(x: float) -> tuple[float, float]:
    return math.cos(x), -math.sin(x)


def poly2(x: float) -> tuple[float, float]:
    return (x - 1.0) * (x - 2.0), 2.0 * x - 3.0


def test_brent_derivative_cosine_beats_golden_and_matches_brent():
    br = find_bracket(math.cos, 0.01, 0.99)
    res = brent_derivative_search(cosine, br)
    golden = golden_section_search(math.cos, br)
    brent = brent_search(math.cos, br)

    assert res.success
    assert res.x == pytest.approx(math.pi, rel=1e-8)
    assert res.fun == pytest.approx(-1.0)
    assert res.nit < golden.nit
    assert res.x == pytest.approx(brent.x, abs=1e-6)


@pytest.mark.parametrize(
    "lo,hi",
    [
        (10.0, 20.0),
        (20.0, 10.0),
        (-10.0, 0.0),
        (-2000.0, -1000.0),
        (-10_000.0, 30_000.0),
        (0.0001, 0.0002),
        (-0.00001, 1.4999),
    ],
)
def test_brent_derivative_poly2(lo, hi):
    res = brent_derivative_search(poly2, (lo, hi))
    assert res.success
    assert res.x == pytest.approx(1.5, abs=1e-6)
    assert res.fun == poly2(res.x)[0]


def test_brent_derivative_explicit_triple():
    res = brent_derivative_search(poly2, (0.0, 1.0, 3.0))
    assert res.x == pytest.approx(1.5, abs=1e-6)


def test_brent_derivative_iteration_cap_is_soft():
    res = brent_derivative_search(cosine, (0.01, 1.0), max_iter=1)
    assert not res.success
    assert res.nit == 1
    assert res.message == "Maximum iterations reached."


def test_brent_derivative_history():
    res = brent_derivative_search(cosine, (0.01, 1.0), history=True)
    assert 0 < len(res.history) <= res.nit
    assert res.history[-1] == res.x


def test_brent_derivative_non_finite_derivative_raises():
    def fun(x: float) -> tuple[float, float]:
        return x * x, math.nan

    with pytest.raises(InvalidInputError):
        brent_derivative_search(fun, (-1.0, 0.5, 2.0))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"bracket": (1.0, 1.0, 1.0)},
        {"bracket": (0.0, 1.0, 3.0), "max_iter": 0},
        {"bracket": (0.0, 1.0, 3.0), "tol": -1.0},
    ],
)
def test_brent_derivative_invalid_input(kwargs):
    with pytest.raises(InvalidInputError):
        brent_derivative_search(poly2, **kwargs)
