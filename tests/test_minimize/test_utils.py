import math

import numpy as np
import pytest

from dfmin.errors import InvalidInputError, OptimizationError
from dfmin.utils import (
    check_finite,
    check_max_iter,
    check_point,
    check_tolerance,
    evaluate,
    evaluate_with_derivative,
)


def test_check_finite_converts_to_float():
    assert check_finite("x", 3) == 3.0
    assert isinstance(check_finite("x", np.float32(1.5)), float)


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, "abc", None])
def test_check_finite_rejects(value):
    with pytest.raises(InvalidInputError):
        check_finite("x", value)


def test_check_tolerance_rejects_negative():
    assert check_tolerance("tol", 0.0) == 0.0
    with pytest.raises(InvalidInputError):
        check_tolerance("tol", -1e-12)


def test_check_max_iter():
    assert check_max_iter(10) == 10
    assert check_max_iter(np.int64(7)) == 7
    for bad in (0, -1, 2.5, True, "10"):
        with pytest.raises(InvalidInputError):
            check_max_iter(bad)


def test_check_point_returns_copy():
    original = np.array([1.0, 2.0])
    point = check_point("x0", original)
    point[0] = 99.0
    assert original[0] == 1.0
    assert check_point("x0", (1, 2)).dtype == float


def test_evaluate_maps_nan_to_inf():
    assert evaluate(lambda x: math.nan, 0.0) == math.inf
    assert evaluate(lambda x: np.float64(2.0), 0.0) == 2.0
    assert evaluate(lambda x: -math.inf, 0.0) == -math.inf


def test_evaluate_with_derivative():
    assert evaluate_with_derivative(lambda x: (x * x, 2 * x), 3.0) == (9.0, 6.0)
    assert evaluate_with_derivative(lambda x: (math.nan, 1.0), 3.0)[0] == math.inf
    with pytest.raises(InvalidInputError):
        evaluate_with_derivative(lambda x: (1.0, math.inf), 3.0)


def test_error_hierarchy():
    assert issubclass(InvalidInputError, OptimizationError)
    assert issubclass(InvalidInputError, ValueError)
