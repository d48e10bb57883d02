"""Argument validation and guarded function evaluation.

Every search validates its arguments through these helpers before the first
iteration so that bad input fails fast with :class:`InvalidInputError`.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Callable

import numpy as np

from .core import Array
from .errors import InvalidInputError


def check_finite(name: str, value: Any) -> float:
    """Return ``value`` as a float, rejecting NaN and infinities."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a real number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite, got {value}")
    return value


def check_tolerance(name: str, value: Any) -> float:
    value = check_finite(name, value)
    if value < 0.0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")
    return value


def check_max_iter(max_iter: Any, name: str = "max_iter") -> int:
    """Return the iteration cap as an int, rejecting values below one."""
    if isinstance(max_iter, bool):
        raise InvalidInputError(f"{name} must be an integer, got {max_iter!r}")
    try:
        value = operator.index(max_iter)
    except TypeError:
        raise InvalidInputError(f"{name} must be an integer, got {max_iter!r}") from None
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value}")
    return value


def check_point(name: str, x: Any) -> Array:
    """Return a finite, non-empty 1-D float array copy of ``x``."""
    try:
        arr = np.array(x, dtype=float)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a sequence of real numbers") from None
    if arr.ndim != 1 or arr.size == 0:
        raise InvalidInputError(
            f"{name} must be a non-empty 1-D sequence, got shape {arr.shape}"
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} must contain only finite values")
    return arr


def evaluate(fun: Callable[[Any], Any], x: Any) -> float:
    """Evaluate ``fun`` at ``x`` as a float; NaN is reported as +inf."""
    value = float(fun(x))
    if math.isnan(value):
        return math.inf
    return value


def evaluate_with_derivative(
    fun: Callable[[float], Any], x: float
) -> tuple[float, float]:
    """Evaluate a ``(value, derivative)`` function at ``x``.

    Raises:
        InvalidInputError: If the derivative is not finite.
    """
    value, deriv = fun(x)
    value = float(value)
    deriv = float(deriv)
    if math.isnan(value):
        value = math.inf
    if not math.isfinite(deriv):
        raise InvalidInputError(f"derivative is not finite at x={x!r}: {deriv}")
    return value, deriv


__all__ = [
    "check_finite",
    "check_tolerance",
    "check_max_iter",
    "check_point",
    "evaluate",
    "evaluate_with_derivative",
]
