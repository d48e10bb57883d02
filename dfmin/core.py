"""Core interfaces shared across the minimization algorithms.

All internal constants derive from the machine epsilon of float64, the only
numeric type the searches operate on. Caller tolerances are clamped against
these constants but never replaced by them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Union

import numpy as np

Array = np.ndarray
ScalarFunction = Callable[[float], float]
DifferentiableFunction = Callable[[float], tuple[float, float]]
VectorFunction = Callable[[Array], float]

EPS = float(np.finfo(np.float64).eps)
# Smallest meaningful relative tolerance for a 1-D minimum: near x* the
# function changes by O(dx**2), so abscissas closer than sqrt(eps) are
# indistinguishable.
SQRT_EPS = math.sqrt(EPS)
# Absolute floor protecting the relative tolerance when the minimum sits at 0.
ZEPS = EPS * 1.0e-3

GOLD = 0.5 * (1.0 + math.sqrt(5.0))
RGOLD = GOLD - 1.0
CGOLD = 1.0 - RGOLD

GLIMIT = 100.0
TINY = 1.0e-20

DEFAULT_MAX_ITER = 500
DEFAULT_BRACKET_MAX_ITER = 50


@dataclass(frozen=True)
class Bracket:
    """Three abscissas enclosing a local minimum.

    ``b`` lies strictly between ``a`` and ``c`` and ``fb`` is no larger than
    ``fa`` or ``fc``. The triple may run in either direction.
    """

    a: float
    b: float
    c: float
    fa: float
    fb: float
    fc: float
    nit: int = 0
    nfev: int = 0

    @property
    def lo(self) -> float:
        return min(self.a, self.c)

    @property
    def hi(self) -> float:
        return max(self.a, self.c)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.a, self.b, self.c)


@dataclass(frozen=True)
class SearchResult:
    """Standard result object returned by every search in this package.

    Attributes:
        x: Location of the best point found. A float for the 1-D searches,
            a read-only 1-D array for the simplex method.
        fun: Objective value at ``x``.
        nit: Iterations used. A search that stops on the cap reports the cap,
            but one that converges on its last allowed step may too; use
            ``success`` to tell the two apart.
        nfev: Number of function evaluations.
        success: Whether the tolerance was met. False only when the iteration
            cap stopped the search.
        message: Human-readable description of the outcome.
        history: Best point after each iteration, only when requested.
    """

    x: Union[float, Array]
    fun: float
    nit: int
    nfev: int = 0
    success: bool = True
    message: str = ""
    history: tuple = ()


BracketLike = Union[Bracket, tuple[float, float], tuple[float, float, float]]


__all__ = [
    "Array",
    "ScalarFunction",
    "DifferentiableFunction",
    "VectorFunction",
    "Bracket",
    "BracketLike",
    "SearchResult",
    "EPS",
    "SQRT_EPS",
    "ZEPS",
    "GOLD",
    "RGOLD",
    "CGOLD",
    "GLIMIT",
    "TINY",
    "DEFAULT_MAX_ITER",
    "DEFAULT_BRACKET_MAX_ITER",
]
