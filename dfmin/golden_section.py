"""Golden-section search for a bracketed one-dimensional minimum."""

from __future__ import annotations

from .bracket import resolve_bracket
from .core import (
    CGOLD,
    DEFAULT_MAX_ITER,
    RGOLD,
    SQRT_EPS,
    ZEPS,
    BracketLike,
    ScalarFunction,
    SearchResult,
)
from .debug_mode import trace
from .logging import get_logger
from .utils import check_max_iter, check_tolerance, evaluate

logger = get_logger(__name__)


def golden_section_search(
    fun: ScalarFunction,
    bracket: BracketLike,
    tol: float = SQRT_EPS,
    atol: float = ZEPS,
    max_iter: int = DEFAULT_MAX_ITER,
    history: bool = False,
) -> SearchResult:
    """Shrink a bracket around a minimum by golden-ratio subdivision.

    Two interior points split the interval so that after discarding the
    segment that cannot hold the minimum the survivor is split in the same
    ratio again, so each iteration costs one function evaluation and reduces
    the interval by a factor of about 0.618.

    Args:
        fun: Scalar function to minimize.
        bracket: A :class:`~dfmin.core.Bracket`, an ``(a, b, c)`` triple or a
            ``(lo, hi)`` pair to be expanded into a bracket first.
        tol: Relative tolerance on the interval width, clamped below by
            ``sqrt(eps)``.
        atol: Absolute tolerance added to the relative one.
        max_iter: Iteration cap.
        history: Record the best point after every iteration.

    Returns:
        :class:`~dfmin.core.SearchResult` with a float ``x``.
    """
    tol = max(check_tolerance("tol", tol), SQRT_EPS)
    atol = check_tolerance("atol", atol)
    max_iter = check_max_iter(max_iter)
    br = resolve_bracket(fun, bracket)
    nfev = br.nfev

    a, b, c = br.a, br.b, br.c
    x0, x3 = a, c
    # Put the new interior point in the larger of the two segments.
    if abs(c - b) > abs(b - a):
        x1, x2 = b, b + CGOLD * (c - b)
        f1, f2 = br.fb, evaluate(fun, x2)
    else:
        x1, x2 = b - CGOLD * (b - a), b
        f1, f2 = evaluate(fun, x1), br.fb
    nfev += 1

    hist: list[float] = []
    nit = 0
    success = False
    while True:
        if abs(x3 - x0) <= tol * (abs(x1) + abs(x2)) + atol:
            success = True
            break
        if nit >= max_iter:
            break
        if f2 < f1:
            x0, x1, x2 = x1, x2, RGOLD * x2 + CGOLD * x3
            f1, f2 = f2, evaluate(fun, x2)
        else:
            x3, x2, x1 = x2, x1, RGOLD * x1 + CGOLD * x0
            f2, f1 = f1, evaluate(fun, x1)
        nfev += 1
        nit += 1
        if history:
            hist.append(x1 if f1 < f2 else x2)
        trace(logger, "golden iter %d: [%r, %r] f1=%r f2=%r", nit, x0, x3, f1, f2)

    if f1 < f2:
        x, fx = x1, f1
    else:
        x, fx = x2, f2

    if success:
        message = "Tolerance satisfied."
        logger.debug("golden_section_search converged in %d iterations", nit)
    else:
        message = "Maximum iterations reached."
        logger.info("golden_section_search stopped at iteration cap %d", max_iter)

    return SearchResult(
        x=x,
        fun=fx,
        nit=nit,
        nfev=nfev,
        success=success,
        message=message,
        history=tuple(hist),
    )


__all__ = ["golden_section_search"]
