"""Brent's derivative-free method for a bracketed one-dimensional minimum.

References:
    - R. P. Brent, *Algorithms for Minimization without Derivatives* (1973)
    - Press et al., *Numerical Recipes* (3rd ed., 2007), section 10.3
"""

from __future__ import annotations

import math

from .bracket import resolve_bracket
from .core import (
    CGOLD,
    DEFAULT_MAX_ITER,
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


def brent_search(
    fun: ScalarFunction,
    bracket: BracketLike,
    tol: float = SQRT_EPS,
    max_iter: int = DEFAULT_MAX_ITER,
    history: bool = False,
) -> SearchResult:
    """Minimize ``fun`` inside a bracket with Brent's method.

    The search keeps the best point ``x``, the second best ``w`` and the
    previous value of ``w`` in ``v``. A parabola through the three is tried
    first; its vertex is used only if it falls inside the current interval
    and the step is shorter than half of the step before last. Otherwise a
    golden-section step into the larger segment is taken.

    The absolute tolerance at ``x`` is ``tol * |x| + ZEPS`` where ``tol`` is
    clamped below by ``sqrt(eps)`` of float64 and ``ZEPS = eps * 1e-3``.

    Args:
        fun: Scalar function to minimize.
        bracket: A :class:`~dfmin.core.Bracket`, an ``(a, b, c)`` triple or a
            ``(lo, hi)`` pair to be expanded into a bracket first.
        tol: Relative tolerance on the abscissa.
        max_iter: Iteration cap. Reaching it is not an error; the result has
            ``nit == max_iter`` and ``success=False``.
        history: Record the best point after every iteration.

    Returns:
        :class:`~dfmin.core.SearchResult` with a float ``x``.
    """
    tol = max(check_tolerance("tol", tol), SQRT_EPS)
    max_iter = check_max_iter(max_iter)
    br = resolve_bracket(fun, bracket)
    nfev = br.nfev

    a, b = br.lo, br.hi
    x = w = v = br.b
    fx = fw = fv = br.fb
    # d is the last step, e the one before it.
    d = 0.0
    e = 0.0

    hist: list[float] = []
    nit = 0
    success = False
    while True:
        xm = 0.5 * (a + b)
        tol1 = tol * abs(x) + ZEPS
        tol2 = 2.0 * tol1
        if abs(x - xm) <= tol2 - 0.5 * (b - a):
            success = True
            break
        if nit >= max_iter:
            break

        take_golden = True
        if abs(e) > tol1:
            r = (x - w) * (fx - fv)
            q = (x - v) * (fx - fw)
            p = (x - v) * q - (x - w) * r
            q = 2.0 * (q - r)
            if q > 0.0:
                p = -p
            q = abs(q)
            etemp = e
            e = d
            if abs(p) < abs(0.5 * q * etemp) and q * (a - x) < p < q * (b - x):
                d = p / q
                u = x + d
                # Do not evaluate too close to the ends.
                if u - a < tol2 or b - u < tol2:
                    d = math.copysign(tol1, xm - x)
                take_golden = False
        if take_golden:
            e = a - x if x >= xm else b - x
            d = CGOLD * e

        u = x + d if abs(d) >= tol1 else x + math.copysign(tol1, d)
        fu = evaluate(fun, u)
        nfev += 1

        if fu <= fx:
            if u >= x:
                a = x
            else:
                b = x
            v, w, x = w, x, u
            fv, fw, fx = fw, fx, fu
        else:
            if u < x:
                a = u
            else:
                b = u
            if fu <= fw or w == x:
                v, w = w, u
                fv, fw = fw, fu
            elif fu <= fv or v == x or v == w:
                v, fv = u, fu

        nit += 1
        if history:
            hist.append(x)
        trace(
            logger,
            "brent iter %d: x=%r fx=%r interval=[%r, %r] %s",
            nit,
            x,
            fx,
            a,
            b,
            "golden" if take_golden else "parabolic",
        )

    if success:
        message = "Tolerance satisfied."
        logger.debug("brent_search converged in %d iterations", nit)
    else:
        message = "Maximum iterations reached."
        logger.info("brent_search stopped at iteration cap %d", max_iter)

    return SearchResult(
        x=x,
        fun=fx,
        nit=nit,
        nfev=nfev,
        success=success,
        message=message,
        history=tuple(hist),
    )


__all__ = ["brent_search"]
