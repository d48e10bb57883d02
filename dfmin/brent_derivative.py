"""Brent's method using first derivatives.

The derivative is used only to decide which side of ``x`` the minimum lies
on and to build secant estimates of its zero; function values still decide
which points are kept, so a poor derivative slows the search down but cannot
make it accept a worse point.

References:
    - Press et al., *Numerical Recipes* (3rd ed., 2007), section 10.4
"""

from __future__ import annotations

import math

from .bracket import resolve_bracket
from .core import (
    DEFAULT_MAX_ITER,
    SQRT_EPS,
    ZEPS,
    BracketLike,
    DifferentiableFunction,
    SearchResult,
)
from .debug_mode import trace
from .logging import get_logger
from .utils import check_max_iter, check_tolerance, evaluate_with_derivative

logger = get_logger(__name__)


def brent_derivative_search(
    fun: DifferentiableFunction,
    bracket: BracketLike,
    tol: float = SQRT_EPS,
    max_iter: int = DEFAULT_MAX_ITER,
    history: bool = False,
) -> SearchResult:
    """Minimize ``fun`` inside a bracket with Brent's method and derivatives.

    Secant steps toward a zero of the derivative are computed from ``(x, w)``
    and ``(x, v)``. A step is acceptable when it stays inside the interval
    and goes downhill according to the derivative at ``x``; the shorter
    acceptable one is used if it is less than half of the step before last.
    Otherwise the interval on the downhill side is bisected.

    Args:
        fun: Function returning ``(value, derivative)``.
        bracket: A :class:`~dfmin.core.Bracket`, an ``(a, b, c)`` triple or a
            ``(lo, hi)`` pair to be expanded into a bracket first.
        tol: Relative tolerance on the abscissa, clamped below by
            ``sqrt(eps)``.
        max_iter: Iteration cap. Reaching it is not an error; the result has
            ``nit == max_iter`` and ``success=False``.
        history: Record the best point after every iteration.

    Returns:
        :class:`~dfmin.core.SearchResult` with a float ``x``.

    Raises:
        InvalidInputError: For invalid arguments, or when ``fun`` returns a
            non-finite derivative.
    """
    tol = max(check_tolerance("tol", tol), SQRT_EPS)
    max_iter = check_max_iter(max_iter)
    br = resolve_bracket(lambda t: fun(t)[0], bracket)
    nfev = br.nfev

    a, b = br.lo, br.hi
    x = w = v = br.b
    fx, dx = evaluate_with_derivative(fun, x)
    nfev += 1
    fw = fv = fx
    dw = dv = dx
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

        bisect = True
        if abs(e) > tol1:
            # Out-of-bracket values unless a secant estimate exists.
            d1 = 2.0 * (b - a)
            d2 = d1
            if dw != dx:
                d1 = (w - x) * dx / (dx - dw)
            if dv != dx:
                d2 = (v - x) * dx / (dx - dv)
            u1 = x + d1
            u2 = x + d2
            ok1 = (a - u1) * (u1 - b) > 0.0 and dx * d1 <= 0.0
            ok2 = (a - u2) * (u2 - b) > 0.0 and dx * d2 <= 0.0
            olde = e
            e = d
            if ok1 or ok2:
                if ok1 and ok2:
                    step = d1 if abs(d1) < abs(d2) else d2
                elif ok1:
                    step = d1
                else:
                    step = d2
                if abs(step) <= abs(0.5 * olde):
                    d = step
                    u = x + d
                    if u - a < tol2 or b - u < tol2:
                        d = math.copysign(tol1, xm - x)
                    bisect = False
        if bisect:
            e = a - x if dx >= 0.0 else b - x
            d = 0.5 * e

        min_step = abs(d) < tol1
        u = x + math.copysign(tol1, d) if min_step else x + d
        fu, du = evaluate_with_derivative(fun, u)
        nfev += 1
        # The smallest allowed step downhill went uphill: x is the minimum.
        if min_step and fu > fx:
            nit += 1
            success = True
            break

        if fu <= fx:
            if u >= x:
                a = x
            else:
                b = x
            v, fv, dv = w, fw, dw
            w, fw, dw = x, fx, dx
            x, fx, dx = u, fu, du
        else:
            if u < x:
                a = u
            else:
                b = u
            if fu <= fw or w == x:
                v, fv, dv = w, fw, dw
                w, fw, dw = u, fu, du
            elif fu < fv or v == x or v == w:
                v, fv, dv = u, fu, du

        nit += 1
        if history:
            hist.append(x)
        trace(
            logger,
            "brent_derivative iter %d: x=%r fx=%r dx=%r interval=[%r, %r] %s",
            nit,
            x,
            fx,
            dx,
            a,
            b,
            "bisect" if bisect else "secant",
        )

    if success:
        message = "Tolerance satisfied."
        logger.debug("brent_derivative_search converged in %d iterations", nit)
    else:
        message = "Maximum iterations reached."
        logger.info("brent_derivative_search stopped at iteration cap %d", max_iter)

    return SearchResult(
        x=x,
        fun=fx,
        nit=nit,
        nfev=nfev,
        success=success,
        message=message,
        history=tuple(hist),
    )


__all__ = ["brent_derivative_search"]
