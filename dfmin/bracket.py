"""Bracketing of a one-dimensional minimum.

Given two starting abscissas the search walks downhill, magnifying each step
by the golden ratio or by a parabolic extrapolation, until the middle of the
last three points is no higher than both outer ones.

References:
    - Press et al., *Numerical Recipes* (3rd ed., 2007), section 10.1
"""

from __future__ import annotations

import math

from .core import (
    DEFAULT_BRACKET_MAX_ITER,
    GLIMIT,
    GOLD,
    TINY,
    Bracket,
    BracketLike,
    ScalarFunction,
)
from .debug_mode import is_debug_enabled, trace
from .errors import InvalidInputError, NoBracketFoundError
from .logging import get_logger
from .utils import check_finite, check_max_iter, evaluate

logger = get_logger(__name__)


def find_bracket(
    fun: ScalarFunction,
    x0: float,
    step: float = 1.0,
    grow: float = GOLD,
    max_iter: int = DEFAULT_BRACKET_MAX_ITER,
) -> Bracket:
    """Bracket a minimum of ``fun`` starting from ``x0`` and ``x0 + step``.

    The search direction is chosen downhill from the two starting points,
    so the sign of ``step`` only picks the second point.

    Args:
        fun: Scalar function to bracket.
        x0: First starting abscissa.
        step: Offset of the second starting abscissa. Must be non-zero.
        grow: Default magnification of successive steps.
        max_iter: Maximum number of expansion steps.

    Returns:
        A :class:`Bracket` whose middle value is no larger than either end.

    Raises:
        InvalidInputError: For non-finite or degenerate starting points, or
            a non-finite value at either of them.
        NoBracketFoundError: When ``max_iter`` expansions were not enough or
            the function kept falling toward infinity.
    """
    x0 = check_finite("x0", x0)
    step = check_finite("step", step)
    grow = check_finite("grow", grow)
    max_iter = check_max_iter(max_iter)
    if grow <= 0.0:
        raise InvalidInputError(f"grow must be positive, got {grow}")

    a = x0
    b = x0 + step
    if a == b:
        raise InvalidInputError(f"step {step} does not move away from x0={x0}")
    fa = evaluate(fun, a)
    fb = evaluate(fun, b)
    nfev = 2
    if not (math.isfinite(fa) and math.isfinite(fb)):
        raise InvalidInputError(
            f"function is not finite at the starting points: f({a})={fa}, f({b})={fb}"
        )

    # Walk downhill from a to b.
    if fb > fa:
        a, b = b, a
        fa, fb = fb, fa

    c = b + grow * (b - a)
    fc = evaluate(fun, c)
    nfev += 1
    nit = 0

    while fb > fc:
        if not (math.isfinite(c) and math.isfinite(fc)):
            raise NoBracketFoundError(
                f"function appears unbounded below: f({c})={fc}", a, b, c, nit
            )
        if nit >= max_iter:
            raise NoBracketFoundError(
                f"no bracket found after {nit} expansion steps", a, b, c, nit
            )
        trace(logger, "bracket step %d: a=%r b=%r c=%r fb=%r fc=%r", nit, a, b, c, fb, fc)

        # Parabolic extrapolation through a, b, c.
        r = (b - a) * (fb - fc)
        q = (b - c) * (fb - fa)
        denom = 2.0 * math.copysign(max(abs(q - r), TINY), q - r)
        u = b - ((b - c) * q - (b - a) * r) / denom
        ulim = b + GLIMIT * (c - b)

        if (b - u) * (u - c) > 0.0:
            fu = evaluate(fun, u)
            nfev += 1
            if fu < fc:
                a, b = b, u
                fa, fb = fb, fu
                nit += 1
                break
            if fu > fb:
                c, fc = u, fu
                nit += 1
                break
            u = c + grow * (c - b)
            fu = evaluate(fun, u)
            nfev += 1
        elif (c - u) * (u - ulim) > 0.0:
            fu = evaluate(fun, u)
            nfev += 1
            if fu < fc:
                b, c, u = c, u, u + grow * (u - c)
                fb, fc, fu = fc, fu, evaluate(fun, u)
                nfev += 1
        elif (u - ulim) * (ulim - c) >= 0.0:
            u = ulim
            fu = evaluate(fun, u)
            nfev += 1
        else:
            u = c + grow * (c - b)
            fu = evaluate(fun, u)
            nfev += 1

        a, b, c = b, c, u
        fa, fb, fc = fb, fc, fu
        nit += 1

    if not math.isfinite(fb):
        raise NoBracketFoundError(
            f"function appears unbounded below: f({b})={fb}", a, b, c, nit
        )

    logger.debug("bracket found after %d steps: (%r, %r, %r)", nit, a, b, c)
    return Bracket(a=a, b=b, c=c, fa=fa, fb=fb, fc=fc, nit=nit, nfev=nfev)


def resolve_bracket(
    fun: ScalarFunction,
    bracket: BracketLike,
    max_iter: int = DEFAULT_BRACKET_MAX_ITER,
) -> Bracket:
    """Turn what the 1-D searches accept into a :class:`Bracket`.

    ``bracket`` may be a :class:`Bracket`, an ``(a, b, c)`` triple with ``b``
    strictly between ``a`` and ``c``, or a ``(lo, hi)`` pair that is expanded
    with :func:`find_bracket`. For a triple only ``f(b)`` is evaluated and
    ``fa``/``fc`` are NaN, unless debug mode is on, in which case all three
    values are computed and the enclosing property is checked.
    """
    if isinstance(bracket, Bracket):
        return bracket

    try:
        points = tuple(bracket)
    except TypeError:
        raise InvalidInputError(
            f"bracket must be a Bracket or a tuple of 2 or 3 numbers, got {bracket!r}"
        ) from None

    if len(points) == 2:
        lo = check_finite("bracket[0]", points[0])
        hi = check_finite("bracket[1]", points[1])
        if lo == hi:
            raise InvalidInputError(f"degenerate interval ({lo}, {hi})")
        return find_bracket(fun, lo, hi - lo, max_iter=max_iter)

    if len(points) != 3:
        raise InvalidInputError(
            f"bracket must have 2 or 3 points, got {len(points)}"
        )

    a, b, c = (check_finite(f"bracket[{i}]", p) for i, p in enumerate(points))
    if a == b == c:
        raise InvalidInputError(f"degenerate bracket ({a}, {b}, {c})")
    if not (a < b < c or a > b > c):
        raise InvalidInputError(
            f"bracket middle point must lie strictly between the ends, got ({a}, {b}, {c})"
        )

    fb = evaluate(fun, b)
    if not math.isfinite(fb):
        raise InvalidInputError(f"function is not finite at bracket midpoint: f({b})={fb}")

    if is_debug_enabled():
        fa = evaluate(fun, a)
        fc = evaluate(fun, c)
        if fb > fa or fb > fc:
            raise InvalidInputError(
                f"bracket ({a}, {b}, {c}) does not enclose a minimum: "
                f"f={fa}, {fb}, {fc}"
            )
        return Bracket(a=a, b=b, c=c, fa=fa, fb=fb, fc=fc, nfev=3)

    return Bracket(a=a, b=b, c=c, fa=math.nan, fb=fb, fc=math.nan, nfev=1)


__all__ = ["find_bracket", "resolve_bracket"]
