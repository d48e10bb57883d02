"""Downhill simplex (Nelder-Mead) minimization in N dimensions.

References:
    - J. A. Nelder and R. Mead, "A simplex method for function minimization",
      *The Computer Journal* 7 (1965)
    - Press et al., *Numerical Recipes* (3rd ed., 2007), section 10.5
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .core import DEFAULT_MAX_ITER, SearchResult, VectorFunction
from .debug_mode import trace
from .errors import InvalidInputError
from .logging import get_logger
from .utils import check_finite, check_max_iter, check_point, check_tolerance, evaluate

logger = get_logger(__name__)

ALPHA = 1.0  # reflection
GAMMA = 2.0  # expansion
RHO = 0.5  # contraction
SIGMA = 0.5  # shrink

_TINY = 1.0e-10


def nelder_mead(
    fun: VectorFunction,
    x0: Any,
    scale: float = 1.0,
    tol: float = 1e-9,
    max_iter: int = DEFAULT_MAX_ITER,
    history: bool = False,
) -> SearchResult:
    """Minimize ``fun`` with the downhill simplex method of Nelder and Mead.

    The initial simplex is ``x0`` together with ``x0 + scale * e_i`` for each
    coordinate direction ``e_i``. Each iteration replaces the worst vertex by
    reflecting it through the centroid of the others, expanding or
    contracting that move, or shrinks the whole simplex toward the best
    vertex when nothing else helps.

    The search stops when the spread of vertex values is small relative to
    their magnitude::

        (f_max - f_min) / (|f_max| + |f_min| + 1e-10) <= tol

    The first time the test passes, the simplex is rebuilt once around its
    best vertex with edge ``scale`` and the search continues; only the
    restarted simplex can finish successfully. This catches a simplex that
    collapsed onto a level set away from the minimum.

    Args:
        fun: Function of a 1-D float array returning a scalar.
        x0: Starting point, a sequence of N floats.
        scale: Edge length of the initial simplex. Must be positive.
        tol: Relative tolerance on the spread of vertex values.
        max_iter: Iteration cap. Reaching it is not an error; the result has
            ``nit == max_iter`` and ``success=False``.
        history: Record the best vertex after every iteration.

    Returns:
        :class:`~dfmin.core.SearchResult` whose ``x`` is a 1-D array.

    Example:
        >>> import numpy as np
        >>> res = nelder_mead(lambda p: float(np.sum((p - 3.0) ** 2)), [0.0, 0.0])
        >>> bool(np.allclose(res.x, [3.0, 3.0], atol=1e-3))
        True
    """
    point = check_point("x0", x0)
    scale = check_finite("scale", scale)
    if scale <= 0.0:
        raise InvalidInputError(f"scale must be positive, got {scale}")
    tol = check_tolerance("tol", tol)
    max_iter = check_max_iter(max_iter)

    n = point.size
    simplex = np.tile(point, (n + 1, 1))
    simplex[1:] += scale * np.eye(n)
    values = np.array([evaluate(fun, vertex.copy()) for vertex in simplex])
    nfev = n + 1
    if not np.isfinite(values[0]):
        raise InvalidInputError(f"function is not finite at x0: {values[0]}")

    hist: list[np.ndarray] = []
    nit = 0
    success = False
    restarted = False
    while True:
        order = np.argsort(values, kind="stable")
        simplex[:] = simplex[order]
        values[:] = values[order]

        f_lo = float(values[0])
        f_hi = float(values[-1])
        spread = abs(f_hi - f_lo) / (abs(f_hi) + abs(f_lo) + _TINY)
        if spread <= tol:
            if restarted:
                success = True
                break
            # A collapsed simplex can have equal values away from the minimum;
            # rebuild it around the best vertex and search again.
            restarted = True
            simplex[1:] = simplex[0] + scale * np.eye(n)
            for i in range(1, n + 1):
                values[i] = evaluate(fun, simplex[i].copy())
            nfev += n
            trace(logger, "nelder_mead restart at iter %d: best=%r", nit, f_lo)
            continue
        if nit >= max_iter:
            break

        centroid = simplex[:-1].mean(axis=0)
        worst = simplex[-1].copy()

        xr = centroid + ALPHA * (centroid - worst)
        fr = evaluate(fun, xr.copy())
        nfev += 1

        if fr < values[0]:
            xe = centroid + GAMMA * (xr - centroid)
            fe = evaluate(fun, xe.copy())
            nfev += 1
            if fe < fr:
                simplex[-1], values[-1] = xe, fe
                move = "expand"
            else:
                simplex[-1], values[-1] = xr, fr
                move = "reflect"
        elif fr < values[-2]:
            simplex[-1], values[-1] = xr, fr
            move = "reflect"
        else:
            if fr < values[-1]:
                xc = centroid + RHO * (xr - centroid)
            else:
                xc = centroid + RHO * (worst - centroid)
            fc = evaluate(fun, xc.copy())
            nfev += 1
            if fc < values[-1]:
                simplex[-1], values[-1] = xc, fc
                move = "contract"
            else:
                best = simplex[0].copy()
                simplex[1:] = best + SIGMA * (simplex[1:] - best)
                for i in range(1, n + 1):
                    values[i] = evaluate(fun, simplex[i].copy())
                nfev += n
                move = "shrink"

        nit += 1
        if history:
            hist.append(simplex[int(np.argmin(values))].copy())
        trace(logger, "nelder_mead iter %d: %s best=%r spread=%r", nit, move, f_lo, spread)

    if success:
        message = "Tolerance satisfied."
        logger.debug("nelder_mead converged in %d iterations", nit)
    else:
        message = "Maximum iterations reached."
        logger.info("nelder_mead stopped at iteration cap %d", max_iter)

    x = simplex[0].copy()
    x.flags.writeable = False
    return SearchResult(
        x=x,
        fun=float(values[0]),
        nit=nit,
        nfev=nfev,
        success=success,
        message=message,
        history=tuple(hist),
    )


amoeba = nelder_mead


__all__ = ["nelder_mead", "amoeba", "ALPHA", "GAMMA", "RHO", "SIGMA"]
