"""Configuration-driven dispatch for the one-dimensional searches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .brent import brent_search
from .brent_derivative import brent_derivative_search
from .core import DEFAULT_MAX_ITER, SQRT_EPS, ZEPS, BracketLike, SearchResult
from .errors import InvalidInputError
from .golden_section import golden_section_search
from .utils import check_max_iter, check_tolerance

METHODS = ("golden", "brent", "brent-derivative")


@dataclass(frozen=True)
class SearchConfig:
    """
    Configuration for a one-dimensional minimization.

    Args:
        method: Search to run. Supported values: "golden", "brent",
            "brent-derivative". Matching is case-insensitive and accepts
            underscores in place of hyphens.
        tol: Relative tolerance on the abscissa. Values below ``sqrt(eps)``
            are raised to it by the searches.
        atol: Absolute tolerance. Only golden-section search uses it; the
            Brent searches carry a fixed absolute floor.
        max_iter: Iteration cap.
    """

    method: str = "brent"
    tol: float = SQRT_EPS
    atol: float = ZEPS
    max_iter: int = DEFAULT_MAX_ITER

    @property
    def normalized_method(self) -> str:
        return self.method.strip().lower().replace("_", "-")


def validate_config(config: SearchConfig) -> None:
    """
    Check that a configuration names a known method and sane limits.

    Raises:
        InvalidInputError: If any field is invalid.
    """
    if not isinstance(config.method, str) or config.normalized_method not in METHODS:
        raise InvalidInputError(
            f"Unsupported method '{config.method}'. Supported: {', '.join(METHODS)}."
        )
    check_tolerance("tol", config.tol)
    check_tolerance("atol", config.atol)
    check_max_iter(config.max_iter)


def minimize_scalar(
    fun: Callable[[float], Any],
    bracket: BracketLike,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """
    Minimize a function of one variable with the search named in ``config``.

    For ``"brent-derivative"`` the function must return ``(value, derivative)``;
    the other methods expect a plain scalar function.

    Args:
        fun: Function to minimize.
        bracket: A :class:`~dfmin.core.Bracket`, an ``(a, b, c)`` triple or a
            ``(lo, hi)`` pair.
        config: Search configuration. Defaults to Brent's method.

    Returns:
        The :class:`~dfmin.core.SearchResult` of the selected search.

    Raises:
        InvalidInputError: If the configuration or the inputs are invalid.
    """
    if config is None:
        config = SearchConfig()
    validate_config(config)

    method = config.normalized_method
    if method == "golden":
        return golden_section_search(
            fun, bracket, tol=config.tol, atol=config.atol, max_iter=config.max_iter
        )
    if method == "brent":
        return brent_search(fun, bracket, tol=config.tol, max_iter=config.max_iter)
    return brent_derivative_search(
        fun, bracket, tol=config.tol, max_iter=config.max_iter
    )


__all__ = ["METHODS", "SearchConfig", "validate_config", "minimize_scalar"]
