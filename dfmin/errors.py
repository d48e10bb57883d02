"""Exceptions raised by the minimization routines."""

from __future__ import annotations


class OptimizationError(Exception):
    """Base class for every error raised by dfmin."""


class InvalidInputError(OptimizationError, ValueError):
    """Arguments that no search can start from.

    Raised before the first iteration: degenerate brackets, non-positive
    iteration caps, negative tolerances and non-finite numbers.
    """


class NoBracketFoundError(OptimizationError, RuntimeError):
    """Bracket expansion gave up without enclosing a minimum.

    Attributes:
        a, b, c: The last triple tried.
        nit: Expansion steps taken.
    """

    def __init__(self, message: str, a: float, b: float, c: float, nit: int) -> None:
        super().__init__(message)
        self.a = a
        self.b = b
        self.c = c
        self.nit = nit


__all__ = ["OptimizationError", "InvalidInputError", "NoBracketFoundError"]
