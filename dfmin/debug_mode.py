"""Debug mode for the dfmin searches.

When enabled, every search reports each iteration through :func:`trace`
(bracket steps, golden and Brent intervals, simplex moves and restarts), and
:func:`dfmin.bracket.resolve_bracket` evaluates both ends of a caller-supplied
``(a, b, c)`` triple to check that ``f(b)`` is not above either of them. The
extra evaluations show up in ``nfev``; the returned minimum never changes.

The initial state comes from the ``DFMIN_DEBUG`` environment variable.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Any, Iterator

_DEBUG_ENV_VAR = "DFMIN_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """
    Return whether dfmin debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    DFMIN_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable dfmin debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def trace(log: logging.Logger, msg: str, *args: Any) -> None:
    """Log ``msg % args`` at DEBUG on ``log``, only while debug mode is on."""
    if _debug_enabled:
        log.debug(msg, *args)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     pass
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


__all__ = ["is_debug_enabled", "set_debug_enabled", "debug_context", "trace"]
