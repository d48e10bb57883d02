"""dfmin - derivative-free minimization of one- and N-dimensional functions.

Example
-------
>>> import math
>>> from dfmin import brent_search
>>> res = brent_search(math.cos, (0.01, 1.0))
>>> round(res.x, 6)
3.141593
"""

__version__ = "0.1.0"

from .bracket import find_bracket, resolve_bracket
from .brent import brent_search
from .brent_derivative import brent_derivative_search
from .config import METHODS, SearchConfig, minimize_scalar, validate_config
from .core import (
    DEFAULT_BRACKET_MAX_ITER,
    DEFAULT_MAX_ITER,
    EPS,
    SQRT_EPS,
    ZEPS,
    Bracket,
    SearchResult,
)
from .debug_mode import debug_context, is_debug_enabled, set_debug_enabled, trace
from .errors import InvalidInputError, NoBracketFoundError, OptimizationError
from .golden_section import golden_section_search
from .logging import configure_logging, get_logger, set_log_level
from .simplex import amoeba, nelder_mead

__all__ = [
    "__version__",
    # Results and constants
    "Bracket",
    "SearchResult",
    "EPS",
    "SQRT_EPS",
    "ZEPS",
    "DEFAULT_MAX_ITER",
    "DEFAULT_BRACKET_MAX_ITER",
    # Algorithms
    "find_bracket",
    "resolve_bracket",
    "golden_section_search",
    "brent_search",
    "brent_derivative_search",
    "nelder_mead",
    "amoeba",
    # Configuration
    "METHODS",
    "SearchConfig",
    "validate_config",
    "minimize_scalar",
    # Errors
    "OptimizationError",
    "InvalidInputError",
    "NoBracketFoundError",
    # Logging and debugging
    "get_logger",
    "set_log_level",
    "configure_logging",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "trace",
]
