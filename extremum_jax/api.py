"""Public, user-facing API for extremum_jax.

This module re-exports the handful of functions that cover the common
workflow: look at the function on a grid, then refine the extremum.

Advanced users can import lower-level pieces directly from submodules.
"""

from __future__ import annotations

from .errors import (
    InvalidInterval,
    InvalidTolerance,
    MaxIterationsExceeded,
    NonFiniteEvaluation,
    OptimizationError,
)
from .golden import Mode, OptimizationResult, find, maximize, minimize
from .scan import find_global, scan
from .diagnostics import print_result

__all__ = [
    # Search
    "Mode",
    "OptimizationResult",
    "find",
    "maximize",
    "minimize",
    "find_global",
    "scan",
    # Errors
    "OptimizationError",
    "InvalidInterval",
    "InvalidTolerance",
    "NonFiniteEvaluation",
    "MaxIterationsExceeded",
    # Reporting
    "print_result",
]
