"""Exceptions raised by the bounded extremum search.

Every failure is raised at the point it is detected; nothing is retried and
no partial result is returned. The argument-validation errors also derive
from :class:`ValueError` so callers that only catch ``ValueError`` keep
working.
"""

from __future__ import annotations

from typing import Tuple


class OptimizationError(Exception):
    """Base class for all extremum_jax failures."""


class InvalidInterval(OptimizationError, ValueError):
    def __init__(self, lower: float, upper: float, reason: str = "lower must be < upper"):
        self.lower = lower
        self.upper = upper
        super().__init__(f"invalid search interval [{lower!r}, {upper!r}]: {reason}")


class InvalidTolerance(OptimizationError, ValueError):
    def __init__(self, tolerance: float):
        self.tolerance = tolerance
        super().__init__(f"tolerance must be a finite number > 0, got {tolerance!r}")


class NonFiniteEvaluation(OptimizationError, ArithmeticError):
    """The objective returned inf or nan.

    ``x`` is the input at which it happened and ``value`` the offending output.
    """

    def __init__(self, x: float, value: float):
        self.x = x
        self.value = value
        super().__init__(f"objective returned non-finite value {value!r} at x={x!r}")


class MaxIterationsExceeded(OptimizationError, RuntimeError):
    def __init__(self, max_iter: int, bracket: Tuple[float, float], threshold: float):
        self.max_iter = max_iter
        self.bracket = bracket
        self.threshold = threshold
        a, b = bracket
        super().__init__(
            f"bracket [{a!r}, {b!r}] (width {b - a:.3e}) still above {threshold:.3e} "
            f"after max_iter={max_iter} iterations"
        )
