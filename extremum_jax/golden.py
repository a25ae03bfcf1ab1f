"""Bounded one-dimensional extremum search (golden-section).

The search keeps a bracket ``[a, b]`` that contains the extremum and two
interior probes placed at the golden ratio ``g = (sqrt(5) - 1) / 2``::

    c = b - g (b - a)        d = a + g (b - a)

Comparing ``f(c)`` and ``f(d)`` discards the outer part on the side of the
worse probe. Because ``g**2 = 1 - g``, the surviving probe is exactly one of
the probes of the shrunken bracket, so each iteration costs one evaluation
and shrinks the width by ``g``.

Maximization negates the objective, so the loop only ever minimizes.

Notes
-----
Convergence to the true optimum is guaranteed only for unimodal objectives
(one interior extremum, monotone on each side). For anything else the result
is *a* local extremum picked out by the bracketing sequence, not necessarily
the global one; :func:`extremum_jax.scan.find_global` scans first to guard
against that.

Ties (``f(c) == f(d)`` exactly) keep the sub-interval whose center is closer
to the center of the original interval, and the lower sub-interval if both
are equally close. This makes the search deterministic on plateaus.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

import math

import numpy as np

from .config import DEFAULT_CONFIG, SearchConfig
from .errors import InvalidTolerance, MaxIterationsExceeded, NonFiniteEvaluation
from .interval import SearchInterval


GOLDEN = (math.sqrt(5.0) - 1.0) / 2.0


class Mode(str, Enum):
    MINIMIZE = "minimize"
    MAXIMIZE = "maximize"

    @property
    def sign(self) -> float:
        return 1.0 if self is Mode.MINIMIZE else -1.0


_MODE_ALIASES = {
    "min": Mode.MINIMIZE,
    "minimize": Mode.MINIMIZE,
    "max": Mode.MAXIMIZE,
    "maximize": Mode.MAXIMIZE,
}


def as_mode(mode: Any) -> Mode:
    if isinstance(mode, Mode):
        return mode
    key = str(mode).strip().lower()
    if key not in _MODE_ALIASES:
        raise ValueError(f"Unknown mode={mode!r} (expected 'minimize' or 'maximize')")
    return _MODE_ALIASES[key]


@dataclass(frozen=True)
class OptimizationResult:
    x: float
    fun: float
    mode: Mode
    n_iter: int
    n_eval: int
    bracket: Tuple[float, float]
    bracket_history: np.ndarray  # (n_iter + 1, 2) rows of (a, b)
    diagnostics: Dict[str, Any]


def evaluate(f: Callable[[float], Any], x: float) -> float:
    """Call ``f(x)`` and return a finite Python float.

    Accepts Python/NumPy/JAX scalars (including 0-d arrays).
    """
    out = np.asarray(f(x))
    if out.ndim != 0:
        raise TypeError(f"objective must return a scalar, got shape {out.shape} at x={x!r}")
    value = float(out)
    if not math.isfinite(value):
        raise NonFiniteEvaluation(x, value)
    return value


def _check_tolerance(tolerance) -> None:
    try:
        tol = float(tolerance)
    except (TypeError, ValueError):
        raise InvalidTolerance(tolerance) from None
    if not math.isfinite(tol) or tol <= 0.0:
        raise InvalidTolerance(tolerance)


def find(
    f: Callable[[float], Any],
    lower: float,
    upper: float,
    mode: Any = Mode.MINIMIZE,
    tolerance: Optional[float] = None,
    *,
    tol_mode: Optional[str] = None,
    max_iter: Optional[int] = None,
    verbose: Optional[bool] = None,
    config: Optional[SearchConfig] = None,
) -> OptimizationResult:
    """Locate a minimum or maximum of ``f`` on the closed interval ``[lower, upper]``.

    Parameters
    ----------
    f:
        Scalar objective of one real variable. Called only at points inside
        ``[lower, upper]``.
    lower, upper:
        Finite bounds with ``lower < upper``; otherwise :class:`InvalidInterval`.
    mode:
        :class:`Mode` or one of ``"min"``, ``"minimize"``, ``"max"``, ``"maximize"``.
    tolerance:
        Positive stopping tolerance on the bracket width. Defaults to
        ``config.tolerance`` (1e-8).
    tol_mode:
        ``"absolute"`` (default): stop once ``b - a <= tolerance``.
        ``"relative"``: stop once ``b - a <= tolerance * (upper - lower)``.
    max_iter:
        Iteration cap (default 200). Reaching it without convergence raises
        :class:`MaxIterationsExceeded`.
    verbose:
        Print one progress line per iteration.
    config:
        Base :class:`SearchConfig`; explicit keyword arguments override it.

    Returns
    -------
    OptimizationResult
        ``x`` is the midpoint of the final bracket, always inside
        ``[lower, upper]``; ``fun`` is ``f(x)`` in the caller's sign.

    Raises
    ------
    InvalidInterval, InvalidTolerance, NonFiniteEvaluation, MaxIterationsExceeded
    """
    if tolerance is not None:
        _check_tolerance(tolerance)
    cfg = (config or DEFAULT_CONFIG).override(
        tolerance=tolerance, tol_mode=tol_mode, max_iter=max_iter, verbose=verbose
    )
    interval = SearchInterval.of(lower, upper)
    mode = as_mode(mode)
    sign = mode.sign
    threshold = cfg.threshold(interval.width)
    center0 = interval.midpoint

    n_eval = 0

    def h(x: float) -> float:
        nonlocal n_eval
        n_eval += 1
        return sign * evaluate(f, x)

    a, b = interval.lower, interval.upper
    c = b - GOLDEN * (b - a)
    d = a + GOLDEN * (b - a)
    fc = h(c)
    fd = h(d)

    history = [(a, b)]
    n_tie = 0
    it = 0
    while (b - a) > threshold:
        if it >= cfg.max_iter:
            if cfg.verbose:
                print(f"[find] max_iter={cfg.max_iter} reached with width={b - a:.3e}; stopping")
            raise MaxIterationsExceeded(cfg.max_iter, (a, b), threshold)

        if fc == fd:
            n_tie += 1
            # [a, d] and [c, b]: keep the one centered closer to the original center.
            keep_lower = abs(0.5 * (a + d) - center0) <= abs(0.5 * (c + b) - center0)
        else:
            keep_lower = fc < fd

        if keep_lower:
            b, d, fd = d, c, fc
            c = b - GOLDEN * (b - a)
            fc = h(c)
        else:
            a, c, fc = c, d, fd
            d = a + GOLDEN * (b - a)
            fd = h(d)

        it += 1
        history.append((a, b))
        if cfg.verbose:
            print(f"[find] iter={it:03d} a={a:.12g} b={b:.12g} width={b - a:.3e}")

    x = interval.clamp(0.5 * (a + b))
    fun = sign * h(x)
    if cfg.verbose:
        print(f"[find] converged after {it} iterations: x={x:.12g} f(x)={fun:.12g} n_eval={n_eval}")

    diag: Dict[str, Any] = {
        "threshold": threshold,
        "tol_mode": cfg.tol_mode,
        "tolerance": cfg.tolerance,
        "n_tie": n_tie,
    }
    return OptimizationResult(
        x=x,
        fun=fun,
        mode=mode,
        n_iter=it,
        n_eval=n_eval,
        bracket=(a, b),
        bracket_history=np.asarray(history, dtype=float),
        diagnostics=diag,
    )


def minimize(f: Callable[[float], Any], lower: float, upper: float, **kwargs) -> OptimizationResult:
    return find(f, lower, upper, Mode.MINIMIZE, **kwargs)


def maximize(f: Callable[[float], Any], lower: float, upper: float, **kwargs) -> OptimizationResult:
    return find(f, lower, upper, Mode.MAXIMIZE, **kwargs)
