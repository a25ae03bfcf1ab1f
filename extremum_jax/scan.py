"""Grid scans and scan-then-refine global search.

Plotting a function and reading off roughly where it peaks is the usual first
step before calling a bounded optimizer. :func:`scan` is the numerical version
of that: sample the objective on a uniform grid and report the best sample.
:func:`local_brackets` turns the samples into brackets around every sampled
local extremum, and :func:`find_global` refines each bracket with
golden-section search and keeps the best.

A scan cannot see features narrower than the grid spacing; increase ``num``
for objectives with many closely spaced extrema.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

import numpy as np

from .config import DEFAULT_CONFIG, SearchConfig
from .errors import NonFiniteEvaluation
from .golden import Mode, OptimizationResult, as_mode, evaluate, find
from .interval import SearchInterval


@dataclass(frozen=True)
class ScanResult:
    x: np.ndarray  # (num,)
    y: np.ndarray  # (num,)
    mode: Mode
    index: int

    @property
    def x_best(self) -> float:
        return float(self.x[self.index])

    @property
    def y_best(self) -> float:
        return float(self.y[self.index])


def scan(
    f: Callable[[Any], Any],
    lower: float,
    upper: float,
    num: int = 101,
    *,
    mode: Any = Mode.MINIMIZE,
    vectorized: bool = False,
) -> ScanResult:
    """Evaluate ``f`` on ``numpy.linspace(lower, upper, num)``.

    With ``vectorized=True`` the whole grid is passed to ``f`` in one call
    (handy for NumPy/JAX expressions); otherwise ``f`` is called per point.
    The best sample is the first one attaining the min (or max).
    """
    interval = SearchInterval.of(lower, upper)
    mode = as_mode(mode)
    num = int(num)
    if num < 3:
        raise ValueError("num must be >= 3")

    x = np.linspace(interval.lower, interval.upper, num)
    if vectorized:
        y = np.asarray(f(x), dtype=float)
        if y.shape != x.shape:
            raise ValueError(f"vectorized objective returned shape {y.shape}, expected {x.shape}")
        bad = np.where(~np.isfinite(y))[0]
        if bad.size:
            i = int(bad[0])
            raise NonFiniteEvaluation(float(x[i]), float(y[i]))
    else:
        y = np.asarray([evaluate(f, float(xi)) for xi in x], dtype=float)

    index = int(np.argmin(mode.sign * y))
    return ScanResult(x=x, y=y, mode=mode, index=index)


def local_brackets(res: ScanResult) -> List[Tuple[float, float]]:
    """Brackets ``(lo, hi)`` around each sampled local extremum.

    A plateau of equal samples is reported once, bracketed by the samples on
    either side of it. Endpoint extrema get the one-sided bracket to their
    neighbour.
    """
    z = res.mode.sign * np.asarray(res.y)
    x = np.asarray(res.x)
    n = z.size
    out: List[Tuple[float, float]] = []

    i = 0
    while i < n:
        j = i
        while j + 1 < n and z[j + 1] == z[i]:
            j += 1
        left_ok = i == 0 or z[i - 1] > z[i]
        right_ok = j == n - 1 or z[j + 1] > z[j]
        if left_ok and right_ok and not (i == 0 and j == n - 1):
            lo = x[max(i - 1, 0)]
            hi = x[min(j + 1, n - 1)]
            out.append((float(lo), float(hi)))
        i = j + 1
    return out


def find_global(
    f: Callable[[float], Any],
    lower: float,
    upper: float,
    mode: Any = Mode.MINIMIZE,
    tolerance: Optional[float] = None,
    *,
    num: int = 101,
    tol_mode: Optional[str] = None,
    max_iter: Optional[int] = None,
    verbose: Optional[bool] = None,
    config: Optional[SearchConfig] = None,
) -> OptimizationResult:
    """Scan ``[lower, upper]``, refine every local bracket, return the best.

    Tolerance arguments mean the same as in :func:`extremum_jax.golden.find`:
    a relative tolerance is taken relative to ``upper - lower``, not to the
    width of each refined bracket. The refined candidates are listed in
    ``diagnostics["candidates"]`` as ``(x, fun)`` pairs, in bracket order.
    """
    mode = as_mode(mode)
    cfg = (config or DEFAULT_CONFIG).override(
        tolerance=tolerance, tol_mode=tol_mode, max_iter=max_iter, verbose=verbose
    )
    interval = SearchInterval.of(lower, upper)
    # Every bracket is refined to the threshold of the full interval.
    refine_cfg = cfg.override(tolerance=cfg.threshold(interval.width), tol_mode="absolute")
    verbose = cfg.verbose
    grid = scan(f, lower, upper, num, mode=mode)
    brackets = local_brackets(grid)
    if not brackets:
        # Constant over the whole grid: every sample ties.
        brackets = [(grid.x[0], grid.x[-1])]

    results = []
    for lo, hi in brackets:
        r = find(f, lo, hi, mode, config=refine_cfg)
        results.append(r)
        if verbose:
            print(f"[find_global] bracket=[{lo:.6g}, {hi:.6g}] x={r.x:.12g} f(x)={r.fun:.12g}")

    best = min(results, key=lambda r: mode.sign * r.fun)
    diag = dict(best.diagnostics)
    diag["candidates"] = [(r.x, r.fun) for r in results]
    diag["n_scan"] = int(grid.x.size)
    return OptimizationResult(
        x=best.x,
        fun=best.fun,
        mode=best.mode,
        n_iter=best.n_iter,
        n_eval=grid.x.size + sum(r.n_eval for r in results),
        bracket=best.bracket,
        bracket_history=best.bracket_history,
        diagnostics=diag,
    )
