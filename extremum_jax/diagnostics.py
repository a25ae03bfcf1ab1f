"""Lightweight diagnostic helpers.

NumPy-only utilities for looking at how a search converged. They print plain
text that is easy to paste into an issue.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .golden import GOLDEN, OptimizationResult


@dataclass(frozen=True)
class ResultSummary:
    mode: str
    x: float
    fun: float
    n_iter: int
    n_eval: int
    width0: float
    width: float
    mean_ratio: float


def width_history(res: OptimizationResult) -> np.ndarray:
    """Bracket width ``b - a`` after each iteration (entry 0 is the initial width)."""
    h = np.asarray(res.bracket_history, dtype=float)
    return h[:, 1] - h[:, 0]


def summarize_result(res: OptimizationResult) -> ResultSummary:
    w = width_history(res)
    if w.size >= 2 and w[-1] > 0.0:
        # geometric mean of the per-iteration shrink factors
        mean_ratio = float((w[-1] / w[0]) ** (1.0 / (w.size - 1)))
    else:
        mean_ratio = float("nan")
    return ResultSummary(
        mode=res.mode.value,
        x=float(res.x),
        fun=float(res.fun),
        n_iter=int(res.n_iter),
        n_eval=int(res.n_eval),
        width0=float(w[0]),
        width=float(w[-1]),
        mean_ratio=mean_ratio,
    )


def print_result(res: OptimizationResult, *, indent: str = "") -> None:
    """Pretty-print an OptimizationResult."""
    s = summarize_result(res)
    print(f"{indent}{s.mode}: x={s.x:.12g} f(x)={s.fun:.12g}")
    print(
        f"{indent}  n_iter={s.n_iter} n_eval={s.n_eval} "
        f"width {s.width0:.3e} -> {s.width:.3e} (mean ratio {s.mean_ratio:.4f}, golden {GOLDEN:.4f})"
    )
    candidates = res.diagnostics.get("candidates")
    if candidates:
        print(f"{indent}  candidates: " + ", ".join(f"({x:.6g}, {fx:.6g})" for x, fx in candidates))
