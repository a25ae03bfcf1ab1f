#!/usr/bin/env python
"""Find the extrema from the introductory tutorial.

1. f(x) = -(x - 3)^2 on [-10, 10]: maximum 0 at x = 3.
2. f(x) = x^-2.5 (x - 1) on [1, 5]: maximum ~0.1859 at x = 5/3.

Each case first prints a coarse grid scan (the numbers you would read off a
plot), then the golden-section refinement.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Allow running from the examples/ directory without installing the package.
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from extremum_jax.diagnostics import print_result
from extremum_jax.golden import Mode, find
from extremum_jax.scan import scan


CASES = {
    "parabola": (lambda x: -((x - 3.0) ** 2), -10.0, 10.0),
    "ratio": (lambda x: x ** (-2.5) * (x - 1.0), 1.0, 5.0),
}


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--case", choices=sorted(CASES) + ["all"], default="all")
    ap.add_argument("--tol", type=float, default=1e-8)
    ap.add_argument("--num", type=int, default=21, help="grid points for the coarse scan")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    names = sorted(CASES) if args.case == "all" else [args.case]
    for name in names:
        f, lower, upper = CASES[name]
        grid = scan(f, lower, upper, args.num, mode=Mode.MAXIMIZE)
        print(f"{name}: coarse scan best x={grid.x_best:.4g} f(x)={grid.y_best:.4g}")
        res = find(f, lower, upper, Mode.MAXIMIZE, args.tol, verbose=args.verbose)
        print_result(res, indent="  ")


if __name__ == "__main__":
    main()
