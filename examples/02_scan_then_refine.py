#!/usr/bin/env python
"""Golden-section search on a function with two minima.

Plain golden-section search only sees the bracket it is given and can settle
on a local minimum. Scanning first and refining every sampled dip recovers the
global one.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from extremum_jax.diagnostics import print_result
from extremum_jax.golden import find
from extremum_jax.scan import find_global


def objective(x):
    # narrow deep well at x=1 on top of a wide bowl centered at x=7
    return -10.0 * np.exp(-((x - 1.0) ** 2) / 0.02) + 0.1 * (x - 7.0) ** 2


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--lower", type=float, default=0.0)
    ap.add_argument("--upper", type=float, default=10.0)
    ap.add_argument("--num", type=int, default=201)
    args = ap.parse_args()

    print("golden-section only:")
    print_result(find(objective, args.lower, args.upper), indent="  ")
    print("scan + refine:")
    print_result(find_global(objective, args.lower, args.upper, num=args.num), indent="  ")


if __name__ == "__main__":
    main()
