#!/usr/bin/env python
"""Confirm with autodiff that a derivative-free optimum is stationary."""

from __future__ import annotations

import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from extremum_jax._compat import has_jax
from extremum_jax.autodiff import stationarity
from extremum_jax.golden import maximize


def main():
    if not has_jax():
        print("JAX not importable in this environment. Install with: pip install -e .[jax]")
        return

    import jax.numpy as jnp

    def f(x):
        return x ** (-2.5) * (x - 1.0) + 0.01 * jnp.sin(3.0 * x)

    res = maximize(f, 1.0, 5.0)
    print(f"x={res.x:.12g} f(x)={res.fun:.12g} df/dx={stationarity(f, res):.3e}")


if __name__ == "__main__":
    main()
