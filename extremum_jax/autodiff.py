"""Derivative checks via JAX.

Golden-section search never uses derivatives, but for a smooth objective an
interior optimum should be a stationary point. These helpers differentiate the
objective with :func:`jax.grad` to confirm that. The objective must be written
with ``jax.numpy`` (or plain arithmetic) so it can be traced.
"""

from __future__ import annotations

from typing import Any, Callable

from ._compat import has_jax, jax, jnp
from .golden import OptimizationResult


def derivative(f: Callable[[Any], Any], x: float) -> float:
    """Return ``df/dx`` at ``x``."""
    if not has_jax():
        raise ImportError("derivative requires JAX (jax + jaxlib)")
    return float(jax.grad(f)(jnp.asarray(float(x))))


def stationarity(f: Callable[[Any], Any], res: OptimizationResult) -> float:
    """Derivative of ``f`` at ``res.x``; close to zero for a smooth interior optimum.

    Near an endpoint optimum the derivative need not vanish.
    """
    return derivative(f, res.x)
