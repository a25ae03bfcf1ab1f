"""Small compatibility layer.

The search itself only needs NumPy, but objectives are often written with
``jax.numpy`` (and the autodiff helpers need JAX). If JAX is importable we
expose it here; otherwise ``jnp`` falls back to NumPy.

Notes on float64
----------------
JAX defaults to float32 unless x64 is enabled. A golden-section bracket of
width 1e-8 is meaningless in float32, so we *default* to enabling x64 when
JAX is imported, unless the user has explicitly set ``JAX_ENABLE_X64``.
"""

from __future__ import annotations

from typing import Any, Tuple

import os

import numpy as _np


def _try_import_jax() -> Tuple[Any, Any]:
    try:
        os.environ.setdefault("JAX_ENABLE_X64", "1")
        import jax
        import jax.numpy as jnp
    except ImportError:
        # numpy fallback: no autodiff
        return None, _np

    jax.config.update("jax_enable_x64", os.environ.get("JAX_ENABLE_X64", "0") == "1")
    return jax, jnp


jax, jnp = _try_import_jax()


def has_jax() -> bool:
    return jax is not None


def enable_x64(enable: bool = True) -> None:
    """Enable/disable float64 for JAX (no-op if JAX unavailable)."""
    if jax is None:
        return
    jax.config.update("jax_enable_x64", bool(enable))

