"""Pytest configuration.

Allows running tests directly from the repo without requiring an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))


@pytest.fixture(scope="session")
def downward_parabola():
    """-(x - 3)^2: unimodal, maximum 0 at x = 3."""

    def f(x):
        return -((x - 3.0) ** 2)

    return f


@pytest.fixture(scope="session")
def tutorial_ratio():
    """x^-2.5 (x - 1) on [1, 5]: maximum at x = 5/3."""

    def f(x):
        return x ** (-2.5) * (x - 1.0)

    return f


@pytest.fixture(scope="session")
def two_bumps():
    """Two Gaussian bumps; the taller one (height 2) sits at x = 4."""
    import numpy as np

    def f(x):
        return np.exp(-((x - 1.0) ** 2)) + 2.0 * np.exp(-((x - 4.0) ** 2))

    return f
