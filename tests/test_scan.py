from __future__ import annotations

import numpy as np
import pytest

from extremum_jax.errors import InvalidInterval, NonFiniteEvaluation
from extremum_jax.golden import GOLDEN, Mode, find
from extremum_jax.scan import ScanResult, find_global, local_brackets, scan


def test_scan_picks_best_sample():
    res = scan(lambda x: (x - 2.0) ** 2, 0.0, 4.0, 41)

    assert res.x.shape == (41,)
    assert res.y.shape == (41,)
    assert res.x_best == pytest.approx(2.0)
    assert res.y_best == pytest.approx(0.0, abs=1e-20)
    assert res.mode is Mode.MINIMIZE


def test_scan_vectorized_matches_pointwise(two_bumps):
    r1 = scan(two_bumps, -2.0, 7.0, 91, mode="max")
    r2 = scan(two_bumps, -2.0, 7.0, 91, mode="max", vectorized=True)

    np.testing.assert_allclose(r1.y, r2.y, rtol=1e-14, atol=0.0)
    assert r1.index == r2.index
    assert r1.x_best == pytest.approx(4.0, abs=0.1)


def test_scan_rejects_non_finite_samples():
    with pytest.raises(NonFiniteEvaluation) as excinfo:
        scan(lambda x: np.where(x > 1.0, np.inf, x), 0.0, 2.0, 5, vectorized=True)
    assert excinfo.value.x == pytest.approx(1.5)

    with pytest.raises(NonFiniteEvaluation):
        scan(lambda x: float("nan"), 0.0, 2.0, 5)


def test_scan_argument_checks():
    with pytest.raises(ValueError, match="num"):
        scan(lambda x: x, 0.0, 1.0, 2)
    with pytest.raises(InvalidInterval):
        scan(lambda x: x, 1.0, 0.0)
    with pytest.raises(ValueError, match="shape"):
        scan(lambda x: 1.0, 0.0, 1.0, 5, vectorized=True)


def _scan_result(y, mode=Mode.MINIMIZE):
    y = np.asarray(y, dtype=float)
    x = np.arange(y.size, dtype=float)
    return ScanResult(x=x, y=y, mode=mode, index=int(np.argmin(mode.sign * y)))


def test_local_brackets_interior_minima():
    assert local_brackets(_scan_result([3.0, 1.0, 2.0, 0.0, 4.0])) == [(0.0, 2.0), (2.0, 4.0)]


def test_local_brackets_maxima():
    res = _scan_result([3.0, 1.0, 2.0, 0.0, 4.0], mode=Mode.MAXIMIZE)
    assert local_brackets(res) == [(0.0, 1.0), (1.0, 3.0), (3.0, 4.0)]


def test_local_brackets_plateau_reported_once():
    assert local_brackets(_scan_result([2.0, 1.0, 1.0, 3.0, 4.0])) == [(0.0, 3.0)]


def test_local_brackets_endpoint_and_constant():
    assert local_brackets(_scan_result([0.0, 1.0, 2.0])) == [(0.0, 1.0)]
    assert local_brackets(_scan_result([1.0, 1.0, 1.0])) == []


def test_find_global_refines_every_bump(two_bumps):
    res = find_global(two_bumps, -2.0, 7.0, Mode.MAXIMIZE, 1e-8)

    assert res.x == pytest.approx(4.0, abs=1e-2)
    assert res.fun > 1.99
    xs = sorted(x for x, _ in res.diagnostics["candidates"])
    assert len(xs) == 2
    assert xs[0] == pytest.approx(1.0, abs=1e-2)
    assert xs[1] == pytest.approx(4.0, abs=1e-2)
    assert res.diagnostics["n_scan"] == 101


def test_find_global_beats_a_misleading_bracket():
    # Plain golden-section on [0, 10] discards the left part on the first
    # comparison and settles on the wide local minimum near 7.
    def f(x):
        return -10.0 * np.exp(-((x - 1.0) ** 2) / 0.02) + 0.1 * (x - 7.0) ** 2

    local = find(f, 0.0, 10.0)
    best = find_global(f, 0.0, 10.0, num=201)

    assert local.x == pytest.approx(7.0, abs=1e-3)
    assert best.x == pytest.approx(1.0, abs=1e-2)
    assert best.fun < local.fun


def test_find_global_constant_function():
    res = find_global(lambda x: 2.0, -1.0, 1.0)
    assert -1.0 <= res.x <= 1.0
    assert res.fun == 2.0
    assert len(res.diagnostics["candidates"]) == 1


def test_find_global_endpoint_optimum():
    res = find_global(lambda x: x, 0.0, 1.0, Mode.MAXIMIZE)
    assert res.x == pytest.approx(1.0, abs=1e-8)
    assert res.x <= 1.0


def test_find_global_relative_tolerance_uses_full_interval(two_bumps):
    res = find_global(two_bumps, -2.0, 7.0, Mode.MAXIMIZE, 1e-6, tol_mode="relative")

    # threshold scales with upper - lower = 9, not with the refined bracket
    assert res.diagnostics["threshold"] == pytest.approx(9e-6)
    assert res.diagnostics["tol_mode"] == "absolute"
    a, b = res.bracket
    assert b - a <= 9e-6
    assert b - a > 9e-6 * GOLDEN


def test_find_global_absolute_tolerance_passes_through(two_bumps):
    res = find_global(two_bumps, -2.0, 7.0, Mode.MAXIMIZE, 1e-4)
    assert res.diagnostics["threshold"] == 1e-4
