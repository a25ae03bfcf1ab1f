from __future__ import annotations

import numpy as np
import pytest

from extremum_jax.diagnostics import print_result, summarize_result, width_history
from extremum_jax.golden import GOLDEN, Mode, find
from extremum_jax.scan import find_global


def test_width_history_is_monotone(downward_parabola):
    res = find(downward_parabola, -10.0, 10.0, Mode.MAXIMIZE)
    w = width_history(res)

    assert w[0] == 20.0
    assert np.all(np.diff(w) < 0.0)
    assert w[-1] <= 1e-8


def test_summary_reports_golden_shrink(downward_parabola):
    res = find(downward_parabola, -10.0, 10.0, Mode.MAXIMIZE)
    s = summarize_result(res)

    assert s.mode == "maximize"
    assert s.x == res.x
    assert s.n_iter == res.n_iter
    assert s.width0 == 20.0
    assert s.mean_ratio == pytest.approx(GOLDEN, rel=1e-4)


def test_print_result(capsys, two_bumps):
    res = find_global(two_bumps, -2.0, 7.0, Mode.MAXIMIZE)
    print_result(res, indent="  ")
    out = capsys.readouterr().out.splitlines()

    assert out[0].startswith("  maximize: x=")
    assert float(out[0].split("x=")[1].split()[0]) == pytest.approx(4.0, abs=1e-2)
    assert "n_iter=" in out[1]
    assert out[2].startswith("    candidates: (")
