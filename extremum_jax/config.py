"""Search configuration.

Defaults for :func:`extremum_jax.golden.find`:

- ``tolerance = 1e-8`` with ``tol_mode = "absolute"``: the search stops once the
  bracket is at most 1e-8 wide, so the returned ``x`` is within 1e-8 of the
  optimum for unimodal objectives.
- ``tol_mode = "relative"`` scales the tolerance by the initial interval width.
- ``max_iter = 200``: far more than the ~45 iterations needed to shrink a
  width-20 interval to 1e-8 (each iteration shrinks by 0.618).

Configs can be read from a TOML file; keyword arguments passed to ``find``
always win over the config.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import math
import tomllib

from .errors import InvalidTolerance


TOL_MODES = ("absolute", "relative")


@dataclass(frozen=True)
class SearchConfig:
    tolerance: float = 1e-8
    tol_mode: str = "absolute"
    max_iter: int = 200
    verbose: bool = False

    def __post_init__(self):
        tol = float(self.tolerance)
        if not math.isfinite(tol) or tol <= 0.0:
            raise InvalidTolerance(self.tolerance)
        mode = str(self.tol_mode).strip().lower()
        if mode not in TOL_MODES:
            raise ValueError(f"Unknown tol_mode={self.tol_mode!r} (expected one of {TOL_MODES})")
        if int(self.max_iter) < 1:
            raise ValueError("max_iter must be >= 1")
        object.__setattr__(self, "tolerance", tol)
        object.__setattr__(self, "tol_mode", mode)
        object.__setattr__(self, "max_iter", int(self.max_iter))
        object.__setattr__(self, "verbose", bool(self.verbose))

    def threshold(self, width: float) -> float:
        """Bracket width at which the search stops, for an initial ``width``."""
        if self.tol_mode == "relative":
            return self.tolerance * float(width)
        return self.tolerance

    def override(self, **kwargs: Any) -> "SearchConfig":
        """Return a copy with every non-None keyword applied."""
        changes = {k: v for k, v in kwargs.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)


DEFAULT_CONFIG = SearchConfig()


def config_from_dict(data: Mapping[str, Any]) -> SearchConfig:
    known = {f.name for f in fields(SearchConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown search config keys: {unknown}")
    return SearchConfig(**dict(data))


def load_config(path: str | Path) -> SearchConfig:
    """Read a SearchConfig from TOML.

    Settings live under a ``[search]`` table; a file without one is read from
    its top level.
    """
    with open(path, "rb") as fh:
        data = tomllib.load(fh)
    table = data.get("search", data)
    if not isinstance(table, dict):
        raise ValueError(f"[search] in {path} must be a table")
    return config_from_dict(table)
