"""extremum_jax: bounded one-dimensional extremum search.

Contains:
- golden-section search for a minimum or maximum on a closed interval
- grid scans and scan-then-refine global search
- search configuration (defaults + TOML loading)
- convergence diagnostics
- JAX-based stationarity checks (optional)
"""

from . import api
from .errors import (
    InvalidInterval,
    InvalidTolerance,
    MaxIterationsExceeded,
    NonFiniteEvaluation,
    OptimizationError,
)
from .config import DEFAULT_CONFIG, SearchConfig, config_from_dict, load_config
from .interval import SearchInterval
from .golden import GOLDEN, Mode, OptimizationResult, as_mode, evaluate, find, maximize, minimize
from .scan import ScanResult, find_global, local_brackets, scan
from .diagnostics import ResultSummary, print_result, summarize_result, width_history
from .autodiff import derivative, stationarity

__all__ = [
    "api",
    "OptimizationError",
    "InvalidInterval",
    "InvalidTolerance",
    "NonFiniteEvaluation",
    "MaxIterationsExceeded",
    "DEFAULT_CONFIG",
    "SearchConfig",
    "config_from_dict",
    "load_config",
    "SearchInterval",
    "GOLDEN",
    "Mode",
    "OptimizationResult",
    "as_mode",
    "evaluate",
    "find",
    "maximize",
    "minimize",
    "ScanResult",
    "find_global",
    "local_brackets",
    "scan",
    "ResultSummary",
    "print_result",
    "summarize_result",
    "width_history",
    "derivative",
    "stationarity",
]
