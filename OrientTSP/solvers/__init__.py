from __future__ import annotations

# The solver modules depend on the waypoint and path modules, which themselves
# import from ``base``; import them as ``OrientTSP.solvers.<module>``.
from OrientTSP.solvers.base import (
    DEFAULT_SEED,
    OrientationError,
    PathResult,
    TSPConfig,
    compute_path_cost,
    current_time,
)

__all__ = [
    "DEFAULT_SEED",
    "OrientationError",
    "PathResult",
    "TSPConfig",
    "compute_path_cost",
    "current_time",
]
