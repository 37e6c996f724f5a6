from OrientTSP.core import TravellingSalesman, find_path
from OrientTSP.insertion import InsertionCandidate, best_insertion
from OrientTSP.orientations import (
    ORIENTATION_STRATEGIES,
    get_orientation_strategy,
    point_orientations,
    polygon_orientations,
    polyline_orientations,
    segment_orientations,
)
from OrientTSP.path import WaypointPath
from OrientTSP.solvers import DEFAULT_SEED, OrientationError, PathResult, TSPConfig, compute_path_cost
from OrientTSP.solvers.random_insertion import RandomInsertionSolver
from OrientTSP.waypoints import Waypoint, fill_waypoints, shuffle_waypoints

__all__ = [
    "DEFAULT_SEED",
    "InsertionCandidate",
    "ORIENTATION_STRATEGIES",
    "OrientationError",
    "PathResult",
    "RandomInsertionSolver",
    "TSPConfig",
    "TravellingSalesman",
    "Waypoint",
    "WaypointPath",
    "best_insertion",
    "compute_path_cost",
    "fill_waypoints",
    "find_path",
    "get_orientation_strategy",
    "point_orientations",
    "polygon_orientations",
    "polyline_orientations",
    "segment_orientations",
    "shuffle_waypoints",
]
