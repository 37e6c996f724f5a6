from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from OrientTSP.insertion import best_insertion, initial_orientation
from OrientTSP.path import WaypointPath
from OrientTSP.solvers.base import compute_path_cost
from OrientTSP.waypoints import Waypoint

logger = logging.getLogger(__name__)


class RandomInsertionSolver:
    """Random insertion heuristic for the open TSP with oriented waypoints.

    Waypoints are inserted one by one in the order they are given, each at the
    place and in the orientation that adds the least travel to the path built so
    far. Random insertion comes close to Christofides in tour quality (about 111%
    of optimal against 110% on random graphs) while being much faster.
    """

    name = "random_insertion"

    def build(self, waypoints: Sequence[Waypoint], starting_point: Optional[np.ndarray] = None) -> WaypointPath:
        path = WaypointPath(waypoints)
        if not waypoints:
            return path

        waypoints[0].choose(initial_orientation(waypoints[0], starting_point))
        path.append(0)
        logger.debug("Seeded path with orientation %d", waypoints[0].orientation)

        for index in range(1, len(waypoints)):
            waypoint = waypoints[index]
            candidate = best_insertion(waypoint, path, starting_point)
            waypoint.choose(candidate.orientation)
            path.insert_before(index, candidate.before)
            logger.debug(
                "Inserted waypoint %d before %s in orientation %d (+%.6g)",
                index,
                "end" if candidate.before is None else candidate.before,
                candidate.orientation,
                candidate.cost,
            )
        return path

    @staticmethod
    def path_cost(path: WaypointPath, starting_point: Optional[np.ndarray] = None) -> float:
        moves = [path[index].orientations[path[index].orientation] for index in path]
        return compute_path_cost(moves, starting_point)


__all__ = ["RandomInsertionSolver"]
