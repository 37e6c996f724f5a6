from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

import numpy as np

from OrientTSP.geometry import distance, distances
from OrientTSP.path import WaypointPath
from OrientTSP.waypoints import Waypoint


class InsertionCandidate(NamedTuple):
    """A place and orientation to insert a waypoint, with its marginal cost.

    ``before`` is the index of the waypoint to insert in front of. ``None``
    means appending after the last waypoint.
    """

    cost: float
    orientation: int
    before: Optional[int]


def _cheapest(costs: np.ndarray) -> Tuple[float, int]:
    # argmin returns the first minimum, so ties go to the lowest orientation index.
    orientation = int(np.argmin(costs))
    return float(costs[orientation]), orientation


def initial_orientation(waypoint: Waypoint, starting_point: Optional[np.ndarray] = None) -> int:
    """Orientation of the first waypoint of a path.

    Without a starting point there is nothing to measure against, so any
    orientation will do and the first one is taken.
    """
    if starting_point is None:
        return 0
    _, orientation = _cheapest(distances(starting_point, waypoint.orientations[:, 0]))
    return orientation


def try_insert_first(
    waypoint: Waypoint, path: WaypointPath, starting_point: Optional[np.ndarray] = None
) -> InsertionCandidate:
    first = path[path.head]
    costs = distances(first.entry, waypoint.orientations[:, 1])
    if starting_point is not None:
        costs = costs + distances(starting_point, waypoint.orientations[:, 0])
    cost, orientation = _cheapest(costs)
    return InsertionCandidate(cost, orientation, path.head)


def try_insert_last(waypoint: Waypoint, path: WaypointPath) -> InsertionCandidate:
    last = path[path.tail]
    cost, orientation = _cheapest(distances(last.exit, waypoint.orientations[:, 0]))
    return InsertionCandidate(cost, orientation, None)


def try_insert_between(waypoint: Waypoint, path: WaypointPath, before: int, after: int) -> InsertionCandidate:
    end_of_before = path[before].exit
    start_of_after = path[after].entry
    removed = distance(end_of_before, start_of_after)
    costs = (
        distances(end_of_before, waypoint.orientations[:, 0])
        + distances(start_of_after, waypoint.orientations[:, 1])
        - removed
    )
    cost, orientation = _cheapest(costs)
    return InsertionCandidate(cost, orientation, after)


def best_insertion(
    waypoint: Waypoint, path: WaypointPath, starting_point: Optional[np.ndarray] = None
) -> InsertionCandidate:
    """Find the cheapest place and orientation to insert ``waypoint`` in a non-empty path.

    Slots are scanned front to back: before the first waypoint, between each
    pair of neighbours, after the last waypoint. Only a strictly cheaper
    candidate replaces the current best one.
    """
    best = try_insert_first(waypoint, path, starting_point)
    for before, after in path.adjacent_pairs():
        candidate = try_insert_between(waypoint, path, before, after)
        if candidate.cost < best.cost:
            best = candidate
    candidate = try_insert_last(waypoint, path)
    if candidate.cost < best.cost:
        best = candidate
    return best


__all__ = [
    "InsertionCandidate",
    "best_insertion",
    "initial_orientation",
    "try_insert_between",
    "try_insert_first",
    "try_insert_last",
]
