from __future__ import annotations

import logging
from typing import Generic, Iterable, Optional, TypeVar

from OrientTSP.geometry import PointLike, as_point
from OrientTSP.solvers.base import DEFAULT_SEED, PathResult, TSPConfig, current_time
from OrientTSP.solvers.random_insertion import RandomInsertionSolver
from OrientTSP.waypoints import OrientationLookup, fill_waypoints, shuffle_waypoints

E = TypeVar("E")

logger = logging.getLogger(__name__)


class TravellingSalesman(Generic[E]):
    """Orders elements into a short path: waypoints -> shuffle -> insertion -> linearize.

    ``get_orientations`` maps an element to its possible ``(entry, exit)`` point
    pairs. It must be a pure function and return at least one pair.
    """

    def __init__(self, get_orientations: OrientationLookup, config: TSPConfig | None = None):
        self.get_orientations = get_orientations
        self.config = config or TSPConfig()
        self.solver = RandomInsertionSolver()

    def find_path(self, elements: Iterable[E], starting_point: Optional[PointLike] = None) -> PathResult[E]:
        """Compute a short path past all elements.

        The result is not necessarily the shortest path; finding that is
        NP-complete. ``starting_point`` is where the path starts from, if it is
        fixed. It is never part of the output.
        """
        start_time = current_time()
        start = None if starting_point is None else as_point(starting_point)
        waypoints = fill_waypoints(elements, self.get_orientations)
        metadata = {"seed": self.config.seed, "n_elements": len(waypoints), "solver": self.solver.name}
        if not waypoints:
            return PathResult(elements=[], orientations=[], cost=0.0, elapsed=current_time() - start_time, metadata=metadata)

        logger.debug("Ordering %d elements with seed %#x", len(waypoints), self.config.seed)
        shuffled = shuffle_waypoints(waypoints, self.config.seed)
        path = self.solver.build(shuffled, start)
        cost = self.solver.path_cost(path, start)
        ordered, orientations = path.linearize()
        logger.debug("Path past %d elements has travel cost %.6g", len(ordered), cost)
        return PathResult(
            elements=ordered,
            orientations=orientations,
            cost=cost,
            elapsed=current_time() - start_time,
            metadata=metadata,
        )


def find_path(
    elements: Iterable[E],
    get_orientations: OrientationLookup,
    starting_point: Optional[PointLike] = None,
    seed: int = DEFAULT_SEED,
) -> PathResult[E]:
    return TravellingSalesman(get_orientations, TSPConfig(seed=seed)).find_path(elements, starting_point)


__all__ = ["TravellingSalesman", "find_path"]
