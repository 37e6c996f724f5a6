from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

import numpy as np

from OrientTSP.geometry import Orientation
from OrientTSP.solvers.base import DEFAULT_SEED, OrientationError

E = TypeVar("E")

OrientationLookup = Callable[[E], Sequence[Orientation]]


@dataclass
class Waypoint(Generic[E]):
    """One element of the path together with the ways it can be traversed.

    ``orientations`` has shape ``(k, 2, 2)``: for each of the ``k`` orientations
    the entry point and the exit point. ``orientation`` stays ``None`` until the
    waypoint is inserted in the path.
    """

    element: E
    orientations: np.ndarray
    orientation: Optional[int] = None

    @property
    def entry(self) -> np.ndarray:
        return self.orientations[self.orientation, 0]

    @property
    def exit(self) -> np.ndarray:
        return self.orientations[self.orientation, 1]

    def choose(self, orientation: int) -> None:
        if self.orientation is not None:
            raise RuntimeError("Waypoint orientation is already fixed")
        self.orientation = int(orientation)


def _orientation_array(element: object, orientations: Sequence[Orientation]) -> np.ndarray:
    try:
        array = np.asarray(orientations, dtype=float)
    except (TypeError, ValueError) as exc:
        raise OrientationError(f"Malformed orientations for element {element!r}: {exc}") from exc
    if array.size == 0:
        raise OrientationError(f"No orientations for element {element!r}")
    if array.ndim != 3 or array.shape[1:] != (2, 2):
        raise OrientationError(
            f"Orientations for element {element!r} must be (entry, exit) pairs of 2D points, got shape {array.shape}"
        )
    if not np.all(np.isfinite(array)):
        raise OrientationError(f"Orientations for element {element!r} contain non-finite coordinates")
    array.setflags(write=False)
    return array


def fill_waypoints(elements: Iterable[E], get_orientations: OrientationLookup) -> List[Waypoint[E]]:
    """Wrap every element in a waypoint, calling ``get_orientations`` once per element."""
    return [Waypoint(element, _orientation_array(element, get_orientations(element))) for element in elements]


def shuffle_waypoints(waypoints: Sequence[Waypoint[E]], seed: int = DEFAULT_SEED) -> List[Waypoint[E]]:
    """Return the waypoints in a pseudo-random order that only depends on ``seed``."""
    if not waypoints:
        return []
    # The legacy RandomState stream is frozen across numpy releases.
    rng = np.random.RandomState(seed)
    return [waypoints[index] for index in rng.permutation(len(waypoints))]


__all__ = ["OrientationLookup", "Waypoint", "fill_waypoints", "shuffle_waypoints"]
