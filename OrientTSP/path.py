from __future__ import annotations

import logging
from typing import Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

from OrientTSP.waypoints import Waypoint

E = TypeVar("E")

logger = logging.getLogger(__name__)


class WaypointPath(Generic[E]):
    """Ordered path of waypoints under construction.

    The waypoints live in an arena and are addressed by their arena index. The
    order is kept as a doubly linked list of indices, so inserting next to a
    known waypoint takes constant time and indices stay valid while the path
    grows.
    """

    def __init__(self, waypoints: Sequence[Waypoint[E]]):
        self._arena: List[Optional[Waypoint[E]]] = list(waypoints)
        self._prev: List[Optional[int]] = [None] * len(self._arena)
        self._next: List[Optional[int]] = [None] * len(self._arena)
        self._placed = [False] * len(self._arena)
        self.head: Optional[int] = None
        self.tail: Optional[int] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node
            node = self._next[node]

    def __getitem__(self, index: int) -> Waypoint[E]:
        waypoint = self._arena[index]
        if waypoint is None:
            raise KeyError(f"Waypoint {index} was already released")
        return waypoint

    @property
    def capacity(self) -> int:
        return len(self._arena)

    def adjacent_pairs(self) -> Iterator[Tuple[int, int]]:
        """Yield every pair of neighbouring indices, front to back."""
        node = self.head
        while node is not None and self._next[node] is not None:
            following = self._next[node]
            yield node, following
            node = following

    def _claim(self, index: int) -> None:
        if self._placed[index]:
            raise ValueError(f"Waypoint {index} is already in the path")
        self._placed[index] = True
        self._size += 1

    def append(self, index: int) -> None:
        self._claim(index)
        self._prev[index] = self.tail
        self._next[index] = None
        if self.tail is None:
            self.head = index
        else:
            self._next[self.tail] = index
        self.tail = index

    def insert_before(self, index: int, before: Optional[int]) -> None:
        """Insert ``index`` in front of ``before``, or at the end if ``before`` is None."""
        if before is None:
            self.append(index)
            return
        if not self._placed[before]:
            raise ValueError(f"Waypoint {before} is not in the path")
        self._claim(index)
        previous = self._prev[before]
        self._prev[index] = previous
        self._next[index] = before
        self._prev[before] = index
        if previous is None:
            self.head = index
        else:
            self._next[previous] = index

    def linearize(self) -> Tuple[List[E], List[int]]:
        """Copy out the elements and their orientations in path order.

        Every waypoint is released right after its data is copied, so a path can
        only be linearized once.
        """
        elements: List[E] = []
        orientations: List[int] = []
        for index in list(self):
            waypoint = self[index]
            elements.append(waypoint.element)
            orientations.append(waypoint.orientation)
            self._arena[index] = None
        logger.debug("Linearized %d waypoints", len(elements))
        return elements, orientations


__all__ = ["WaypointPath"]
