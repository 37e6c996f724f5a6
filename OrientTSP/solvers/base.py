from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Optional, Sequence, TypeVar

import numpy as np

from OrientTSP.geometry import distance

E = TypeVar("E")

# Fixed seed of the insertion order. The resulting paths must be reproducible.
DEFAULT_SEED = 0xDECAFF


@dataclass
class PathResult(Generic[E]):
    """Container capturing the outcome of ordering a set of elements."""

    elements: List[E]
    orientations: List[int]
    cost: float
    elapsed: float
    status: str = "complete"
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __iter__(self) -> Iterator[List[Any]]:
        yield self.elements
        yield self.orientations


@dataclass(frozen=True)
class TSPConfig:
    """Settings for the random insertion heuristic."""

    seed: int = DEFAULT_SEED


class OrientationError(ValueError):
    """Raised when an element does not provide usable orientations."""


def current_time() -> float:
    return time.perf_counter()


def compute_path_cost(moves: Sequence[np.ndarray], starting_point: Optional[np.ndarray] = None) -> float:
    """Compute the travel cost of an open path.

    ``moves`` holds the chosen ``(entry, exit)`` pair of every element, in path
    order. Only the travel between elements counts, plus the move from the
    starting point to the first entry if there is one.
    """
    if len(moves) == 0:
        return 0.0
    cost = 0.0
    if starting_point is not None:
        cost += distance(starting_point, moves[0][0])
    for previous, following in zip(moves[:-1], moves[1:]):
        cost += distance(previous[1], following[0])
    return cost


__all__ = [
    "DEFAULT_SEED",
    "OrientationError",
    "PathResult",
    "TSPConfig",
    "compute_path_cost",
    "current_time",
]
