from __future__ import annotations

from typing import Callable, Dict, List, Sequence

import numpy as np

from OrientTSP.geometry import Orientation, PointLike


def _vertices(geometry: Sequence[PointLike], kind: str) -> np.ndarray:
    """Check that ``geometry`` is a list of 2D points and return them as an array."""
    try:
        vertices = np.asarray(geometry, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Malformed {kind} {geometry!r}: {exc}") from exc
    if vertices.size == 0:
        return vertices.reshape(0, 2)
    if vertices.ndim != 2 or vertices.shape[1] != 2:
        raise ValueError(f"A {kind} must be a list of 2D points, got {geometry!r}")
    return vertices


def point_orientations(point: PointLike) -> List[Orientation]:
    return [(point, point)]


def segment_orientations(segment: Sequence[PointLike]) -> List[Orientation]:
    """A line segment can be traversed forward or reversed."""
    if len(_vertices(segment, "segment")) != 2:
        raise ValueError(f"A segment needs exactly two points, got {segment!r}")
    start, end = segment
    return [(start, end), (end, start)]


def polyline_orientations(polyline: Sequence[PointLike]) -> List[Orientation]:
    if len(_vertices(polyline, "polyline")) == 0:
        return []
    first, last = polyline[0], polyline[-1]
    if len(polyline) == 1:
        return [(first, first)]
    return [(first, last), (last, first)]


def polygon_orientations(polygon: Sequence[PointLike]) -> List[Orientation]:
    """A closed polygon is entered and left at the same vertex, any of them."""
    _vertices(polygon, "polygon")
    return [(vertex, vertex) for vertex in polygon]


ORIENTATION_STRATEGIES: Dict[str, Callable[..., List[Orientation]]] = {
    "point": point_orientations,
    "segment": segment_orientations,
    "polyline": polyline_orientations,
    "polygon": polygon_orientations,
}


def get_orientation_strategy(name: str) -> Callable[..., List[Orientation]]:
    strategy = ORIENTATION_STRATEGIES.get(name)
    if strategy is None:
        raise KeyError(f"Unknown orientation strategy: {name}")
    return strategy


__all__ = [
    "ORIENTATION_STRATEGIES",
    "get_orientation_strategy",
    "point_orientations",
    "polygon_orientations",
    "polyline_orientations",
    "segment_orientations",
]
