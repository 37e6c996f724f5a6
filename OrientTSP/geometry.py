from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

PointLike = Union[Sequence[float], np.ndarray]
Orientation = Tuple[PointLike, PointLike]


def as_point(value: PointLike) -> np.ndarray:
    """Coerce ``value`` to a finite 2D float vector."""
    point = np.asarray(value, dtype=float)
    if point.shape != (2,):
        raise ValueError(f"Expected a 2D point, got shape {point.shape}")
    if not np.all(np.isfinite(point)):
        raise ValueError(f"Point coordinates must be finite, got {point.tolist()}")
    return point


def vsize(vector: np.ndarray) -> float:
    return float(np.hypot(vector[..., 0], vector[..., 1]))


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return vsize(a - b)


def distances(a: np.ndarray, points: np.ndarray) -> np.ndarray:
    """Distances from ``a`` to every row of ``points`` (shape ``(k, 2)``)."""
    diff = points - a
    return np.hypot(diff[:, 0], diff[:, 1])


__all__ = ["Orientation", "PointLike", "as_point", "distance", "distances", "vsize"]
