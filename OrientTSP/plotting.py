from __future__ import annotations

import pathlib
from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from OrientTSP.geometry import PointLike, as_point
from OrientTSP.solvers.base import PathResult
from OrientTSP.waypoints import OrientationLookup


def plot_path(
    result: PathResult,
    get_orientations: OrientationLookup,
    starting_point: Optional[PointLike] = None,
    ax: Optional[Axes] = None,
) -> Axes:
    """Draw the elements in their chosen orientation and the travel moves between them."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    moves = [
        np.asarray(get_orientations(element)[orientation], dtype=float)
        for element, orientation in zip(result.elements, result.orientations)
    ]
    position = None if starting_point is None else as_point(starting_point)
    if position is not None:
        ax.scatter([position[0]], [position[1]], marker="*", s=120, color="tab:red", label="start", zorder=3)

    for step, (entry, exit_) in enumerate(moves):
        if position is not None:
            ax.plot([position[0], entry[0]], [position[1], entry[1]], linestyle="--", color="tab:gray", linewidth=1)
        ax.plot([entry[0], exit_[0]], [entry[1], exit_[1]], color="tab:blue", linewidth=2)
        ax.scatter([entry[0]], [entry[1]], color="tab:green", s=16, zorder=3)
        ax.annotate(str(step), (entry[0], entry[1]), textcoords="offset points", xytext=(4, 4), fontsize=8)
        position = exit_

    ax.set_title(f"{len(moves)} elements, travel {result.cost:.3f}")
    ax.set_aspect("equal", adjustable="datalim")
    return ax


def save_path_plot(
    result: PathResult,
    get_orientations: OrientationLookup,
    output: pathlib.Path,
    starting_point: Optional[PointLike] = None,
) -> pathlib.Path:
    output = pathlib.Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(8, 8))
    plot_path(result, get_orientations, starting_point, ax=ax)
    fig.tight_layout()
    fig.savefig(output, dpi=150)
    plt.close(fig)
    return output


__all__ = ["plot_path", "save_path_plot"]
