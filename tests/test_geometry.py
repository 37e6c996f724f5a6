import numpy as np
import pytest

from OrientTSP.geometry import as_point, distance, distances, vsize
from OrientTSP.solvers.base import compute_path_cost


def test_as_point_accepts_sequences_and_arrays():
    assert as_point((1, 2)).tolist() == [1.0, 2.0]
    assert as_point(np.array([3, 4])).dtype == float


@pytest.mark.parametrize("value", [(1,), (1, 2, 3), [[1, 2]], (np.nan, 0)])
def test_as_point_rejects_non_2d_points(value):
    with pytest.raises(ValueError):
        as_point(value)


def test_distance_is_euclidean_and_symmetric():
    a, b = as_point((0, 0)), as_point((3, 4))
    assert vsize(b - a) == 5.0
    assert distance(a, b) == distance(b, a) == 5.0


def test_distances_to_many_points():
    result = distances(as_point((0, 0)), np.array([[3.0, 4.0], [0.0, 2.0], [0.0, 0.0]]))
    assert result.tolist() == [5.0, 2.0, 0.0]


def test_path_cost_counts_only_travel_moves():
    moves = [np.array([[0.0, 0.0], [1.0, 0.0]]), np.array([[1.0, 3.0], [9.0, 9.0]])]

    assert compute_path_cost(moves) == pytest.approx(3.0)
    assert compute_path_cost(moves, as_point((0, -2))) == pytest.approx(5.0)
    assert compute_path_cost([]) == 0.0
