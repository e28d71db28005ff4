import pytest

from labkit.dijkstra import Dijkstra

PATH = [
    [0, 7, 9, -1, -1, 14],
    [7, 0, 10, 15, -1, -1],
    [9, 10, 0, 11, -1, 2],
    [-1, 15, 11, 0, 6, -1],
    [-1, -1, -1, 6, 0, 9],
    [14, -1, 2, -1, 9, 0],
]


def test_algorithm():
    d = Dijkstra()
    d.set_task(PATH, 0)
    assert d.solved is False
    d.solve()
    assert d.solved is True
    assert d.answer == [0, 7, 9, 20, 20, 11]


def test_distance():
    d = Dijkstra()
    d.set_task(PATH, 0)
    d.solve()
    assert d.distance(0) == 0
    assert d.distance(5) == 11
    with pytest.raises(IndexError):
        d.distance(-1)
    with pytest.raises(IndexError):
        d.distance(6)


def test_empty_answer():
    assert Dijkstra().answer == []


def test_empty_matrix():
    assert Dijkstra().matrix == []


def test_distance_before_solving_raises():
    d = Dijkstra()
    for finish in (0, -1, 3):
        with pytest.raises(RuntimeError):
            d.distance(finish)


def test_wrong_matrix():
    bad = [list(row) for row in PATH]
    bad[4] = [-1, -1, -1, 6, 0, 9, 14]
    d = Dijkstra()
    with pytest.raises(ValueError):
        d.set_task(bad, 0)
    assert d.matrix == []


@pytest.mark.parametrize("start", [-1, 6])
def test_start_out_of_range(start):
    d = Dijkstra()
    with pytest.raises(ValueError):
        d.set_task(PATH, start)


def test_empty_task_rejected():
    with pytest.raises(ValueError):
        Dijkstra().set_task([], 0)


def test_get_path():
    d = Dijkstra()
    d.set_task(PATH, 0)
    assert d.matrix == PATH


def test_copy():
    d = Dijkstra()
    d.set_task(PATH, 0)
    clone = d.copy()
    assert clone.matrix == d.matrix
    assert clone.answer == d.answer
    assert clone.solved == d.solved
    d.solve()
    assert d.answer != clone.answer
    assert clone.solved is False


def test_no_way():
    path = [
        [0, -1, -1, -1, -1, -1],
        [-1, 0, 10, 15, -1, -1],
        [-1, 10, 0, 11, -1, 2],
        [-1, 15, 11, 0, 6, -1],
        [-1, -1, -1, 6, 0, 9],
        [-1, -1, 2, -1, 9, 0],
    ]
    d = Dijkstra()
    d.set_task(path, 0)
    assert d.solved is False
    d.solve()
    assert d.solved is True
    assert d.answer == [0, -1, -1, -1, -1, -1]


def test_solve_without_task_does_nothing():
    d = Dijkstra()
    d.solve()
    assert d.solved is False
    assert d.answer == []


def test_distances_are_truncated_to_integers():
    d = Dijkstra()
    d.set_task([[0, 1.5], [1.5, 0]], 0)
    d.solve()
    assert d.answer == [0, 1]


def test_other_start_vertex():
    d = Dijkstra()
    d.set_task(PATH, 4)
    d.solve()
    assert d.distance(4) == 0
    assert d.distance(3) == 6
    assert d.distance(0) == 20