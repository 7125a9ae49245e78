# tests/test_grid_basics.py
import pytest
from komi.goban_model import Grid, OutOfBounds


def test_new_grid_is_empty():
    g = Grid(size=5)
    assert all(stone is None for row in g.get_board() for stone in row)
    assert list(g.occupied()) == []


def test_cell_coordinates_match_position():
    g = Grid(size=4)
    for r in range(4):
        for c in range(4):
            assert g.cell_at(r, c).point == (r, c)


@pytest.mark.parametrize("point", [(-1, 0), (0, -1), (5, 0), (0, 5)])
def test_cell_at_out_of_bounds_raises(point):
    g = Grid(size=5)
    with pytest.raises(OutOfBounds):
        g.cell_at(*point)


def test_neighbors_order_down_up_right_left():
    g = Grid(size=5)
    assert g.neighbors(2, 2) == [(3, 2), (1, 2), (2, 3), (2, 1)]


def test_neighbors_filtered_at_corner_and_edge():
    g = Grid(size=5)
    assert g.neighbors(0, 0) == [(1, 0), (0, 1)]
    assert g.neighbors(4, 2) == [(3, 2), (4, 3), (4, 1)]


def test_single_point_board_has_no_neighbors():
    g = Grid(size=1)
    assert g.neighbors(0, 0) == []


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Grid(size=0)


def test_pretty_and_clear():
    g = Grid(size=3)
    g.cell_at(0, 0).stone = 'B'
    g.cell_at(1, 2).stone = 'W'
    assert g.pretty() == "B..\n..W\n..."
    assert g.get((1, 2)) == 'W'
    g.clear()
    assert g.pretty() == "...\n...\n..."


def test_non_integer_coordinates_are_out_of_bounds():
    g = Grid(size=5)
    assert not g.in_bounds(1.5, 0)
    with pytest.raises(OutOfBounds):
        g.cell_at(1.5, 0)
    with pytest.raises(OutOfBounds):
        g.cell_at(0, "1")
