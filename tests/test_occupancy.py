# tests/test_occupancy.py
from bentogrid.pipeline.occupancy import OccupancyGrid


def test_empty_grid_next_free_is_origin():
    g = OccupancyGrid(6)
    assert len(g) == 0
    assert g.next_free_position() == (0, 0)


def test_out_of_bounds_does_not_grow():
    g = OccupancyGrid(3)
    assert g.can_fit(2, 0, 2, 1) is False
    assert len(g) == 0


def test_can_fit_grows_rows_even_on_failure():
    g = OccupancyGrid(2)
    g.ensure_rows(1)
    g.occupy(0, 0, 1, 1)
    assert g.can_fit(0, 0, 1, 3) is False
    assert len(g) == 3
    assert g.rows[2] == [False, False]


def test_occupy_then_next_free():
    g = OccupancyGrid(3)
    assert g.can_fit(0, 0, 2, 2)
    g.occupy(0, 0, 2, 2)
    assert g.next_free_position() == (2, 0)
    assert g.can_fit(1, 1, 2, 1) is False
    assert g.can_fit(2, 0, 1, 2)
    g.occupy(2, 0, 1, 2)
    # все существующие строки заняты: начало следующей
    assert g.next_free_position() == (0, 2)


def test_rows_have_fixed_width():
    g = OccupancyGrid(4)
    g.can_fit(0, 5, 1, 1)
    assert len(g) == 6
    assert all(len(r) == 4 for r in g.rows)
