import pytest

from pixelgames.raster import bresenham

ENDS = [
    (5, 0),
    (5, 2),
    (2, 5),
    (0, 5),
    (-2, 5),
    (-5, 2),
    (-5, 0),
    (-5, -2),
    (-2, -5),
    (0, -5),
    (2, -5),
    (5, -2),
    (4, 4),
    (-4, -4),
    (7, 3),
    (-3, 9),
]


@pytest.mark.parametrize("end", ENDS)
def test_endpoints_included(end):
    points = list(bresenham((1, 1), (1 + end[0], 1 + end[1])))
    assert points[0] == (1, 1)
    assert points[-1] == (1 + end[0], 1 + end[1])


@pytest.mark.parametrize("end", ENDS)
def test_point_count_is_major_axis_length_plus_one(end):
    points = list(bresenham((0, 0), end))
    assert len(points) == max(abs(end[0]), abs(end[1])) + 1


@pytest.mark.parametrize("end", ENDS)
def test_steps_are_unit_moves(end):
    points = list(bresenham((0, 0), end))
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert abs(bx - ax) <= 1
        assert abs(by - ay) <= 1
        assert (ax, ay) != (bx, by)


@pytest.mark.parametrize("end", ENDS)
def test_coordinates_move_monotonically(end):
    points = list(bresenham((0, 0), end))
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    assert xs == sorted(xs, reverse=end[0] < 0)
    assert ys == sorted(ys, reverse=end[1] < 0)


def test_single_point():
    assert list(bresenham((3, 4), (3, 4))) == [(3, 4)]


def test_horizontal_line():
    assert list(bresenham((0, 2), (4, 2))) == [(x, 2) for x in range(5)]


def test_vertical_line_upwards():
    assert list(bresenham((1, 3), (1, 0))) == [(1, y) for y in range(3, -1, -1)]


def test_diagonal_line():
    assert list(bresenham((0, 0), (3, 3))) == [(i, i) for i in range(4)]