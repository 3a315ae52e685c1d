import math

import pytest

from rltoolkit.primitives import (
    Point,
    get_approx_circle_around_rect,
    get_circle,
    get_line,
    get_line_over,
)

ENDPOINTS = [(0, 0, 5, 2), (3, 3, -4, 1), (2, 7, 2, -3), (-1, -1, 6, 6), (0, 0, 1, 9), (4, 4, 4, 4)]


@pytest.mark.parametrize("fx,fy,tx,ty", ENDPOINTS)
def test_line_endpoints_and_length(fx, fy, tx, ty):
    line = get_line(fx, fy, tx, ty)
    assert line[0] == Point(fx, fy)
    assert line[-1] == Point(tx, ty)
    assert len(line) == max(abs(tx - fx), abs(ty - fy)) + 1


@pytest.mark.parametrize("fx,fy,tx,ty", ENDPOINTS)
def test_line_steps_are_adjacent(fx, fy, tx, ty):
    line = get_line(fx, fy, tx, ty)
    for a, b in zip(line, line[1:]):
        assert max(abs(a.x - b.x), abs(a.y - b.y)) == 1


def test_horizontal_line():
    assert get_line(0, 0, 3, 0) == [Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)]


@pytest.mark.parametrize("fx,fy,tx,ty", ENDPOINTS[:-1])
def test_line_over_extends_line(fx, fy, tx, ty):
    base = get_line(fx, fy, tx, ty)
    over = get_line_over(fx, fy, tx, ty, len(base) + 10)
    assert len(over) == len(base) + 10
    assert over[: len(base)] == base


def test_line_over_zero_length():
    assert get_line_over(0, 0, 5, 5, 0) == []


def test_point_unpacks():
    x, y = Point(3, -2)
    assert (x, y) == (3, -2)


@pytest.mark.parametrize("r", [1, 2, 5, 9])
def test_circle_points_near_radius(r):
    for p in get_circle(10, -4, r):
        assert abs(math.hypot(p.x - 10, p.y + 4) - r) <= 1


@pytest.mark.parametrize("r", [1, 3, 7])
def test_circle_point_symmetric(r):
    points = set(get_circle(0, 0, r))
    assert {Point(-p.x, -p.y) for p in points} == points


def test_circle_zero_radius_is_center():
    assert set(get_circle(2, 3, 0)) == {Point(2, 3)}


def test_circle_negative_radius_raises():
    with pytest.raises(ValueError):
        get_circle(0, 0, -1)


def test_approx_circle_negative_radius_raises():
    with pytest.raises(ValueError):
        get_approx_circle_around_rect(0, 0, 2, 2, -1)


def _chebyshev_to_rect(p, rx, ry, w, h):
    dx = max(rx - p.x, 0, p.x - (rx + w - 1))
    dy = max(ry - p.y, 0, p.y - (ry + h - 1))
    return max(dx, dy)


@pytest.mark.parametrize("x,y,w,h,r", [(5, 5, 3, 2, 2), (0, 0, 1, 1, 4), (-3, 2, 4, 4, 1)])
def test_approx_circle_surrounds_rect(x, y, w, h, r):
    points = get_approx_circle_around_rect(x, y, w, h, r)
    assert points
    for p in points:
        dist = _chebyshev_to_rect(p, x, y, w, h)
        assert 1 <= dist <= r