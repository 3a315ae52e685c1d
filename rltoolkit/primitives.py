"""Bresenham lines and circles on integer grids."""

from __future__ import annotations

from itertools import islice
from typing import Iterator, NamedTuple


class Point(NamedTuple):
    x: int
    y: int


def _bresenham(from_x: int, from_y: int, to_x: int, to_y: int) -> Iterator[Point]:
    """Yield points along the line towards (to_x, to_y), continuing past it forever."""
    delta_x = abs(to_x - from_x)
    delta_y = abs(to_y - from_y)
    x_step = -1 if to_x < from_x else 1
    y_step = -1 if to_y < from_y else 1
    error = 0
    x, y = from_x, from_y
    if delta_x >= delta_y:
        while True:
            yield Point(x, y)
            error += delta_y
            if 2 * error >= delta_x:
                y += y_step
                error -= delta_x
            x += x_step
    else:
        while True:
            yield Point(x, y)
            error += delta_x
            if 2 * error >= delta_y:
                x += x_step
                error -= delta_y
            y += y_step


def get_line(from_x: int, from_y: int, to_x: int, to_y: int) -> list[Point]:
    """Return the line from one point to the other, both ends included."""
    count = max(abs(to_x - from_x), abs(to_y - from_y)) + 1
    return list(islice(_bresenham(from_x, from_y, to_x, to_y), count))


def get_line_over(from_x: int, from_y: int, to_x: int, to_y: int, length: int) -> list[Point]:
    """Return a line of fixed length that does not stop at (to_x, to_y)."""
    return list(islice(_bresenham(from_x, from_y, to_x, to_y), max(length, 0)))


def get_circle(x: int, y: int, r: int) -> list[Point]:
    """Return the points of a Bresenham circle of radius ``r`` around (x, y)."""
    if r < 0:
        raise ValueError("radius must not be negative")
    points: list[Point] = []
    x1, y1, err = -r, 0, 2 - 2 * r
    while True:
        points.extend((
            Point(x - x1, y + y1),
            Point(x - y1, y - x1),
            Point(x + x1, y - y1),
            Point(x + y1, y + x1),
        ))
        e = err
        if e > x1:
            x1 += 1
            err += x1 * 2 + 1
        if e <= y1:
            y1 += 1
            err += y1 * 2 + 1
        if x1 >= 0:
            break
    return points


def get_approx_circle_around_rect(x: int, y: int, w: int, h: int, r: int) -> list[Point]:
    """Return a rounded square outline at distance ``r`` around a w x h rectangle."""
    if r < 0:
        raise ValueError("radius must not be negative")
    points: list[Point] = []
    for x1 in range(x, x + w):
        points.extend((Point(x1, y - r), Point(x1, y + h + r - 1)))
    for y1 in range(y, y + h):
        points.extend((Point(x - r, y1), Point(x + w + r - 1, y1)))

    x1, y1, err = -r, 0, 2 - 2 * r
    while True:
        e = err
        if e > x1:
            x1 += 1
            err += x1 * 2 + 1
        if e <= y1:
            y1 += 1
            err += y1 * 2 + 1
        if x1 >= 0:
            break
        points.extend((
            Point(x - x1 + w - 1, y + y1 + h - 1),
            Point(x - y1, y - x1 + h - 1),
            Point(x + x1, y - y1),
            Point(x + y1 + w - 1, y + x1),
        ))
    return points