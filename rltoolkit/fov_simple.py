"""Simple ray-casting fields of view built on Bresenham lines."""

from __future__ import annotations

from typing import Callable, Iterable

from .geometry import are_coords_in_rect
from .primitives import Point, get_approx_circle_around_rect, get_line

Opacity = Callable[[int, int], bool]
VisibilityMap = list[list[bool]]

_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _empty_map(w: int, h: int) -> VisibilityMap:
    return [[False] * h for _ in range(w)]


def _cast(visible: VisibilityMap, line: Iterable[Point], opaque: Opacity, w: int, h: int) -> None:
    for index, (lx, ly) in enumerate(line):
        if are_coords_in_rect(lx, ly, 0, 0, w, h):
            visible[lx][ly] = True
            if index > 0 and opaque(lx, ly):
                break


def bresenham_fov(
    from_x: int, from_y: int, radius: int, map_w: int, map_h: int, opaque: Opacity
) -> VisibilityMap:
    """Cast a line to every cell of the square around the viewer; result is [x][y]."""
    visible = _empty_map(map_w, map_h)
    for i in range(from_x - radius, from_x + radius):
        for j in range(from_y - radius, from_y + radius):
            _cast(visible, get_line(from_x, from_y, i, j), opaque, map_w, map_h)
    return visible


def two_step_fov(
    from_x: int, from_y: int, radius: int, map_w: int, map_h: int, opaque: Opacity
) -> VisibilityMap:
    """Cast lines to a circle, then reveal cells with at least three visible orthogonal neighbours."""
    visible = _empty_map(map_w, map_h)
    for px, py in get_approx_circle_around_rect(from_x, from_y, 0, 0, radius):
        _cast(visible, get_line(from_x, from_y, px, py), opaque, map_w, map_h)

    revealed = [
        (x, y)
        for x in range(from_x - radius + 1, from_x + radius - 1)
        for y in range(from_y - radius + 1, from_y + radius - 1)
        if are_coords_in_rect(x, y, 1, 1, map_w - 2, map_h - 2)
        and sum(visible[x + dx][y + dy] for dx, dy in _ORTHOGONAL) > 2
    ]
    for x, y in revealed:
        visible[x][y] = True
    return visible