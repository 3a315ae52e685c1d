"""Field of view using lines of sight under a strict line-to-point distance rule."""

from __future__ import annotations

import math
from typing import Callable

from .geometry import are_coords_in_rect

Opacity = Callable[[int, int], bool]
VisibilityMap = list[list[bool]]


def _cast(
    visible: VisibilityMap, opaque: Opacity, w: int, h: int, x0: int, y0: int, x1: int, y1: int
) -> None:
    dx, dy = x1 - x0, y1 - y0
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    x, y = x0, y0
    dist = math.sqrt(dx * dx + dy * dy)
    while x != x1 or y != y1:
        if are_coords_in_rect(x, y, 0, 0, w, h) and opaque(x, y):
            visible[x][y] = True
            return
        if abs(dy * (x - x0 + sx) - dx * (y - y0)) / dist < 0.5:
            x += sx
        elif abs(dy * (x - x0) - dx * (y - y0 + sy)) / dist < 0.5:
            y += sy
        else:
            x += sx
            y += sy
    if are_coords_in_rect(x1, y1, 0, 0, w, h):
        visible[x1][y1] = True


def strict_definition_fov(
    from_x: int, from_y: int, radius: int, map_w: int, map_h: int, opaque: Opacity
) -> VisibilityMap:
    """Compute the cells visible from (from_x, from_y); the result is indexed [x][y]."""
    visible = [[False] * map_h for _ in range(map_w)]
    radius += 1
    for i in range(-radius, radius + 1):
        for j in range(-radius, radius + 1):
            if i * i + j * j < radius * radius:
                _cast(visible, opaque, map_w, map_h, from_x, from_y, from_x + i, from_y + j)
    return visible