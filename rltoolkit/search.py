"""Searching the grid for the closest cell satisfying a condition."""

from __future__ import annotations

from typing import Callable, Optional

Condition = Callable[[int, int], bool]


def _sqdist(x1: int, y1: int, x2: int, y2: int) -> int:
    return (x2 - x1) ** 2 + (y2 - y1) ** 2


def find_closest_coords_naive(
    condition: Condition, from_x: int, from_y: int, max_dist: int
) -> Optional[tuple[int, int]]:
    """Scan the whole square around the origin and return the closest match, or None."""
    if condition(from_x, from_y):
        return from_x, from_y
    best: Optional[tuple[int, int]] = None
    best_dist = 0
    for x in range(from_x - max_dist, from_x + max_dist + 1):
        for y in range(from_y - max_dist, from_y + max_dist + 1):
            if condition(x, y):
                dist = _sqdist(from_x, from_y, x, y)
                if best is None or dist < best_dist:
                    best, best_dist = (x, y), dist
    return best


def find_closest_coords(
    condition: Condition, from_x: int, from_y: int, max_dist: int
) -> Optional[tuple[int, int]]:
    """Walk square rings outwards from the origin and return the closest match, or None."""
    if condition(from_x, from_y):
        return from_x, from_y

    x, y = from_x, from_y + 1
    dir_x, dir_y = 1, 0
    radius = 1
    ring_start = (x, y)
    best: Optional[tuple[int, int]] = None
    best_dist = 0

    while True:
        if condition(x, y):
            dist = _sqdist(from_x, from_y, x, y)
            if best is None or dist < best_dist:
                best, best_dist = (x, y), dist
        next_x, next_y = x + dir_x, y + dir_y
        if abs(next_x - from_x) > radius or abs(next_y - from_y) > radius:
            dir_x, dir_y = dir_y, -dir_x
        x += dir_x
        y += dir_y
        if (x, y) == ring_start:
            radius += 1
            # nothing on later rings can be closer than this
            if best is not None and best_dist <= radius * radius:
                return best
            if radius > max_dist:
                return None
            y += 1
            ring_start = (x, y)