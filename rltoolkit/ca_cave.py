"""Cellular-automaton cave generator."""

from __future__ import annotations

from .lcg_random import LCGRandom

Cave = list[str]

WALL = "#"
FLOOR = "."


def make_cave(w: int, h: int, initial_wall_percentage: int, smoothness: int, seed: int) -> Cave:
    """Generate a cave of ``w`` strings of length ``h``; index it as cave[x][y].

    A negative seed means seeding from the current time.
    """
    if w <= 0:
        raise ValueError("width must be positive")
    rng = LCGRandom(seed)
    if seed < 0:
        rng.randomize()
    smoothness = max(smoothness, 1)
    cave = _random_initial_fill(w, h, initial_wall_percentage, rng)
    return _smooth(cave, smoothness)


def _random_initial_fill(w: int, h: int, wall_percentage: int, rng: LCGRandom) -> Cave:
    cave: Cave = []
    for column in range(w):
        cells = []
        for _ in range(h):
            if -2 < column - h // 2 <= 2:
                cells.append(FLOOR)
            elif rng.random(100) < wall_percentage:
                cells.append(WALL)
            else:
                cells.append(FLOOR)
        cave.append("".join(cells))
    return cave


def _count_walls_in_range(x: int, y: int, r: int, cave: Cave) -> int:
    """Count walls in the square of radius ``r``; cells off the map count as walls."""
    w, h = len(cave), len(cave[0])
    total = 0
    for i in range(x - r, x + r + 1):
        for j in range(y - r, y + r + 1):
            if i < 0 or j < 0 or i >= w or j >= h or cave[i][j] == WALL:
                total += 1
    return total


def _smooth(cave: Cave, max_iterations: int) -> Cave:
    w, h = len(cave), len(cave[0])
    for _ in range(max_iterations):
        new_cave = [
            "".join(
                WALL
                if _count_walls_in_range(x, y, 1, cave) >= 5
                or _count_walls_in_range(x, y, 2, cave) <= 1
                else FLOOR
                for y in range(h)
            )
            for x in range(w)
        ]
        changed = new_cave != cave
        cave = new_cave
        if not changed:
            break
    return cave