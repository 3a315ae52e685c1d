"""Height-map generation by recursive midpoint displacement."""

from __future__ import annotations

from typing import Optional

from .lcg_random import LCGRandom

HeightMap = list[list[int]]

_CORNER_RANGE = (-40, -5)
_CENTER_RANGE = (0, 100)
_SUBCENTER_RANGE = (-20, 65)
_SPREAD = -2


def gen_height_map(w: int, h: int, rng: Optional[LCGRandom] = None) -> HeightMap:
    """Generate a height map indexed [x][y]; even dimensions are enlarged by one.

    Without ``rng`` a fresh time-seeded generator is used.
    """
    if w < 0 or h < 0:
        raise ValueError("dimensions must not be negative")
    if rng is None:
        rng = LCGRandom()
        rng.randomize()
    if w % 2 == 0:
        w += 1
    if h % 2 == 0:
        h += 1
    height_map = [[0] * h for _ in range(w)]
    _init_height_map(height_map, rng)
    _iterate(height_map, rng)
    return height_map


def _init_height_map(m: HeightMap, rng: LCGRandom) -> None:
    w, h = len(m), len(m[0])
    for x, y in ((0, 0), (0, h - 1), (w - 1, 0), (w - 1, h - 1)):
        m[x][y] = rng.rand_in_range(*_CORNER_RANGE)
    m[w // 2][h // 2] = rng.rand_in_range(*_CENTER_RANGE)
    for x in (w // 4, w // 2, w // 2 + w // 4):
        for y in (h // 4, h // 2, h // 2 + h // 4):
            m[x][y] = rng.rand_in_range(*_SUBCENTER_RANGE)


def _iterate(m: HeightMap, rng: LCGRandom) -> None:
    w, h = len(m), len(m[0])
    size = min(w, h)
    while size > 2:
        for x in range(0, w - size + 1, size - 1):
            for y in range(0, h - size + 1, size - 1):
                _square_midpoint(m, x, y, size, _SPREAD, _SPREAD, rng)
        size = size // 2 + 1


def _jitter(values: tuple[int, ...], spread: int, rng: LCGRandom) -> int:
    return rng.rand_in_range(min(values) - spread, max(values) + spread)


def _square_midpoint(
    m: HeightMap, x: int, y: int, size: int, spread_border: int, spread_center: int, rng: LCGRandom
) -> None:
    # Both bounds are checked against the width of the map.
    if x < 0 or y < 0 or x + size > len(m) or y + size > len(m):
        return
    mid_x = x + size // 2
    right_x = x + size - 1
    mid_y = y + size // 2
    bot_y = y + size - 1

    def fill(cx: int, cy: int, a: tuple[int, int], b: tuple[int, int]) -> None:
        if m[cx][cy] == 0:
            m[cx][cy] = _jitter((m[a[0]][a[1]], m[b[0]][b[1]]), spread_border, rng)

    fill(x, mid_y, (x, y), (x, bot_y))
    fill(right_x, mid_y, (right_x, y), (right_x, bot_y))
    fill(mid_x, y, (x, y), (right_x, y))
    fill(mid_x, bot_y, (x, bot_y), (right_x, bot_y))
    if m[mid_x][mid_y] == 0:
        m[mid_x][mid_y] = _jitter(
            (m[x][mid_y], m[right_x][mid_y], m[mid_x][y], m[mid_x][bot_y]), spread_center, rng
        )
    if size % 2 == 0:
        fill(x, mid_y - 1, (x, y), (x, bot_y))
        fill(right_x, mid_y - 1, (right_x, y), (right_x, bot_y))
        fill(mid_x - 1, y, (x, y), (right_x, y))
        fill(mid_x - 1, bot_y, (x, bot_y), (right_x, bot_y))
        center = m[mid_x][mid_y]
        m[mid_x - 1][mid_y - 1] = center
        m[mid_x][mid_y - 1] = center
        m[mid_x - 1][mid_y] = center