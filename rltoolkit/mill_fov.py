"""Field of view using beveled-wall octant scanning with rational slopes."""

from __future__ import annotations

from typing import Callable, NamedTuple

from .geometry import are_coords_in_range, are_coords_in_rect

Opacity = Callable[[int, int], bool]
VisibilityMap = list[list[bool]]

# (a, b, c, d): map x = fx + a*col + b*row, map y = fy + c*col + d*row
_OCTANTS = (
    (1, 0, 0, -1),
    (0, 1, -1, 0),
    (0, -1, -1, 0),
    (-1, 0, 0, -1),
    (-1, 0, 0, 1),
    (0, -1, 1, 0),
    (0, 1, 1, 0),
    (1, 0, 0, 1),
)


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class _Slope(NamedTuple):
    """The slope y/x of a vector from the origin."""

    y: int
    x: int

    def greater(self, y: int, x: int) -> bool:
        return self.y * x > self.x * y

    def greater_or_equal(self, y: int, x: int) -> bool:
        return self.y * x >= self.x * y

    def less(self, y: int, x: int) -> bool:
        return self.y * x < self.x * y


class _OctantScanner:
    def __init__(
        self,
        visible: VisibilityMap,
        opaque: Opacity,
        map_w: int,
        map_h: int,
        from_x: int,
        from_y: int,
        range_limit: int,
        octant: tuple[int, int, int, int],
    ) -> None:
        self._visible = visible
        self._opaque = opaque
        self._w = map_w
        self._h = map_h
        self._fx = from_x
        self._fy = from_y
        self._range = range_limit
        self._octant = octant

    def _to_map(self, x: int, y: int) -> tuple[int, int]:
        a, b, c, d = self._octant
        return self._fx + a * x + b * y, self._fy + c * x + d * y

    def _blocks(self, x: int, y: int) -> bool:
        nx, ny = self._to_map(x, y)
        if are_coords_in_rect(nx, ny, 0, 0, self._w, self._h):
            return bool(self._opaque(nx, ny))
        return True

    def _set_visible(self, x: int, y: int) -> None:
        nx, ny = self._to_map(x, y)
        if are_coords_in_rect(nx, ny, 0, 0, self._w, self._h):
            self._visible[nx][ny] = True

    def compute(self, x: int, top: _Slope, bottom: _Slope) -> None:
        range_limit = self._range
        while x <= range_limit:
            if top.x == 1:
                top_y = x
            else:
                top_y = _trunc_div((x * 2 - 1) * top.y + top.x, top.x * 2)
                if self._blocks(x, top_y):
                    if top.greater_or_equal(top_y * 2 + 1, x * 2) and not self._blocks(x, top_y + 1):
                        top_y += 1
                else:
                    ax = x * 2
                    if self._blocks(x + 1, top_y + 1):
                        ax += 1
                    if top.greater(top_y * 2 + 1, ax):
                        top_y += 1

            if bottom.y == 0:
                bottom_y = 0
            else:
                bottom_y = _trunc_div((x * 2 - 1) * bottom.y + bottom.x, bottom.x * 2)
                if (
                    bottom.greater_or_equal(bottom_y * 2 + 1, x * 2)
                    and self._blocks(x, bottom_y)
                    and not self._blocks(x, bottom_y + 1)
                ):
                    bottom_y += 1

            was_opaque = -1  # -1: not applicable, 0: clear, 1: opaque
            for y in range(top_y, bottom_y - 1, -1):
                if not are_coords_in_range(x, y, 0, 0, range_limit):
                    continue
                is_opaque = self._blocks(x, y)
                is_visible = is_opaque or (
                    (y != top_y or top.greater(y * 4 - 1, x * 4 + 1))
                    and (y != bottom_y or bottom.less(y * 4 + 1, x * 4 - 1))
                )
                if is_visible:
                    self._set_visible(x, y)

                if x == range_limit:
                    continue
                if is_opaque:
                    if was_opaque == 0:
                        nx, ny = x * 2, y * 2 + 1
                        if self._blocks(x, y + 1):
                            nx -= 1
                        if top.greater(ny, nx):
                            if y == bottom_y:
                                bottom = _Slope(ny, nx)
                                break
                            self.compute(x + 1, top, _Slope(ny, nx))
                        elif y == bottom_y:
                            return
                    was_opaque = 1
                else:
                    if was_opaque > 0:
                        nx, ny = x * 2, y * 2 + 1
                        if self._blocks(x + 1, y + 1):
                            nx += 1
                        if bottom.greater_or_equal(ny, nx):
                            return
                        top = _Slope(ny, nx)
                    was_opaque = 0

            if was_opaque != 0:
                break
            x += 1


def mill_fov(
    from_x: int, from_y: int, range_limit: int, map_w: int, map_h: int, opaque: Opacity
) -> VisibilityMap:
    """Compute the cells visible from (from_x, from_y); the result is indexed [x][y].

    Cells outside the map count as opaque.
    """
    visible = [[False] * map_h for _ in range(map_w)]
    if are_coords_in_rect(from_x, from_y, 0, 0, map_w, map_h):
        visible[from_x][from_y] = True
    for octant in _OCTANTS:
        scanner = _OctantScanner(visible, opaque, map_w, map_h, from_x, from_y, range_limit, octant)
        scanner.compute(1, _Slope(1, 1), _Slope(0, 1))
    return visible