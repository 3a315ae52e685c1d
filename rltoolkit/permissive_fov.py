"""Precise permissive field of view, computed quadrant by quadrant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .geometry import are_coords_in_range, are_coords_in_rect

Opacity = Callable[[int, int], bool]
VisibilityMap = list[list[bool]]
Offset = tuple[int, int]

_QUADRANTS = ((1, 1), (-1, 1), (-1, -1), (1, -1))


@dataclass
class _Line:
    near: Offset
    far: Offset

    def _relative_slope(self, point: Offset) -> int:
        (nx, ny), (fx, fy) = self.near, self.far
        px, py = point
        return (fy - ny) * (fx - px) - (fy - py) * (fx - nx)

    def is_below(self, point: Offset) -> bool:
        return self._relative_slope(point) > 0

    def is_below_or_contains(self, point: Offset) -> bool:
        return self._relative_slope(point) >= 0

    def is_above(self, point: Offset) -> bool:
        return self._relative_slope(point) < 0

    def is_above_or_contains(self, point: Offset) -> bool:
        return self._relative_slope(point) <= 0

    def contains(self, point: Offset) -> bool:
        return self._relative_slope(point) == 0


@dataclass(frozen=True)
class _Bump:
    location: Offset
    parent: Optional[_Bump]


@dataclass(eq=False)
class _Field:
    steep: _Line
    shallow: _Line
    steep_bump: Optional[_Bump] = None
    shallow_bump: Optional[_Bump] = None

    def copy(self) -> _Field:
        return _Field(
            steep=_Line(self.steep.near, self.steep.far),
            shallow=_Line(self.shallow.near, self.shallow.far),
            steep_bump=self.steep_bump,
            shallow_bump=self.shallow_bump,
        )


class _QuadrantScan:
    def __init__(
        self,
        visible: VisibilityMap,
        opaque: Opacity,
        map_w: int,
        map_h: int,
        source: Offset,
        range_limit: int,
        quadrant: Offset,
    ) -> None:
        self._visible = visible
        self._opaque = opaque
        self._w = map_w
        self._h = map_h
        self._source = source
        self._range = range_limit
        self._quadrant = quadrant
        self._fields: list[_Field] = []

    def _index(self, field: _Field) -> Optional[int]:
        for index, candidate in enumerate(self._fields):
            if candidate is field:
                return index
        return None

    def _next(self, field: _Field) -> Optional[_Field]:
        index = self._index(field)
        if index is None or index + 1 >= len(self._fields):
            return None
        return self._fields[index + 1]

    def _remove(self, field: _Field) -> Optional[_Field]:
        """Remove ``field`` and return the field that followed it."""
        index = self._index(field)
        if index is None:
            return None
        del self._fields[index]
        return self._fields[index] if index < len(self._fields) else None

    def _insert_before(self, field: _Field, new_field: _Field) -> _Field:
        index = self._index(field)
        if index is None:
            raise ValueError("field is not in the active list")
        self._fields.insert(index, new_field)
        return new_field

    def _is_blocked(self, pos: Offset) -> bool:
        px, py = pos
        if self._range >= 0 and not are_coords_in_range(px, py, 0, 0, self._range):
            return True
        x = px * self._quadrant[0] + self._source[0]
        y = py * self._quadrant[1] + self._source[1]
        if are_coords_in_rect(x, y, 0, 0, self._w, self._h):
            self._visible[x][y] = True
            return bool(self._opaque(x, y))
        return True  # outside the map counts as opaque

    def compute(self) -> None:
        w, h = self._w, self._h
        self._fields = [_Field(steep=_Line((1, 0), (0, h)), shallow=_Line((0, 1), (w, 0)))]
        if self._quadrant == (1, 1):
            self._is_blocked((0, 0))
        for i in range(1, w + h):
            if not self._fields:
                break
            current: Optional[_Field] = self._fields[0]
            for j in range(max(0, i - w), min(i, h) + 1):
                current = self._visit_square((i - j, j), current)

    def _visit_square(self, dest: Offset, current: Optional[_Field]) -> Optional[_Field]:
        top_left = (dest[0], dest[1] + 1)
        bottom_right = (dest[0] + 1, dest[1])

        # The square is above the field: ignored here, steeper fields may need it.
        while current is not None and current.steep.is_below_or_contains(bottom_right):
            current = self._next(current)
        if current is None:
            return None
        # The square is below the field.
        if current.shallow.is_above_or_contains(top_left):
            return current
        if not self._is_blocked(dest):
            return current

        shallow_hit = current.shallow.is_above(bottom_right)
        steep_hit = current.steep.is_below(top_left)
        if shallow_hit and steep_hit:
            return self._remove(current)
        if shallow_hit:
            self._add_shallow_bump(top_left, current)
            return self._check_field(current)
        if steep_hit:
            self._add_steep_bump(bottom_right, current)
            return self._check_field(current)

        # The square lies between both lines: split the field in two.
        steeper = current
        shallower = self._insert_before(current, current.copy())
        self._add_steep_bump(bottom_right, shallower)
        self._check_field(shallower)
        self._add_shallow_bump(top_left, steeper)
        return self._check_field(steeper)

    @staticmethod
    def _add_shallow_bump(point: Offset, field: _Field) -> None:
        field.shallow.far = point
        field.shallow_bump = _Bump(point, field.shallow_bump)
        bump = field.steep_bump
        while bump is not None:
            if field.shallow.is_above(bump.location):
                field.shallow.near = bump.location
            bump = bump.parent

    @staticmethod
    def _add_steep_bump(point: Offset, field: _Field) -> None:
        field.steep.far = point
        field.steep_bump = _Bump(point, field.steep_bump)
        bump = field.shallow_bump
        while bump is not None:
            if field.steep.is_below(bump.location):
                field.steep.near = bump.location
            bump = bump.parent

    def _check_field(self, field: _Field) -> Optional[_Field]:
        """Drop the field if its lines became colinear through an extremity."""
        shallow = field.shallow
        if (
            shallow.contains(field.steep.near)
            and shallow.contains(field.steep.far)
            and (shallow.contains((0, 1)) or shallow.contains((1, 0)))
        ):
            return self._remove(field)
        return field


def permissive_fov(
    from_x: int, from_y: int, radius: int, map_w: int, map_h: int, opaque: Opacity
) -> VisibilityMap:
    """Compute the cells visible from (from_x, from_y); the result is indexed [x][y].

    A negative radius means no range limit. Cells outside the map count as opaque.
    """
    visible = [[False] * map_h for _ in range(map_w)]
    for quadrant in _QUADRANTS:
        _QuadrantScan(visible, opaque, map_w, map_h, (from_x, from_y), radius, quadrant).compute()
    return visible