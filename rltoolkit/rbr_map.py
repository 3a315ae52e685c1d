"""Tile map and low-level carving operations for the room-by-room dungeon generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

from .fib_random import FibRandom

Coords = tuple[int, int]

_ORTHOGONAL = ((-1, 0), (0, -1), (0, 1), (1, 0))


class GenerationError(RuntimeError):
    """Raised when the generator cannot place something it requires."""


class TileType(IntEnum):
    WALL = 0
    FLOOR = 1
    DOOR = 2
    NEXT_LEVEL_STAIR = 3
    PREV_LEVEL_STAIR = 4
    UNKNOWN = 5


@dataclass
class Tile:
    """One map cell: its type, the room it belongs to and its security area."""

    tile_type: TileType = TileType.WALL
    room_id: int = 0
    sec_area: int = 0

    def set_properties(
        self,
        tile_type: Optional[TileType] = None,
        room_id: Optional[int] = None,
        sec_area: Optional[int] = None,
    ) -> None:
        """Update the given properties; those passed as None are left unchanged."""
        if tile_type is not None:
            self.tile_type = tile_type
        if room_id is not None:
            self.room_id = room_id
        if sec_area is not None:
            self.sec_area = sec_area

    def to_char(self) -> str:
        """Return the map character; locked doors show the digit of their area."""
        if self.tile_type == TileType.FLOOR:
            return "."
        if self.tile_type == TileType.WALL:
            return "#"
        if self.tile_type == TileType.NEXT_LEVEL_STAIR:
            return ">"
        if self.tile_type == TileType.PREV_LEVEL_STAIR:
            return "<"
        if self.tile_type == TileType.DOOR:
            return "+" if self.sec_area == 0 else str(self.sec_area)[0]
        return "?"


class RBRMap:
    """A map of tiles indexed [x][y], initially all walls, with carving helpers."""

    def __init__(self, width: int, height: int, rng: FibRandom) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("map dimensions must be positive")
        self.mapw = width
        self.maph = height
        self.rng = rng
        self.tiles = [[Tile() for _ in range(height)] for _ in range(width)]
        self.min_clength = 2
        self.max_clength = width - 2
        self.min_rsize = 3
        self.max_rsize = (width - 2) // 7
        self.room_size_bias = 2 * self.min_rsize
        self.num_sec_areas = 1

    # access

    def tile_at(self, x: int, y: int) -> Optional[Tile]:
        """Return the tile at (x, y), or None outside the map."""
        if 0 <= x < self.mapw and 0 <= y < self.maph:
            return self.tiles[x][y]
        return None

    def map_chars(self) -> list[list[str]]:
        """Return the map characters indexed [x][y]."""
        return [[tile.to_char() for tile in column] for column in self.tiles]

    def _tile(self, x: int, y: int) -> Tile:
        if not (0 <= x < self.mapw and 0 <= y < self.maph):
            raise IndexError(f"coordinates ({x}, {y}) are outside the map")
        return self.tiles[x][y]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.mapw and 0 <= y < self.maph

    def _orthogonal_neighbors(self, x: int, y: int) -> Iterator[Tile]:
        for vx, vy in _ORTHOGONAL:
            if self._in_bounds(x + vx, y + vy):
                yield self.tiles[x + vx][y + vy]

    # digging

    @staticmethod
    def _normalize_rect(x: int, y: int, w: int, h: int) -> tuple[int, int, int, int]:
        if w < 0:
            x, w = x + w + 1, -w
        if h < 0:
            y, h = y + h + 1, -h
        return x, y, w, h

    def _diggable_cells(self, x: int, y: int, w: int, h: int) -> Iterator[Tile]:
        x, y, w, h = self._normalize_rect(x, y, w, h)
        for cx in range(x, x + w):
            for cy in range(y, y + h):
                # never dig the outermost rows and columns
                if cx * cy != 0 and cx < self.mapw - 1 and cy < self.maph - 1:
                    yield self._tile(cx, cy)

    def _dig_space(self, x: int, y: int, w: int, h: int, room_id: int, sec_area: int) -> None:
        for tile in self._diggable_cells(x, y, w, h):
            tile.set_properties(TileType.FLOOR, room_id, sec_area)

    def _set_room_id_for_rect(self, x: int, y: int, w: int, h: int, room_id: int) -> None:
        for tile in self._diggable_cells(x, y, w, h):
            tile.room_id = room_id

    def _count_tile_types_around(self, tile_type: TileType, x: int, y: int, diagonals: bool) -> int:
        count = 0
        for vx in (-1, 0, 1):
            for vy in (-1, 0, 1):
                if vx == 0 and vy == 0:
                    continue
                if not diagonals and vx * vy != 0:
                    continue
                cx, cy = x + vx, y + vy
                if self._in_bounds(cx, cy) and self.tiles[cx][cy].tile_type == tile_type:
                    count += 1
        return count

    def _is_space_of_type(
        self, x: int, y: int, w: int, h: int, outline: int, tile_type: TileType
    ) -> bool:
        x, y, w, h = self._normalize_rect(x, y, w, h)
        x -= outline
        y -= outline
        w += 2 * outline
        h += 2 * outline
        if x < 0 or y < 0 or x + w >= self.mapw or y + h >= self.maph:
            return False
        return all(
            self.tiles[cx][cy].tile_type == tile_type
            for cx in range(x, x + w)
            for cy in range(y, y + h)
        )

    # doors

    def _place_door_if_needed(self, x: int, y: int) -> None:
        if self._is_adjacent_to_different_room_ids(x, y) or self._is_adjacent_to_different_sec_areas(x, y):
            self._tile(x, y).tile_type = TileType.DOOR

    def _finalize_doors_sec_area(self) -> None:
        for x in range(self.mapw):
            for y in range(self.maph):
                tile = self.tiles[x][y]
                if tile.tile_type != TileType.DOOR:
                    continue
                if self._is_adjacent_to_different_sec_areas(x, y):
                    tile.sec_area = self._highest_sec_area_near(x, y)
                else:
                    # doors between tiles of one area stay unlocked
                    tile.sec_area = 0

    def _place_random_doors(self, doors_num: int) -> None:
        for _ in range(doors_num):
            candidates = [
                (x, y)
                for x in range(1, self.mapw)
                for y in range(1, self.maph)
                if self.tiles[x][y].tile_type == TileType.WALL
                and self._count_tile_types_around(TileType.FLOOR, x, y, False) == 2
                and self._count_tile_types_around(TileType.DOOR, x, y, False) == 0
            ]
            if not candidates:
                return
            x, y = candidates[self.rng.rand(len(candidates))]
            self._place_door_if_needed(x, y)

    @staticmethod
    def _differs(values: Iterator[int]) -> bool:
        current = -1
        for value in values:
            if current == -1:
                current = value
                continue
            if value != current:
                return True
        return False

    def _is_adjacent_to_different_room_ids(self, x: int, y: int) -> bool:
        return self._differs(
            t.room_id for t in self._orthogonal_neighbors(x, y) if t.tile_type != TileType.WALL
        )

    def _is_adjacent_to_different_sec_areas(self, x: int, y: int) -> bool:
        return self._differs(
            t.sec_area for t in self._orthogonal_neighbors(x, y) if t.tile_type != TileType.WALL
        )

    def _highest_sec_area_near(self, x: int, y: int) -> int:
        return max((t.sec_area for t in self._orthogonal_neighbors(x, y)), default=0) if any(
            True for _ in self._orthogonal_neighbors(x, y)
        ) and max(t.sec_area for t in self._orthogonal_neighbors(x, y)) > 0 else 0

    # pickers

    def _diggable_directions_from(self, x: int, y: int, allow_continuation: bool) -> list[Coords]:
        directions = []
        for vx, vy in _ORTHOGONAL:
            if not self._in_bounds(x + vx, y + vy):
                continue
            if self.tiles[x + vx][y + vy].tile_type != TileType.WALL:
                continue
            if allow_continuation or self._tile(x - vx, y - vy).tile_type != TileType.FLOOR:
                directions.append((vx, vy))
        return directions

    def _is_suitable_for_junction(self, x: int, y: int, deadend_only: bool) -> bool:
        if self._tile(x, y).tile_type != TileType.WALL:
            return False
        floors = self._count_tile_types_around(TileType.FLOOR, x, y, False)
        if deadend_only:
            walls = self._count_tile_types_around(TileType.WALL, x, y, True)
            return walls == 7 and floors == 1
        walls = self._count_tile_types_around(TileType.WALL, x, y, False)
        return walls == 3 and floors == 1

    def _pick_junction_tile(
        self, from_x: int, from_y: int, to_x: int, to_y: int, deadend_only: bool
    ) -> Optional[Coords]:
        """Pick a random wall suitable for starting a corridor, or None."""
        candidates = [
            (x, y)
            for x in range(from_x, to_x)
            for y in range(from_y, to_y)
            if self._is_suitable_for_junction(x, y, deadend_only)
        ]
        if not candidates:
            return None
        return candidates[self.rng.rand(len(candidates))]

    def _pick_junction_tile_for_potential_room(
        self, rx: int, ry: int, w: int, h: int, deadend_only: bool
    ) -> Optional[Coords]:
        """Pick a junction wall on the outline of a prospective room, or None."""
        candidates: list[Coords] = []
        for x in range(rx, rx + w):
            for cell in ((x, ry - 1), (x, ry + h)):
                if self._is_suitable_for_junction(*cell, deadend_only):
                    candidates.append(cell)
        for y in range(ry, ry + h):
            for cell in ((rx - 1, y), (rx + w, y)):
                if self._is_suitable_for_junction(*cell, deadend_only):
                    candidates.append(cell)
        if not candidates:
            return None
        return candidates[self.rng.rand(len(candidates))]

    def _coords_for_room_to_fit(self, w: int, h: int) -> list[Coords]:
        """Return every top-left corner where a w x h room fits inside solid wall."""
        return [
            (x, y)
            for x in range(2, self.mapw - 1 - w)
            for y in range(2, self.maph - 1 - h)
            if self._is_space_of_type(x, y, w, h, 1, TileType.WALL)
        ]

    # stairs

    def _place_stairs(self, num_up: int, num_down: int, maximize_exit_sec_level: bool) -> None:
        for _ in range(num_up):
            if not self._place_stair_at_random(TileType.PREV_LEVEL_STAIR, 0, 0):
                raise GenerationError("no entrance placed")
        max_sec = self.num_sec_areas - 1
        min_sec = max_sec if maximize_exit_sec_level else 0
        for _ in range(num_down):
            self._place_stair_at_random(TileType.NEXT_LEVEL_STAIR, min_sec, max_sec)

    def _place_stair_at_random(self, tile_type: TileType, min_sec: int, max_sec: int) -> bool:
        candidates = [
            (x, y)
            for x in range(1, self.mapw)
            for y in range(1, self.maph)
            if self.tiles[x][y].tile_type == TileType.FLOOR
            and min_sec <= self.tiles[x][y].sec_area <= max_sec
            and self._count_tile_types_around(TileType.FLOOR, x, y, True) > 2
        ]
        if not candidates:
            return False
        x, y = candidates[self.rng.rand(len(candidates))]
        self.tiles[x][y].set_properties(tile_type)
        return True

    # corridors

    def _dig_corridor_if_possible(
        self, x: int, y: int, dir_x: int, dir_y: int, length: int, sec_area: int, force_no_deadend: bool
    ) -> bool:
        w, h = length * dir_x, length * dir_y
        # shrink the checked space so corridors may end in other floors
        w_dec, h_dec = 2 * dir_x, 2 * dir_y
        if w == 0:
            w_dec, w = 0, 1
        if h == 0:
            h_dec, h = 0, 1
        if not self._is_space_of_type(x + dir_x, y + dir_y, w - w_dec, h - h_dec, 1, TileType.WALL):
            return False
        end_x = x - dir_x + length * dir_x
        end_y = y - dir_y + length * dir_y
        margin = 2 * self.min_rsize
        if end_x < margin or end_x > self.mapw - margin or end_y < margin or end_y > self.maph - margin:
            return False
        touches_floor = self._count_tile_types_around(TileType.FLOOR, end_x, end_y, False) > 0
        if force_no_deadend:
            ok = touches_floor
        else:
            ok = touches_floor or self._count_tile_types_around(TileType.FLOOR, end_x, end_y, True) == 0
        if ok:
            self._dig_space(x, y, w, h, 0, sec_area)
        return ok

    def _place_corridor_from(self, x: int, y: int, force_no_deadend: bool) -> bool:
        allow_continuation = self.rng.one_chance_from(4)
        directions = self._diggable_directions_from(x, y, allow_continuation)
        if not directions:
            return False
        start = self.rng.rand(len(directions))
        index = start
        digged = False
        while not digged:
            vx, vy = directions[index]
            length = self.max_clength
            for _ in range(self.max_clength):
                end_x, end_y = x + vx * length - vx, y + vy * length - vy
                sec_area = min(self._highest_sec_area_near(x, y), self._highest_sec_area_near(end_x, end_y))
                digged = self._dig_corridor_if_possible(x, y, vx, vy, length, sec_area, force_no_deadend)
                if digged or length == self.min_clength:
                    if digged and length > 3:
                        self._place_door_if_needed(end_x, end_y)
                    break
                length -= 1
            index = (index + 1) % len(directions)
            if index == start and not digged:
                return False
        self._place_door_if_needed(x, y)
        return True