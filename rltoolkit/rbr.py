"""Room-by-room dungeon generator with security areas, vaults and stairs."""

from __future__ import annotations

import os
from typing import Optional, Union

from .fib_random import FibRandom
from .rbr_map import Coords, RBRMap, TileType
from .vault import Vault, read_vaults, vault_symbol_to_tile_type

PathLike = Union[str, "os.PathLike[str]"]


class RBR(RBRMap):
    """Generates a dungeon by growing rooms and corridors out of an initial layout.

    A negative seed means seeding from the current time.
    """

    def __init__(
        self,
        width: int,
        height: int,
        sec_areas: int = 1,
        vaults_path: Optional[PathLike] = None,
        roomvaults_path: Optional[PathLike] = None,
        seed: int = -1,
    ) -> None:
        if sec_areas < 1:
            raise ValueError("at least one security area is required")
        super().__init__(width, height, FibRandom(seed))
        self.vaults: list[Vault] = read_vaults(vaults_path) if vaults_path else []
        self.roomvaults: list[Vault] = read_vaults(roomvaults_path) if roomvaults_path else []
        self.num_sec_areas = sec_areas

        map_area = width * height
        mean_room_area = self.room_size_bias * self.room_size_bias
        self.min_rooms = map_area // (3 * mean_room_area // 2)
        map_area -= self.min_rooms * mean_room_area
        self.min_corrs = map_area // height
        self.placement_tries_limit = (self.min_rooms + self.min_corrs) * 10

        self.num_placed_rooms = 0
        self.num_placed_corridors = 0
        self.num_placed_vaults = 0

    # generation

    def generate(self) -> None:
        """Fill the map with rooms, corridors, doors and stairs."""
        rng = self.rng
        self.num_placed_rooms, self.num_placed_corridors = self._place_initial_layout()

        increase_sec_area_each = self.min_rooms // (5 * self.num_sec_areas)
        increase_sec_area_each *= rng.rand_in_range(1, 4)
        if increase_sec_area_each == 0:
            increase_sec_area_each = 1
        next_rooms_for_sec_area = increase_sec_area_each
        current_sec_area = 0

        for _ in range(self.placement_tries_limit):
            if self.num_placed_rooms >= self.min_rooms and self.num_placed_corridors >= self.min_corrs:
                break
            if (
                self.num_placed_rooms >= next_rooms_for_sec_area
                and current_sec_area < self.num_sec_areas - 1
            ):
                current_sec_area += 1
                next_rooms_for_sec_area += increase_sec_area_each

            rooms_remaining = self.min_rooms - self.num_placed_rooms
            corrs_remaining = self.min_corrs - self.num_placed_corridors
            place_room = rng.rand_in_range(1, rooms_remaining + corrs_remaining) > corrs_remaining
            deadend_only = rng.rand_in_range(0, 2) != 0

            if place_room:
                if (
                    rng.one_chance_from(2)
                    or self.num_placed_vaults >= len(self.vaults)
                    or not self.roomvaults
                ):
                    rng.one_chance_from(3)  # whether a vault is wanted; rooms always try one
                    digged = self._place_room_by_picking(self.num_placed_rooms + 1, current_sec_area, False)
                else:
                    digged = self._place_roomvault_by_picking(self.num_placed_rooms + 1, current_sec_area, False)
                if digged:
                    self.num_placed_rooms += 1
            else:
                # corridors keep away from the map edges to reduce dead ends
                bias = self.room_size_bias
                bounds = (bias, bias, self.mapw - bias, self.maph - bias)
                junction = self._pick_junction_tile(*bounds, deadend_only)
                if junction is None:
                    junction = self._pick_junction_tile(*bounds, False)
                force_no_deadend = (
                    self.num_placed_corridors > self.min_corrs // 4
                    or self.num_placed_rooms > self.min_rooms // 2
                )
                if junction is not None and self._place_corridor_from(*junction, force_no_deadend):
                    self.num_placed_corridors += 1

        doors_limit = self.min_rooms // 5
        self._place_random_doors(rng.rand(doors_limit) if doors_limit > 0 else 0)
        self._finalize_doors_sec_area()
        self._place_stairs(1, 2, True)

    # initial layouts

    def _place_initial_layout(self) -> tuple[int, int]:
        """Dig the starting layout; return the numbers of rooms and corridors placed."""
        layout = self.rng.rand_in_range(0, 3)
        if layout == 0:
            return self._place_initial_corridor_rings(self.rng.rand_in_range(1, 5))
        if layout == 1:
            return self._place_initial_two_interconnected_rooms()
        if layout == 2:
            return self._place_initial_four_interconnected_rooms()
        return self._place_initial_large_room()

    def _place_initial_large_room(self) -> tuple[int, int]:
        rng = self.rng
        x = rng.rand_in_range(3, self.mapw // 4)
        y = rng.rand_in_range(self.maph // 4, self.maph // 2)
        w = self.mapw - 2 * x - 2  # deliberately larger than the room size limit
        h = rng.rand_in_range(self.maph // 5, self.maph // 2 - 1)
        self._dig_space(x, y, w, h, 1, 0)
        return 1, 0

    def _place_initial_two_interconnected_rooms(self) -> tuple[int, int]:
        rng = self.rng
        w = rng.rand_in_range(self.max_rsize // 2, self.max_rsize)
        x1 = rng.rand_in_range(1, self.mapw // 3)
        x2 = self.mapw - x1 - w
        h = rng.rand_in_range(self.max_rsize // 2, self.max_rsize)
        y = rng.rand_in_range(self.maph // 4, 3 * self.maph // 4 - h)
        self._dig_space(x1, y, w, h, 0, 0)
        self._dig_space(x2, y, w, h, 1, 0)
        corridors = max(rng.rand_in_range(1, h // 3), 1)
        for _ in range(corridors):
            corr_y = rng.rand_in_range(y, y + h - 1)
            self._dig_space(x1 + w, corr_y, x2 - x1 - w, 1, 0, 0)
        return 2, corridors

    def _place_initial_four_interconnected_rooms(self) -> tuple[int, int]:
        rng = self.rng
        w = rng.rand_in_range(self.max_rsize // 2, self.max_rsize)
        x1 = rng.rand_in_range(1, self.mapw // 3)
        x2 = self.mapw - x1 - w
        h = rng.rand_in_range(self.max_rsize // 2, self.max_rsize)
        y1 = rng.rand_in_range(1, self.maph // 3)
        y2 = self.maph - y1 - h
        for room_id, (rx, ry) in enumerate(((x1, y1), (x2, y1), (x1, y2), (x2, y2)), start=1):
            self._dig_space(rx, ry, w, h, room_id, 0)
        corridors = max(rng.rand_in_range(1, h // 3), 1)
        for _ in range(corridors):
            corr_y = rng.rand_in_range(y1, y1 + h - 1)
            self._dig_space(x1 + w, corr_y, x2 - x1 - w, 1, 0, 0)
            self._dig_space(x1 + w, self.maph - corr_y - 1, x2 - x1 - w, 1, 0, 0)
            corr_x = rng.rand_in_range(x1, x1 + w - 1)
            self._dig_space(corr_x, y1 + h, 1, y2 - y1 - h, 0, 0)
            self._dig_space(self.mapw - corr_x - 1, y1 + h, 1, y2 - y1 - h, 0, 0)
        return 4, 4 * corridors

    def _place_initial_corridor_rings(self, number: int) -> tuple[int, int]:
        rng = self.rng
        for ring in range(number):
            x = rng.rand_in_range(1, self.mapw - self.min_rsize - 1)
            y = rng.rand_in_range(1, self.maph - self.min_rsize - 1)
            w = rng.rand_in_range(self.min_rsize, self.mapw - x - 2)
            h = rng.rand_in_range(self.min_rsize, self.maph - y - 2)
            if ring == 0:
                # the first ring spans most of the map
                x = rng.rand_in_range(1, self.max_rsize)
                y = rng.rand_in_range(1, self.max_rsize)
                w = rng.rand_in_range(self.mapw // 2, self.mapw - x - 2)
                h = rng.rand_in_range(self.maph // 2, self.maph - y - 2)
            if w < 0 or h < 0:
                continue
            for cx in range(x, x + w + 1):
                self._dig_space(cx, y, 1, 1, 0, 0)
                self._dig_space(cx, y + h, 1, 1, 0, 0)
            for cy in range(y, y + h + 1):
                self._dig_space(x, cy, 1, 1, 0, 0)
                self._dig_space(x + w, cy, 1, 1, 0, 0)
        return 0, number * 4

    # rooms

    @staticmethod
    def _rotate_from(coords: list[Coords], start: int) -> list[Coords]:
        return coords[start:] + coords[:start]

    def _place_room_by_picking(self, room_id: int, sec_area: int, deadend_only: bool) -> bool:
        rng = self.rng
        room_w = rng.biased_rand_in_range(self.min_rsize, self.max_rsize, self.room_size_bias, 100)
        room_h = rng.biased_rand_in_range(self.min_rsize, self.max_rsize, self.room_size_bias, 100)
        coords = self._coords_for_room_to_fit(room_w, room_h)
        if not coords:
            return False
        for x, y in self._rotate_from(coords, rng.rand(len(coords))):
            junction = self._pick_junction_tile_for_potential_room(x, y, room_w, room_h, deadend_only)
            if junction is not None:
                self._dig_space(x, y, room_w, room_h, room_id, sec_area)
                self._tile(*junction).tile_type = TileType.DOOR
                self._try_place_vault_of_size_at(x + 1, y + 1, room_w - 2, room_h - 2)
                return True
        return False

    # room vaults

    def _pick_junction_tile_for_vault(
        self, rx: int, ry: int, rows: list[str], deadend_only: bool
    ) -> Optional[Coords]:
        """Pick a junction wall next to a floor cell on the vault's edge, or None."""
        h, w = len(rows), len(rows[0])
        candidates: list[Coords] = []
        for x in range(rx, rx + w):
            if rows[0][x - rx] == "." and self._is_suitable_for_junction(x, ry - 1, deadend_only):
                candidates.append((x, ry - 1))
            if rows[h - 1][x - rx] == "." and self._is_suitable_for_junction(x, ry + h, deadend_only):
                candidates.append((x, ry + h))
        for y in range(ry, ry + h):
            if rows[y - ry][0] == "." and self._is_suitable_for_junction(rx - 1, y, deadend_only):
                candidates.append((rx - 1, y))
            if rows[y - ry][w - 1] == "." and self._is_suitable_for_junction(rx + w, y, deadend_only):
                candidates.append((rx + w, y))
        if not candidates:
            return None
        return candidates[self.rng.rand(len(candidates))]

    def _place_roomvault_by_picking(self, room_id: int, sec_area: int, deadend_only: bool) -> bool:
        rng = self.rng
        rows = self.roomvaults[rng.rand(len(self.roomvaults))].random_strings(rng)
        room_h, room_w = len(rows), len(rows[0])
        coords = self._coords_for_room_to_fit(room_w, room_h)
        if not coords:
            return False
        for x, y in self._rotate_from(coords, rng.rand(len(coords))):
            junction = self._pick_junction_tile_for_vault(x, y, rows, deadend_only)
            if junction is not None:
                self._tile(*junction).tile_type = TileType.DOOR
                self._place_vault_rows(rows, x, y, sec_area)
                return True
        return False

    # vaults

    def _place_vault_rows(self, rows: list[str], x: int, y: int, sec_area: int) -> None:
        for dy, row in enumerate(rows):
            for dx, symbol in enumerate(row):
                if symbol != " ":
                    self._tile(x + dx, y + dy).set_properties(
                        vault_symbol_to_tile_type(symbol), None, sec_area
                    )
            self.num_placed_vaults += 1

    def _try_place_vault_of_size_at(self, x: int, y: int, w: int, h: int) -> None:
        candidates: list[Vault] = []
        for vault in self.vaults:
            if vault.is_of_size(w, h):
                candidates.append(vault)
            if w > h and w >= 5 and vault.is_of_size(w - 2, h):
                candidates.append(vault)
            if h > w and h >= 5 and vault.is_of_size(w, h - 2):
                candidates.append(vault)
        if not candidates:
            return
        vault = candidates[self.rng.rand(len(candidates))]
        for dx, dy, fit_w, fit_h in ((0, 0, w, h), (1, 0, w - 2, h), (0, 1, w, h - 2)):
            rows = vault.strings_if_fit_in_size(fit_w, fit_h, self.rng)
            if rows is not None:
                break
        else:
            return
        sec_area = self._tile(x + dx, y + dy).sec_area
        self._place_vault_rows(rows, x + dx, y + dy, sec_area)

    def _coords_for_vault_to_fit(self, w: int, h: int) -> list[Coords]:
        return [
            (x, y)
            for x in range(2, self.mapw - 1 - w)
            for y in range(2, self.maph - 1 - h)
            if self._is_space_of_type(x, y, w, h, 1, TileType.FLOOR)
        ]

    def _place_random_vault(self) -> None:
        """Stamp a random vault onto open floor, trying up to once per known vault."""
        for _ in range(len(self.vaults)):
            rows = self.vaults[self.rng.rand(len(self.vaults))].random_strings(self.rng)
            coords = self._coords_for_vault_to_fit(len(rows[0]), len(rows))
            if not coords:
                continue
            x, y = coords[self.rng.rand(len(coords))]
            self._place_vault_rows(rows, x, y, self._tile(x, y).sec_area)
            return