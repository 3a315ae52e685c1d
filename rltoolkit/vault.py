"""Vaults: hand-made map fragments read from text files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from .fib_random import FibRandom
from .rbr_map import TileType
from .string_ops import mirrored_strings, rotated_strings

_SYMBOLS = {"#": TileType.WALL, "+": TileType.DOOR, ".": TileType.FLOOR}


@dataclass
class Vault:
    """A rectangular fragment given as rows of characters."""

    strings: list[str]

    def __post_init__(self) -> None:
        if not self.strings:
            raise ValueError("a vault needs at least one row")

    def random_strings(self, rng: FibRandom) -> list[str]:
        """Return the rows randomly mirrored and rotated."""
        rotations = rng.rand_in_range(0, 3)
        vertical = rng.one_chance_from(2)
        horizontal = rng.one_chance_from(2)
        result = mirrored_strings(self.strings, vertical, horizontal)
        for _ in range(rotations):
            result = rotated_strings(result)
        return result

    def is_of_size(self, w: int, h: int) -> bool:
        """True if the vault is w x h, possibly after rotation."""
        vh, vw = len(self.strings), len(self.strings[0])
        return (vw, vh) in ((w, h), (h, w))

    def strings_if_fit_in_size(self, w: int, h: int, rng: FibRandom) -> Optional[list[str]]:
        """Return randomly transformed rows that are exactly w wide and h high, or None."""
        vh, vw = len(self.strings), len(self.strings[0])
        if vw == w and vh == h and vw == vh:
            return self.random_strings(rng)
        if vw == w and vh == h:
            vertical = rng.one_chance_from(2)
            horizontal = rng.one_chance_from(2)
            return mirrored_strings(self.strings, vertical, horizontal)
        if vw == h and vh == w:
            vertical = rng.one_chance_from(2)
            horizontal = rng.one_chance_from(2)
            return rotated_strings(mirrored_strings(self.strings, vertical, horizontal))
        return None


def read_vaults(path: Union[str, os.PathLike]) -> list[Vault]:
    """Read vaults separated by blank lines or lines holding a '//' comment."""
    vaults: list[Vault] = []
    rows: list[str] = []
    with open(path, encoding="utf-8") as file:
        for raw in file:
            line = raw.rstrip("\n")
            if line.endswith("\r"):
                line = line[:-1]
            if line == "" or "//" in line:
                if rows:
                    vaults.append(Vault(rows))
                    rows = []
            else:
                rows.append(line)
    if rows:
        vaults.append(Vault(rows))
    return vaults


def vault_symbol_to_tile_type(symbol: str) -> TileType:
    return _SYMBOLS.get(symbol, TileType.UNKNOWN)