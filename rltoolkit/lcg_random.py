"""Linear congruential pseudo-random generator, a shared module-level instance and dice."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol

_A = 2416
_C = 374441
_M = 1_000_000_005_721  # prime


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


class LCGRandom:
    """A small linear congruential generator."""

    def __init__(self, seed: int = 0) -> None:
        self._x = seed

    def randomize(self) -> int:
        """Seed from the current time in milliseconds and return the new state."""
        self._x = (time.time_ns() // 1_000_000) % _M
        return self._x

    def set_seed(self, value: int) -> None:
        self._x = value

    def random(self, modulo: int = 0) -> int:
        """Advance the generator; reduce by ``modulo`` unless it is zero."""
        self._x = _trunc_mod(self._x * _A + _C, _M)
        if modulo:
            return _trunc_mod(self._x, modulo)
        return self._x

    def roll_dice(self, dnum: int, dval: int, dmod: int) -> int:
        """Roll ``dnum`` dice of ``dval`` sides and add ``dmod``."""
        return sum(self.random(dval) + 1 for _ in range(dnum)) + dmod

    def random_unit_vector_int(self) -> tuple[int, int]:
        """Return a random non-zero vector with components in -1..1."""
        vx, vy = 0, 0
        while vx == 0 and vy == 0:
            vx, vy = self.random(3) - 1, self.random(3) - 1
        return vx, vy

    def rand_in_range(self, low: int, high: int) -> int:
        """Return a value in the inclusive range between the two bounds."""
        if high < low:
            low, high = high, low
        if low == high:
            return low
        return self.random(high - low + 1) + low

    def random_percent(self) -> int:
        return self.random(100)

    def random_coords_in_range_from(self, x: int, y: int, r: int) -> tuple[int, int]:
        """Return random coordinates within distance ``r`` of (x, y)."""
        rx, ry = x + 3 * r, y + 3 * r
        while (rx - x) ** 2 + (ry - y) ** 2 > r * r:
            rx = self.rand_in_range(x - r - 1, x + r + 1)
            ry = self.rand_in_range(y - r - 1, y + r + 1)
        return rx, ry


class DicePrng(Protocol):
    def roll_dice(self, dnum: int, dval: int, dmod: int) -> int: ...


@dataclass(frozen=True)
class Dice:
    """A dice expression such as 3d6+2."""

    dnum: int
    dval: int
    dmod: int = 0

    def roll(self, prng: DicePrng) -> int:
        return prng.roll_dice(self.dnum, self.dval, self.dmod)


_shared = LCGRandom()


def randomize() -> int:
    return _shared.randomize()


def set_seed(value: int) -> None:
    _shared.set_seed(value)


def random(modulo: int = 0) -> int:
    return _shared.random(modulo)


def roll_dice(dnum: int, dval: int, dmod: int) -> int:
    return _shared.roll_dice(dnum, dval, dmod)


def random_unit_vector_int() -> tuple[int, int]:
    return _shared.random_unit_vector_int()


def rand_in_range(low: int, high: int) -> int:
    return _shared.rand_in_range(low, high)


def random_percent() -> int:
    return _shared.random_percent()


def random_coords_in_range_from(x: int, y: int, r: int) -> tuple[int, int]:
    return _shared.random_coords_in_range_from(x, y, r)