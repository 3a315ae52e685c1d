"""Additive lagged Fibonacci pseudo-random generator."""

from __future__ import annotations

import time
from typing import Callable

_MOD = (1 << 31) - 1


def _trunc_mod(a: int, b: int) -> int:
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class FibRandom:
    """Lagged Fibonacci generator seeded by a small LCG.

    A negative seed means seeding from the current time.
    """

    def __init__(self, seed: int = -1, lag_a: int = 17, lag_b: int = 5) -> None:
        if seed < 0:
            seed = (time.time_ns() // 1_000_000) % _MOD
        if lag_b > lag_a:
            lag_a, lag_b = lag_b, lag_a
        if lag_b <= 0 or lag_b == lag_a:
            raise ValueError("lag parameters must be positive and distinct")
        self._lcg_x = seed
        self._bigger_lag = lag_a
        self._smaller_lag = lag_b
        self._index = 0
        self._values = [self._lcg() % _MOD for _ in range(lag_a)]

    def _lcg(self) -> int:
        self._lcg_x = _trunc_mod(self._lcg_x * 2416 + 374441, 1771875)
        return self._lcg_x

    def rand(self, modulo: int = 0) -> int:
        """Advance the generator; reduce by ``modulo`` when it is positive."""
        b_index = self._index - self._smaller_lag
        if b_index < 0:
            b_index += self._bigger_lag
        new = self._values[self._index] + self._values[b_index]
        if new >= _MOD:
            new -= _MOD
        self._values[self._index] = new
        self._index = (self._index + 1) % len(self._values)
        if modulo > 0:
            return new % modulo
        return new

    def one_chance_from(self, num_chances: int) -> bool:
        return self.rand(num_chances) == 0

    def biased_rand_in_range(self, low: int, high: int, bias: int, influence_percent: int) -> int:
        """Return a value in [low, high] pulled towards ``bias``."""
        value = self.rand_in_range(0, high - low)
        mix = self.rand_in_range(0, influence_percent)
        result = value * (100 - mix) + (bias - low) * mix
        if _trunc_mod(result, 100) >= 50:
            result += 100
        return _trunc_div(result, 100) + low

    def roll_dice(self, dnum: int, dval: int, dmod: int) -> int:
        return sum(self.rand(dval) + 1 for _ in range(dnum)) + dmod

    def random_unit_vector_int(self) -> tuple[int, int]:
        vx, vy = 0, 0
        while vx == 0 and vy == 0:
            vx, vy = self.rand(3) - 1, self.rand(3) - 1
        return vx, vy

    def rand_in_range(self, low: int, high: int) -> int:
        """Return a value in the inclusive range between the two bounds."""
        if high < low:
            low, high = high, low
        if low == high:
            return low
        return self.rand(high - low + 1) + low

    def random_percent(self) -> int:
        return self.rand(100)

    def select_random_index_from_weighted(
        self, total_indices: int, get_weight: Callable[[int], int]
    ) -> int:
        """Pick an index in range(total_indices) with probability proportional to its weight."""
        weights = [get_weight(i) for i in range(total_indices)]
        remaining = self.rand(sum(weights))
        for index, weight in enumerate(weights):
            if remaining < weight:
                return index
            remaining -= weight
        raise ValueError("weights do not allow any index to be selected")

    def random_coords_in_range_from(self, x: int, y: int, r: int) -> tuple[int, int]:
        rx, ry = x + 3 * r, y + 3 * r
        while (rx - x) ** 2 + (ry - y) ** 2 > r * r:
            rx = self.rand_in_range(x - r - 1, x + r + 1)
            ry = self.rand_in_range(y - r - 1, y + r + 1)
        return rx, ry