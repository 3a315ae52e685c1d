"""Integer direction rotations and a small mutable 2D float vector."""

from __future__ import annotations

import math
from dataclasses import dataclass

from . import lcg_random

_PI_APPROX = 3.14159


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded


def rotate_int_coords_90(x: int, y: int, counter_clockwise: bool = False) -> tuple[int, int]:
    """Rotate an integer vector by 90 degrees (clockwise in screen space by default)."""
    direction = -1 if counter_clockwise else 1
    return -direction * y, direction * x


def rotate_int_coords_45(x: int, y: int, counter_clockwise: bool = False) -> tuple[int, int]:
    """Rotate a unit direction by 45 degrees, clamping components to -1..1."""
    direction = -1 if counter_clockwise else 1
    return _sign(x - direction * y), _sign(direction * x + y)


@dataclass
class Vector:
    """A mutable 2D vector of floats."""

    x: float
    y: float

    @classmethod
    def from_points(cls, sx: int, sy: int, ex: int, ey: int) -> Vector:
        """Build the vector pointing from (sx, sy) to (ex, ey)."""
        return cls(float(ex - sx), float(ey - sy))

    def add(self, other: Vector) -> None:
        """Add ``other`` to this vector in place."""
        self.x += other.x
        self.y += other.y

    def rounded_coords(self) -> tuple[int, int]:
        """Return the components rounded half away from zero."""
        return _round_half_away(self.x), _round_half_away(self.y)

    def rotate(self, degrees: int) -> None:
        """Rotate this vector in place by ``degrees``."""
        rads = degrees * _PI_APPROX / 180.0
        cos, sin = math.cos(rads), math.sin(rads)
        self.x, self.y = self.x * cos - self.y * sin, self.x * sin + self.y * cos

    def unit_vector(self) -> Vector:
        """Return a new vector of length one pointing the same way."""
        length = math.hypot(self.x, self.y)
        if length == 0:
            raise ValueError("the zero vector has no direction")
        return Vector(self.x / length, self.y / length)

    def normalize(self) -> None:
        """Scale this vector to length one; the zero vector is left unchanged."""
        if self.x == 0 and self.y == 0:
            return
        length = math.hypot(self.x, self.y)
        self.x /= length
        self.y /= length


def random_vector_between(a: Vector, b: Vector) -> Vector:
    """Return a random vector whose components lie between those of ``a`` and ``b``."""
    precision = 100.0
    x = lcg_random.rand_in_range(int(a.x * precision), int(b.x * precision)) / precision
    y = lcg_random.rand_in_range(int(a.y * precision), int(b.y * precision)) / precision
    return Vector(x, y)