"""Two-dimensional vectors and the small geometry helpers built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterator, NamedTuple, Union

PI = 3.14159265
FLT_EPSILON = 1.1920929e-07

Number = Union[int, float]


class Rect(NamedTuple):
    """An integer rectangle given by its edges."""

    left: int
    top: int
    right: int
    bottom: int


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: Vec2 | Number) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Number) -> Vec2:
        if isinstance(other, (int, float)):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Vec2 | Number) -> Vec2:
        if isinstance(other, Vec2):
            if other.x == 0.0 or other.y == 0.0:
                raise ZeroDivisionError("vector division by a zero component")
            return Vec2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vec2(self.x / other, self.y / other)
        return NotImplemented

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; a near-zero vector is returned as is."""
        length = self.length()
        if length < FLT_EPSILON:
            return self
        return Vec2(self.x / length, self.y / length)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2) -> float:
        """The z component of the 3D cross product."""
        return self.x * other.y - self.y * other.x


@total_ordering
@dataclass(frozen=True)
class Vec2Int:
    """An immutable 2D vector of integers, ordered by x then y."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", int(self.x))
        object.__setattr__(self, "y", int(self.y))

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2Int) -> Vec2Int:
        if not isinstance(other, Vec2Int):
            return NotImplemented
        return Vec2Int(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2Int) -> Vec2Int:
        if not isinstance(other, Vec2Int):
            return NotImplemented
        return Vec2Int(self.x - other.x, self.y - other.y)

    def __mul__(self, value: int) -> Vec2Int:
        if not isinstance(value, int):
            return NotImplemented
        return Vec2Int(self.x * value, self.y * value)

    def __lt__(self, other: Vec2Int) -> bool:
        if not isinstance(other, Vec2Int):
            return NotImplemented
        if self.x != other.x:
            return self.x < other.x
        return self.y < other.y

    def length_squared(self) -> int:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def dot(self, other: Vec2Int) -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vec2Int) -> int:
        return self.x * other.y - self.y * other.x


def rad2deg(radian: float) -> float:
    return radian * 180 / PI


def deg2rad(degree: float) -> float:
    return degree * PI / 180


def rect_make(pos: Vec2, size: Vec2) -> Rect:
    """Rectangle of ``size`` centred on ``pos``, edges truncated toward zero."""
    half_w = size.x / 2
    half_h = size.y / 2
    return Rect(
        int(pos.x - half_w),
        int(pos.y - half_h),
        int(pos.x + half_w),
        int(pos.y + half_h),
    )