"""Small immutable 2D and 3D vectors with the arithmetic the world code needs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Vector2:
    """A 2D vector; components may be ints or floats."""

    x: Number = 0
    y: Number = 0

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, num: Number) -> Vector2:
        if not _is_number(num):
            return NotImplemented
        return Vector2(self.x * num, self.y * num)

    __rmul__ = __mul__

    def __truediv__(self, num: Number) -> Vector2:
        if not _is_number(num):
            return NotImplemented
        return Vector2(self.x / num, self.y / num)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vector3:
    """A 3D vector; components may be ints or floats."""

    x: Number = 0
    y: Number = 0
    z: Number = 0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, num: Number) -> Vector3:
        if not _is_number(num):
            return NotImplemented
        return Vector3(self.x * num, self.y * num, self.z * num)

    __rmul__ = __mul__

    def __truediv__(self, num: Number) -> Vector3:
        if not _is_number(num):
            return NotImplemented
        return Vector3(self.x / num, self.y / num, self.z / num)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y
        yield self.z


def dot_product(first: Vector3, second: Vector3) -> Number:
    """Dot product of two 3D vectors."""
    return first.x * second.x + first.y * second.y + first.z * second.z


def cross_product(first: Vector3, second: Vector3) -> Vector3:
    """Cross product of two 3D vectors."""
    return Vector3(
        first.y * second.z - first.z * second.y,
        first.z * second.x - first.x * second.z,
        first.x * second.y - first.y * second.x,
    )


def length(vec: Vector3) -> float:
    """Euclidean length of a 3D vector."""
    return math.sqrt(vec.x * vec.x + vec.y * vec.y + vec.z * vec.z)


def normalize(vec: Vector3) -> Vector3:
    """Return `vec` scaled to unit length."""
    size = length(vec)
    return Vector3(vec.x / size, vec.y / size, vec.z / size)