"""Three-component vector used for positions, speeds and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Point:
    """A 3D point or vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Point:
        return Point(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y, -self.z)

    def __iadd__(self, other: Point) -> Point:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: Point) -> Point:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, scalar: float) -> Point:
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Point:
        """Return a unit vector in the same direction, or zero for tiny vectors."""
        length = self.magnitude()
        if length < 1e-6:
            return Point()
        return self / length

    def distance(self, destination: Point) -> float:
        return (destination - self).magnitude()

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Point) -> Point:
        return Point(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    @classmethod
    def forward(cls) -> Point:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def right(cls) -> Point:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> Point:
        return cls(0.0, 1.0, 0.0)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)