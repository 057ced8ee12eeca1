"""Integer 2D coordinates in machine resolution units."""

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A point (or vector) in machine units.

    Immutable and hashable. Arithmetic between points is exact; only
    ``size()`` leaves integer space.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def dot(self, other: "Point") -> int:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> int:
        """Z component of the cross product (determinant)."""
        return self.x * other.y - self.y * other.x

    def size2(self) -> int:
        """Squared length, exact."""
        return self.x * self.x + self.y * self.y

    def size(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, data: tuple[int, int] | list[int]) -> "Point":
        """Create a point from an (x, y) pair."""
        x, y = data
        return cls(int(x), int(y))
