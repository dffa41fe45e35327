"""Three- and four-component vectors used throughout the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, n: float) -> Vec3:
        return Vec3(self.x * n, self.y * n, self.z * n)

    def __rmul__(self, n: float) -> Vec3:
        return self * n

    def __truediv__(self, n: float) -> Vec3:
        return Vec3(self.x / n, self.y / n, self.z / n)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec3:
        """Unit vector with the same direction; raises ZeroDivisionError for a zero vector."""
        return self / self.length()

    def as_point4(self) -> Vec4:
        """Homogeneous coordinates of a point (w = 1)."""
        return Vec4(self.x, self.y, self.z, 1.0)

    def as_direction4(self) -> Vec4:
        """Homogeneous coordinates of a direction (w = 0)."""
        return Vec4(self.x, self.y, self.z, 0.0)


@dataclass(frozen=True, slots=True)
class Vec4:
    """A vector in homogeneous coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def to_vec3(self) -> Vec3:
        """Drop the w component."""
        return Vec3(self.x, self.y, self.z)