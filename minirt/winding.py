"""Point-in-polygon tests for planar convex shapes lying anywhere in space."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Sequence

from minirt.vector import Vec3


class Projection(Enum):
    """A coordinate plane onto which a polygon can be flattened."""

    XY = ("x", "y")
    XZ = ("x", "z")
    YZ = ("y", "z")

    def project(self, v: Vec3) -> Vec3:
        """Keep the two coordinates of this plane, as the x and y of a new vector."""
        first, second = self.value
        return Vec3(getattr(v, first), getattr(v, second), 0.0)


def _edges(vertices: Sequence[Vec3]) -> Iterator[tuple[Vec3, Vec3]]:
    ring = list(vertices)
    return zip(ring, ring[1:] + ring[:1])


def quadrant(vertex: Vec3, point: Vec3) -> int:
    """Quadrant (0..3, counter-clockwise from upper right) of ``vertex`` around ``point``."""
    if vertex.x > point.x:
        return 0 if vertex.y > point.y else 3
    return 1 if vertex.y > point.y else 2


def x_intercept(p1: Vec3, p2: Vec3, y: float) -> float:
    """The x at which the line through ``p1`` and ``p2`` reaches height ``y``."""
    return p2.x - (p2.y - y) * ((p1.x - p2.x) / (p1.y - p2.y))


def _adjust_delta(delta: int, a: Vec3, b: Vec3, point: Vec3) -> int:
    if delta == 3:
        return -1
    if delta == -3:
        return 1
    if delta in (2, -2) and x_intercept(a, b, point.y) > point.x:
        return -delta
    return delta


def angle_test(vertices: Sequence[Vec3], point: Vec3) -> bool:
    """Whether ``point`` lies inside the polygon, using x and y only."""
    winding = sum(
        _adjust_delta(quadrant(b, point) - quadrant(a, point), a, b, point)
        for a, b in _edges(vertices)
    )
    return winding in (4, -4)


def polygon_area(vertices: Sequence[Vec3]) -> float:
    """Area of the polygon in the xy plane (shoelace formula)."""
    total = sum(a.x * b.y - a.y * b.x for a, b in _edges(vertices))
    return abs(total) / 2


def biggest_projection(vertices: Sequence[Vec3]) -> Projection:
    """The coordinate plane onto which the polygon casts the largest area."""
    area = {
        proj: polygon_area([proj.project(v) for v in vertices]) for proj in Projection
    }
    if area[Projection.XY] >= area[Projection.XZ]:
        return Projection.XY if area[Projection.XY] >= area[Projection.YZ] else Projection.YZ
    return Projection.XZ if area[Projection.XZ] >= area[Projection.YZ] else Projection.YZ


def contains_projected(vertices: Sequence[Vec3], point: Vec3) -> bool:
    """Whether ``point`` falls inside the planar polygon, judged on its largest projection."""
    proj = biggest_projection(vertices)
    return angle_test([proj.project(v) for v in vertices], proj.project(point))