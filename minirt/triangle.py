"""Triangles."""

from __future__ import annotations

from dataclasses import dataclass, field

from minirt.plane import Plane, normal_to_camera
from minirt.ray import Ray
from minirt.vector import Vec3
from minirt.winding import contains_projected


@dataclass(frozen=True)
class Triangle:
    """A triangle given by its three vertices; its unit normal is derived from them."""

    v1: Vec3
    v2: Vec3
    v3: Vec3
    normal: Vec3 = field(init=False)

    def __post_init__(self) -> None:
        try:
            normal = (self.v1 - self.v2).cross(self.v1 - self.v3).normalized()
        except ZeroDivisionError:
            raise ValueError("triangle vertices must not be collinear") from None
        object.__setattr__(self, "normal", normal)

    def contains(self, point: Vec3) -> bool:
        """Whether a point of the triangle's plane lies within the triangle."""
        return contains_projected((self.v1, self.v2, self.v3), point)

    def intersect(self, ray: Ray) -> float | None:
        """Non-negative ray parameter of the hit, or None when the ray misses."""
        t = Plane(self.v1, self.normal).intersect(ray)
        if t is not None and t >= 0 and self.contains(ray.at(t)):
            return t
        return None

    def normal_towards(self, direction: Vec3) -> Vec3:
        """The normal turned to face against ``direction``."""
        return normal_to_camera(self.normal, direction)