"""Squares oriented by a normal vector."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from minirt.plane import Plane, normal_to_camera
from minirt.ray import Ray
from minirt.transformation import Matrix4, rotate_local
from minirt.vector import Vec3
from minirt.winding import contains_projected

_REFERENCE_NORMAL = Vec3(0, 0, -1)


@dataclass(frozen=True)
class Square:
    """A square of side ``side`` centred on ``center`` and facing along ``normal``."""

    center: Vec3
    normal: Vec3
    side: float
    _corners: tuple[Vec3, Vec3, Vec3, Vec3] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        try:
            normal = self.normal.normalized()
        except ZeroDivisionError:
            raise ValueError("square normal must not be the zero vector") from None
        object.__setattr__(self, "normal", normal)
        object.__setattr__(self, "_corners", self._compute_corners())

    def _compute_corners(self) -> tuple[Vec3, Vec3, Vec3, Vec3]:
        h = self.side / 2
        c = self.center
        corners = (
            Vec3(c.x - h, c.y + h, c.z),
            Vec3(c.x + h, c.y + h, c.z),
            Vec3(c.x + h, c.y - h, c.z),
            Vec3(c.x - h, c.y - h, c.z),
        )
        n = self.normal
        if n.x == 0 and n.y == 0 and n.z in (1, -1):
            return corners
        angle = math.acos(max(-1.0, min(1.0, _REFERENCE_NORMAL.dot(n))))
        axis = _REFERENCE_NORMAL.cross(n).normalized()
        m = rotate_local(Matrix4.identity(), angle, axis, c)
        return tuple(m.transform(v.as_point4()).to_vec3() for v in corners)

    def vertices(self) -> tuple[Vec3, Vec3, Vec3, Vec3]:
        """The four corners, in order around the square."""
        return self._corners

    def contains(self, point: Vec3) -> bool:
        """Whether a point of the square's plane lies within the square."""
        return contains_projected(self._corners, point)

    def intersect(self, ray: Ray) -> float | None:
        """Non-negative ray parameter of the hit, or None when the ray misses."""
        t = Plane(self.center, self.normal).intersect(ray)
        if t is not None and t >= 0 and self.contains(ray.at(t)):
            return t
        return None

    def normal_towards(self, direction: Vec3) -> Vec3:
        """The normal turned to face against ``direction``."""
        return normal_to_camera(self.normal, direction)