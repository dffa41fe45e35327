"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.ray import Ray
from minirt.vector import Vec3


def sgn(x: float) -> int:
    """Sign of ``x``: 1, 0 or -1."""
    if x > 0:
        return 1
    if x == 0:
        return 0
    return -1


@dataclass(frozen=True, slots=True)
class Sphere:
    """A sphere given by its centre and radius."""

    center: Vec3
    radius: float

    def intersect(self, ray: Ray) -> float | None:
        """Smallest non-negative ray parameter at which the ray meets the sphere."""
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None
        root = math.sqrt(discriminant)
        far = (-b + root) / (2 * a)
        near = (-b - root) / (2 * a)
        if far < 0 and near < 0:
            return None
        if far < 0:
            return near
        if near < 0:
            return far
        return min(far, near)

    def normal_at(self, point: Vec3, origin: Vec3) -> Vec3:
        """Unit normal at ``point``, pointing inward when ``origin`` is inside."""
        if (self.center - origin).length() < self.radius:
            return (self.center - point).normalized()
        return (point - self.center).normalized()