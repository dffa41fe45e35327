"""Infinite planes."""

from __future__ import annotations

from dataclasses import dataclass

from minirt.ray import Ray
from minirt.vector import Vec3


def normal_to_camera(normal: Vec3, direction: Vec3) -> Vec3:
    """Flip ``normal`` so that it faces against ``direction``."""
    if normal.dot(direction) > 0:
        return -normal
    return normal


@dataclass(frozen=True, slots=True)
class Plane:
    """A plane through ``point`` with the given ``normal``."""

    point: Vec3
    normal: Vec3

    def intersect(self, ray: Ray) -> float | None:
        """Ray parameter of the crossing, possibly negative; None when parallel."""
        denom = self.normal.dot(ray.direction)
        if denom == 0:
            return None
        return self.normal.dot(self.point - ray.origin) / denom

    def normal_towards(self, direction: Vec3) -> Vec3:
        """The plane's normal turned to face against ``direction``."""
        return normal_to_camera(self.normal, direction)