"""Coloured shapes placed in a scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from minirt.plane import Plane
from minirt.ray import Ray
from minirt.sphere import Sphere
from minirt.square import Square
from minirt.triangle import Triangle
from minirt.vector import Vec3

Shape = Union[Sphere, Plane, Square, Triangle]

_KINDS: dict[type, str] = {
    Sphere: "Sphere",
    Plane: "Plane",
    Square: "Square",
    Triangle: "Triangle",
}


@dataclass(frozen=True)
class SceneObject:
    """A shape together with its colour (components from 0 to 255)."""

    shape: Shape
    color: Vec3

    def __post_init__(self) -> None:
        if type(self.shape) not in _KINDS:
            raise TypeError(f"unsupported shape: {type(self.shape).__name__}")

    @property
    def kind(self) -> str:
        """Name of the shape type."""
        return _KINDS[type(self.shape)]

    def intersect(self, ray: Ray) -> float | None:
        """Ray parameter at which the ray meets the shape, or None."""
        return self.shape.intersect(ray)

    def normal_at(self, point: Vec3, ray: Ray) -> Vec3:
        """Surface normal at ``point`` as seen along ``ray``."""
        if isinstance(self.shape, Sphere):
            return self.shape.normal_at(point, ray.origin)
        return self.shape.normal_towards(ray.direction)