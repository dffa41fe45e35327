"""Everything a scene description holds: objects, lights, cameras and ambient light."""

from __future__ import annotations

from dataclasses import dataclass, field

from minirt.canvas import Screen
from minirt.objects import SceneObject
from minirt.vector import Vec3


@dataclass(frozen=True, slots=True)
class CameraSpec:
    """A camera position, viewing direction and horizontal field of view in degrees."""

    position: Vec3 = Vec3(0.0, 0.0, 0.0)
    direction: Vec3 = Vec3(0.0, 0.0, 1.0)
    fov: float = 75


@dataclass(frozen=True, slots=True)
class LightSpec:
    """A point light with brightness in [0, 1] and a colour with 0..255 components."""

    position: Vec3
    brightness: float
    color: Vec3


@dataclass(frozen=True, slots=True)
class Ambient:
    """Ambient light applied to every point."""

    brightness: float = 0.0
    color: Vec3 = Vec3(0.0, 0.0, 0.0)


@dataclass
class Scene:
    """A scene ready to render."""

    objects: list[SceneObject] = field(default_factory=list)
    lights: list[LightSpec] = field(default_factory=list)
    cameras: list[CameraSpec] = field(default_factory=list)
    ambient: Ambient = field(default_factory=Ambient)
    screen: Screen = field(default_factory=Screen)

    def camera_at(self, number: int) -> CameraSpec:
        """Camera selected by ``number``, wrapping around; the default camera when none is set."""
        if not self.cameras:
            return CameraSpec()
        return self.cameras[abs(number) % len(self.cameras)]