import pytest

from minirt.canvas import Screen
from minirt.objects import SceneObject
from minirt.scene import Ambient, CameraSpec, LightSpec, Scene
from minirt.sphere import Sphere
from minirt.vector import Vec3


@pytest.fixture
def three_cameras():
    return [
        CameraSpec(Vec3(0, 0, 0), Vec3(0, 0, 1), 70),
        CameraSpec(Vec3(1, 0, 0), Vec3(0, 0, 1), 80),
        CameraSpec(Vec3(2, 0, 0), Vec3(0, 0, 1), 90),
    ]


def test_default_camera_without_cameras():
    camera = Scene().camera_at(0)
    assert camera.fov == 75
    assert camera.direction == Vec3(0, 0, 1)
    assert camera.position == Vec3(0, 0, 0)


def test_default_camera_for_any_number():
    scene = Scene()
    assert scene.camera_at(5) == scene.camera_at(-2) == CameraSpec()


def test_camera_index_in_range(three_cameras):
    scene = Scene(cameras=three_cameras)
    assert [scene.camera_at(i) for i in range(3)] == three_cameras


def test_camera_index_wraps_forward(three_cameras):
    scene = Scene(cameras=three_cameras)
    assert scene.camera_at(3) is three_cameras[0]
    assert scene.camera_at(4) is three_cameras[1]


def test_negative_camera_index_uses_magnitude(three_cameras):
    scene = Scene(cameras=three_cameras)
    assert scene.camera_at(-1) is three_cameras[1]
    assert scene.camera_at(-3) is three_cameras[0]


def test_scene_defaults():
    scene = Scene()
    assert scene.objects == []
    assert scene.lights == []
    assert scene.screen == Screen(800, 600)
    assert scene.ambient == Ambient(0.0, Vec3(0, 0, 0))


def test_scenes_do_not_share_lists():
    first, second = Scene(), Scene()
    first.objects.append(SceneObject(Sphere(Vec3(0, 0, 5), 1), Vec3(1, 2, 3)))
    first.lights.append(LightSpec(Vec3(0, 5, 0), 0.5, Vec3(255, 255, 255)))
    assert second.objects == []
    assert second.lights == []
    assert len(first.objects) == 1
    assert first.lights[0].brightness == 0.5