# minirt

The geometric core of a small ray tracer. It provides 3D vector math,
rays, four shapes (sphere, plane, square, triangle) with ray
intersection, 4x4 transformation matrices, canvas geometry, a scene
model and a parser for a line-based scene description format.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Vectors and rays

`minirt.vector` holds `Vec3` and `Vec4`, immutable dataclasses.
`Vec3` supports `+`, `-`, `-v`, multiplication and division by a number,
and has `dot`, `cross`, `length`, `normalized`, `as_point4` (w = 1) and
`as_direction4` (w = 0). `Vec4.to_vec3` drops the w component.

```python
from minirt.vector import Vec3
from minirt.ray import Ray

ray = Ray(Vec3(0, 0, 0), Vec3(0, 0, 1))

ray.at(2.5)                          # Vec3(x=0.0, y=0.0, z=2.5)
Vec3(1, 0, 0).cross(Vec3(0, 1, 0))   # Vec3(x=0, y=0, z=1)
Vec3(3, 4, 0).length()               # 5.0
```

`normalized()` of the zero vector raises `ZeroDivisionError`.

## Shapes

Each shape has an `intersect(ray)` method returning the distance along
the ray to the hit point, or `None` when there is no hit.

```python
from minirt.sphere import Sphere

Sphere(Vec3(0, 0, 10), 2.0).intersect(ray)   # 8.0
```

- `Sphere(center, radius)` returns the smallest non-negative root.
  `normal_at(point, origin)` gives the unit normal, turned inward when
  `origin` lies inside the sphere.
- `Plane(point, normal)` returns the crossing parameter, which may be
  negative; `None` only when the ray is parallel to the plane.
- `Square(center, normal, side)` normalises its normal and computes its
  corners, available through `vertices()`. A zero normal raises
  `ValueError`.
- `Triangle(v1, v2, v3)` derives its unit normal from the vertices;
  collinear vertices raise `ValueError`.

`Square` and `Triangle` only report hits at non-negative distances that
fall inside the shape (`contains(point)`). `Plane`, `Square` and
`Triangle` offer `normal_towards(direction)`, the normal flipped to face
against a viewing direction; `minirt.plane.normal_to_camera` does the
same for any vector.

`minirt.winding` contains the point-in-polygon test these shapes use:
`angle_test`, `polygon_area`, `biggest_projection` and
`contains_projected`.

## Transformations

`minirt.transformation.Matrix4` is an immutable 4x4 matrix with
`identity()`, multiplication with `@` and `transform(vec4)`. The helpers
`translate`, `rotate` (angle in radians about an axis through the
origin) and `rotate_local` (about an axis through a given centre) each
return `transform @ m`. `apply_matrix(m, v)` transforms a `Vec3` as a
direction.

```python
import math
from minirt.transformation import Matrix4, rotate, apply_matrix

m = rotate(Matrix4.identity(), math.pi / 2, Vec3(0, 0, 1))
apply_matrix(m, Vec3(1, 0, 0))   # approximately Vec3(0, 1, 0)
```

## Canvas

`minirt.canvas` has `Screen(width=800, height=600)` and `Canvas`, a
pixel grid centred on the middle of the screen with y pointing up.
`Canvas.from_screen(screen)` builds one, `points()` yields `(x, y)`
pairs row by row from the top, and `canvas_to_screen(point, screen)`
converts a canvas point to screen pixels (origin top left, y down).

## Scenes

`minirt.objects.SceneObject(shape, color)` pairs a shape with a colour
(components 0..255); it exposes `kind`, `intersect(ray)` and
`normal_at(point, ray)`.

`minirt.scene.Scene` holds `objects`, `lights` (`LightSpec`), `cameras`
(`CameraSpec`), `ambient` (`Ambient`) and `screen`.
`scene.camera_at(n)` picks a camera by `abs(n)` modulo the number of
cameras, or returns a default `CameraSpec()` (at the origin, looking
along +z, field of view 75) when the scene has none.

## Scene files

Each line starts with an identifier followed by whitespace-separated
fields:

```
R 800 600
A 0.2 255,255,255
c 0,0,0 0,0,1 70
l -10,10,-10 0.7 255,255,255
sp 0,0,20 10 255,0,0
pl 0,-5,0 0,1,0 0,255,0
sq 0,0,15 0,0,1 4 0,0,255
tr 0,0,10 1,0,10 0,1,10 255,255,0
```

The sphere line gives a diameter. Colours are three integers from 0 to
255. Lines with any other identifier are ignored.

```python
from minirt.parser import parse_scene, SceneParseError

with open("scene.rt") as handle:
    try:
        scene = parse_scene(handle.read())
    except SceneParseError as error:
        print(error)
```

`parse_scene` takes a string or an iterable of lines. It raises
`SceneParseError` (a `ValueError`) naming the line number for a
malformed line and when there is more than one `R` or `A` line. The
per-line functions (`parse_resolution`, `parse_ambient`, `parse_camera`,
`parse_light`, `parse_sphere`, `parse_plane`, `parse_square`,
`parse_triangle`, `parse_color`, `parse_vector`, `parse_line`) are
available as well.

## What this package does not do

It computes geometry only. There is no shading or lighting model, no
rendering loop that produces pixels, no image file output, no window
and no command-line program. Cylinders are not supported: a `cy` line
raises `SceneParseError`.