"""Reader for scene description files.

Each line starts with an identifier followed by whitespace-separated fields:

``R w h``                       resolution
``A ratio r,g,b``               ambient light
``c x,y,z dx,dy,dz fov``        camera
``l x,y,z ratio r,g,b``         point light
``sp x,y,z diameter r,g,b``     sphere
``pl x,y,z nx,ny,nz r,g,b``     plane
``sq x,y,z nx,ny,nz side r,g,b`` square
``tr x,y,z x,y,z x,y,z r,g,b``  triangle

Lines with any other identifier are ignored.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable

from minirt.canvas import Screen
from minirt.objects import SceneObject
from minirt.plane import Plane
from minirt.scene import Ambient, CameraSpec, LightSpec, Scene
from minirt.sphere import Sphere
from minirt.square import Square
from minirt.triangle import Triangle
from minirt.vector import Vec3

_SPACES = " \t\n\v\f\r"
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_FLOAT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)(?:\.([0-9]*))?")


class SceneParseError(ValueError):
    """Raised when a scene description is malformed."""


def _isspace(c: str) -> bool:
    return c != "" and c in _SPACES


def _isdigit(c: str) -> bool:
    return "0" <= c <= "9"


def _atoi(text: str) -> int:
    match = _INT_RE.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def _atof(text: str) -> float:
    match = _FLOAT_RE.match(text)
    sign, whole, frac = match.groups()
    if not whole and not frac:
        return 0.0
    value = float(f"{whole or '0'}.{frac or '0'}")
    return -value if sign == "-" else value


class _Cursor:
    """A read position inside one line of text."""

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = min(pos, len(text))

    @property
    def char(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def rest(self) -> str:
        return self.text[self.pos:]

    def at_field_end(self) -> bool:
        return self.char == "" or _isspace(self.char)

    def advance(self) -> None:
        self.pos += 1

    def skip_spaces(self) -> None:
        start = self.pos
        while _isspace(self.char):
            self.advance()
        if self.pos == start:
            raise SceneParseError(f"expected whitespace at column {start + 1}")

    def _skip_digits(self) -> int:
        count = 0
        while _isdigit(self.char):
            self.advance()
            count += 1
        return count

    def skip_number(self) -> int:
        """Skip an optional minus, digits and an optional fraction; return the digit count."""
        if self.char == "-":
            self.advance()
        count = self._skip_digits()
        if self.char == ".":
            self.advance()
            count += self._skip_digits()
        return count

    def expect_unsigned(self) -> None:
        """Skip an unsigned decimal number that must end the field."""
        self._skip_digits()
        if self.char == ".":
            self.advance()
            self._skip_digits()
        if not self.at_field_end():
            raise SceneParseError(f"malformed number at column {self.pos + 1}")

    def read_vector(self) -> Vec3:
        self.skip_spaces()
        components = []
        for index in range(3):
            components.append(_atof(self.rest()))
            self.skip_number()
            if self.char == ".":
                self.advance()
                self.skip_number()
            if index < 2:
                if self.char != ",":
                    raise SceneParseError(f"expected ',' at column {self.pos + 1}")
                self.advance()
            elif not self.at_field_end():
                raise SceneParseError(f"malformed vector at column {self.pos + 1}")
        return Vec3(*components)

    def read_unsigned_float(self) -> float:
        self.skip_spaces()
        value = _atof(self.rest())
        self.expect_unsigned()
        return value


def validate_int(text: str) -> bool:
    """Whether ``text`` begins with digits that end at whitespace or at the end."""
    cur = _Cursor(text)
    while _isdigit(cur.char):
        cur.advance()
    return cur.at_field_end()


def parse_color(text: str) -> Vec3:
    """Parse ``' r,g,b'``: leading whitespace, three integers in 0..255 of at most 3 digits."""
    cur = _Cursor(text)
    cur.skip_spaces()
    components = []
    for index in range(3):
        value = _atoi(cur.rest())
        digits = cur.skip_number()
        last = index == 2
        terminated = cur.at_field_end() if last else cur.char == ","
        if not terminated or not 1 <= digits <= 3 or not 0 <= value <= 255:
            raise SceneParseError(f"malformed colour: {text.strip()!r}")
        if not last:
            cur.advance()
        components.append(float(value))
    return Vec3(*components)


def parse_vector(text: str) -> tuple[Vec3, str]:
    """Parse ``' x,y,z'`` and return the vector with the text that follows it."""
    cur = _Cursor(text)
    vector = cur.read_vector()
    return vector, cur.rest()


def parse_resolution(line: str) -> Screen:
    """Parse an ``R`` line."""
    cur = _Cursor(line, 1)
    cur.skip_spaces()
    if not validate_int(cur.rest()):
        raise SceneParseError("malformed resolution width")
    width = _atoi(cur.rest())
    cur.skip_number()
    cur.skip_spaces()
    if not validate_int(cur.rest()):
        raise SceneParseError("malformed resolution height")
    height = _atoi(cur.rest())
    return Screen(width, height)


def parse_ambient(line: str) -> Ambient:
    """Parse an ``A`` line."""
    cur = _Cursor(line, 1)
    brightness = cur.read_unsigned_float()
    return Ambient(brightness, parse_color(cur.rest()))


def parse_camera(line: str) -> CameraSpec:
    """Parse a ``c`` line."""
    cur = _Cursor(line, 1)
    position = cur.read_vector()
    direction = cur.read_vector()
    cur.skip_spaces()
    fov = _atoi(cur.rest())
    cur.expect_unsigned()
    return CameraSpec(position, direction, fov)


def parse_light(line: str) -> LightSpec:
    """Parse an ``l`` line."""
    cur = _Cursor(line, 1)
    position = cur.read_vector()
    brightness = cur.read_unsigned_float()
    return LightSpec(position, brightness, parse_color(cur.rest()))


def parse_sphere(line: str) -> SceneObject:
    """Parse an ``sp`` line; the file gives the diameter."""
    cur = _Cursor(line, 2)
    center = cur.read_vector()
    diameter = cur.read_unsigned_float()
    color = parse_color(cur.rest())
    return SceneObject(Sphere(center, diameter / 2), color)


def parse_plane(line: str) -> SceneObject:
    """Parse a ``pl`` line."""
    cur = _Cursor(line, 2)
    point = cur.read_vector()
    normal = cur.read_vector()
    color = parse_color(cur.rest())
    return SceneObject(Plane(point, normal), color)


def parse_square(line: str) -> SceneObject:
    """Parse an ``sq`` line."""
    cur = _Cursor(line, 2)
    center = cur.read_vector()
    normal = cur.read_vector()
    side = cur.read_unsigned_float()
    color = parse_color(cur.rest())
    try:
        square = Square(center, normal, side)
    except ValueError as exc:
        raise SceneParseError(str(exc)) from exc
    return SceneObject(square, color)


def parse_triangle(line: str) -> SceneObject:
    """Parse a ``tr`` line."""
    cur = _Cursor(line, 2)
    v1 = cur.read_vector()
    v2 = cur.read_vector()
    v3 = cur.read_vector()
    color = parse_color(cur.rest())
    try:
        triangle = Triangle(v1, v2, v3)
    except ValueError as exc:
        raise SceneParseError(str(exc)) from exc
    return SceneObject(triangle, color)


_SHAPE_PARSERS: dict[str, Callable[[str], SceneObject]] = {
    "sp": parse_sphere,
    "pl": parse_plane,
    "sq": parse_square,
    "tr": parse_triangle,
}


def parse_line(line: str, scene: Scene) -> None:
    """Parse one line and store what it describes in ``scene``."""
    first, second = line[:1], line[1:2]
    if first == "R":
        scene.screen = parse_resolution(line)
    elif first == "A":
        scene.ambient = parse_ambient(line)
    elif first == "c" and _isspace(second):
        scene.cameras.append(parse_camera(line))
    elif first == "l":
        scene.lights.append(parse_light(line))
    elif line[:2] == "cy":
        raise SceneParseError("cylinders are not supported")
    elif line[:2] in _SHAPE_PARSERS:
        scene.objects.append(_SHAPE_PARSERS[line[:2]](line))


def parse_scene(lines: Iterable[str] | str) -> Scene:
    """Build a scene from the lines of a description; a string is split into lines."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    scene = Scene()
    resolutions = 0
    ambients = 0
    for number, line in enumerate(lines, start=1):
        try:
            parse_line(line, scene)
        except SceneParseError as exc:
            raise SceneParseError(f"line {number}: {exc}") from exc
        if line.startswith("R"):
            resolutions += 1
        elif line.startswith("A"):
            ambients += 1
        if resolutions > 1 or ambients > 1:
            raise SceneParseError(f"line {number}: too many A or R elements")
    return scene