"""Homogeneous 4x4 matrices and the affine transforms built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from minirt.vector import Vec3, Vec4

_Row = tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class Matrix4:
    """A 4x4 matrix stored row by row."""

    rows: tuple[_Row, _Row, _Row, _Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def identity(cls) -> Matrix4:
        """The identity matrix."""
        return cls(tuple(tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)))

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = tuple(zip(*other.rows))
        return Matrix4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    def transform(self, v: Vec4) -> Vec4:
        """Multiply the matrix by a column vector."""
        return Vec4(*(sum(a * b for a, b in zip(row, v)) for row in self.rows))


def translate(m: Matrix4, v: Vec3) -> Matrix4:
    """Follow ``m`` by a translation along ``v``."""
    t = Matrix4(
        (
            (1.0, 0.0, 0.0, v.x),
            (0.0, 1.0, 0.0, v.y),
            (0.0, 0.0, 1.0, v.z),
            (0.0, 0.0, 0.0, 1.0),
        )
    )
    return t @ m


def rotate(m: Matrix4, angle: float, axis: Vec3) -> Matrix4:
    """Follow ``m`` by a rotation of ``angle`` radians about ``axis`` through the origin."""
    c = math.cos(angle)
    k = 1 - c
    s = math.sin(angle)
    x, y, z = axis
    r = Matrix4(
        (
            (c + x * x * k, x * y * k - s * z, x * z * k + y * s, 0.0),
            (x * y * k + z * s, c + y * y * k, y * z * k - x * s, 0.0),
            (x * z * k - y * s, y * z * k + x * s, c + z * z * k, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
    )
    return r @ m


def rotate_local(m: Matrix4, angle: float, axis: Vec3, center: Vec3) -> Matrix4:
    """Follow ``m`` by a rotation about ``axis`` through ``center``."""
    if angle == 0:
        return m
    m = translate(m, -center)
    m = rotate(m, angle, axis)
    return translate(m, center)


def apply_matrix(m: Matrix4, target: Vec3) -> Vec3:
    """Transform ``target`` as a direction, ignoring translation."""
    return m.transform(target.as_direction4()).to_vec3()