import math

import pytest

from minirt.transformation import Matrix4, apply_matrix, rotate, rotate_local, translate
from minirt.vector import Vec3, Vec4


def _sample() -> Matrix4:
    return Matrix4(
        (
            (1, 2, 3, 4),
            (5, 6, 7, 8),
            (9, 10, 11, 12),
            (13, 14, 15, 16),
        )
    )


def test_identity_is_neutral_for_product():
    m = _sample()
    assert Matrix4.identity() @ m == m
    assert m @ Matrix4.identity() == m


def test_identity_transform_keeps_vector():
    v = Vec4(1.5, -2.0, 3.25, 1.0)
    assert Matrix4.identity().transform(v) == v


def test_product_is_associative():
    a = _sample()
    b = translate(Matrix4.identity(), Vec3(1, 2, 3))
    c = rotate(Matrix4.identity(), 0.3, Vec3(0, 0, 1))
    left = (a @ b) @ c
    right = a @ (b @ c)
    for row_l, row_r in zip(left.rows, right.rows):
        assert row_l == pytest.approx(row_r)


def test_wrong_shape_rejected():
    with pytest.raises(ValueError):
        Matrix4(((1, 0, 0), (0, 1, 0), (0, 0, 1)))


def test_translate_moves_points():
    shift = Vec3(1, 2, 3)
    m = translate(Matrix4.identity(), shift)
    moved = m.transform(Vec3(0, 0, 0).as_point4())
    assert moved.to_vec3() == shift
    assert moved.w == 1.0


def test_translate_ignores_directions():
    m = translate(Matrix4.identity(), Vec3(4, 5, 6))
    d = Vec3(1, -1, 2)
    assert apply_matrix(m, d) == d


def test_rotate_quarter_turn_about_z():
    m = rotate(Matrix4.identity(), math.pi / 2, Vec3(0, 0, 1))
    assert tuple(apply_matrix(m, Vec3(1, 0, 0))) == pytest.approx((0, 1, 0), abs=1e-12)


@pytest.mark.parametrize("angle", [0.1, 1.0, 2.5, -0.7])
def test_rotate_preserves_length(angle):
    axis = Vec3(1, 2, 2).normalized()
    v = Vec3(3, -1, 4)
    m = rotate(Matrix4.identity(), angle, axis)
    assert apply_matrix(m, v).length() == pytest.approx(v.length())


def test_rotate_keeps_axis_fixed():
    axis = Vec3(0, 1, 1).normalized()
    m = rotate(Matrix4.identity(), 1.2, axis)
    assert tuple(apply_matrix(m, axis)) == pytest.approx(tuple(axis))


def test_rotate_then_inverse_is_identity():
    axis = Vec3(1, 0, 1).normalized()
    m = rotate(rotate(Matrix4.identity(), 0.8, axis), -0.8, axis)
    for row, expected in zip(m.rows, Matrix4.identity().rows):
        assert row == pytest.approx(expected, abs=1e-12)


def test_rotate_local_zero_angle_returns_same_matrix():
    m = _sample()
    assert rotate_local(m, 0, Vec3(0, 0, 1), Vec3(1, 2, 3)) is m


def test_rotate_local_keeps_center_fixed():
    center = Vec3(3, -2, 7)
    m = rotate_local(Matrix4.identity(), 0.9, Vec3(0, 1, 0), center)
    result = m.transform(center.as_point4()).to_vec3()
    assert tuple(result) == pytest.approx(tuple(center))


def test_rotate_local_preserves_distance_to_center():
    center = Vec3(1, 1, 1)
    p = Vec3(4, 0, 2)
    m = rotate_local(Matrix4.identity(), 2.0, Vec3(0, 0, 1), center)
    q = m.transform(p.as_point4()).to_vec3()
    assert (q - center).length() == pytest.approx((p - center).length())