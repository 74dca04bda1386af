import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from viewmath.mat44 import Mat44f, SingularMatrixError
from viewmath.vec3 import Vec3f
from viewmath.vec4 import Vec4f

IDENTITY_FLAT = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def _sample() -> Mat44f:
    return Mat44f(
        [
            [2.0, 0.5, 1.0, 3.0],
            [0.0, 1.5, -1.0, 2.0],
            [1.0, 0.0, 3.0, -1.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


SAMPLE_FLAT = (
    2.0, 0.0, 1.0, 0.0,
    0.5, 1.5, 0.0, 0.0,
    1.0, -1.0, 3.0, 0.0,
    3.0, 2.0, -1.0, 1.0,
)


angles = st.floats(min_value=-math.pi, max_value=math.pi, allow_nan=False)
offsets = st.floats(min_value=-100.0, max_value=100.0, allow_nan=False)


def test_default_is_zero_and_clear_zeroes():
    m = _sample()
    m.clear()
    assert m == Mat44f()
    assert all(v == 0.0 for v in Mat44f().column_major())


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        Mat44f([[1.0, 2.0]])


def test_identity_column_major_layout():
    assert Mat44f.identity().column_major() == IDENTITY_FLAT


def test_sample_column_major_layout():
    assert _sample().column_major() == SAMPLE_FLAT


def test_translation_column_major_puts_offsets_last():
    flat = Mat44f.translation(4.0, 5.0, 6.0).column_major()
    assert flat[12:15] == (4.0, 5.0, 6.0)


def test_set_row_and_index():
    m = Mat44f()
    m.set_row(2, 1.0, 2.0, 3.0, 4.0)
    assert m.rows[2] == (1.0, 2.0, 3.0, 4.0)
    assert m[2, 3] == 4.0
    with pytest.raises(IndexError):
        m.set_row(4, 0.0, 0.0, 0.0, 0.0)


def test_add_then_subtract_round_trip():
    m = _sample()
    other = Mat44f.rotate_x(0.3)
    m.add(other)
    m.subtract(other)
    assert m.column_major() == pytest.approx(SAMPLE_FLAT, abs=1e-6)


def test_multiply_by_identity_is_noop():
    m = _sample()
    m.multiply(Mat44f.identity())
    assert m == _sample()
    assert Mat44f.identity() @ _sample() == _sample()


def test_product_by_scalar_round_trip():
    m = _sample()
    m.product_by_scalar(4.0)
    assert m[0, 0] == 8.0
    m.product_by_scalar(0.25)
    assert m.column_major() == pytest.approx(SAMPLE_FLAT, abs=1e-6)


def test_transpose_twice_restores():
    m = _sample()
    m.transpose()
    assert m[0, 1] == _sample()[1, 0]
    m.transpose()
    assert m == _sample()


def test_set_identity():
    m = _sample()
    m.set_identity()
    assert m == Mat44f.identity()


def test_determinant_of_identity_and_product_rule():
    a = _sample()
    b = Mat44f.rotate_y(0.7) @ Mat44f.scale(2.0, 3.0, 0.5)
    assert Mat44f.identity().determinant() == 1.0
    assert math.isclose((a @ b).determinant(), a.determinant() * b.determinant(), rel_tol=1e-9)


def test_determinant_unchanged_by_transpose():
    m = _sample()
    t = m.copy()
    t.transpose()
    assert math.isclose(m.determinant(), t.determinant(), rel_tol=1e-12)


def test_inverse_round_trip():
    m = _sample()
    inv = m.inverse()
    assert (m @ inv).column_major() == pytest.approx(IDENTITY_FLAT, abs=1e-6)
    assert (inv @ m).column_major() == pytest.approx(IDENTITY_FLAT, abs=1e-6)


def test_singular_inverse_raises():
    with pytest.raises(SingularMatrixError):
        Mat44f().inverse()
    with pytest.raises(SingularMatrixError):
        Mat44f.scale(1.0, 0.0, 1.0).inverse()


@settings(max_examples=50)
@given(angles, angles, angles, offsets, offsets, offsets)
def test_rigid_transform_inverse(ax, ay, az, tx, ty, tz):
    m = (
        Mat44f.translation(tx, ty, tz)
        @ Mat44f.rotate_z(az)
        @ Mat44f.rotate_y(ay)
        @ Mat44f.rotate_x(ax)
    )
    assert math.isclose(m.determinant(), 1.0, abs_tol=1e-9)
    assert (m @ m.inverse()).column_major() == pytest.approx(IDENTITY_FLAT, abs=1e-6)


@given(angles)
def test_rotations_are_orthogonal(theta):
    for r in (Mat44f.rotate_x(theta), Mat44f.rotate_y(theta), Mat44f.rotate_z(theta)):
        t = r.copy()
        t.transpose()
        assert (r @ t).column_major() == pytest.approx(IDENTITY_FLAT, abs=1e-6)


def test_rotate_z_quarter_turn_maps_x_to_y():
    v = Mat44f.rotate_z(math.pi / 2.0).apply_transformation(Vec3f(1.0, 0.0, 0.0))
    assert v.compare(Vec3f(0.0, 1.0, 0.0), 1e-9)


def test_point_translation_and_direction_ignores_it():
    m = Mat44f.translation(4.0, 5.0, 6.0)
    point = m.apply_transformation(Vec3f(1.0, 1.0, 1.0))
    assert point == Vec3f(5.0, 6.0, 7.0)
    direction = m.apply_transformation(Vec3f(3.0, 0.0, 0.0), direction=True)
    assert direction.compare(Vec3f(1.0, 0.0, 0.0), 1e-12)


@given(offsets, offsets, offsets)
def test_direction_result_is_unit(x, y, z):
    v = Vec3f(x, y, z)
    if v.modulus() > 1e-3:
        out = Mat44f.rotate_x(0.4).apply_transformation(v, direction=True)
        assert math.isclose(out.modulus(), 1.0, abs_tol=1e-9)
    else:
        assert Mat44f.identity().apply_transformation(v).compare(v, 1e-12)


def test_product_vector_scale():
    v = Mat44f.scale(2.0, 3.0, 4.0).product_vector(Vec4f(1.0, 1.0, 1.0, 1.0))
    assert tuple(v) == (2.0, 3.0, 4.0, 1.0)


def test_perspective_maps_near_plane_to_minus_one():
    near, far = 0.1, 1000.0
    p = Mat44f.perspective(math.radians(45.0), 4.0 / 3.0, near, far)
    clip = p.product_vector(Vec4f(0.0, 0.0, -near, 1.0))
    assert math.isclose(clip.z / clip.w, -1.0, abs_tol=1e-9)
    clip_far = p.product_vector(Vec4f(0.0, 0.0, -far, 1.0))
    assert math.isclose(clip_far.z / clip_far.w, 1.0, abs_tol=1e-6)


def test_perspective_is_invertible():
    p = Mat44f.perspective(math.radians(45.0), 1.5, 0.1, 1000.0)
    assert (p @ p.inverse()).column_major() == pytest.approx(IDENTITY_FLAT, abs=1e-5)


def test_orthogonal_round_trip_of_corner():
    m = Mat44f.orthogonal(-2.0, 6.0, -1.0, 3.0, 0.5, 10.0)
    corner = Vec3f(-2.0, -1.0, -0.5)
    mapped = m.apply_transformation(corner)
    back = m.inverse().apply_transformation(mapped)
    assert back.compare(corner, 1e-9)
    assert math.isclose(mapped.x, mapped.y, abs_tol=1e-12)


def test_copy_is_independent():
    m = _sample()
    c = m.copy()
    c.set_row(0, 9.0, 9.0, 9.0, 9.0)
    assert m == _sample()
    assert c.rows[0] == (9.0, 9.0, 9.0, 9.0)