import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from viewmath.mat44 import Mat44f
from viewmath.quat import Quat
from viewmath.vec3 import Vec3f

EPS = 1e-6

components = st.floats(min_value=-1.0, max_value=1.0, allow_nan=False)
angles = st.floats(min_value=-3.0, max_value=3.0, allow_nan=False)


def _axis(x, y, z):
    axis = Vec3f(x, y, z)
    assume(axis.modulus() > 0.1)
    axis.normalize()
    return axis


def _same_rotation(a, b, eps=1e-5):
    return a.compare(b, eps) or a.compare(Quat(-b.s, -b.i, -b.j, -b.k), eps)


def test_normalize_zero_gives_identity():
    q = Quat(0.0, 0.0, 0.0, 0.0)
    q.normalize()
    assert tuple(q) == (1.0, 0.0, 0.0, 0.0)


def test_square_modulus_and_modulus():
    q = Quat(1.0, 2.0, 3.0, 4.0)
    assert q.square_modulus() == pytest.approx(30.0)
    assert q.modulus() == pytest.approx(math.sqrt(q.square_modulus()))


def test_add_then_subtract_round_trip():
    q = Quat(0.5, -1.0, 2.0, 3.5)
    other = Quat(1.5, 0.25, -2.0, 1.0)
    q.add(other)
    q.subtract(other)
    assert q.compare(Quat(0.5, -1.0, 2.0, 3.5), EPS)


def test_is_unit_and_is_valid():
    assert Quat().is_valid()
    assert not Quat(2.0, 0.0, 0.0, 0.0).is_unit()
    assert not Quat(math.nan, 0.0, 0.0, 0.0).is_finite()
    assert not Quat(math.inf, 0.0, 0.0, 0.0).is_valid()


def test_rotation_about_z_quarter_turn():
    q = Quat.from_axis_angle(Vec3f(0.0, 0.0, 1.0), math.pi / 2)
    rotated = q.direct_rotation(Vec3f(1.0, 0.0, 0.0))
    assert rotated.compare(Vec3f(0.0, 1.0, 0.0), EPS)


def test_product_vector_identity_leaves_vector():
    v = Vec3f(1.5, -2.0, 3.0)
    assert Quat().product_vector(v).compare(v, EPS)


@given(components, components, components, angles)
def test_product_with_conjugate_is_identity(x, y, z, angle):
    q = Quat.from_axis_angle(_axis(x, y, z), angle)
    conj = q.copy()
    conj.inverse()
    assert q.product(conj).compare(Quat(), 1e-9)


@given(components, components, components, angles)
def test_multiply_matches_product(x, y, z, angle):
    q = Quat.from_axis_angle(_axis(x, y, z), angle)
    other = Quat.from_axis_angle(Vec3f(0.0, 1.0, 0.0), 0.7)
    expected = q.product(other)
    q.multiply(other)
    assert q.compare(expected, 1e-12)


@given(components, components, components, angles)
def test_from_axis_angle_is_valid(x, y, z, angle):
    assert Quat.from_axis_angle(_axis(x, y, z), angle).is_valid()


@given(components, components, components, angles, components, components, components)
def test_matrix_agrees_with_direct_rotation(x, y, z, angle, vx, vy, vz):
    q = Quat.from_axis_angle(_axis(x, y, z), angle)
    v = Vec3f(vx, vy, vz)
    expected = q.direct_rotation(v)
    assert q.to_rotation_matrix().apply_transformation(v).compare(expected, 1e-6)


@pytest.mark.parametrize("theta", [0.3, 1.2, -2.0])
def test_rotation_matrix_matches_rotate_z(theta):
    m = Quat.from_axis_angle(Vec3f(0.0, 0.0, 1.0), theta).to_rotation_matrix()
    expected = Mat44f.rotate_z(theta)
    for row_a, row_b in zip(m, expected):
        assert row_a == pytest.approx(row_b, abs=1e-9)


@pytest.mark.parametrize(
    "axis, angle",
    [
        (Vec3f(1.0, 0.0, 0.0), 0.4),
        (Vec3f(1.0, 0.0, 0.0), math.pi),
        (Vec3f(0.0, 1.0, 0.0), math.pi),
        (Vec3f(0.0, 0.0, 1.0), math.pi),
        (Vec3f(0.0, 0.6, 0.8), 2.5),
    ],
)
def test_rotation_matrix_round_trip(axis, angle):
    q = Quat.from_axis_angle(axis, angle)
    back = Quat.from_rotation_matrix(q.to_rotation_matrix())
    assert _same_rotation(back, q)


def test_to_rotation_matrix_normalizes_self():
    q = Quat(2.0, 0.0, 0.0, 0.0)
    q.to_rotation_matrix()
    assert q.is_unit()


def test_from_euler_angles_zero_is_identity():
    assert Quat.from_euler_angles(Vec3f()).compare(Quat(), EPS)


@given(angles)
def test_from_euler_angles_x_only_matches_axis_angle(angle):
    euler = Quat.from_euler_angles(Vec3f(angle, 0.0, 0.0))
    axis = Quat.from_axis_angle(Vec3f(1.0, 0.0, 0.0), angle)
    assert euler.compare(axis, 1e-9)


def test_from_vectors_same_is_identity():
    v = Vec3f(0.0, 1.0, 0.0)
    assert Quat.from_vectors(v, v).compare(Quat(), EPS)


def test_from_vectors_opposite_turns_half():
    v1 = Vec3f(1.0, 0.0, 0.0)
    v2 = Vec3f(-1.0, 0.0, 0.0)
    q = Quat.from_vectors(v1, v2)
    assert q.direct_rotation(v1).compare(v2, 1e-6)


@given(components, components, components, components, components, components)
def test_from_vectors_maps_first_onto_second(ax, ay, az, bx, by, bz):
    v1 = _axis(ax, ay, az)
    v2 = _axis(bx, by, bz)
    assume(abs(v1.dot(v2)) < 0.99)
    q = Quat.from_vectors(v1, v2)
    assert q.direct_rotation(v1).compare(v2, 1e-5)


def test_lerp_endpoints():
    a = Quat.from_axis_angle(Vec3f(0.0, 0.0, 1.0), 0.2)
    b = Quat.from_axis_angle(Vec3f(0.0, 0.0, 1.0), 1.4)
    assert a.lerp(b, 0.0).compare(a, EPS)
    assert a.lerp(b, 1.0).compare(b, EPS)
    assert a.lerp(b, 0.5).is_unit()


def test_slerp_endpoints_and_midpoint():
    a = Quat.from_axis_angle(Vec3f(0.0, 0.0, 1.0), 0.0)
    b = Quat.from_axis_angle(Vec3f(0.0, 0.0, 1.0), 2.0)
    assert a.slerp(b, 0.0).compare(a, EPS)
    assert a.slerp(b, 1.0).compare(b, EPS)
    mid = Quat.from_axis_angle(Vec3f(0.0, 0.0, 1.0), 1.0)
    assert a.slerp(b, 0.5).compare(mid, EPS)


def test_slerp_close_quaternions_uses_linear_path():
    a = Quat.from_axis_angle(Vec3f(1.0, 0.0, 0.0), 0.01)
    b = Quat.from_axis_angle(Vec3f(1.0, 0.0, 0.0), 0.02)
    assert a.slerp(b, 0.3).compare(a.lerp(b, 0.3), 1e-12)


def test_copy_is_independent():
    q = Quat(0.5, 0.5, 0.5, 0.5)
    c = q.copy()
    c.inverse()
    assert q == Quat(0.5, 0.5, 0.5, 0.5)
    assert c == Quat(0.5, -0.5, -0.5, -0.5)