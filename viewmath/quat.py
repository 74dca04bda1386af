"""Quaternions for 3D rotations."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass, replace
from typing import Iterator

from viewmath.mat44 import Mat44f
from viewmath.vec3 import Vec3f

__all__ = ["Quat"]

_UNIT_TOLERANCE = 0.00001
_SLERP_LINEAR_THRESHOLD = 0.9995
_SAME_VECTOR_EPSILON = 0.001


def _acos(x: float) -> float:
    """Arc cosine that yields NaN outside ``[-1, 1]``."""
    return math.acos(x) if -1.0 <= x <= 1.0 else math.nan


@dataclass
class Quat:
    """A quaternion ``s + i*I + j*J + k*K``. Arithmetic methods modify it in place."""

    s: float = 1.0
    i: float = 0.0
    j: float = 0.0
    k: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def add(self, other: Quat) -> None:
        """Add ``other`` component by component."""
        self.s += other.s
        self.i += other.i
        self.j += other.j
        self.k += other.k

    def subtract(self, other: Quat) -> None:
        """Subtract ``other`` component by component."""
        self.s -= other.s
        self.i -= other.i
        self.j -= other.j
        self.k -= other.k

    def product(self, other: Quat) -> Quat:
        """Return the Hamilton product ``self * other``."""
        return Quat(
            self.s * other.s - self.i * other.i - self.j * other.j - self.k * other.k,
            self.s * other.i + self.i * other.s + self.j * other.k - self.k * other.j,
            self.s * other.j - self.i * other.k + self.j * other.s + self.k * other.i,
            self.s * other.k + self.i * other.j - self.j * other.i + self.k * other.s,
        )

    def product_vector(self, vector: Vec3f) -> Vec3f:
        """Return the vector obtained by the quaternion-vector sandwich product."""
        s, i, j, k = self.s, self.i, self.j, self.k
        prod_x = s * vector.x + i * vector.z - k * vector.y
        prod_y = s * vector.y + j * vector.x - i * vector.z
        prod_z = s * vector.z + k * vector.y - j * vector.x
        prod_w = -i * vector.x - j * vector.y - k * vector.z
        return Vec3f(
            s * prod_x - prod_y * k + prod_z * j - prod_w * i,
            s * prod_y - prod_z * i + prod_x * k - prod_w * j,
            s * prod_z - prod_x * j + prod_y * i - prod_w * k,
        )

    def multiply(self, other: Quat) -> None:
        """Replace this quaternion with ``self * other``."""
        self.s, self.i, self.j, self.k = self.product(other)

    def inverse(self) -> None:
        """Conjugate in place, which inverts a unit quaternion."""
        self.i = -self.i
        self.j = -self.j
        self.k = -self.k

    def square_modulus(self) -> float:
        """Sum of the squared components."""
        return sum(c * c for c in self)

    def modulus(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.square_modulus())

    def compare(self, other: Quat, epsilon: float) -> bool:
        """True when every component differs from ``other`` by less than ``epsilon``."""
        return all(abs(a - b) < epsilon for a, b in zip(self, other))

    def is_finite(self) -> bool:
        """True when no component is infinite or NaN."""
        return all(math.isfinite(c) for c in self)

    def is_unit(self) -> bool:
        """True when the modulus is within 1e-5 of one."""
        return abs(self.modulus() - 1.0) < _UNIT_TOLERANCE

    def is_valid(self) -> bool:
        """True for a finite unit quaternion."""
        return self.is_finite() and self.is_unit()

    def normalize(self) -> None:
        """Scale to unit modulus; a zero quaternion becomes the identity."""
        modulus = self.modulus()
        if modulus == 0.0:
            self.s, self.i, self.j, self.k = 1.0, 0.0, 0.0, 0.0
            return
        inv = 1.0 / modulus
        self.s *= inv
        self.i *= inv
        self.j *= inv
        self.k *= inv

    def direct_rotation(self, vector: Vec3f) -> Vec3f:
        """Return ``vector`` rotated by this quaternion."""
        s, i, j, k = self.s, self.i, self.j, self.k
        ix = s * vector.x + j * vector.z - k * vector.y
        iy = s * vector.y + k * vector.x - i * vector.z
        iz = s * vector.z + i * vector.y - j * vector.x
        iw = -i * vector.x - j * vector.y - k * vector.z
        return Vec3f(
            ix * s + iw * -i + iy * -k - iz * -j,
            iy * s + iw * -j + iz * -i - ix * -k,
            iz * s + iw * -k + ix * -j - iy * -i,
        )

    def _linear(self, other: Quat, proportion: float) -> Quat:
        return Quat(*(a + proportion * (b - a) for a, b in zip(self, other)))

    def lerp(self, other: Quat, proportion: float) -> Quat:
        """Normalized linear interpolation towards ``other``."""
        result = self._linear(other, proportion)
        result.normalize()
        return result

    def slerp(self, other: Quat, proportion: float) -> Quat:
        """Spherical linear interpolation towards ``other``.

        Nearly aligned quaternions fall back to normalized linear interpolation.
        """
        dot = sum(a * b for a, b in zip(self, other))
        if dot > _SLERP_LINEAR_THRESHOLD:
            result = self._linear(other, proportion)
        else:
            theta = _acos(dot)
            sin_theta = math.sin(theta)
            wa = math.sin((1.0 - proportion) * theta) / sin_theta
            wb = math.sin(proportion * theta) / sin_theta
            result = Quat(*(a * wa + b * wb for a, b in zip(self, other)))
        result.normalize()
        return result

    @classmethod
    def from_axis_angle(cls, axis: Vec3f, angle: float) -> Quat:
        """Rotation of ``angle`` radians about ``axis``, normalized."""
        half = angle * 0.5
        sin_half = math.sin(half)
        result = cls(math.cos(half), axis.x * sin_half, axis.y * sin_half, axis.z * sin_half)
        result.normalize()
        return result

    @classmethod
    def from_vectors(cls, v1: Vec3f, v2: Vec3f) -> Quat:
        """Rotation that turns the direction of ``v1`` into that of ``v2``."""
        eps = _SAME_VECTOR_EPSILON
        if v1.compare(v2, eps):
            return cls.from_axis_angle(v1, 0.0)
        if v1.compare(Vec3f(-v2.x, -v2.y, -v2.z), eps):
            axis = Vec3f()
            if -eps < v1.x < eps:
                axis = Vec3f(1.0, 0.0, 0.0)
            elif -eps < v1.y < eps:
                axis = Vec3f(0.0, 1.0, 0.0)
            elif -eps < v1.z < eps:
                axis = Vec3f(0.0, 0.0, 1.0)
            return cls.from_axis_angle(axis, math.pi)
        u1 = v1.copy()
        u2 = v2.copy()
        u1.normalize()
        u2.normalize()
        axis = u1.cross(u2)
        axis.normalize()
        return cls.from_axis_angle(axis, _acos(u1.dot(u2)))

    def to_rotation_matrix(self) -> Mat44f:
        """Normalize this quaternion in place and return its rotation matrix."""
        self.normalize()
        s, i, j, k = self.s, self.i, self.j, self.k
        ii, jj, kk = i * i, j * j, k * k
        ij, ik, jk = i * j, i * k, j * k
        si, sj, sk = s * i, s * j, s * k
        rotation = Mat44f()
        rotation.set_row(0, 1.0 - 2.0 * (jj + kk), 2.0 * (ij - sk), 2.0 * (ik + sj), 0.0)
        rotation.set_row(1, 2.0 * (ij + sk), 1.0 - 2.0 * (ii + kk), 2.0 * (jk - si), 0.0)
        rotation.set_row(2, 2.0 * (ik - sj), 2.0 * (jk + si), 1.0 - 2.0 * (ii + jj), 0.0)
        rotation.set_row(3, 0.0, 0.0, 0.0, 1.0)
        return rotation

    @classmethod
    def from_rotation_matrix(cls, rotation: Mat44f) -> Quat:
        """Unit quaternion of the rotation held in the upper 3x3 of ``rotation``."""
        m = rotation
        e11, e22, e33 = m[0, 0], m[1, 1], m[2, 2]
        trace = e11 + e22 + e33
        if trace > 0.0:
            w = math.sqrt(trace + 1.0) * 2.0
            result = cls(
                0.25 * w,
                (m[2, 1] - m[1, 2]) / w,
                (m[0, 2] - m[2, 0]) / w,
                (m[1, 0] - m[0, 1]) / w,
            )
        elif e11 > e22 and e11 > e33:
            w = math.sqrt(1.0 + e11 - e22 - e33) * 2.0
            result = cls(
                (m[2, 1] - m[1, 2]) / w,
                0.25 * w,
                (m[0, 1] + m[1, 0]) / w,
                (m[0, 2] + m[2, 0]) / w,
            )
        elif e22 > e33:
            w = math.sqrt(1.0 + e22 - e11 - e33) * 2.0
            result = cls(
                (m[0, 2] - m[2, 0]) / w,
                (m[0, 1] + m[1, 0]) / w,
                0.25 * w,
                (m[1, 2] + m[2, 1]) / w,
            )
        else:
            w = math.sqrt(1.0 + e33 - e11 - e22) * 2.0
            result = cls(
                (m[1, 0] - m[0, 1]) / w,
                (m[0, 2] + m[2, 0]) / w,
                (m[1, 2] + m[2, 1]) / w,
                0.25 * w,
            )
        result.normalize()
        return result

    @classmethod
    def from_euler_angles(cls, angles: Vec3f) -> Quat:
        """Unit quaternion from Euler angles in radians held in ``angles``."""
        c1, s1 = math.cos(angles.x * 0.5), math.sin(angles.x * 0.5)
        c2, s2 = math.cos(angles.y * 0.5), math.sin(angles.y * 0.5)
        c3, s3 = math.cos(angles.z * 0.5), math.sin(angles.z * 0.5)
        result = cls(
            c1 * c2 * c3 - s1 * s2 * s3,
            s1 * c2 * c3 + c1 * s2 * s3,
            c1 * s2 * c3 - s1 * c2 * s3,
            c1 * c2 * s3 + s1 * s2 * c3,
        )
        result.normalize()
        return result

    def copy(self) -> Quat:
        """Return an independent copy."""
        return replace(self)