"""Three-component float vectors."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass, replace
from typing import Iterator

from viewmath.scalar import clamp
from viewmath.shaping import ShapingEffect, shaping
from viewmath.tween import TweenEffect, tween

__all__ = ["Vec3f"]

_NORMALIZE_THRESHOLD = 1e-6


@dataclass
class Vec3f:
    """A 3D vector. Arithmetic methods modify the vector in place."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def clear(self) -> None:
        """Set every component to zero."""
        self.x = self.y = self.z = 0.0

    def add(self, other: Vec3f) -> None:
        """Add ``other`` to this vector."""
        self.x += other.x
        self.y += other.y
        self.z += other.z

    def add_scaled(self, other: Vec3f, scale: float) -> None:
        """Add ``other`` multiplied by ``scale`` to this vector."""
        self.x += other.x * scale
        self.y += other.y * scale
        self.z += other.z * scale

    def subtract(self, other: Vec3f) -> None:
        """Subtract ``other`` from this vector."""
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z

    def product_by_scalar(self, scalar: float) -> None:
        """Multiply every component by ``scalar``."""
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar

    def divide_by_scalar(self, scalar: float) -> None:
        """Divide every component by ``scalar``; a zero divisor leaves the vector unchanged."""
        if scalar != 0.0:
            self.x /= scalar
            self.y /= scalar
            self.z /= scalar

    def cross(self, other: Vec3f) -> Vec3f:
        """Return the cross product ``self x other``."""
        return Vec3f(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vec3f) -> float:
        """Dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def modulus(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> None:
        """Scale to unit length; vectors shorter than 1e-6 are left unchanged."""
        length = self.modulus()
        if length > _NORMALIZE_THRESHOLD:
            inv = 1.0 / length
            self.x *= inv
            self.y *= inv
            self.z *= inv

    def lerp(self, other: Vec3f, effect: ShapingEffect | int, proportion: float) -> Vec3f:
        """Interpolate towards ``other`` with ``proportion`` first passed through a shaping curve."""
        p = shaping(effect, proportion)
        return Vec3f(
            self.x + p * (other.x - self.x),
            self.y + p * (other.y - self.y),
            self.z + p * (other.z - self.z),
        )

    def tween(
        self,
        other: Vec3f,
        effect: TweenEffect | int,
        current_time: float,
        duration: float,
    ) -> Vec3f:
        """Tween each component from this vector to ``other`` at ``current_time``."""
        return Vec3f(
            *(tween(effect, current_time, a, b - a, duration) for a, b in zip(self, other))
        )

    def compare(self, other: Vec3f, epsilon: float) -> bool:
        """True when every component differs from ``other`` by less than ``epsilon``."""
        return all(abs(a - b) < epsilon for a, b in zip(self, other))

    def is_finite(self) -> bool:
        """True when no component is infinite or NaN."""
        return all(math.isfinite(c) for c in self)

    def find_perpendicular(self) -> Vec3f:
        """Return a unit vector perpendicular to this one.

        The cross product is taken with the basis axis this vector is least
        aligned with, oriented to match the sign of that component.
        """
        ax, ay, az = abs(self.x), abs(self.y), abs(self.z)
        if ax <= ay and ax <= az:
            axis = Vec3f(-1.0 if self.x < 0.0 else 1.0, 0.0, 0.0)
        elif ay <= ax and ay <= az:
            axis = Vec3f(0.0, -1.0 if self.y < 0.0 else 1.0, 0.0)
        else:
            axis = Vec3f(0.0, 0.0, -1.0 if self.z < 0.0 else 1.0)
        perpendicular = self.cross(axis)
        perpendicular.normalize()
        return perpendicular

    def angle_between(self, other: Vec3f) -> float:
        """Angle in radians between the two vectors, or 0 if either is near zero."""
        mod_a = self.modulus()
        mod_b = other.modulus()
        if mod_a > _NORMALIZE_THRESHOLD and mod_b > _NORMALIZE_THRESHOLD:
            cos_theta = clamp(self.dot(other) / (mod_a * mod_b), -1.0, 1.0)
            return math.acos(cos_theta)
        return 0.0

    def distance(self, other: Vec3f) -> float:
        """Euclidean distance to ``other``."""
        return math.sqrt(sum((a - b) ** 2 for a, b in zip(self, other)))

    def median(self, other: Vec3f) -> Vec3f:
        """Return the midpoint between this vector and ``other``."""
        return Vec3f(*((a + b) / 2.0 for a, b in zip(self, other)))

    def set_modulus(self, modulus: float) -> None:
        """Rescale to length ``modulus``; a non-positive length zeroes the vector."""
        if modulus > 0.0:
            self.normalize()
            self.product_by_scalar(modulus)
        else:
            self.clear()

    def min(self, other: Vec3f) -> None:
        """Replace each component by the smaller of it and ``other``'s."""
        self.x = other.x if other.x < self.x else self.x
        self.y = other.y if other.y < self.y else self.y
        self.z = other.z if other.z < self.z else self.z

    def max(self, other: Vec3f) -> None:
        """Replace each component by the larger of it and ``other``'s."""
        self.x = other.x if other.x > self.x else self.x
        self.y = other.y if other.y > self.y else self.y
        self.z = other.z if other.z > self.z else self.z

    def clamp(self, minimum: Vec3f, maximum: Vec3f) -> None:
        """Restrict each component to the matching range of ``minimum`` and ``maximum``."""
        self.x = clamp(self.x, minimum.x, maximum.x)
        self.y = clamp(self.y, minimum.y, maximum.y)
        self.z = clamp(self.z, minimum.z, maximum.z)

    def copy(self) -> Vec3f:
        """Return an independent copy."""
        return replace(self)