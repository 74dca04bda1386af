"""Two-component float vectors."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass, replace
from typing import Iterator

__all__ = ["Vec2f"]

_NORMALIZE_THRESHOLD = 1e-6


@dataclass
class Vec2f:
    """A 2D vector. Arithmetic methods modify the vector in place."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def clear(self) -> None:
        """Set every component to zero."""
        self.x = self.y = 0.0

    def add(self, other: Vec2f) -> None:
        """Add ``other`` to this vector."""
        self.x += other.x
        self.y += other.y

    def add_scaled(self, other: Vec2f, scale: float) -> None:
        """Add ``other`` multiplied by ``scale`` to this vector."""
        self.x += other.x * scale
        self.y += other.y * scale

    def subtract(self, other: Vec2f) -> None:
        """Subtract ``other`` from this vector."""
        self.x -= other.x
        self.y -= other.y

    def product_by_scalar(self, scalar: float) -> None:
        """Multiply every component by ``scalar``."""
        self.x *= scalar
        self.y *= scalar

    def divide_by_scalar(self, scalar: float) -> None:
        """Divide every component by ``scalar``; a zero divisor leaves the vector unchanged."""
        if scalar != 0.0:
            self.x /= scalar
            self.y /= scalar

    def dot(self, other: Vec2f) -> float:
        """Dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def modulus(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> None:
        """Scale to unit length; vectors shorter than 1e-6 are left unchanged."""
        length = self.modulus()
        if length > _NORMALIZE_THRESHOLD:
            inv = 1.0 / length
            self.x *= inv
            self.y *= inv

    def lerp(self, other: Vec2f, proportion: float) -> Vec2f:
        """Return the linear interpolation between this vector and ``other``."""
        return Vec2f(
            self.x + proportion * (other.x - self.x),
            self.y + proportion * (other.y - self.y),
        )

    def compare(self, other: Vec2f, epsilon: float) -> bool:
        """True when every component differs from ``other`` by less than ``epsilon``."""
        return all(abs(a - b) < epsilon for a, b in zip(self, other))

    def is_finite(self) -> bool:
        """True when no component is infinite or NaN."""
        return all(math.isfinite(c) for c in self)

    def copy(self) -> Vec2f:
        """Return an independent copy."""
        return replace(self)