"""Four-component float vectors."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass, replace
from typing import Iterator

__all__ = ["Vec4f"]


@dataclass
class Vec4f:
    """A 4D (homogeneous) vector. Arithmetic methods modify the vector in place."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def clear(self) -> None:
        """Set every component to zero."""
        self.x = self.y = self.z = self.w = 0.0

    def add(self, other: Vec4f) -> None:
        """Add ``other`` to this vector."""
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w

    def add_scaled(self, other: Vec4f, scale: float) -> None:
        """Add ``other`` multiplied by ``scale`` to this vector."""
        self.x += other.x * scale
        self.y += other.y * scale
        self.z += other.z * scale
        self.w += other.w * scale

    def subtract(self, other: Vec4f) -> None:
        """Subtract ``other`` from this vector."""
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w

    def compare(self, other: Vec4f, epsilon: float) -> bool:
        """True when every component differs from ``other`` by less than ``epsilon``."""
        return all(abs(a - b) < epsilon for a, b in zip(self, other))

    def is_finite(self) -> bool:
        """True when no component is infinite or NaN."""
        return all(math.isfinite(c) for c in self)

    def copy(self) -> Vec4f:
        """Return an independent copy."""
        return replace(self)