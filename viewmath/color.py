"""RGB and RGBA colours with float components."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass, replace
from typing import Iterator

__all__ = ["Col3f", "Col4f"]


@dataclass
class Col3f:
    """An RGB colour."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def clear(self) -> None:
        """Set every component to zero."""
        self.red = self.green = self.blue = 0.0

    def compare(self, other: Col3f, epsilon: float) -> bool:
        """True when every component differs from ``other`` by less than ``epsilon``."""
        return all(abs(a - b) < epsilon for a, b in zip(self, other))

    def is_finite(self) -> bool:
        """True when no component is infinite or NaN."""
        return all(math.isfinite(c) for c in self)

    def copy(self) -> Col3f:
        """Return an independent copy."""
        return replace(self)


@dataclass
class Col4f:
    """An RGBA colour."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def clear(self) -> None:
        """Set every component to zero."""
        self.red = self.green = self.blue = self.alpha = 0.0

    def compare(self, other: Col4f, epsilon: float) -> bool:
        """True when every component differs from ``other`` by less than ``epsilon``."""
        return all(abs(a - b) < epsilon for a, b in zip(self, other))

    def is_finite(self) -> bool:
        """True when no component is infinite or NaN."""
        return all(math.isfinite(c) for c in self)

    def copy(self) -> Col4f:
        """Return an independent copy."""
        return replace(self)