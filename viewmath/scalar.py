"""Scalar helpers: clamping and degree-to-radian conversion."""

from __future__ import annotations

import math

__all__ = ["clamp", "radian"]


def _fmin(a: float, b: float) -> float:
    """Smaller of two values, ignoring a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    """Larger of two values, ignoring a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Restrict ``value`` to the range ``[min_value, max_value]``.

    A NaN value is treated as missing, so the result is ``max_value``.
    """
    return _fmax(min_value, _fmin(max_value, value))


def radian(angle: float) -> float:
    """Convert an angle from degrees to radians."""
    return angle * math.pi / 180.0