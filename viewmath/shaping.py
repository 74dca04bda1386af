"""Shaping curves that remap a proportion ``t``, usually in ``[0, 1]``."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable, Dict

__all__ = ["ShapingEffect", "shaping"]


class ShapingEffect(IntEnum):
    """Available shaping curves."""

    LINEAR = 0
    SQUARED = 1
    CUBED = 2
    SQUARE_ROOT = 3
    CUBIC_ROOT = 4
    SMOOTH_STEP = 5
    SMOOTHER_STEP = 6
    QUADRATIC_EASE_OUT = 7
    PARABOLA = 8
    TRIANGLE = 9
    ELASTIC_OUT = 10
    BOUNCE_OUT = 11


def _unit(t: float) -> float:
    return 0.0 if t < 0.0 else 1.0 if t > 1.0 else t


def _linear(t: float) -> float:
    return t


def _squared(t: float) -> float:
    return t * t


def _cubed(t: float) -> float:
    return t * t * t


def _square_root(t: float) -> float:
    if t < 0.0:
        return math.nan
    return math.sqrt(t)


def _cubic_root(t: float) -> float:
    if math.isnan(t) or t == 0.0:
        return t
    return math.copysign(abs(t) ** (1.0 / 3.0), t)


def _smooth_step(t: float) -> float:
    t = _unit(t)
    one_minus_t = 1.0 - t
    va = t * t
    vb = 1.0 - one_minus_t * one_minus_t
    return va + t * (vb - va)


def _smoother_step(t: float) -> float:
    t = _unit(t)
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _quadratic_ease_out(t: float) -> float:
    one_minus_t = 1.0 - t
    return 1.0 - one_minus_t * one_minus_t


def _parabola(t: float) -> float:
    return (4.0 * t * (1.0 - t)) ** 2


def _triangle(t: float) -> float:
    return 1.0 - 2.0 * abs(t - 0.5)


def _elastic_out(t: float) -> float:
    return math.sin(-13.0 * (t + 1.0) * (math.pi / 2.0)) * 2.0 ** (-10.0 * t) + 1.0


def _bounce_out(t: float) -> float:
    nl = 7.5625
    dl = 2.75
    if t < 1.0 / dl:
        return nl * t * t
    if t < 2.0 / dl:
        t -= 1.5 / dl
        return nl * t * t + 0.75
    if t < 2.5 / dl:
        t -= 2.25 / dl
        return nl * t * t + 0.9375
    t -= 2.625 / dl
    return nl * t * t + 0.984375


_CURVES: Dict[ShapingEffect, Callable[[float], float]] = {
    ShapingEffect.LINEAR: _linear,
    ShapingEffect.SQUARED: _squared,
    ShapingEffect.CUBED: _cubed,
    ShapingEffect.SQUARE_ROOT: _square_root,
    ShapingEffect.CUBIC_ROOT: _cubic_root,
    ShapingEffect.SMOOTH_STEP: _smooth_step,
    ShapingEffect.SMOOTHER_STEP: _smoother_step,
    ShapingEffect.QUADRATIC_EASE_OUT: _quadratic_ease_out,
    ShapingEffect.PARABOLA: _parabola,
    ShapingEffect.TRIANGLE: _triangle,
    ShapingEffect.ELASTIC_OUT: _elastic_out,
    ShapingEffect.BOUNCE_OUT: _bounce_out,
}


def shaping(effect: ShapingEffect | int, t: float) -> float:
    """Apply the shaping curve ``effect`` to ``t``.

    An unknown effect yields ``0.0``.
    """
    try:
        curve = _CURVES[ShapingEffect(effect)]
    except ValueError:
        return 0.0
    return curve(t)