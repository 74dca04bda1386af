"""Robert Penner style tweening curves.

Every curve takes the elapsed time ``t``, the start value ``b``, the total
change ``c`` and the duration ``d``, and returns the value at time ``t``.
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable, Dict

__all__ = ["TweenEffect", "tween"]


class TweenEffect(IntEnum):
    """Available tweening curves."""

    LINEAR = 0

    EXPONENTIAL_EASE_OUT = 1
    EXPONENTIAL_EASE_IN = 2
    EXPONENTIAL_EASE_IN_OUT = 3
    EXPONENTIAL_EASE_OUT_IN = 4

    CIRCULAR_EASE_OUT = 5
    CIRCULAR_EASE_IN = 6
    CIRCULAR_EASE_IN_OUT = 7
    CIRCULAR_EASE_OUT_IN = 8

    QUADRATIC_EASE_OUT = 9
    QUADRATIC_EASE_IN = 10
    QUADRATIC_EASE_IN_OUT = 11
    QUADRATIC_EASE_OUT_IN = 12

    SINUSOIDAL_EASE_OUT = 13
    SINUSOIDAL_EASE_IN = 14
    SINUSOIDAL_EASE_IN_OUT = 15
    SINUSOIDAL_EASE_OUT_IN = 16

    CUBIC_EASE_OUT = 17
    CUBIC_EASE_IN = 18
    CUBIC_EASE_IN_OUT = 19
    CUBIC_EASE_OUT_IN = 20

    QUARTIC_EASE_OUT = 21
    QUARTIC_EASE_IN = 22
    QUARTIC_EASE_IN_OUT = 23
    QUARTIC_EASE_OUT_IN = 24

    QUINTIC_EASE_OUT = 25
    QUINTIC_EASE_IN = 26
    QUINTIC_EASE_IN_OUT = 27
    QUINTIC_EASE_OUT_IN = 28

    ELASTIC_EASE_OUT = 29
    ELASTIC_EASE_IN = 30
    ELASTIC_EASE_IN_OUT = 31
    ELASTIC_EASE_OUT_IN = 32

    BOUNCE_EASE_OUT = 33
    BOUNCE_EASE_IN = 34
    BOUNCE_EASE_IN_OUT = 35
    BOUNCE_EASE_OUT_IN = 36

    BACK_EASE_OUT = 37
    BACK_EASE_IN = 38
    BACK_EASE_IN_OUT = 39
    BACK_EASE_OUT_IN = 40


_Curve = Callable[[float, float, float, float], float]


def _sqrt(x: float) -> float:
    """Square root that yields NaN for a negative argument."""
    return math.sqrt(x) if x >= 0.0 else math.nan


def _out_in(ease_out: _Curve, ease_in: _Curve) -> _Curve:
    """Build a curve that eases out over the first half and in over the second."""

    def curve(t: float, b: float, c: float, d: float) -> float:
        if t < d / 2.0:
            return ease_out(t * 2.0, b, c / 2.0, d)
        return ease_in(t * 2.0 - d, b + c / 2.0, c / 2.0, d)

    return curve


def _in_out(ease_in: _Curve, ease_out: _Curve) -> _Curve:
    """Build a curve that eases in over the first half and out over the second."""
    return _out_in(ease_in, ease_out)


def _linear(t: float, b: float, c: float, d: float) -> float:
    return c * t / d + b


# Exponential

def _exponential_out(t: float, b: float, c: float, d: float) -> float:
    if t == d:
        return b + c
    return c * (-(2.0 ** (-10.0 * t / d)) + 1.0) + b


def _exponential_in(t: float, b: float, c: float, d: float) -> float:
    if t == 0.0:
        return b
    return c * 2.0 ** (10.0 * (t / d - 1.0)) + b


def _exponential_in_out(t: float, b: float, c: float, d: float) -> float:
    if t == 0.0:
        return b
    if t == d:
        return b + c
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * 2.0 ** (10.0 * (t - 1.0)) + b
    t -= 1.0
    return c / 2.0 * (-(2.0 ** (-10.0 * t)) + 2.0) + b


# Circular

def _circular_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1.0
    return c * _sqrt(1.0 - t * t) + b


def _circular_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * (_sqrt(1.0 - t * t) - 1.0) + b


def _circular_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t < 1.0:
        return -c / 2.0 * (_sqrt(1.0 - t * t) - 1.0) + b
    t -= 2.0
    return c / 2.0 * (_sqrt(1.0 - t * t) + 1.0) + b


# Quadratic

def _quadratic_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return -c * t * (t - 2.0) + b


def _quadratic_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t + b


def _quadratic_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * t * t + b
    t -= 1.0
    return -c / 2.0 * (t * (t - 2.0) - 1.0) + b


# Sinusoidal

def _sinusoidal_out(t: float, b: float, c: float, d: float) -> float:
    return c * math.sin(t / d * (math.pi / 2.0)) + b


def _sinusoidal_in(t: float, b: float, c: float, d: float) -> float:
    return -c * math.cos(t / d * (math.pi / 2.0)) + c + b


# Cubic

def _cubic_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1.0
    return c * (t * t * t + 1.0) + b


def _cubic_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * t + b


def _cubic_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * t * t * t + b
    t -= 2.0
    return c / 2.0 * (t * t * t + 2.0) + b


# Quartic

def _quartic_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1.0
    return -c * (t ** 4 - 1.0) + b


def _quartic_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t ** 4 + b


def _quartic_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * t ** 4 + b
    t -= 2.0
    return -c / 2.0 * (t ** 4 - 2.0) + b


# Quintic

def _quintic_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1.0
    return c * (t ** 5 + 1.0) + b


def _quintic_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t ** 5 + b


def _quintic_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * t ** 5 + b
    t -= 2.0
    return -c / 2.0 * (t ** 5 + 2.0) + b


# Elastic

def _elastic_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    if t == 1.0:
        return b + c
    p = d * 0.3
    s = p / 4.0
    return c * 2.0 ** (-10.0 * t) * math.sin((t * d - s) * (2.0 * math.pi) / p) + c + b


def _elastic_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    if t == 1.0:
        return b + c
    p = d * 0.3
    s = p / 4.0
    return -(c * 2.0 ** (10.0 * t) * math.sin((t * d - s) * (2.0 * math.pi) / p)) + b


def _elastic_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    if t == 2.0:
        return b + c
    p = d * 0.45
    s = p / 4.0
    if t < 1.0:
        t -= 1.0
        return -0.5 * (c * 2.0 ** (10.0 * t) * math.sin((t * d - s) * (2.0 * math.pi) / p)) + b
    t -= 1.0
    return c * 2.0 ** (-10.0 * t) * math.sin((t * d - s) * (2.0 * math.pi) / p) * 0.5 + c + b


# Bounce

def _bounce_out(t: float, b: float, c: float, d: float) -> float:
    t /= d
    if t < 1.0 / 2.75:
        return c * (7.5625 * t * t) + b
    if t < 2.0 / 2.75:
        t -= 1.5 / 2.75
        return c * (7.5625 * t * t + 0.75) + b
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return c * (7.5625 * t * t + 0.9375) + b
    t -= 2.25 / 2.75
    return c * (7.5625 * t * t + 0.984375) + b


def _bounce_in(t: float, b: float, c: float, d: float) -> float:
    return c - _bounce_out(d - t, 0.0, c, d) + b


def _bounce_in_out(t: float, b: float, c: float, d: float) -> float:
    if t < d / 2.0:
        return _bounce_in(t * 2.0, 0.0, c, d) * 0.5 + b
    return _bounce_out(t * 2.0 - d, 0.0, c, d) * 0.5 + c * 0.5 + b


# Back

def _back_out(t: float, b: float, c: float, d: float) -> float:
    t = t / d - 1.0
    return c * (t * t * (2.70158 * t + 1.70158) + 1.0) + b


def _back_in(t: float, b: float, c: float, d: float) -> float:
    t /= d
    return c * t * t * (2.70158 * t - 1.70158) + b


def _back_in_out(t: float, b: float, c: float, d: float) -> float:
    t /= d / 2.0
    s = 2.5949095
    if t < 1.0:
        return c / 2.0 * (t * t * ((s + 1.0) * t - s)) + b
    t -= 2.0
    return c / 2.0 * (t * t * ((s + 1.0) * t + s) + 2.0) + b


_CURVES: Dict[TweenEffect, _Curve] = {
    TweenEffect.LINEAR: _linear,
    TweenEffect.EXPONENTIAL_EASE_OUT: _exponential_out,
    TweenEffect.EXPONENTIAL_EASE_IN: _exponential_in,
    TweenEffect.EXPONENTIAL_EASE_IN_OUT: _exponential_in_out,
    TweenEffect.EXPONENTIAL_EASE_OUT_IN: _out_in(_exponential_out, _exponential_in),
    TweenEffect.CIRCULAR_EASE_OUT: _circular_out,
    TweenEffect.CIRCULAR_EASE_IN: _circular_in,
    TweenEffect.CIRCULAR_EASE_IN_OUT: _circular_in_out,
    TweenEffect.CIRCULAR_EASE_OUT_IN: _out_in(_circular_out, _circular_in),
    TweenEffect.QUADRATIC_EASE_OUT: _quadratic_out,
    TweenEffect.QUADRATIC_EASE_IN: _quadratic_in,
    TweenEffect.QUADRATIC_EASE_IN_OUT: _quadratic_in_out,
    TweenEffect.QUADRATIC_EASE_OUT_IN: _out_in(_quadratic_out, _quadratic_in),
    TweenEffect.SINUSOIDAL_EASE_OUT: _sinusoidal_out,
    TweenEffect.SINUSOIDAL_EASE_IN: _sinusoidal_in,
    TweenEffect.SINUSOIDAL_EASE_IN_OUT: _in_out(_sinusoidal_in, _sinusoidal_out),
    TweenEffect.SINUSOIDAL_EASE_OUT_IN: _out_in(_sinusoidal_out, _sinusoidal_in),
    TweenEffect.CUBIC_EASE_OUT: _cubic_out,
    TweenEffect.CUBIC_EASE_IN: _cubic_in,
    TweenEffect.CUBIC_EASE_IN_OUT: _cubic_in_out,
    TweenEffect.CUBIC_EASE_OUT_IN: _out_in(_cubic_out, _cubic_in),
    TweenEffect.QUARTIC_EASE_OUT: _quartic_out,
    TweenEffect.QUARTIC_EASE_IN: _quartic_in,
    TweenEffect.QUARTIC_EASE_IN_OUT: _quartic_in_out,
    TweenEffect.QUARTIC_EASE_OUT_IN: _out_in(_quartic_out, _quartic_in),
    TweenEffect.QUINTIC_EASE_OUT: _quintic_out,
    TweenEffect.QUINTIC_EASE_IN: _quintic_in,
    TweenEffect.QUINTIC_EASE_IN_OUT: _quintic_in_out,
    TweenEffect.QUINTIC_EASE_OUT_IN: _out_in(_quintic_out, _quintic_in),
    TweenEffect.ELASTIC_EASE_OUT: _elastic_out,
    TweenEffect.ELASTIC_EASE_IN: _elastic_in,
    TweenEffect.ELASTIC_EASE_IN_OUT: _elastic_in_out,
    TweenEffect.ELASTIC_EASE_OUT_IN: _out_in(_elastic_out, _elastic_in),
    TweenEffect.BOUNCE_EASE_OUT: _bounce_out,
    TweenEffect.BOUNCE_EASE_IN: _bounce_in,
    TweenEffect.BOUNCE_EASE_IN_OUT: _bounce_in_out,
    TweenEffect.BOUNCE_EASE_OUT_IN: _out_in(_bounce_out, _bounce_in),
    TweenEffect.BACK_EASE_OUT: _back_out,
    TweenEffect.BACK_EASE_IN: _back_in,
    TweenEffect.BACK_EASE_IN_OUT: _back_in_out,
    TweenEffect.BACK_EASE_OUT_IN: _out_in(_back_out, _back_in),
}


def tween(
    effect: TweenEffect | int,
    current_time: float,
    start: float,
    delta: float,
    duration: float,
) -> float:
    """Value of the ``effect`` curve from ``start`` to ``start + delta`` at ``current_time``.

    An unknown effect yields ``start``.
    """
    try:
        curve = _CURVES[TweenEffect(effect)]
    except ValueError:
        return start
    return curve(current_time, start, delta, duration)