"""Penner easing equations.

Every simple curve takes ``(b, c, t)``: the start value, the change in value
(``to - from``) and the normalized time. The bounce family also takes the
amplitude and the duration ``d`` that ``t`` is measured against.

Endpoint handling (``t == 0`` / ``t == 1``) is done by the evaluator; the
explicit endpoint checks kept inside the expo and elastic curves only matter
when a curve is called directly.

Outside ``[0, 1]`` the formulas extrapolate with IEEE float semantics: a
negative square root gives ``nan``, an exponential overflow gives ``inf`` and
a zero bounce duration divides to ``inf``/``nan``. No curve raises.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from types import MappingProxyType

from tweenkit.core.easing.models import EaseType

SimpleEaseFunction = Callable[[float, float, float], float]
AmplitudeEaseFunction = Callable[[float, float, float, float, float], float]

HALF_PI = math.pi / 2
TAU = math.pi * 2

BACK_OVERSHOOT = 1.70158
BACK_IN_OUT_SCALE = 1.525
ELASTIC_PERIOD = 0.3
ELASTIC_IN_OUT_PERIOD = ELASTIC_PERIOD * 1.5

BOUNCE_SCALE = 7.5625
BOUNCE_DIVISOR = 2.75


def _pow2(x: float) -> float:
    try:
        return 2.0**x
    except OverflowError:
        return math.inf


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def _sin(x: float) -> float:
    return math.sin(x) if math.isfinite(x) else math.nan


def _divide(t: float, d: float) -> float:
    if d == 0:
        return math.copysign(math.inf, t) if t else math.nan
    return t / d


def lerp(b: float, c: float, t: float) -> float:
    return b + t * c


# Quadratic


def in_quad(b: float, c: float, t: float) -> float:
    return c * t * t + b


def out_quad(b: float, c: float, t: float) -> float:
    return -c * t * (t - 2) + b


def in_out_quad(b: float, c: float, t: float) -> float:
    t *= 2
    if t < 1:
        return c / 2 * t * t + b
    t -= 1
    return -c / 2 * (t * (t - 2) - 1) + b


# Cubic


def in_cubic(b: float, c: float, t: float) -> float:
    return c * t * t * t + b


def out_cubic(b: float, c: float, t: float) -> float:
    t -= 1
    return c * (t * t * t + 1) + b


def in_out_cubic(b: float, c: float, t: float) -> float:
    t *= 2
    if t < 1:
        return c / 2 * t * t * t + b
    t -= 2
    return c / 2 * (t * t * t + 2) + b


# Quartic


def in_quart(b: float, c: float, t: float) -> float:
    """Fourth power of t (not the cubic)."""
    return c * t * t * t * t + b


def out_quart(b: float, c: float, t: float) -> float:
    t -= 1
    return -c * (t * t * t * t - 1) + b


def in_out_quart(b: float, c: float, t: float) -> float:
    t *= 2
    if t < 1:
        return c / 2 * t * t * t * t + b
    t -= 2
    return -c / 2 * (t * t * t * t - 2) + b


# Quintic


def in_quint(b: float, c: float, t: float) -> float:
    return c * t * t * t * t * t + b


def out_quint(b: float, c: float, t: float) -> float:
    t -= 1
    return c * (t * t * t * t * t + 1) + b


def in_out_quint(b: float, c: float, t: float) -> float:
    t *= 2
    if t < 1:
        return c / 2 * t * t * t * t * t + b
    t -= 2
    return c / 2 * (t * t * t * t * t + 2) + b


# Sinusoidal


def in_sine(b: float, c: float, t: float) -> float:
    return -c * math.cos(t * HALF_PI) + c + b


def out_sine(b: float, c: float, t: float) -> float:
    return c * math.sin(t * HALF_PI) + b


def in_out_sine(b: float, c: float, t: float) -> float:
    return -c / 2 * (math.cos(math.pi * t) - 1) + b


# Exponential


def in_expo(b: float, c: float, t: float) -> float:
    if t == 0:
        return b
    return c * _pow2(10 * (t - 1)) + b


def out_expo(b: float, c: float, t: float) -> float:
    if t == 1:
        return b + c
    return c * (-_pow2(-10 * t) + 1) + b


def in_out_expo(b: float, c: float, t: float) -> float:
    """Doubles t before splitting, so the second half eases out to b + c."""
    if t == 0:
        return b
    if t == 1:
        return b + c
    t *= 2
    if t < 1:
        return c / 2 * _pow2(10 * (t - 1)) + b
    t -= 1
    return c / 2 * (-_pow2(-10 * t) + 2) + b


# Circular


def in_circ(b: float, c: float, t: float) -> float:
    return -c * (_sqrt(1 - t * t) - 1) + b


def out_circ(b: float, c: float, t: float) -> float:
    t -= 1
    return c * _sqrt(1 - t * t) + b


def in_out_circ(b: float, c: float, t: float) -> float:
    t *= 2
    if t < 1:
        return -c / 2 * (_sqrt(1 - t * t) - 1) + b
    t -= 2
    return c / 2 * (_sqrt(1 - t * t) + 1) + b


# Elastic
#
# The amplitude is always the change in value, never the caller's amplitude.


def _elastic_phase(c: float, period: float) -> float:
    a = c
    if a and a >= abs(c):
        return period / TAU * math.asin(c / a)
    return period / 4


def in_elastic(b: float, c: float, t: float) -> float:
    if t == 0:
        return b
    if t == 1:
        return b + c
    p = ELASTIC_PERIOD
    s = _elastic_phase(c, p)
    t -= 1
    return -(c * _pow2(10 * t) * _sin((t - s) * TAU / p)) + b


def out_elastic(b: float, c: float, t: float) -> float:
    if t == 0:
        return b
    if t == 1:
        return b + c
    p = ELASTIC_PERIOD
    s = _elastic_phase(c, p)
    return c * _pow2(-10 * t) * _sin((t - s) * TAU / p) + c + b


def in_out_elastic(b: float, c: float, t: float) -> float:
    """Reaches b + c only at the end (doubled t == 2), not at the midpoint."""
    if t == 0:
        return b
    t *= 2
    if t == 2:
        return b + c
    p = ELASTIC_IN_OUT_PERIOD
    s = _elastic_phase(c, p)
    t -= 1
    if t < 0:
        return -0.5 * (c * _pow2(10 * t) * _sin((t - s) * TAU / p)) + b
    return c * _pow2(-10 * t) * _sin((t - s) * TAU / p) * 0.5 + c + b


# Back


def in_back(b: float, c: float, t: float) -> float:
    s = BACK_OVERSHOOT
    return c * t * t * ((s + 1) * t - s) + b


def out_back(b: float, c: float, t: float) -> float:
    s = BACK_OVERSHOOT
    t -= 1
    return c * (t * t * ((s + 1) * t + s) + 1) + b


def in_out_back(b: float, c: float, t: float) -> float:
    s = BACK_OVERSHOOT * BACK_IN_OUT_SCALE
    t *= 2
    if t < 1:
        return c / 2 * (t * t * ((s + 1) * t - s)) + b
    t -= 2
    return c / 2 * (t * t * ((s + 1) * t + s) + 2) + b


# Bounce
#
# ``amplitude`` is part of the signature but does not shape the curve.


def out_bounce(b: float, c: float, t: float, amplitude: float, d: float) -> float:
    t = _divide(t, d)
    if t < 1 / BOUNCE_DIVISOR:
        return c * (BOUNCE_SCALE * t * t) + b
    if t < 2 / BOUNCE_DIVISOR:
        t -= 1.5 / BOUNCE_DIVISOR
        return c * (BOUNCE_SCALE * t * t + 0.75) + b
    if t < 2.5 / BOUNCE_DIVISOR:
        t -= 2.25 / BOUNCE_DIVISOR
        return c * (BOUNCE_SCALE * t * t + 0.9375) + b
    t -= 2.625 / BOUNCE_DIVISOR
    return c * (BOUNCE_SCALE * t * t + 0.984375) + b


def in_bounce(b: float, c: float, t: float, amplitude: float, d: float) -> float:
    return c - out_bounce(0, c, d - t, amplitude, d) + b


def in_out_bounce(b: float, c: float, t: float, amplitude: float, d: float) -> float:
    if t < d / 2:
        return in_bounce(0, c, t * 2, amplitude, d) * 0.5 + b
    return out_bounce(0, c, t * 2 - d, amplitude, d) * 0.5 + c * 0.5 + b


SIMPLE_EASE_FUNCTIONS: Mapping[EaseType, SimpleEaseFunction] = MappingProxyType(
    {
        EaseType.LERP: lerp,
        EaseType.IN_QUAD: in_quad,
        EaseType.OUT_QUAD: out_quad,
        EaseType.IN_OUT_QUAD: in_out_quad,
        EaseType.IN_CUBIC: in_cubic,
        EaseType.OUT_CUBIC: out_cubic,
        EaseType.IN_OUT_CUBIC: in_out_cubic,
        EaseType.IN_QUART: in_quart,
        EaseType.OUT_QUART: out_quart,
        EaseType.IN_OUT_QUART: in_out_quart,
        EaseType.IN_QUINT: in_quint,
        EaseType.OUT_QUINT: out_quint,
        EaseType.IN_OUT_QUINT: in_out_quint,
        EaseType.IN_SINE: in_sine,
        EaseType.OUT_SINE: out_sine,
        EaseType.IN_OUT_SINE: in_out_sine,
        EaseType.IN_EXPO: in_expo,
        EaseType.OUT_EXPO: out_expo,
        EaseType.IN_OUT_EXPO: in_out_expo,
        EaseType.IN_CIRC: in_circ,
        EaseType.OUT_CIRC: out_circ,
        EaseType.IN_OUT_CIRC: in_out_circ,
        EaseType.IN_ELASTIC: in_elastic,
        EaseType.OUT_ELASTIC: out_elastic,
        EaseType.IN_OUT_ELASTIC: in_out_elastic,
        EaseType.IN_BACK: in_back,
        EaseType.OUT_BACK: out_back,
        EaseType.IN_OUT_BACK: in_out_back,
    }
)

AMPLITUDE_EASE_FUNCTIONS: Mapping[EaseType, AmplitudeEaseFunction] = MappingProxyType(
    {
        EaseType.IN_BOUNCE: in_bounce,
        EaseType.OUT_BOUNCE: out_bounce,
        EaseType.IN_OUT_BOUNCE: in_out_bounce,
    }
)
