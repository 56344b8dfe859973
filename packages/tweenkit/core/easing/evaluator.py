"""Easing evaluation.

Looks a curve up by identifier and evaluates it over ``[from_, to]``. The
vector and color helpers apply the scalar evaluator to each channel
independently.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from tweenkit.core.easing.functions import AMPLITUDE_EASE_FUNCTIONS, SIMPLE_EASE_FUNCTIONS
from tweenkit.core.easing.models import Color, EaseType, Vector2, Vector3
from tweenkit.core.utils.math import clamp as clamp_value

logger = logging.getLogger(__name__)


def resolve_ease_type(ease_type: Any) -> EaseType | None:
    """Resolve an identifier to an EaseType.

    Accepts EaseType members and their string values (``"InQuad"``).

    Args:
        ease_type: Candidate identifier

    Returns:
        Matching EaseType, or None if the identifier is not recognized

    Example:
        >>> resolve_ease_type("OutBounce")
        <EaseType.OUT_BOUNCE: 'OutBounce'>
        >>> resolve_ease_type("Wobble") is None
        True
    """
    if isinstance(ease_type, EaseType):
        return ease_type
    if isinstance(ease_type, str):
        try:
            return EaseType(ease_type)
        except ValueError:
            return None
    return None


def ease(
    ease_type: EaseType | str,
    from_: float,
    to: float,
    t: float,
    clamp: bool = True,
    amplitude: float = 1.0,
    amplitude_duration: float = 1.0,
) -> float:
    """Evaluate an easing curve between two values.

    Args:
        ease_type: Curve to evaluate
        from_: Value at t=0
        to: Value at t=1 (may be less than from_)
        t: Progress, conventionally in [0, 1]
        clamp: Clamp t to [0, 1] before evaluating. When False the curve
            formula extrapolates, which is how back/elastic overshoot is
            reached outside the interval.
        amplitude: Bounce family shaping parameter
        amplitude_duration: Duration t is measured against (bounce family)

    Returns:
        Interpolated value. Exactly from_ at t=0 and exactly to at t=1.
        Unrecognized curves return to.

    Example:
        >>> ease(EaseType.IN_QUAD, 0.0, 1.0, 0.5)
        0.25
        >>> ease("Lerp", 0.0, 10.0, 0.5)
        5.0
    """
    if clamp:
        t = clamp_value(t, 0.0, 1.0)
    if t == 0:
        return from_
    if t == 1:
        return to

    resolved = resolve_ease_type(ease_type)
    delta = to - from_

    simple = SIMPLE_EASE_FUNCTIONS.get(resolved)
    if simple is not None:
        return simple(from_, delta, t)

    with_amplitude = AMPLITUDE_EASE_FUNCTIONS.get(resolved)
    if with_amplitude is not None:
        return with_amplitude(from_, delta, t, amplitude, amplitude_duration)

    logger.debug("Unknown ease type %r, returning target value", ease_type)
    return to


def ease_vector2(
    ease_type: EaseType | str,
    from_: Sequence[float],
    to: Sequence[float],
    t: float,
    clamp: bool = True,
    amplitude: float = 1.0,
    amplitude_duration: float = 1.0,
) -> Vector2:
    """Ease each component of a 2D vector."""
    start, end = Vector2(*from_), Vector2(*to)
    return Vector2(
        x=ease(ease_type, start.x, end.x, t, clamp, amplitude, amplitude_duration),
        y=ease(ease_type, start.y, end.y, t, clamp, amplitude, amplitude_duration),
    )


def ease_vector3(
    ease_type: EaseType | str,
    from_: Sequence[float],
    to: Sequence[float],
    t: float,
    clamp: bool = True,
    amplitude: float = 1.0,
    amplitude_duration: float = 1.0,
) -> Vector3:
    """Ease each component of a 3D vector."""
    start, end = Vector3(*from_), Vector3(*to)
    return Vector3(
        x=ease(ease_type, start.x, end.x, t, clamp, amplitude, amplitude_duration),
        y=ease(ease_type, start.y, end.y, t, clamp, amplitude, amplitude_duration),
        z=ease(ease_type, start.z, end.z, t, clamp, amplitude, amplitude_duration),
    )


def ease_color(
    ease_type: EaseType | str,
    from_: Sequence[float],
    to: Sequence[float],
    t: float,
    clamp: bool = True,
    amplitude: float = 1.0,
    amplitude_duration: float = 1.0,
) -> Color:
    """Ease each channel of an RGBA color.

    RGB triples are accepted and treated as opaque (alpha 1.0).
    """
    start, end = Color(*from_), Color(*to)
    return Color(
        r=ease(ease_type, start.r, end.r, t, clamp, amplitude, amplitude_duration),
        g=ease(ease_type, start.g, end.g, t, clamp, amplitude, amplitude_duration),
        b=ease(ease_type, start.b, end.b, t, clamp, amplitude, amplitude_duration),
        a=ease(ease_type, start.a, end.a, t, clamp, amplitude, amplitude_duration),
    )
