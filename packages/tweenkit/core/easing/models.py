"""Easing identifiers and value types.

EaseType values are the canonical curve names (``"InQuad"``, ``"OutBounce"``)
so that configs and CLI arguments can refer to curves by name.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class EaseType(str, Enum):
    """Canonical easing curves."""

    LERP = "Lerp"

    IN_QUAD = "InQuad"
    OUT_QUAD = "OutQuad"
    IN_OUT_QUAD = "InOutQuad"

    IN_CUBIC = "InCubic"
    OUT_CUBIC = "OutCubic"
    IN_OUT_CUBIC = "InOutCubic"

    IN_QUART = "InQuart"
    OUT_QUART = "OutQuart"
    IN_OUT_QUART = "InOutQuart"

    IN_QUINT = "InQuint"
    OUT_QUINT = "OutQuint"
    IN_OUT_QUINT = "InOutQuint"

    IN_SINE = "InSine"
    OUT_SINE = "OutSine"
    IN_OUT_SINE = "InOutSine"

    IN_EXPO = "InExpo"
    OUT_EXPO = "OutExpo"
    IN_OUT_EXPO = "InOutExpo"

    IN_CIRC = "InCirc"
    OUT_CIRC = "OutCirc"
    IN_OUT_CIRC = "InOutCirc"

    IN_ELASTIC = "InElastic"
    OUT_ELASTIC = "OutElastic"
    IN_OUT_ELASTIC = "InOutElastic"

    IN_BACK = "InBack"
    OUT_BACK = "OutBack"
    IN_OUT_BACK = "InOutBack"

    IN_BOUNCE = "InBounce"
    OUT_BOUNCE = "OutBounce"
    IN_OUT_BOUNCE = "InOutBounce"


class Vector2(NamedTuple):
    x: float
    y: float


class Vector3(NamedTuple):
    x: float
    y: float
    z: float


class Color(NamedTuple):
    """RGBA color with channels nominally in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0
