"""Easing curves and evaluation."""

from tweenkit.core.easing.evaluator import (
    ease,
    ease_color,
    ease_vector2,
    ease_vector3,
    resolve_ease_type,
)
from tweenkit.core.easing.models import Color, EaseType, Vector2, Vector3
from tweenkit.core.easing.sampling import EasePoint, ease_array, sample_ease, sample_grid
from tweenkit.core.easing.taxonomy import (
    EaseDirection,
    EaseFamily,
    get_ease_direction,
    get_ease_family,
    is_overshooting,
    list_ease_types,
    uses_amplitude,
)

__all__ = [
    "Color",
    "EaseDirection",
    "EaseFamily",
    "EasePoint",
    "EaseType",
    "Vector2",
    "Vector3",
    "ease",
    "ease_array",
    "ease_color",
    "ease_vector2",
    "ease_vector3",
    "get_ease_direction",
    "get_ease_family",
    "is_overshooting",
    "list_ease_types",
    "resolve_ease_type",
    "sample_ease",
    "sample_grid",
    "uses_amplitude",
]
