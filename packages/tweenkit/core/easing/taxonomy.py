"""Easing taxonomy and classification.

Categorizes every EaseType by family and direction.
"""

from __future__ import annotations

from enum import Enum

from tweenkit.core.easing.models import EaseType


class EaseFamily(Enum):
    """Easing family classification."""

    LINEAR = "linear"
    QUAD = "quad"
    CUBIC = "cubic"
    QUART = "quart"
    QUINT = "quint"
    SINE = "sine"
    EXPO = "expo"
    CIRC = "circ"
    ELASTIC = "elastic"  # Overshoots, oscillates
    BACK = "back"  # Overshoots once
    BOUNCE = "bounce"  # Shaped by amplitude/duration


class EaseDirection(Enum):
    """Which end of the interval the easing acts on."""

    NONE = "none"
    IN = "in"
    OUT = "out"
    IN_OUT = "in_out"


_FAMILY_PREFIXES: dict[str, EaseFamily] = {
    "Quad": EaseFamily.QUAD,
    "Cubic": EaseFamily.CUBIC,
    "Quart": EaseFamily.QUART,
    "Quint": EaseFamily.QUINT,
    "Sine": EaseFamily.SINE,
    "Expo": EaseFamily.EXPO,
    "Circ": EaseFamily.CIRC,
    "Elastic": EaseFamily.ELASTIC,
    "Back": EaseFamily.BACK,
    "Bounce": EaseFamily.BOUNCE,
}


def _classify(ease_type: EaseType) -> tuple[EaseFamily, EaseDirection]:
    name = ease_type.value
    if ease_type is EaseType.LERP:
        return EaseFamily.LINEAR, EaseDirection.NONE

    if name.startswith("InOut"):
        direction, family_name = EaseDirection.IN_OUT, name[len("InOut") :]
    elif name.startswith("In"):
        direction, family_name = EaseDirection.IN, name[len("In") :]
    else:
        direction, family_name = EaseDirection.OUT, name[len("Out") :]

    return _FAMILY_PREFIXES[family_name], direction


# Classify all ease types by family and direction
EASE_TAXONOMY: dict[EaseType, tuple[EaseFamily, EaseDirection]] = {
    ease_type: _classify(ease_type) for ease_type in EaseType
}

OVERSHOOTING_FAMILIES = frozenset({EaseFamily.ELASTIC, EaseFamily.BACK})


def get_ease_family(ease_type: EaseType) -> EaseFamily:
    """Get the family classification for an ease type.

    Raises:
        KeyError: If ease_type is not an EaseType
    """
    return EASE_TAXONOMY[ease_type][0]


def get_ease_direction(ease_type: EaseType) -> EaseDirection:
    """Get the direction for an ease type.

    Raises:
        KeyError: If ease_type is not an EaseType
    """
    return EASE_TAXONOMY[ease_type][1]


def is_overshooting(ease_type: EaseType) -> bool:
    """Check if a curve leaves [from, to] inside the unit interval.

    Args:
        ease_type: Curve to check

    Returns:
        True for the elastic and back families
    """
    return get_ease_family(ease_type) in OVERSHOOTING_FAMILIES


def uses_amplitude(ease_type: EaseType) -> bool:
    """Check if a curve receives the amplitude/duration parameters."""
    return get_ease_family(ease_type) is EaseFamily.BOUNCE


def list_ease_types(family: EaseFamily | None = None) -> list[EaseType]:
    """List ease types in declaration order, optionally filtered by family."""
    return [
        ease_type
        for ease_type, (ease_family, _) in EASE_TAXONOMY.items()
        if family is None or ease_family is family
    ]
