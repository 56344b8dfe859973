"""Easing curve sampling.

Turns a named curve into discrete points, either as pydantic EasePoints for
serialization or as a numpy array for bulk evaluation.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from tweenkit.core.easing.evaluator import ease
from tweenkit.core.easing.models import EaseType


class EasePoint(BaseModel):
    """A single sampled point on an easing curve.

    t is normalized progress; v is the eased value and is not bounded,
    since back and elastic curves overshoot their interval.

    Example:
        >>> point = EasePoint(t=0.5, v=0.25)
        >>> point.v
        0.25
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., ge=0.0, le=1.0, description="Normalized progress [0,1]")
    v: float = Field(..., description="Eased value")


def sample_grid(n_samples: int) -> list[float]:
    """Generate N evenly-spaced samples covering [0, 1] inclusive.

    Args:
        n_samples: Number of samples to generate. Must be >= 2.

    Returns:
        List of floats starting at 0.0 and ending at 1.0.

    Raises:
        ValueError: If n_samples < 2.

    Example:
        >>> sample_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")
    return [i / (n_samples - 1) for i in range(n_samples)]


def sample_ease(
    ease_type: EaseType | str,
    n_samples: int,
    from_: float = 0.0,
    to: float = 1.0,
    **kwargs: Any,
) -> list[EasePoint]:
    """Sample an easing curve on a uniform grid.

    Args:
        ease_type: Curve to sample
        n_samples: Number of samples (must be >= 2)
        from_: Value at t=0
        to: Value at t=1
        **kwargs: Forwarded to ease() (clamp, amplitude, amplitude_duration)

    Returns:
        List of EasePoints; the first has v == from_ and the last v == to.

    Raises:
        ValueError: If n_samples < 2.
    """
    return [
        EasePoint(t=t, v=ease(ease_type, from_, to, t, **kwargs)) for t in sample_grid(n_samples)
    ]


def ease_array(
    ease_type: EaseType | str,
    from_: float,
    to: float,
    values: Iterable[float],
    **kwargs: Any,
) -> np.ndarray:
    """Evaluate an easing curve at many progress values.

    Args:
        ease_type: Curve to evaluate
        from_: Value at t=0
        to: Value at t=1
        values: Progress values (list, numpy array, generator...)
        **kwargs: Forwarded to ease() (clamp, amplitude, amplitude_duration)

    Returns:
        Float array with one eased value per input value.

    Example:
        >>> ease_array("InQuad", 0.0, 1.0, np.linspace(0.0, 1.0, 3)).tolist()
        [0.0, 0.25, 1.0]
    """
    return np.fromiter(
        (ease(ease_type, from_, to, float(t), **kwargs) for t in values),
        dtype=float,
    )
