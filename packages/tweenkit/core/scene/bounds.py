"""Aggregate bounds of all renderables under a scene node."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Self

import numpy as np
from pydantic import BaseModel, ConfigDict

from tweenkit.core.easing.models import Vector3
from tweenkit.core.scene.protocols import EFFECT_KINDS, SceneNode

logger = logging.getLogger(__name__)


class Bounds(BaseModel):
    """Axis-aligned bounding box described by center and size.

    Example:
        >>> box = Bounds.from_min_max((0, 0, 0), (2, 4, 6))
        >>> box.center
        Vector3(x=1.0, y=2.0, z=3.0)
    """

    model_config = ConfigDict(frozen=True)

    center: Vector3
    size: Vector3

    @property
    def extents(self) -> Vector3:
        """Half the size."""
        return Vector3(*(np.asarray(self.size, dtype=float) / 2.0).tolist())

    @property
    def min(self) -> Vector3:
        return Vector3(*(np.asarray(self.center) - np.asarray(self.extents)).tolist())

    @property
    def max(self) -> Vector3:
        return Vector3(*(np.asarray(self.center) + np.asarray(self.extents)).tolist())

    @classmethod
    def from_min_max(cls, min_corner: Sequence[float], max_corner: Sequence[float]) -> Self:
        lo = np.asarray(min_corner, dtype=float)
        hi = np.asarray(max_corner, dtype=float)
        return cls(
            center=Vector3(*((lo + hi) / 2.0).tolist()),
            size=Vector3(*(hi - lo).tolist()),
        )


def maximum_bounds(node: SceneNode) -> Bounds:
    """Compute the bounds enclosing every renderable under a node.

    Particle and trail renderables are skipped. The result is expressed
    relative to the node's position.

    Args:
        node: Root of the subtree to measure

    Returns:
        Bounds covering all included renderables

    Raises:
        ValueError: If the subtree has no renderable to measure.
    """
    mins: list[np.ndarray] = []
    maxs: list[np.ndarray] = []
    for renderable in node.iter_renderables():
        if renderable.kind in EFFECT_KINDS:
            continue
        mins.append(np.asarray(renderable.bounds_min, dtype=float))
        maxs.append(np.asarray(renderable.bounds_max, dtype=float))

    if not mins:
        raise ValueError("node has no renderables to measure")

    origin = np.asarray(node.position, dtype=float)
    lo = np.min(np.stack(mins), axis=0) - origin
    hi = np.max(np.stack(maxs), axis=0) - origin

    logger.debug("Aggregated bounds of %d renderables", len(mins))
    return Bounds.from_min_max(lo, hi)


def middle_point(node: SceneNode) -> Vector3:
    """Center of maximum_bounds(node), relative to the node's position."""
    return maximum_bounds(node).center
