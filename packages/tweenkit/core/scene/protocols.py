"""Protocol definitions for the host scene graph.

The bounds helpers only need to read world-space bounds from renderables and
walk a node's subtree; any host object model can be adapted to these.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from enum import Enum
from typing import Protocol, runtime_checkable


class RendererKind(str, Enum):
    """Kind of renderable attached to a scene node."""

    MESH = "mesh"
    SKINNED_MESH = "skinned_mesh"
    SPRITE = "sprite"
    LINE = "line"
    PARTICLE = "particle"  # Effect, excluded from bounds
    TRAIL = "trail"  # Effect, excluded from bounds


EFFECT_KINDS = frozenset({RendererKind.PARTICLE, RendererKind.TRAIL})


@runtime_checkable
class Renderable(Protocol):
    """Anything drawn in the scene with a world-space bounding box."""

    @property
    def kind(self) -> RendererKind: ...

    @property
    def bounds_min(self) -> Sequence[float]:
        """World-space (x, y, z) minimum corner."""
        ...

    @property
    def bounds_max(self) -> Sequence[float]:
        """World-space (x, y, z) maximum corner."""
        ...


@runtime_checkable
class SceneNode(Protocol):
    """A node in the host scene graph."""

    @property
    def position(self) -> Sequence[float]:
        """World-space (x, y, z) position of the node."""
        ...

    def iter_renderables(self) -> Iterator[Renderable]:
        """Yield every renderable on this node and all of its descendants."""
        ...
