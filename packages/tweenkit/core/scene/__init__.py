"""Scene graph adapters."""

from tweenkit.core.scene.bounds import Bounds, maximum_bounds, middle_point
from tweenkit.core.scene.protocols import EFFECT_KINDS, Renderable, RendererKind, SceneNode

__all__ = [
    "EFFECT_KINDS",
    "Bounds",
    "Renderable",
    "RendererKind",
    "SceneNode",
    "maximum_bounds",
    "middle_point",
]
