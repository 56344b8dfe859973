"""Tests for scene bounds aggregation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from tweenkit.core.easing.models import Vector3
from tweenkit.core.scene.bounds import Bounds, maximum_bounds, middle_point
from tweenkit.core.scene.protocols import Renderable, RendererKind, SceneNode


@dataclass
class FakeRenderer:
    kind: RendererKind
    bounds_min: tuple[float, float, float]
    bounds_max: tuple[float, float, float]


@dataclass
class FakeNode:
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    renderers: list[FakeRenderer] = field(default_factory=list)
    children: list[FakeNode] = field(default_factory=list)

    def iter_renderables(self) -> Iterator[FakeRenderer]:
        yield from self.renderers
        for child in self.children:
            yield from child.iter_renderables()


@pytest.fixture
def character() -> FakeNode:
    """A node with a body mesh, a sword sprite and a dust particle system."""
    body = FakeRenderer(RendererKind.MESH, (-1.0, 0.0, -1.0), (1.0, 2.0, 1.0))
    sword = FakeRenderer(RendererKind.SPRITE, (0.5, 1.0, 0.0), (3.0, 1.5, 0.5))
    dust = FakeRenderer(RendererKind.PARTICLE, (-50.0, -50.0, -50.0), (50.0, 50.0, 50.0))
    trail = FakeRenderer(RendererKind.TRAIL, (-9.0, -9.0, -9.0), (9.0, 9.0, 9.0))
    hand = FakeNode(renderers=[sword, trail])
    return FakeNode(renderers=[body, dust], children=[hand])


class TestBoundsModel:
    """Tests for the Bounds model."""

    def test_from_min_max(self) -> None:
        """Center is the midpoint, size the extent."""
        box = Bounds.from_min_max((0, 0, 0), (2, 4, 6))
        assert box.center == Vector3(1.0, 2.0, 3.0)
        assert box.size == Vector3(2.0, 4.0, 6.0)

    def test_min_max_roundtrip(self) -> None:
        """Corners are recovered from center and size."""
        box = Bounds.from_min_max((-1, 2, -3), (1, 4, 3))
        assert box.min == pytest.approx((-1.0, 2.0, -3.0))
        assert box.max == pytest.approx((1.0, 4.0, 3.0))
        assert box.extents == pytest.approx((1.0, 1.0, 3.0))

    def test_from_min_max_accepts_any_float_sequence(self) -> None:
        """Lists and Vector3 corners work like tuples."""
        box = Bounds.from_min_max([0.0, 0.0, 0.0], Vector3(2.0, 2.0, 2.0))
        assert box.center == Vector3(1.0, 1.0, 1.0)
        assert box.size == Vector3(2.0, 2.0, 2.0)

    def test_accepts_tuples(self) -> None:
        """Plain tuples validate into Vector3."""
        box = Bounds(center=(0, 0, 0), size=(1, 1, 1))
        assert isinstance(box.center, Vector3)


class TestMaximumBounds:
    """Tests for maximum_bounds."""

    def test_protocols_satisfied(self, character: FakeNode) -> None:
        """Fakes satisfy the host protocols."""
        assert isinstance(character, SceneNode)
        assert isinstance(character.renderers[0], Renderable)

    def test_excludes_particles_and_trails(self, character: FakeNode) -> None:
        """Effects do not grow the bounds."""
        box = maximum_bounds(character)
        assert box.min == pytest.approx((-1.0, 0.0, -1.0))
        assert box.max == pytest.approx((3.0, 2.0, 1.0))

    def test_relative_to_node_position(self, character: FakeNode) -> None:
        """Bounds are expressed relative to the node."""
        character.position = (1.0, 1.0, 1.0)
        box = maximum_bounds(character)
        assert box.min == pytest.approx((-2.0, -1.0, -2.0))
        assert box.max == pytest.approx((2.0, 1.0, 0.0))

    def test_middle_point(self, character: FakeNode) -> None:
        """Middle point is the bounds center."""
        assert middle_point(character) == pytest.approx((1.0, 1.0, 0.0))

    def test_single_renderer(self) -> None:
        """One renderer gives its own box."""
        node = FakeNode(renderers=[FakeRenderer(RendererKind.LINE, (0, 0, 0), (1, 1, 1))])
        box = maximum_bounds(node)
        assert box.size == pytest.approx((1.0, 1.0, 1.0))

    def test_only_effects_raises(self) -> None:
        """Nothing to measure raises ValueError."""
        node = FakeNode(
            renderers=[FakeRenderer(RendererKind.PARTICLE, (0, 0, 0), (1, 1, 1))]
        )
        with pytest.raises(ValueError, match="no renderables"):
            maximum_bounds(node)
