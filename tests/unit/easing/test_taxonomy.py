"""Tests for easing taxonomy."""

from __future__ import annotations

from tweenkit.core.easing.models import EaseType
from tweenkit.core.easing.taxonomy import (
    EASE_TAXONOMY,
    EaseDirection,
    EaseFamily,
    get_ease_direction,
    get_ease_family,
    is_overshooting,
    list_ease_types,
    uses_amplitude,
)


class TestTaxonomy:
    """Classification of every ease type."""

    def test_all_ease_types_classified(self) -> None:
        """Taxonomy is total over EaseType."""
        assert set(EASE_TAXONOMY) == set(EaseType)
        assert len(EaseType) == 31

    def test_lerp_is_linear(self) -> None:
        """Lerp has no direction."""
        assert get_ease_family(EaseType.LERP) is EaseFamily.LINEAR
        assert get_ease_direction(EaseType.LERP) is EaseDirection.NONE

    def test_in_out_parsed_before_in(self) -> None:
        """InOut prefixes are not mistaken for In."""
        assert get_ease_family(EaseType.IN_OUT_BOUNCE) is EaseFamily.BOUNCE
        assert get_ease_direction(EaseType.IN_OUT_BOUNCE) is EaseDirection.IN_OUT

    def test_out_direction(self) -> None:
        """Out curves are classified as OUT."""
        assert get_ease_direction(EaseType.OUT_CIRC) is EaseDirection.OUT
        assert get_ease_family(EaseType.OUT_CIRC) is EaseFamily.CIRC

    def test_every_family_has_in_out_and_in_out(self) -> None:
        """Non-linear families have all three directions."""
        for family in EaseFamily:
            if family is EaseFamily.LINEAR:
                continue
            directions = {get_ease_direction(e) for e in list_ease_types(family)}
            assert directions == {EaseDirection.IN, EaseDirection.OUT, EaseDirection.IN_OUT}


class TestPredicates:
    """Tests for taxonomy predicates."""

    def test_overshooting(self) -> None:
        """Elastic and back curves overshoot."""
        assert is_overshooting(EaseType.OUT_ELASTIC)
        assert is_overshooting(EaseType.IN_BACK)
        assert not is_overshooting(EaseType.OUT_BOUNCE)
        assert not is_overshooting(EaseType.LERP)

    def test_uses_amplitude(self) -> None:
        """Only bounce curves use the amplitude parameters."""
        assert [e for e in EaseType if uses_amplitude(e)] == [
            EaseType.IN_BOUNCE,
            EaseType.OUT_BOUNCE,
            EaseType.IN_OUT_BOUNCE,
        ]

    def test_list_filtered_by_family(self) -> None:
        """Listing by family keeps declaration order."""
        assert list_ease_types(EaseFamily.QUAD) == [
            EaseType.IN_QUAD,
            EaseType.OUT_QUAD,
            EaseType.IN_OUT_QUAD,
        ]

    def test_list_all(self) -> None:
        """Listing without a family returns everything."""
        assert list_ease_types() == list(EaseType)
