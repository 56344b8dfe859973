"""Tests for sequence generators."""

from __future__ import annotations

from itertools import islice
import random

import pytest

from tweenkit.core.iteration.enumerators import loop, random_but_not_previous


class TestLoop:
    """Tests for loop."""

    def test_wraps_around(self) -> None:
        """Yields items in order and starts over."""
        assert list(islice(loop([1, 2, 3]), 7)) == [1, 2, 3, 1, 2, 3, 1]

    def test_single_item_repeats(self) -> None:
        """A single item is yielded forever."""
        assert list(islice(loop(["x"]), 3)) == ["x", "x", "x"]

    def test_works_with_tuples_and_strings(self) -> None:
        """Any sequence is accepted."""
        assert "".join(islice(loop("ab"), 5)) == "ababa"

    def test_empty_raises(self) -> None:
        """An empty sequence cannot be looped."""
        with pytest.raises(ValueError, match="items cannot be empty"):
            next(loop([]))


class TestRandomButNotPrevious:
    """Tests for random_but_not_previous."""

    def test_never_repeats_consecutively(self) -> None:
        """No item index appears twice in a row."""
        items = ["a", "b", "c", "d"]
        values = list(islice(random_but_not_previous(items, rng=random.Random(1234)), 500))
        for previous, current in zip(values, values[1:], strict=False):
            assert previous != current

    def test_first_value_skips_index_zero(self) -> None:
        """The initial previous index is 0."""
        for seed in range(20):
            gen = random_but_not_previous([0, 1, 2], rng=random.Random(seed))
            assert next(gen) != 0

    def test_two_items_alternate(self) -> None:
        """With two items the only option is to alternate."""
        gen = random_but_not_previous(["a", "b"], rng=random.Random(7))
        assert list(islice(gen, 4)) == ["b", "a", "b", "a"]

    def test_single_item_repeats(self) -> None:
        """A single item is yielded forever."""
        gen = random_but_not_previous(["only"])
        assert list(islice(gen, 3)) == ["only", "only", "only"]

    def test_visits_every_item(self) -> None:
        """Over many draws every item is chosen."""
        items = list(range(5))
        values = set(islice(random_but_not_previous(items, rng=random.Random(99)), 200))
        assert values == set(items)

    def test_seeded_is_deterministic(self) -> None:
        """Same seed, same sequence."""
        first = list(islice(random_but_not_previous("abcde", rng=random.Random(3)), 20))
        second = list(islice(random_but_not_previous("abcde", rng=random.Random(3)), 20))
        assert first == second

    def test_empty_raises(self) -> None:
        """An empty sequence cannot be drawn from."""
        with pytest.raises(ValueError, match="items cannot be empty"):
            next(random_but_not_previous([]))
