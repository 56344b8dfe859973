"""Generators for common ways of cycling through a collection."""

from __future__ import annotations

import random
from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def loop(items: Sequence[T]) -> Iterator[T]:
    """Yield items in order forever, wrapping back to the first.

    Args:
        items: Non-empty sequence to cycle through

    Yields:
        items[0], items[1], ..., items[-1], items[0], ...

    Raises:
        ValueError: If items is empty (raised on the first next()).

    Example:
        >>> gen = loop(["a", "b"])
        >>> [next(gen) for _ in range(3)]
        ['a', 'b', 'a']
    """
    if not items:
        raise ValueError("items cannot be empty")

    index = 0
    while True:
        yield items[index]
        index = (index + 1) % len(items)


def random_but_not_previous(
    items: Sequence[T],
    rng: random.Random | None = None,
) -> Iterator[T]:
    """Yield random items forever, never the same index twice in a row.

    The previous index starts at 0, so with more than one item the first
    value is never items[0]. A single item is yielded repeatedly.

    Args:
        items: Non-empty sequence to draw from
        rng: Random source (defaults to a new, unseeded random.Random)

    Yields:
        Randomly chosen items.

    Raises:
        ValueError: If items is empty (raised on the first next()).

    Example:
        >>> gen = random_but_not_previous(["a", "b"], rng=random.Random(7))
        >>> [next(gen) for _ in range(4)]
        ['b', 'a', 'b', 'a']
    """
    if not items:
        raise ValueError("items cannot be empty")

    rng = rng or random.Random()
    last_index = 0
    while True:
        new_index = last_index
        if len(items) > 1:
            while new_index == last_index:
                new_index = rng.randrange(len(items))
        last_index = new_index
        yield items[last_index]
