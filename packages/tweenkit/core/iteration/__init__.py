"""Infinite sequence generators over lists."""

from tweenkit.core.iteration.enumerators import loop, random_but_not_previous

__all__ = ["loop", "random_but_not_previous"]
