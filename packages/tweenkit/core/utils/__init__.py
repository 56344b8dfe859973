"""Shared utilities for tweenkit."""

from tweenkit.core.utils.json import read_json, write_json
from tweenkit.core.utils.math import clamp

__all__ = [
    "clamp",
    "read_json",
    "write_json",
]
