"""Timing helpers."""

from tweenkit.core.profiling.timespan import (
    TimeSpanError,
    TimeSpanLogger,
    begin,
    end,
    format_elapsed,
    timed,
)

__all__ = [
    "TimeSpanError",
    "TimeSpanLogger",
    "begin",
    "end",
    "format_elapsed",
    "timed",
]
