"""Nested wall-clock timing with a stack of open spans.

begin() pushes a start time; end() pops the most recent one and logs how
long the span took:

    TimeSpanLogger: load level took 0m 1s 250ms
"""

from __future__ import annotations

import functools
import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

logger = logging.getLogger(__name__)

PREFIX = "TimeSpanLogger"


class TimeSpanError(RuntimeError):
    """Raised when a span is ended without a matching begin."""


def format_elapsed(seconds: float) -> str:
    """Format a duration as minutes, seconds and milliseconds.

    Minutes are total minutes, so durations above an hour keep counting up.

    Example:
        >>> format_elapsed(61.25)
        '1m 1s 250ms'
    """
    total_ms = int(seconds * 1000)
    minutes, remainder_ms = divmod(total_ms, 60_000)
    secs, millis = divmod(remainder_ms, 1000)
    return f"{minutes}m {secs}s {millis}ms"


class TimeSpanLogger:
    """LIFO stack of timing spans.

    Args:
        clock: Monotonic clock returning seconds
        log: Logger to write span durations to (defaults to this module's)
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        log: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> None:
        self._clock = clock
        self._log = log or logger
        self._starts: list[float] = []

    @property
    def depth(self) -> int:
        """Number of spans currently open."""
        return len(self._starts)

    def begin(self) -> None:
        self._starts.append(self._clock())

    def end(self, what: str) -> float:
        """Close the most recently opened span and log its duration.

        Args:
            what: Description of what was measured

        Returns:
            Elapsed seconds

        Raises:
            TimeSpanError: If no span is open.
        """
        if not self._starts:
            raise TimeSpanError(f"end({what!r}) called with no open span")

        start = self._starts.pop()
        elapsed = self._clock() - start

        if elapsed < 0.001:
            self._log.info("%s: %s took 0ms", PREFIX, what)
        else:
            self._log.info("%s: %s took %s", PREFIX, what, format_elapsed(elapsed))
        return elapsed

    @contextmanager
    def measure(self, what: str) -> Iterator[None]:
        """Time the enclosed block.

        Example:
            >>> timer = TimeSpanLogger()
            >>> with timer.measure("bake lighting"):
            ...     pass
        """
        self.begin()
        try:
            yield
        finally:
            self.end(what)


_default = TimeSpanLogger()


def begin() -> None:
    """Open a span on the shared logger."""
    _default.begin()


def end(what: str) -> float:
    """Close the most recent span on the shared logger."""
    return _default.end(what)


def timed(what: str | None = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator that measures each call with the shared logger.

    Args:
        what: Label for the log line (defaults to the function name)
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        label = what or func.__name__

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with _default.measure(label):
                return func(*args, **kwargs)

        return wrapper

    return decorator
