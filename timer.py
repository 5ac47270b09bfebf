"""
Scoped timer that reports the elapsed time on scope exit.
"""

import functools
import logging
import time
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Timer:
    """
    Calls a function with the elapsed seconds when the scope ends.

    Usage
    -----
    with Timer.start(lambda elapsed: print(f"slept for {elapsed:.3f}s")):
        time.sleep(0.01)

    The callback only fires on leaving a ``with`` block or on ``stop()``.
    A timer that is merely created and dropped never reports.
    """

    def __init__(self, on_scope_exit: Callable[[float], Any]):
        self._started = time.monotonic()
        self._on_scope_exit = on_scope_exit
        self._finished = False

    @classmethod
    def start(cls, on_scope_exit: Callable[[float], Any]) -> "Timer":
        """Start the timer, specifying the function to call on scope exit."""
        return cls(on_scope_exit)

    def __repr__(self) -> str:
        return f"Timer(started={self._started!r}, finished={self._finished!r})"

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.stop()
        # Never suppress the exception raised in the scope
        return False

    def elapsed(self) -> float:
        """Seconds since the timer started."""
        return time.monotonic() - self._started

    def stop(self) -> None:
        """
        Finish the timer and call the scope-exit function.
        Only the first call has an effect.
        """
        if self._finished:
            return
        self._finished = True
        elapsed = self.elapsed()
        logger.debug("Timer finished after %.3fs", elapsed)
        self._on_scope_exit(elapsed)


def timed(on_scope_exit: Callable[[float], Any]):
    """Decorator timing every call of the wrapped function with a Timer."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with Timer.start(on_scope_exit):
                return func(*args, **kwargs)

        return wrapper

    return decorator
