"""
Cooldown gate for application actions.

Allows an action to run at most once per cooldown period:

    limiter = RateLimiter(0.5)
    for _ in range(5):
        limiter.run(water_plants)
        time.sleep(0.2)
    # water_plants ran twice
"""

import logging
import time
from datetime import timedelta
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


def to_seconds(duration: float | timedelta) -> float:
    """
    Normalize a duration to float seconds.

    Raises:
        TypeError: If duration is not a number or timedelta
    """
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise TypeError(
            f"duration must be a number of seconds or timedelta, got {type(duration)}"
        )
    return float(duration)


class RateLimiter:
    """Runs an action at most once per cooldown period."""

    def __init__(self, cooldown: float | timedelta):
        """
        Args:
            cooldown: Cooldown period in seconds (or a timedelta)

        Raises:
            ValueError: If the cooldown is not strictly positive
        """
        seconds = to_seconds(cooldown)
        # NaN fails this comparison too
        if not seconds > 0:
            raise ValueError(f"cooldown must be positive, got {cooldown!r}")
        self._cooldown = seconds
        self._start: Optional[float] = None

    def __repr__(self) -> str:
        return f"RateLimiter(cooldown={self._cooldown!r}, start={self._start!r})"

    def cooldown_period(self) -> float:
        """Return the cooldown period in seconds."""
        return self._cooldown

    def start_now(self) -> Optional[float]:
        """
        (Re)start the cooldown period.

        Returns:
            The previous start time, or None if the limiter was never started.
        """
        previous = self._start
        self._start = time.monotonic()
        return previous

    def run(self, action: Callable[[], Any]) -> None:
        """
        Run the action if the cooldown period has elapsed.
        The first call runs immediately, starting the limiter.
        """
        self.try_run(action)

    def run_with_elapsed(self, action: Callable[[float], Any]) -> None:
        """
        Run the action if the cooldown period has elapsed, passing the
        seconds elapsed since the last run.

        The first call only starts the limiter, without running the action.
        """
        if self._start is None:
            self.start_now()
            logger.debug("Rate limiter armed (cooldown=%.3fs)", self._cooldown)
            return

        now = time.monotonic()
        elapsed = now - self._start
        if elapsed >= self._cooldown:
            action(elapsed)
            self._start = now
            logger.debug("Rate limiter allow after %.3fs", elapsed)
        else:
            logger.debug(
                "Rate limit hit: %.3fs since last run (cooldown=%.3fs)",
                elapsed,
                self._cooldown,
            )

    def try_run(self, action: Callable[[], Any]) -> Optional[float]:
        """
        Run the action if the cooldown period has elapsed.
        The first call runs immediately, starting the limiter.

        Returns:
            None if the action ran, otherwise the seconds remaining
            until the cooldown period ends (always positive).
        """
        if self._start is None:
            action()
            self.start_now()
            return None

        start = self._start
        deadline = start + self._cooldown
        now = time.monotonic()
        if now < deadline:
            #   |<------ cooldown ------>|
            # --+-------------+----------+-----> time
            #   start         now        deadline
            logger.debug("Rate limit hit: %.3fs remaining", deadline - now)
            return deadline - now

        #   |<------ cooldown ------>|<- overshoot ->|
        # --+------------------------+---------------+-----> time
        #   start                    deadline        now
        action()
        # Restart from now, so the overshoot is not credited to the next period
        self._start = now
        logger.debug("Rate limiter allow after %.3fs", now - start)
        return None
