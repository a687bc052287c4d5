"""
Monotonic millisecond timebase.

Wraps the wall clock so that handed-out timestamps never decrease, and can
hold the caller until the clock reaches a requested instant.
"""

from typing import Protocol

from internal.logging import get_logger
from utils.timestamp import now_millis


class TimeSource(Protocol):
    """What QuickId needs from a timebase."""

    def get_newer_timestamp(self, min_time: int = 0) -> int: ...

    def current_timestamp(self) -> int: ...

    def advance_past(self, timestamp: int | None = None) -> int: ...


class Timebase:
    """Non-decreasing millisecond clock. Not thread-safe."""

    def __init__(self, clock=None):
        self._clock = clock or now_millis
        self._last_timestamp = 0
        self._regressed = False
        self._log = get_logger()

    def get_newer_timestamp(self, min_time: int = 0) -> int:
        """Return a timestamp >= every earlier result and >= `min_time`.

        A `min_time` ahead of the clock spins the calling thread until the
        clock catches up. Zero (or anything not in the future) never blocks.
        """
        now = self._clock()
        # Busy-poll: the wait is at most a few ms and sleep granularity is coarser
        while now < min_time:
            now = self._clock()

        if now < self._last_timestamp:
            # Once per regression, not once per call
            if not self._regressed:
                self._regressed = True
                self._log.warn("clock moved backwards", clock=now, last=self._last_timestamp)
            return self._last_timestamp

        if self._regressed:
            self._regressed = False
            self._log.info("clock caught up", clock=now)
        self._last_timestamp = now
        return now

    def current_timestamp(self) -> int:
        """Non-forcing read, stable within one clock millisecond."""
        return self.get_newer_timestamp(0)

    def advance_past(self, timestamp: int | None = None) -> int:
        """Block until strictly past `timestamp` (default: the last value handed out)."""
        if timestamp is None:
            timestamp = self._last_timestamp
        return self.get_newer_timestamp(timestamp + 1)
