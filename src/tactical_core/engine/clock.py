"""Clock abstraction for wall-clock driven timing.

Fire-rate gating, reload duration and per-actor movement deltas all read
time through a ``Clock`` so tests can drive them with ``ManualClock``
instead of real delays.
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of monotonic time in seconds."""

    def now(self) -> float:
        """Return the current time in seconds."""
        ...


class SystemClock:
    """Clock backed by ``time.monotonic``."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """Clock that only moves when told to.

    Example:
        >>> clock = ManualClock()
        >>> clock.advance_ms(125)
        >>> clock.now()
        0.125
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move time forward by ``seconds``."""
        if seconds < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += seconds

    def advance_ms(self, milliseconds: float) -> None:
        """Move time forward by ``milliseconds``."""
        self.advance(milliseconds / 1000.0)

    def set(self, value: float) -> None:
        """Jump to an absolute time, which must not be in the past."""
        if value < self._now:
            raise ValueError("ManualClock cannot move backwards")
        self._now = value


def clock_ms(clock: Clock) -> int:
    """Read ``clock`` as whole milliseconds."""
    return round(clock.now() * 1000)


__all__ = [
    "Clock",
    "SystemClock",
    "ManualClock",
    "clock_ms",
]
