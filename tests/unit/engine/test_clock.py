"""Tests for the clock implementations."""

from __future__ import annotations

import pytest

from tactical_core.engine.clock import Clock, ManualClock, SystemClock, clock_ms


class TestManualClock:
    """Tests for ManualClock."""

    def test_starts_at_given_time(self) -> None:
        assert ManualClock().now() == 0.0
        assert ManualClock(start=12.5).now() == 12.5

    def test_advance(self) -> None:
        clock = ManualClock()
        clock.advance(1.5)
        clock.advance_ms(250)
        assert clock.now() == pytest.approx(1.75)

    def test_set(self) -> None:
        clock = ManualClock()
        clock.set(10)
        assert clock.now() == 10

    def test_cannot_move_backwards(self) -> None:
        clock = ManualClock(start=5)
        with pytest.raises(ValueError):
            clock.advance(-1)
        with pytest.raises(ValueError):
            clock.set(4)


class TestSystemClock:
    """Tests for SystemClock."""

    def test_monotonic(self) -> None:
        clock = SystemClock()
        first = clock.now()
        assert clock.now() >= first

    def test_both_satisfy_protocol(self) -> None:
        assert isinstance(SystemClock(), Clock)
        assert isinstance(ManualClock(), Clock)


class TestClockMs:
    """Tests for clock_ms."""

    def test_whole_milliseconds(self) -> None:
        clock = ManualClock(start=12345.678)
        for _ in range(8):
            clock.advance_ms(125)

        assert clock_ms(clock) == 12346678

    def test_rounds_to_nearest(self) -> None:
        assert clock_ms(ManualClock(start=0.1237)) == 124
