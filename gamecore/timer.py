"""Timers that measure periods against a clock."""

from __future__ import annotations

from .clock import Clock


class Timer:
    """Measures elapsed time on a clock against a fixed period.

    A start time of zero means the timer is stopped.
    """

    def __init__(self, period: float, clock: Clock | None = None) -> None:
        self.clock = clock
        self.period = float(period)
        self.start_time = 0.0

    def start(self) -> None:
        if self.clock is not None:
            self.start_time = self.clock.total_seconds

    def stop(self) -> None:
        self.start_time = 0.0

    def elapsed_time(self) -> float:
        if self.is_stopped() or self.clock is None:
            return 0.0
        return self.clock.total_seconds - self.start_time

    def elapsed_fraction(self) -> float:
        if self.period == 0.0:
            return 0.0
        return self.elapsed_time() / self.period

    def is_stopped(self) -> bool:
        return self.start_time == 0.0

    def has_period_elapsed(self) -> bool:
        return self.elapsed_time() > self.period and not self.is_stopped()

    def decrement_period_if_elapsed(self) -> bool:
        """Move the start forward by one period if it has elapsed; report whether it did."""
        if self.has_period_elapsed():
            self.start_time += self.period
            return True
        return False

    def force_complete(self) -> None:
        """Set the start so that exactly one period has elapsed."""
        if self.clock is not None:
            self.start_time = self.clock.total_seconds - self.period

    def remaining_time(self) -> float:
        if self.is_stopped():
            return 0.0
        return self.period - self.elapsed_time()