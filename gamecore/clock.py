"""Hierarchical game clocks driven by a system clock."""

from __future__ import annotations

from typing import Callable

from .time_source import current_time_seconds

_system_clock: "Clock | None" = None


class Clock:
    """A clock that measures frame time, can be paused, scaled and stepped.

    A clock created without a parent becomes a child of the system clock and
    is ticked whenever its parent ticks.
    """

    def __init__(
        self,
        parent: "Clock | None" = None,
        *,
        time_source: Callable[[], float] = current_time_seconds,
    ) -> None:
        self._parent: Clock | None = None
        self._children: list[Clock] = []
        self._time_source = time_source
        self.max_delta_seconds = 0.1
        self.reset()
        if parent is None:
            parent = _system_clock
        if parent is not None:
            self._parent = parent
            parent._children.append(self)

    @property
    def parent(self) -> "Clock | None":
        return self._parent

    @property
    def children(self) -> tuple["Clock", ...]:
        return tuple(self._children)

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @time_scale.setter
    def time_scale(self, value: float) -> None:
        self._time_scale = float(value)

    @property
    def delta_seconds(self) -> float:
        return self._delta_seconds

    @property
    def total_seconds(self) -> float:
        return self._total_seconds

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def reset(self) -> None:
        """Return all counters, the scale and the pause state to their start values."""
        self._last_update_time = 0.0
        self._total_seconds = 0.0
        self._delta_seconds = 0.0
        self._frame_count = 0
        self._time_scale = 1.0
        self._is_paused = False
        self._step_single_frame = False

    def pause(self) -> None:
        self._is_paused = True
        for child in self._children:
            child.pause()

    def unpause(self) -> None:
        self._is_paused = False
        for child in self._children:
            child.unpause()

    def toggle_pause(self) -> None:
        self._is_paused = not self._is_paused
        for child in self._children:
            child.toggle_pause()

    def step_single_frame(self) -> None:
        """Run exactly one more frame on the next tick, then pause."""
        self._step_single_frame = True
        for child in self._children:
            child.step_single_frame()

    def tick(self) -> None:
        """Measure the time since the last tick and advance this clock and its children."""
        current_time = self._time_source()
        delta = current_time - self._last_update_time
        self._last_update_time = current_time

        if delta > self.max_delta_seconds:
            delta = self.max_delta_seconds

        if self._is_paused and not self._step_single_frame:
            self._delta_seconds = 0.0
            return

        self.advance(delta * self._time_scale)
        if self._step_single_frame:
            self._step_single_frame = False
            self._is_paused = True

        for child in list(self._children):
            child.tick()

    def advance(self, delta_seconds: float) -> None:
        """Move the clock forward by ``delta_seconds`` and count one frame."""
        self._delta_seconds = delta_seconds
        self._total_seconds += delta_seconds
        self._frame_count += 1

    def detach(self) -> None:
        """Remove this clock from its parent and orphan its children."""
        if self._parent is not None:
            try:
                self._parent._children.remove(self)
            except ValueError:
                pass
            self._parent = None
        for child in self._children:
            child._parent = None
        self._children.clear()


_system_clock = Clock()


def get_system_clock() -> Clock:
    """Return the root clock of the hierarchy."""
    return _system_clock


def tick_system_clock() -> None:
    """Tick the system clock and, through it, every attached clock."""
    _system_clock.tick()