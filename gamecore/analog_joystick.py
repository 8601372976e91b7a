"""An analog stick with inner and outer dead zones."""

from __future__ import annotations

import math


def _normalized(x: float, y: float) -> tuple[float, float]:
    length = math.hypot(x, y)
    if length == 0.0:
        return (0.0, 0.0)
    return (x / length, y / length)


class AnalogJoystick:
    """Turns raw stick positions into dead-zone-corrected positions."""

    def __init__(self) -> None:
        self._raw_position = (0.0, 0.0)
        self._corrected_position = (0.0, 0.0)
        self._inner_dead_zone_fraction = 0.30
        self._outer_dead_zone_fraction = 0.95

    @property
    def position(self) -> tuple[float, float]:
        return self._corrected_position

    @property
    def magnitude(self) -> float:
        return math.hypot(*self._corrected_position)

    @property
    def orientation_degrees(self) -> float:
        x, y = self._corrected_position
        return math.degrees(math.atan2(y, x))

    @property
    def raw_position(self) -> tuple[float, float]:
        return self._raw_position

    @property
    def inner_dead_zone_fraction(self) -> float:
        return self._inner_dead_zone_fraction

    @property
    def outer_dead_zone_fraction(self) -> float:
        return self._outer_dead_zone_fraction

    def reset(self) -> None:
        """Zero the raw position; the corrected position is left as it is."""
        self._raw_position = (0.0, 0.0)

    def set_dead_zone_thresholds(self, inner: float, outer: float) -> None:
        self._inner_dead_zone_fraction = inner
        self._outer_dead_zone_fraction = outer

    def update_position(self, raw_x: float, raw_y: float) -> None:
        """Record a raw position in -1..1 and compute the corrected one."""
        self._raw_position = (raw_x, raw_y)
        raw_magnitude = math.hypot(raw_x, raw_y)
        inner = self._inner_dead_zone_fraction
        outer = self._outer_dead_zone_fraction

        if raw_magnitude < inner:
            self._corrected_position = (0.0, 0.0)
        elif raw_magnitude > outer:
            self._corrected_position = _normalized(raw_x, raw_y)
        else:
            scale = (raw_magnitude - inner) / (outer - inner) if outer != inner else 0.0
            nx, ny = _normalized(raw_x, raw_y)
            self._corrected_position = (nx * scale, ny * scale)