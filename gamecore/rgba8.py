"""8-bit-per-channel RGBA colours."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from .errors import error_and_die
from .string_utils import split_string_on_delimiter

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi_byte(text: str) -> int:
    """Parse a leading integer as C's atoi does, then wrap it into a byte."""
    match = _LEADING_INT.match(text)
    value = int(match.group(1)) if match else 0
    return value % 256


def _normalize_byte(value: int) -> float:
    return value / 255.0


def _denormalize_byte(value: float) -> int:
    scaled = value * 256.0
    if scaled >= 255.0:
        return 255
    if scaled <= 0.0:
        return 0
    return int(scaled)


def _lerp(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * fraction


@dataclass(frozen=True)
class Rgba8:
    """A colour with red, green, blue and alpha channels in 0..255."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    RED: ClassVar["Rgba8"]
    GREEN: ClassVar["Rgba8"]
    BLUE: ClassVar["Rgba8"]
    WHITE: ClassVar["Rgba8"]
    BLACK: ClassVar["Rgba8"]
    YELLOW: ClassVar["Rgba8"]
    CYAN: ClassVar["Rgba8"]
    MAGENTA: ClassVar["Rgba8"]
    GRAY: ClassVar["Rgba8"]
    ORANGE: ClassVar["Rgba8"]
    PURPLE: ClassVar["Rgba8"]
    BROWN: ClassVar["Rgba8"]
    PINK: ClassVar["Rgba8"]
    LIGHT_GRAY: ClassVar["Rgba8"]
    DARK_GRAY: ClassVar["Rgba8"]
    NAVY_BLUE: ClassVar["Rgba8"]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an int in 0..255, got {value!r}")

    @classmethod
    def from_text(cls, text: str) -> "Rgba8":
        """Parse "r,g,b" or "r,g,b,a"; alpha defaults to 255."""
        parts = split_string_on_delimiter(text, ",")
        if not 3 <= len(parts) <= 4:
            error_and_die("Invalid Rgba8 Text")
        channels = [_atoi_byte(part) for part in parts]
        if len(channels) == 3:
            channels.append(255)
        return cls(*channels)

    def scaled(self, rgb_factor: float, a_factor: float = 1.0) -> "Rgba8":
        """Return the colour with RGB and alpha multiplied, clamped to 0..255."""

        def scale(channel: int, factor: float) -> int:
            return int(min(max(channel * factor, 0.0), 255.0))

        return Rgba8(
            scale(self.r, rgb_factor),
            scale(self.g, rgb_factor),
            scale(self.b, rgb_factor),
            scale(self.a, a_factor),
        )

    def as_floats(self) -> tuple[float, float, float, float]:
        """Return the channels as floats in 0..1."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)


Rgba8.RED = Rgba8(255, 0, 0, 255)
Rgba8.GREEN = Rgba8(0, 255, 0, 255)
Rgba8.BLUE = Rgba8(0, 0, 255, 255)
Rgba8.WHITE = Rgba8(255, 255, 255, 255)
Rgba8.BLACK = Rgba8(0, 0, 0, 255)
Rgba8.YELLOW = Rgba8(255, 255, 0, 255)
Rgba8.CYAN = Rgba8(0, 255, 255, 255)
Rgba8.MAGENTA = Rgba8(255, 0, 255, 255)
Rgba8.GRAY = Rgba8(128, 128, 128, 255)
Rgba8.ORANGE = Rgba8(255, 165, 0, 255)
Rgba8.PURPLE = Rgba8(128, 0, 128, 255)
Rgba8.BROWN = Rgba8(165, 42, 42, 255)
Rgba8.PINK = Rgba8(255, 192, 203, 255)
Rgba8.LIGHT_GRAY = Rgba8(211, 211, 211, 255)
Rgba8.DARK_GRAY = Rgba8(64, 64, 64, 255)
Rgba8.NAVY_BLUE = Rgba8(0, 127, 127, 255)


def interpolate(start_color: Rgba8, end_color: Rgba8, fraction_of_end: float) -> Rgba8:
    """Blend each channel from ``start_color`` toward ``end_color``."""

    def blend(start: int, end: int) -> int:
        return _denormalize_byte(
            _lerp(_normalize_byte(start), _normalize_byte(end), fraction_of_end)
        )

    return Rgba8(
        blend(start_color.r, end_color.r),
        blend(start_color.g, end_color.g),
        blend(start_color.b, end_color.b),
        blend(start_color.a, end_color.a),
    )