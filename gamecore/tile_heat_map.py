"""A grid of float values over tiles, with colouring for debug display."""

from __future__ import annotations

from .errors import guarantee_or_die
from .rgba8 import Rgba8, interpolate


def _fraction_within_range(value: float, start: float, end: float) -> float:
    if end == start:
        return 0.0
    return (value - start) / (end - start)


class TileHeatMap:
    """One float per tile of a width-by-height grid, stored row by row."""

    def __init__(self, dimensions: tuple[int, int], initial_value: float = 0.0) -> None:
        width, height = dimensions
        if width < 0 or height < 0:
            raise ValueError(f"dimensions must not be negative, got {dimensions}")
        self.dimensions = (width, height)
        self.values: list[float] = [initial_value] * (width * height)

    @property
    def num_tiles(self) -> int:
        return self.dimensions[0] * self.dimensions[1]

    def set_value_for_all_tiles(self, value: float) -> None:
        self.values = [value] * self.num_tiles

    def set_value_at_index(self, tile_index: int, value: float) -> None:
        guarantee_or_die(0 <= tile_index < self.num_tiles, "Bad tile Index")
        self.values[tile_index] = value

    def get_value_at_index(self, tile_index: int) -> float:
        if not 0 <= tile_index < self.num_tiles:
            raise IndexError(f"tile index {tile_index} out of range")
        return self.values[tile_index]

    def get_max_value(self, special_value: float) -> float:
        """Largest value other than ``special_value``; never less than 0."""
        return max((v for v in self.values if v != special_value), default=0.0) if any(
            v > 0.0 and v != special_value for v in self.values
        ) else 0.0

    def heat_colors(
        self,
        value_range: tuple[float, float],
        low_color: Rgba8,
        high_color: Rgba8,
        special_value: float,
        special_color: Rgba8,
    ) -> list[Rgba8]:
        """Colour per tile, blended from low to high across ``value_range``.

        Tiles whose value is at least ``special_value`` take ``special_color``.
        """
        low, high = value_range
        colors = []
        for value in self.values:
            if value >= special_value:
                colors.append(special_color)
                continue
            fraction = min(max(_fraction_within_range(value, low, high), 0.0), 1.0)
            colors.append(interpolate(low_color, high_color, fraction))
        return colors

    def solid_colors(
        self, low_color: Rgba8, special_value: float, special_color: Rgba8
    ) -> list[Rgba8]:
        """``low_color`` per tile, or ``special_color`` where the value reaches ``special_value``."""
        return [special_color if value >= special_value else low_color for value in self.values]