"""RGBA images stored bottom row first."""

from __future__ import annotations

import os

from PIL import Image as PILImage

from .rgba8 import Rgba8

_CHANNELS = 4


class Image:
    """A grid of RGBA8 texels; row 0 is the bottom row of the picture."""

    def __init__(
        self,
        dimensions: tuple[int, int] = (0, 0),
        data: bytes = b"",
        file_path: str = "",
    ) -> None:
        width, height = dimensions
        if width < 0 or height < 0:
            raise ValueError(f"dimensions must not be negative, got {dimensions}")
        if len(data) != width * height * _CHANNELS:
            raise ValueError(
                f"expected {width * height * _CHANNELS} bytes for {dimensions}, got {len(data)}"
            )
        self._dimensions = (width, height)
        self._data = bytes(data)
        self.file_path = file_path

    @property
    def dimensions(self) -> tuple[int, int]:
        return self._dimensions

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> "Image":
        """Load an image file; a file that cannot be read gives an empty image."""
        file_path = os.fspath(path)
        try:
            with PILImage.open(file_path) as picture:
                rgba = picture.convert("RGBA").transpose(PILImage.Transpose.FLIP_TOP_BOTTOM)
        except OSError:
            return cls(file_path=file_path)
        return cls(rgba.size, rgba.tobytes(), file_path)

    @classmethod
    def filled(cls, size: tuple[int, int], color: Rgba8) -> "Image":
        """An image of ``size`` where every texel is ``color``."""
        width, height = size
        if width < 0 or height < 0:
            raise ValueError(f"size must not be negative, got {size}")
        texel = bytes((color.r, color.g, color.b, color.a))
        return cls((width, height), texel * (width * height))

    def texel_at(self, x: int, y: int) -> Rgba8:
        """Return the texel at column ``x`` and row ``y`` counted from the bottom."""
        width, height = self._dimensions
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"texel ({x}, {y}) outside image of size {self._dimensions}")
        offset = (y * width + x) * _CHANNELS
        return Rgba8(*self._data[offset : offset + _CHANNELS])

    def raw_data(self) -> bytes:
        """All texels as packed RGBA bytes, bottom row first."""
        return self._data