"""printf-style string formatting and delimiter splitting."""

from __future__ import annotations

DEFAULT_MAX_LENGTH = 2048


def stringf(fmt: str, *args: object, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Format ``fmt`` with ``args`` using printf rules.

    The result is cut to ``max_length - 1`` characters, the room left in a
    buffer of ``max_length`` once its terminator is counted.
    """
    if max_length < 1:
        raise ValueError(f"max_length must be at least 1, got {max_length}")
    text = fmt % args
    return text[: max_length - 1]


def split_string_on_delimiter(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on a single-character ``delimiter``, dropping empty pieces."""
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    return [piece for piece in text.split(delimiter) if piece]