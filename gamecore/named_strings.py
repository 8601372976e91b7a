"""A string-keyed store of string values with typed lookups."""

from __future__ import annotations

import re
from typing import Iterator
from xml.etree.ElementTree import Element

from .rgba8 import Rgba8

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _parse_float(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


class NamedStrings:
    """Key/value strings, read back as the type of the given default."""

    def __init__(self) -> None:
        self._pairs: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return key in self._pairs

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._pairs))

    def populate_from_xml_element(self, element: Element) -> None:
        """Copy every attribute of ``element`` into the store."""
        for key, value in element.attrib.items():
            self._pairs[key] = value

    def set_value(self, key: str, value: str) -> None:
        self._pairs[key] = value

    def get_value(self, key: str, default):
        """Return the value for ``key`` converted to the type of ``default``.

        Booleans accept only "true" and "false"; any other text gives the default.
        Integers and floats parse a leading number and raise ValueError if there is none.
        """
        if key not in self._pairs:
            return default
        value = self._pairs[key]
        if isinstance(default, bool):
            if value == "true":
                return True
            if value == "false":
                return False
            return default
        if isinstance(default, str):
            return value
        if isinstance(default, int):
            return _parse_int(value)
        if isinstance(default, float):
            return _parse_float(value)
        if isinstance(default, Rgba8):
            return Rgba8.from_text(value)
        raise TypeError(f"unsupported default type: {type(default).__name__}")