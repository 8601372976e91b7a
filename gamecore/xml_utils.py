"""Typed reading of XML element attributes with defaults."""

from __future__ import annotations

import logging
import re
from xml.etree.ElementTree import Element

from .rgba8 import Rgba8
from .string_utils import split_string_on_delimiter

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def _parse_rgba8(text: str, default: Rgba8) -> Rgba8:
    parts = split_string_on_delimiter(text, ",")
    if len(parts) not in (3, 4):
        logger.warning("Invalid Rgba8 Xml Attribute: %s", text)
        return default
    channels = [_atoi(part) % 256 for part in parts]
    if len(channels) == 3:
        channels.append(255)
    return Rgba8(*channels)


def _parse_vector(text: str, default: tuple) -> tuple:
    size = len(default)
    if size not in (2, 3):
        raise TypeError(f"vector defaults must have 2 or 3 components, got {size}")
    parts = split_string_on_delimiter(text, ",")
    if size == 2 and len(parts) != 2:
        logger.warning("Invalid vector Xml Attribute: %s", text)
    if len(parts) < size:
        raise ValueError(f"expected {size} comma-separated components, got {text!r}")
    all_ints = all(isinstance(c, int) and not isinstance(c, bool) for c in default)
    convert = _atoi if all_ints else _atof
    return tuple(convert(part) for part in parts[:size])


def parse_xml_attribute(element: Element, name: str, default):
    """Read attribute ``name`` as the type of ``default``, or return ``default``.

    Supported defaults: bool (true only for "true"), int, float, str,
    :class:`Rgba8` ("r,g,b[,a]"), list of str (comma separated) and tuples of
    2 or 3 ints or floats ("x,y" or "x,y,z").
    """
    value = element.get(name)
    if value is None:
        return default
    if isinstance(default, bool):
        return value == "true"
    if isinstance(default, int):
        return _atoi(value)
    if isinstance(default, float):
        return _atof(value)
    if isinstance(default, Rgba8):
        return _parse_rgba8(value, default)
    if isinstance(default, str):
        return value
    if isinstance(default, list):
        return split_string_on_delimiter(value, ",")
    if isinstance(default, tuple):
        return _parse_vector(value, default)
    raise TypeError(f"unsupported default type: {type(default).__name__}")


def parse_xml_char_attribute(element: Element, name: str, default: str) -> str:
    """Read a single-character attribute; anything else gives ``default``."""
    value = element.get(name)
    if value is not None and len(value) == 1:
        return value
    return default


def parse_xml_float_range_attribute(
    element: Element, name: str, default: tuple[float, float]
) -> tuple[float, float]:
    """Read a "min~max" attribute as a pair of floats."""
    value = element.get(name)
    if value is None:
        return default
    parts = split_string_on_delimiter(value, "~")
    if len(parts) < 2:
        raise ValueError(f"expected 'min~max', got {value!r}")
    return (_atof(parts[0]), _atof(parts[1]))