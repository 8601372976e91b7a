import xml.etree.ElementTree as ET

import pytest

from gamecore.errors import FatalError
from gamecore.named_strings import NamedStrings
from gamecore.rgba8 import Rgba8


@pytest.fixture
def store():
    return NamedStrings()


def test_missing_key_returns_default(store):
    assert store.get_value("absent", "fallback") == "fallback"
    assert store.get_value("absent", 7) == 7
    assert store.get_value("absent", Rgba8.RED) == Rgba8.RED


def test_string_round_trip(store):
    store.set_value("name", "hello")
    assert store.get_value("name", "") == "hello"


def test_set_value_overwrites(store):
    store.set_value("name", "one")
    store.set_value("name", "two")
    assert store.get_value("name", "") == "two"
    assert len(store) == 1


@pytest.mark.parametrize("text, expected", [("true", True), ("false", False)])
def test_bool_values(store, text, expected):
    store.set_value("flag", text)
    assert store.get_value("flag", not expected) is expected


def test_bool_other_text_gives_default(store):
    store.set_value("flag", "yes")
    assert store.get_value("flag", True) is True
    assert store.get_value("flag", False) is False


def test_int_value(store):
    store.set_value("count", "42")
    assert store.get_value("count", 0) == 42


def test_int_parses_leading_digits(store):
    store.set_value("count", " -12abc")
    assert store.get_value("count", 0) == -12


def test_int_invalid_raises(store):
    store.set_value("count", "abc")
    with pytest.raises(ValueError):
        store.get_value("count", 0)


def test_float_value(store):
    store.set_value("speed", "2.5")
    assert store.get_value("speed", 0.0) == pytest.approx(2.5)


def test_float_invalid_raises(store):
    store.set_value("speed", "fast")
    with pytest.raises(ValueError):
        store.get_value("speed", 0.0)


def test_rgba8_value(store):
    store.set_value("tint", "10,20,30")
    assert store.get_value("tint", Rgba8.WHITE) == Rgba8(10, 20, 30, 255)


def test_rgba8_invalid_raises(store):
    store.set_value("tint", "10,20")
    with pytest.raises(FatalError):
        store.get_value("tint", Rgba8.WHITE)


def test_unsupported_default_type(store):
    store.set_value("thing", "x")
    with pytest.raises(TypeError):
        store.get_value("thing", [1, 2])


def test_populate_from_xml_element(store):
    element = ET.fromstring('<Config windowTitle="Demo" fullscreen="false" lines="40"/>')
    store.populate_from_xml_element(element)
    assert store.get_value("windowTitle", "") == "Demo"
    assert store.get_value("fullscreen", True) is False
    assert store.get_value("lines", 0) == 40
    assert list(store) == ["fullscreen", "lines", "windowTitle"]
    assert "lines" in store