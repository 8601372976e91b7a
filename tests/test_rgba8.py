import pytest

from gamecore.errors import FatalError
from gamecore.rgba8 import Rgba8, interpolate


def test_default_is_opaque_white():
    assert Rgba8() == Rgba8.WHITE


def test_three_channel_constructor_defaults_alpha():
    assert Rgba8(10, 20, 30) == Rgba8(10, 20, 30, 255)


def test_named_constants():
    assert Rgba8.ORANGE == Rgba8(255, 165, 0, 255)
    assert Rgba8.NAVY_BLUE == Rgba8(0, 127, 127, 255)


@pytest.mark.parametrize("bad", [-1, 256, 1.5])
def test_out_of_range_channel_rejected(bad):
    with pytest.raises(ValueError):
        Rgba8(bad, 0, 0)


def test_from_text_three_parts():
    assert Rgba8.from_text("255,128,0") == Rgba8(255, 128, 0, 255)


def test_from_text_four_parts():
    assert Rgba8.from_text("1,2,3,4") == Rgba8(1, 2, 3, 4)


def test_from_text_skips_leading_whitespace():
    assert Rgba8.from_text(" 10, 20,30") == Rgba8(10, 20, 30)


def test_from_text_wraps_like_a_byte():
    assert Rgba8.from_text("256,0,0") == Rgba8(0, 0, 0)


def test_from_text_non_numeric_is_zero():
    assert Rgba8.from_text("abc,5,6") == Rgba8(0, 5, 6)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4,5", ""])
def test_from_text_wrong_count_raises(text):
    with pytest.raises(FatalError):
        Rgba8.from_text(text)


def test_as_floats_endpoints():
    assert Rgba8.WHITE.as_floats() == (1.0, 1.0, 1.0, 1.0)
    assert Rgba8(0, 0, 0, 0).as_floats() == (0.0, 0.0, 0.0, 0.0)


def test_scaled_identity_and_zero():
    color = Rgba8(10, 100, 200, 50)
    assert color.scaled(1.0) == color
    assert color.scaled(0.0) == Rgba8(0, 0, 0, 50)
    assert color.scaled(1.0, 0.0).a == 0


def test_scaled_clamps():
    assert Rgba8(200, 200, 200, 200).scaled(2.0, 2.0) == Rgba8(255, 255, 255, 255)
    assert Rgba8(200, 200, 200).scaled(-1.0) == Rgba8(0, 0, 0, 255)


def test_interpolate_endpoints():
    start = Rgba8(10, 20, 200, 255)
    end = Rgba8(250, 0, 30, 0)
    assert interpolate(start, end, 0.0) == start
    assert interpolate(start, end, 1.0) == end


def test_interpolate_midpoint_between_channels():
    start = Rgba8(0, 0, 0, 0)
    end = Rgba8(255, 255, 255, 255)
    mid = interpolate(start, end, 0.5)
    for channel in (mid.r, mid.g, mid.b, mid.a):
        assert 0 < channel < 255