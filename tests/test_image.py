import pytest
from PIL import Image as PILImage

from gamecore.image import Image
from gamecore.rgba8 import Rgba8


def test_default_image_is_empty():
    image = Image()
    assert image.dimensions == (0, 0)
    assert image.raw_data() == b""


def test_filled_image():
    color = Rgba8(10, 20, 30, 40)
    image = Image.filled((3, 2), color)
    assert image.dimensions == (3, 2)
    assert image.texel_at(2, 1) == color
    assert image.raw_data() == bytes((10, 20, 30, 40)) * 6


def test_filled_negative_size_raises():
    with pytest.raises(ValueError):
        Image.filled((-1, 2), Rgba8.RED)


def test_texel_out_of_range_raises():
    image = Image.filled((2, 2), Rgba8.RED)
    with pytest.raises(IndexError):
        image.texel_at(2, 0)
    with pytest.raises(IndexError):
        image.texel_at(0, -1)


def test_mismatched_data_raises():
    with pytest.raises(ValueError):
        Image((2, 2), b"\x00" * 3)


def test_load_flips_rows(tmp_path):
    path = tmp_path / "pic.png"
    picture = PILImage.new("RGBA", (2, 3), (0, 0, 255, 255))
    picture.putpixel((0, 0), (255, 0, 0, 255))
    picture.putpixel((1, 2), (0, 255, 0, 128))
    picture.save(path)

    image = Image.load(path)
    assert image.dimensions == (2, 3)
    assert image.file_path == str(path)
    assert image.texel_at(0, 2) == Rgba8(255, 0, 0, 255)
    assert image.texel_at(1, 0) == Rgba8(0, 255, 0, 128)
    assert image.texel_at(1, 1) == Rgba8(0, 0, 255, 255)
    assert len(image.raw_data()) == 2 * 3 * 4


def test_load_rgb_gets_opaque_alpha(tmp_path):
    path = tmp_path / "rgb.png"
    PILImage.new("RGB", (1, 1), (7, 8, 9)).save(path)
    assert Image.load(path).texel_at(0, 0) == Rgba8(7, 8, 9, 255)


def test_load_missing_file_gives_empty_image(tmp_path):
    path = tmp_path / "missing.png"
    image = Image.load(path)
    assert image.dimensions == (0, 0)
    assert image.file_path == str(path)