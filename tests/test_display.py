import pytest
from PIL import Image

from wireframe.display import Canvas, Key, create_trgb


def test_create_trgb_white_matches_all_bytes_set():
    assert create_trgb(255, 255, 255, 255) == 0xFFFFFFFF


def test_create_trgb_places_each_byte():
    color = create_trgb(1, 2, 3, 4)
    assert (color >> 24, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF) == (
        1,
        2,
        3,
        4,
    )


def test_key_codes():
    assert Key.ESC == 65307
    assert Key.LEFT_ARROW == 65361
    assert Key.A == 97
    assert Key(122) is Key.Z


def test_default_title_and_size():
    canvas = Canvas()
    assert canvas.title == "New window"
    assert (canvas.width, canvas.height) == (800, 600)


def test_custom_title_kept():
    assert Canvas("Fdf").title == "Fdf"


def test_put_and_read_pixel():
    canvas = Canvas(width=10, height=10)
    canvas.put_pixel(3, 4, 0x123456)
    assert canvas.pixel(3, 4) == 0x123456
    assert canvas.pixel(4, 3) == 0


def test_out_of_bounds_put_is_ignored_and_read_raises():
    canvas = Canvas(width=5, height=5)
    canvas.put_pixel(-1, 2, 0xFFFFFF)
    canvas.put_pixel(5, 2, 0xFFFFFF)
    assert canvas.to_image().getcolors() == [(25, (0, 0, 0))]
    with pytest.raises(IndexError):
        canvas.pixel(5, 0)


def test_clear_resets_pixels():
    canvas = Canvas(width=4, height=4)
    canvas.put_pixel(1, 1, 0xFFFFFF)
    canvas.clear()
    assert canvas.pixel(1, 1) == 0


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        Canvas(width=0, height=10)


def test_to_image_reflects_pixels():
    canvas = Canvas(width=6, height=3)
    canvas.put_pixel(2, 1, create_trgb(255, 10, 20, 30))
    image = canvas.to_image()
    assert image.size == (6, 3)
    assert image.getpixel((2, 1)) == (10, 20, 30)
    assert image.getpixel((0, 0)) == (0, 0, 0)


def test_save_round_trip(tmp_path):
    canvas = Canvas(width=8, height=8)
    canvas.put_pixel(7, 7, create_trgb(0, 200, 100, 50))
    target = tmp_path / "out.png"
    canvas.save(target)
    with Image.open(target) as loaded:
        assert loaded.size == (8, 8)
        assert loaded.convert("RGB").getpixel((7, 7)) == (200, 100, 50)