import dataclasses

import pytest

from wirefdf.image import (
    DEFAULT_VISUAL,
    MSB_FIRST,
    Image,
    ImageType,
    Visual,
    get_color_value,
    new_image,
)

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color(x, y, w, h, kind):
    first = y if kind == 2 else x
    return (first * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill(image, visual, kind):
    for y in range(image.height):
        for x in range(image.width):
            image.set_pixel(x, y, get_color_value(visual, _color(x, y, image.width, image.height, kind)))


def test_image1_properties():
    image = new_image(IM1_SX, IM1_SY, DEFAULT_VISUAL)
    assert image.bpp == 32
    assert image.size_line == IM1_SX * 4
    assert image.type == ImageType.XIMAGE
    assert image.endian == 0


@pytest.mark.parametrize("size, kind", [((IM1_SX, IM1_SY), 1), ((IM3_SX, IM3_SY), 1), ((IM3_SX, IM3_SY), 2)])
def test_color_map_round_trip(size, kind):
    width, height = size
    image = new_image(width, height, DEFAULT_VISUAL)
    _fill(image, DEFAULT_VISUAL, kind)
    for y in range(0, height, 7):
        for x in range(0, width, 5):
            assert image.get_pixel(x, y) == _color(x, y, width, height, kind)


def test_new_image_is_black():
    image = new_image(10, 3)
    assert all(image.get_pixel(x, y) == 0 for x in range(10) for y in range(3))


def test_little_endian_bytes():
    image = new_image(4, 2, DEFAULT_VISUAL)
    image.set_pixel(1, 1, 0x112233)
    offset = image.size_line + 4
    assert bytes(image.data[offset:offset + 4]) == b"\x33\x22\x11\x00"


def test_big_endian_bytes():
    visual = dataclasses.replace(DEFAULT_VISUAL, byte_order=MSB_FIRST)
    image = new_image(4, 2, visual)
    image.set_pixel(0, 0, 0x112233)
    assert bytes(image.data[0:4]) == b"\x00\x11\x22\x33"
    assert image.get_pixel(0, 0) == 0x112233


def test_from_masks_24_bit():
    visual = Visual.from_masks(0xFF0000, 0x00FF00, 0x0000FF, 24)
    assert visual.channels == ((16, 8), (8, 8), (0, 8))


def test_good_color_deep_visual_unchanged():
    assert get_color_value(DEFAULT_VISUAL, 0xFF99FF) == 0xFF99FF


def test_good_color_565():
    visual = Visual.from_masks(0xF800, 0x07E0, 0x001F, 16)
    assert visual.channels == ((11, 5), (5, 6), (0, 5))
    assert visual.good_color(0xFFFFFF) == 0xFFFF
    assert visual.good_color(0xFF0000) == 0xF800
    assert visual.good_color(0x000000) == 0


def test_16_bit_image_round_trip():
    visual = Visual.from_masks(0xF800, 0x07E0, 0x001F, 16)
    image = new_image(5, 5, visual)
    assert image.bpp == 16
    _fill(image, visual, 1)
    assert image.get_pixel(3, 4) == visual.good_color(_color(3, 4, 5, 5, 1))


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        Visual.from_masks(0, 0xFF00, 0xFF, 24)


def test_bad_size_rejected():
    with pytest.raises(ValueError):
        new_image(0, 10)


def test_out_of_bounds():
    image = new_image(3, 3)
    with pytest.raises(IndexError):
        image.set_pixel(3, 0, 1)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


def test_destroy():
    image = new_image(3, 3)
    image.destroy()
    assert image.destroyed
    with pytest.raises(RuntimeError):
        image.get_pixel(0, 0)


def test_context_manager_destroys():
    with new_image(2, 2) as image:
        image.set_pixel(1, 1, 7)
        assert image.get_pixel(1, 1) == 7
    assert isinstance(image, Image) and image.destroyed