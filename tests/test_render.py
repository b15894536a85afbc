import numpy as np
import pytest
from chromaramp import Gradient, LinRGB, LinRGBA, Luma
from chromaramp.render import render_strip, to_image


def test_render_strip_shape(yellow_blue):
    arr = render_strip(yellow_blue, 5, height=2)
    assert arr.shape == (2, 5, 3)
    assert np.allclose(arr[0, 0], [1.0, 1.0, 0.0])
    assert np.allclose(arr[1, -1], [0.0, 0.0, 1.0])
    assert np.allclose(arr[0, 2], [0.5, 0.5, 0.5])


def test_render_strip_of_slice(yellow_blue):
    arr = render_strip(yellow_blue[:0.5], 3)
    assert arr.shape == (1, 3, 3)
    assert np.allclose(arr[0, -1], [0.5, 0.5, 0.5])


def test_render_strip_plain_values(two_stop):
    arr = render_strip(two_stop, 5)
    assert arr.shape == (1, 5, 1)
    assert np.allclose(arr[0, :, 0], [2.0, 4.0, 6.0, 8.0, 10.0])


def test_render_strip_rejects_bad_height(two_stop):
    with pytest.raises(ValueError):
        render_strip(two_stop, 3, height=0)


def test_to_image_rgb(yellow_blue):
    img = to_image(yellow_blue, 5, 2)
    assert img.mode == "RGB"
    assert img.size == (5, 2)
    assert img.getpixel((0, 0)) == (255, 255, 0)
    assert img.getpixel((4, 1)) == (0, 0, 255)
    assert img.getpixel((2, 0)) == (128, 128, 128)


def test_to_image_luma_and_alpha():
    g = Gradient.from_colors([Luma(0.0), Luma(1.0)])
    img = to_image(g, 3)
    assert img.mode == "L"
    assert img.getpixel((2, 0)) == 255

    g = Gradient.from_colors([LinRGBA((1.0, 0.0, 0.0, 0.0)), LinRGBA((1.0, 0.0, 0.0, 1.0))])
    assert to_image(g, 4).mode == "RGBA"


def test_to_image_rejects_two_channels():
    g = Gradient.from_colors([(0.0, 0.0), (1.0, 1.0)])
    with pytest.raises(ValueError):
        to_image(g, 3)
