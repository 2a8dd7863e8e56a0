"""Tests for framebuffer encoding."""

import cv2
import numpy as np

from meshtracer.image import save_image, to_rgb8


def gradient_framebuffer(height=4, width=5):
    framebuffer = np.zeros((height, width, 3), dtype=np.float32)
    framebuffer[..., 0] = np.linspace(0, 1, width)[None, :]
    framebuffer[..., 2] = 1.0
    framebuffer[0, 0] = (1.5, -0.3, 0.5)
    return framebuffer


def test_to_rgb8_clips_and_scales():
    rgb = to_rgb8(gradient_framebuffer())
    assert rgb.dtype == np.uint8
    assert rgb.shape == (4, 5, 3)
    assert rgb[0, 0].tolist() == [255, 0, 127]
    assert rgb[1, -1].tolist() == [255, 0, 255]
    assert rgb[1, 0].tolist() == [0, 0, 255]


def test_save_png_round_trip(tmp_path):
    framebuffer = gradient_framebuffer()
    path = save_image(framebuffer, tmp_path / "out.png")
    assert path.exists()

    loaded = cv2.cvtColor(cv2.imread(str(path)), cv2.COLOR_BGR2RGB)
    np.testing.assert_array_equal(loaded, to_rgb8(framebuffer))


def test_missing_extension_defaults_to_png(tmp_path):
    path = save_image(gradient_framebuffer(), tmp_path / "render")
    assert path.suffix == ".png"
    assert path.exists()


def test_ppm_output(tmp_path):
    path = save_image(gradient_framebuffer(), tmp_path / "render.ppm")
    assert path.read_bytes().startswith(b"P6")
    assert cv2.imread(str(path)).shape == (4, 5, 3)
