"""Tests for the color map test image."""
import numpy as np

from chromamap import testpattern
from chromamap.drivers import cubehelix


def test_values_shape_and_bottom_ramp():
    values = testpattern.test_pattern_values(64, 16)
    assert values.shape == (16, 64)
    assert np.allclose(values[-1], np.linspace(0.0, 1.0, 64))


def test_modulation_shrinks_downwards():
    values = testpattern.test_pattern_values(64, 16)
    ramp = np.linspace(0.0, 1.0, 64)
    amplitude = np.abs(values - ramp).max(axis=1)
    assert np.all(np.diff(amplitude) <= 1e-12)
    assert amplitude[0] <= testpattern.MODULATION_AMPLITUDE + 1e-12


def test_apply_colormap_nearest_index():
    colors = np.array([[0, 0, 0], [100, 100, 100], [255, 255, 255]], dtype=np.uint8)
    out = testpattern.apply_colormap(np.array([0.0, 0.24, 0.26, 0.5, 1.0, 1.2, -0.1]), colors)
    assert out[:, 0].tolist() == [0, 0, 100, 100, 255, 255, 0]
    assert out.dtype == np.uint8


def test_render():
    colors = cubehelix(32).colors
    image = testpattern.render_test_pattern(colors, width=40, height=10)
    assert image.size == (40, 10)
    assert image.mode == "RGB"
    assert image.getpixel((0, 9)) == tuple(colors[0])
    assert image.getpixel((39, 9)) == tuple(colors[-1])


def test_default_size():
    image = testpattern.render_test_pattern(cubehelix(8).colors)
    assert image.size == (testpattern.DEFAULT_WIDTH, testpattern.DEFAULT_HEIGHT)
