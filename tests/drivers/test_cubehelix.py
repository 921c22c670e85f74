"""Tests for CubeHelix."""
import numpy as np

from chromamap.drivers import cubehelix
from chromamap.types import Sampling


def test_black_to_white():
    palette = cubehelix(256)
    assert palette.colors[0].tolist() == [0, 0, 0]
    assert palette.colors[-1].tolist() == [255, 255, 255]


def test_no_saturation_is_gray_ramp():
    palette = cubehelix(16, saturation=0.0)
    colors = palette.colors.astype(int)
    assert palette.clipped == 0
    assert np.all(colors[:, 0] == colors[:, 1])
    assert np.all(colors[:, 1] == colors[:, 2])
    assert np.all(np.diff(colors[:, 0]) > 0)


def test_luma_rises():
    # Green's luma weights make the helix vanish in the gray component.
    colors = cubehelix(64, saturation=0.5).colors.astype(float)
    luma = colors @ np.array([0.30, 0.59, 0.11])
    assert np.all(np.diff(luma) > -1.0)


def test_large_amplitude_clips():
    assert cubehelix(64, saturation=3.0).clipped > 0


def test_gamma_darkens():
    plain = cubehelix(9, saturation=0.0)
    dark = cubehelix(9, saturation=0.0, gamma=2.0)
    assert np.all(dark.colors[1:-1] < plain.colors[1:-1])


def test_cell_centered_avoids_extremes():
    palette = cubehelix(8, sampling=Sampling.CELL_CENTERED)
    assert palette.colors[0].max() > 0
    assert palette.colors[-1].min() < 255


def test_negative_gamma_does_not_raise():
    palette = cubehelix(8, gamma=-1.0)
    assert palette.colors.shape == (8, 3)
    assert palette.clipped == 0
    assert np.all(palette.colors == 255)
