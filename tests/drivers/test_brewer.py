"""Tests for the Brewer-like maps."""
import math

import numpy as np
import pytest

from chromamap.drivers import brewer_sequential, brewer_diverging, brewer_qualitative
from chromamap.gamut import BRIGHT_POINT_LCH
from chromamap.paths import default_contrast_for_small_n
from chromamap.types import Sampling


def test_sequential_blue_nine(bytes_to_luv):
    palette = brewer_sequential(9, hue=math.radians(240.0))
    assert palette.colors.shape == (9, 3)
    assert palette.colors.dtype == np.uint8
    l = bytes_to_luv(palette.colors)[:, 0]
    assert np.all(np.diff(l) > 0.0)
    assert l[0] < 30.0
    assert l[-1] > 90.0
    # blue dominates the dark half
    r, g, b = palette.colors[2].astype(int)
    assert b > r


@pytest.mark.parametrize("hue_degrees", [0, 60, 120, 180, 240, 300])
def test_sequential_lightness_is_monotonic(hue_degrees, bytes_to_luv):
    palette = brewer_sequential(32, hue=math.radians(hue_degrees))
    l = bytes_to_luv(palette.colors)[:, 0]
    assert np.all(np.diff(l) > -1.0)


def test_small_n_uses_lower_contrast():
    default = brewer_sequential(5)
    explicit = brewer_sequential(5, contrast=default_contrast_for_small_n(5))
    assert np.array_equal(default.colors, explicit.colors)

    large = brewer_sequential(10)
    explicit = brewer_sequential(10, contrast=0.88)
    assert np.array_equal(large.colors, explicit.colors)


@pytest.mark.parametrize("n", [7, 8, 11, 32])
def test_diverging_lightness_is_symmetric(n, bytes_to_luv):
    palette = brewer_diverging(n, saturation=0.4)
    l = bytes_to_luv(palette.colors)[:, 0]
    assert np.allclose(l, l[::-1], atol=2.0)
    assert l[0] < l[n // 2]


def test_diverging_uses_both_hues():
    palette = brewer_diverging(9, hue=0.0, divergence=math.radians(240.0))
    first = palette.colors[0].astype(int)
    last = palette.colors[-1].astype(int)
    assert first[0] > first[2]  # reddish
    assert last[2] > last[0]  # bluish


def test_diverging_neutral_middle():
    palette = brewer_diverging(5)
    middle = palette.colors[2].astype(int)
    assert middle.min() > 200
    assert middle.max() - middle.min() < 40


def test_qualitative_distinct_colors():
    palette = brewer_qualitative(8)
    assert len({tuple(c) for c in palette.colors.tolist()}) == 8


def test_qualitative_no_contrast_keeps_lightness(bytes_to_luv):
    palette = brewer_qualitative(6, contrast=0.0, brightness=0.7, saturation=0.1)
    l = bytes_to_luv(palette.colors)[:, 0]
    assert np.ptp(l) < 1.5


@pytest.mark.parametrize("driver", [brewer_sequential, brewer_diverging, brewer_qualitative])
def test_endpoint_sampling_and_out(driver):
    out = np.zeros(3 * 12, dtype=np.uint8)
    palette = driver(12, sampling=Sampling.ENDPOINTS, out=out)
    assert np.shares_memory(palette.colors, out)
    assert out.any()
    assert palette.clipped >= 0


@pytest.mark.parametrize("hue", [-6.0, -3.0, -0.5])
def test_qualitative_negative_hue_wraps(hue):
    wrapped = brewer_qualitative(8, hue=hue + 2.0 * math.pi)
    palette = brewer_qualitative(8, hue=hue)
    assert np.abs(palette.colors.astype(int) - wrapped.colors.astype(int)).max() <= 1


def test_qualitative_never_brighter_than_bright_point(bytes_to_luv):
    palette = brewer_qualitative(16, hue=-6.0, brightness=0.8, saturation=0.1)
    l = bytes_to_luv(palette.colors)[:, 0]
    assert l.max() <= 0.8 * BRIGHT_POINT_LCH.l + 0.5
