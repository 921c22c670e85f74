"""Tests for Moreland diverging maps."""
import numpy as np
import pytest

from chromamap.conversions import lab_to_msh, srgb_to_lab
from chromamap.drivers import moreland
from chromamap.drivers.moreland import SATURATION_THRESHOLD, adjust_hue
from chromamap.types import MSH, SRGB


def test_three_entries():
    palette = moreland(3)
    assert palette.colors[0].tolist() == [180, 4, 38]
    assert palette.colors[-1].tolist() == [59, 76, 192]
    middle = palette.colors[1].astype(int)
    assert np.all(np.abs(middle - 221) <= 1)


def test_custom_end_points_are_exact():
    palette = moreland(17, color0=(10, 120, 40), color1=(200, 40, 180))
    assert palette.colors[0].tolist() == [10, 120, 40]
    assert palette.colors[-1].tolist() == [200, 40, 180]


def test_white_middle_is_lightest(bytes_to_luv):
    l = bytes_to_luv(moreland(33).colors)[:, 0]
    assert l.argmax() == 16
    assert l[16] == pytest.approx(88.0, abs=0.5)


def test_gray_end_gets_hue_of_other_end():
    palette = moreland(9, color0=(100, 100, 100), color1=(59, 76, 192))
    assert palette.colors[0].tolist() == [100, 100, 100]
    assert palette.colors[-1].tolist() == [59, 76, 192]
    # no white detour in between
    r, g, b = palette.colors[4].astype(int)
    assert b > r + 10


def test_adjust_hue():
    saturated = lab_to_msh(srgb_to_lab(SRGB(59 / 255, 76 / 255, 192 / 255)))
    assert saturated.s > SATURATION_THRESHOLD
    assert adjust_hue(saturated, saturated.m) == saturated.h
    assert adjust_hue(saturated, 88.0) != pytest.approx(saturated.h)


def test_adjust_hue_direction():
    msh = MSH(50.0, 0.5, 0.0)
    assert adjust_hue(msh, 80.0) > 0.0
    msh = MSH(50.0, 0.5, -2.0)
    assert adjust_hue(msh, 80.0) < -2.0
