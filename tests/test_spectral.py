"""Tests for black-body colors."""
import math

import numpy as np
import pytest

from chromamap.spectral import (
    CIE_1931_2DEG,
    WAVELENGTH_MAX,
    WAVELENGTH_MIN,
    black_body_hue_saturation,
    black_body_xyz,
    cmf,
    planck,
)


def test_table_layout():
    assert CIE_1931_2DEG.shape == (95, 4)
    assert CIE_1931_2DEG[0, 0] == WAVELENGTH_MIN
    assert CIE_1931_2DEG[-1, 0] == WAVELENGTH_MAX
    assert np.all(np.diff(CIE_1931_2DEG[:, 0]) == 5.0)
    assert np.all(CIE_1931_2DEG[:, 1:] >= 0.0)


def test_cmf_peak_and_range():
    assert cmf(555.0)[1] == pytest.approx(1.0, abs=1e-3)
    assert np.all(cmf(350.0) == 0.0)
    assert np.all(cmf(900.0) == 0.0)


def test_cmf_interpolates():
    expected = 0.5 * (CIE_1931_2DEG[8, 1:] + CIE_1931_2DEG[9, 1:])
    assert np.allclose(cmf(402.5), expected)
    assert cmf(np.array([400.0, 500.0, 600.0])).shape == (3, 3)


def test_planck_grows_with_temperature():
    wavelengths = np.array([400.0, 550.0, 700.0])
    assert np.all(planck(wavelengths, 6000.0) > planck(wavelengths, 3000.0))


def test_planck_cold_is_zero_without_warnings():
    with np.errstate(all="raise"):
        assert planck(400.0, 10.0) == 0.0


def test_reference_temperature_is_normalized():
    assert black_body_xyz(6500.0).y == pytest.approx(10.0)


def test_luminance_grows_with_temperature():
    ys = [black_body_xyz(t).y for t in (500.0, 1000.0, 2000.0, 4000.0, 8000.0)]
    assert ys == sorted(ys)
    assert all(y > 0.0 for y in ys)


def test_step_changes_little():
    coarse = black_body_xyz(3000.0)
    fine = black_body_xyz(3000.0, step=1.0)
    assert np.allclose(coarse, fine, rtol=1e-2)


def test_near_white_at_6500():
    _, s = black_body_hue_saturation(6500.0)
    assert s < 0.1


def test_hue_goes_from_red_to_blue():
    warm, _ = black_body_hue_saturation(1000.0)
    cold, _ = black_body_hue_saturation(20000.0)
    assert 0.0 < warm < math.pi / 2.0
    assert math.pi < cold < 2.0 * math.pi


def test_saturation_grows_as_temperature_drops():
    s = [black_body_hue_saturation(t)[1] for t in (6500.0, 3000.0, 1000.0)]
    assert s == sorted(s)


def test_very_cold_body_is_finite():
    h, s = black_body_hue_saturation(250.0)
    assert 0.0 <= h < 2.0 * math.pi
    assert math.isfinite(s)
