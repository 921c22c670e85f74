"""Tests for perceptually linear and uniform LCH paths."""
import math

import numpy as np
import pytest

from chromamap.conversions import lch_to_luv, saturation
from chromamap.paths import (
    AnchoredPath,
    chroma_candidates,
    hue_at,
    lch_distance,
    lerp,
    linear_interpolate,
    multi_hue_distance,
    uniform_interpolate,
)
from chromamap.types import LCH


def _luv_distance(a, b):
    return float(np.linalg.norm(np.subtract(lch_to_luv(a), lch_to_luv(b))))


def test_lerp():
    assert lerp(2.0, 4.0, 0.25) == pytest.approx(2.5)


@pytest.mark.parametrize("a,b", [
    (LCH(20.0, 30.0, 0.5), LCH(70.0, 10.0, 2.0)),
    (LCH(50.0, 40.0, 0.0), LCH(50.0, 40.0, math.pi)),
    (LCH(10.0, 0.0, 1.0), LCH(90.0, 60.0, 5.5)),
])
def test_lch_distance_is_luv_distance(a, b):
    assert lch_distance(a, b) == pytest.approx(_luv_distance(a, b))
    assert lch_distance(a, b) == pytest.approx(lch_distance(b, a))


def test_multi_hue_distance_grows_past_half_turn():
    a = LCH(50.0, 40.0, 0.0)
    near = multi_hue_distance(a, LCH(50.0, 40.0, 3.0))
    far = multi_hue_distance(a, LCH(50.0, 40.0, 4.5))
    assert far > near
    # lch_distance folds around the circle instead
    assert lch_distance(a, LCH(50.0, 40.0, 4.5)) < lch_distance(a, LCH(50.0, 40.0, 3.0))


@pytest.mark.parametrize("multi_hue", [False, True])
def test_chroma_candidates_solve_distance(multi_hue):
    anchor = LCH(30.0, 25.0, 1.0)
    distance = multi_hue_distance if multi_hue else lch_distance
    l, h, r = 45.0, 1.4, 30.0
    for c in chroma_candidates(anchor, l, h, r, multi_hue):
        if c >= 0.0:
            assert distance(anchor, LCH(l, c, h)) == pytest.approx(r, abs=1e-9)


def test_uniform_interpolate_same_hue_is_straight():
    a, b = LCH(20.0, 30.0, 1.0), LCH(80.0, 60.0, 1.0)
    for s in np.linspace(0.0, 1.0, 11):
        p = uniform_interpolate(a, b, s)
        assert p.l == pytest.approx(lerp(a.l, b.l, s))
        assert p.c == pytest.approx(lerp(a.c, b.c, s), abs=1e-6)
        assert lch_distance(a, p) == pytest.approx(s * lch_distance(a, b), abs=1e-6)


def test_uniform_interpolate_stays_in_chroma_range():
    a, b = LCH(30.0, 40.0, 0.5), LCH(70.0, 20.0, 2.0)
    for s in np.linspace(0.0, 1.0, 21):
        p = uniform_interpolate(a, b, s)
        assert 20.0 <= p.c <= 40.0


def test_uniform_interpolate_ends():
    a, b = LCH(30.0, 40.0, 0.5), LCH(70.0, 20.0, 2.0)
    assert uniform_interpolate(a, b, 0.0) == pytest.approx(tuple(a))
    assert uniform_interpolate(a, b, 1.0) == pytest.approx(tuple(b))


def test_uniform_interpolate_falls_back_to_mean_chroma():
    # Equal chroma across a hue change: no candidate hits the narrow range.
    a, b = LCH(30.0, 40.0, 0.5), LCH(70.0, 40.0, 1.5)
    assert uniform_interpolate(a, b, 0.5).c == pytest.approx(40.0)


def test_uniform_interpolate_hue_override():
    a, b = LCH(30.0, 40.0, 0.5), LCH(70.0, 20.0, 2.0)
    assert uniform_interpolate(a, b, 0.5, hue=3.0).h == 3.0


def test_linear_interpolate_saturation():
    a, b = LCH(20.0, 20.0, 0.0), LCH(80.0, 40.0, 2.0)
    p = linear_interpolate(a, b, 0.5)
    assert p.l == pytest.approx(50.0)
    assert p.h == pytest.approx(1.0)
    assert saturation(p.l, p.c) == pytest.approx(0.5 * (1.0 + 0.5))


def test_hue_at():
    assert hue_at(0.25, (4.0, 2.0), (0.0, 0.5)) == pytest.approx(3.0)
    assert hue_at(0.9, (4.0, 2.0), (0.0, 0.5)) == pytest.approx(2.0)


@pytest.fixture
def lightness_path():
    hue = 4.0
    return AnchoredPath(LCH(5.0, 0.0, hue), LCH(45.0, 80.0, hue), LCH(95.0, 0.0, hue))


def test_anchored_path_ends(lightness_path):
    assert lightness_path.evaluate(0.0) == pytest.approx(tuple(lightness_path.start))
    assert lightness_path.evaluate(1.0) == pytest.approx(tuple(lightness_path.end))


def test_anchored_path_splits_at_centre(lightness_path):
    assert lightness_path.split == 0.5
    assert lightness_path.evaluate(0.5) == pytest.approx(tuple(lightness_path.mid))


def test_anchored_path_proportional_split(lightness_path):
    path = AnchoredPath(lightness_path.start, lightness_path.mid, lightness_path.end, proportional=True)
    d0 = lch_distance(path.start, path.mid)
    d1 = lch_distance(path.mid, path.end)
    assert path.split == pytest.approx(d0 / (d0 + d1))
    assert path.length == pytest.approx(d0 + d1)
    assert path.evaluate(path.split) == pytest.approx(tuple(path.mid))
    for t in np.linspace(0.0, 1.0, 21):
        p = path.evaluate(t)
        if t <= path.split:
            assert lch_distance(path.start, p) == pytest.approx(t * path.length, abs=1e-6)
        else:
            assert lch_distance(p, path.end) == pytest.approx((1.0 - t) * path.length, abs=1e-6)


def test_anchored_path_is_uniform_per_half(lightness_path):
    path = lightness_path
    d0 = lch_distance(path.start, path.mid)
    d1 = lch_distance(path.mid, path.end)
    for t in np.linspace(0.0, 1.0, 21):
        p = path.evaluate(t)
        if t <= 0.5:
            assert lch_distance(path.start, p) == pytest.approx(2.0 * t * d0, abs=1e-6)
        else:
            assert lch_distance(p, path.end) == pytest.approx(2.0 * (1.0 - t) * d1, abs=1e-6)


def test_proportional_flag_ignored_by_linear_path(lightness_path):
    path = AnchoredPath(lightness_path.start, lightness_path.mid, lightness_path.end,
                        uniform=False, proportional=True)
    assert path.split == 0.5


def test_linear_path_splits_in_half(lightness_path):
    path = AnchoredPath(lightness_path.start, lightness_path.mid, lightness_path.end, uniform=False)
    assert path.split == 0.5
    assert path.evaluate(0.5) == pytest.approx(tuple(path.mid))


def test_anchored_path_hue_control_points():
    path = AnchoredPath(
        LCH(10.0, 20.0, 0.0), LCH(50.0, 50.0, 0.0), LCH(90.0, 20.0, 0.0),
        multi_hue=True, hues=(0.0, 2.0), positions=(0.0, 1.0),
    )
    assert path.evaluate(0.3).h == pytest.approx(0.6)


def test_degenerate_path():
    p = LCH(50.0, 0.0, 0.0)
    path = AnchoredPath(p, p, p)
    assert path.split == 0.5
    assert path.evaluate(0.7) == pytest.approx(tuple(p))
