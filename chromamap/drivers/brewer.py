"""
Brewer-like color maps (Wijffelaars et al., EuroVis 2008).

Sequential maps follow one ``BezierPath``. Diverging maps join two of them
at their bright ends. Qualitative maps walk around the hue circle and set
the lightness by the angular distance from yellow.
"""

import math
from typing import Optional

from numpy import ndarray as NDArray

from ..types.sampling import Sampling
from ..types.triplets import LCH, LUV, midpoint
from ..conversions import (
    TWO_PI,
    PI,
    chroma,
    hue_diff,
    lch_to_linear_rgb,
    lch_to_luv,
    luv_saturation,
    luv_to_linear_rgb,
    normalize_hue,
)
from ..gamut import BRIGHT_POINT_LCH, RED_SATURATION, max_saturation_at_lightness
from ..paths.bezier import BezierPath, default_contrast_for_small_n
from ..utils import value_or_default
from .. import defaults
from .output import Palette, palette_from_linear_rgb, sample_positions


def _contrast(n: int, contrast: Optional[float], default: float) -> float:
    if contrast is not None:
        return contrast
    if n <= defaults.SMALL_N_LIMIT:
        return default_contrast_for_small_n(n)
    return default


def brewer_sequential(
    n: int,
    *,
    hue: Optional[float] = None,
    contrast: Optional[float] = None,
    saturation: Optional[float] = None,
    brightness: Optional[float] = None,
    warmth: Optional[float] = None,
    sampling: Optional[Sampling] = None,
    out: Optional[NDArray] = None,
) -> Palette:
    """
    Single-hue map from dark to bright.

    Args:
        n: number of entries, at least 2
        hue: LCH hue in radians
        contrast: lightness range covered, [0, 1]; discrete maps (n <= 9)
            default to a lower contrast
        saturation: [0, 1]
        brightness: [0, 1]
        warmth: pull of the bright end towards yellow, [0, 1]
        sampling: position strategy, cell-centered by default
        out: optional uint8 buffer with 3n elements, filled in place

    Returns:
        Palette
    """
    hue = value_or_default(hue, defaults.BREWER_SEQUENTIAL_HUE)
    contrast = _contrast(n, contrast, defaults.BREWER_SEQUENTIAL_CONTRAST)
    saturation = value_or_default(saturation, defaults.BREWER_SEQUENTIAL_SATURATION)
    brightness = value_or_default(brightness, defaults.BREWER_SEQUENTIAL_BRIGHTNESS)
    warmth = value_or_default(warmth, defaults.BREWER_SEQUENTIAL_WARMTH)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    path = BezierPath.build(hue, saturation, warmth)
    rows = (luv_to_linear_rgb(path.sample(t, contrast, brightness)) for t in sample_positions(n, sampling))
    return palette_from_linear_rgb(rows, n, out)


def _neutral_middle(c0: LUV, c1: LUV, warmth: float) -> LUV:
    """Extra neutral color between the bright ends of a discrete diverging map."""
    sn = 0.5 * (luv_saturation(c0) + luv_saturation(c1)) * warmth
    l = 0.5 * (c0.l + c1.l)
    h = BRIGHT_POINT_LCH.h
    return lch_to_luv(LCH(l, chroma(l, min(max_saturation_at_lightness(l, h), sn)), h))


def brewer_diverging(
    n: int,
    *,
    hue: Optional[float] = None,
    divergence: Optional[float] = None,
    contrast: Optional[float] = None,
    saturation: Optional[float] = None,
    brightness: Optional[float] = None,
    warmth: Optional[float] = None,
    sampling: Optional[Sampling] = None,
    out: Optional[NDArray] = None,
) -> Palette:
    """
    Two sequential maps meeting at a bright middle.

    The second path uses ``hue + divergence``. For odd ``n`` the middle
    entry is an explicit neutral color when the map is discrete (n <= 9)
    and the average of both bright ends otherwise.
    """
    hue = value_or_default(hue, defaults.BREWER_DIVERGING_HUE)
    divergence = value_or_default(divergence, defaults.BREWER_DIVERGING_DIVERGENCE)
    contrast = _contrast(n, contrast, defaults.BREWER_DIVERGING_CONTRAST)
    saturation = value_or_default(saturation, defaults.BREWER_DIVERGING_SATURATION)
    brightness = value_or_default(brightness, defaults.BREWER_DIVERGING_BRIGHTNESS)
    warmth = value_or_default(warmth, defaults.BREWER_DIVERGING_WARMTH)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    hue1 = hue + divergence
    if hue1 >= TWO_PI:
        hue1 -= TWO_PI
    path0 = BezierPath.build(hue, saturation, warmth)
    path1 = BezierPath.build(hue1, saturation, warmth)

    rows = []
    for i, t in enumerate(sample_positions(n, sampling)):
        if n % 2 == 1 and i == n // 2:
            c0 = path0.sample(1.0, contrast, brightness)
            c1 = path1.sample(1.0, contrast, brightness)
            if n <= defaults.SMALL_N_LIMIT:
                c = _neutral_middle(c0, c1, warmth)
            else:
                c = midpoint(c0, c1)
        elif i < n // 2:
            c = path0.sample(2.0 * t, contrast, brightness)
        else:
            c = path1.sample(2.0 * (1.0 - t), contrast, brightness)
        rows.append(luv_to_linear_rgb(c))
    return palette_from_linear_rgb(rows, n, out)


def brewer_qualitative(
    n: int,
    *,
    hue: Optional[float] = None,
    divergence: Optional[float] = None,
    contrast: Optional[float] = None,
    saturation: Optional[float] = None,
    brightness: Optional[float] = None,
    sampling: Optional[Sampling] = None,
    out: Optional[NDArray] = None,
) -> Palette:
    """
    Distinct hues spread over ``divergence`` radians starting at ``hue``.

    Colors near yellow are lightest; lightness falls off by ``contrast``
    towards the opposite side of the hue circle.
    """
    hue = value_or_default(hue, defaults.BREWER_QUALITATIVE_HUE)
    divergence = value_or_default(divergence, defaults.BREWER_QUALITATIVE_DIVERGENCE)
    contrast = value_or_default(contrast, defaults.BREWER_QUALITATIVE_CONTRAST)
    saturation = value_or_default(saturation, defaults.BREWER_QUALITATIVE_SATURATION)
    brightness = value_or_default(brightness, defaults.BREWER_QUALITATIVE_BRIGHTNESS)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    eps = hue / TWO_PI
    r = divergence / TWO_PI
    l0 = brightness * BRIGHT_POINT_LCH.l
    l1 = (1.0 - contrast) * l0

    rows = []
    for t in sample_positions(n, sampling):
        ch = normalize_hue(TWO_PI * (eps + t * r))
        alpha = hue_diff(ch, BRIGHT_POINT_LCH.h) / PI
        cl = (1.0 - alpha) * l0 + alpha * l1
        cs = min(max_saturation_at_lightness(cl, ch), saturation * RED_SATURATION)
        rows.append(lch_to_linear_rgb(LCH(cl, chroma(cl, cs), ch)))
    return palette_from_linear_rgb(rows, n, out)
