"""Isoluminant maps: constant lightness, only chroma and hue vary."""

from typing import Optional

from numpy import ndarray as NDArray

from ..types.sampling import Sampling
from ..types.triplets import LCH
from ..conversions import chroma, lch_to_linear_rgb
from ..utils import value_or_default
from .. import defaults
from .output import Palette, palette_from_linear_rgb, sample_positions

# Saturation parameters in [0, 1] are scaled up to LCH saturation.
SATURATION_SCALE = 5.0


def isoluminant_sequential(
    n: int,
    *,
    lightness: Optional[float] = None,
    saturation: Optional[float] = None,
    hue: Optional[float] = None,
    sampling: Optional[Sampling] = None,
    out: Optional[NDArray] = None,
) -> Palette:
    """Saturated ``hue`` fading to gray at constant lightness."""
    lightness = value_or_default(lightness, defaults.ISOLUMINANT_SEQUENTIAL_LIGHTNESS)
    saturation = value_or_default(saturation, defaults.ISOLUMINANT_SEQUENTIAL_SATURATION)
    hue = value_or_default(hue, defaults.ISOLUMINANT_SEQUENTIAL_HUE)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    l = lightness * 100.0
    rows = []
    for t in sample_positions(n, sampling):
        s = saturation * SATURATION_SCALE * (1.0 - t)
        rows.append(lch_to_linear_rgb(LCH(l, chroma(l, s), hue)))
    return palette_from_linear_rgb(rows, n, out)


def isoluminant_diverging(
    n: int,
    *,
    lightness: Optional[float] = None,
    saturation: Optional[float] = None,
    hue: Optional[float] = None,
    divergence: Optional[float] = None,
    sampling: Optional[Sampling] = None,
    out: Optional[NDArray] = None,
) -> Palette:
    """Two hues ``divergence`` apart meeting at gray in the middle."""
    lightness = value_or_default(lightness, defaults.ISOLUMINANT_DIVERGING_LIGHTNESS)
    saturation = value_or_default(saturation, defaults.ISOLUMINANT_DIVERGING_SATURATION)
    hue = value_or_default(hue, defaults.ISOLUMINANT_DIVERGING_HUE)
    divergence = value_or_default(divergence, defaults.ISOLUMINANT_DIVERGING_DIVERGENCE)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    l = lightness * 100.0
    rows = []
    for t in sample_positions(n, sampling):
        s = saturation * SATURATION_SCALE * abs(2.0 * (t - 0.5))
        h = hue if t <= 0.5 else hue + divergence
        rows.append(lch_to_linear_rgb(LCH(l, chroma(l, s), h)))
    return palette_from_linear_rgb(rows, n, out)


def isoluminant_qualitative(
    n: int,
    *,
    lightness: Optional[float] = None,
    saturation: Optional[float] = None,
    hue: Optional[float] = None,
    divergence: Optional[float] = None,
    sampling: Optional[Sampling] = None,
    out: Optional[NDArray] = None,
) -> Palette:
    """Constant lightness and chroma, hue walking over ``divergence``."""
    lightness = value_or_default(lightness, defaults.ISOLUMINANT_QUALITATIVE_LIGHTNESS)
    saturation = value_or_default(saturation, defaults.ISOLUMINANT_QUALITATIVE_SATURATION)
    hue = value_or_default(hue, defaults.ISOLUMINANT_QUALITATIVE_HUE)
    divergence = value_or_default(divergence, defaults.ISOLUMINANT_QUALITATIVE_DIVERGENCE)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    l = lightness * 100.0
    c = chroma(l, saturation * SATURATION_SCALE)
    rows = [lch_to_linear_rgb(LCH(l, c, hue + t * divergence)) for t in sample_positions(n, sampling)]
    return palette_from_linear_rgb(rows, n, out)
