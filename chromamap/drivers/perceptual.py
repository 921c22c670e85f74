"""
Perceptually linear (PL) and perceptually uniform (PU) maps.

Every map is described by a few LCH anchors. PL maps interpolate
lightness, saturation and hue linearly between them; PU maps keep equal
CIELUV distances between equal parameter steps (see ``paths.uniform``).

Saturation parameters are fractions of the saturation of pure red, the
most saturated sRGB primary. ``saturation_range`` sets how far the least
saturated anchor falls below that: its saturation is
``(1 - saturation_range)`` of the most saturated one. Every anchor is
capped by the gamut at its lightness and hue.
"""

import logging
from typing import Optional, Sequence, Tuple

from numpy import ndarray as NDArray

from ..types.sampling import Sampling
from ..types.triplets import LCH, midpoint
from ..conversions import PI, TWO_PI, chroma, lch_to_linear_rgb, lch_to_luv, luv_to_lch
from ..gamut import RED_SATURATION, max_saturation_at_lightness
from ..paths.uniform import AnchoredPath, hue_at, lerp
from ..spectral import black_body_hue_saturation
from ..utils import value_or_default, floats_or_default
from .. import defaults
from .output import Palette, palette_from_linear_rgb, sample_positions

logger = logging.getLogger(__name__)


def capped_anchor(l: float, saturation: float, hue: float) -> LCH:
    """LCH point with the requested saturation, reduced to fit the gamut."""
    s = min(saturation, max_saturation_at_lightness(l, hue))
    return LCH(l, chroma(l, max(s, 0.0)), hue)


def lightness_span(lightness_range: float) -> Tuple[float, float]:
    """Dark and light end of a lightness ramp centered on L = 50."""
    return 50.0 - 50.0 * lightness_range, 50.0 + 50.0 * lightness_range


def _render(path: AnchoredPath, n: int, sampling: Sampling, out: Optional[NDArray]) -> Palette:
    rows = (lch_to_linear_rgb(path.evaluate(t)) for t in sample_positions(n, sampling))
    return palette_from_linear_rgb(rows, n, out)


def shared_middle(a: LCH, b: LCH) -> LCH:
    """CIELUV average of the inner ends of two diverging halves."""
    return luv_to_lch(midpoint(lch_to_luv(a), lch_to_luv(b)))


def unwrap_toward(h: float, reference: float) -> float:
    """``h`` shifted by whole turns to lie within half a turn of ``reference``."""
    while h - reference > PI:
        h -= TWO_PI
    while reference - h > PI:
        h += TWO_PI
    return h


def _render_diverging(path0: AnchoredPath, path1: AnchoredPath, n: int,
                      sampling: Sampling, out: Optional[NDArray]) -> Palette:
    """Two half paths, each running from an outer end (0) to the middle (1)."""
    rows = []
    for t in sample_positions(n, sampling):
        if t < 0.5:
            lch = path0.evaluate(2.0 * t)
        else:
            lch = path1.evaluate(2.0 * (1.0 - t))
        rows.append(lch_to_linear_rgb(lch))
    return palette_from_linear_rgb(rows, n, out)


## Sequential: lightness

def _lightness_ramp(hue: float, lightness_range: float, saturation_range: float,
                    saturation: float) -> Tuple[LCH, LCH, LCH]:
    l0, l1 = lightness_span(lightness_range)
    s = saturation * RED_SATURATION
    s_end = (1.0 - saturation_range) * s
    return (
        capped_anchor(l0, s_end, hue),
        capped_anchor(50.0, s, hue),
        capped_anchor(l1, s_end, hue),
    )


def _sequential_lightness(n, uniform, lightness_range, saturation_range, saturation, hue, sampling, out):
    lightness_range = value_or_default(lightness_range, defaults.SEQUENTIAL_LIGHTNESS_LIGHTNESS_RANGE)
    saturation_range = value_or_default(saturation_range, defaults.SEQUENTIAL_LIGHTNESS_SATURATION_RANGE)
    saturation = value_or_default(saturation, defaults.SEQUENTIAL_LIGHTNESS_SATURATION)
    hue = value_or_default(hue, defaults.SEQUENTIAL_LIGHTNESS_HUE)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    start, mid, end = _lightness_ramp(hue, lightness_range, saturation_range, saturation)
    return _render(AnchoredPath(start, mid, end, uniform=uniform), n, sampling, out)


def pl_sequential_lightness(n: int, *, lightness_range: Optional[float] = None,
                            saturation_range: Optional[float] = None,
                            saturation: Optional[float] = None, hue: Optional[float] = None,
                            sampling: Optional[Sampling] = None,
                            out: Optional[NDArray] = None) -> Palette:
    """
    Single hue from dark to light, most saturated at L = 50.

    Args:
        n: number of entries, at least 2
        lightness_range: fraction of the [0, 100] lightness axis covered
        saturation_range: relative saturation drop towards both ends
        saturation: peak saturation as a fraction of red's
        hue: LCH hue in radians
        sampling: position strategy, cell-centered by default
        out: optional uint8 buffer with 3n elements, filled in place
    """
    return _sequential_lightness(n, False, lightness_range, saturation_range, saturation, hue, sampling, out)


def pu_sequential_lightness(n: int, *, lightness_range: Optional[float] = None,
                            saturation_range: Optional[float] = None,
                            saturation: Optional[float] = None, hue: Optional[float] = None,
                            sampling: Optional[Sampling] = None,
                            out: Optional[NDArray] = None) -> Palette:
    """Uniform counterpart of ``pl_sequential_lightness``."""
    return _sequential_lightness(n, True, lightness_range, saturation_range, saturation, hue, sampling, out)


## Sequential: saturation

def _sequential_saturation(n, uniform, saturation_range, lightness, saturation, hue, sampling, out):
    saturation_range = value_or_default(saturation_range, defaults.SEQUENTIAL_SATURATION_SATURATION_RANGE)
    lightness = value_or_default(lightness, defaults.SEQUENTIAL_SATURATION_LIGHTNESS)
    saturation = value_or_default(saturation, defaults.SEQUENTIAL_SATURATION_SATURATION)
    hue = value_or_default(hue, defaults.SEQUENTIAL_SATURATION_HUE)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    l = lightness * 100.0
    s = saturation * RED_SATURATION
    start = capped_anchor(l, (1.0 - saturation_range) * s, hue)
    end = capped_anchor(l, s, hue)
    mid = LCH(l, 0.5 * (start.c + end.c), hue)
    return _render(AnchoredPath(start, mid, end, uniform=uniform), n, sampling, out)


def pl_sequential_saturation(n: int, *, saturation_range: Optional[float] = None,
                             lightness: Optional[float] = None,
                             saturation: Optional[float] = None, hue: Optional[float] = None,
                             sampling: Optional[Sampling] = None,
                             out: Optional[NDArray] = None) -> Palette:
    """Constant lightness and hue, saturation rising from gray-ish to full."""
    return _sequential_saturation(n, False, saturation_range, lightness, saturation, hue, sampling, out)


def pu_sequential_saturation(n: int, *, saturation_range: Optional[float] = None,
                             lightness: Optional[float] = None,
                             saturation: Optional[float] = None, hue: Optional[float] = None,
                             sampling: Optional[Sampling] = None,
                             out: Optional[NDArray] = None) -> Palette:
    return _sequential_saturation(n, True, saturation_range, lightness, saturation, hue, sampling, out)


## Sequential: rainbow

def _sequential_rainbow(n, uniform, lightness_range, saturation_range, hue, rotations, saturation, sampling, out):
    lightness_range = value_or_default(lightness_range, defaults.SEQUENTIAL_RAINBOW_LIGHTNESS_RANGE)
    saturation_range = value_or_default(saturation_range, defaults.SEQUENTIAL_RAINBOW_SATURATION_RANGE)
    hue = value_or_default(hue, defaults.SEQUENTIAL_RAINBOW_HUE)
    rotations = value_or_default(rotations, defaults.SEQUENTIAL_RAINBOW_ROTATIONS)
    saturation = value_or_default(saturation, defaults.SEQUENTIAL_RAINBOW_SATURATION)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    l0, l1 = lightness_span(lightness_range)
    s = saturation * RED_SATURATION
    s_end = (1.0 - saturation_range) * s
    # Hues stay unwrapped so the path really turns ``rotations`` times.
    start = capped_anchor(l0, s_end, hue)
    mid = capped_anchor(50.0, s, hue + rotations * PI)
    end = capped_anchor(l1, s_end, hue + rotations * TWO_PI)
    return _render(AnchoredPath(start, mid, end, uniform=uniform, multi_hue=True), n, sampling, out)


def pl_sequential_rainbow(n: int, *, lightness_range: Optional[float] = None,
                          saturation_range: Optional[float] = None, hue: Optional[float] = None,
                          rotations: Optional[float] = None, saturation: Optional[float] = None,
                          sampling: Optional[Sampling] = None,
                          out: Optional[NDArray] = None) -> Palette:
    """
    Dark to light while the hue turns ``rotations`` times around the
    circle, starting at ``hue``.
    """
    return _sequential_rainbow(n, False, lightness_range, saturation_range, hue, rotations, saturation, sampling, out)


def pu_sequential_rainbow(n: int, *, lightness_range: Optional[float] = None,
                          saturation_range: Optional[float] = None, hue: Optional[float] = None,
                          rotations: Optional[float] = None, saturation: Optional[float] = None,
                          sampling: Optional[Sampling] = None,
                          out: Optional[NDArray] = None) -> Palette:
    return _sequential_rainbow(n, True, lightness_range, saturation_range, hue, rotations, saturation, sampling, out)


## Sequential: black body

def _black_body_anchor(l: float, temperature: float, saturation: float, reference_hue: Optional[float] = None) -> LCH:
    hue, spectral_saturation = black_body_hue_saturation(temperature)
    if reference_hue is not None:
        hue = unwrap_toward(hue, reference_hue)
    return capped_anchor(l, saturation * spectral_saturation, hue)


def _sequential_black_body(n, uniform, temperature, temperature_range, lightness_range,
                           saturation_range, saturation, sampling, out):
    temperature = value_or_default(temperature, defaults.SEQUENTIAL_BLACK_BODY_TEMPERATURE)
    temperature_range = value_or_default(temperature_range, defaults.SEQUENTIAL_BLACK_BODY_TEMPERATURE_RANGE)
    lightness_range = value_or_default(lightness_range, defaults.SEQUENTIAL_BLACK_BODY_LIGHTNESS_RANGE)
    saturation_range = value_or_default(saturation_range, defaults.SEQUENTIAL_BLACK_BODY_SATURATION_RANGE)
    saturation = value_or_default(saturation, defaults.SEQUENTIAL_BLACK_BODY_SATURATION)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    l0, l1 = lightness_span(lightness_range)
    s_end = 1.0 - saturation_range
    logger.debug("black body: %.0f K to %.0f K", temperature, temperature + temperature_range)

    if uniform:
        start = _black_body_anchor(l0, temperature, saturation * s_end)
        mid = _black_body_anchor(50.0, temperature + 0.5 * temperature_range, saturation, start.h)
        end = _black_body_anchor(l1, temperature + temperature_range, saturation * s_end, mid.h)
        return _render(AnchoredPath(start, mid, end, uniform=True, multi_hue=True), n, sampling, out)

    # The linear variant follows the radiator's color at every entry.
    rows = []
    for t in sample_positions(n, sampling):
        if t <= 0.5:
            l, profile = lerp(l0, 50.0, 2.0 * t), lerp(s_end, 1.0, 2.0 * t)
        else:
            l, profile = lerp(50.0, l1, 2.0 * t - 1.0), lerp(1.0, s_end, 2.0 * t - 1.0)
        lch = _black_body_anchor(l, temperature + t * temperature_range, saturation * profile)
        rows.append(lch_to_linear_rgb(lch))
    return palette_from_linear_rgb(rows, n, out)


def pl_sequential_black_body(n: int, *, temperature: Optional[float] = None,
                             temperature_range: Optional[float] = None,
                             lightness_range: Optional[float] = None,
                             saturation_range: Optional[float] = None,
                             saturation: Optional[float] = None,
                             sampling: Optional[Sampling] = None,
                             out: Optional[NDArray] = None) -> Palette:
    """
    Dark to light with the hues of a black body heated from
    ``temperature`` to ``temperature + temperature_range`` Kelvin.

    ``saturation`` scales the radiator's own saturation.
    """
    return _sequential_black_body(n, False, temperature, temperature_range, lightness_range,
                                  saturation_range, saturation, sampling, out)


def pu_sequential_black_body(n: int, *, temperature: Optional[float] = None,
                             temperature_range: Optional[float] = None,
                             lightness_range: Optional[float] = None,
                             saturation_range: Optional[float] = None,
                             saturation: Optional[float] = None,
                             sampling: Optional[Sampling] = None,
                             out: Optional[NDArray] = None) -> Palette:
    return _sequential_black_body(n, True, temperature, temperature_range, lightness_range,
                                  saturation_range, saturation, sampling, out)


## Sequential: multiple hues

def _sequential_multi_hue(n, uniform, lightness_range, saturation_range, saturation, hues, positions, sampling, out):
    lightness_range = value_or_default(lightness_range, defaults.SEQUENTIAL_MULTI_HUE_LIGHTNESS_RANGE)
    saturation_range = value_or_default(saturation_range, defaults.SEQUENTIAL_MULTI_HUE_SATURATION_RANGE)
    saturation = value_or_default(saturation, defaults.SEQUENTIAL_MULTI_HUE_SATURATION)
    hues = floats_or_default(hues, defaults.SEQUENTIAL_MULTI_HUE_HUES)
    positions = floats_or_default(positions, defaults.SEQUENTIAL_MULTI_HUE_POSITIONS)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    l0, l1 = lightness_span(lightness_range)
    s = saturation * RED_SATURATION
    s_end = (1.0 - saturation_range) * s
    start = capped_anchor(l0, s_end, hue_at(0.0, hues, positions))
    mid = capped_anchor(50.0, s, hue_at(0.5, hues, positions))
    end = capped_anchor(l1, s_end, hue_at(1.0, hues, positions))
    path = AnchoredPath(start, mid, end, uniform=uniform, multi_hue=True, hues=hues, positions=positions)
    return _render(path, n, sampling, out)


def pl_sequential_multi_hue(n: int, *, lightness_range: Optional[float] = None,
                            saturation_range: Optional[float] = None,
                            saturation: Optional[float] = None,
                            hues: Optional[Sequence[float]] = None,
                            positions: Optional[Sequence[float]] = None,
                            sampling: Optional[Sampling] = None,
                            out: Optional[NDArray] = None) -> Palette:
    """
    Dark to light through a sequence of hues.

    Args:
        hues: control point hues in radians, used unwrapped
        positions: sorted control point positions in [0, 1], one per hue
    """
    return _sequential_multi_hue(n, False, lightness_range, saturation_range, saturation, hues, positions, sampling, out)


def pu_sequential_multi_hue(n: int, *, lightness_range: Optional[float] = None,
                            saturation_range: Optional[float] = None,
                            saturation: Optional[float] = None,
                            hues: Optional[Sequence[float]] = None,
                            positions: Optional[Sequence[float]] = None,
                            sampling: Optional[Sampling] = None,
                            out: Optional[NDArray] = None) -> Palette:
    return _sequential_multi_hue(n, True, lightness_range, saturation_range, saturation, hues, positions, sampling, out)


## Diverging: lightness

def _diverging_lightness(n, uniform, lightness_range, saturation_range, saturation, hue, divergence, sampling, out):
    lightness_range = value_or_default(lightness_range, defaults.DIVERGING_LIGHTNESS_LIGHTNESS_RANGE)
    saturation_range = value_or_default(saturation_range, defaults.DIVERGING_LIGHTNESS_SATURATION_RANGE)
    saturation = value_or_default(saturation, defaults.DIVERGING_LIGHTNESS_SATURATION)
    hue = value_or_default(hue, defaults.DIVERGING_LIGHTNESS_HUE)
    divergence = value_or_default(divergence, defaults.DIVERGING_LIGHTNESS_DIVERGENCE)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    # Each half is a sequential lightness ramp; both end in their shared middle.
    ramps = [_lightness_ramp(h, lightness_range, saturation_range, saturation) for h in (hue, hue + divergence)]
    middle = shared_middle(ramps[0][2], ramps[1][2])
    paths = [
        AnchoredPath(start, mid, middle._replace(h=unwrap_toward(middle.h, mid.h)), uniform=uniform)
        for start, mid, _ in ramps
    ]
    return _render_diverging(paths[0], paths[1], n, sampling, out)


def pl_diverging_lightness(n: int, *, lightness_range: Optional[float] = None,
                           saturation_range: Optional[float] = None,
                           saturation: Optional[float] = None, hue: Optional[float] = None,
                           divergence: Optional[float] = None,
                           sampling: Optional[Sampling] = None,
                           out: Optional[NDArray] = None) -> Palette:
    """
    Two dark ends of hues ``hue`` and ``hue + divergence`` meeting at a
    light, nearly neutral middle.
    """
    return _diverging_lightness(n, False, lightness_range, saturation_range, saturation, hue, divergence, sampling, out)


def pu_diverging_lightness(n: int, *, lightness_range: Optional[float] = None,
                           saturation_range: Optional[float] = None,
                           saturation: Optional[float] = None, hue: Optional[float] = None,
                           divergence: Optional[float] = None,
                           sampling: Optional[Sampling] = None,
                           out: Optional[NDArray] = None) -> Palette:
    return _diverging_lightness(n, True, lightness_range, saturation_range, saturation, hue, divergence, sampling, out)


## Diverging: saturation

def _diverging_saturation(n, uniform, saturation_range, lightness, saturation, hue, divergence, sampling, out):
    saturation_range = value_or_default(saturation_range, defaults.DIVERGING_SATURATION_SATURATION_RANGE)
    lightness = value_or_default(lightness, defaults.DIVERGING_SATURATION_LIGHTNESS)
    saturation = value_or_default(saturation, defaults.DIVERGING_SATURATION_SATURATION)
    hue = value_or_default(hue, defaults.DIVERGING_SATURATION_HUE)
    divergence = value_or_default(divergence, defaults.DIVERGING_SATURATION_DIVERGENCE)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    l = lightness * 100.0
    s = saturation * RED_SATURATION
    # Both ends share the smaller of the two gamut caps so they look equally strong.
    outer_c = min(capped_anchor(l, s, hue).c, capped_anchor(l, s, hue + divergence).c)
    inner_c = (1.0 - saturation_range) * outer_c
    middle = shared_middle(LCH(l, inner_c, hue), LCH(l, inner_c, hue + divergence))

    paths = []
    for h in (hue, hue + divergence):
        start = LCH(l, outer_c, h)
        end = middle._replace(h=unwrap_toward(middle.h, h))
        mid = LCH(l, 0.5 * (start.c + end.c), 0.5 * (start.h + end.h))
        paths.append(AnchoredPath(start, mid, end, uniform=uniform))
    return _render_diverging(paths[0], paths[1], n, sampling, out)


def pl_diverging_saturation(n: int, *, saturation_range: Optional[float] = None,
                            lightness: Optional[float] = None,
                            saturation: Optional[float] = None, hue: Optional[float] = None,
                            divergence: Optional[float] = None,
                            sampling: Optional[Sampling] = None,
                            out: Optional[NDArray] = None) -> Palette:
    """Constant lightness; two saturated hues fading towards gray in the middle."""
    return _diverging_saturation(n, False, saturation_range, lightness, saturation, hue, divergence, sampling, out)


def pu_diverging_saturation(n: int, *, saturation_range: Optional[float] = None,
                            lightness: Optional[float] = None,
                            saturation: Optional[float] = None, hue: Optional[float] = None,
                            divergence: Optional[float] = None,
                            sampling: Optional[Sampling] = None,
                            out: Optional[NDArray] = None) -> Palette:
    return _diverging_saturation(n, True, saturation_range, lightness, saturation, hue, divergence, sampling, out)


## Qualitative: hue

def _qualitative_hue(n, uniform, hue, divergence, lightness, saturation, sampling, out):
    hue = value_or_default(hue, defaults.QUALITATIVE_HUE_HUE)
    divergence = value_or_default(divergence, defaults.QUALITATIVE_HUE_DIVERGENCE)
    lightness = value_or_default(lightness, defaults.QUALITATIVE_HUE_LIGHTNESS)
    saturation = value_or_default(saturation, defaults.QUALITATIVE_HUE_SATURATION)
    sampling = value_or_default(sampling, Sampling.CELL_CENTERED)

    l = lightness * 100.0
    s = saturation * RED_SATURATION
    hues = [hue + t * divergence for t in sample_positions(n, sampling)]
    caps = [min(s, max_saturation_at_lightness(l, h)) for h in hues]
    if uniform:
        # One chroma for all entries keeps neighbouring distances equal.
        caps = [min(caps)] * n
    rows = [lch_to_linear_rgb(LCH(l, chroma(l, max(cs, 0.0)), h)) for h, cs in zip(hues, caps)]
    return palette_from_linear_rgb(rows, n, out)


def pl_qualitative_hue(n: int, *, hue: Optional[float] = None, divergence: Optional[float] = None,
                       lightness: Optional[float] = None, saturation: Optional[float] = None,
                       sampling: Optional[Sampling] = None,
                       out: Optional[NDArray] = None) -> Palette:
    """
    Constant lightness, hues spread over ``divergence``; each hue keeps as
    much of the requested saturation as the gamut allows.
    """
    return _qualitative_hue(n, False, hue, divergence, lightness, saturation, sampling, out)


def pu_qualitative_hue(n: int, *, hue: Optional[float] = None, divergence: Optional[float] = None,
                       lightness: Optional[float] = None, saturation: Optional[float] = None,
                       sampling: Optional[Sampling] = None,
                       out: Optional[NDArray] = None) -> Palette:
    """As ``pl_qualitative_hue``, but all entries share one saturation."""
    return _qualitative_hue(n, True, hue, divergence, lightness, saturation, sampling, out)
