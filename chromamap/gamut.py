"""
sRGB gamut boundary in CIELUV.

The six corners of the RGB cube with exactly one or two channels at 1
(red, yellow, green, cyan, blue, magenta) split the LCH hue circle into six
sectors. Inside a sector, the most saturated displayable color lies on one
cube edge: one channel is pinned to 0, one to 1, and the remaining one
follows from a single linear equation. This is the construction of
Wijffelaars et al., "Generating Color Palettes using Intuitive Parameters"
(EuroVis 2008).

All per-process constants are computed once at import time.
"""

import math
from bisect import bisect_right
from typing import Tuple

from boundednumbers.functions import clamp

from .types.triplets import SRGB, LinearRGB, LUV
from .conversions import (
    D65_U_PRIME,
    D65_V_PRIME,
    linear_rgb_to_xyz,
    linear_to_srgb,
    luv_saturation,
    luv_to_lch,
    normalize_hue,
    srgb_to_lch_hue,
    srgb_to_luv,
    xyz_to_luv,
)
from .conversions.xyz import M_LINEAR_RGB_TO_XYZ

CORNERS: Tuple[SRGB, ...] = (
    SRGB(1.0, 0.0, 0.0),  # red
    SRGB(1.0, 1.0, 0.0),  # yellow
    SRGB(0.0, 1.0, 0.0),  # green
    SRGB(0.0, 1.0, 1.0),  # cyan
    SRGB(0.0, 0.0, 1.0),  # blue
    SRGB(1.0, 0.0, 1.0),  # magenta
)

CORNER_HUES: Tuple[float, ...] = tuple(srgb_to_lch_hue(corner) for corner in CORNERS)

# (free, pinned to 0, pinned to 1) channel indices for each sector; the last
# sector wraps around 2pi and is the same edge as the first.
_SECTOR_CHANNELS: Tuple[Tuple[int, int, int], ...] = (
    (2, 1, 0),
    (1, 2, 0),
    (0, 2, 1),
    (2, 0, 1),
    (1, 0, 2),
    (0, 1, 2),
    (2, 1, 0),
)

# Pure yellow is the brightest saturated color and anchors the light end of
# Brewer paths.
BRIGHT_POINT: LUV = xyz_to_luv(linear_rgb_to_xyz(LinearRGB(1.0, 1.0, 0.0)))
BRIGHT_POINT_LCH = luv_to_lch(BRIGHT_POINT)
BRIGHT_POINT_SATURATION: float = luv_saturation(BRIGHT_POINT)

# Saturation of pure red, the most saturated sRGB primary.
RED_SATURATION: float = luv_saturation(xyz_to_luv(linear_rgb_to_xyz(LinearRGB(1.0, 0.0, 0.0))))


def hue_sector(hue: float) -> int:
    """Index of the sector that contains ``hue`` (0..6, where 6 wraps to 0)."""
    return bisect_right(CORNER_HUES, normalize_hue(hue))


def most_saturated_in_gamut(hue: float) -> LUV:
    """
    Most saturated displayable color with the given LCH hue.

    Args:
        hue: LCH hue in radians, any value (wrapped internally)

    Returns:
        LUV point on the surface of the sRGB cube
    """
    hue = normalize_hue(hue)
    i, j, k = _SECTOR_CHANNELS[hue_sector(hue)]
    m = M_LINEAR_RGB_TO_XYZ

    # Project the LCH -> LUV -> XYZ chain onto the hue direction: a color
    # has this hue when -sin(h) * u' + cos(h) * v' equals the white point's
    # value, which is linear in the free channel.
    alpha = -math.sin(hue)
    beta = math.cos(hue)
    t = alpha * D65_U_PRIME + beta * D65_V_PRIME
    q0 = t * (m[0, k] + 15.0 * m[1, k] + 3.0 * m[2, k]) - (4.0 * alpha * m[0, k] + 9.0 * beta * m[1, k])
    q1 = t * (m[0, i] + 15.0 * m[1, i] + 3.0 * m[2, i]) - (4.0 * alpha * m[0, i] + 9.0 * beta * m[1, i])

    srgb = [0.0, 0.0, 0.0]
    srgb[j] = 0.0
    srgb[k] = 1.0
    free = -q0 / q1 if q1 != 0.0 else 0.0
    srgb[i] = linear_to_srgb(float(clamp(free, 0.0, 1.0)))
    return srgb_to_luv(SRGB(*srgb))


def max_saturation_at_lightness(l: float, hue: float) -> float:
    """
    Largest saturation that stays (approximately) inside sRGB at lightness ``l``.

    Saturation is interpolated linearly between the boundary point for
    ``hue`` and black (for darker ``l``) or white (for lighter ``l``), both
    of which have zero saturation.
    """
    pmid = most_saturated_in_gamut(hue)
    pend_l = 100.0 if l > pmid.l else 0.0
    alpha = (pend_l - l) / (pend_l - pmid.l)
    pend_saturation = 0.0
    return alpha * (luv_saturation(pmid) - pend_saturation) + pend_saturation
