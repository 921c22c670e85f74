"""
McNames maps (J. McNames, "An Effective Color Scale for Simultaneous
Color and Gray-Scale Publications", IEEE Signal Processing Magazine 2006).

A spiral around the gray diagonal of the RGB cube whose radius is shaped
by a window that vanishes at black and white. The spiral is built along
the red axis and then rotated onto the diagonal.
"""

import math
from typing import Optional, Tuple

from numpy import ndarray as NDArray

from ..types.sampling import Sampling
from ..conversions import PI, TWO_PI
from ..utils import value_or_default
from .. import defaults
from .output import Palette, palette_from_srgb, sample_positions

SQRT3 = math.sqrt(3.0)
# Rotations taking the red axis onto the gray diagonal.
A12 = math.asin(1.0 / SQRT3)
A23 = PI / 4.0

_WINDOW_SCALE = 0.95 * math.sqrt(3.0 / 8.0)
_ACOSH2 = math.acosh(2.0)


def window(t: float) -> float:
    """cosh-shaped radius window, zero at t = 0 and t = 1."""
    return _WINDOW_SCALE * (2.0 - math.cosh(_ACOSH2 * (2.0 * t - 1.0)))


def _rotate(x: float, y: float, angle: float) -> Tuple[float, float]:
    theta = math.atan2(y, x) + angle
    rho = math.hypot(x, y)
    return rho * math.cos(theta), rho * math.sin(theta)


def mcnames(
    n: int,
    *,
    periods: Optional[float] = None,
    sampling: Optional[Sampling] = None,
    out: Optional[NDArray] = None,
) -> Palette:
    """
    Generate a McNames map.

    Args:
        n: number of entries, at least 2
        periods: number of spiral turns between black and white
        sampling: position strategy, endpoints by default
        out: optional uint8 buffer with 3n elements, filled in place
    """
    periods = value_or_default(periods, defaults.MCNAMES_PERIODS)
    sampling = value_or_default(sampling, Sampling.ENDPOINTS)

    rows = []
    for position in sample_positions(n, sampling):
        t = 1.0 - position
        w = window(t)
        tt = (1.0 - t) * SQRT3
        ttt = (tt - SQRT3 / 2.0) * periods * TWO_PI / SQRT3

        r1, g1 = _rotate(tt, w * math.cos(ttt), A12)
        b1 = w * math.sin(ttt)
        r2, b2 = _rotate(r1, b1, A23)
        rows.append((r2, g1, b2))
    return palette_from_srgb(rows, n, out)
