"""
CubeHelix (D. A. Green, "A colour scheme for the display of astronomical
intensity images", Bull. Astr. Soc. India 39, 2011).

A helix around the gray diagonal of the RGB cube, brightness rising
monotonically. The helix is defined directly on display values.
"""

import math
from typing import Optional

from numpy import ndarray as NDArray

from ..types.sampling import Sampling
from ..conversions import TWO_PI
from ..utils import value_or_default
from .. import defaults
from .output import Palette, palette_from_srgb, sample_positions


def cubehelix(
    n: int,
    *,
    hue: Optional[float] = None,
    rotations: Optional[float] = None,
    saturation: Optional[float] = None,
    gamma: Optional[float] = None,
    sampling: Optional[Sampling] = None,
    out: Optional[NDArray] = None,
) -> Palette:
    """
    Generate a CubeHelix map.

    Args:
        n: number of entries, at least 2
        hue: start hue in radians
        rotations: number of turns around the gray axis (sign gives direction)
        saturation: amplitude of the helix
        gamma: exponent applied to the brightness ramp, negative values
            are treated as 0
        sampling: position strategy, endpoints by default so the map runs
            from exact black to exact white

    Returns:
        Palette; ``clipped`` counts entries where the helix left the cube
    """
    hue = value_or_default(hue, defaults.CUBEHELIX_HUE)
    rotations = value_or_default(rotations, defaults.CUBEHELIX_ROTATIONS)
    saturation = value_or_default(saturation, defaults.CUBEHELIX_SATURATION)
    # negative exponents would blow up at fract == 0
    gamma = max(value_or_default(gamma, defaults.CUBEHELIX_GAMMA), 0.0)
    sampling = value_or_default(sampling, Sampling.ENDPOINTS)

    rows = []
    for fract in sample_positions(n, sampling):
        angle = TWO_PI * (hue / 3.0 + 1.0 + rotations * fract)
        fract = fract ** gamma
        amp = saturation * fract * (1.0 - fract) / 2.0
        s = math.sin(angle)
        c = math.cos(angle)
        rows.append((
            fract + amp * (-0.14861 * c + 1.78277 * s),
            fract + amp * (-0.29227 * c - 0.90649 * s),
            fract + amp * (1.97294 * c),
        ))
    return palette_from_srgb(rows, n, out)
