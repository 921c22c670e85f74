"""
Moreland diverging maps (K. Moreland, "Diverging Color Maps for Scientific
Visualization", ISVC 2009).

Interpolation runs in MSH, the polar form of CIELAB. When both end colors
are saturated and their hues differ enough, the path passes through an
unsaturated white in the middle.
"""

import logging
import math
from typing import Optional, Sequence

from numpy import ndarray as NDArray

from ..types.sampling import Sampling, BYTE_MAX
from ..types.triplets import MSH, SRGB, mix
from ..conversions import PI, hue_diff, lab_to_linear_rgb, lab_to_msh, msh_to_lab, srgb_to_lab
from ..utils import value_or_default
from .. import defaults
from .output import Palette, palette_from_linear_rgb, sample_positions

logger = logging.getLogger(__name__)

# An MSH color below this saturation counts as unsaturated.
SATURATION_THRESHOLD = 0.05
# Lower bound for the magnitude of the white middle.
MIDDLE_MAGNITUDE = 88.0


def adjust_hue(msh: MSH, unsaturated_m: float) -> float:
    """
    Hue to give an unsaturated end so the blend from ``msh`` does not
    swing through unrelated hues.
    """
    if msh.m >= unsaturated_m - 0.1:
        return msh.h
    hue_spin = msh.s * math.sqrt(unsaturated_m * unsaturated_m - msh.m * msh.m) / (msh.m * math.sin(msh.s))
    if msh.h > -PI / 3.0:
        return msh.h + hue_spin
    return msh.h - hue_spin


def _bytes_to_msh(color: Sequence[int]) -> MSH:
    return lab_to_msh(srgb_to_lab(SRGB(*(c / BYTE_MAX for c in color))))


def moreland(
    n: int,
    *,
    color0: Optional[Sequence[int]] = None,
    color1: Optional[Sequence[int]] = None,
    sampling: Optional[Sampling] = None,
    out: Optional[NDArray] = None,
) -> Palette:
    """
    Generate a Moreland diverging map between two sRGB byte triples.

    Sampling defaults to endpoints, so the first and last entries reproduce
    ``color0`` and ``color1``.
    """
    color0 = value_or_default(color0, defaults.MORELAND_COLOR0)
    color1 = value_or_default(color1, defaults.MORELAND_COLOR1)
    sampling = value_or_default(sampling, Sampling.ENDPOINTS)

    omsh0 = _bytes_to_msh(color0)
    omsh1 = _bytes_to_msh(color1)
    place_white = (
        omsh0.s >= SATURATION_THRESHOLD
        and omsh1.s >= SATURATION_THRESHOLD
        and hue_diff(omsh0.h, omsh1.h) > PI / 3.0
    )
    mmid = max(omsh0.m, omsh1.m, MIDDLE_MAGNITUDE)
    logger.debug("moreland: place_white=%s, mmid=%.3f", place_white, mmid)

    rows = []
    for t in sample_positions(n, sampling):
        msh0, msh1 = omsh0, omsh1
        if place_white:
            if t < 0.5:
                msh1 = MSH(mmid, 0.0, 0.0)
                t *= 2.0
            else:
                msh0 = MSH(mmid, 0.0, 0.0)
                t = 2.0 * t - 1.0
        if msh0.s < SATURATION_THRESHOLD <= msh1.s:
            msh0 = msh0._replace(h=adjust_hue(msh1, msh0.m))
        elif msh1.s < SATURATION_THRESHOLD <= msh0.s:
            msh1 = msh1._replace(h=adjust_hue(msh0, msh1.m))
        rows.append(lab_to_linear_rgb(msh_to_lab(mix(msh0, msh1, t))))
    return palette_from_linear_rgb(rows, n, out)
