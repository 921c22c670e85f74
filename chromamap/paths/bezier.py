"""
Brewer-like sequential paths (Wijffelaars et al. 2008).

A path runs from black through the most saturated color of a hue towards a
bright, slightly warm end point. It is made of two quadratic Bezier segments
in CIELUV; a palette entry is found by choosing the desired lightness first
and then inverting the lightness component of the curve.
"""

import math
from dataclasses import dataclass

from ..types.triplets import LUV, LCH, mix, midpoint
from ..conversions import chroma, lch_to_luv, mix_hue
from ..gamut import (
    BRIGHT_POINT,
    BRIGHT_POINT_LCH,
    BRIGHT_POINT_SATURATION,
    max_saturation_at_lightness,
    most_saturated_in_gamut,
)

_DEGENERATE = 1e-12


def default_contrast_for_small_n(n: int) -> float:
    """Contrast used for discrete maps when the caller gives none."""
    return min(0.88, 0.34 + 0.06 * n)


def brightness_ramp(t: float, contrast: float, brightness: float) -> float:
    """Target lightness for path position ``t`` in [0, 1]."""
    return 125.0 - 125.0 * 0.2 ** ((1.0 - contrast) * brightness + t * contrast)


def bezier(b0: LUV, b1: LUV, b2: LUV, t: float) -> LUV:
    """Evaluate the quadratic Bezier curve through ``b0, b1, b2`` at ``t``."""
    a = (1.0 - t) * (1.0 - t)
    b = 2.0 * (1.0 - t) * t
    c = t * t
    return LUV(*(a * x + b * y + c * z for x, y, z in zip(b0, b1, b2)))


def inverse_bezier(b0: float, b1: float, b2: float, v: float) -> float:
    """
    Parameter at which the scalar quadratic Bezier ``b0, b1, b2`` reaches ``v``.

    A negative radicand is treated as zero, which picks the closest
    reachable parameter instead of failing.
    """
    denominator = b0 - 2.0 * b1 + b2
    if abs(denominator) < _DEGENERATE:
        # Straight segment: b(t) = b0 + 2t(b1 - b0)
        slope = 2.0 * (b1 - b0)
        return (v - b0) / slope if slope != 0.0 else 0.0
    radicand = max(b1 * b1 - b0 * b2 + denominator * v, 0.0)
    return (b0 - b1 + math.sqrt(radicand)) / denominator


@dataclass(frozen=True)
class BezierPath:
    """Control points of one Brewer-like path, all in CIELUV."""
    p0: LUV
    q0: LUV
    q1: LUV
    q2: LUV
    p2: LUV

    @classmethod
    def build(cls, hue: float, saturation: float, warmth: float) -> "BezierPath":
        """
        Construct the path for a hue.

        Args:
            hue: LCH hue in radians
            saturation: pull of the curve towards the most saturated color, [0, 1]
            warmth: how far the bright end moves towards yellow, [0, 1]
        """
        p0 = lch_to_luv(LCH(0.0, 0.0, hue))
        p1 = most_saturated_in_gamut(hue)

        p2_l = (1.0 - warmth) * 100.0 + warmth * BRIGHT_POINT.l
        p2_h = mix_hue(warmth, hue, BRIGHT_POINT_LCH.h)
        p2_s = min(max_saturation_at_lightness(p2_l, p2_h), warmth * saturation * BRIGHT_POINT_SATURATION)
        p2 = lch_to_luv(LCH(p2_l, chroma(p2_l, p2_s), p2_h))

        q0 = mix(p0, p1, saturation)
        q2 = mix(p2, p1, saturation)
        q1 = midpoint(q0, q2)
        return cls(p0, q0, q1, q2, p2)

    def parameter_for_lightness(self, l: float) -> float:
        """Curve parameter in [0, 1] over both segments whose lightness is ``l``."""
        if l <= self.q1.l:
            return 0.5 * inverse_bezier(self.p0.l, self.q0.l, self.q1.l, l)
        return 0.5 * inverse_bezier(self.q1.l, self.q2.l, self.p2.l, l) + 0.5

    def evaluate(self, T: float) -> LUV:
        if T <= 0.5:
            return bezier(self.p0, self.q0, self.q1, 2.0 * T)
        return bezier(self.q1, self.q2, self.p2, 2.0 * (T - 0.5))

    def sample(self, t: float, contrast: float, brightness: float) -> LUV:
        """Color at path position ``t``, following the brightness ramp."""
        return self.evaluate(self.parameter_for_lightness(brightness_ramp(t, contrast, brightness)))
