"""
Perceptually linear and perceptually uniform paths in LCH(uv).

A *linear* path interpolates lightness, saturation and hue linearly between
two LCH points. A *uniform* path also interpolates lightness and hue
linearly but solves for the chroma that puts the point at distance
``s * D`` from the first end and ``(1 - s) * D`` from the second, ``D``
being the distance between the ends. Equal parameter steps are then equal
steps in CIELUV.
"""

import math
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from ..types.triplets import LCH
from ..conversions import chroma, saturation

# Candidate chroma values may miss the admissible interval by rounding only.
CHROMA_TOLERANCE = 1e-6


def lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def lch_distance(a: LCH, b: LCH) -> float:
    """Euclidean CIELUV distance of two LCH points (law of cosines)."""
    dl = a.l - b.l
    squared = dl * dl + a.c * a.c + b.c * b.c - 2.0 * a.c * b.c * math.cos(a.h - b.h)
    return math.sqrt(max(squared, 0.0))


def multi_hue_distance(a: LCH, b: LCH) -> float:
    """
    Distance that treats hue as a numeric axis scaled by the mean chroma.

    Unlike ``lch_distance`` this keeps growing with the hue difference past
    half a turn, which is what maps with deliberately large hue sweeps need.
    """
    dl = a.l - b.l
    dc = a.c - b.c
    dh = 0.5 * (a.c + b.c) * (a.h - b.h)
    return math.sqrt(dl * dl + dc * dc + dh * dh)


def distance_function(multi_hue: bool) -> Callable[[LCH, LCH], float]:
    return multi_hue_distance if multi_hue else lch_distance


def chroma_candidates(anchor: LCH, l: float, h: float, r: float,
                      multi_hue: bool = False) -> Tuple[float, float]:
    """
    Both roots ``C`` of ``distance(anchor, (l, C, h)) == r``.

    The discriminant is clamped at zero: when no exact solution exists the
    double root closest to one is returned.
    """
    dl2 = (l - anchor.l) ** 2
    if not multi_hue:
        # C^2 - 2 Ca cos(dh) C + Ca^2 + dl^2 - r^2 = 0
        half_b = anchor.c * math.cos(h - anchor.h)
        disc = max(half_b * half_b - (anchor.c * anchor.c + dl2 - r * r), 0.0)
        root = math.sqrt(disc)
        return half_b - root, half_b + root

    # (C - Ca)^2 + k^2 (C + Ca)^2 = r^2 - dl^2 with k = dh / 2
    k2 = (0.5 * (h - anchor.h)) ** 2
    a = 1.0 + k2
    b = 2.0 * anchor.c * (k2 - 1.0)
    c = a * anchor.c * anchor.c - (r * r - dl2)
    disc = max(b * b - 4.0 * a * c, 0.0)
    root = math.sqrt(disc)
    return (-b - root) / (2.0 * a), (-b + root) / (2.0 * a)


def uniform_interpolate(lch0: LCH, lch1: LCH, s: float,
                        hue: Optional[float] = None,
                        multi_hue: bool = False) -> LCH:
    """
    Point at fraction ``s`` of the perceptual distance from ``lch0`` to ``lch1``.

    Args:
        lch0, lch1: end points
        s: fraction in [0, 1]
        hue: hue to use instead of the linear hue interpolation
        multi_hue: use ``multi_hue_distance`` instead of ``lch_distance``

    Returns:
        LCH point; its chroma is the candidate within the end points' chroma
        range that best matches both distance targets, or the mean chroma if
        no candidate is in range
    """
    distance = distance_function(multi_hue)
    l = lerp(lch0.l, lch1.l, s)
    h = lerp(lch0.h, lch1.h, s) if hue is None else hue

    total = distance(lch0, lch1)
    r0 = s * total
    r1 = (1.0 - s) * total
    candidates = chroma_candidates(lch0, l, h, r0, multi_hue) + chroma_candidates(lch1, l, h, r1, multi_hue)

    lo, hi = min(lch0.c, lch1.c), max(lch0.c, lch1.c)
    best_c = None
    best_error = math.inf
    for c in candidates:
        if not lo - CHROMA_TOLERANCE <= c <= hi + CHROMA_TOLERANCE:
            continue
        c = min(max(c, lo), hi)
        p = LCH(l, c, h)
        error = abs(distance(lch0, p) - r0) + abs(distance(lch1, p) - r1)
        if error < best_error:
            best_c, best_error = c, error

    if best_c is None:
        best_c = 0.5 * (lch0.c + lch1.c)
    return LCH(l, best_c, h)


def linear_interpolate(lch0: LCH, lch1: LCH, s: float, hue: Optional[float] = None) -> LCH:
    """Linear interpolation of lightness, saturation and hue."""
    l = lerp(lch0.l, lch1.l, s)
    sat = lerp(saturation(lch0.l, lch0.c), saturation(lch1.l, lch1.c), s)
    h = lerp(lch0.h, lch1.h, s) if hue is None else hue
    return LCH(l, chroma(l, sat), h)


def hue_at(t: float, hues: Sequence[float], positions: Sequence[float]) -> float:
    """Piecewise-linear hue over sorted control points, constant past the ends."""
    return float(np.interp(t, positions, hues))


@dataclass(frozen=True)
class AnchoredPath:
    """
    Two-piece path ``start -> mid -> end`` in LCH.

    The parameter is split at 0.5 so ``mid`` sits at the centre of the map.
    With ``proportional=True`` a uniform path instead splits at
    ``D0 / (D0 + D1)``, which keeps the arc length linear over the whole
    path. When control point ``hues`` are given they override the
    interpolated hue everywhere.
    """
    start: LCH
    mid: LCH
    end: LCH
    uniform: bool = True
    multi_hue: bool = False
    hues: Optional[Tuple[float, ...]] = None
    positions: Optional[Tuple[float, ...]] = None
    proportional: bool = False

    @cached_property
    def split(self) -> float:
        if not (self.uniform and self.proportional):
            return 0.5
        distance = distance_function(self.multi_hue)
        d0 = distance(self.start, self.mid)
        d1 = distance(self.mid, self.end)
        total = d0 + d1
        return d0 / total if total > 0.0 else 0.5

    @cached_property
    def length(self) -> float:
        distance = distance_function(self.multi_hue)
        return distance(self.start, self.mid) + distance(self.mid, self.end)

    def evaluate(self, t: float) -> LCH:
        split = self.split
        if t <= split and split > 0.0:
            a, b, s = self.start, self.mid, t / split
        elif split < 1.0:
            a, b, s = self.mid, self.end, (t - split) / (1.0 - split)
        else:
            a, b, s = self.start, self.mid, 1.0

        hue = hue_at(t, self.hues, self.positions) if self.hues is not None else None
        if self.uniform:
            return uniform_interpolate(a, b, s, hue, self.multi_hue)
        return linear_interpolate(a, b, s, hue)
