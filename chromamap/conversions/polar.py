import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp, cyclic_wrap_float

from ..types.triplets import LUV, LCH, LAB, MSH

PI = math.pi
TWO_PI = 2.0 * math.pi

SATURATION_EPSILON = 1e-8
MSH_EPSILON = 1e-3


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 2pi) range."""
    return float(cyclic_wrap_float(h, 0.0, TWO_PI))


def hue_diff(h0: float, h1: float) -> float:
    """Absolute angular distance between two hues, folded into [0, pi]."""
    t = abs(h1 - h0)
    return t if t < PI else TWO_PI - t


def mix_hue(alpha: float, h0: float, h1: float) -> float:
    """Blend from ``h0`` towards ``h1`` by ``alpha`` along the shorter arc."""
    m = normalize_hue(PI + h1 - h0) - PI
    return normalize_hue(h0 + alpha * m)


## LUV <-> LCH

def luv_to_lch(luv: LUV) -> LCH:
    h = math.atan2(luv.v, luv.u)
    if h < 0.0:
        h += TWO_PI
    return LCH(luv.l, math.hypot(luv.u, luv.v), h)


def lch_to_luv(lch: LCH) -> LUV:
    return LUV(lch.l, lch.c * math.cos(lch.h), lch.c * math.sin(lch.h))


def saturation(l: float, c: float) -> float:
    return c / max(l, SATURATION_EPSILON)


def chroma(l: float, s: float) -> float:
    return s * l


def luv_saturation(luv: LUV) -> float:
    return saturation(luv.l, math.hypot(luv.u, luv.v))


## LAB <-> MSH

def lab_to_msh(lab: LAB) -> MSH:
    """
    Convert CIELAB to Moreland's MSH space.

    M is the Euclidean length of the LAB vector. Near black the saturation
    angle is undefined and reported as 0; likewise the hue of an
    unsaturated color is reported as 0.
    """
    m = math.sqrt(lab.l * lab.l + lab.a * lab.a + lab.b * lab.b)
    s = math.acos(clamp(lab.l / m, -1.0, 1.0)) if m > MSH_EPSILON else 0.0
    h = math.atan2(lab.b, lab.a) if s > MSH_EPSILON else 0.0
    return MSH(m, float(s), h)


def msh_to_lab(msh: MSH) -> LAB:
    return LAB(
        msh.m * math.cos(msh.s),
        msh.m * math.sin(msh.s) * math.cos(msh.h),
        msh.m * math.sin(msh.s) * math.sin(msh.h),
    )


def np_lab_to_msh(lab: NDArray) -> NDArray:
    """Vectorized: LAB of shape (..., 3) to MSH of shape (..., 3)."""
    lab = np.asarray(lab, dtype=float)
    l, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    m = np.sqrt(l * l + a * a + b * b)
    safe_m = np.where(m > MSH_EPSILON, m, 1.0)
    s = np.where(m > MSH_EPSILON, np.arccos(np.clip(l / safe_m, -1.0, 1.0)), 0.0)
    h = np.where(s > MSH_EPSILON, np.arctan2(b, a), 0.0)
    return np.stack([m, s, h], axis=-1)


def np_msh_to_lab(msh: NDArray) -> NDArray:
    """Vectorized: MSH of shape (..., 3) to LAB of shape (..., 3)."""
    msh = np.asarray(msh, dtype=float)
    m, s, h = msh[..., 0], msh[..., 1], msh[..., 2]
    return np.stack([
        m * np.cos(s),
        m * np.sin(s) * np.cos(h),
        m * np.sin(s) * np.sin(h),
    ], axis=-1)
