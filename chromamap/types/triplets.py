from __future__ import annotations
from typing import NamedTuple, TypeVar

# One immutable triplet type per color space. They are all plain 3-tuples at
# runtime, but the distinct types keep an LCH value from being handed to a
# function that expects XYZ.


class SRGB(NamedTuple):
    """Gamma-encoded sRGB, each channel in [0, 1]."""
    r: float
    g: float
    b: float


class LinearRGB(NamedTuple):
    """sRGB primaries without gamma encoding, each channel in [0, 1]."""
    r: float
    g: float
    b: float


class XYZ(NamedTuple):
    """CIE XYZ tristimulus values under D65, Y in [0, 100]."""
    x: float
    y: float
    z: float


class LUV(NamedTuple):
    """CIELUV, L in [0, 100]."""
    l: float
    u: float
    v: float


class LCH(NamedTuple):
    """Polar CIELUV: lightness, chroma and hue in radians."""
    l: float
    c: float
    h: float


class LAB(NamedTuple):
    """CIELAB, L in [0, 100]."""
    l: float
    a: float
    b: float


class MSH(NamedTuple):
    """Moreland's magnitude / saturation / hue space derived from CIELAB."""
    m: float
    s: float
    h: float


Triplet = TypeVar("Triplet", SRGB, LinearRGB, XYZ, LUV, LCH, LAB, MSH)


def mix(a: Triplet, b: Triplet, t: float) -> Triplet:
    """
    Component-wise linear blend ``(1 - t) * a + t * b``.

    Both operands must belong to the same color space; the result keeps
    that type.
    """
    if type(a) is not type(b):
        raise TypeError(f"cannot mix {type(a).__name__} with {type(b).__name__}")
    return type(a)(*((1.0 - t) * x + t * y for x, y in zip(a, b)))


def midpoint(a: Triplet, b: Triplet) -> Triplet:
    return mix(a, b, 0.5)
