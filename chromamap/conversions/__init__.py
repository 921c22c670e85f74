"""
Chromamap Color Space Conversions
=================================

Scalar and vectorized (numpy) conversions between the color spaces the
palette engine works in. All hues are radians, all lightness values are in
[0, 100], RGB channels are in [0, 1]. D65 white everywhere.

Spaces
------
sRGB          gamma-encoded display values
linear RGB    sRGB primaries without gamma, hub for XYZ
XYZ           CIE 1931 tristimulus values, Y of white = 100
LUV / LCH     CIELUV and its polar form (lightness, chroma, hue)
LAB / MSH     CIELAB and Moreland's magnitude / saturation / hue space

Conversion Functions
--------------------

sRGB <-> linear RGB:
    srgb_to_linear(x), linear_to_srgb(x)
        Single channel, piecewise gamma, no clamping
    srgb_to_linear_rgb(srgb), linear_rgb_to_srgb(rgb)
    np_srgb_to_linear(x), np_linear_to_srgb(x)

linear RGB <-> XYZ:
    linear_rgb_to_xyz(rgb), xyz_to_linear_rgb(xyz, clamped=False)
    np_linear_rgb_to_xyz(rgb), np_xyz_to_linear_rgb(xyz, clamped=False)

XYZ <-> LUV, XYZ <-> LAB:
    xyz_to_luv, luv_to_xyz, xyz_to_lab, lab_to_xyz
    np_xyz_to_luv, np_luv_to_xyz, np_xyz_to_lab, np_lab_to_xyz

Polar spaces:
    luv_to_lch, lch_to_luv, lab_to_msh, msh_to_lab
    np_lab_to_msh, np_msh_to_lab

Helpers:
    saturation(l, c), chroma(l, s), luv_saturation(luv)
    hue_diff(h0, h1), normalize_hue(h), mix_hue(alpha, h0, h1)

High-Level API
--------------
    convert(color, from_space, to_space)

Examples
--------
>>> from chromamap.conversions import convert
>>> l, c, h = convert((1.0, 1.0, 0.0), "srgb", "lch")
"""

from .transfer import (
    srgb_to_linear,
    linear_to_srgb,
    srgb_to_linear_rgb,
    linear_rgb_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)

from .xyz import (
    D65,
    D65_U_PRIME,
    D65_V_PRIME,
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    np_linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
    xyz_to_luv,
    luv_to_xyz,
    np_xyz_to_luv,
    np_luv_to_xyz,
    xyz_to_lab,
    lab_to_xyz,
    np_xyz_to_lab,
    np_lab_to_xyz,
)

from .polar import (
    PI,
    TWO_PI,
    luv_to_lch,
    lch_to_luv,
    lab_to_msh,
    msh_to_lab,
    np_lab_to_msh,
    np_msh_to_lab,
    saturation,
    chroma,
    luv_saturation,
    hue_diff,
    normalize_hue,
    mix_hue,
)

from .wrapper import (
    convert,
    ColorSpace,
    srgb_to_luv,
    srgb_to_lab,
    srgb_to_lch_hue,
    luv_to_linear_rgb,
    lch_to_linear_rgb,
    lab_to_linear_rgb,
)

__all__ = [
    # sRGB <-> linear RGB
    'srgb_to_linear',
    'linear_to_srgb',
    'srgb_to_linear_rgb',
    'linear_rgb_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # XYZ family
    'D65',
    'D65_U_PRIME',
    'D65_V_PRIME',
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'np_linear_rgb_to_xyz',
    'np_xyz_to_linear_rgb',
    'xyz_to_luv',
    'luv_to_xyz',
    'np_xyz_to_luv',
    'np_luv_to_xyz',
    'xyz_to_lab',
    'lab_to_xyz',
    'np_xyz_to_lab',
    'np_lab_to_xyz',

    # Polar spaces
    'PI',
    'TWO_PI',
    'luv_to_lch',
    'lch_to_luv',
    'lab_to_msh',
    'msh_to_lab',
    'np_lab_to_msh',
    'np_msh_to_lab',
    'saturation',
    'chroma',
    'luv_saturation',
    'hue_diff',
    'normalize_hue',
    'mix_hue',

    # High-level API
    'convert',
    'ColorSpace',
    'srgb_to_luv',
    'srgb_to_lab',
    'srgb_to_lch_hue',
    'luv_to_linear_rgb',
    'lch_to_linear_rgb',
    'lab_to_linear_rgb',
]
