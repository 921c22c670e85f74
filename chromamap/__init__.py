"""
Chromamap - Perceptual Color Map Generation
===========================================

Generates color maps for scientific visualization from a handful of
intuitive parameters: Brewer-like, isoluminant, CubeHelix, Moreland,
McNames and perceptually linear / uniform maps built in CIELUV.

Quick Start
-----------
>>> from chromamap import generate
>>> palette = generate("pu-sequential-lightness", 256)
>>> palette.colors.shape
(256, 3)

Every method is also available as a plain function:

>>> from chromamap import brewer_diverging
>>> import math
>>> palette = brewer_diverging(9, hue=math.radians(240))
"""

__version__ = "0.3.0"

from .types import SRGB, LinearRGB, XYZ, LUV, LCH, LAB, MSH, Sampling
from .conversions import convert
from .drivers import (
    Palette,
    brewer_sequential,
    brewer_diverging,
    brewer_qualitative,
    isoluminant_sequential,
    isoluminant_diverging,
    isoluminant_qualitative,
    cubehelix,
    moreland,
    mcnames,
    pl_sequential_lightness,
    pu_sequential_lightness,
    pl_sequential_saturation,
    pu_sequential_saturation,
    pl_sequential_rainbow,
    pu_sequential_rainbow,
    pl_sequential_black_body,
    pu_sequential_black_body,
    pl_sequential_multi_hue,
    pu_sequential_multi_hue,
    pl_diverging_lightness,
    pu_diverging_lightness,
    pl_diverging_saturation,
    pu_diverging_saturation,
    pl_qualitative_hue,
    pu_qualitative_hue,
)
from .registry import METHODS, MethodInfo, generate
from .export import to_csv, to_json, to_ppm, to_png, export
from .testpattern import render_test_pattern

__all__ = [
    # color types
    "SRGB",
    "LinearRGB",
    "XYZ",
    "LUV",
    "LCH",
    "LAB",
    "MSH",
    "Sampling",
    "convert",

    # palettes
    "Palette",
    "METHODS",
    "MethodInfo",
    "generate",
    "brewer_sequential",
    "brewer_diverging",
    "brewer_qualitative",
    "isoluminant_sequential",
    "isoluminant_diverging",
    "isoluminant_qualitative",
    "cubehelix",
    "moreland",
    "mcnames",
    "pl_sequential_lightness",
    "pu_sequential_lightness",
    "pl_sequential_saturation",
    "pu_sequential_saturation",
    "pl_sequential_rainbow",
    "pu_sequential_rainbow",
    "pl_sequential_black_body",
    "pu_sequential_black_body",
    "pl_sequential_multi_hue",
    "pu_sequential_multi_hue",
    "pl_diverging_lightness",
    "pu_diverging_lightness",
    "pl_diverging_saturation",
    "pu_diverging_saturation",
    "pl_qualitative_hue",
    "pu_qualitative_hue",

    # output
    "to_csv",
    "to_json",
    "to_ppm",
    "to_png",
    "export",
    "render_test_pattern",
]
