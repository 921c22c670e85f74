"""
Palette drivers.

Each driver takes the number of entries ``n`` and keyword-only method
parameters; any parameter left at ``None`` takes the published default
from ``chromamap.defaults``. Every driver returns a ``Palette`` holding an
``(n, 3)`` uint8 array of sRGB bytes and the number of clipped entries.
"""

from .output import Palette, CLIP_TOLERANCE, prepare_output
from .brewer import brewer_sequential, brewer_diverging, brewer_qualitative
from .isoluminant import isoluminant_sequential, isoluminant_diverging, isoluminant_qualitative
from .cubehelix import cubehelix
from .moreland import moreland
from .mcnames import mcnames
from .perceptual import (
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

__all__ = [
    "Palette",
    "CLIP_TOLERANCE",
    "prepare_output",
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
]
