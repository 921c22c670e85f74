"""
Color map test image (P. Kovesi, "Good Colour Maps: How to Design Them",
arXiv:1509.03700).

A ramp from 0 to 1 left to right with a sine modulation whose amplitude
shrinks from the top row to zero at the bottom row. Perceptual flat spots
and bands in a color map show up as fading or exaggerated ripples.
"""

from typing import Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 128
MODULATION_AMPLITUDE = 0.05


def test_pattern_values(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> NDArray:
    """
    Scalar test image.

    Returns:
        float array of shape (height, width); the bottom row is the plain ramp
    """
    u = np.linspace(0.0, 1.0, width)
    v = 1.0 - np.linspace(0.0, 1.0, height) if height > 1 else np.ones(1)
    modulation = MODULATION_AMPLITUDE * np.sin(width // 8 * 2.0 * np.pi * u)
    return u[np.newaxis, :] + (v * v)[:, np.newaxis] * modulation[np.newaxis, :]


def apply_colormap(values: Union[float, NDArray], colors: NDArray) -> NDArray:
    """
    Look up each value in [0, 1] in a color map by nearest index.

    Returns:
        uint8 array of shape ``values.shape + (3,)``
    """
    table = np.asarray(colors, dtype=np.uint8).reshape(-1, 3)
    n = len(table)
    index = np.floor(np.asarray(values, dtype=float) * (n - 1) + 0.5).astype(np.int64)
    return table[np.clip(index, 0, n - 1)]


def render_test_pattern(colors: NDArray, width: int = DEFAULT_WIDTH,
                        height: int = DEFAULT_HEIGHT) -> Image.Image:
    """The test image with a color map applied, as an RGB image."""
    return Image.fromarray(apply_colormap(test_pattern_values(width, height), colors))

