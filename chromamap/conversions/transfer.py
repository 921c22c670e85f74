import numpy as np
from numpy import ndarray as NDArray

from ..types.triplets import SRGB, LinearRGB

# Piecewise sRGB transfer curve (IEC 61966-2-1). None of these functions
# clamp: out-of-range input goes through the formula unchanged.

SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_GAMMA = 2.4


def srgb_to_linear(x: float) -> float:
    """Decode one gamma-encoded sRGB channel."""
    if x <= SRGB_DECODE_THRESHOLD:
        return x / 12.92
    return ((x + 0.055) / 1.055) ** SRGB_GAMMA


def linear_to_srgb(x: float) -> float:
    """Gamma-encode one linear RGB channel."""
    if x <= SRGB_ENCODE_THRESHOLD:
        return x * 12.92
    return 1.055 * x ** (1.0 / SRGB_GAMMA) - 0.055


def srgb_to_linear_rgb(srgb: SRGB) -> LinearRGB:
    return LinearRGB(srgb_to_linear(srgb.r), srgb_to_linear(srgb.g), srgb_to_linear(srgb.b))


def linear_rgb_to_srgb(rgb: LinearRGB) -> SRGB:
    return SRGB(linear_to_srgb(rgb.r), linear_to_srgb(rgb.g), linear_to_srgb(rgb.b))


def np_srgb_to_linear(x: NDArray) -> NDArray:
    """
    Vectorized: decode gamma-encoded sRGB values.

    Args:
        x: array-like of any shape

    Returns:
        array of the same shape with linear values
    """
    x = np.asarray(x, dtype=float)
    # The power branch is evaluated everywhere; keep its base non-negative.
    high = ((np.maximum(x, SRGB_DECODE_THRESHOLD) + 0.055) / 1.055) ** SRGB_GAMMA
    return np.where(x <= SRGB_DECODE_THRESHOLD, x / 12.92, high)


def np_linear_to_srgb(x: NDArray) -> NDArray:
    """
    Vectorized: gamma-encode linear RGB values.

    Args:
        x: array-like of any shape

    Returns:
        array of the same shape with encoded values
    """
    x = np.asarray(x, dtype=float)
    high = 1.055 * np.maximum(x, SRGB_ENCODE_THRESHOLD) ** (1.0 / SRGB_GAMMA) - 0.055
    return np.where(x <= SRGB_ENCODE_THRESHOLD, x * 12.92, high)
