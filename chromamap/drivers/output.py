"""
Palette buffers and quantization.

Drivers compute colors as floating point rows and hand them here to be
checked against the sRGB cube, clamped, gamma-encoded and rounded to bytes.
"""

from typing import Iterable, List, NamedTuple, Optional, Sequence

import numpy as np
from numpy import ndarray as NDArray

from ..types.sampling import Sampling, sample_position, BYTE_MAX
from ..conversions import np_linear_to_srgb

# Channels may leave [0, 1] by this much through float noise without
# counting as clipped.
CLIP_TOLERANCE = 1e-6


class Palette(NamedTuple):
    """
    A generated color map.

    ``colors`` is a uint8 array of shape (n, 3), one sRGB byte triple per
    entry; ``clipped`` counts the entries that had to be clamped into the
    sRGB cube.
    """
    colors: NDArray
    clipped: int


def prepare_output(n: int, out: Optional[NDArray] = None) -> NDArray:
    """
    Return an ``(n, 3)`` uint8 view to write the palette into.

    Args:
        n: number of entries
        out: optional caller buffer with ``3 * n`` uint8 elements

    Raises:
        TypeError: ``out`` is not a uint8 array
        ValueError: ``out`` has the wrong size or cannot be viewed as (n, 3)
    """
    if out is None:
        return np.zeros((n, 3), dtype=np.uint8)
    if not isinstance(out, np.ndarray) or out.dtype != np.uint8:
        raise TypeError(f"out must be a uint8 numpy array, got {getattr(out, 'dtype', type(out))}")
    if out.size != 3 * n:
        raise ValueError(f"out must hold {3 * n} values for n={n}, got {out.size}")
    view = out.reshape(n, 3)
    if not np.shares_memory(view, out):
        raise ValueError("out must be contiguous so it can be filled in place")
    return view


def sample_positions(n: int, sampling: Sampling) -> List[float]:
    return [sample_position(i, n, sampling) for i in range(n)]


def count_clipped(rows: NDArray) -> int:
    """Number of rows with a channel outside [0, 1] beyond the tolerance."""
    outside = (rows < -CLIP_TOLERANCE) | (rows > 1.0 + CLIP_TOLERANCE)
    return int(np.count_nonzero(outside.any(axis=-1)))


def to_bytes(srgb: NDArray) -> NDArray:
    """Round sRGB values in [0, 1] half-up to bytes."""
    return np.floor(np.clip(srgb, 0.0, 1.0) * BYTE_MAX + 0.5).astype(np.uint8)


def palette_from_srgb(rows: Iterable[Sequence[float]], n: int,
                      out: Optional[NDArray] = None) -> Palette:
    """Build a palette from display (gamma-encoded) values."""
    buffer = prepare_output(n, out)
    srgb = np.asarray(list(rows), dtype=float).reshape(n, 3)
    clipped = count_clipped(srgb)
    buffer[...] = to_bytes(srgb)
    return Palette(buffer, clipped)


def palette_from_linear_rgb(rows: Iterable[Sequence[float]], n: int,
                            out: Optional[NDArray] = None) -> Palette:
    """Build a palette from unclamped linear RGB values."""
    buffer = prepare_output(n, out)
    rgb = np.asarray(list(rows), dtype=float).reshape(n, 3)
    clipped = count_clipped(rgb)
    buffer[...] = to_bytes(np_linear_to_srgb(np.clip(rgb, 0.0, 1.0)))
    return Palette(buffer, clipped)
