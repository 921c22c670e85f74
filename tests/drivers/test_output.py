"""Tests for palette buffers, quantization and clip counting."""
import numpy as np
import pytest

from chromamap.drivers.output import (
    CLIP_TOLERANCE,
    Palette,
    count_clipped,
    palette_from_linear_rgb,
    palette_from_srgb,
    prepare_output,
    sample_positions,
    to_bytes,
)
from chromamap.types import Sampling


def test_prepare_output_allocates():
    buffer = prepare_output(4)
    assert buffer.shape == (4, 3)
    assert buffer.dtype == np.uint8


def test_prepare_output_uses_caller_buffer():
    out = np.zeros(12, dtype=np.uint8)
    view = prepare_output(4, out)
    view[1, 2] = 7
    assert out[5] == 7


def test_prepare_output_rejects_wrong_type():
    with pytest.raises(TypeError):
        prepare_output(2, np.zeros(6, dtype=np.float64))
    with pytest.raises(TypeError):
        prepare_output(2, [0] * 6)


def test_prepare_output_rejects_wrong_size():
    with pytest.raises(ValueError):
        prepare_output(3, np.zeros(6, dtype=np.uint8))


def test_prepare_output_fills_strided_buffer_in_place():
    out = np.zeros(12, dtype=np.uint8)[::2]
    view = prepare_output(2, out)
    view[1, 0] = 9
    assert out[3] == 9


def test_prepare_output_rejects_buffer_needing_copy():
    out = np.zeros((3, 4), dtype=np.uint8)[:, :2]
    with pytest.raises(ValueError):
        prepare_output(2, out)


def test_to_bytes_rounds_half_up():
    values = np.array([0.0, 1.0, 0.6 / 255.0, 127.6 / 255.0, 127.4 / 255.0, -0.2, 1.3])
    assert to_bytes(values).tolist() == [0, 255, 1, 128, 127, 0, 255]


def test_count_clipped_tolerance():
    rows = np.array([
        [0.5, 0.5, 0.5],
        [1.0 + CLIP_TOLERANCE / 2.0, 0.0, -CLIP_TOLERANCE / 2.0],
        [1.1, 0.0, 0.0],
        [-0.1, 2.0, 0.0],
    ])
    assert count_clipped(rows) == 2


def test_sample_positions():
    assert sample_positions(2, Sampling.ENDPOINTS) == [0.0, 1.0]
    assert sample_positions(2, Sampling.CELL_CENTERED) == [0.25, 0.75]


def test_palette_from_srgb():
    palette = palette_from_srgb([(0.0, 0.5, 1.0), (1.2, 0.0, 0.0)], 2)
    assert isinstance(palette, Palette)
    assert palette.clipped == 1
    assert palette.colors.tolist() == [[0, 128, 255], [255, 0, 0]]


def test_palette_from_linear_rgb_encodes_gamma():
    palette = palette_from_linear_rgb([(0.0, 0.216, 1.0), (0.5, -0.5, 0.0)], 2)
    assert palette.clipped == 1
    assert palette.colors[0].tolist() == [0, 128, 255]
    assert palette.colors[1, 1] == 0


def test_palette_writes_into_out():
    out = np.full(6, 9, dtype=np.uint8)
    palette = palette_from_srgb([(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)], 2, out)
    assert out.tolist() == [0, 0, 0, 255, 255, 255]
    assert np.shares_memory(palette.colors, out)
