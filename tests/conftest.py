import sys
import os

import numpy as np
import pytest

# Add the project root to sys.path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def rng():
    """Seeded generator so random sweeps are reproducible."""
    return np.random.default_rng(20151027)


@pytest.fixture
def random_srgb(rng):
    """10 000 sRGB colors inside the unit cube, shape (10000, 3)."""
    return rng.random((10_000, 3))


@pytest.fixture
def bytes_to_luv():
    """Convert a (n, 3) uint8 palette to CIELUV rows."""
    from chromamap.conversions import np_linear_rgb_to_xyz, np_srgb_to_linear, np_xyz_to_luv

    def convert(colors):
        srgb = np.asarray(colors, dtype=float) / 255.0
        return np_xyz_to_luv(np_linear_rgb_to_xyz(np_srgb_to_linear(srgb)))
    return convert
