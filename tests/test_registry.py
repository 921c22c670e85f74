"""Tests for the method registry and ``generate``."""
import logging
import math
import warnings

import numpy as np
import pytest

from chromamap import generate
from chromamap.drivers import brewer_sequential, cubehelix
from chromamap.registry import ALIASES, METHODS, get_method
from chromamap.types import Sampling


def test_all_methods_registered():
    assert len(METHODS) == 25
    for name, info in METHODS.items():
        assert info.name == name
        assert info.description


def test_parameters_from_signature():
    assert METHODS["brewer-sequential"].parameters == ("hue", "contrast", "saturation", "brightness", "warmth")
    assert METHODS["moreland"].parameters == ("color0", "color1")
    assert METHODS["mcnames"].parameters == ("periods",)
    assert "sampling" not in METHODS["cubehelix"].parameters


def test_get_method_normalizes_names():
    assert get_method("PU_Sequential_Lightness").name == "pu-sequential-lightness"
    assert get_method(" cubehelix ").name == "cubehelix"
    for alias, target in ALIASES.items():
        assert get_method(alias).name == target


def test_unknown_method():
    with pytest.raises(ValueError, match="Unknown method"):
        get_method("jet")


@pytest.mark.parametrize("name", sorted(METHODS))
def test_generate_every_method_with_defaults(name):
    palette = generate(name, 8)
    assert palette.colors.shape == (8, 3)


def test_generate_matches_driver():
    hue = math.radians(240.0)
    a = generate("brewer-sequential", 9, hue=hue)
    b = brewer_sequential(9, hue=hue)
    assert np.array_equal(a.colors, b.colors)
    assert a.clipped == b.clipped


def test_none_parameters_take_defaults():
    a = generate("cubehelix", 16, rotations=None, gamma=None)
    assert np.array_equal(a.colors, cubehelix(16).colors)


@pytest.mark.parametrize("n", [0, 1, -3, 2.5, True])
def test_invalid_n(n):
    with pytest.raises(ValueError):
        generate("cubehelix", n)


def test_float_n_with_integer_value():
    assert generate("cubehelix", 4.0).colors.shape == (4, 3)


def test_unknown_parameter():
    with pytest.raises(ValueError, match="does not take"):
        generate("moreland", 8, hue=1.0)


def test_sampling_by_name():
    a = generate("brewer-sequential", 8, sampling="endpoints")
    b = generate("brewer-sequential", 8, sampling=Sampling.ENDPOINTS)
    assert np.array_equal(a.colors, b.colors)
    with pytest.raises(ValueError):
        generate("brewer-sequential", 8, sampling="middle")


def test_out_buffer():
    out = np.zeros((5, 3), dtype=np.uint8)
    palette = generate("mcnames", 5, out=out)
    assert np.shares_memory(palette.colors, out)
    with pytest.raises(ValueError):
        generate("mcnames", 6, out=out)


@pytest.mark.parametrize("hues,positions", [
    ((), ()),
    ((1.0, 2.0), (0.0,)),
    ((1.0, 2.0), (1.0, 0.0)),
])
def test_invalid_control_points(hues, positions):
    with pytest.raises(ValueError):
        generate("pu-sequential-multi-hue", 8, hues=hues, positions=positions)


def test_clip_warning_and_log(caplog):
    with caplog.at_level(logging.INFO, logger="chromamap.registry"):
        with pytest.warns(UserWarning, match="clipped"):
            palette = generate("cubehelix", 64, saturation=3.0, warn_on_clip=True)
    assert palette.clipped > 0
    assert "clipped" in caplog.text


def test_no_warning_by_default():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        generate("cubehelix", 64, saturation=3.0)
