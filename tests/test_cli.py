"""Tests for the command line tool."""
import json
import math

import numpy as np
import pytest
from click.testing import CliRunner
from PIL import Image

from chromamap import __version__, generate
from chromamap.cli import collect_parameters, main
from chromamap.export import to_csv


@pytest.fixture
def runner():
    return CliRunner()


def test_csv_to_stdout(runner):
    result = runner.invoke(main, ["-t", "mcnames", "-n", "2"])
    assert result.exit_code == 0, result.output
    assert result.stdout == "0, 0, 0\n255, 255, 255\n"


def test_hue_in_degrees(runner):
    result = runner.invoke(main, ["-t", "brewer-sequential", "-n", "9", "-h", "240"])
    assert result.exit_code == 0, result.output
    expected = to_csv(generate("brewer-sequential", 9, hue=math.radians(240.0)).colors)
    assert result.stdout.startswith(expected)


def test_alias_and_case(runner):
    a = runner.invoke(main, ["-t", "Sequential", "-n", "5"])
    b = runner.invoke(main, ["-t", "brewer-sequential", "-n", "5"])
    assert a.exit_code == 0, a.output
    assert a.stdout == b.stdout


def test_json_format(runner):
    result = runner.invoke(main, ["-t", "cubehelix", "-n", "4", "-f", "json"])
    assert result.exit_code == 0, result.output
    document = json.loads(result.stdout)
    assert len(document[0]["RGBPoints"]) == 16


def test_ppm_to_file(runner, tmp_path):
    path = tmp_path / "map.ppm"
    result = runner.invoke(main, ["-t", "mcnames", "-n", "2", "-f", "ppm", "-o", str(path)])
    assert result.exit_code == 0, result.output
    assert path.read_text() == "P3\n2 1\n255\n0 0 0\n255 255 255\n"


def test_png_needs_output(runner):
    result = runner.invoke(main, ["-t", "mcnames", "-n", "2", "-f", "png"])
    assert result.exit_code == 2


def test_png_and_test_pattern(runner, tmp_path):
    png = tmp_path / "map.png"
    pattern = tmp_path / "pattern.png"
    result = runner.invoke(main, ["-t", "cubehelix", "-n", "16", "-f", "png", "-o", str(png),
                                  "--test-pattern", str(pattern)])
    assert result.exit_code == 0, result.output
    with Image.open(png) as image:
        assert image.size == (16, 1)
    with Image.open(pattern) as image:
        assert image.size == (512, 128)


def test_moreland_colors(runner):
    result = runner.invoke(main, ["-t", "moreland", "-n", "3", "-A", "10,120,40", "-O", "200,40,180"])
    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0] == "10, 120, 40"
    assert lines[-1] == "200, 40, 180"


@pytest.mark.parametrize("value", ["1,2", "1,2,300", "a,b,c"])
def test_bad_color(runner, value):
    result = runner.invoke(main, ["-t", "moreland", "-n", "3", "-A", value])
    assert result.exit_code == 2


def test_multi_hue_control_points(runner):
    result = runner.invoke(main, ["-t", "pu-sequential-multi-hue", "-n", "8",
                                  "--hues", "250,170,90", "--positions", "0,0.5,1"])
    assert result.exit_code == 0, result.output
    assert len([line for line in result.stdout.splitlines() if "," in line]) == 8


def test_mismatched_control_points(runner):
    result = runner.invoke(main, ["-t", "pu-sequential-multi-hue", "-n", "8",
                                  "--hues", "250,170", "--positions", "0,0.5,1"])
    assert result.exit_code == 2


def test_parameter_not_taken_by_method(runner):
    result = runner.invoke(main, ["-t", "moreland", "-n", "4", "-h", "30"])
    assert result.exit_code == 2
    assert "does not take" in result.output


def test_invalid_type_and_n(runner):
    assert runner.invoke(main, ["-t", "jet", "-n", "4"]).exit_code == 2
    assert runner.invoke(main, ["-t", "cubehelix", "-n", "1"]).exit_code == 2


def test_endpoint_sampling(runner):
    result = runner.invoke(main, ["-t", "brewer-sequential", "-n", "4", "--sampling", "endpoints"])
    assert result.exit_code == 0, result.output
    expected = to_csv(generate("brewer-sequential", 4, sampling="endpoints").colors)
    assert result.stdout.startswith(expected)


def test_clip_report(runner):
    result = runner.invoke(main, ["-t", "cubehelix", "-n", "64", "-s", "3"])
    assert result.exit_code == 0, result.output
    assert "clipped" in result.output


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_collect_parameters():
    params = collect_parameters({"hue": 180.0, "divergence": 90.0, "hues": (0.0, 90.0),
                                 "contrast": 0.5, "warmth": None})
    assert params["hue"] == pytest.approx(math.pi)
    assert params["divergence"] == pytest.approx(math.pi / 2.0)
    assert np.allclose(params["hues"], (0.0, math.pi / 2.0))
    assert params["contrast"] == 0.5
    assert "warmth" not in params
