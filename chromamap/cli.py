"""Generate a color map and print it."""

import logging
import math

import click

from . import __version__
from .export import FORMATS, export, to_png
from .registry import METHODS, ALIASES, generate
from .testpattern import render_test_pattern
from .types.sampling import Sampling, BYTE_MAX

logger = logging.getLogger(__name__)


class ByteTriple(click.ParamType):
    """``R,G,B`` with each channel an integer in [0, 255]."""
    name = "R,G,B"

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        parts = value.split(",")
        try:
            channels = tuple(int(p) for p in parts)
        except ValueError:
            self.fail(f"{value!r} is not a comma separated list of integers", param, ctx)
        if len(channels) != 3 or not all(0 <= c <= BYTE_MAX for c in channels):
            self.fail(f"{value!r} must be three integers in [0, {BYTE_MAX}]", param, ctx)
        return channels


class FloatList(click.ParamType):
    """Comma separated floats."""
    name = "X,Y,..."

    def convert(self, value, param, ctx):
        if isinstance(value, tuple):
            return value
        try:
            return tuple(float(p) for p in value.split(","))
        except ValueError:
            self.fail(f"{value!r} is not a comma separated list of numbers", param, ctx)


# Options given in degrees on the command line; the engine takes radians.
ANGLE_OPTIONS = ("hue", "divergence")
PARAMETER_OPTIONS = (
    "hue", "divergence", "contrast", "saturation", "brightness", "warmth",
    "lightness", "lightness_range", "saturation_range", "rotations",
    "temperature", "temperature_range", "gamma", "color0", "color1",
    "periods", "hues", "positions",
)


def collect_parameters(options: dict) -> dict:
    """Method parameters that were given, converted to engine units."""
    params = {}
    for name in PARAMETER_OPTIONS:
        value = options.get(name)
        if value is None:
            continue
        if name in ANGLE_OPTIONS:
            value = math.radians(value)
        elif name == "hues":
            value = tuple(math.radians(h) for h in value)
        params[name] = value
    return params


@click.command(context_settings={"help_option_names": ["-H", "--help"]})
@click.version_option(__version__, "--version", prog_name="chromamap")
@click.option("-t", "--type", "method", required=True,
              type=click.Choice(sorted(list(METHODS) + list(ALIASES)), case_sensitive=False),
              help="Color map method.")
@click.option("-n", "--n", "n", required=True, type=click.IntRange(min=2), help="Number of colors.")
@click.option("-h", "--hue", type=float, default=None, help="Hue in degrees.")
@click.option("-d", "--divergence", type=float, default=None, help="Hue divergence in degrees.")
@click.option("-c", "--contrast", type=float, default=None, help="Contrast in [0,1].")
@click.option("-s", "--saturation", type=float, default=None, help="Saturation in [0,1].")
@click.option("-b", "--brightness", type=float, default=None, help="Brightness in [0,1].")
@click.option("-w", "--warmth", type=float, default=None, help="Warmth in [0,1].")
@click.option("-l", "--lightness", type=float, default=None, help="Lightness in [0,1].")
@click.option("--lightness-range", type=float, default=None, help="Lightness range in [0,1].")
@click.option("--saturation-range", type=float, default=None, help="Saturation range in [0,1].")
@click.option("-r", "--rotations", type=float, default=None, help="Number of hue rotations.")
@click.option("-T", "--temperature", type=float, default=None, help="Start temperature in Kelvin.")
@click.option("-R", "--temperature-range", type=float, default=None, help="Temperature range in Kelvin.")
@click.option("-g", "--gamma", type=float, default=None, help="Gamma of the CubeHelix ramp.")
@click.option("-A", "--color0", type=ByteTriple(), default=None, help="First Moreland color, sRGB bytes.")
@click.option("-O", "--color1", type=ByteTriple(), default=None, help="Last Moreland color, sRGB bytes.")
@click.option("-p", "--periods", type=float, default=None, help="Number of McNames periods.")
@click.option("--hues", type=FloatList(), default=None, help="Multi-hue control hues in degrees.")
@click.option("--positions", type=FloatList(), default=None, help="Multi-hue control positions in [0,1].")
@click.option("--sampling", type=click.Choice([s.value for s in Sampling]), default=None,
              help="Where entries sit on the map: cell centers or exact endpoints.")
@click.option("-f", "--format", "fmt", type=click.Choice(sorted(FORMATS) + ["png"]), default="csv",
              show_default=True, help="Output format.")
@click.option("-o", "--output", type=click.Path(dir_okay=False, writable=True), default=None,
              help="Write to FILE instead of standard output.")
@click.option("--test-pattern", type=click.Path(dir_okay=False, writable=True), default=None,
              help="Also render the color map test image to FILE (PNG).")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to standard error.")
def main(method, n, sampling, fmt, output, test_pattern, verbose, **options):
    """Generate a color map and print it as sRGB byte triplets."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if fmt == "png" and output is None:
        raise click.UsageError("--format png needs --output")

    params = collect_parameters(options)
    try:
        palette = generate(method, n, sampling=sampling, **params)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    if fmt == "png":
        to_png(palette.colors, output)
        logger.debug("wrote %d colors to %s", n, output)
    else:
        text = export(palette.colors, fmt)
        if output is None:
            click.echo(text, nl=False)
        else:
            with open(output, "w", encoding="utf-8") as f:
                f.write(text)
            logger.debug("wrote %d colors to %s", n, output)
    if test_pattern is not None:
        render_test_pattern(palette.colors).save(test_pattern, format="PNG")
        logger.debug("wrote test pattern to %s", test_pattern)
    if palette.clipped:
        click.echo(f"{palette.clipped} color(s) were clipped", err=True)


if __name__ == "__main__":
    main()
