"""
Method registry.

Maps the published method names to their drivers and validates the input
that the drivers take as a precondition.
"""

import inspect
import logging
import warnings
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple, Union

from numpy import ndarray as NDArray

from .types.sampling import Sampling
from . import defaults
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

logger = logging.getLogger(__name__)

# Driver keywords that are not method parameters.
_COMMON_KEYWORDS = ("sampling", "out")


@dataclass(frozen=True)
class MethodInfo:
    name: str
    driver: Callable[..., Palette]
    description: str

    @property
    def parameters(self) -> Tuple[str, ...]:
        """Names of the method parameters the driver accepts, in order."""
        signature = inspect.signature(self.driver)
        return tuple(
            name for name, p in signature.parameters.items()
            if p.kind == inspect.Parameter.KEYWORD_ONLY and name not in _COMMON_KEYWORDS
        )


METHODS: Dict[str, MethodInfo] = {info.name: info for info in (
    MethodInfo("brewer-sequential", brewer_sequential, "Brewer-like sequential map"),
    MethodInfo("brewer-diverging", brewer_diverging, "Brewer-like diverging map"),
    MethodInfo("brewer-qualitative", brewer_qualitative, "Brewer-like qualitative map"),
    MethodInfo("isoluminant-sequential", isoluminant_sequential, "Isoluminant sequential map"),
    MethodInfo("isoluminant-diverging", isoluminant_diverging, "Isoluminant diverging map"),
    MethodInfo("isoluminant-qualitative", isoluminant_qualitative, "Isoluminant qualitative map"),
    MethodInfo("cubehelix", cubehelix, "CubeHelix sequential map"),
    MethodInfo("moreland", moreland, "Moreland diverging map"),
    MethodInfo("mcnames", mcnames, "McNames sequential map"),
    MethodInfo("pl-sequential-lightness", pl_sequential_lightness, "Perceptually linear sequential map, varying lightness"),
    MethodInfo("pu-sequential-lightness", pu_sequential_lightness, "Perceptually uniform sequential map, varying lightness"),
    MethodInfo("pl-sequential-saturation", pl_sequential_saturation, "Perceptually linear sequential map, varying saturation"),
    MethodInfo("pu-sequential-saturation", pu_sequential_saturation, "Perceptually uniform sequential map, varying saturation"),
    MethodInfo("pl-sequential-rainbow", pl_sequential_rainbow, "Perceptually linear sequential rainbow map"),
    MethodInfo("pu-sequential-rainbow", pu_sequential_rainbow, "Perceptually uniform sequential rainbow map"),
    MethodInfo("pl-sequential-black-body", pl_sequential_black_body, "Perceptually linear black body map"),
    MethodInfo("pu-sequential-black-body", pu_sequential_black_body, "Perceptually uniform black body map"),
    MethodInfo("pl-sequential-multi-hue", pl_sequential_multi_hue, "Perceptually linear sequential map through several hues"),
    MethodInfo("pu-sequential-multi-hue", pu_sequential_multi_hue, "Perceptually uniform sequential map through several hues"),
    MethodInfo("pl-diverging-lightness", pl_diverging_lightness, "Perceptually linear diverging map, varying lightness"),
    MethodInfo("pu-diverging-lightness", pu_diverging_lightness, "Perceptually uniform diverging map, varying lightness"),
    MethodInfo("pl-diverging-saturation", pl_diverging_saturation, "Perceptually linear diverging map, varying saturation"),
    MethodInfo("pu-diverging-saturation", pu_diverging_saturation, "Perceptually uniform diverging map, varying saturation"),
    MethodInfo("pl-qualitative-hue", pl_qualitative_hue, "Perceptually linear qualitative map"),
    MethodInfo("pu-qualitative-hue", pu_qualitative_hue, "Perceptually uniform qualitative map"),
)}

# Short type names of the first command line tool.
ALIASES: Dict[str, str] = {
    "sequential": "brewer-sequential",
    "diverging": "brewer-diverging",
    "qualitative": "brewer-qualitative",
}


def get_method(name: str) -> MethodInfo:
    """
    Look up a method by name or alias.

    Raises:
        ValueError: the name is unknown
    """
    key = name.strip().lower().replace("_", "-")
    key = ALIASES.get(key, key)
    try:
        return METHODS[key]
    except KeyError:
        raise ValueError(f"Unknown method: {name!r}; choose one of {', '.join(METHODS)}") from None


def _check_control_points(hues: Optional[Sequence[float]], positions: Optional[Sequence[float]]) -> None:
    hues = defaults.SEQUENTIAL_MULTI_HUE_HUES if hues is None else tuple(hues)
    positions = defaults.SEQUENTIAL_MULTI_HUE_POSITIONS if positions is None else tuple(positions)
    if len(hues) == 0:
        raise ValueError("hues must not be empty")
    if len(hues) != len(positions):
        raise ValueError(f"hues and positions must have the same length, got {len(hues)} and {len(positions)}")
    if any(b < a for a, b in zip(positions, positions[1:])):
        raise ValueError(f"positions must be sorted, got {list(positions)}")


def generate(
    method: str,
    n: int,
    *,
    sampling: Optional[Union[Sampling, str]] = None,
    out: Optional[NDArray] = None,
    warn_on_clip: bool = False,
    **params,
) -> Palette:
    """
    Generate a color map with a named method.

    Args:
        method: method name, e.g. ``"pu-sequential-lightness"``
        n: number of entries, at least 2
        sampling: position strategy or its name; method default when None
        out: optional uint8 buffer with 3n elements, filled in place
        warn_on_clip: emit a ``UserWarning`` when entries had to be clipped
        **params: method parameters; ``None`` values take the defaults

    Returns:
        Palette

    Raises:
        ValueError: unknown method or parameter, n < 2, or inconsistent
            multi-hue control points
    """
    info = get_method(method)
    if isinstance(n, bool) or int(n) != n or n < 2:
        raise ValueError(f"n must be an integer >= 2, got {n!r}")
    n = int(n)

    unknown = sorted(set(params) - set(info.parameters))
    if unknown:
        raise ValueError(f"{info.name} does not take {', '.join(unknown)}; parameters: {', '.join(info.parameters)}")
    if "hues" in info.parameters:
        _check_control_points(params.get("hues"), params.get("positions"))
    if isinstance(sampling, str):
        sampling = Sampling(sampling)

    logger.debug("generating %s with n=%d, params=%s, sampling=%s", info.name, n, params, sampling)
    palette = info.driver(n, sampling=sampling, out=out, **params)

    if palette.clipped:
        logger.info("%s: %d of %d entries clipped to the sRGB gamut", info.name, palette.clipped, n)
        if warn_on_clip:
            warnings.warn(
                f"{info.name}: {palette.clipped} of {n} colors were outside the sRGB gamut and had to be clipped",
                UserWarning,
                stacklevel=2,
            )
    return palette
