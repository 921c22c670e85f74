"""
Text and image formats for generated color maps.

All functions take the ``(n, 3)`` uint8 array of a ``Palette`` (any array
with 3n byte values works).
"""

import json
from pathlib import Path
from typing import Callable, Dict, Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .types.sampling import BYTE_MAX


def _rows(colors: NDArray) -> NDArray:
    return np.asarray(colors, dtype=np.uint8).reshape(-1, 3)


def to_csv(colors: NDArray) -> str:
    """One ``r, g, b`` line per entry."""
    return "".join(f"{r}, {g}, {b}\n" for r, g, b in _rows(colors).tolist())


def to_json(colors: NDArray, name: str = "ChromamapGenerated") -> str:
    """
    ParaView color map document.

    ``RGBPoints`` is a flat list of ``position, r, g, b`` quadruples with
    positions ``i / (n - 1)`` and channels in [0, 1].
    """
    rows = _rows(colors)
    n = len(rows)
    points = []
    for i, (r, g, b) in enumerate(rows.tolist()):
        points.extend([i / (n - 1) if n > 1 else 0.0, r / BYTE_MAX, g / BYTE_MAX, b / BYTE_MAX])
    document = [{
        "ColorSpace": "RGB",
        "Name": name,
        "NanColor": [-1, -1, -1],
        "RGBPoints": points,
    }]
    return json.dumps(document, indent=2) + "\n"


def to_ppm(colors: NDArray) -> str:
    """Plain (P3) PPM image, n pixels wide and one pixel high."""
    rows = _rows(colors)
    header = f"P3\n{len(rows)} 1\n{BYTE_MAX}\n"
    return header + "".join(f"{r} {g} {b}\n" for r, g, b in rows.tolist())


def to_image(colors: NDArray) -> Image.Image:
    """The color map as an n x 1 RGB image."""
    return Image.fromarray(_rows(colors)[np.newaxis, :, :])


def to_png(colors: NDArray, path: Union[str, Path]) -> None:
    to_image(colors).save(path, format="PNG")


FORMATS: Dict[str, Callable[[NDArray], str]] = {
    "csv": to_csv,
    "json": to_json,
    "ppm": to_ppm,
}


def export(colors: NDArray, fmt: str) -> str:
    """
    Format a color map as text.

    Raises:
        ValueError: unknown format
    """
    try:
        formatter = FORMATS[fmt.lower()]
    except KeyError:
        raise ValueError(f"Unknown format: {fmt!r}; choose one of {', '.join(FORMATS)}") from None
    return formatter(colors)
