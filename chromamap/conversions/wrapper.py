from typing import Callable, Dict, Literal, Sequence

from ..types.triplets import SRGB, LinearRGB, XYZ, LUV, LCH, LAB, MSH
from .transfer import srgb_to_linear_rgb, linear_rgb_to_srgb
from .xyz import (
    linear_rgb_to_xyz, xyz_to_linear_rgb,
    xyz_to_luv, luv_to_xyz,
    xyz_to_lab, lab_to_xyz,
)
from .polar import luv_to_lch, lch_to_luv, lab_to_msh, msh_to_lab

ColorSpace = Literal["srgb", "linear_rgb", "xyz", "luv", "lch", "lab", "msh"]

# Every space reaches every other one through XYZ.
TO_XYZ: Dict[str, Callable[[Sequence[float]], XYZ]] = {
    "srgb": lambda c: linear_rgb_to_xyz(srgb_to_linear_rgb(SRGB(*c))),
    "linear_rgb": lambda c: linear_rgb_to_xyz(LinearRGB(*c)),
    "xyz": lambda c: XYZ(*c),
    "luv": lambda c: luv_to_xyz(LUV(*c)),
    "lch": lambda c: luv_to_xyz(lch_to_luv(LCH(*c))),
    "lab": lambda c: lab_to_xyz(LAB(*c)),
    "msh": lambda c: lab_to_xyz(msh_to_lab(MSH(*c))),
}

FROM_XYZ: Dict[str, Callable[[XYZ], tuple]] = {
    "srgb": lambda xyz: linear_rgb_to_srgb(xyz_to_linear_rgb(xyz)),
    "linear_rgb": lambda xyz: xyz_to_linear_rgb(xyz),
    "xyz": lambda xyz: xyz,
    "luv": xyz_to_luv,
    "lch": lambda xyz: luv_to_lch(xyz_to_luv(xyz)),
    "lab": xyz_to_lab,
    "msh": lambda xyz: lab_to_msh(xyz_to_lab(xyz)),
}

SPACE_TYPES: Dict[str, type] = {
    "srgb": SRGB,
    "linear_rgb": LinearRGB,
    "xyz": XYZ,
    "luv": LUV,
    "lch": LCH,
    "lab": LAB,
    "msh": MSH,
}


def convert(color: Sequence[float], from_space: ColorSpace, to_space: ColorSpace) -> tuple:
    """
    Convert a color triplet between any two supported spaces.

    Conversions are unclamped; an sRGB result may lie outside [0, 1].

    Args:
        color: three components in ``from_space``
        from_space: source space name
        to_space: target space name

    Returns:
        the triplet type of ``to_space``
    """
    fs, ts = from_space.lower(), to_space.lower()
    if fs not in TO_XYZ:
        raise ValueError(f"Unknown space: {from_space}")
    if ts not in FROM_XYZ:
        raise ValueError(f"Unknown space: {to_space}")
    if len(color) != 3:
        raise ValueError(f"expected 3 components, got {len(color)}")
    if fs == ts:
        return SPACE_TYPES[ts](*color)
    return FROM_XYZ[ts](TO_XYZ[fs](color))


## Chains used by the palette drivers

def srgb_to_luv(srgb: SRGB) -> LUV:
    return xyz_to_luv(linear_rgb_to_xyz(srgb_to_linear_rgb(srgb)))


def srgb_to_lab(srgb: SRGB) -> LAB:
    return xyz_to_lab(linear_rgb_to_xyz(srgb_to_linear_rgb(srgb)))


def srgb_to_lch_hue(srgb: SRGB) -> float:
    return luv_to_lch(srgb_to_luv(srgb)).h


def luv_to_linear_rgb(luv: LUV) -> LinearRGB:
    return xyz_to_linear_rgb(luv_to_xyz(luv))


def lch_to_linear_rgb(lch: LCH) -> LinearRGB:
    return luv_to_linear_rgb(lch_to_luv(lch))


def lab_to_linear_rgb(lab: LAB) -> LinearRGB:
    return xyz_to_linear_rgb(lab_to_xyz(lab))
