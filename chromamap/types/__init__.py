from .triplets import SRGB, LinearRGB, XYZ, LUV, LCH, LAB, MSH, mix, midpoint
from .sampling import Sampling, sample_position, BYTE_MAX

__all__ = [
    "SRGB", "LinearRGB", "XYZ", "LUV", "LCH", "LAB", "MSH",
    "mix", "midpoint",
    "Sampling", "sample_position", "BYTE_MAX",
]
