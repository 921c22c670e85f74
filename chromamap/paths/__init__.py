from .bezier import (
    BezierPath,
    bezier,
    inverse_bezier,
    brightness_ramp,
    default_contrast_for_small_n,
)
from .uniform import (
    AnchoredPath,
    lch_distance,
    multi_hue_distance,
    chroma_candidates,
    uniform_interpolate,
    linear_interpolate,
    hue_at,
    lerp,
)

__all__ = [
    "BezierPath",
    "bezier",
    "inverse_bezier",
    "brightness_ramp",
    "default_contrast_for_small_n",
    "AnchoredPath",
    "lch_distance",
    "multi_hue_distance",
    "chroma_candidates",
    "uniform_interpolate",
    "linear_interpolate",
    "hue_at",
    "lerp",
]
