import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp

from ..types.triplets import LinearRGB, XYZ, LUV, LAB

# All XYZ-based values keep their natural range: Y of the white point is 100.


def u_prime(xyz: XYZ) -> float:
    denominator = xyz.x + 15.0 * xyz.y + 3.0 * xyz.z
    return 4.0 * xyz.x / denominator if denominator != 0.0 else 0.0


def v_prime(xyz: XYZ) -> float:
    denominator = xyz.x + 15.0 * xyz.y + 3.0 * xyz.z
    return 9.0 * xyz.y / denominator if denominator != 0.0 else 0.0


D65 = XYZ(95.047, 100.000, 108.883)
D65_U_PRIME = u_prime(D65)
D65_V_PRIME = v_prime(D65)

# (6/29)^3 and (29/3)^3 of the CIE lightness formula
CIE_EPSILON = (6.0 / 29.0) ** 3
CIE_KAPPA = (29.0 / 3.0) ** 3
LAB_DELTA = 6.0 / 29.0

# Rec.709 primaries under D65
M_LINEAR_RGB_TO_XYZ = np.array([
    [0.4124, 0.3576, 0.1805],
    [0.2126, 0.7152, 0.0722],
    [0.0193, 0.1192, 0.9505],
])

# Exact inverse, so that linear RGB -> XYZ -> linear RGB is lossless.
M_XYZ_TO_LINEAR_RGB = np.linalg.inv(M_LINEAR_RGB_TO_XYZ)


## Linear RGB <-> XYZ

def linear_rgb_to_xyz(rgb: LinearRGB) -> XYZ:
    m = M_LINEAR_RGB_TO_XYZ
    return XYZ(
        100.0 * (m[0, 0] * rgb.r + m[0, 1] * rgb.g + m[0, 2] * rgb.b),
        100.0 * (m[1, 0] * rgb.r + m[1, 1] * rgb.g + m[1, 2] * rgb.b),
        100.0 * (m[2, 0] * rgb.r + m[2, 1] * rgb.g + m[2, 2] * rgb.b),
    )


def xyz_to_linear_rgb(xyz: XYZ, clamped: bool = False) -> LinearRGB:
    """
    Convert XYZ to linear RGB.

    Args:
        xyz: XYZ triplet, Y in [0, 100]
        clamped: clamp every channel to [0, 1]

    Returns:
        LinearRGB, unclamped unless ``clamped`` is set
    """
    m = M_XYZ_TO_LINEAR_RGB
    r = 0.01 * (m[0, 0] * xyz.x + m[0, 1] * xyz.y + m[0, 2] * xyz.z)
    g = 0.01 * (m[1, 0] * xyz.x + m[1, 1] * xyz.y + m[1, 2] * xyz.z)
    b = 0.01 * (m[2, 0] * xyz.x + m[2, 1] * xyz.y + m[2, 2] * xyz.z)
    if clamped:
        r, g, b = clamp(r, 0.0, 1.0), clamp(g, 0.0, 1.0), clamp(b, 0.0, 1.0)
    return LinearRGB(float(r), float(g), float(b))


def np_linear_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """Vectorized: linear RGB of shape (..., 3) to XYZ of shape (..., 3)."""
    return 100.0 * np.asarray(rgb, dtype=float) @ M_LINEAR_RGB_TO_XYZ.T


def np_xyz_to_linear_rgb(xyz: NDArray, clamped: bool = False) -> NDArray:
    """Vectorized: XYZ of shape (..., 3) to linear RGB of shape (..., 3)."""
    rgb = 0.01 * np.asarray(xyz, dtype=float) @ M_XYZ_TO_LINEAR_RGB.T
    return np.clip(rgb, 0.0, 1.0) if clamped else rgb


## XYZ <-> LUV

def xyz_to_luv(xyz: XYZ) -> LUV:
    y_ratio = xyz.y / D65.y
    if y_ratio <= CIE_EPSILON:
        l = CIE_KAPPA * y_ratio
    else:
        l = 116.0 * y_ratio ** (1.0 / 3.0) - 16.0
    if xyz.x + 15.0 * xyz.y + 3.0 * xyz.z == 0.0:
        return LUV(l, 0.0, 0.0)
    return LUV(
        l,
        13.0 * l * (u_prime(xyz) - D65_U_PRIME),
        13.0 * l * (v_prime(xyz) - D65_V_PRIME),
    )


def luv_to_xyz(luv: LUV) -> XYZ:
    # Black has no chromaticity; return it directly instead of dividing by L.
    if luv.l <= 0.0:
        return XYZ(0.0, 0.0, 0.0)
    up = luv.u / (13.0 * luv.l) + D65_U_PRIME
    vp = luv.v / (13.0 * luv.l) + D65_V_PRIME
    if luv.l <= 8.0:
        y = D65.y * luv.l / CIE_KAPPA
    else:
        y = D65.y * ((luv.l + 16.0) / 116.0) ** 3
    if vp == 0.0:
        return XYZ(0.0, y, 0.0)
    return XYZ(
        y * (9.0 * up) / (4.0 * vp),
        y,
        y * (12.0 - 3.0 * up - 20.0 * vp) / (4.0 * vp),
    )


def np_xyz_to_luv(xyz: NDArray) -> NDArray:
    """
    Vectorized: XYZ of shape (..., 3) to LUV of shape (..., 3).

    Entries with a zero chromaticity denominator (black) get u = v = 0.
    """
    xyz = np.asarray(xyz, dtype=float)
    x, y, z = xyz[..., 0], xyz[..., 1], xyz[..., 2]

    y_ratio = y / D65.y
    l = np.where(
        y_ratio <= CIE_EPSILON,
        CIE_KAPPA * y_ratio,
        116.0 * np.cbrt(y_ratio) - 16.0,
    )

    denominator = x + 15.0 * y + 3.0 * z
    safe = np.where(denominator == 0.0, 1.0, denominator)
    up = np.where(denominator == 0.0, D65_U_PRIME, 4.0 * x / safe)
    vp = np.where(denominator == 0.0, D65_V_PRIME, 9.0 * y / safe)

    u = 13.0 * l * (up - D65_U_PRIME)
    v = 13.0 * l * (vp - D65_V_PRIME)
    return np.stack([l, u, v], axis=-1)


def np_luv_to_xyz(luv: NDArray) -> NDArray:
    """Vectorized: LUV of shape (..., 3) to XYZ of shape (..., 3)."""
    luv = np.asarray(luv, dtype=float)
    l, u, v = luv[..., 0], luv[..., 1], luv[..., 2]

    dark = l <= 0.0
    safe_l = np.where(dark, 1.0, l)
    up = u / (13.0 * safe_l) + D65_U_PRIME
    vp = v / (13.0 * safe_l) + D65_V_PRIME

    y = np.where(
        l <= 8.0,
        D65.y * l / CIE_KAPPA,
        D65.y * ((l + 16.0) / 116.0) ** 3,
    )
    safe_vp = np.where(vp == 0.0, 1.0, vp)
    x = np.where(vp == 0.0, 0.0, y * (9.0 * up) / (4.0 * safe_vp))
    z = np.where(vp == 0.0, 0.0, y * (12.0 - 3.0 * up - 20.0 * vp) / (4.0 * safe_vp))

    out = np.stack([x, y, z], axis=-1)
    out[dark] = 0.0
    return out


## XYZ <-> LAB

def lab_f(t: float) -> float:
    if t > CIE_EPSILON:
        return t ** (1.0 / 3.0)
    return t / (3.0 * LAB_DELTA * LAB_DELTA) + 4.0 / 29.0


def lab_inverse_f(t: float) -> float:
    if t > LAB_DELTA:
        return t * t * t
    return 3.0 * LAB_DELTA * LAB_DELTA * (t - 4.0 / 29.0)


def xyz_to_lab(xyz: XYZ) -> LAB:
    fx = lab_f(xyz.x / D65.x)
    fy = lab_f(xyz.y / D65.y)
    fz = lab_f(xyz.z / D65.z)
    return LAB(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def lab_to_xyz(lab: LAB) -> XYZ:
    t = (lab.l + 16.0) / 116.0
    return XYZ(
        D65.x * lab_inverse_f(t + lab.a / 500.0),
        D65.y * lab_inverse_f(t),
        D65.z * lab_inverse_f(t - lab.b / 200.0),
    )


def _np_lab_f(t: NDArray) -> NDArray:
    return np.where(t > CIE_EPSILON, np.cbrt(t), t / (3.0 * LAB_DELTA * LAB_DELTA) + 4.0 / 29.0)


def _np_lab_inverse_f(t: NDArray) -> NDArray:
    return np.where(t > LAB_DELTA, t * t * t, 3.0 * LAB_DELTA * LAB_DELTA * (t - 4.0 / 29.0))


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    """Vectorized: XYZ of shape (..., 3) to LAB of shape (..., 3)."""
    f = _np_lab_f(np.asarray(xyz, dtype=float) / np.asarray(D65))
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def np_lab_to_xyz(lab: NDArray) -> NDArray:
    """Vectorized: LAB of shape (..., 3) to XYZ of shape (..., 3)."""
    lab = np.asarray(lab, dtype=float)
    t = (lab[..., 0] + 16.0) / 116.0
    f = np.stack([t + lab[..., 1] / 500.0, t, t - lab[..., 2] / 200.0], axis=-1)
    return _np_lab_inverse_f(f) * np.asarray(D65)
