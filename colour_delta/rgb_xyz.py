"""sRGB (8-bit, gamma encoded) ↔ CIE XYZ.

Provides:
    - linearize / gamma_encode: exact sRGB transfer function per channel
    - rgb2xyz: bytes → XYZ (Y=100 for white)
    - xyz2rgba: XYZ → bytes, rounded and clamped

Matrices are the IEC 61966-2-1 sRGB primaries with D65 white. The matrix
product runs on float64 torch tensors built per call; only the coefficient
tuples live at module level.

Alpha is accepted by rgb2xyz for symmetry with RGBA callers but never takes
part in the arithmetic.
"""

from typing import Tuple

import torch

from .utils.compute import clamp, clamp_rgba, round_half_up

RGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

XYZ_TO_RGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)


def linearize(c: float) -> float:
    """sRGB [0,1] → linear [0,1].

    Linear segment below 0.04045 (x / 12.92), power segment above
    (((x + 0.055) / 1.055)^2.4).
    """
    if c > 0.04045:
        return ((c + 0.055) / 1.055) ** 2.4
    return c / 12.92


def gamma_encode(c: float) -> float:
    """Linear [0,1] → sRGB [0,1]. Inverse of linearize."""
    if c > 0.0031308:
        return 1.055 * c ** (1 / 2.4) - 0.055
    return 12.92 * c


def _apply_matrix(matrix, vec) -> Tuple[float, float, float]:
    mat = torch.tensor(matrix, dtype=torch.float64)
    out = torch.mv(mat, torch.tensor(vec, dtype=torch.float64))
    return tuple(out.tolist())


def rgb2xyz(r: float, g: float, b: float, a: float = 1.0) -> Tuple[float, float, float]:
    """Convert 8-bit sRGB to XYZ.

    Parameters
    ----------
    r, g, b : float
        Channel values, clamped into [0, 255]
    a : float
        Alpha, clamped into [0, 1] and otherwise ignored

    Returns
    -------
    Tuple[float, float, float]
        (X, Y, Z), Y≈100 for white
    """
    r, g, b, _ = clamp_rgba(r, g, b, a)
    linear = [linearize(c / 255) * 100 for c in (r, g, b)]
    return _apply_matrix(RGB_TO_XYZ, linear)


def xyz2rgba(x: float, y: float, z: float) -> Tuple[int, int, int]:
    """Convert XYZ to 8-bit sRGB.

    Parameters
    ----------
    x, y, z : float
        Tristimulus values on the Y=100 scale

    Returns
    -------
    Tuple[int, int, int]
        (r, g, b) clamped to [0, 255] and rounded half up

    Notes
    -----
    Out-of-gamut XYZ lands on the nearest cube face; the caller attaches
    alpha (always 1.0 for colours produced here).
    """
    linear = _apply_matrix(XYZ_TO_RGB, [x / 100, y / 100, z / 100])
    return tuple(round_half_up(clamp(gamma_encode(c) * 255, 0, 255)) for c in linear)
