"""Convenience round-trips across the conversion pipeline.

Composes hex_codec → rgb_xyz → xyz_lab (and back) without adding logic of
its own, plus the lightness adjustments built on top of them.

Alpha is metadata, not a photometric quantity: it is clamped like any other
RGBA input but never enters the LAB arithmetic, and adjust_lightness hands
back the caller's alpha rather than the one regenerated by lab2rgba.
"""

from typing import Tuple

from .delta_e import delta_e00
from .hex_codec import hex2rgba
from .rgb_xyz import rgb2xyz, xyz2rgba
from .utils.compute import clamp, clamp_rgba
from .utils.validators import DEFAULT_WHITE, LIGHTNESS_RANGE, ReferenceWhite
from .xyz_lab import lab2xyz, xyz2lab


def hex2lab(hex_str: str, white: ReferenceWhite = DEFAULT_WHITE) -> Tuple[float, float, float]:
    """Hex string → (L, a, b). Raises InvalidFormatError on malformed hex."""
    r, g, b, a = hex2rgba(hex_str)
    return rgba2lab(r, g, b, a, white=white)


def rgba2lab(
    r: float,
    g: float,
    b: float,
    a: float = 1.0,
    white: ReferenceWhite = DEFAULT_WHITE
) -> Tuple[float, float, float]:
    """RGBA → (L, a, b); alpha is ignored."""
    return xyz2lab(*rgb2xyz(r, g, b, a), white=white)


def lab2rgba(
    l: float,
    a: float,
    b: float,
    white: ReferenceWhite = DEFAULT_WHITE
) -> Tuple[int, int, int, float]:
    """(L, a, b) → RGBA with alpha fixed at 1.0."""
    return (*xyz2rgba(*lab2xyz(l, a, b, white=white)), 1.0)


def adjust_lightness(
    r: float,
    g: float,
    b: float,
    a: float,
    factor: float,
    white: ReferenceWhite = DEFAULT_WHITE,
    lightness_clamp: Tuple[float, float] = LIGHTNESS_RANGE
) -> Tuple[int, int, int, float]:
    """Scale CIELAB lightness by (1 + factor).

    Parameters
    ----------
    r, g, b, a : float
        Source colour (clamped into range)
    factor : float
        Fractional change; negative darkens, positive brightens.
        0 leaves the colour unchanged, -1 drives L to the lower bound.
    white : ReferenceWhite
        Reference white used for both directions
    lightness_clamp : Tuple[float, float]
        [lo, hi] bounds for the scaled L*, default [0, 100]
        (ColourConfigV1.lightness_clamp)

    Returns
    -------
    Tuple[int, int, int, float]
        Adjusted (r, g, b) and the input alpha
    """
    lo, hi = lightness_clamp
    r, g, b, a = clamp_rgba(r, g, b, a)
    l, lab_a, lab_b = rgba2lab(r, g, b, a, white=white)
    l = clamp(l * (1 + factor), lo, hi)
    nr, ng, nb, _ = lab2rgba(l, lab_a, lab_b, white=white)
    return nr, ng, nb, a


def lighten(
    r: float,
    g: float,
    b: float,
    a: float,
    amount: float,
    white: ReferenceWhite = DEFAULT_WHITE,
    lightness_clamp: Tuple[float, float] = LIGHTNESS_RANGE
) -> Tuple[int, int, int, float]:
    """Brighten by a non-negative fraction of the current lightness."""
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")
    return adjust_lightness(r, g, b, a, amount, white=white, lightness_clamp=lightness_clamp)


def darken(
    r: float,
    g: float,
    b: float,
    a: float,
    amount: float,
    white: ReferenceWhite = DEFAULT_WHITE,
    lightness_clamp: Tuple[float, float] = LIGHTNESS_RANGE
) -> Tuple[int, int, int, float]:
    """Darken by a non-negative fraction of the current lightness."""
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")
    return adjust_lightness(r, g, b, a, -amount, white=white, lightness_clamp=lightness_clamp)


def hex_delta_e00(hex1: str, hex2: str, white: ReferenceWhite = DEFAULT_WHITE) -> float:
    """ΔE00 between two hex colours. Alpha bytes are ignored."""
    return delta_e00(hex2lab(hex1, white=white), hex2lab(hex2, white=white))


adjustLightness = adjust_lightness
