"""Numeric helpers for the conversion pipeline.

Provides:
    - clamp: bound a value to [lo, hi]
    - clamp_rgba: out-of-range policy for RGB bytes and alpha
    - round_half_up: nearest integer with .5 ties rounded up
    - hue_degrees, hue_difference, mean_hue: circular hue arithmetic on
      float64 tensors, in degrees

Out-of-range RGB/alpha is corrected, never rejected: every entry point that
accepts RGB or alpha routes it through clamp_rgba. This is the ONLY place
where silent clamping happens.

NaN is not a bound violation. clamp() returns it unchanged so malformed
input surfaces as NaN downstream instead of a plausible-looking colour.
"""

import math
from typing import Tuple

import torch

from .logging_config import get_logger

logger = get_logger(__name__)

RGB_MAX = 255
ALPHA_MAX = 1.0


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp scalar to [lo, hi].

    Parameters
    ----------
    x : float
        Input value
    lo : float
        Lower bound
    hi : float
        Upper bound

    Returns
    -------
    float
        Clamped value; NaN is returned as-is
    """
    if math.isnan(x):
        return x
    return min(hi, max(lo, x))


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties towards +inf (2.5 -> 3).

    Builtin round() sends ties to the even neighbour, which would encode
    channel 2.5 as 0x02. NaN raises ValueError.
    """
    return math.floor(x + 0.5)


def clamp_rgba(
    r: float,
    g: float,
    b: float,
    a: float = 1.0
) -> Tuple[float, float, float, float]:
    """Apply the clamp-silently policy to an RGBA tuple.

    Parameters
    ----------
    r, g, b : float
        Channel values, nominal range [0, 255]
    a : float
        Alpha, nominal range [0, 1]

    Returns
    -------
    Tuple[float, float, float, float]
        (r, g, b, a) with each component clamped into range

    Notes
    -----
    Emits a DEBUG record per corrected component. No warning is raised.
    """
    out = []
    for name, value, hi in (("red", r, RGB_MAX), ("green", g, RGB_MAX),
                            ("blue", b, RGB_MAX), ("alpha", a, ALPHA_MAX)):
        clamped = clamp(value, 0, hi)
        if clamped != value and not math.isnan(value):
            logger.debug(f"{name} value {value} outside [0, {hi}], clamped to {clamped}")
        out.append(clamped)
    return tuple(out)


# ============================================================================
# HUE ANGLES
# ============================================================================

def hue_degrees(b: torch.Tensor, a: torch.Tensor) -> torch.Tensor:
    """Hue angle of (a, b) in [0, 360) degrees.

    atan2 is undefined at the origin; achromatic points get hue 0 regardless
    of the sign of zero.
    """
    h = torch.remainder(torch.rad2deg(torch.atan2(b, a)), 360.0)
    return torch.where((b == 0) & (a == 0), torch.zeros_like(h), h)


def hue_difference(h1: torch.Tensor, h2: torch.Tensor) -> torch.Tensor:
    """Signed h2 - h1 along the short way round, in [-180, 180]."""
    dh = h2 - h1
    return torch.where(dh > 180.0, dh - 360.0, torch.where(dh < -180.0, dh + 360.0, dh))


def mean_hue(h1: torch.Tensor, h2: torch.Tensor) -> torch.Tensor:
    """Circular mean of two hues in [0, 360).

    When the hues lie more than 180° apart the arithmetic mean points the
    wrong way and is rotated by 180°.
    """
    mean = (h1 + h2) / 2.0
    return torch.where(
        torch.abs(h1 - h2) > 180.0,
        torch.remainder(mean + 180.0, 360.0),
        mean
    )
