"""CIE XYZ ↔ CIE L*a*b*.

Both directions take the reference white as an explicit argument and
default to the same process-wide constant (D65, 2° observer). Passing
different whites to the forward and inverse transform breaks round-trips by
far more than rounding error.

Constants follow the classic 0.008856 / 7.787 formulation rather than the
exact (6/29)^3 / (1/3)(29/6)^2 values, so results agree with most published
hex → LAB tables.

The white is normalised out as a float64 tensor and the two branches of the
non-linearity are selected elementwise with torch.where.
"""

from typing import Tuple

import torch

from .utils.validators import DEFAULT_WHITE, ReferenceWhite, ensure_reference_white

EPSILON = 0.008856
KAPPA_SLOPE = 7.787
OFFSET = 16 / 116
# cube root of EPSILON, used as the threshold on the inverse side
EPSILON_CBRT = 0.2068966


def _f(t: torch.Tensor) -> torch.Tensor:
    return torch.where(t > EPSILON, torch.pow(t, 1.0 / 3.0), KAPPA_SLOPE * t + OFFSET)


def _f_inv(t: torch.Tensor) -> torch.Tensor:
    return torch.where(t > EPSILON_CBRT, t ** 3, (t - OFFSET) / KAPPA_SLOPE)


def _white_tensor(white: ReferenceWhite) -> torch.Tensor:
    return torch.tensor(ensure_reference_white(white).as_tuple(), dtype=torch.float64)


def xyz2lab(
    x: float,
    y: float,
    z: float,
    white: ReferenceWhite = DEFAULT_WHITE
) -> Tuple[float, float, float]:
    """Convert XYZ to Lab.

    Parameters
    ----------
    x, y, z : float
        Tristimulus values on the Y=100 scale
    white : ReferenceWhite
        Reference white, default D65 2°

    Returns
    -------
    Tuple[float, float, float]
        (L, a, b); L in [0, 100] for in-gamut input
    """
    ref = _white_tensor(white)
    fx, fy, fz = _f(torch.tensor([x, y, z], dtype=torch.float64) / ref)
    lab = torch.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)])
    return tuple(lab.tolist())


def lab2xyz(
    l: float,
    a: float,
    b: float,
    white: ReferenceWhite = DEFAULT_WHITE
) -> Tuple[float, float, float]:
    """Convert Lab to XYZ. Inverse of xyz2lab for the same white."""
    ref = _white_tensor(white)
    fy = (l + 16) / 116
    f = torch.tensor([a / 500 + fy, fy, fy - b / 200], dtype=torch.float64)
    return tuple((_f_inv(f) * ref).tolist())
