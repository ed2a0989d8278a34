"""CIEDE2000 colour difference (ΔE00).

Implements the full formula of Sharma, Wu & Dalal (2005), as derived on
Bruce Lindbloom's reference pages, for a single pair of Lab triples.

Interpretation (k_L = k_C = k_H = 1):
    ΔE00 < 1     not perceptible
    1 – 2.3      just noticeable difference (JND)
    > 10         clearly different colours

The hue terms are the fragile part:
    - h' is 0 when both b and a' are 0 (atan2 is undefined there)
    - Δh' takes the short way round the circle, |Δh'| <= 180
    - the mean hue is shifted by 180° whenever |h1' - h2'| > 180 and then
      reduced into [0, 360), so the rotation term sees the same angle as the
      Sharma (sum ± 360) / 2 rule

Non-finite input is not rejected; NaN flows through to the result.
"""

import math
from typing import Sequence

import torch

from .utils.compute import hue_degrees, hue_difference, mean_hue

_POW25_7 = 25.0 ** 7


def _chroma_weight(c: torch.Tensor) -> torch.Tensor:
    c7 = c ** 7
    return torch.sqrt(c7 / (c7 + _POW25_7))


def delta_e00(
    lab1: Sequence[float],
    lab2: Sequence[float],
    k_l: float = 1.0,
    k_c: float = 1.0,
    k_h: float = 1.0
) -> float:
    """Compute CIEDE2000 colour difference.

    Parameters
    ----------
    lab1, lab2 : Sequence[float]
        (L, a, b) triples
    k_l, k_c, k_h : float
        Parametric weighting factors for lightness, chroma, hue (default 1)

    Returns
    -------
    float
        ΔE00 >= 0, symmetric in its arguments, 0 for identical colours

    Raises
    ------
    ValueError
        If a weighting factor is not positive

    Notes
    -----
    Both triples are stacked into one (2, 3) float64 tensor so each step is
    a single elementwise op over the pair.
    """
    if not (k_l > 0 and k_c > 0 and k_h > 0):
        raise ValueError(f"Weighting factors must be positive, got k_l={k_l}, k_c={k_c}, k_h={k_h}")

    lab = torch.tensor([list(lab1), list(lab2)], dtype=torch.float64)
    L, a, b = lab[:, 0], lab[:, 1], lab[:, 2]

    # Chroma compensation of the a axis
    c_bar = torch.hypot(a, b).mean()
    G = 0.5 * (1.0 - _chroma_weight(c_bar))
    a_p = a * (1.0 + G)

    C_p = torch.hypot(a_p, b)
    h_p = hue_degrees(b, a_p)
    C1p, C2p = C_p[0], C_p[1]
    h1p, h2p = h_p[0], h_p[1]

    dLp = L[1] - L[0]
    dCp = C2p - C1p
    c_prod = C1p * C2p
    dhp = torch.where(c_prod != 0, hue_difference(h1p, h2p), torch.zeros_like(c_prod))
    dHp = 2.0 * torch.sqrt(c_prod) * torch.sin(torch.deg2rad(dhp) / 2.0)

    L_bar = L.mean()
    C_bar_p = C_p.mean()
    h_bar = mean_hue(h1p, h2p)

    T = (1.0
         - 0.17 * torch.cos(torch.deg2rad(h_bar - 30.0))
         + 0.24 * torch.cos(torch.deg2rad(2.0 * h_bar))
         + 0.32 * torch.cos(torch.deg2rad(3.0 * h_bar + 6.0))
         - 0.20 * torch.cos(torch.deg2rad(4.0 * h_bar - 63.0)))

    L50_sq = (L_bar - 50.0) ** 2
    SL = 1.0 + 0.015 * L50_sq / torch.sqrt(20.0 + L50_sq)
    SC = 1.0 + 0.045 * C_bar_p
    SH = 1.0 + 0.015 * C_bar_p * T

    d_theta = 30.0 * torch.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    RC = 2.0 * _chroma_weight(C_bar_p)
    RT = -RC * torch.sin(torch.deg2rad(2.0 * d_theta))

    l_term = dLp / (k_l * SL)
    c_term = dCp / (k_c * SC)
    h_term = dHp / (k_h * SH)

    radicand = l_term ** 2 + c_term ** 2 + h_term ** 2 + RT * c_term * h_term
    # Rounding can push this a hair below zero for near-identical inputs; NaN falls through
    radicand = torch.where(radicand < 0, torch.zeros_like(radicand), radicand)
    return math.sqrt(radicand.item())


deltaE00 = delta_e00
