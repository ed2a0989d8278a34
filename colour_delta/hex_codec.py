"""Hexadecimal colour strings ↔ RGBA tuples.

Accepted forms (case-insensitive, leading '#' optional):
    RGB, RGBA, RRGGBB, RRGGBBAA

Short forms are nibble-doubled ("F0A" → "FF00AA"). The trailing byte of an
8-digit value is alpha, normalised to [0, 1]; otherwise alpha is 1.0.

Malformed strings raise InvalidFormatError. There is no lenient fallback.
"""

import math
import string
from typing import Optional, Tuple

from .utils.compute import clamp_rgba, round_half_up

_HEX_DIGITS = frozenset(string.hexdigits)
_VALID_LENGTHS = (3, 4, 6, 8)


class InvalidFormatError(ValueError):
    """Hex colour string has the wrong length or a non-hex character."""


def hex2rgba(hex_str: str) -> Tuple[int, int, int, float]:
    """Decode a hex colour string.

    Parameters
    ----------
    hex_str : str
        "#RGB", "#RGBA", "#RRGGBB" or "#RRGGBBAA", '#' optional

    Returns
    -------
    Tuple[int, int, int, float]
        (r, g, b) in [0, 255], alpha in [0, 1]

    Raises
    ------
    InvalidFormatError
        If hex is not a string, contains non-hex characters, or has a digit
        count outside {3, 4, 6, 8}
    """
    if not isinstance(hex_str, str):
        raise InvalidFormatError(f"Invalid HEX format: expected str, got {type(hex_str).__name__}")

    digits = hex_str[1:] if hex_str.startswith('#') else hex_str
    if not digits or not set(digits) <= _HEX_DIGITS or len(digits) not in _VALID_LENGTHS:
        raise InvalidFormatError(
            f"Invalid HEX format: {hex_str!r} (expected 3, 4, 6 or 8 hex digits)"
        )

    if len(digits) in (3, 4):
        digits = ''.join(c * 2 for c in digits)

    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return r, g, b, a


def rgba2hex(
    r: float,
    g: float,
    b: float,
    a: float = 1.0,
    include_alpha: Optional[bool] = None
) -> str:
    """Encode RGBA as an uppercase "#RRGGBB" or "#RRGGBBAA" string.

    Channels are clamped and rounded to bytes first. The alpha byte is
    written when include_alpha is True, or when include_alpha is None and
    the colour is not fully opaque.

    Raises
    ------
    ValueError
        If any component is NaN (there is no byte to write for it)
    """
    r, g, b, a = clamp_rgba(r, g, b, a)
    if any(math.isnan(c) for c in (r, g, b, a)):
        raise ValueError(f"Cannot encode NaN component as hex: ({r}, {g}, {b}, {a})")
    if include_alpha is None:
        include_alpha = a < 1.0

    channels = [r, g, b] + ([a * 255] if include_alpha else [])
    return '#' + ''.join(f"{round_half_up(c):02X}" for c in channels)
