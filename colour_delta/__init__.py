"""colour_delta: colour encodings and CIEDE2000 perceptual difference.

Converts between hexadecimal strings, 8-bit sRGB(A), CIE XYZ and CIE L*a*b*,
and measures how different two colours look with ΔE00.

Architecture layers (strict one-way dependency):
    colour → {hex_codec, rgb_xyz, xyz_lab, delta_e} → utils/

Key invariants:
    - Every operation is a pure function over small tuples; no shared mutable state
    - Out-of-range RGB/alpha is clamped, malformed hex raises InvalidFormatError
    - One reference white (D65, 2° observer by default) per LAB round-trip
    - Alpha is carried as metadata and never enters colour arithmetic

Quick start:
    >>> from colour_delta import hex2lab, delta_e00
    >>> delta_e00(hex2lab("#FF0000"), hex2lab("#FE0101"))
"""

__version__ = "1.0.0"

from .colour import (
    adjust_lightness,
    adjustLightness,
    darken,
    hex2lab,
    hex_delta_e00,
    lab2rgba,
    lighten,
    rgba2lab,
)
from .delta_e import delta_e00, deltaE00
from .hex_codec import InvalidFormatError, hex2rgba, rgba2hex
from .rgb_xyz import gamma_encode, linearize, rgb2xyz, xyz2rgba
from .utils.logging_config import get_logger, setup_logging
from .utils.validators import (
    D65_2,
    D65_10,
    ReferenceWhite,
    get_reference_white,
    load_colour_config,
    resolve_reference_white,
)
from .xyz_lab import lab2xyz, xyz2lab

__all__ = [
    # Codec
    'hex2rgba',
    'rgba2hex',
    'InvalidFormatError',
    # Transforms
    'linearize',
    'gamma_encode',
    'rgb2xyz',
    'xyz2rgba',
    'xyz2lab',
    'lab2xyz',
    # Difference
    'delta_e00',
    'deltaE00',
    # Facade
    'hex2lab',
    'rgba2lab',
    'lab2rgba',
    'adjust_lightness',
    'adjustLightness',
    'lighten',
    'darken',
    'hex_delta_e00',
    # Config
    'ReferenceWhite',
    'D65_2',
    'D65_10',
    'get_reference_white',
    'resolve_reference_white',
    'load_colour_config',
    # Logging
    'setup_logging',
    'get_logger',
]
