"""Test hexadecimal colour parsing and formatting.

Tests for colour_delta.hex_codec:
    - hex2rgba() accepts 3/4/6/8 digits, optional '#', any case
    - hex2rgba() raises InvalidFormatError on bad length or characters
    - rgba2hex() emits uppercase, zero-padded bytes, alpha only when needed
    - rgba2hex() rounds .5 ties up and rejects NaN components
    - decode → encode reproduces 6- and 8-digit input

Run:
    pytest tests/test_hex_codec.py -v
"""

import numpy as np
import pytest

from colour_delta.hex_codec import InvalidFormatError, hex2rgba, rgba2hex


# ============================================================================
# DECODE
# ============================================================================

def test_short_white():
    """#FFF expands to opaque white."""
    assert hex2rgba("#FFF") == (255, 255, 255, 1.0)


def test_eight_digit_opaque_black():
    """Trailing FF byte is alpha 1.0, RGB from the first six digits."""
    assert hex2rgba("#000000FF") == (0, 0, 0, 1.0)


def test_eight_digit_channels_in_order():
    """RGB come from the leading byte pairs, alpha from the last."""
    r, g, b, a = hex2rgba("#12345678")
    assert (r, g, b) == (0x12, 0x34, 0x56)
    assert a == pytest.approx(0x78 / 255)


def test_four_digit_nibble_doubling():
    """#RGBA doubles every digit including alpha."""
    r, g, b, a = hex2rgba("#F0A8")
    assert (r, g, b) == (255, 0, 170)
    assert a == pytest.approx(0x88 / 255)


def test_hash_is_optional():
    """Leading '#' is stripped if present, not required."""
    assert hex2rgba("abc") == hex2rgba("#AABBCC") == (0xAA, 0xBB, 0xCC, 1.0)


def test_case_insensitive():
    """Lower, upper and mixed case digits decode identically."""
    assert hex2rgba("#ff00aa") == hex2rgba("#FF00AA") == hex2rgba("#Ff00aA")


def test_six_digit_alpha_defaults_to_one():
    assert hex2rgba("#336699")[3] == 1.0


@pytest.mark.parametrize("bad", [
    "",
    "#",
    "#12",
    "#12345",
    "#1234567",
    "#123456789",
    "#GGG",
    "#zz0000",
    "#12 345",
    "##FFF",
    "0x123456",
])
def test_invalid_hex_raises(bad):
    """Wrong length or non-hex characters fail loudly."""
    with pytest.raises(InvalidFormatError, match="Invalid HEX format"):
        hex2rgba(bad)


@pytest.mark.parametrize("bad", [None, 0xFFFFFF, b"#FFFFFF"])
def test_non_string_raises(bad):
    with pytest.raises(InvalidFormatError):
        hex2rgba(bad)


def test_invalid_format_is_value_error():
    """Callers catching ValueError also catch malformed hex."""
    with pytest.raises(ValueError):
        hex2rgba("#XYZ")


# ============================================================================
# ENCODE
# ============================================================================

def test_encode_uppercase_zero_padded():
    assert rgba2hex(255, 0, 10) == "#FF000A"


def test_encode_alpha_only_when_translucent():
    """Opaque colours encode to 6 digits, translucent ones to 8."""
    assert rgba2hex(255, 0, 170, 1.0) == "#FF00AA"
    assert rgba2hex(255, 0, 170, 0x80 / 255) == "#FF00AA80"


def test_encode_force_alpha():
    assert rgba2hex(255, 0, 170, 1.0, include_alpha=True) == "#FF00AAFF"
    assert rgba2hex(255, 0, 170, 0.5, include_alpha=False) == "#FF00AA"


def test_encode_clamps_and_rounds():
    """Out-of-range channels are clamped, fractional ones rounded."""
    assert rgba2hex(300, -5, 127.6) == "#FF0080"


def test_encode_rounds_ties_up():
    """.5 ties go up, not to the even neighbour."""
    assert rgba2hex(0.5, 2.5, 127.5) == "#010380"
    assert rgba2hex(0, 0, 0, 0.5) == "#00000080"


@pytest.mark.parametrize("args", [
    (float("nan"), 0, 0),
    (0, 0, float("nan")),
    (0, 0, 0, float("nan")),
])
def test_encode_nan_raises(args):
    """NaN alpha must not silently become an opaque 6-digit string."""
    with pytest.raises(ValueError, match="NaN"):
        rgba2hex(*args)


# ============================================================================
# ROUND-TRIP
# ============================================================================

def test_six_digit_roundtrip():
    """decode → encode reproduces the same uppercase digits."""
    rng = np.random.default_rng(123)
    for value in rng.integers(0, 0xFFFFFF + 1, size=200):
        hex_str = f"#{int(value):06X}"
        assert rgba2hex(*hex2rgba(hex_str)) == hex_str


def test_eight_digit_roundtrip():
    rng = np.random.default_rng(7)
    for value in rng.integers(0, 0xFFFFFFFF + 1, size=200, dtype=np.int64):
        hex_str = f"#{int(value):08X}"
        assert rgba2hex(*hex2rgba(hex_str), include_alpha=True) == hex_str


def test_lowercase_input_normalises_to_uppercase():
    assert rgba2hex(*hex2rgba("#a1b2c3")) == "#A1B2C3"
