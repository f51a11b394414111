"""
Hex color codec for event accent colors.

Colors travel through the app as normalized RGB triples (channels in
[0, 1]) and are persisted as canonical ``#RRGGBB`` strings.
"""
import string
from typing import NamedTuple

HEX_DIGITS = set(string.hexdigits)


class RGB(NamedTuple):
    """Normalized RGB color."""
    red: float
    green: float
    blue: float


class RGBA(NamedTuple):
    """Normalized RGB color with alpha."""
    red: float
    green: float
    blue: float
    alpha: float


def _to_byte(channel: float) -> int:
    channel = min(max(channel, 0.0), 1.0)
    return int(channel * 255)


def encode(color: RGB) -> str:
    """Encode a normalized color as ``#RRGGBB``, truncating each channel."""
    r, g, b = (_to_byte(c) for c in color)
    return "#%02X%02X%02X" % (r, g, b)


def _strip(hex_str: str) -> str:
    digits = hex_str.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) != 6 or not set(digits) <= HEX_DIGITS:
        raise ValueError(f"Invalid color hex: {hex_str!r}")
    return digits


def decode(hex_str: str) -> RGB:
    """Decode ``#RRGGBB`` (leading ``#`` optional) into a normalized color."""
    value = int(_strip(hex_str), 16)
    return RGB(
        red=((value >> 16) & 0xFF) / 255.0,
        green=((value >> 8) & 0xFF) / 255.0,
        blue=(value & 0xFF) / 255.0,
    )


def normalize(hex_str: str) -> str:
    """Return the canonical uppercase ``#RRGGBB`` form of a hex color."""
    return "#" + _strip(hex_str).upper()


def with_alpha(color: RGB, alpha: float) -> RGBA:
    return RGBA(color.red, color.green, color.blue, alpha)
