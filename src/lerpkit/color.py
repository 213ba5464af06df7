"""Conversions between packed 24-bit colours, RGB and HSL.

Packed colours store red in bits 16-23, green in bits 8-15 and blue in bits
0-7. None of the helpers validate or clamp their input: out-of-range values
flow straight through the bit arithmetic.
"""

from __future__ import annotations

import logging
import math
import numbers

from .models import CHANNEL_MASK, Hsl, Rgb

logger = logging.getLogger(__name__)


def _to_int32(value: float) -> int:
    """Coerce ``value`` to a signed 32-bit integer the way bitwise operands are.

    Non-finite values become 0, the rest truncate toward zero and wrap.
    """
    if isinstance(value, numbers.Integral):
        n = int(value)
    else:
        f = float(value)
        if not math.isfinite(f):
            return 0
        n = int(f)
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _round_half_up(value: float) -> float:
    shifted = value + 0.5
    return float(math.floor(shifted)) if math.isfinite(shifted) else shifted


def hex_to_rgb(hex_color: int) -> Rgb:
    """Split a packed colour into its ``(r, g, b)`` channels."""
    value = _to_int32(hex_color)
    return Rgb(value >> 16, (value >> 8) & CHANNEL_MASK, value & CHANNEL_MASK)


def rgb_to_hex(r: float, g: float, b: float) -> int:
    """Pack ``r``, ``g`` and ``b`` into a single integer.

    Channels are truncated toward zero (NaN and infinities become 0) and the
    result wraps to a signed 32-bit integer. Values outside ``[0, 255]`` spill
    into the neighbouring channel's bits.
    """
    return _to_int32(_to_int32(r) << 16 | _to_int32(g) << 8 | _to_int32(b))


def hex_to_hsl(hex_color: int) -> Hsl:
    """Convert a packed colour to HSL with every component in ``[0, 1]``.

    Achromatic colours (all channels equal) report zero hue and saturation.
    """
    value = _to_int32(hex_color)
    r = (value >> 16) / 255
    g = ((value >> 8) & CHANNEL_MASK) / 255
    b = (value & CHANNEL_MASK) / 255
    hi = max(r, g, b)
    lo = min(r, g, b)
    lightness = (hi + lo) / 2
    saturation = 0.0
    hue = 0.0
    if hi != lo:
        d = hi - lo
        saturation = d / (hi + lo) if lightness < 0.5 else d / (2 - hi - lo)
        if r == hi:
            hue = (g - b) / d + (6 if g < b else 0)
        elif g == hi:
            hue = 2 + (b - r) / d
        else:
            hue = 4 + (r - g) / d
    hue /= 6
    return Hsl(hue, saturation, lightness)


def _hue_to_channel(t: float, p: float, q: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_hex(h: float, s: float, l: float) -> int:  # noqa: E741
    """Convert HSL components in ``[0, 1]`` back to a packed colour.

    With zero saturation the lightness is used as-is for every channel
    without scaling to ``[0, 255]``, so greys collapse to ``0x000000`` (or
    ``0x010101`` for full lightness).
    """
    if s == 0:
        logger.debug("Achromatic HSL input; channels use unscaled lightness %r", l)
        r = g = b = l
        return rgb_to_hex(r, g, b)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    red = _round_half_up(_hue_to_channel(h + 1 / 3, p, q) * 255)
    green = _round_half_up(_hue_to_channel(h, p, q) * 255)
    blue = _round_half_up(_hue_to_channel(h - 1 / 3, p, q) * 255)
    return rgb_to_hex(red, green, blue)


__all__ = ["hex_to_hsl", "hex_to_rgb", "rgb_to_hex", "hsl_to_hex"]
