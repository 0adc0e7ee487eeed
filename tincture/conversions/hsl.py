from __future__ import annotations
from typing import Tuple

from ..types.color_types import RGBATuple
from .pivot import rgba_tuple


def hue_to_rgb(m1: float, m2: float, h: float) -> float:
    """Channel value for a hue offset ``h`` in turns, split at 1/6, 1/2 and 2/3."""
    if h < 0:
        h += 1
    elif h > 1:
        h -= 1

    if h * 6 < 1:
        return m1 + (m2 - m1) * h * 6
    if h * 2 < 1:
        return m2
    if h * 3 < 2:
        return m1 + (m2 - m1) * (2 / 3 - h) * 6
    return m1


def hsl_to_rgba(hue: float, saturation: float, lightness: float, alpha: float) -> RGBATuple:
    h = hue / 360
    s, l = saturation, lightness
    m2 = l * (s + 1) if l <= 0.5 else l + s - l * s
    m1 = l * 2 - m2
    r = hue_to_rgb(m1, m2, h + 1 / 3)
    g = hue_to_rgb(m1, m2, h)
    b = hue_to_rgb(m1, m2, h - 1 / 3)
    return rgba_tuple(r * 255, g * 255, b * 255, alpha)


def rgba_to_hsl(rgba: RGBATuple) -> Tuple[float, float, float, float]:
    """
    Convert a pivot tuple to ``(hue, saturation, lightness, alpha)``.

    Hue is in degrees and is not rounded; saturation and lightness are unit floats.
    """
    red, green, blue, alpha = rgba
    r, g, b = red / 255, green / 255, blue / 255
    hi, lo = max(r, g, b), min(r, g, b)
    l = (hi + lo) / 2

    if hi == lo:
        return 0.0, 0.0, l, alpha

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
    if hi == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6 * 360, s, l, alpha
