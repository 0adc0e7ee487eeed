"""sRGB (D65) <-> CIE XYZ, with XYZ scaled so that Y of white is 100."""
from __future__ import annotations
import math
from typing import Tuple

from ..types.color_types import RGBATuple
from ..utils.num_utils import round_half_up
from .pivot import rgba_tuple

RGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)

XYZ_TO_RGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)


def linearize(ratio: float) -> float:
    """Undo sRGB gamma for a unit channel and scale to [0, 100]."""
    if ratio > 0.04045:
        normalized = math.pow((ratio + 0.055) / 1.055, 2.4)
    else:
        normalized = ratio / 12.92
    return normalized * 100


def gamma_channel(value: float) -> int:
    """Apply sRGB gamma to a linear channel in [0, 100] and scale to 8 bits.

    Values outside the real domain of the power curve give 0.
    """
    c = value / 100
    try:
        if abs(c) <= 0.0031308:
            c = 12.92 * c
        else:
            c = 1.055 * math.pow(c, 1 / 2.4) - 0.055
    except (ValueError, OverflowError):
        return 0
    return int(round_half_up(c * 255))


def rgba_to_xyz(rgba: RGBATuple) -> Tuple[float, float, float, float]:
    red, green, blue, alpha = rgba
    r, g, b = linearize(red / 255), linearize(green / 255), linearize(blue / 255)
    x, y, z = (
        round_half_up(r * cr + g * cg + b * cb, 4)
        for cr, cg, cb in RGB_TO_XYZ
    )
    return x, y, z, alpha


def xyz_to_rgba(x: float, y: float, z: float, alpha: float) -> RGBATuple:
    r, g, b = (
        gamma_channel(cx * x + cy * y + cz * z)
        for cx, cy, cz in XYZ_TO_RGB
    )
    return rgba_tuple(r, g, b, alpha)
