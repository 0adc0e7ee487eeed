from __future__ import annotations
from typing import Tuple

from ..types.color_types import RGBATuple
from .pivot import rgba_tuple


def rgba_to_cmyk(rgba: RGBATuple) -> Tuple[float, float, float, float, float]:
    red, green, blue, alpha = rgba
    r, g, b = red / 255, green / 255, blue / 255
    k = 1 - max(r, g, b)
    if k == 1:
        # pure black, c/m/y are undefined
        return 0.0, 0.0, 0.0, 1.0, alpha
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return c, m, y, k, alpha


def cmyk_to_rgba(cyan: float, magenta: float, yellow: float, black: float, alpha: float) -> RGBATuple:
    r = 255 * (1 - cyan) * (1 - black)
    g = 255 * (1 - magenta) * (1 - black)
    b = 255 * (1 - yellow) * (1 - black)
    return rgba_tuple(r, g, b, alpha)
