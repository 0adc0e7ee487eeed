from __future__ import annotations
from enum import Enum
from typing import Tuple

Scalar = int | float
RGBATuple = Tuple[int, int, int, float]


class ColorSpace(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    LAB = "lab"
    XYZ = "xyz"
    CMYK = "cmyk"


class ColorKey(str, Enum):
    """Attribute names shared across every colorspace."""
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    ALPHA = "alpha"
    HUE = "hue"
    SATURATION = "saturation"
    LIGHTNESS = "lightness"
    L = "l"
    A = "a"
    B = "b"
    CYAN = "cyan"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    BLACK = "black"
    X = "x"
    Y = "y"
    Z = "z"


ALPHA_RANGE: Tuple[float, float] = (0.0, 1.0)
