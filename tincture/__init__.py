"""
Tincture - Color Model and Conversion Library
=============================================

Immutable color values in five colorspaces, lossless conversion between
them, key-based attribute access, perceptual distance and two mixing
models (linear and pigment-like spectral).

Key Features
------------
- RGB, HSL, LAB, XYZ and CMYK values, every field kept inside its range
- Conversions routed through an 8-bit RGBA pivot, round-trip safe
- ``get`` / ``put`` / ``update`` by key, from any colorspace
- CIE76 and redmean distance, similarity and nearest-color search
- Linear (alpha-aware) and Kubelka-Munk spectral mixing
- Parsing and rendering of hex, ``rgb()``, ``hsl()`` and named colors

Quick Start
-----------
>>> from tincture import parse, mix, get, put
>>> str(mix(parse("#FF00FF"), parse("#005500"), 0.25))
'#404040'
>>> str(put(parse("#000000"), "lightness", 1.0))
'#FFFFFF'
>>> get(parse("#FF0000"), "saturation")
1.0

Colorspace Values
-----------------
``RGB(red, green, blue, alpha=1.0)``       channels 0-255, alpha 0-1
``HSL(hue, saturation, lightness, alpha)`` hue wraps at 360
``LAB(l, a, b, alpha)``                    l 0-100, a/b -128-128
``XYZ(x, y, z, alpha)``                    D65 white at (95.047, 100, 108.883)
``CMYK(cyan, magenta, yellow, black, alpha)``

``Color`` wraps any of these together with an output format and an
optional background. Every operation accepts either and returns the same
shape it was given.
"""
import logging

from .errors import TinctureError, FormatError
from .config import Settings, get_settings
from .types import ColorSpace, ColorKey, FormatType
from .colors import (
    ColorBase, RGB, HSL, LAB, XYZ, CMYK, Color,
    convert, rgba_tuple, rgb, hsl, lab, xyz, cmyk, colorspace_op,
)
from .attributes import get, put, update, min_max, ATTRIBUTES
from .distance import (
    distance, similarity, fast_distance, fast_similarity, most_similar, text_color,
)
from .formats import parse, try_parse, to_text, with_format, NAMED_COLORS
from .mixing import mix, spectral_mix, average, flatten_alpha, trunc_alpha
from .adjust import (
    lighten, darken, saturate, desaturate, rotate_hue,
    grayscale, is_grayscale, shade_number, darkmode,
)
from .palette import complement, analogous, triadic, tetradic, between

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # errors and settings
    "TinctureError", "FormatError", "Settings", "get_settings",
    # types
    "ColorSpace", "ColorKey", "FormatType",
    # values
    "ColorBase", "RGB", "HSL", "LAB", "XYZ", "CMYK", "Color",
    "convert", "rgba_tuple", "rgb", "hsl", "lab", "xyz", "cmyk", "colorspace_op",
    # attributes
    "get", "put", "update", "min_max", "ATTRIBUTES",
    # distance
    "distance", "similarity", "fast_distance", "fast_similarity", "most_similar", "text_color",
    # text
    "parse", "try_parse", "to_text", "with_format", "NAMED_COLORS",
    # mixing
    "mix", "spectral_mix", "average", "flatten_alpha", "trunc_alpha",
    # adjustments
    "lighten", "darken", "saturate", "desaturate", "rotate_hue",
    "grayscale", "is_grayscale", "shade_number", "darkmode",
    # palettes
    "complement", "analogous", "triadic", "tetradic", "between",
]
