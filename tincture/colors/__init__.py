from .color_base import ColorBase, build_registry
from .rgb import RGB
from .hsl import HSL
from .lab import LAB
from .xyz import XYZ
from .cmyk import CMYK
from .color import (
    Color, AnyColor, colorspace_classes, unwrap, convert, rgba_tuple,
    rgb, hsl, lab, xyz, cmyk,
)
from .dispatch import colorspace_op, rewrap

__all__ = [
    "ColorBase", "build_registry",
    "RGB", "HSL", "LAB", "XYZ", "CMYK",
    "Color", "AnyColor", "colorspace_classes", "unwrap", "convert", "rgba_tuple",
    "rgb", "hsl", "lab", "xyz", "cmyk",
    "colorspace_op", "rewrap",
]
