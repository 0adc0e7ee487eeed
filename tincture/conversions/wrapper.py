from __future__ import annotations
from typing import Callable, Dict, Tuple

from ..types.color_types import ColorSpace, RGBATuple
from .pivot import rgba_tuple
from .hsl import hsl_to_rgba, rgba_to_hsl
from .cmyk import cmyk_to_rgba, rgba_to_cmyk
from .xyz import xyz_to_rgba, rgba_to_xyz
from .lab import lab_to_rgba, rgba_to_lab

Values = Tuple[float, ...]


def _rgba_identity(rgba: RGBATuple) -> Values:
    return rgba_tuple(*rgba)


TO_RGBA: Dict[ColorSpace, Callable[..., RGBATuple]] = {
    ColorSpace.RGB: rgba_tuple,
    ColorSpace.HSL: hsl_to_rgba,
    ColorSpace.CMYK: cmyk_to_rgba,
    ColorSpace.XYZ: xyz_to_rgba,
    ColorSpace.LAB: lab_to_rgba,
}

FROM_RGBA: Dict[ColorSpace, Callable[[RGBATuple], Values]] = {
    ColorSpace.RGB: _rgba_identity,
    ColorSpace.HSL: rgba_to_hsl,
    ColorSpace.CMYK: rgba_to_cmyk,
    ColorSpace.XYZ: rgba_to_xyz,
    ColorSpace.LAB: rgba_to_lab,
}


def to_rgba(values: Values, from_space: ColorSpace) -> RGBATuple:
    """Convert raw channel values (alpha last) of ``from_space`` to the pivot tuple."""
    return TO_RGBA[ColorSpace(from_space)](*values)


def from_rgba(rgba: RGBATuple, to_space: ColorSpace) -> Values:
    """Convert a pivot tuple to raw channel values (alpha last) of ``to_space``."""
    return FROM_RGBA[ColorSpace(to_space)](rgba_tuple(*rgba))


def convert(values: Values, from_space: ColorSpace, to_space: ColorSpace) -> Values:
    """
    Convert raw channel values between colorspaces.

    Every conversion between two different spaces goes through the pivot
    tuple; converting a space to itself returns the values unchanged.
    """
    from_space, to_space = ColorSpace(from_space), ColorSpace(to_space)
    if from_space == to_space:
        return tuple(values)
    return from_rgba(to_rgba(values, from_space), to_space)
