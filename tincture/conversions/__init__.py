"""
Conversions
===========

Plain functions that move raw channel values between colorspaces. All
cross-space traffic goes through the pivot tuple ``(red, green, blue, alpha)``
with 8-bit integer channels and a unit float alpha.

Pivot
-----
- ``rgba_tuple(r, g, b, a)``: round and clamp into a pivot tuple
- ``is_rgba_tuple(value)``: check the pivot shape

Per space
---------
- ``rgba_to_hsl`` / ``hsl_to_rgba``
- ``rgba_to_cmyk`` / ``cmyk_to_rgba``
- ``rgba_to_xyz`` / ``xyz_to_rgba``
- ``rgba_to_lab`` / ``lab_to_rgba`` (through XYZ)
- ``xyz_to_lab`` / ``lab_to_xyz``

Dispatch
--------
- ``convert(values, from_space, to_space)``
- ``to_rgba(values, from_space)`` / ``from_rgba(rgba, to_space)``

Examples
--------
>>> from tincture.conversions import convert
>>> convert((255, 0, 0, 1.0), "rgb", "hsl")
(0.0, 1.0, 0.5, 1.0)
>>> convert((0.0, 1.0, 0.5, 1.0), "hsl", "rgb")
(255, 0, 0, 1.0)
"""
from .pivot import rgba_tuple, is_rgba_tuple
from .hsl import rgba_to_hsl, hsl_to_rgba, hue_to_rgb
from .cmyk import rgba_to_cmyk, cmyk_to_rgba
from .xyz import rgba_to_xyz, xyz_to_rgba
from .lab import rgba_to_lab, lab_to_rgba, xyz_to_lab, lab_to_xyz
from .wrapper import convert, to_rgba, from_rgba

__all__ = [
    "rgba_tuple", "is_rgba_tuple",
    "rgba_to_hsl", "hsl_to_rgba", "hue_to_rgb",
    "rgba_to_cmyk", "cmyk_to_rgba",
    "rgba_to_xyz", "xyz_to_rgba",
    "rgba_to_lab", "lab_to_rgba", "xyz_to_lab", "lab_to_xyz",
    "convert", "to_rgba", "from_rgba",
]
