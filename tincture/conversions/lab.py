"""CIE XYZ <-> CIELAB, and LAB to and from the pivot through XYZ."""
from __future__ import annotations
import math
from typing import Tuple

from ..types.color_types import RGBATuple
from ..utils.num_utils import round_half_up, nth_root
from .xyz import rgba_to_xyz, xyz_to_rgba

# reference white
XN = 95.0489
YN = 100.0
ZN = 108.8840

EPSILON = 216 / 24389.0   # (6/29)^3
KAPPA = 24389 / 27.0
INVERSE_EPSILON = 0.008856
REF_WHITE = (95.047, 100.0, 108.883)


def _f(t: float) -> float:
    if t < EPSILON:
        return 1 / 116.0 * (KAPPA * t + 16)
    return nth_root(t, 3)


def _f_inverse(v: float) -> float:
    cubed = math.pow(v, 3)
    if cubed > INVERSE_EPSILON:
        return cubed
    return (v - 16 / 116) / 7.787


def xyz_to_lab(x: float, y: float, z: float, alpha: float) -> Tuple[float, float, float, float]:
    """Forward transform. Every channel is rounded to 4 decimal places."""
    yr = _f(y / YN)
    l = round_half_up(116 * yr - 16, 4)
    a = round_half_up(500 * (_f(x / XN) - yr), 4)
    b = round_half_up(200 * (yr - _f(z / ZN)), 4)
    return l, a, b, alpha


def lab_to_xyz(l: float, a: float, b: float, alpha: float) -> Tuple[float, float, float, float]:
    fy = (l + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200
    x, y, z = (_f_inverse(v) * white for v, white in zip((fx, fy, fz), REF_WHITE))
    return x, y, z, alpha


def rgba_to_lab(rgba: RGBATuple) -> Tuple[float, float, float, float]:
    return xyz_to_lab(*rgba_to_xyz(rgba))


def lab_to_rgba(l: float, a: float, b: float, alpha: float) -> RGBATuple:
    return xyz_to_rgba(*lab_to_xyz(l, a, b, alpha))
