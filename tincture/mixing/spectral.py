from __future__ import annotations
import numpy as np

from ..colors import RGB, colorspace_op
from ..conversions.xyz import XYZ_TO_RGB
from ..types.color_types import ColorSpace
from ..utils.num_utils import round_half_up
from .spectral_data import SPECTRAL_BASIS, SpectralBasis

EPSILON = 1e-8
_XYZ_TO_RGB = np.array(XYZ_TO_RGB, dtype=np.float64)


def uncompand(channel: float) -> float:
    """8-bit sRGB channel to linear light in [0, 1]."""
    x = channel / 255
    return x / 12.92 if x < 0.04045 else ((x + 0.055) / 1.055) ** 2.4


def compand(x: float) -> float:
    return x * 12.92 if x < 0.0031308 else 1.055 * x ** (1 / 2.4) - 0.055


def reflectance(color: RGB, basis: SpectralBasis = SPECTRAL_BASIS) -> np.ndarray:
    """
    Project an RGB color onto the basis as a reflectance curve.

    The linear color splits into a white part, secondary (cyan, magenta,
    yellow) parts and primary (red, green, blue) parts, each weighting one
    basis curve.
    """
    r, g, b = (uncompand(c) for c in (color.red, color.green, color.blue))
    w = min(r, g, b)
    r, g, b = r - w, g - w, b - w

    c = min(g, b)
    m = min(r, b)
    y = min(r, g)
    red = min(max(0.0, r - b), max(0.0, r - g))
    green = min(max(0.0, g - b), max(0.0, g - r))
    blue = min(max(0.0, b - g), max(0.0, b - r))

    curve = (
        w * basis.white + c * basis.cyan + m * basis.magenta + y * basis.yellow
        + red * basis.red + green * basis.green + blue * basis.blue
    )
    return np.maximum(curve, EPSILON)


def luminance(curve: np.ndarray, basis: SpectralBasis = SPECTRAL_BASIS) -> float:
    return float(np.dot(curve, basis.cmf[1]))


def reflectance_to_rgb(curve: np.ndarray, basis: SpectralBasis = SPECTRAL_BASIS) -> tuple:
    xyz = basis.cmf @ curve
    linear = _XYZ_TO_RGB @ xyz
    return tuple(
        int(round_half_up(min(max(compand(float(v)), 0.0), 1.0) * 255)) for v in linear
    )


def kubelka_munk(curve1: np.ndarray, curve2: np.ndarray, concentration: float) -> np.ndarray:
    """Mix two reflectance curves; ``concentration`` is the share of ``curve2``."""
    ks1 = (1 - curve1) ** 2 / (2 * curve1)
    ks2 = (1 - curve2) ** 2 / (2 * curve2)
    ks = (1 - concentration) * ks1 + concentration * ks2
    return 1 + ks - np.sqrt(ks ** 2 + 2 * ks)


@colorspace_op(ColorSpace.RGB, ColorSpace.RGB)
def spectral_mix(color1: RGB, color2: RGB, weight: float = 0.5) -> RGB:
    """
    Mix two colors the way pigments mix.

    Both colors are turned into reflectance curves, combined with the
    Kubelka-Munk model and projected back to RGB, so blue and yellow make
    green instead of gray. ``weight`` is the share of ``color1``; the
    effective concentration is scaled by each color's luminance.
    """
    curve1 = reflectance(color1)
    curve2 = reflectance(color2)
    l1 = luminance(curve1)
    l2 = luminance(curve2)

    t = 1 - weight
    t1 = l1 * (1 - t) ** 2
    t2 = l2 * t ** 2
    concentration = t2 / (t1 + t2) if t1 + t2 > 0 else t

    r, g, b = reflectance_to_rgb(kubelka_munk(curve1, curve2, concentration))
    alpha = color1.alpha * weight + color2.alpha * (1 - weight)
    return RGB(r, g, b, alpha)
