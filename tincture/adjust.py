from __future__ import annotations
import math

from .attributes import update
from .colors import HSL, RGB, colorspace_op
from .colors.color import AnyColor
from .types.color_types import ColorKey, ColorSpace
from .utils.num_utils import round_half_up


def lighten(color: AnyColor, amount: float) -> AnyColor:
    """Close ``amount`` (0 to 1) of the lightness gap towards white."""
    return update(color, ColorKey.LIGHTNESS, lambda val, rng: val + (rng[1] - val) * amount)


def darken(color: AnyColor, amount: float) -> AnyColor:
    """Close ``amount`` (0 to 1) of the lightness gap towards black."""
    return update(color, ColorKey.LIGHTNESS, lambda val, rng: val - (val - rng[0]) * amount)


def saturate(color: AnyColor, amount: float) -> AnyColor:
    return update(color, ColorKey.SATURATION, lambda val, rng: val + (rng[1] - val) * amount)


def desaturate(color: AnyColor, amount: float) -> AnyColor:
    return update(color, ColorKey.SATURATION, lambda val, rng: val - (val - rng[0]) * amount)


def rotate_hue(color: AnyColor, degrees: float) -> AnyColor:
    return update(color, ColorKey.HUE, lambda val: val + degrees)


def grayscale(color: AnyColor) -> AnyColor:
    return update(color, ColorKey.SATURATION, lambda _: 0.0)


@colorspace_op(ColorSpace.RGB)
def is_grayscale(color: RGB, threshold: float = 0) -> bool:
    """
    True when red, green and blue are equal, or all within ``threshold``
    (0 to 255) of their mean.
    """
    channels = (color.red, color.green, color.blue)
    mean = sum(channels) / 3
    return all(abs(mean - c) <= threshold for c in channels)


@colorspace_op(ColorSpace.RGB)
def shade_number(color: RGB) -> int:
    """Perceived brightness, 0 to 255."""
    return int(round_half_up(math.sqrt(
        0.299 * color.red ** 2 + 0.587 * color.green ** 2 + 0.114 * color.blue ** 2
    )))


def _darkmode_saturation(n: float) -> float:
    if n == 0.0:
        return 0.0
    return n * (1 - 10 * math.log(n * 100) / math.log(4) * n / 100)


@colorspace_op(ColorSpace.HSL)
def darkmode(color: HSL) -> HSL:
    """Tone saturation down so the color sits better on a dark background."""
    return color.replace(ColorKey.SATURATION, _darkmode_saturation(color.saturation))
