"""Hue-based palettes. Every result keeps the input's wrapper."""
from __future__ import annotations
from typing import List, Tuple

from .attributes import update
from .colors import HSL, colorspace_op
from .colors.color import AnyColor
from .types.color_types import ColorKey, ColorSpace


def _shift(color: AnyColor, degrees: float) -> AnyColor:
    return update(color, ColorKey.HUE, lambda hue: hue + degrees)


def complement(color: AnyColor) -> AnyColor:
    return _shift(color, 180)


def analogous(color: AnyColor, degrees: float = 30) -> Tuple[AnyColor, AnyColor]:
    """The two colors ``degrees`` away on either side of the hue wheel."""
    return _shift(color, -degrees), _shift(color, degrees)


def triadic(color: AnyColor, degrees: float = 120) -> Tuple[AnyColor, AnyColor]:
    return analogous(color, degrees)


def tetradic(color: AnyColor) -> Tuple[AnyColor, AnyColor, AnyColor]:
    return _shift(color, 90), _shift(color, 180), _shift(color, -90)


@colorspace_op(ColorSpace.HSL, ColorSpace.HSL)
def between(color1: HSL, color2: HSL, steps: int = 1) -> List[HSL]:
    """
    ``steps`` evenly spaced HSL colors strictly between ``color1`` and
    ``color2``, ordered from ``color1`` towards ``color2``.
    """
    if steps < 1:
        raise ValueError("between() needs at least one step")
    colors = []
    for i in range(steps, 0, -1):
        colors.append(HSL(
            color2.hue + (color1.hue - color2.hue) / (steps + 1) * i,
            color2.saturation + (color1.saturation - color2.saturation) / (steps + 1) * i,
            color2.lightness + (color1.lightness - color2.lightness) / (steps + 1) * i,
            color2.alpha + (color1.alpha - color2.alpha) / (steps + 1) * i,
        ))
    return colors
