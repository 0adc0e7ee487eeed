from __future__ import annotations
import logging
from typing import Any, Iterable, Optional

import numpy as np

from ..colors import RGB, Color, ColorBase, colorspace_op, rewrap, unwrap
from ..colors.color import AnyColor
from ..config import DEFAULT_BACKGROUND, get_settings
from ..errors import FormatError
from ..formats.parser import parse
from ..types.color_types import ColorKey, ColorSpace
from ..utils.num_utils import round_half_up

logger = logging.getLogger(__name__)


@colorspace_op(ColorSpace.RGB, ColorSpace.RGB)
def mix(color1: RGB, color2: RGB, weight: float = 0.5) -> RGB:
    """
    Weighted average of two colors that accounts for their transparency.

    ``weight`` is the share of ``color1``. The channel weights lean towards
    the more opaque color; alpha is blended linearly by ``weight``.
    """
    w = weight * 2 - 1
    a = color1.alpha - color2.alpha
    w1 = ((w if w * a == -1 else (w + a) / (1 + w * a)) + 1) / 2
    w2 = 1 - w1

    red = round_half_up(color1.red * w1 + color2.red * w2)
    green = round_half_up(color1.green * w1 + color2.green * w2)
    blue = round_half_up(color1.blue * w1 + color2.blue * w2)
    alpha = color1.alpha * weight + color2.alpha * (1 - weight)
    return RGB(red, green, blue, alpha)


def average(colors: Iterable[AnyColor]) -> AnyColor:
    """Root-mean-square of each RGB channel and of alpha."""
    items = list(colors)
    if not items:
        raise ValueError("average() needs at least one color")
    rgba = np.array([unwrap(c).to_rgba() for c in items], dtype=np.float64)
    rms = np.sqrt(np.mean(rgba ** 2, axis=0))
    result = RGB(
        round_half_up(float(rms[0])),
        round_half_up(float(rms[1])),
        round_half_up(float(rms[2])),
        float(rms[3]),
    )
    first = items[0]
    return rewrap(result, first if isinstance(first, Color) else None)


@colorspace_op()
def trunc_alpha(color: ColorBase) -> ColorBase:
    """Drop transparency, keeping the colorspace."""
    return color.replace(ColorKey.ALPHA, 1.0)


def _as_colorspace(value: Any) -> ColorBase:
    if isinstance(value, (Color, ColorBase)):
        return unwrap(value)
    return parse(value).color


def default_background() -> ColorBase:
    """Opaque background from the settings, white when they are unusable."""
    configured = get_settings().background
    try:
        background = _as_colorspace(configured)
    except FormatError:
        logger.warning("invalid background %r in settings, using %s", configured, DEFAULT_BACKGROUND)
        background = _as_colorspace(DEFAULT_BACKGROUND)
    if not background.is_opaque:
        logger.warning("background %r is translucent, dropping its alpha", configured)
        background = background.replace(ColorKey.ALPHA, 1.0)
    return background


def flatten_alpha(color: AnyColor, background: Optional[Any] = None) -> AnyColor:
    """
    Resolve a translucent color against an opaque background.

    The background is the argument when given, then the wrapper's own
    background, then the configured default. Opaque colors are returned
    unchanged.
    """
    container = color if isinstance(color, Color) else None
    value = unwrap(color)
    if value.is_opaque:
        return color

    if background is None and container is not None:
        background = container.background
    if background is None:
        logger.debug("flatten_alpha: no background given, using settings")
        backdrop = default_background()
    else:
        backdrop = flatten_alpha(_as_colorspace(background))

    result = mix(value.replace(ColorKey.ALPHA, 1.0), backdrop, value.alpha)
    return rewrap(result, container)
