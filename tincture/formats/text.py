from __future__ import annotations
from typing import Callable, Dict, Optional

from ..colors import Color, ColorBase, unwrap
from ..colors.color import AnyColor
from ..types.color_types import ColorSpace, RGBATuple
from ..types.format_type import FormatType
from ..utils.num_utils import round_half_up, wrap_hue

OPAQUE_SUFFIX = " / 100%"


def _pct(value: float) -> int:
    return int(round_half_up(value * 100))


def hex24(rgba: RGBATuple) -> str:
    r, g, b, _ = rgba
    return f"#{r:02X}{g:02X}{b:02X}"


def hex32(rgba: RGBATuple) -> str:
    a = int(round_half_up(rgba[3] * 255))
    return f"{hex24(rgba)}{a:02X}"


def hex_auto(rgba: RGBATuple) -> str:
    return hex24(rgba) if rgba[3] == 1.0 else hex32(rgba)


def rgb_function(rgba: RGBATuple) -> str:
    r, g, b, a = rgba
    return f"rgb({r} {g} {b} / {_pct(a)}%)".replace(OPAQUE_SUFFIX, "")


def hsl_function(color: ColorBase) -> str:
    h, s, l, a = color.convert(ColorSpace.HSL).values
    text = f"hsl({int(wrap_hue(round_half_up(h)))} {_pct(s)}% {_pct(l)}% / {_pct(a)}%)"
    return text.replace(OPAQUE_SUFFIX, "")


FORMATTERS: Dict[FormatType, Callable[[ColorBase], str]] = {
    FormatType.HEX: lambda c: hex_auto(c.to_rgba()),
    FormatType.HEX24: lambda c: hex24(c.to_rgba()),
    FormatType.HEX32: lambda c: hex32(c.to_rgba()),
    FormatType.RGB: lambda c: rgb_function(c.to_rgba()),
    FormatType.HSL: hsl_function,
}


def to_text(color: AnyColor, fmt: Optional[FormatType | str] = None) -> str:
    """
    Render a color as text.

    Without ``fmt``, a :class:`Color` uses its remembered format and a bare
    value uses its natural one (RGB as ``rgb()``, HSL as ``hsl()``, the rest
    as hex). Alpha is left out whenever it is exactly 1.0.
    """
    if fmt is None:
        fmt = color.format if isinstance(color, Color) else unwrap(color).natural_format
    return FORMATTERS[FormatType.get(fmt)](unwrap(color))


def with_format(color: AnyColor, fmt: FormatType | str) -> Color:
    """Return a wrapper that renders with ``fmt``; bare values get wrapped."""
    if isinstance(color, Color):
        return color.with_format(fmt)
    return Color(unwrap(color), fmt)
