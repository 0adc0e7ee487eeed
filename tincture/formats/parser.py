"""
Parse color literals.

Accepted input
--------------
- named colors: ``"rebeccapurple"`` (case-insensitive)
- hex: ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``
- ``rgb()`` / ``rgba()``: integer or percentage channels
- ``hsl()`` / ``hsla()``: hue with optional ``deg``, percentage saturation
  and lightness
- tuples: ``(r, g, b)`` or ``(r, g, b, a)``; float channels in [0, 1] are
  unit values, an integer alpha is 8-bit
- an existing :class:`Color` or colorspace value

Separators may be commas or spaces, and alpha may follow ``,`` or ``/`` as a
unit float or an ``N%`` percentage.
"""
from __future__ import annotations
import logging
import numbers
import re
from typing import Any, Callable, Dict, Optional, Tuple

from ..colors import Color, ColorBase, HSL, RGB
from ..errors import FormatError
from ..types.format_type import FormatType
from ..utils.num_utils import round_half_up
from .named_colors import NAMED_COLORS

logger = logging.getLogger(__name__)

HEX_RE = re.compile(r"#(?P<digits>[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")

_NUMBER = r"[0-9]{1,3}(?:\.[0-9]+)?"
_SEP = r"(?:\s*,\s*|\s+)"
_ALPHA = r"(?:\s*[,/]\s*(?P<a>[0-9]*\.?[0-9]+%?))?"

RGB_RE = re.compile(
    rf"rgba?\(\s*(?P<r>{_NUMBER}%?){_SEP}(?P<g>{_NUMBER}%?){_SEP}(?P<b>{_NUMBER}%?){_ALPHA}\s*\)",
    re.IGNORECASE,
)
HSL_RE = re.compile(
    rf"hsla?\(\s*(?P<h>-?{_NUMBER})(?:deg)?{_SEP}(?P<s>{_NUMBER}%?){_SEP}(?P<l>{_NUMBER}%?){_ALPHA}\s*\)",
    re.IGNORECASE,
)


def _alpha(text: Optional[str]) -> float:
    if not text:
        return 1.0
    if text.endswith("%"):
        return float(text[:-1]) / 100
    return float(text)


def _rgb_channel(text: str) -> float:
    if text.endswith("%"):
        return round_half_up(float(text[:-1]) / 100 * 255)
    return float(text)


def _unit(text: str) -> float:
    if text.endswith("%"):
        return float(text[:-1]) / 100
    return float(text)


def parse_hex(text: str) -> RGB:
    match = HEX_RE.fullmatch(text)
    if match is None:
        raise FormatError(f"invalid hex color {text!r}", text)
    digits = match.group("digits")
    if len(digits) <= 4:
        digits = "".join(d * 2 for d in digits)
    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    alpha = channels[3] / 255 if len(channels) == 4 else 1.0
    return RGB(channels[0], channels[1], channels[2], alpha)


def parse_rgb(text: str) -> RGB:
    match = RGB_RE.fullmatch(text)
    if match is None:
        raise FormatError(f"invalid rgb() color {text!r}", text)
    return RGB(
        _rgb_channel(match.group("r")),
        _rgb_channel(match.group("g")),
        _rgb_channel(match.group("b")),
        _alpha(match.group("a")),
    )


def parse_hsl(text: str) -> HSL:
    match = HSL_RE.fullmatch(text)
    if match is None:
        raise FormatError(f"invalid hsl() color {text!r}", text)
    return HSL(
        float(match.group("h")),
        _unit(match.group("s")),
        _unit(match.group("l")),
        _alpha(match.group("a")),
    ).cast()


PARSERS: Dict[FormatType, Callable[[str], ColorBase]] = {
    FormatType.HEX: parse_hex,
    FormatType.RGB: parse_rgb,
    FormatType.HSL: parse_hsl,
}


def detect_format(text: str) -> Optional[FormatType]:
    """Guess the grammar of ``text`` from its prefix; ``None`` if nothing fits."""
    lowered = text.lower()
    if lowered.startswith("#"):
        return FormatType.HEX
    if lowered.startswith(("rgb(", "rgba(")):
        return FormatType.RGB
    if lowered.startswith(("hsl(", "hsla(")):
        return FormatType.HSL
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def parse_tuple(value: Tuple[Any, ...]) -> RGB:
    if len(value) not in (3, 4) or not all(_is_number(v) for v in value):
        raise FormatError(f"expected (r, g, b) or (r, g, b, a), got {value!r}", value)
    r, g, b = value[:3]
    a = value[3] if len(value) == 4 else 1.0
    if isinstance(a, numbers.Integral):
        a = a / 255
    if all(isinstance(c, float) and 0.0 <= c <= 1.0 for c in (r, g, b)):
        r, g, b = r * 255, g * 255, b * 255
    return RGB(r, g, b, a)


def parse(value: Any) -> Color:
    """
    Parse ``value`` into a :class:`Color`.

    Raises
    ------
    FormatError
        When ``value`` matches none of the accepted forms.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, ColorBase):
        return Color(value)
    if isinstance(value, tuple):
        return Color(parse_tuple(value), FormatType.HEX)
    if not isinstance(value, str):
        raise FormatError(f"cannot parse {type(value).__name__} as a color", value)

    text = value.strip()
    text = NAMED_COLORS.get(text.lower(), text)
    fmt = detect_format(text)
    if fmt is None:
        raise FormatError(f"unrecognized color {value!r}", value)
    logger.debug("parse %r as %s", value, fmt.value)
    try:
        color = PARSERS[fmt](text)
    except FormatError:
        raise
    except ValueError as exc:
        raise FormatError(f"invalid {fmt.value} color {value!r}: {exc}", value) from exc
    return Color(color, fmt)


def try_parse(value: Any, default: Any = None) -> Any:
    """Like :func:`parse`, but return ``default`` instead of raising."""
    try:
        return parse(value)
    except FormatError:
        return default
