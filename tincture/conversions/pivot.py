from __future__ import annotations
from typing import Any

from ..types.color_types import RGBATuple, ALPHA_RANGE
from ..utils.num_utils import round_half_up, clamp_value

CHANNEL_MAX = 255


def is_rgba_tuple(value: Any) -> bool:
    """True for a 4-tuple of 8-bit integer channels and a float alpha in [0, 1]."""
    if not isinstance(value, tuple) or len(value) != 4:
        return False
    r, g, b, a = value
    channels_ok = all(
        isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= CHANNEL_MAX
        for c in (r, g, b)
    )
    return channels_ok and isinstance(a, float) and ALPHA_RANGE[0] <= a <= ALPHA_RANGE[1]


def cast_channel(value: float) -> int:
    return int(clamp_value(round_half_up(value), 0, CHANNEL_MAX))


def cast_alpha(value: float) -> float:
    return clamp_value(value, *ALPHA_RANGE)


def rgba_tuple(r: float, g: float, b: float, a: float) -> RGBATuple:
    """Build a pivot tuple, rounding and clamping channels and clamping alpha."""
    candidate = (r, g, b, a)
    if is_rgba_tuple(candidate):
        return candidate  # type: ignore[return-value]
    return cast_channel(r), cast_channel(g), cast_channel(b), cast_alpha(a)
