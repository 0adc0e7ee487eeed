"""
Perceptual distance between colors.

Two measures are available, both normalized to ``[0, 1]`` by default:

- accurate: Euclidean distance in CIELAB (CIE76 delta E). Normalized on a
  log scale against the largest delta E inside the sRGB gamut (pure blue
  against pure green), so every in-gamut pair keeps its ranking and only
  that extreme pair reaches 1.
- fast: the "redmean" weighted RGB distance, which skips the LAB
  conversion and runs roughly 33x faster at the cost of accuracy on very
  dissimilar colors. Divided by its black-to-white value.
"""
from __future__ import annotations
import math
from typing import Any, Iterable, Optional

from .colors import RGB, Color, ColorBase, unwrap
from .colors.color import AnyColor
from .types.color_types import ColorSpace
from .utils.num_utils import clamp_value

REDMEAN_DISTANCE_MAX = 255 * math.sqrt(8 + 255 / 256)


def _delta_e(color1: ColorBase, color2: ColorBase) -> float:
    c1 = color1.convert(ColorSpace.LAB)
    c2 = color2.convert(ColorSpace.LAB)
    return math.sqrt((c1.l - c2.l) ** 2 + (c1.a - c2.a) ** 2 + (c1.b - c2.b) ** 2)


LAB_DISTANCE_MAX = _delta_e(RGB(0, 0, 255), RGB(0, 255, 0))


def lab_distance(color1: AnyColor, color2: AnyColor, norm: bool = True) -> float:
    raw = _delta_e(unwrap(color1), unwrap(color2))
    if not norm:
        return raw
    return clamp_value(math.log1p(raw) / math.log1p(LAB_DISTANCE_MAX), 0.0, 1.0)


def redmean_distance(color1: AnyColor, color2: AnyColor, norm: bool = True) -> float:
    r1, g1, b1, _ = unwrap(color1).to_rgba()
    r2, g2, b2, _ = unwrap(color2).to_rgba()
    rmean = (r1 + r2) / 2
    dr, dg, db = r1 - r2, g1 - g2, b1 - b2
    raw = math.sqrt(
        (2 + rmean / 256) * dr * dr
        + 4 * dg * dg
        + (2 + (255 - rmean) / 256) * db * db
    )
    if not norm:
        return raw
    return clamp_value(raw / REDMEAN_DISTANCE_MAX, 0.0, 1.0)


def distance(color1: AnyColor, color2: AnyColor, fast: bool = False, norm: bool = True) -> float:
    """
    Distance between two colors; 0 means identical.

    Parameters
    ----------
    fast : bool
        Use the redmean approximation instead of LAB.
    norm : bool
        Scale into ``[0, 1]``. With ``False`` the raw measure is returned.
    """
    if fast:
        return redmean_distance(color1, color2, norm)
    return lab_distance(color1, color2, norm)


def similarity(color1: AnyColor, color2: AnyColor, fast: bool = False, norm: bool = True) -> float:
    return 1 - distance(color1, color2, fast=fast, norm=norm)


def fast_distance(color1: AnyColor, color2: AnyColor, norm: bool = True) -> float:
    return distance(color1, color2, fast=True, norm=norm)


def fast_similarity(color1: AnyColor, color2: AnyColor, norm: bool = True) -> float:
    return similarity(color1, color2, fast=True, norm=norm)


def most_similar(color: AnyColor, candidates: Iterable[AnyColor], fast: bool = True) -> AnyColor:
    """Candidate closest to ``color``; the first one wins on ties."""
    pool = list(candidates)
    if not pool:
        raise ValueError("most_similar() needs at least one candidate")
    return min(pool, key=lambda candidate: distance(color, candidate, fast=fast))


def _shaped_like(value: ColorBase, like: AnyColor) -> AnyColor:
    if isinstance(like, Color):
        return like.with_color(value)
    return value


def text_color(color: AnyColor, black: Optional[Any] = None, white: Optional[Any] = None,
               fast: bool = True) -> Any:
    """
    Black or white, whichever reads better on top of ``color``.

    Black is chosen when ``color`` is at least as close to white as it is to
    black. ``black`` and ``white`` replace the returned values when given.
    """
    black_color = _shaped_like(RGB(0, 0, 0), color)
    white_color = _shaped_like(RGB(255, 255, 255), color)
    to_white = distance(color, white_color, fast=fast)
    to_black = distance(color, black_color, fast=fast)
    if to_white <= to_black:
        return black_color if black is None else black
    return white_color if white is None else white
