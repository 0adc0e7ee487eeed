from __future__ import annotations

import logging
import math
from decimal import Decimal, ROUND_HALF_UP

from boundednumbers.functions import clamp, cyclic_wrap_float

logger = logging.getLogger(__name__)

HUE_360 = 360.0
ROOT_TOLERANCE = 1e-5
MAX_ROOT_ITERATIONS = 100


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round half away from zero.

    The builtin ``round`` rounds ties to even, which would turn 0.5 into 0
    and 2.5 into 2; channel math here expects 1 and 3. With ``digits`` the
    rounding is done on the exact decimal expansion of ``value``.
    """
    if digits:
        quantum = Decimal(1).scaleb(-digits)
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
    return math.copysign(math.floor(abs(value) + 0.5), value)


def clamp_value(value: float, lo: float, hi: float) -> float:
    """Saturate ``value`` into ``[lo, hi]`` as a plain float."""
    return float(clamp(value, lo, hi))


def wrap_hue(hue: float) -> float:
    """Wrap a hue in degrees into ``[0, 360)``."""
    wrapped = float(cyclic_wrap_float(hue, 0.0, HUE_360))
    if wrapped >= HUE_360:
        wrapped -= HUE_360
    return wrapped


def nth_root(value: float, n: int, tolerance: float = ROOT_TOLERANCE,
             max_iterations: int = MAX_ROOT_ITERATIONS) -> float:
    """
    Approximate the real ``n``-th root of a non-negative ``value``.

    Fixed-point iteration ``x' = ((n - 1) * x + value / x**(n - 1)) / n``
    starting at ``value``. Stops once successive guesses differ by less
    than ``tolerance`` or after ``max_iterations`` steps.
    """
    if value == 0:
        return 0.0
    guess = float(value)
    for _ in range(max_iterations):
        nxt = ((n - 1) * guess + value / math.pow(guess, n - 1)) / n
        if abs(nxt - guess) < tolerance:
            return nxt
        guess = nxt
    logger.debug("nth_root(%r, %d) stopped after %d iterations", value, n, max_iterations)
    return guess
