"""
Colorspace-agnostic attribute access.

Every :class:`ColorKey` belongs to exactly one colorspace (alpha belongs
to all of them). ``get``, ``put`` and ``update`` convert the input into the
owning space, act on the field there and return the value in that space,
re-wrapped when the input was a :class:`Color`.
"""
from __future__ import annotations
import inspect
import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping, NamedTuple, Optional, Tuple

from .colors import ColorBase, colorspace_classes, colorspace_op
from .colors.color import AnyColor
from .types.color_types import ColorKey, ColorSpace, ALPHA_RANGE, Scalar

logger = logging.getLogger(__name__)


class Attribute(NamedTuple):
    space: Optional[ColorSpace]  # None for alpha, which every space carries
    minimum: float
    maximum: float

    @property
    def range(self) -> Tuple[float, float]:
        return self.minimum, self.maximum


def _build_attribute_table() -> Mapping[ColorKey, Attribute]:
    table = {ColorKey.ALPHA: Attribute(None, *ALPHA_RANGE)}
    for space, cls in colorspace_classes.items():
        for key in cls.fields:
            if key is not ColorKey.ALPHA:
                table[key] = Attribute(space, *cls.min_max(key))
    return MappingProxyType(table)


ATTRIBUTES: Mapping[ColorKey, Attribute] = _build_attribute_table()


def attribute(key: ColorKey | str) -> Attribute:
    return ATTRIBUTES[ColorKey(key)]


def min_max(key: ColorKey | str) -> Tuple[float, float]:
    """Valid ``(min, max)`` range for ``key``."""
    return attribute(key).range


def _owner(color: ColorBase, key: ColorKey) -> ColorBase:
    space = ATTRIBUTES[key].space
    return color if space is None else color.convert(space)


def _accepts_range(fn: Callable[..., Any]) -> bool:
    """True when ``fn`` can be called with ``(value, (min, max))``."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False
    positional = 0
    for param in params:
        if param.kind is param.VAR_POSITIONAL:
            return True
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 2


@colorspace_op()
def get(color: ColorBase, key: ColorKey | str) -> Scalar:
    key = ColorKey(key)
    return _owner(color, key).value_of(key)


@colorspace_op()
def put(color: ColorBase, key: ColorKey | str, value: Scalar) -> ColorBase:
    """
    Set ``key`` to ``value`` in the owning colorspace.

    The result is expressed in that colorspace. Construction clamps the
    field, so reading it back yields the in-range value.
    """
    key = ColorKey(key)
    return _owner(color, key).replace(key, value)


@colorspace_op()
def update(color: ColorBase, key: ColorKey | str,
           fn: Callable[..., Scalar]) -> ColorBase:
    """
    Replace ``key`` with ``fn(value)`` or ``fn(value, (min, max))``, then cast.

    Hue wraps modulo 360, every other field saturates at its range.
    """
    key = ColorKey(key)
    owner = _owner(color, key)
    current = owner.value_of(key)
    if _accepts_range(fn):
        new_value = fn(current, ATTRIBUTES[key].range)
    else:
        new_value = fn(current)
    logger.debug("update %s: %r -> %r", key.value, current, new_value)
    if key is ColorKey.ALPHA:
        return owner.replace(key, new_value)
    return owner.replace(key, new_value).cast()
