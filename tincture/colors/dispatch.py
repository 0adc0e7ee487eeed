from __future__ import annotations
import functools
from typing import Any, Callable, Optional, TypeVar

from ..types.color_types import ColorSpace
from .color import Color, unwrap
from .color_base import ColorBase

F = TypeVar("F", bound=Callable[..., Any])


def rewrap(result: Any, container: Optional[Color]) -> Any:
    """Put colorspace values in ``result`` back into ``container``'s wrapper."""
    if container is None:
        return result
    if isinstance(result, ColorBase):
        return container.with_color(result)
    if isinstance(result, list):
        return [rewrap(item, container) for item in result]
    if isinstance(result, tuple) and any(isinstance(item, ColorBase) for item in result):
        return tuple(rewrap(item, container) for item in result)
    return result


def colorspace_op(*spaces: Optional[ColorSpace]) -> Callable[[F], F]:
    """
    Decorate an operation whose leading positional arguments are colors.

    The n-th color argument is unwrapped and converted into ``spaces[n]``
    (``None`` leaves it in its own space). With no spaces only the first
    argument is unwrapped. The result goes back into the first argument's
    wrapper when it had one.
    """
    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(color: Any, *args: Any, **kwargs: Any) -> Any:
            container = color if isinstance(color, Color) else None
            call_args = [color, *args]
            call_args[0] = unwrap(color)
            for i, space in enumerate(spaces[:len(call_args)]):
                value = unwrap(call_args[i])
                call_args[i] = value if space is None else value.convert(space)
            return rewrap(fn(*call_args, **kwargs), container)
        return wrapper  # type: ignore[return-value]
    return decorator
