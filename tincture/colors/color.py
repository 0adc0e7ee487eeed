from __future__ import annotations
from typing import Any, Dict, Type, Union

from ..config import get_settings
from ..conversions.wrapper import convert as convert_values
from ..types.color_types import ColorSpace, RGBATuple
from ..types.format_type import FormatType
from .color_base import ColorBase, build_registry
from .rgb import RGB
from .hsl import HSL
from .lab import LAB
from .xyz import XYZ
from .cmyk import CMYK

colorspace_classes: Dict[ColorSpace, Type[ColorBase]] = build_registry(RGB, HSL, LAB, XYZ, CMYK)


def color_convert(self: ColorBase, to_space: ColorSpace | str) -> ColorBase:
    target = colorspace_classes[ColorSpace(to_space)]
    if type(self) is target:
        return self
    return target(*convert_values(self.values, self.space, target.space))


ColorBase.convert = color_convert


class Color:
    """
    Opaque color: one colorspace value plus a remembered output format and
    an optional background used when flattening transparency.

    Operations from the rest of the package accept a ``Color`` anywhere they
    accept a bare colorspace value and hand back a ``Color`` with the same
    format and background.
    """
    __slots__ = ('_color', '_format', '_background', '_is_frozen')

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, color: ColorBase, format: FormatType | str | None = None,
                 background: Any = None) -> None:
        if isinstance(color, Color):
            color = color.color
        if not isinstance(color, ColorBase):
            raise TypeError(f"Color wraps a colorspace value, got {type(color).__name__}")
        if format is None:
            format = get_settings().default_format
        self._color = color
        self._format = FormatType.get(format)
        self._background = background
        super().__setattr__('_is_frozen', True)

    @property
    def color(self) -> ColorBase:
        return self._color

    @property
    def format(self) -> FormatType:
        return self._format

    @property
    def background(self) -> Any:
        return self._background

    @property
    def space(self) -> ColorSpace:
        return self._color.space

    @property
    def alpha(self) -> float:
        return self._color.alpha

    def with_color(self, color: ColorBase) -> Color:
        return Color(color, self._format, self._background)

    def with_format(self, format: FormatType | str) -> Color:
        return Color(self._color, format, self._background)

    def with_background(self, background: Any) -> Color:
        return Color(self._color, self._format, background)

    def convert(self, to_space: ColorSpace | str) -> Color:
        return self.with_color(self._color.convert(to_space))

    def to_rgba(self) -> RGBATuple:
        return self._color.to_rgba()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._color == other._color and self._format == other._format

    def __hash__(self) -> int:
        return hash((self._color, self._format))

    def __str__(self) -> str:
        from ..formats.text import to_text
        return to_text(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"


AnyColor = Union[Color, ColorBase]


def unwrap(value: AnyColor) -> ColorBase:
    if isinstance(value, Color):
        return value.color
    if isinstance(value, ColorBase):
        return value
    raise TypeError(f"expected a color, got {type(value).__name__}")


def convert(value: AnyColor, to_space: ColorSpace | str) -> AnyColor:
    """Convert a color to ``to_space``, keeping the wrapper if there is one."""
    if isinstance(value, Color):
        return value.convert(to_space)
    return unwrap(value).convert(to_space)


def rgba_tuple(value: AnyColor) -> RGBATuple:
    return unwrap(value).to_rgba()


def rgb(value: AnyColor) -> AnyColor:
    return convert(value, ColorSpace.RGB)


def hsl(value: AnyColor) -> AnyColor:
    return convert(value, ColorSpace.HSL)


def lab(value: AnyColor) -> AnyColor:
    return convert(value, ColorSpace.LAB)


def xyz(value: AnyColor) -> AnyColor:
    return convert(value, ColorSpace.XYZ)


def cmyk(value: AnyColor) -> AnyColor:
    return convert(value, ColorSpace.CMYK)
