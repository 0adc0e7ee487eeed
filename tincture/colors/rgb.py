from typing import ClassVar, Dict, FrozenSet, Tuple

from ..types.color_types import ColorKey, ColorSpace, ALPHA_RANGE
from ..types.format_type import FormatType
from .color_base import ColorBase


class RGB(ColorBase):
    """8-bit red, green and blue channels with a unit float alpha."""
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.RGB
    fields: ClassVar[Tuple[ColorKey, ...]] = (ColorKey.RED, ColorKey.GREEN, ColorKey.BLUE, ColorKey.ALPHA)
    ranges: ClassVar[Dict[ColorKey, Tuple[float, float]]] = {
        ColorKey.RED: (0, 255),
        ColorKey.GREEN: (0, 255),
        ColorKey.BLUE: (0, 255),
        ColorKey.ALPHA: ALPHA_RANGE,
    }
    integer_fields: ClassVar[FrozenSet[ColorKey]] = frozenset({ColorKey.RED, ColorKey.GREEN, ColorKey.BLUE})
    natural_format: ClassVar[FormatType] = FormatType.RGB

    def __init__(self, red: float, green: float, blue: float, alpha: float = 1.0) -> None:
        super().__init__(red, green, blue, alpha)

    @property
    def red(self) -> int:
        return self._values[0]

    @property
    def green(self) -> int:
        return self._values[1]

    @property
    def blue(self) -> int:
        return self._values[2]
