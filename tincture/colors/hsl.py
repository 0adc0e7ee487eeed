from typing import ClassVar, Dict, FrozenSet, Tuple

from ..types.color_types import ColorKey, ColorSpace, ALPHA_RANGE
from ..types.format_type import FormatType
from .color_base import ColorBase


class HSL(ColorBase):
    """
    Hue in degrees, saturation and lightness as unit floats.

    Hue wraps into [0, 360) on construction. ``cast()`` also rounds it to
    whole degrees.
    """
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.HSL
    fields: ClassVar[Tuple[ColorKey, ...]] = (ColorKey.HUE, ColorKey.SATURATION, ColorKey.LIGHTNESS, ColorKey.ALPHA)
    ranges: ClassVar[Dict[ColorKey, Tuple[float, float]]] = {
        ColorKey.HUE: (0, 360),
        ColorKey.SATURATION: (0.0, 1.0),
        ColorKey.LIGHTNESS: (0.0, 1.0),
        ColorKey.ALPHA: ALPHA_RANGE,
    }
    hue_fields: ClassVar[FrozenSet[ColorKey]] = frozenset({ColorKey.HUE})
    natural_format: ClassVar[FormatType] = FormatType.HSL

    def __init__(self, hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> None:
        super().__init__(hue, saturation, lightness, alpha)

    @property
    def hue(self) -> float:
        return self._values[0]

    @property
    def saturation(self) -> float:
        return self._values[1]

    @property
    def lightness(self) -> float:
        return self._values[2]
