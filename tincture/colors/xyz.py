from typing import ClassVar, Dict, Tuple

from ..types.color_types import ColorKey, ColorSpace, ALPHA_RANGE
from .color_base import ColorBase


class XYZ(ColorBase):
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.XYZ
    fields: ClassVar[Tuple[ColorKey, ...]] = (ColorKey.X, ColorKey.Y, ColorKey.Z, ColorKey.ALPHA)
    ranges: ClassVar[Dict[ColorKey, Tuple[float, float]]] = {
        ColorKey.X: (0.0, 95.047),
        ColorKey.Y: (0.0, 100.0),
        ColorKey.Z: (0.0, 108.883),
        ColorKey.ALPHA: ALPHA_RANGE,
    }

    def __init__(self, x: float, y: float, z: float, alpha: float = 1.0) -> None:
        super().__init__(x, y, z, alpha)

    @property
    def x(self) -> float:
        return self._values[0]

    @property
    def y(self) -> float:
        return self._values[1]

    @property
    def z(self) -> float:
        return self._values[2]
