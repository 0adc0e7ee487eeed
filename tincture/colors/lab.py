from typing import ClassVar, Dict, Tuple

from ..types.color_types import ColorKey, ColorSpace, ALPHA_RANGE
from .color_base import ColorBase


class LAB(ColorBase):
    """CIELAB against the D65 reference white."""
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.LAB
    fields: ClassVar[Tuple[ColorKey, ...]] = (ColorKey.L, ColorKey.A, ColorKey.B, ColorKey.ALPHA)
    ranges: ClassVar[Dict[ColorKey, Tuple[float, float]]] = {
        ColorKey.L: (0.0, 100.0),
        ColorKey.A: (-128.0, 128.0),
        ColorKey.B: (-128.0, 128.0),
        ColorKey.ALPHA: ALPHA_RANGE,
    }

    def __init__(self, l: float, a: float, b: float, alpha: float = 1.0) -> None:
        super().__init__(l, a, b, alpha)

    @property
    def l(self) -> float:
        return self._values[0]

    @property
    def a(self) -> float:
        return self._values[1]

    @property
    def b(self) -> float:
        return self._values[2]
