from typing import ClassVar, Dict, Tuple

from ..types.color_types import ColorKey, ColorSpace, ALPHA_RANGE
from .color_base import ColorBase


class CMYK(ColorBase):
    __slots__ = ()

    space: ClassVar[ColorSpace] = ColorSpace.CMYK
    fields: ClassVar[Tuple[ColorKey, ...]] = (
        ColorKey.CYAN, ColorKey.MAGENTA, ColorKey.YELLOW, ColorKey.BLACK, ColorKey.ALPHA,
    )
    ranges: ClassVar[Dict[ColorKey, Tuple[float, float]]] = {
        ColorKey.CYAN: (0.0, 1.0),
        ColorKey.MAGENTA: (0.0, 1.0),
        ColorKey.YELLOW: (0.0, 1.0),
        ColorKey.BLACK: (0.0, 1.0),
        ColorKey.ALPHA: ALPHA_RANGE,
    }

    def __init__(self, cyan: float, magenta: float, yellow: float, black: float, alpha: float = 1.0) -> None:
        super().__init__(cyan, magenta, yellow, black, alpha)

    @property
    def cyan(self) -> float:
        return self._values[0]

    @property
    def magenta(self) -> float:
        return self._values[1]

    @property
    def yellow(self) -> float:
        return self._values[2]

    @property
    def black(self) -> float:
        return self._values[3]
