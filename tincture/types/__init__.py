from .color_types import ColorSpace, ColorKey, RGBATuple, Scalar
from .format_type import FormatType

__all__ = ["ColorSpace", "ColorKey", "RGBATuple", "Scalar", "FormatType"]
