from .named_colors import NAMED_COLORS
from .parser import parse, try_parse, detect_format, parse_hex, parse_rgb, parse_hsl, parse_tuple
from .text import to_text, with_format, hex24, hex32, rgb_function, hsl_function

__all__ = [
    "NAMED_COLORS",
    "parse", "try_parse", "detect_format", "parse_hex", "parse_rgb", "parse_hsl", "parse_tuple",
    "to_text", "with_format", "hex24", "hex32", "rgb_function", "hsl_function",
]
