from __future__ import annotations
from enum import Enum

from ..errors import FormatError


class FormatType(str, Enum):
    HEX = "hex"
    HEX24 = "hex24"
    HEX32 = "hex32"
    RGB = "rgb"
    HSL = "hsl"

    @classmethod
    def get(cls, name: "FormatType | str") -> "FormatType":
        """Look up a format by name, accepting the ``rgba``/``hsla`` spellings."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = format_aliases.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise FormatError(f"unknown color format {name!r}", name) from None


format_aliases = {
    "rgba": "rgb",
    "hsla": "hsl",
}
