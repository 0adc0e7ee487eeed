from typing import Any


class TinctureError(Exception):
    """Base class for every error raised by tincture."""


class FormatError(TinctureError, ValueError):
    """Raised when input matches no known color grammar."""

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value
