"""
Runtime settings for tincture.

Settings are read from the environment each time :func:`get_settings` is
called and returned as a frozen snapshot; nothing in the package holds
mutable configuration.

Environment variables
---------------------
TINCTURE_BACKGROUND
    Background color used by ``flatten_alpha`` when neither the call nor
    the wrapper provides one. Any text accepted by ``parse``.
TINCTURE_FORMAT
    Format tag given to colors built from bare values (``hex``, ``hex24``,
    ``hex32``, ``rgb`` or ``hsl``).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "#FFFFFF"
DEFAULT_FORMAT = "hex"

ENV_BACKGROUND = "TINCTURE_BACKGROUND"
ENV_FORMAT = "TINCTURE_FORMAT"


@dataclass(frozen=True)
class Settings:
    background: str = DEFAULT_BACKGROUND
    default_format: str = DEFAULT_FORMAT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        background = env.get(ENV_BACKGROUND, "").strip() or DEFAULT_BACKGROUND
        default_format = env.get(ENV_FORMAT, "").strip() or DEFAULT_FORMAT
        return cls(background=background, default_format=default_format)


def get_settings() -> Settings:
    """Return the current settings snapshot."""
    return Settings.from_env()
