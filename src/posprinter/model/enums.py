"""
model/enums.py

Domain enums for the receipt printer style model.

Each member's value is the numeric code the printers expect on the wire, so
encoders can use ``member.value`` directly. The sets are closed: a style can
only ever hold values the hardware supports.
NO protocol command logic here!

See Also:
    - src/posprinter/commands (for protocol bytes)
    - src/posprinter/model/style.py (for per-protocol encoding)
"""

from __future__ import annotations

from enum import Enum
from typing import Final

# === DOMAINS ===


class FontName(Enum):
    """Character font."""

    FONT_A = 0
    """Font A, the power-on default."""

    FONT_B = 1
    """Font B, usually a condensed font."""

    FONT_C = 2
    """Font C, not present on every model."""


class FontSize(Enum):
    """Width or height multiplier. Width and height are set independently."""

    SIZE_1 = 0
    SIZE_2 = 1
    SIZE_3 = 2
    SIZE_4 = 3

    @property
    def multiplier(self) -> int:
        return self.value + 1


class Underline(Enum):
    NONE = 0
    ONE_DOT = 1  # thin
    TWO_DOT = 2  # thick

    @property
    def is_on(self) -> bool:
        return self is not Underline.NONE


class Justification(Enum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


class ColorMode(Enum):
    """Foreground/background reverse printing."""

    BLACK_ON_WHITE = 0
    WHITE_ON_BLACK = 1

    @property
    def is_inverted(self) -> bool:
        return self is ColorMode.WHITE_ON_BLACK


class CutMode(Enum):
    FULL = 0
    PARTIAL = 1


class Protocol(str, Enum):
    """Printer command language family."""

    ESCPOS = "escpos"
    STARPRNT = "starprnt"

    @property
    def display_name(self) -> str:
        return {Protocol.ESCPOS: "ESC/POS", Protocol.STARPRNT: "StarPRNT"}[self]


# === DEFAULTS ===
DEFAULT_FONT_NAME: Final[FontName] = FontName.FONT_A
DEFAULT_FONT_SIZE: Final[FontSize] = FontSize.SIZE_1
DEFAULT_UNDERLINE: Final[Underline] = Underline.NONE
DEFAULT_JUSTIFICATION: Final[Justification] = Justification.LEFT
DEFAULT_COLOR_MODE: Final[ColorMode] = ColorMode.BLACK_ON_WHITE


__all__ = [
    "FontName",
    "FontSize",
    "Underline",
    "Justification",
    "ColorMode",
    "CutMode",
    "Protocol",
    "DEFAULT_FONT_NAME",
    "DEFAULT_FONT_SIZE",
    "DEFAULT_UNDERLINE",
    "DEFAULT_JUSTIFICATION",
    "DEFAULT_COLOR_MODE",
]
