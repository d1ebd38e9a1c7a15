"""
ASCII control codes shared by the ESC/POS and StarPRNT command sets.

Both printer families build every command from the same handful of control
characters. They are kept as plain ints so they can be packed with
``bytes([...])``.

Reference: ASCII control set (ECMA-6), Epson ESC/POS Application Programming
Guide, Star StarPRNT Command Specifications.
"""

from typing import Final

__all__ = [
    "BEL",
    "LF",
    "ESC",
    "FS",
    "GS",
    "RS",
    "FN",
]

# =============================================================================
# CONTROL CHARACTERS
# =============================================================================

BEL: Final[int] = 0x07
"""Bell. StarPRNT printers use it to kick the cash drawer."""

LF: Final[int] = 0x0A
"""Line feed. Prints the buffer and advances one line."""

ESC: Final[int] = 0x1B
"""Escape, prefix of most commands in both families."""

FS: Final[int] = 0x1C
"""File separator, prefix of the ESC/POS ``FS`` (Kanji) command group."""

GS: Final[int] = 0x1D
"""Group separator, prefix of the ESC/POS ``GS`` command group."""

RS: Final[int] = 0x1E
"""Record separator, used by StarPRNT ``ESC RS`` commands."""

FN: Final[int] = 0x30
"""Function code byte ('0') used by StarPRNT ``ESC GS ) U`` functions."""
