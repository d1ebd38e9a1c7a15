"""
StarPRNT commands used by the receipt printer encoder.

StarPRNT shares the ESC prefix with ESC/POS but its opcode space is
incompatible: the same letters select different functions, several settings
are two fixed opcodes instead of an opcode plus flag, and paper cut lives
under ``ESC d``.

Reference: Star Micronics StarPRNT Command Specifications
Compatibility: TSP100/TSP650/mC-Print and StarPRNT emulation printers
"""

from typing import Final

from .control import BEL, ESC, FN, GS, RS

__all__ = [
    "ESC_INITIALIZE",
    "ESC_BOLD_ON",
    "ESC_BOLD_OFF",
    "ESC_INVERT_ON",
    "ESC_INVERT_OFF",
    "ESC_CHINESE_CHARSET",
    "ESC_DRAWER_PULSE_TIMING",
    "DRAWER_KICK",
    "select_font",
    "set_character_expansion",
    "set_bold",
    "set_underline",
    "select_justification",
    "set_invert",
    "set_drawer_pulse_timing",
    "feed_lines",
    "cut_paper",
]


def _payload(name: str, n: int) -> int:
    if not (0 <= n <= 255):
        raise ValueError(f"{name} must be 0-255, got {n}")
    return n


# =============================================================================
# HARDWARE CONTROL
# =============================================================================

ESC_INITIALIZE: Final[bytes] = bytes([ESC, ord("@")])
"""
Initialize printer.

Command: ESC @
Hex: 1B 40
"""

# =============================================================================
# CHARACTER SELECTION
# =============================================================================


def select_font(n: int) -> bytes:
    """
    Select font.

    Command: ESC RS F n
    Hex: 1B 1E 46 n

    Args:
        n: 0 = Font A, 1 = Font B, 2 = Font C.
    """
    return bytes([ESC, RS, ord("F"), _payload("Font", n)])


def set_character_expansion(height: int, width: int) -> bytes:
    """
    Set character expansion.

    Command: ESC i n1 n2
    Hex: 1B 69 n1 n2

    Args:
        height: Height expansion code (n1), sent first.
        width: Width expansion code (n2).
    """
    return bytes([ESC, ord("i"), _payload("Height", height), _payload("Width", width)])


ESC_BOLD_ON: Final[bytes] = bytes([ESC, ord("E")])
"""Select emphasized printing. Command: ESC E, Hex: 1B 45."""

ESC_BOLD_OFF: Final[bytes] = bytes([ESC, ord("F")])
"""Cancel emphasized printing. Command: ESC F, Hex: 1B 46."""


def set_bold(on: bool) -> bytes:
    return ESC_BOLD_ON if on else ESC_BOLD_OFF


def set_underline(on: bool) -> bytes:
    """
    Turn underline on or off.

    Command: ESC - n
    Hex: 1B 2D n

    Note:
        StarPRNT has a single underline weight, so the payload is 0 or 1.
    """
    return bytes([ESC, ord("-"), 1 if on else 0])


def select_justification(n: int) -> bytes:
    """
    Select position alignment.

    Command: ESC GS a n
    Hex: 1B 1D 61 n

    Args:
        n: 0 = left, 1 = center, 2 = right.
    """
    return bytes([ESC, GS, ord("a"), _payload("Justification", n)])


ESC_INVERT_ON: Final[bytes] = bytes([ESC, ord("4")])
"""Select white/black inverted printing. Command: ESC 4, Hex: 1B 34."""

ESC_INVERT_OFF: Final[bytes] = bytes([ESC, ord("5")])
"""Cancel white/black inverted printing. Command: ESC 5, Hex: 1B 35."""


def set_invert(on: bool) -> bytes:
    return ESC_INVERT_ON if on else ESC_INVERT_OFF


ESC_CHINESE_CHARSET: Final[bytes] = bytes([ESC, GS, ord(")"), ord("U"), 2, 0, FN, 1])
"""
Select the Chinese (simplified) character set function.

Command: ESC GS ) U 2 0 48 1
Hex: 1B 1D 29 55 02 00 30 01
"""

# =============================================================================
# PAPER HANDLING
# =============================================================================


def feed_lines(n: int) -> bytes:
    """
    Feed paper n lines.

    Command: ESC a n
    Hex: 1B 61 n

    Note:
        The line height is taken from the last selected character height,
        so callers normally re-send the base style first.
    """
    return bytes([ESC, ord("a"), _payload("Line count", n)])


def cut_paper(n: int) -> bytes:
    """
    Feed to cutter position and cut.

    Command: ESC d n
    Hex: 1B 64 n

    Args:
        n: 2 = full cut, 3 = partial cut (0 and 1 cut without feeding).
    """
    return bytes([ESC, ord("d"), _payload("Cut mode", n)])


# =============================================================================
# CASH DRAWER
# =============================================================================


def set_drawer_pulse_timing(n1: int, n2: int) -> bytes:
    """
    Set external device 1 (drawer) pulse width.

    Command: ESC BEL n1 n2
    Hex: 1B 07 n1 n2
    """
    return bytes([ESC, BEL, _payload("On time", n1), _payload("Off time", n2)])


ESC_DRAWER_PULSE_TIMING: Final[bytes] = set_drawer_pulse_timing(20, 20)
"""Drawer pulse timing used on reset. Command: ESC BEL 20 20."""

DRAWER_KICK: Final[bytes] = bytes([BEL])
"""
Drive external device 1 (cash drawer) with the configured pulse.

Command: BEL
Hex: 07
Note: The pulse length is not part of this command; see ESC BEL.
"""
