"""
ESC/POS commands used by the receipt printer encoder.

Contains the font, sizing, line spacing, emphasis, justification, reverse
printing, paper handling and drawer commands needed to realise a ``Style``
and the printer actions. Every builder returns the exact wire bytes.

Reference: Epson ESC/POS Application Programming Guide
Compatibility: TM-T20, TM-T88 and ESC/POS compatible thermal printers
"""

from typing import Final

from .control import ESC, GS

__all__ = [
    "ESC_INITIALIZE",
    "ESC_CHINESE_CHARSET",
    "ESC_DRAWER_PULSE",
    "select_font",
    "select_character_size",
    "set_line_spacing",
    "set_emphasized",
    "set_underline",
    "select_justification",
    "set_reverse",
    "select_international_charset",
    "print_and_feed_lines",
    "cut_paper",
    "generate_pulse",
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
Effect: Clears the print buffer and restores power-on modes.
Note: Safe to send repeatedly; it has no cumulative effect.
"""

# =============================================================================
# CHARACTER SELECTION
# =============================================================================


def select_font(n: int) -> bytes:
    """
    Select character font.

    Command: ESC M n
    Hex: 1B 4D n

    Args:
        n: 0 = Font A, 1 = Font B, 2 = Font C.
    """
    return bytes([ESC, ord("M"), _payload("Font", n)])


def select_character_size(width: int, height: int) -> bytes:
    """
    Select character size.

    Command: GS ! n
    Hex: 1D 21 n

    Args:
        width: Width multiplier code (0 = x1 ... 7 = x8), high nibble.
        height: Height multiplier code (0 = x1 ... 7 = x8), low nibble.

    Example:
        >>> select_character_size(1, 1)  # double width, double height
        b'\\x1d!\\x11'
    """
    if not (0 <= width <= 15 and 0 <= height <= 15):
        raise ValueError(f"Size codes must be 0-15, got {width}x{height}")
    return bytes([GS, ord("!"), width << 4 | height])


def set_line_spacing(n: int) -> bytes:
    """
    Set line spacing to n motion units.

    Command: ESC 3 n
    Hex: 1B 33 n
    """
    return bytes([ESC, ord("3"), _payload("Line spacing", n)])


def set_emphasized(on: bool) -> bytes:
    """
    Turn emphasized (bold) mode on or off.

    Command: ESC E n
    Hex: 1B 45 n
    """
    return bytes([ESC, ord("E"), 1 if on else 0])


def set_underline(n: int) -> bytes:
    """
    Turn underline mode on or off.

    Command: ESC - n
    Hex: 1B 2D n

    Args:
        n: 0 = off, 1 = one-dot thick, 2 = two-dot thick.
    """
    return bytes([ESC, ord("-"), _payload("Underline", n)])


def select_justification(n: int) -> bytes:
    """
    Select justification.

    Command: ESC a n
    Hex: 1B 61 n

    Args:
        n: 0 = left, 1 = centered, 2 = right.
    """
    return bytes([ESC, ord("a"), _payload("Justification", n)])


def set_reverse(n: int) -> bytes:
    """
    Turn white/black reverse printing on or off.

    Command: GS B n
    Hex: 1D 42 n
    """
    return bytes([GS, ord("B"), _payload("Reverse mode", n)])


def select_international_charset(n: int) -> bytes:
    """
    Select an international character set.

    Command: ESC R n
    Hex: 1B 52 n
    """
    return bytes([ESC, ord("R"), _payload("Charset", n)])


ESC_CHINESE_CHARSET: Final[bytes] = select_international_charset(15)
"""
Select the China character set.

Command: ESC R 15
Hex: 1B 52 0F
"""

# =============================================================================
# PAPER HANDLING
# =============================================================================


def print_and_feed_lines(n: int) -> bytes:
    """
    Print the buffer and feed n lines.

    Command: ESC d n
    Hex: 1B 64 n
    """
    return bytes([ESC, ord("d"), _payload("Line count", n)])


def cut_paper(m: int) -> bytes:
    """
    Cut the paper.

    Command: GS V m
    Hex: 1D 56 m

    Args:
        m: 0 = full cut, 1 = partial cut.
    """
    return bytes([GS, ord("V"), _payload("Cut mode", m)])


# =============================================================================
# CASH DRAWER
# =============================================================================


def generate_pulse(m: int, t1: int, t2: int) -> bytes:
    """
    Generate a timed pulse on a drawer kick-out connector pin.

    Command: ESC p m t1 t2
    Hex: 1B 70 m t1 t2

    Args:
        m: Connector pin (0 = pin 2, 1 = pin 5).
        t1: On time, in 2 ms units.
        t2: Off time, in 2 ms units.
    """
    return bytes(
        [
            ESC,
            ord("p"),
            _payload("Pin", m),
            _payload("On time", t1),
            _payload("Off time", t2),
        ]
    )


ESC_DRAWER_PULSE: Final[bytes] = generate_pulse(0, 16, 20)
"""
Open the cash drawer on pin 2 (32 ms on, 40 ms off).

Command: ESC p 0 16 20
Hex: 1B 70 00 10 14
"""
