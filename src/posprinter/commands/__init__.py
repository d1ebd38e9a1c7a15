"""
Low-level command bytes for receipt printers.

Module Structure:
    commands/
    ├── __init__.py      # This file (public API exports)
    ├── control.py       # ASCII control codes shared by both families
    ├── escpos.py        # ESC/POS command builders
    └── starprnt.py      # StarPRNT command builders

The two protocol modules expose builders with overlapping names
(``select_font``, ``cut_paper``...), so they are re-exported as modules
rather than flattened into this namespace.

Usage:
    >>> from posprinter.commands import escpos, starprnt
    >>> escpos.cut_paper(0)
    b'\\x1dV\\x00'
    >>> starprnt.cut_paper(2)
    b'\\x1bd\\x02'
"""

from posprinter.commands import escpos, starprnt
from posprinter.commands.control import BEL, ESC, FN, FS, GS, LF, RS

__all__ = [
    # Control codes
    "BEL",
    "LF",
    "ESC",
    "FS",
    "GS",
    "RS",
    "FN",
    # Protocol modules
    "escpos",
    "starprnt",
]
