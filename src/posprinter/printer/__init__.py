"""
Printer devices.

    printer/
    ├── base.py        # Printer: shared behaviour and the operation contract
    ├── escpos.py      # EscPosPrinter
    ├── starprnt.py    # StarPrntPrinter
    ├── factory.py     # create_printer()
    └── sink.py        # Sink protocol
"""

from posprinter.printer.base import Printer
from posprinter.printer.escpos import EscPosPrinter
from posprinter.printer.factory import create_printer
from posprinter.printer.sink import Sink
from posprinter.printer.starprnt import StarPrntPrinter

__all__ = [
    "Printer",
    "EscPosPrinter",
    "StarPrntPrinter",
    "Sink",
    "create_printer",
]
