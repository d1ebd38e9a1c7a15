"""
StarPRNT printer.

Realises the ``Printer`` operations with Star StarPRNT commands. Text is
encoded as GBK unless another charset is given.

Two hardware differences show up here:
    - ``ESC a n`` feeds by the height of the last selected font, so
      ``feed()`` first re-selects the default style;
    - the drawer is kicked with a bare BEL whose pulse length comes from
      the ``ESC BEL`` timing sent on reset.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Final, Optional

from posprinter.commands import starprnt
from posprinter.model.enums import CutMode, Protocol
from posprinter.model.style import Style
from posprinter.printer.base import Printer
from posprinter.printer.sink import Sink

logger: Final = logging.getLogger(__name__)

# Cut codes 0/1 cut without feeding; the feed-then-cut variants start at 2.
_FEED_CUT_OFFSET = 2


class StarPrntPrinter(Printer):
    """Printer speaking StarPRNT."""

    protocol: ClassVar[Protocol] = Protocol.STARPRNT
    default_charset: ClassVar[str] = "gbk"

    def __init__(self, sink: Sink, charset: Optional[str] = None) -> None:
        super().__init__(sink, charset)
        logger.debug("StarPRNT printer created: charset=%s", self.charset)

    def initialize(self) -> "StarPrntPrinter":
        self.write_bytes(starprnt.ESC_INITIALIZE)
        return self

    def set_chinese_character_support(self) -> "StarPrntPrinter":
        self.write_bytes(starprnt.ESC_CHINESE_CHARSET)
        return self

    def set_external_drawer_pulse(self) -> "StarPrntPrinter":
        self.write_bytes(starprnt.ESC_DRAWER_PULSE_TIMING)
        return self

    def feed(self, lines: int) -> "StarPrntPrinter":
        command = starprnt.feed_lines(lines)
        self.write_bytes(self.get_style_commands(self.default_style))
        self.write_bytes(command)
        return self

    def cut(self, mode: CutMode = CutMode.FULL) -> "StarPrntPrinter":
        self.write_bytes(starprnt.cut_paper(CutMode(mode).value + _FEED_CUT_OFFSET))
        return self

    def pulse(self) -> "StarPrntPrinter":
        self.write_bytes(starprnt.DRAWER_KICK)
        return self

    def get_style_commands(self, style: Style) -> bytes:
        return style.to_starprnt()


__all__ = ["StarPrntPrinter"]
