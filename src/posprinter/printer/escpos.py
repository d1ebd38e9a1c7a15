"""
ESC/POS printer.

Realises the ``Printer`` operations with Epson ESC/POS commands. Style
encoding depends on the model's line-spacing dot count, supplied as an
``EscPosStyleConfig`` and fixed for the printer's lifetime.
"""

from __future__ import annotations

import logging
from typing import ClassVar, Final, Optional

from posprinter.commands import escpos
from posprinter.config import EscPosStyleConfig
from posprinter.model.enums import CutMode, Protocol
from posprinter.model.style import Style
from posprinter.printer.base import Printer
from posprinter.printer.sink import Sink

logger: Final = logging.getLogger(__name__)


class EscPosPrinter(Printer):
    """
    Printer speaking ESC/POS.

    Example:
        >>> import io
        >>> out = io.BytesIO()
        >>> _ = EscPosPrinter(out).feed(1).cut(CutMode.FULL)
        >>> out.getvalue()
        b'\\x1bd\\x01\\x1dV\\x00'
    """

    protocol: ClassVar[Protocol] = Protocol.ESCPOS
    default_charset: ClassVar[str] = "utf-8"

    def __init__(
        self,
        sink: Sink,
        config: Optional[EscPosStyleConfig] = None,
        charset: Optional[str] = None,
    ) -> None:
        super().__init__(sink, charset)
        self._config = config if config is not None else EscPosStyleConfig()
        logger.debug(
            "ESC/POS printer created: line_spacing_dot=%d charset=%s",
            self._config.line_spacing_dot,
            self.charset,
        )

    @property
    def config(self) -> EscPosStyleConfig:
        return self._config

    def initialize(self) -> "EscPosPrinter":
        self.write_bytes(escpos.ESC_INITIALIZE)
        return self

    def set_chinese_character_support(self) -> "EscPosPrinter":
        self.write_bytes(escpos.ESC_CHINESE_CHARSET)
        return self

    def set_external_drawer_pulse(self) -> "EscPosPrinter":
        # ESC/POS sets pulse timing per ESC p call.
        return self

    def feed(self, lines: int) -> "EscPosPrinter":
        self.write_bytes(escpos.print_and_feed_lines(lines))
        return self

    def cut(self, mode: CutMode = CutMode.FULL) -> "EscPosPrinter":
        self.write_bytes(escpos.cut_paper(CutMode(mode).value))
        return self

    def pulse(self) -> "EscPosPrinter":
        self.write_bytes(escpos.ESC_DRAWER_PULSE)
        return self

    def get_style_commands(self, style: Style) -> bytes:
        return style.to_escpos(self._config)


__all__ = ["EscPosPrinter"]
