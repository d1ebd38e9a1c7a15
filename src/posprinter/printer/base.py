"""
Abstract receipt printer.

``Printer`` holds the sink, the default ``Style`` and the text charset, and
implements everything that is the same for every command language: raw
writes, styled text, line output, reset sequencing and the sink lifecycle.
Subclasses supply the protocol bytes.

Every operation writes straight to the sink in call order and returns the
printer, so calls chain::

    printer.reset().write_line("TOTAL", bold).feed(3).cut(CutMode.PARTIAL)

Whatever the sink raises propagates unchanged. A command interrupted by a
sink error is not rolled back.
"""

from __future__ import annotations

import codecs
import logging
from abc import ABC, abstractmethod
from types import TracebackType
from typing import ClassVar, Final, Optional, Type, Union

from posprinter.commands.control import LF
from posprinter.exceptions import ConfigurationError
from posprinter.model.enums import CutMode, Protocol
from posprinter.model.style import Style
from posprinter.printer.sink import Sink

logger: Final = logging.getLogger(__name__)


class Printer(ABC):
    """
    Base class for protocol printers.

    Attributes:
        protocol: Command language the subclass speaks.
        default_charset: Codec used when none is given at construction.
    """

    protocol: ClassVar[Protocol]
    default_charset: ClassVar[str] = "utf-8"

    def __init__(self, sink: Sink, charset: Optional[str] = None) -> None:
        self._sink = sink
        self._default_style = Style()
        self._charset = _check_charset(charset or self.default_charset)

    # ---------- STATE ----------

    @property
    def sink(self) -> Sink:
        return self._sink

    def set_sink(self, sink: Sink) -> "Printer":
        """Send subsequent writes to ``sink``. The previous sink is left open."""
        self._sink = sink
        return self

    @property
    def default_style(self) -> Style:
        return self._default_style

    def set_default_style(self, style: Style) -> "Printer":
        self._default_style = style
        return self

    @property
    def charset(self) -> str:
        return self._charset

    def set_charset(self, charset: str) -> "Printer":
        """
        Encode text with ``charset`` from now on.

        Raises:
            ConfigurationError: If Python has no codec of that name.
        """
        self._charset = _check_charset(charset)
        return self

    # ---------- SINK LIFECYCLE ----------

    def flush(self) -> "Printer":
        self._sink.flush()
        return self

    def close(self) -> "Printer":
        """Close the sink. The printer must not be used afterwards."""
        self._sink.close()
        return self

    def __enter__(self) -> "Printer":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    # ---------- PROTOCOL OPERATIONS ----------

    def reset(self) -> "Printer":
        """
        Restore the default style and re-send the setup commands.

        Order: initialize, Chinese character support, drawer pulse timing.
        """
        logger.info("Resetting %s printer", self.protocol.display_name)
        self._default_style.reset()
        self.initialize()
        self.set_chinese_character_support()
        self.set_external_drawer_pulse()
        return self

    @abstractmethod
    def initialize(self) -> "Printer":
        """Send the reset-to-power-on command."""

    @abstractmethod
    def set_chinese_character_support(self) -> "Printer":
        """Enable the Chinese character set."""

    @abstractmethod
    def set_external_drawer_pulse(self) -> "Printer":
        """Configure drawer pulse timing, where the protocol has it."""

    @abstractmethod
    def feed(self, lines: int) -> "Printer":
        """Advance the paper ``lines`` lines (0-255)."""

    @abstractmethod
    def cut(self, mode: CutMode = CutMode.FULL) -> "Printer":
        """Cut the paper."""

    @abstractmethod
    def pulse(self) -> "Printer":
        """Open the cash drawer."""

    @abstractmethod
    def get_style_commands(self, style: Style) -> bytes:
        """Bytes that select ``style`` on this printer."""

    # ---------- WRITES ----------

    def write_byte(self, value: int) -> "Printer":
        """Write one raw byte."""
        if not (0 <= value <= 255):
            raise ValueError(f"Byte value must be 0-255, got {value}")
        return self.write_bytes(bytes([value]))

    def write_bytes(
        self,
        data: Union[bytes, bytearray, memoryview],
        offset: int = 0,
        length: Optional[int] = None,
    ) -> "Printer":
        """
        Write raw bytes, bypassing all encoding.

        Args:
            data: Bytes to send.
            offset: Index of the first byte to send.
            length: Number of bytes to send; the rest of ``data`` when None.

        Raises:
            ValueError: If the range falls outside ``data``.
        """
        if length is None:
            length = len(data) - offset
        if offset < 0 or length < 0 or offset + length > len(data):
            raise ValueError(
                f"Range offset={offset} length={length} outside data of {len(data)} bytes"
            )
        chunk = bytes(memoryview(data)[offset : offset + length])
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("-> %s", chunk.hex(" "))
        self._sink.write(chunk)
        return self

    def write(self, text: str, style: Optional[Style] = None) -> "Printer":
        """
        Write ``text`` preceded by the commands for ``style``.

        Args:
            text: Text to print, encoded with the printer charset.
            style: Style for the text; the default style when None.

        Raises:
            UnicodeEncodeError: If the charset cannot encode ``text``.
                Nothing is written in that case.
        """
        if style is None:
            style = self._default_style
        payload = text.encode(self._charset)
        self.write_bytes(self.get_style_commands(style))
        return self.write_bytes(payload)

    def write_line(self, text: str, style: Optional[Style] = None) -> "Printer":
        """``write()`` followed by a line feed."""
        self.write(text, style)
        return self.write_byte(LF)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(charset={self._charset!r}, "
            f"default_style={self._default_style!r})"
        )


def _check_charset(charset: str) -> str:
    try:
        codecs.lookup(charset)
    except LookupError as exc:
        raise ConfigurationError(
            f"Unknown charset: {charset!r}", key="charset", value=charset
        ) from exc
    return charset


__all__ = ["Printer"]
