"""Factory for building a printer from settings."""

from __future__ import annotations

import logging
from typing import Any, Final, Mapping, Optional, Union

from posprinter.config import DEFAULT_CONFIG, EscPosStyleConfig
from posprinter.exceptions import ConfigurationError
from posprinter.model.enums import Protocol
from posprinter.model.style import Style
from posprinter.printer.base import Printer
from posprinter.printer.escpos import EscPosPrinter
from posprinter.printer.sink import Sink
from posprinter.printer.starprnt import StarPrntPrinter

logger: Final = logging.getLogger(__name__)


def create_printer(
    protocol: Union[Protocol, str, None],
    sink: Sink,
    settings: Optional[Mapping[str, Any]] = None,
) -> Printer:
    """
    Create the printer for ``protocol`` writing to ``sink``.

    Args:
        protocol: Command language, as ``Protocol`` or its value
            ("escpos", "starprnt"). When None, ``settings["protocol"]``.
        sink: Byte destination.
        settings: Dict as returned by ``load_config()``; defaults when None.
            An optional ``default_style`` object (``Style.to_dict()`` form)
            becomes the printer default style. ``reset()`` still restores
            the power-on defaults.

    Raises:
        ConfigurationError: Unknown protocol, invalid line spacing, charset
            or default style.
    """
    if settings is None:
        settings = DEFAULT_CONFIG
    if protocol is None:
        protocol = settings.get("protocol", DEFAULT_CONFIG["protocol"])

    if not isinstance(protocol, Protocol):
        try:
            protocol = Protocol(str(protocol).lower())
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown printer protocol: {protocol!r}", key="protocol", value=protocol
            ) from exc

    logger.info("Creating %s printer", protocol.display_name)
    printer: Printer
    if protocol is Protocol.ESCPOS:
        printer = EscPosPrinter(
            sink,
            config=EscPosStyleConfig.from_settings(settings),
            charset=settings.get("escpos_charset"),
        )
    else:
        printer = StarPrntPrinter(sink, charset=settings.get("starprnt_charset"))

    style_data = settings.get("default_style")
    if style_data is not None:
        if not isinstance(style_data, Mapping):
            raise ConfigurationError(
                f"default_style must be an object, got {type(style_data).__name__}",
                key="default_style",
                value=style_data,
            )
        printer.set_default_style(Style.from_dict(style_data))
        logger.debug("Default style from settings: %r", printer.default_style)
    return printer


__all__ = ["create_printer"]
