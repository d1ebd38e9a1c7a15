"""
posprinter
==========

Command encoder for receipt / point-of-sale printers.

This package provides:
    - An abstract text ``Style`` (font, size, bold, underline, alignment,
      reverse printing) encoded on demand for the target printer
    - ``EscPosPrinter`` (Epson ESC/POS) and ``StarPrntPrinter`` (Star
      StarPRNT) writing exact command bytes to any binary sink
    - Device actions: initialize, reset, feed, cut, cash drawer pulse
    - JSON settings loading and package-wide logging

Basic usage:
    >>> import io
    >>> from posprinter import EscPosPrinter, Style, Justification, CutMode
    >>>
    >>> out = io.BytesIO()
    >>> printer = EscPosPrinter(out)
    >>> title = Style().set_bold(True).set_justification(Justification.CENTER)
    >>> _ = printer.reset().write_line("RECEIPT", title).write_line("1 x Coffee")
    >>> _ = printer.feed(3).cut(CutMode.PARTIAL)

From settings:
    >>> from posprinter import create_printer, load_config
    >>>
    >>> settings = load_config()  # ./posprinter.json or defaults
    >>> with open("/dev/usb/lp0", "wb") as port:
    ...     create_printer(None, port, settings).reset().write_line("Hello").cut()

Logging:
    The level is read from the POSPRINTER_LOG_LEVEL environment variable
    (DEBUG, INFO, WARNING, ERROR, CRITICAL; INFO by default). At DEBUG every
    command sent to the sink is logged as hex. Set POSPRINTER_LOG_FILE to
    also log to a rotating file.

Version: 0.1.0
License: MIT
Python: 3.11+
"""

import logging
import logging.handlers
import os
import sys

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__author__ = "posprinter developers"
__description__ = "Byte command encoder for ESC/POS and StarPRNT receipt printers"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"posprinter requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAME = "posprinter"
LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _setup_logging(logger_name: str = LOGGER_NAME) -> None:
    """
    Configure the ``posprinter`` logger, or the logger named ``logger_name``.

    - stderr handler for WARNING and above
    - rotating file handler for every enabled level, when POSPRINTER_LOG_FILE
      names a file
    - level from POSPRINTER_LOG_LEVEL (INFO by default)

    Idempotent: a logger that already has handlers is left alone.
    """
    log_level_str = os.environ.get("POSPRINTER_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(logger_name)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("POSPRINTER_LOG_FILE")
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Could not open log file %s: %s. Logging to console only.", log_file, e
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the ``posprinter`` namespace.

    Args:
        module_name: Usually ``__name__``. Names outside the package are
            prefixed with ``posprinter.``; ``__main__`` becomes
            ``posprinter.main``.

    Example:
        >>> logger = get_logger("shop.receipts")
        >>> logger.name
        'posprinter.shop.receipts'
    """
    if module_name == LOGGER_NAME or module_name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAME}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{LOGGER_NAME}.{clean_name}")


_setup_logging()

# =============================================================================
# PUBLIC API
# =============================================================================

from posprinter.config import (  # noqa: E402
    DEFAULT_CONFIG,
    EscPosStyleConfig,
    load_config,
)
from posprinter.exceptions import ConfigurationError, PosPrinterError  # noqa: E402
from posprinter.model.enums import (  # noqa: E402
    ColorMode,
    CutMode,
    FontName,
    FontSize,
    Justification,
    Protocol,
    Underline,
)
from posprinter.model.style import Style  # noqa: E402
from posprinter.printer import (  # noqa: E402
    EscPosPrinter,
    Printer,
    Sink,
    StarPrntPrinter,
    create_printer,
)

__all__ = [
    # Version metadata
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Utilities
    "get_logger",
    "load_config",
    "DEFAULT_CONFIG",
    # Errors
    "PosPrinterError",
    "ConfigurationError",
    # Style model
    "Style",
    "FontName",
    "FontSize",
    "Underline",
    "Justification",
    "ColorMode",
    "CutMode",
    "Protocol",
    # Printers
    "Printer",
    "EscPosPrinter",
    "StarPrntPrinter",
    "EscPosStyleConfig",
    "Sink",
    "create_printer",
]

get_logger(__name__).debug("posprinter %s initialized", __version__)
