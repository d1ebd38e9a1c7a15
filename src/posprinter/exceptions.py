"""
Exceptions raised by posprinter itself.

Hierarchy:
    PosPrinterError (base)
    └── ConfigurationError (also a ValueError)

Sink failures are not wrapped: whatever the sink raises (normally
``OSError``) reaches the caller unchanged.
"""

from __future__ import annotations

from typing import Any, Optional

__all__: list[str] = [
    "PosPrinterError",
    "ConfigurationError",
]


class PosPrinterError(Exception):
    """Base class for posprinter errors."""


class ConfigurationError(PosPrinterError, ValueError):
    """
    Invalid configuration value.

    Attributes:
        key: Name of the offending setting, when known.
        value: The rejected value.
    """

    def __init__(self, message: str, *, key: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.key = key
        self.value = value
