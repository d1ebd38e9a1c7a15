"""
Byte sink contract.

Any binary file-like object satisfies it: ``io.BytesIO``, a file opened
with ``"wb"``, a serial port, a socket wrapped with ``makefile("wb")``.
The printer only references the sink; opening it, choosing the transport
and deciding when to close it stay with the caller.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """
    Destination for encoded printer commands.

    Each method may raise (normally ``OSError``); printers let the
    exception through untouched.
    """

    def write(self, data: bytes, /) -> Any:
        ...

    def flush(self) -> None:
        ...

    def close(self) -> None:
        ...


__all__ = ["Sink"]
