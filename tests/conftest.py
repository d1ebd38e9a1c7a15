"""Shared fixtures for the posprinter test suite."""

import io
import logging
from typing import Iterator
from unittest import mock

import pytest

from posprinter.commands.control import ESC, GS
from posprinter.config import EscPosStyleConfig


class RecordingSink(io.BytesIO):
    """BytesIO that also remembers each write call separately."""

    def __init__(self) -> None:
        super().__init__()
        self.chunks: list[bytes] = []
        self.flush_count = 0

    def write(self, data: bytes) -> int:  # type: ignore[override]
        self.chunks.append(bytes(data))
        return super().write(data)

    def flush(self) -> None:
        self.flush_count += 1
        super().flush()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def failing_sink() -> mock.Mock:
    """Sink whose every write fails like a disconnected port."""
    broken = mock.Mock()
    broken.write.side_effect = OSError(5, "Input/output error")
    return broken


@pytest.fixture
def propagate_logs() -> Iterator[None]:
    """Let posprinter records reach the root logger so caplog sees them."""
    package_logger = logging.getLogger("posprinter")
    previous = package_logger.propagate
    package_logger.propagate = True
    try:
        yield
    finally:
        package_logger.propagate = previous


def _escpos_default_style_bytes(line_spacing_dot: int = 56) -> bytes:
    return bytes(
        [
            ESC, ord("M"), 0,
            GS, ord("!"), 0,
            ESC, ord("3"), line_spacing_dot - 1,
            ESC, ord("E"), 0,
            ESC, ord("-"), 0,
            ESC, ord("a"), 0,
            GS, ord("B"), 0,
        ]
    )  # fmt: skip


_STARPRNT_DEFAULT_STYLE_BYTES = bytes(
    [
        0x1B, 0x1E, ord("F"), 0,
        0x1B, ord("i"), 0, 0,
        0x1B, ord("F"),
        0x1B, ord("-"), 0,
        0x1B, 0x1D, ord("a"), 0,
        0x1B, ord("5"),
    ]
)  # fmt: skip


@pytest.fixture
def escpos_config() -> EscPosStyleConfig:
    return EscPosStyleConfig(line_spacing_dot=56)


@pytest.fixture
def escpos_default_bytes() -> bytes:
    """Default style on ESC/POS with 56 dot line spacing."""
    return _escpos_default_style_bytes(56)


@pytest.fixture
def starprnt_default_bytes() -> bytes:
    return _STARPRNT_DEFAULT_STYLE_BYTES
