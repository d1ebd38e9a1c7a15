"""
Unit tests for src/posprinter/commands/escpos.py
"""

import pytest

from posprinter.commands import escpos


class TestConstants:
    def test_initialize(self) -> None:
        assert escpos.ESC_INITIALIZE == bytes.fromhex("1b40")

    def test_chinese_charset(self) -> None:
        assert escpos.ESC_CHINESE_CHARSET == bytes.fromhex("1b520f")

    def test_drawer_pulse(self) -> None:
        assert escpos.ESC_DRAWER_PULSE == bytes.fromhex("1b70001014")


class TestBuilders:
    @pytest.mark.parametrize(
        "command, expected",
        [
            (escpos.select_font(2), "1b4d02"),
            (escpos.select_character_size(1, 3), "1d2113"),
            (escpos.select_character_size(7, 7), "1d2177"),
            (escpos.set_line_spacing(55), "1b3337"),
            (escpos.set_emphasized(True), "1b4501"),
            (escpos.set_emphasized(False), "1b4500"),
            (escpos.set_underline(2), "1b2d02"),
            (escpos.select_justification(1), "1b6101"),
            (escpos.set_reverse(1), "1d4201"),
            (escpos.select_international_charset(0), "1b5200"),
            (escpos.print_and_feed_lines(255), "1b64ff"),
            (escpos.cut_paper(1), "1d5601"),
            (escpos.generate_pulse(1, 50, 100), "1b70013264"),
        ],
    )
    def test_exact_bytes(self, command: bytes, expected: str) -> None:
        assert command == bytes.fromhex(expected)

    @pytest.mark.parametrize(
        "builder",
        [
            escpos.select_font,
            escpos.set_line_spacing,
            escpos.set_underline,
            escpos.select_justification,
            escpos.set_reverse,
            escpos.select_international_charset,
            escpos.print_and_feed_lines,
            escpos.cut_paper,
        ],
    )
    @pytest.mark.parametrize("value", [-1, 256])
    def test_single_byte_payload_range(self, builder, value: int) -> None:
        with pytest.raises(ValueError):
            builder(value)

    @pytest.mark.parametrize("width, height", [(16, 0), (0, 16), (-1, 0)])
    def test_character_size_range(self, width: int, height: int) -> None:
        with pytest.raises(ValueError, match="0-15"):
            escpos.select_character_size(width, height)

    def test_pulse_range(self) -> None:
        with pytest.raises(ValueError, match="On time"):
            escpos.generate_pulse(0, 300, 20)
