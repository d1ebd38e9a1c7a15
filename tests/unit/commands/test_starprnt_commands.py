"""
Unit tests for src/posprinter/commands/starprnt.py
"""

import pytest

from posprinter.commands import starprnt


class TestConstants:
    def test_initialize(self) -> None:
        assert starprnt.ESC_INITIALIZE == bytes.fromhex("1b40")

    def test_chinese_charset(self) -> None:
        assert starprnt.ESC_CHINESE_CHARSET == bytes.fromhex("1b1d295502003001")

    def test_drawer_pulse_timing(self) -> None:
        assert starprnt.ESC_DRAWER_PULSE_TIMING == bytes.fromhex("1b071414")

    def test_drawer_kick_is_bare_bel(self) -> None:
        assert starprnt.DRAWER_KICK == b"\x07"

    def test_two_opcode_settings(self) -> None:
        assert starprnt.ESC_BOLD_ON == b"\x1bE"
        assert starprnt.ESC_BOLD_OFF == b"\x1bF"
        assert starprnt.ESC_INVERT_ON == b"\x1b4"
        assert starprnt.ESC_INVERT_OFF == b"\x1b5"


class TestBuilders:
    @pytest.mark.parametrize(
        "command, expected",
        [
            (starprnt.select_font(1), "1b1e4601"),
            (starprnt.set_character_expansion(3, 1), "1b690301"),
            (starprnt.set_bold(True), "1b45"),
            (starprnt.set_bold(False), "1b46"),
            (starprnt.set_underline(True), "1b2d01"),
            (starprnt.set_underline(False), "1b2d00"),
            (starprnt.select_justification(2), "1b1d6102"),
            (starprnt.set_invert(True), "1b34"),
            (starprnt.set_invert(False), "1b35"),
            (starprnt.feed_lines(4), "1b6104"),
            (starprnt.cut_paper(3), "1b6403"),
            (starprnt.set_drawer_pulse_timing(10, 30), "1b070a1e"),
        ],
    )
    def test_exact_bytes(self, command: bytes, expected: str) -> None:
        assert command == bytes.fromhex(expected)

    @pytest.mark.parametrize(
        "builder",
        [starprnt.select_font, starprnt.select_justification, starprnt.feed_lines, starprnt.cut_paper],
    )
    @pytest.mark.parametrize("value", [-1, 256])
    def test_single_byte_payload_range(self, builder, value: int) -> None:
        with pytest.raises(ValueError):
            builder(value)

    def test_expansion_range(self) -> None:
        with pytest.raises(ValueError, match="Width"):
            starprnt.set_character_expansion(0, 256)

    def test_feed_shares_escpos_justify_opcode(self) -> None:
        # Same bytes, different meaning on the two families.
        from posprinter.commands import escpos

        assert starprnt.feed_lines(1) == escpos.select_justification(1)
