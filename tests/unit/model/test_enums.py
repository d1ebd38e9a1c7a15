import pytest

from posprinter.model.enums import (
    DEFAULT_COLOR_MODE,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_JUSTIFICATION,
    DEFAULT_UNDERLINE,
    ColorMode,
    CutMode,
    FontName,
    FontSize,
    Justification,
    Protocol,
    Underline,
)


def test_wire_codes() -> None:
    assert [m.value for m in FontName] == [0, 1, 2]
    assert [m.value for m in FontSize] == [0, 1, 2, 3]
    assert [m.value for m in Underline] == [0, 1, 2]
    assert [m.value for m in Justification] == [0, 1, 2]
    assert [m.value for m in ColorMode] == [0, 1]
    assert [m.value for m in CutMode] == [0, 1]


def test_fontsize_multiplier() -> None:
    assert [m.multiplier for m in FontSize] == [1, 2, 3, 4]


@pytest.mark.parametrize(
    "underline, expected",
    [(Underline.NONE, False), (Underline.ONE_DOT, True), (Underline.TWO_DOT, True)],
)
def test_underline_is_on(underline: Underline, expected: bool) -> None:
    assert underline.is_on is expected


def test_colormode_is_inverted() -> None:
    assert ColorMode.WHITE_ON_BLACK.is_inverted
    assert not ColorMode.BLACK_ON_WHITE.is_inverted


def test_protocol_values_and_names() -> None:
    assert Protocol("escpos") is Protocol.ESCPOS
    assert Protocol("starprnt") is Protocol.STARPRNT
    assert Protocol.ESCPOS == "escpos"
    assert Protocol.ESCPOS.display_name == "ESC/POS"
    assert Protocol.STARPRNT.display_name == "StarPRNT"


def test_protocol_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        Protocol("zpl")


def test_defaults() -> None:
    assert DEFAULT_FONT_NAME is FontName.FONT_A
    assert DEFAULT_FONT_SIZE is FontSize.SIZE_1
    assert DEFAULT_UNDERLINE is Underline.NONE
    assert DEFAULT_JUSTIFICATION is Justification.LEFT
    assert DEFAULT_COLOR_MODE is ColorMode.BLACK_ON_WHITE
