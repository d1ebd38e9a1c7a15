"""
Text style (Style): abstract formatting state and its per-protocol encoding.

- Font, independent width/height multipliers, bold, underline,
  justification and color inversion;
- Fluent setters and in-place ``reset()`` to the printer defaults;
- ``to_escpos()`` / ``to_starprnt()`` produce the command bytes that select
  the style; ``encode_for()`` dispatches on ``Protocol``;
- Copy, serialization and comparison helpers.

Encoding only reads the current state, so bytes produced earlier are never
affected by later mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Mapping, Optional, Type, TypeVar

from posprinter.commands import escpos, starprnt
from posprinter.config import EscPosStyleConfig
from posprinter.exceptions import ConfigurationError
from posprinter.model.enums import (
    DEFAULT_COLOR_MODE,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_JUSTIFICATION,
    DEFAULT_UNDERLINE,
    ColorMode,
    FontName,
    FontSize,
    Justification,
    Protocol,
    Underline,
)

_DEFAULT_ESCPOS_CONFIG: Final[EscPosStyleConfig] = EscPosStyleConfig()


@dataclass(slots=True)
class Style:
    """
    Text style applied to the text that follows it.

    Attributes:
        font_name: Character font.
        font_width: Horizontal multiplier.
        font_height: Vertical multiplier. On ESC/POS it also drives the line
            spacing.
        bold: Emphasized printing.
        underline: Underline weight. StarPRNT only knows on/off.
        justification: Line alignment.
        color_mode: Normal or white-on-black printing.

    Example:
        >>> style = Style().set_bold(True).set_justification(Justification.CENTER)
        >>> style.to_starprnt()[:4]
        b'\\x1b\\x1eF\\x00'
    """

    font_name: FontName = DEFAULT_FONT_NAME
    font_width: FontSize = DEFAULT_FONT_SIZE
    font_height: FontSize = DEFAULT_FONT_SIZE
    bold: bool = False
    underline: Underline = DEFAULT_UNDERLINE
    justification: Justification = DEFAULT_JUSTIFICATION
    color_mode: ColorMode = DEFAULT_COLOR_MODE

    # ---------- SETTERS ----------

    def set_font_name(self, font_name: FontName) -> "Style":
        self.font_name = font_name
        return self

    def set_font_size(self, font_width: FontSize, font_height: FontSize) -> "Style":
        self.font_width = font_width
        self.font_height = font_height
        return self

    def set_bold(self, bold: bool) -> "Style":
        self.bold = bool(bold)
        return self

    def set_underline(self, underline: Underline) -> "Style":
        self.underline = underline
        return self

    def set_justification(self, justification: Justification) -> "Style":
        self.justification = justification
        return self

    def set_color_mode(self, color_mode: ColorMode) -> "Style":
        self.color_mode = color_mode
        return self

    def reset(self) -> "Style":
        """Restore every attribute to its power-on default, in place."""
        self.font_name = DEFAULT_FONT_NAME
        self.font_width = DEFAULT_FONT_SIZE
        self.font_height = DEFAULT_FONT_SIZE
        self.bold = False
        self.underline = DEFAULT_UNDERLINE
        self.justification = DEFAULT_JUSTIFICATION
        self.color_mode = DEFAULT_COLOR_MODE
        return self

    def is_default(self) -> bool:
        return self == Style()

    # ---------- ENCODING ----------

    def to_escpos(self, config: Optional[EscPosStyleConfig] = None) -> bytes:
        """
        ESC/POS commands selecting this style.

        Sequence: ESC M, GS !, ESC 3, ESC E, ESC -, ESC a, GS B.
        The ``ESC 3`` payload grows with the font height so taller text
        keeps a proportional line pitch.

        Args:
            config: Device tuning; the default ``EscPosStyleConfig`` when None.
        """
        if config is None:
            config = _DEFAULT_ESCPOS_CONFIG
        return b"".join(
            (
                escpos.select_font(self.font_name.value),
                escpos.select_character_size(self.font_width.value, self.font_height.value),
                escpos.set_line_spacing(config.line_spacing_for(self.font_height)),
                escpos.set_emphasized(self.bold),
                escpos.set_underline(self.underline.value),
                escpos.select_justification(self.justification.value),
                escpos.set_reverse(self.color_mode.value),
            )
        )

    def to_starprnt(self) -> bytes:
        """
        StarPRNT commands selecting this style.

        Sequence: ESC RS F, ESC i (height, width), ESC E/F, ESC -,
        ESC GS a, ESC 4/5. Both underline weights map to "on".
        """
        return b"".join(
            (
                starprnt.select_font(self.font_name.value),
                starprnt.set_character_expansion(self.font_height.value, self.font_width.value),
                starprnt.set_bold(self.bold),
                starprnt.set_underline(self.underline.is_on),
                starprnt.select_justification(self.justification.value),
                starprnt.set_invert(self.color_mode.is_inverted),
            )
        )

    def encode_for(
        self, protocol: Protocol, config: Optional[EscPosStyleConfig] = None
    ) -> bytes:
        """
        Commands selecting this style in the given protocol.

        Args:
            protocol: Target command language.
            config: ESC/POS tuning; ignored for StarPRNT.
        """
        protocol = Protocol(protocol)
        if protocol is Protocol.ESCPOS:
            return self.to_escpos(config)
        return self.to_starprnt()

    # ---------- COPY / SERIALIZATION ----------

    def copy(self) -> "Style":
        return Style(
            font_name=self.font_name,
            font_width=self.font_width,
            font_height=self.font_height,
            bold=self.bold,
            underline=self.underline,
            justification=self.justification,
            color_mode=self.color_mode,
        )

    @staticmethod
    def from_style(other: "Style") -> "Style":
        """New independent style with the values of ``other``."""
        return other.copy()

    def to_dict(self) -> dict:
        return {
            "font_name": self.font_name.name,
            "font_width": self.font_width.name,
            "font_height": self.font_height.name,
            "bold": self.bold,
            "underline": self.underline.name,
            "justification": self.justification.name,
            "color_mode": self.color_mode.name,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Style":
        """
        Build a style from ``to_dict()`` output. Missing keys take defaults.

        Used for the ``default_style`` entry of the settings file, so every
        value is checked.

        Raises:
            ConfigurationError: If a value is not a member name of its enum,
                or ``bold`` is not a JSON boolean.
        """
        bold = data.get("bold", False)
        if not isinstance(bold, bool):
            raise ConfigurationError(
                f"bold must be true or false, got {bold!r}", key="bold", value=bold
            )
        return Style(
            font_name=_member(FontName, data, "font_name", DEFAULT_FONT_NAME),
            font_width=_member(FontSize, data, "font_width", DEFAULT_FONT_SIZE),
            font_height=_member(FontSize, data, "font_height", DEFAULT_FONT_SIZE),
            bold=bold,
            underline=_member(Underline, data, "underline", DEFAULT_UNDERLINE),
            justification=_member(
                Justification, data, "justification", DEFAULT_JUSTIFICATION
            ),
            color_mode=_member(ColorMode, data, "color_mode", DEFAULT_COLOR_MODE),
        )

    def __repr__(self) -> str:
        return (
            f"Style(font={self.font_name.name}, "
            f"size={self.font_width.multiplier}x{self.font_height.multiplier}, "
            f"bold={self.bold}, underline={self.underline.name}, "
            f"align={self.justification.name}, color={self.color_mode.name})"
        )


_E = TypeVar("_E", bound=Enum)


def _member(enum_type: Type[_E], data: Mapping[str, Any], key: str, default: _E) -> _E:
    name = data.get(key, default.name)
    try:
        return enum_type[name]
    except (KeyError, TypeError) as exc:
        choices = ", ".join(enum_type.__members__)
        raise ConfigurationError(
            f"{key} must be one of {choices}, got {name!r}", key=key, value=name
        ) from exc


__all__ = ["Style"]
