"""Style model: closed enums and the ``Style`` value object."""

from posprinter.model.enums import (
    ColorMode,
    CutMode,
    FontName,
    FontSize,
    Justification,
    Protocol,
    Underline,
)
from posprinter.model.style import Style

__all__ = [
    "ColorMode",
    "CutMode",
    "FontName",
    "FontSize",
    "Justification",
    "Protocol",
    "Underline",
    "Style",
]
