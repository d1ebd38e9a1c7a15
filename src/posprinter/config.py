"""
Configuration for posprinter.

Two layers:
    - ``EscPosStyleConfig``: the per-device tuning that ESC/POS style
      encoding depends on (line-spacing dot count).
    - ``load_config()``: application settings read from a JSON file and
      merged over ``DEFAULT_CONFIG``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Final, Mapping, Optional

from posprinter.exceptions import ConfigurationError

if TYPE_CHECKING:
    from posprinter.model.enums import FontSize

logger: Final = logging.getLogger(__name__)

DEFAULT_LINE_SPACING_DOT: Final[int] = 56
# x4 height must still fit one byte: 4 * 64 - 1 == 255
MAX_LINE_SPACING_DOT: Final[int] = 64

DEFAULT_CONFIG_FILENAME: Final[str] = "posprinter.json"

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "protocol": "escpos",
    "line_spacing_dot": DEFAULT_LINE_SPACING_DOT,
    "escpos_charset": "utf-8",
    "starprnt_charset": "gbk",
}


@dataclass(frozen=True, slots=True)
class EscPosStyleConfig:
    """
    ESC/POS style tuning for one printer model.

    Attributes:
        line_spacing_dot: Dots per line of a x1 height font. The ``ESC 3``
            payload is ``(height code + 1) * line_spacing_dot - 1``, so the
            value is capped where the tallest font still fits one byte.
            56 suits most 80 mm models; some revisions want 64.
    """

    line_spacing_dot: int = DEFAULT_LINE_SPACING_DOT

    def __post_init__(self) -> None:
        value = self.line_spacing_dot
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"line_spacing_dot must be int, got {type(value).__name__}",
                key="line_spacing_dot",
                value=value,
            )
        if not (1 <= value <= MAX_LINE_SPACING_DOT):
            raise ConfigurationError(
                f"line_spacing_dot must be 1-{MAX_LINE_SPACING_DOT}, got {value}",
                key="line_spacing_dot",
                value=value,
            )

    def line_spacing_for(self, height: FontSize) -> int:
        return (height.value + 1) * self.line_spacing_dot - 1

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "EscPosStyleConfig":
        return EscPosStyleConfig(
            line_spacing_dot=data.get("line_spacing_dot", DEFAULT_LINE_SPACING_DOT)
        )

    @staticmethod
    def from_settings(settings: Optional[Mapping[str, Any]] = None) -> "EscPosStyleConfig":
        """Build from a settings dict as returned by ``load_config()``."""
        if settings is None:
            return EscPosStyleConfig()
        return EscPosStyleConfig.from_dict(settings)


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file, falling back to defaults.

    The file must hold a JSON object; its keys override ``DEFAULT_CONFIG``.
    A missing file is normal and logged at INFO. An unreadable file, invalid
    JSON or a non-object document is logged as a warning and the defaults
    are returned.

    Args:
        config_path: Path to the settings file. ``posprinter.json`` in the
            current directory when None.

    Returns:
        A new dict containing every default key.

    Example:
        >>> settings = load_config(Path("shop/printer.json"))
        >>> settings["line_spacing_dot"]
        64
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILENAME)

    config = dict(DEFAULT_CONFIG)

    if not config_path.exists():
        logger.info("Config file %s not found, using defaults", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"config file must contain a JSON object, got {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info("Configuration loaded from %s", config_path)
        logger.debug("Configuration: %s", config)

    except json.JSONDecodeError as e:
        logger.warning(
            "Could not parse %s: invalid JSON at line %d, column %d. Using defaults.",
            config_path,
            e.lineno,
            e.colno,
        )
    except OSError as e:
        logger.warning("Could not read %s: %s. Using defaults.", config_path, e)
    except ValueError as e:
        logger.warning("Invalid config format: %s. Using defaults.", e)

    return config


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_LINE_SPACING_DOT",
    "MAX_LINE_SPACING_DOT",
    "EscPosStyleConfig",
    "load_config",
]
