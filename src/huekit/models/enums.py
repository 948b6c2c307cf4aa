"""Enumerations for huekit."""

import logging
from enum import Enum
from typing import Any, Optional

logger = logging.getLogger(__name__)


class ColorFormat(str, Enum):
    """Textual families a color can be read from and written to."""

    RGB = "rgb"  # rgb(255, 0, 0)
    PRGB = "prgb"  # rgb(100%, 0%, 0%)
    HEX = "hex"  # #ff0000 (3 and 6 digit input)
    HEX3 = "hex3"  # #f00
    HEX4 = "hex4"  # #f00f
    HEX6 = "hex6"  # #ff0000
    HEX8 = "hex8"  # #ff0000ff (4 and 8 digit input)
    NAME = "name"  # red
    HSL = "hsl"  # hsl(0, 100%, 50%)
    HSV = "hsv"  # hsv(0, 100%, 100%)
    CMYK = "cmyk"  # cmyk(0, 100, 100, 0)

    @property
    def is_hex(self) -> bool:
        """Whether this is one of the hex family formats."""
        return self.value.startswith("hex")

    @classmethod
    def coerce(cls, value: Any) -> Optional["ColorFormat"]:
        """
        Convert a format tag to a ColorFormat, or None if it is not recognised.

        Args:
            value: A ColorFormat, its string value, or anything else

        Returns:
            The matching ColorFormat, or None for empty/unknown tags
        """
        if isinstance(value, cls):
            return value
        if not value or not isinstance(value, str):
            return None
        try:
            return cls(value.lower())
        except ValueError:
            logger.debug(f"Ignoring unknown color format tag: {value!r}")
            return None


class Luminosity(str, Enum):
    """Luminosity classes understood by the random color generator."""

    RANDOM = "random"
    BRIGHT = "bright"
    DARK = "dark"
    LIGHT = "light"


class HueName(str, Enum):
    """Named hue buckets of the random color generator."""

    MONOCHROME = "monochrome"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"


class WcagLevel(str, Enum):
    """WCAG2 conformance levels."""

    AA = "AA"
    AAA = "AAA"


class WcagSize(str, Enum):
    """WCAG2 text size classes."""

    SMALL = "small"
    LARGE = "large"
