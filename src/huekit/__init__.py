"""huekit: color parsing, conversion and manipulation."""

__version__ = "0.1.0"

from . import names
from .exceptions import (
    ColorBoundsError,
    ColorError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    HueKitError,
    InvalidColorError,
    InvalidOptionsError,
)
from .models import (
    Color,
    ColorFormat,
    HueName,
    Luminosity,
    MostReadableOptions,
    ParseOptions,
    RandomOptions,
    ReadabilityOptions,
    WcagLevel,
    WcagSize,
    parse_color,
)
from .names import NAMES, hex_to_name, name_to_hex
from .operations import equals, from_ratio, legacy_random, mix
from .random_color import from_random
from .readability import is_readable, most_readable, readability

__all__ = [
    # Color value
    "Color",
    "ColorFormat",
    "parse_color",
    "from_ratio",
    "legacy_random",
    "equals",
    "mix",
    # Readability
    "readability",
    "is_readable",
    "most_readable",
    # Random
    "from_random",
    "HueName",
    "Luminosity",
    # Options
    "MostReadableOptions",
    "ParseOptions",
    "RandomOptions",
    "ReadabilityOptions",
    "WcagLevel",
    "WcagSize",
    # Names
    "names",
    "NAMES",
    "hex_to_name",
    "name_to_hex",
    # Exceptions
    "ColorBoundsError",
    "ColorError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "HueKitError",
    "InvalidColorError",
    "InvalidOptionsError",
]
