"""Data models for huekit."""

from .enums import ColorFormat, HueName, Luminosity, WcagLevel, WcagSize
from .options import (
    MostReadableOptions,
    ParseOptions,
    RandomOptions,
    ReadabilityOptions,
    resolve_options,
)
from .color import Color, parse_color
from .config import DEFAULT_CONFIG_PATH, AppConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AppConfig",
    "Color",
    "ColorFormat",
    "HueName",
    "Luminosity",
    "MostReadableOptions",
    "ParseOptions",
    "RandomOptions",
    "ReadabilityOptions",
    "WcagLevel",
    "WcagSize",
    "parse_color",
    "resolve_options",
]
