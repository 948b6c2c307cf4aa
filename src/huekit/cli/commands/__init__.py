"""CLI commands for huekit."""

from .color import convert, info, mix, modify, scheme
from .config import config
from .contrast import contrast, readable
from .random import random_command

__all__ = [
    "config",
    "contrast",
    "convert",
    "info",
    "mix",
    "modify",
    "random_command",
    "readable",
    "scheme",
]
