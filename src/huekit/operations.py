"""Module-level color utilities that take any color input."""

import logging
import random
from collections.abc import Mapping
from typing import Any, Optional

from huekit.models import Color
from huekit.utils.numeric import convert_to_percentage

logger = logging.getLogger(__name__)


def from_ratio(value: Any, options: Any = None, **overrides: Any) -> Color:
    """
    Parse a color whose channels are given as ratios in [0, 1].

    For mapping input, every channel except alpha is turned into a
    percentage first, so ``{"r": 1, "g": 0, "b": 0}`` is red rather than
    almost black. String input is parsed unchanged.

    Example:
        >>> from_ratio({"r": 1, "g": 0, "b": 0, "a": 0.5}).to_rgb_string()
        'rgba(255, 0, 0, 0.5)'
    """
    if isinstance(value, Mapping):
        value = {
            key: channel if key == "a" else convert_to_percentage(channel)
            for key, channel in value.items()
        }

    return Color.parse(value, options, **overrides)


def legacy_random() -> Color:
    """A color with three uniformly random channels."""
    return from_ratio({"r": random.random(), "g": random.random(), "b": random.random()})


def equals(color1: Any, color2: Any) -> bool:
    """
    Check whether two inputs denote the same color.

    Both inputs must parse; equality is equality of their rgb() strings, so
    it inherits their rounding.
    """
    if not color1 or not color2:
        return False

    c1 = Color.parse(color1)
    c2 = Color.parse(color2)
    if not (c1.is_valid and c2.is_valid):
        return False

    return c1.to_rgb_string() == c2.to_rgb_string()


def mix(color1: Any, color2: Any, amount: Optional[float] = 50) -> Color:
    """Blend ``color1`` towards ``color2`` by ``amount`` percent (default 50)."""
    return Color.parse(color1).mix(color2, amount)
