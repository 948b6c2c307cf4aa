"""Permissive color input parsing.

Strings and mappings are turned into a :class:`ParsedColor`: bounded RGB
channels, a normalized alpha, the inferred source format and whether parsing
succeeded. Accepted string input includes::

    "red"
    "#f00" or "f00"
    "#ff0000" or "ff0000"
    "#ff000000" or "ff000000"
    "rgb 255 0 0" or "rgb (255, 0, 0)"
    "rgb 1.0 0 0" or "rgb (1, 0, 0)"
    "rgba (255, 0, 0, 1)" or "rgba 255, 0, 0, 1"
    "hsl(0, 100%, 50%)" or "hsl 0 100% 50%"
    "hsla(0, 100%, 50%, 1)" or "hsla 0 100% 50%, 1"
    "hsv(0, 100%, 100%)" or "hsv 0 100% 100%"
    "cmyk(0, 100, 100, 0)"

Range correction is left to the conversion functions, so a string and the
equivalent mapping always produce the same color.
"""

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from huekit.conversion import cmyk_to_rgb, hsl_to_rgb, hsv_to_rgb, rgb_to_rgb
from huekit.models.enums import ColorFormat
from huekit.names import name_to_hex
from huekit.utils.numeric import (
    bound_alpha,
    convert_hex_to_decimal,
    convert_to_percentage,
    parse_int_from_hex,
)

logger = logging.getLogger(__name__)

# <http://www.w3.org/TR/css3-values/#integers>
_CSS_INTEGER = r"[-\+]?\d+%?"

# <http://www.w3.org/TR/css3-values/#number-value>
_CSS_NUMBER = r"[-\+]?\d*\.\d+%?"

# Signed integer or decimal; the either/or itself is not captured
_CSS_UNIT = f"(?:{_CSS_NUMBER})|(?:{_CSS_INTEGER})"

# Parentheses and commas are optional; whitespace can replace either
_PERMISSIVE_MATCH3 = (
    rf"[\s|\(]+({_CSS_UNIT})[,|\s]+({_CSS_UNIT})[,|\s]+({_CSS_UNIT})\s*\)?"
)
_PERMISSIVE_MATCH4 = (
    rf"[\s|\(]+({_CSS_UNIT})[,|\s]+({_CSS_UNIT})[,|\s]+({_CSS_UNIT})"
    rf"[,|\s]+({_CSS_UNIT})\s*\)?"
)

CSS_UNIT_PATTERN = re.compile(_CSS_UNIT, re.ASCII)

# Tried in this order; the first match wins
_FUNCTIONAL_MATCHERS: tuple[tuple[re.Pattern, tuple[str, ...]], ...] = (
    (re.compile("rgb" + _PERMISSIVE_MATCH3, re.ASCII), ("r", "g", "b")),
    (re.compile("rgba" + _PERMISSIVE_MATCH4, re.ASCII), ("r", "g", "b", "a")),
    (re.compile("hsl" + _PERMISSIVE_MATCH3, re.ASCII), ("h", "s", "l")),
    (re.compile("hsla" + _PERMISSIVE_MATCH4, re.ASCII), ("h", "s", "l", "a")),
    (re.compile("hsv" + _PERMISSIVE_MATCH3, re.ASCII), ("h", "s", "v")),
    (re.compile("hsva" + _PERMISSIVE_MATCH4, re.ASCII), ("h", "s", "v", "a")),
    (re.compile("cmyk" + _PERMISSIVE_MATCH4, re.ASCII), ("c", "m", "y", "k")),
)

_HEX8 = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})")
_HEX6 = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})")
_HEX4 = re.compile(r"#?([0-9a-f])([0-9a-f])([0-9a-f])([0-9a-f])")
_HEX3 = re.compile(r"#?([0-9a-f])([0-9a-f])([0-9a-f])")


@dataclass(frozen=True)
class ParsedColor:
    """Outcome of parsing: bounded RGB channels plus alpha and source format."""

    ok: bool
    format: Optional[ColorFormat]
    r: float
    g: float
    b: float
    a: float


def is_valid_css_unit(value: Any) -> bool:
    """Check whether a single string / number looks like a CSS unit.

    The check is purely syntactic: out-of-range numbers are accepted here and
    clamped during conversion.
    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return CSS_UNIT_PATTERN.search(str(value)) is not None


def _doubled(digit: str) -> int:
    return parse_int_from_hex(digit + digit)


def string_input_to_object(color: str) -> Optional[dict[str, Any]]:
    """Match a color string against the supported notations.

    Returns:
        A component record such as ``{r, g, b}``, ``{h, s, l, a}`` or
        ``{r, g, b, format}``; None when no notation matches.
    """
    color = color.strip().lower()
    named = False
    hex_value = name_to_hex(color)
    if hex_value:
        color = hex_value
        named = True
    elif color == "transparent":
        return {"r": 0, "g": 0, "b": 0, "a": 0, "format": ColorFormat.NAME}

    for pattern, keys in _FUNCTIONAL_MATCHERS:
        match = pattern.search(color)
        if match:
            return dict(zip(keys, match.groups()))

    match = _HEX8.fullmatch(color)
    if match:
        return {
            "r": parse_int_from_hex(match[1]),
            "g": parse_int_from_hex(match[2]),
            "b": parse_int_from_hex(match[3]),
            "a": convert_hex_to_decimal(match[4]),
            "format": ColorFormat.NAME if named else ColorFormat.HEX8,
        }

    match = _HEX6.fullmatch(color)
    if match:
        return {
            "r": parse_int_from_hex(match[1]),
            "g": parse_int_from_hex(match[2]),
            "b": parse_int_from_hex(match[3]),
            "format": ColorFormat.NAME if named else ColorFormat.HEX,
        }

    match = _HEX4.fullmatch(color)
    if match:
        return {
            "r": _doubled(match[1]),
            "g": _doubled(match[2]),
            "b": _doubled(match[3]),
            "a": convert_hex_to_decimal(match[4] + match[4]),
            "format": ColorFormat.NAME if named else ColorFormat.HEX8,
        }

    match = _HEX3.fullmatch(color)
    if match:
        return {
            "r": _doubled(match[1]),
            "g": _doubled(match[2]),
            "b": _doubled(match[3]),
            "format": ColorFormat.NAME if named else ColorFormat.HEX,
        }

    return None


def _has_units(record: Mapping, *keys: str) -> bool:
    return all(is_valid_css_unit(record.get(key)) for key in keys)


def _bound_channel(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return min(255.0, max(value, 0.0))


def input_to_rgb(color: Any) -> ParsedColor:
    """Convert a string or mapping to bounded RGB plus alpha.

    Mapping shapes are tried in order RGB, HSV, HSL, then CMYK. An ``a`` key
    is carried through as alpha and a ``format`` key overrides the inferred
    format. Nothing here raises: unrecognised input yields ``ok=False`` and
    black.
    """
    rgb: dict[str, float] = {"r": 0.0, "g": 0.0, "b": 0.0}
    a: Any = 1
    ok = False
    inferred: Optional[ColorFormat] = None
    override: Optional[ColorFormat] = None

    if isinstance(color, str):
        color = string_input_to_object(color)

    if isinstance(color, Mapping):
        if _has_units(color, "r", "g", "b"):
            rgb = rgb_to_rgb(color["r"], color["g"], color["b"])
            ok = True
            prgb = isinstance(color["r"], str) and color["r"].endswith("%")
            inferred = ColorFormat.PRGB if prgb else ColorFormat.RGB
        elif _has_units(color, "h", "s", "v"):
            s = convert_to_percentage(color["s"])
            v = convert_to_percentage(color["v"])
            rgb = hsv_to_rgb(color["h"], s, v)
            ok = True
            inferred = ColorFormat.HSV
        elif _has_units(color, "h", "s", "l"):
            s = convert_to_percentage(color["s"])
            l = convert_to_percentage(color["l"])
            rgb = hsl_to_rgb(color["h"], s, l)
            ok = True
            inferred = ColorFormat.HSL
        elif _has_units(color, "c", "m", "y", "k"):
            rgb = cmyk_to_rgb(color["c"], color["m"], color["y"], color["k"])
            ok = True
            inferred = ColorFormat.CMYK

        if "a" in color:
            a = color["a"]
        override = ColorFormat.coerce(color.get("format"))

    if not ok:
        logger.debug(f"No color interpretation for input: {color!r}")

    return ParsedColor(
        ok=ok,
        format=override or inferred,
        r=_bound_channel(rgb["r"]),
        g=_bound_channel(rgb["g"]),
        b=_bound_channel(rgb["b"]),
        a=bound_alpha(a),
    )


__all__ = [
    "CSS_UNIT_PATTERN",
    "ParsedColor",
    "input_to_rgb",
    "is_valid_css_unit",
    "string_input_to_object",
]
