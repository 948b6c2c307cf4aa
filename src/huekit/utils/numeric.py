"""Numeric helpers shared by the parser and the conversion math.

Channel values reach the conversion functions in many shapes: native numbers
(255, 0.5), numeric strings ("1.0", ".918") and percentage strings ("50%").
These helpers normalize all of them without ever raising.
"""

import math
import re
from typing import Any

# Leading numeric prefix, the way a lenient float parser reads "10%" or "12px"
_FLOAT_PREFIX = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")

# A whole string that is a plain number
_NUMBER = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\s*$")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_float(value: Any) -> float:
    # Integers beyond the float range saturate to infinity and get clamped later
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def parse_float(value: Any) -> float:
    """Parse the leading number of a value, returning NaN when there is none.

    Examples:
        >>> parse_float("10%")
        10.0
        >>> parse_float("asdf")
        nan
    """
    if _is_number(value):
        return _as_float(value)
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if match:
            return float(match.group(1))
    return math.nan


def to_number(value: Any) -> float:
    """Strict numeric coercion: the whole value must be a number."""
    if _is_number(value):
        return _as_float(value)
    if isinstance(value, str) and _NUMBER.match(value):
        return float(value)
    return math.nan


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Shortest text for a number: integral floats drop their ``.0``."""
    if _is_number(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def is_one_point_zero(value: Any) -> bool:
    """Check for a decimal string equal to one, such as "1.0".

    Once parsed, 1.0 and 1 are the same number, so the string form is the only
    place where "100%" can be told apart from the raw channel value 1.
    """
    return isinstance(value, str) and "." in value and parse_float(value) == 1


def is_percentage(value: Any) -> bool:
    """Check to see if a string value is a percentage."""
    return isinstance(value, str) and "%" in value


def bound01(value: Any, maximum: float) -> float:
    """Take input from [0, maximum] and return it as [0, 1].

    Percentages are scaled against ``maximum`` first; values within 1e-6 of
    ``maximum`` snap to exactly 1. Non-numeric input is treated as 0.
    """
    if is_one_point_zero(value):
        value = "100%"

    process_percent = is_percentage(value)
    n = parse_float(value)
    if math.isnan(n):
        n = 0.0
    n = min(maximum, max(0.0, n))

    # Automatically convert percentage into number
    if process_percent:
        n = round_half_up(n * maximum) / 100

    # Handle floating point rounding errors
    if abs(n - maximum) < 0.000001:
        return 1.0

    # Convert into [0, 1] range if it isn't already
    return (n % maximum) / float(maximum)


def clamp01(value: float) -> float:
    """Force a number between 0 and 1."""
    return min(1.0, max(0.0, value))


def bound_alpha(alpha: Any) -> float:
    """Return a valid alpha value in [0, 1]; every invalid value becomes 1."""
    a = parse_float(alpha)
    if math.isnan(a) or a < 0 or a > 1:
        return 1.0
    # -0.0 + 0.0 is 0.0, so "-0" never leaks into serialized strings
    return a + 0.0


def convert_to_percentage(value: Any) -> Any:
    """Replace a ratio in [0, 1] with its percentage string ("0.5" -> "50%").

    Anything that is not a number no greater than 1 is returned untouched.
    """
    n = to_number(value)
    if not math.isnan(n) and n <= 1:
        return f"{format_number(n * 100)}%"
    return value


def pad2(hex_digits: str) -> str:
    """Force a hex value to have 2 characters."""
    return hex_digits if len(hex_digits) != 1 else "0" + hex_digits


def parse_int_from_hex(value: str) -> int:
    """Parse a base-16 hex value into a base-10 integer."""
    return int(value, 16)


def convert_decimal_to_hex(value: Any) -> str:
    """Convert an alpha ratio to the hex digits of ``round(value * 255)``."""
    return format(round_half_up(parse_float(value) * 255), "x")


def convert_hex_to_decimal(value: str) -> float:
    """Convert hex alpha digits back to a ratio."""
    return parse_int_from_hex(value) / 255
