"""Colorspace conversion math.

``rgb_to_hsl``, ``rgb_to_hsv``, ``hsl_to_rgb`` and ``hsv_to_rgb`` follow the
classic formulas popularised by Michael Jackson's conversion article:
<http://mjijackson.com/2008/02/rgb-to-hsl-and-rgb-to-hsv-color-model-conversion-algorithms-in-javascript>

Every function is pure. Inputs may be native-range numbers or percentage
strings; ``bound01`` folds them into [0, 1] first.
"""

from typing import Any

from huekit.utils.numeric import (
    bound01,
    convert_decimal_to_hex,
    pad2,
    parse_float,
    round_half_up,
)


def rgb_to_rgb(r: Any, g: Any, b: Any) -> dict[str, float]:
    """Handle bounds / percentage checking to conform to the CSS color spec.

    Returns:
        ``{r, g, b}`` in [0, 255]
    """
    return {
        "r": bound01(r, 255) * 255,
        "g": bound01(g, 255) * 255,
        "b": bound01(b, 255) * 255,
    }


def _hue(r: float, g: float, b: float, maximum: float, delta: float) -> float:
    # The first channel equal to the maximum decides the sector
    if maximum == r:
        h = (g - b) / delta + (6 if g < b else 0)
    elif maximum == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    return h / 6


def rgb_to_hsl(r: Any, g: Any, b: Any) -> dict[str, float]:
    """Convert an RGB color to HSL.

    Args:
        r, g, b: channels in [0, 255] or [0, 1]

    Returns:
        ``{h, s, l}`` each in [0, 1]
    """
    r = bound01(r, 255)
    g = bound01(g, 255)
    b = bound01(b, 255)

    maximum = max(r, g, b)
    minimum = min(r, g, b)
    l = (maximum + minimum) / 2

    if maximum == minimum:
        h = s = 0.0  # achromatic
    else:
        d = maximum - minimum
        s = d / (2 - maximum - minimum) if l > 0.5 else d / (maximum + minimum)
        h = _hue(r, g, b, maximum, d)

    return {"h": h, "s": s, "l": l}


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: Any, s: Any, l: Any) -> dict[str, float]:
    """Convert an HSL color to RGB.

    Args:
        h: hue in [0, 360] (or [0, 1])
        s, l: saturation and lightness in [0, 100] (or [0, 1])

    Returns:
        ``{r, g, b}`` in [0, 255]
    """
    h = bound01(h, 360)
    s = bound01(s, 100)
    l = bound01(l, 100)

    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return {"r": r * 255, "g": g * 255, "b": b * 255}


def rgb_to_hsv(r: Any, g: Any, b: Any) -> dict[str, float]:
    """Convert an RGB color to HSV.

    Returns:
        ``{h, s, v}`` each in [0, 1]
    """
    r = bound01(r, 255)
    g = bound01(g, 255)
    b = bound01(b, 255)

    maximum = max(r, g, b)
    minimum = min(r, g, b)
    v = maximum
    d = maximum - minimum
    s = 0.0 if maximum == 0 else d / maximum

    if maximum == minimum:
        h = 0.0  # achromatic
    else:
        h = _hue(r, g, b, maximum, d)

    return {"h": h, "s": s, "v": v}


def hsv_to_rgb(h: Any, s: Any, v: Any) -> dict[str, float]:
    """Convert an HSV color to RGB.

    Args:
        h: hue in [0, 360] (or [0, 1])
        s, v: saturation and value in [0, 100] (or [0, 1])

    Returns:
        ``{r, g, b}`` in [0, 255]
    """
    h = bound01(h, 360) * 6
    s = bound01(s, 100)
    v = bound01(v, 100)

    i = int(h)
    f = h - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    mod = i % 6
    r = (v, q, p, p, t, v)[mod]
    g = (t, v, v, q, p, p)[mod]
    b = (p, p, t, v, v, q)[mod]

    return {"r": r * 255, "g": g * 255, "b": b * 255}


def _channel_hex(value: float) -> str:
    return pad2(format(round_half_up(value), "x"))


def _can_shorten(pairs: list[str]) -> bool:
    return all(pair[0] == pair[1] for pair in pairs)


def rgb_to_hex(r: float, g: float, b: float, allow_3_char: bool = False) -> str:
    """Convert an RGB color to a 6 (or, when allowed, 3) character hex string.

    Example:
        >>> rgb_to_hex(255, 0, 0, allow_3_char=True)
        'f00'
    """
    hex_pairs = [_channel_hex(r), _channel_hex(g), _channel_hex(b)]

    if allow_3_char and _can_shorten(hex_pairs):
        return "".join(pair[0] for pair in hex_pairs)

    return "".join(hex_pairs)


def rgba_to_hex(r: float, g: float, b: float, a: float, allow_4_char: bool = False) -> str:
    """Convert an RGBA color to an 8 (or, when allowed, 4) character hex string."""
    hex_pairs = [
        _channel_hex(r),
        _channel_hex(g),
        _channel_hex(b),
        pad2(convert_decimal_to_hex(a)),
    ]

    if allow_4_char and _can_shorten(hex_pairs):
        return "".join(pair[0] for pair in hex_pairs)

    return "".join(hex_pairs)


def rgba_to_argb_hex(r: float, g: float, b: float, a: float) -> str:
    """Convert an RGBA color to an ARGB hex8 string (alpha first).

    Only the legacy Microsoft gradient filter uses this ordering.
    """
    return "".join(
        [
            pad2(convert_decimal_to_hex(a)),
            _channel_hex(r),
            _channel_hex(g),
            _channel_hex(b),
        ]
    )


def rgb_to_cmyk(r: float, g: float, b: float) -> dict[str, int]:
    """Convert an RGB color to CMYK percentages rounded to integers."""
    c = 1 - r / 255
    m = 1 - g / 255
    y = 1 - b / 255
    k = min(c, m, y)

    if k == 1:
        c = m = y = 0.0
    else:
        c = (c - k) / (1 - k) * 100
        m = (m - k) / (1 - k) * 100
        y = (y - k) / (1 - k) * 100

    k *= 100
    return {
        "c": round_half_up(c),
        "m": round_half_up(m),
        "y": round_half_up(y),
        "k": round_half_up(k),
    }


def cmyk_to_rgb(c: Any, m: Any, y: Any, k: Any) -> dict[str, float]:
    """Convert CMYK percentages in [0, 100] to RGB in [0, 255]."""
    c_ratio = parse_float(c) / 100
    m_ratio = parse_float(m) / 100
    y_ratio = parse_float(y) / 100
    k_ratio = parse_float(k) / 100

    return {
        "r": 255 * (1 - c_ratio) * (1 - k_ratio),
        "g": 255 * (1 - m_ratio) * (1 - k_ratio),
        "b": 255 * (1 - y_ratio) * (1 - k_ratio),
    }
