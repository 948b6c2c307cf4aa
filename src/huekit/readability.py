"""WCAG2 contrast and readability.

<http://www.w3.org/TR/2008/REC-WCAG20-20081211/#contrast-ratiodef>
"""

import logging
from collections.abc import Sequence
from typing import Any, Optional

from huekit.models import Color, MostReadableOptions, ReadabilityOptions, resolve_options

logger = logging.getLogger(__name__)

FALLBACK_COLORS = ("#fff", "#000")

# (level + size) -> minimum contrast ratio
_THRESHOLDS = {
    "AAsmall": 4.5,
    "AAAlarge": 4.5,
    "AAlarge": 3,
    "AAAsmall": 7,
}


def readability(color1: Any, color2: Any) -> float:
    """Contrast ratio between two colors, from 1 to 21."""
    l1 = Color.parse(color1).get_luminance()
    l2 = Color.parse(color2).get_luminance()
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def is_readable(color1: Any, color2: Any, options: Any = None, **overrides: Any) -> bool:
    """
    Check a foreground/background pair against WCAG2.

    Args:
        color1: Any color input
        color2: Any color input
        options: ReadabilityOptions or mapping (default AA, small)
        **overrides: ``level`` and/or ``size``

    Returns:
        True if the pair meets the threshold. Unknown level/size
        combinations are never readable.

    Example:
        >>> is_readable("#000", "#111")
        False
        >>> is_readable("#000", "#fff", level="AAA", size="small")
        True
    """
    opts = resolve_options(ReadabilityOptions, options, **overrides)
    threshold = _THRESHOLDS.get((opts.level or "AA") + (opts.size or "small"))
    if threshold is None:
        return False
    return readability(color1, color2) >= threshold


def most_readable(
    base_color: Any,
    color_list: Sequence[Any],
    options: Any = None,
    **overrides: Any,
) -> Optional[Color]:
    """
    Pick the candidate with the highest contrast against ``base_color``.

    Ties keep the earliest candidate. When the winner is not readable and
    ``include_fallback_colors`` is set, white and black are tried instead,
    once.

    Returns:
        The most readable color, or None if ``color_list`` is empty and
        fallback colors are not allowed
    """
    opts = resolve_options(MostReadableOptions, options, **overrides)

    best_color: Optional[Color] = None
    best_score = 0.0

    for candidate in color_list:
        score = readability(base_color, candidate)
        if score > best_score:
            best_score = score
            best_color = Color.parse(candidate)

    if not opts.include_fallback_colors:
        return best_color

    if best_color is not None and is_readable(
        base_color, best_color, level=opts.level, size=opts.size
    ):
        return best_color

    logger.debug(
        f"No readable candidate for {base_color!r} at {opts.level}/{opts.size}, "
        "trying fallback colors"
    )
    return most_readable(
        base_color,
        FALLBACK_COLORS,
        opts.model_copy(update={"include_fallback_colors": False}),
    )
