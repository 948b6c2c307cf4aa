"""Random color generation with qualitative constraints.

Adapted from randomColor by David Merfield (CC0):
<https://github.com/davidmerfield/randomColor/>

A color is built in three steps: pick a hue, then a saturation allowed for
that hue, then a brightness allowed for that hue and saturation. The
``luminosity`` option narrows the saturation and brightness ranges.

Example:
    >>> [c.to_hex_string() for c in from_random(hue="purple", count=3, seed=11100)]
    ['#9b22e6', '#9f1ceb', '#a316f0']
"""

import logging
import math
import random
import re
from typing import Any, Optional, Union

from huekit.bounds import BOUNDS, ColorBound, find_bound
from huekit.exceptions import ColorBoundsError
from huekit.models import Color, HueName, Luminosity, RandomOptions, resolve_options

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")

HueInput = Union[int, float, str, None]


def from_random(options: Any = None, **overrides: Any) -> list[Color]:
    """
    Generate random colors.

    Args:
        options: RandomOptions or a mapping of its fields
        **overrides: RandomOptions fields given as keywords

    Returns:
        One color, or ``count`` colors when ``count`` is set. In batch mode
        a non-zero seed is incremented before each color, the first one
        included, so every color in the batch differs.

    Raises:
        InvalidOptionsError: If the options are malformed
    """
    opts = resolve_options(RandomOptions, options, **overrides)

    if opts.count is None:
        return [_random_color(opts, opts.seed)]

    seed = opts.seed
    colors = []
    while len(colors) < opts.count:
        if seed:
            seed += 1
        colors.append(_random_color(opts, seed))
    return colors


def _hue_value(hue: HueInput) -> HueInput:
    # str enums arrive either as members or as their values
    return hue.value if isinstance(hue, HueName) else hue


def _random_color(opts: RandomOptions, seed: Optional[int]) -> Color:
    hue = _hue_value(opts.hue)
    h = pick_hue(hue, seed)
    s = pick_saturation(h, hue, opts.luminosity, seed)
    v = pick_brightness(h, s, opts.luminosity, seed)

    record: dict[str, Any] = {"h": h, "s": s, "v": v}
    if opts.alpha is not None:
        record["a"] = opts.alpha

    logger.debug(f"Random color picked h={h} s={s} v={v} (seed={seed})")
    return Color.parse(record)


def pick_hue(hue: HueInput, seed: Optional[int]) -> int:
    """Sample a hue in degrees; red's negative range wraps to [334, 360)."""
    res = random_within(get_hue_range(hue), seed)
    if res < 0:
        res = 360 + res
    return res


def pick_saturation(
    h: int, hue: HueInput, luminosity: Optional[Luminosity], seed: Optional[int]
) -> int:
    if hue == HueName.MONOCHROME.value:
        return 0

    if luminosity is Luminosity.RANDOM:
        return random_within((0, 100), seed)

    s_min, s_max = get_color_info(h).saturation_range

    if luminosity is Luminosity.BRIGHT:
        s_min = 55
    elif luminosity is Luminosity.DARK:
        s_min = s_max - 10
    elif luminosity is Luminosity.LIGHT:
        s_max = 55

    return random_within((s_min, s_max), seed)


def pick_brightness(
    h: int, s: int, luminosity: Optional[Luminosity], seed: Optional[int]
) -> int:
    b_min = get_minimum_brightness(h, s)
    b_max = 100

    if luminosity is Luminosity.DARK:
        b_max = b_min + 20
    elif luminosity is Luminosity.LIGHT:
        b_min = (b_max + b_min) / 2
    elif luminosity is Luminosity.RANDOM:
        b_min = 0
        b_max = 100

    return random_within((b_min, b_max), seed)


def get_minimum_brightness(h: int, s: int) -> float:
    """Interpolate the brightness floor of ``h``'s bucket at saturation ``s``."""
    lower_bounds = get_color_info(h).lower_bounds

    for (s1, v1), (s2, v2) in zip(lower_bounds, lower_bounds[1:]):
        if s1 <= s <= s2:
            m = (v2 - v1) / (s2 - s1)
            b = v1 - m * s1
            return m * s + b

    return 0


def _leading_int(value: HueInput) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def get_hue_range(hue: HueInput) -> tuple[float, float]:
    """
    Resolve the hue option to a ``(low, high)`` range in degrees.

    A number strictly between 0 and 360 is used as-is, a bucket name gives the
    bucket's range, and any other valid color gives its own hue. Everything
    else allows the full wheel.
    """
    num = _leading_int(hue)
    if num is not None and 0 < num < 360:
        return num, num

    if isinstance(hue, str):
        bound = find_bound(hue)
        if bound is not None and bound.hue_range is not None:
            return bound.hue_range

        parsed = Color.parse(hue)
        if parsed.is_valid:
            h = parsed.to_hsv()["h"]
            return h, h

    return 0, 360


def get_color_info(h: float) -> ColorBound:
    """
    Find the bucket whose hue range contains ``h``.

    Raises:
        ColorBoundsError: If no bucket covers the hue
    """
    # Red straddles 0, so its upper hues are stored as negatives
    if 334 <= h <= 360:
        h -= 360

    for bound in BOUNDS:
        if bound.hue_range is not None and bound.hue_range[0] <= h <= bound.hue_range[1]:
            return bound

    raise ColorBoundsError(h)


def random_within(value_range: tuple[float, float], seed: Optional[int]) -> int:
    """
    Sample an integer from ``value_range``.

    Unseeded sampling covers both ends. Seeded sampling uses the linear
    congruential step ``(seed * 9301 + 49297) mod 233280`` and never
    reaches the upper end.
    """
    low, high = value_range
    if seed is None:
        return math.floor(low + random.random() * (high + 1 - low))

    high = high or 1
    low = low or 0
    seed = math.fmod(seed * 9301 + 49297, 233280)
    rnd = seed / 233280.0
    return math.floor(low + rnd * (high - low))
