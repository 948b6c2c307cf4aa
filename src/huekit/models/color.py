"""Color value model.

A :class:`Color` holds bounded RGB channels, a normalized alpha and the
format it was read from. It is frozen: every transform returns a new color,
including :meth:`Color.set_alpha`.

Example:
    >>> red = Color.parse("red")
    >>> red.to_hex_string()
    '#ff0000'
    >>> red.lighten(20).to_string()
    'hsl(0, 100%, 70%)'
"""

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from huekit.conversion import (
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    rgba_to_argb_hex,
    rgba_to_hex,
)
from huekit.names import hex_to_name
from huekit.parser import input_to_rgb
from huekit.utils.numeric import (
    bound01,
    bound_alpha,
    clamp01,
    format_number,
    round_half_up,
)

from .enums import ColorFormat
from .options import ParseOptions, resolve_options

logger = logging.getLogger(__name__)


class Color(BaseModel):
    """Canonical color value.

    Channels ``r``, ``g`` and ``b`` are in [0, 255] and may be fractional;
    serializers round them. An input that cannot be parsed produces opaque
    black with ``is_valid`` set to False, and every serializer still returns
    a well-formed string for it.
    """

    model_config = ConfigDict(frozen=True)

    r: float = Field(default=0.0, ge=0, le=255, description="Red (0-255)")
    g: float = Field(default=0.0, ge=0, le=255, description="Green (0-255)")
    b: float = Field(default=0.0, ge=0, le=255, description="Blue (0-255)")
    a: float = Field(default=1.0, ge=0, le=1, description="Alpha (0-1)")
    format: Optional[ColorFormat] = Field(
        default=None, description="Format the color was read from"
    )
    gradient_type: Optional[str] = Field(
        default=None, description="Only used by the legacy filter serializer"
    )
    original_input: Any = Field(default="", description="Input the color was parsed from")
    is_valid: bool = Field(default=True, description="Whether parsing succeeded")

    # =================================================================
    # Creation
    # =================================================================

    @classmethod
    def parse(cls, value: Any = None, options: Any = None, **overrides: Any) -> "Color":
        """
        Parse any supported input into a Color.

        Never raises on bad color input: the result is invalid black instead.

        Args:
            value: A color string, a component mapping, or an existing Color
            options: ParseOptions (or a mapping of its fields)
            **overrides: ParseOptions fields given as keywords

        Returns:
            The parsed Color, or ``value`` itself if it already is one
        """
        if isinstance(value, Color):
            return value

        opts = resolve_options(ParseOptions, options, **overrides)

        if value is None or (isinstance(value, str) and not value):
            return cls(r=0, g=0, b=0, a=1, original_input="", is_valid=False)

        parsed = input_to_rgb(value)

        # Keep [0, 255] channels from coming back as [0, 1] fractions
        r = round_half_up(parsed.r) if parsed.r < 1 else parsed.r
        g = round_half_up(parsed.g) if parsed.g < 1 else parsed.g
        b = round_half_up(parsed.b) if parsed.b < 1 else parsed.b

        return cls(
            r=r,
            g=g,
            b=b,
            a=parsed.a,
            format=opts.format or parsed.format,
            gradient_type=opts.gradient_type,
            original_input=value,
            is_valid=parsed.ok,
        )

    # =================================================================
    # Equality
    # =================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.is_valid, self.to_rgb_string()) == (other.is_valid, other.to_rgb_string())

    def __hash__(self) -> int:
        return hash((self.is_valid, self.to_rgb_string()))

    # =================================================================
    # Properties
    # =================================================================

    @property
    def round_a(self) -> float:
        """Alpha rounded to two decimals, as used in string output."""
        return round_half_up(100 * self.a) / 100

    def get_brightness(self) -> float:
        """Perceived brightness from 0 to 255.

        <http://www.w3.org/TR/AERT#color-contrast>
        """
        rgb = self.to_rgb()
        return (rgb["r"] * 299 + rgb["g"] * 587 + rgb["b"] * 114) / 1000

    def is_dark(self) -> bool:
        return self.get_brightness() < 128

    def is_light(self) -> bool:
        return not self.is_dark()

    def get_luminance(self) -> float:
        """Relative luminance from 0 to 1.

        <http://www.w3.org/TR/2008/REC-WCAG20-20081211/#relativeluminancedef>
        """
        rgb = self.to_rgb()

        def linearize(channel: int) -> float:
            srgb = channel / 255
            if srgb <= 0.03928:
                return srgb / 12.92
            return ((srgb + 0.055) / 1.055) ** 2.4

        return (
            0.2126 * linearize(rgb["r"])
            + 0.7152 * linearize(rgb["g"])
            + 0.0722 * linearize(rgb["b"])
        )

    # =================================================================
    # Structured accessors
    # =================================================================

    def to_rgb(self) -> dict[str, Any]:
        """Return ``{r, g, b, a}`` with channels rounded to integers."""
        return {
            "r": round_half_up(self.r),
            "g": round_half_up(self.g),
            "b": round_half_up(self.b),
            "a": self.a,
        }

    def to_percentage_rgb(self) -> dict[str, Any]:
        """Return ``{r, g, b, a}`` with channels as percentage strings."""
        r, g, b = self._percentages()
        return {"r": f"{r}%", "g": f"{g}%", "b": f"{b}%", "a": self.a}

    def to_hsl(self) -> dict[str, float]:
        """Return ``{h, s, l, a}``: hue in degrees, s and l in [0, 1]."""
        hsl = rgb_to_hsl(self.r, self.g, self.b)
        return {"h": hsl["h"] * 360, "s": hsl["s"], "l": hsl["l"], "a": self.a}

    def to_hsv(self) -> dict[str, float]:
        """Return ``{h, s, v, a}``: hue in degrees, s and v in [0, 1]."""
        hsv = rgb_to_hsv(self.r, self.g, self.b)
        return {"h": hsv["h"] * 360, "s": hsv["s"], "v": hsv["v"], "a": self.a}

    def to_cmyk(self) -> dict[str, float]:
        """Return ``{c, m, y, k, a}`` with integer percentages."""
        cmyk = rgb_to_cmyk(self.r, self.g, self.b)
        return {**cmyk, "a": self.a}

    # =================================================================
    # String serializers
    # =================================================================

    def _percentages(self) -> tuple[int, int, int]:
        return (
            round_half_up(bound01(self.r, 255) * 100),
            round_half_up(bound01(self.g, 255) * 100),
            round_half_up(bound01(self.b, 255) * 100),
        )

    def _functional(self, name: str, parts: list[str]) -> str:
        if self.a == 1:
            return f"{name}({', '.join(parts)})"
        return f"{name}a({', '.join(parts)}, {format_number(self.round_a)})"

    def to_hex(self, allow_3_char: bool = False) -> str:
        return rgb_to_hex(self.r, self.g, self.b, allow_3_char)

    def to_hex_string(self, allow_3_char: bool = False) -> str:
        """Hex string such as ``#ff0000`` (or ``#f00`` when allowed)."""
        return "#" + self.to_hex(allow_3_char)

    def to_hex8(self, allow_4_char: bool = False) -> str:
        return rgba_to_hex(self.r, self.g, self.b, self.a, allow_4_char)

    def to_hex8_string(self, allow_4_char: bool = False) -> str:
        """Hex string with alpha, such as ``#ff000080``."""
        return "#" + self.to_hex8(allow_4_char)

    def to_rgb_string(self) -> str:
        """``rgb(255, 0, 0)``, or ``rgba(255, 0, 0, 0.5)`` when translucent."""
        rgb = self.to_rgb()
        return self._functional("rgb", [str(rgb["r"]), str(rgb["g"]), str(rgb["b"])])

    def to_percentage_rgb_string(self) -> str:
        r, g, b = self._percentages()
        return self._functional("rgb", [f"{r}%", f"{g}%", f"{b}%"])

    def to_hsl_string(self) -> str:
        hsl = rgb_to_hsl(self.r, self.g, self.b)
        h = round_half_up(hsl["h"] * 360)
        s = round_half_up(hsl["s"] * 100)
        l = round_half_up(hsl["l"] * 100)
        return self._functional("hsl", [str(h), f"{s}%", f"{l}%"])

    def to_hsv_string(self) -> str:
        hsv = rgb_to_hsv(self.r, self.g, self.b)
        h = round_half_up(hsv["h"] * 360)
        s = round_half_up(hsv["s"] * 100)
        v = round_half_up(hsv["v"] * 100)
        return self._functional("hsv", [str(h), f"{s}%", f"{v}%"])

    def to_cmyk_string(self) -> str:
        """``cmyk(0, 100, 100, 0)``. CMYK has no alpha notation, so alpha is dropped."""
        cmyk = rgb_to_cmyk(self.r, self.g, self.b)
        return f"cmyk({cmyk['c']}, {cmyk['m']}, {cmyk['y']}, {cmyk['k']})"

    def to_name(self) -> Union[str, bool]:
        """The CSS name of the color, or False if it has none.

        Fully transparent colors are named "transparent"; any other
        translucent color has no name.
        """
        if self.a == 0:
            return "transparent"
        if self.a < 1:
            return False
        return hex_to_name("#" + rgb_to_hex(self.r, self.g, self.b, False)) or False

    def to_filter_string(self, second_color: Any = None) -> str:
        """Legacy Microsoft gradient filter, with channels in ARGB order."""
        hex8_string = "#" + rgba_to_argb_hex(self.r, self.g, self.b, self.a)
        second_hex8_string = hex8_string
        gradient_type = "GradientType = 1, " if self.gradient_type else ""

        if second_color:
            second = Color.parse(second_color)
            second_hex8_string = "#" + rgba_to_argb_hex(second.r, second.g, second.b, second.a)

        return (
            "progid:DXImageTransform.Microsoft.gradient("
            f"{gradient_type}startColorstr={hex8_string},endColorstr={second_hex8_string})"
        )

    def to_string(self, format: Union[ColorFormat, str, None] = None) -> str:
        """
        Serialize in the given format, or in the color's own format.

        Without an explicit format, a translucent color read from hex or a
        name is written as rgba() instead, except that a fully transparent
        named color is written as "transparent".

        Args:
            format: Format tag; unknown tags fall back to a 6-digit hex string

        Returns:
            The serialized color
        """
        format_set = bool(format)
        fmt = ColorFormat.coerce(format) if format_set else (self.format or ColorFormat.HEX)

        has_alpha = 0 <= self.a < 1
        needs_alpha_format = (
            not format_set
            and has_alpha
            and fmt is not None
            and (fmt.is_hex or fmt is ColorFormat.NAME)
        )

        if needs_alpha_format:
            if fmt is ColorFormat.NAME and self.a == 0:
                return "transparent"
            return self.to_rgb_string()

        formatted: Union[str, bool] = False
        if fmt is ColorFormat.RGB:
            formatted = self.to_rgb_string()
        elif fmt is ColorFormat.PRGB:
            formatted = self.to_percentage_rgb_string()
        elif fmt in (ColorFormat.HEX, ColorFormat.HEX6):
            formatted = self.to_hex_string()
        elif fmt is ColorFormat.HEX3:
            formatted = self.to_hex_string(True)
        elif fmt is ColorFormat.HEX4:
            formatted = self.to_hex8_string(True)
        elif fmt is ColorFormat.HEX8:
            formatted = self.to_hex8_string()
        elif fmt is ColorFormat.NAME:
            formatted = self.to_name()
        elif fmt is ColorFormat.HSL:
            formatted = self.to_hsl_string()
        elif fmt is ColorFormat.HSV:
            formatted = self.to_hsv_string()
        elif fmt is ColorFormat.CMYK:
            formatted = self.to_cmyk_string()

        return formatted or self.to_hex_string()

    def __str__(self) -> str:
        return self.to_string()

    # =================================================================
    # Transforms
    # =================================================================

    def clone(self) -> "Color":
        """A new color parsed from this color's own string form."""
        return Color.parse(self.to_string())

    def set_alpha(self, alpha: Any) -> "Color":
        """Return a copy with a new alpha; invalid values become 1."""
        return self.model_copy(update={"a": bound_alpha(alpha)})

    def _with_hsl(self, hsl: dict[str, float]) -> "Color":
        return Color.parse(hsl)

    def lighten(self, amount: float = 10) -> "Color":
        """Lighten by ``amount`` percentage points. 100 always gives white."""
        hsl = self.to_hsl()
        hsl["l"] = clamp01(hsl["l"] + amount / 100)
        return self._with_hsl(hsl)

    def darken(self, amount: float = 10) -> "Color":
        """Darken by ``amount`` percentage points. 100 always gives black."""
        hsl = self.to_hsl()
        hsl["l"] = clamp01(hsl["l"] - amount / 100)
        return self._with_hsl(hsl)

    def saturate(self, amount: float = 10) -> "Color":
        hsl = self.to_hsl()
        hsl["s"] = clamp01(hsl["s"] + amount / 100)
        return self._with_hsl(hsl)

    def desaturate(self, amount: float = 10) -> "Color":
        hsl = self.to_hsl()
        hsl["s"] = clamp01(hsl["s"] - amount / 100)
        return self._with_hsl(hsl)

    def greyscale(self) -> "Color":
        """Completely desaturate."""
        return self.desaturate(100)

    def brighten(self, amount: float = 10) -> "Color":
        """Shift every RGB channel towards white by ``amount`` percent of 255.

        Unlike :meth:`lighten`, this works on raw channels rather than HSL
        lightness, so hue and saturation drift.
        """
        rgb = self.to_rgb()
        delta = round_half_up(255 * -(amount / 100))
        for key in ("r", "g", "b"):
            rgb[key] = max(0, min(255, rgb[key] - delta))
        return Color.parse(rgb)

    def spin(self, amount: float) -> "Color":
        """Rotate the hue by ``amount`` degrees; any amount wraps into [0, 360)."""
        hsl = self.to_hsl()
        hsl["h"] = (hsl["h"] + amount) % 360
        return self._with_hsl(hsl)

    def complement(self) -> "Color":
        hsl = self.to_hsl()
        hsl["h"] = (hsl["h"] + 180) % 360
        return self._with_hsl(hsl)

    def _rotations(self, *offsets: float) -> list["Color"]:
        hsl = self.to_hsl()
        h = hsl["h"]
        return [self] + [
            Color.parse({"h": (h + offset) % 360, "s": hsl["s"], "l": hsl["l"]})
            for offset in offsets
        ]

    def triad(self) -> list["Color"]:
        """The color and its two siblings at 120 and 240 degrees."""
        return self._rotations(120, 240)

    def tetrad(self) -> list["Color"]:
        """The color and its siblings at 90, 180 and 270 degrees."""
        return self._rotations(90, 180, 270)

    def splitcomplement(self) -> list["Color"]:
        """The color and its siblings at 72 and 216 degrees."""
        return self._rotations(72, 216)

    def analogous(self, results: int = 6, slices: int = 30) -> list["Color"]:
        """
        Colors next to this one on a wheel cut into ``slices`` slices.

        Args:
            results: Number of colors returned, this color included
            slices: Number of slices the hue wheel is divided into

        Returns:
            ``results`` colors, this color first
        """
        hsl = self.to_hsl()
        part = 360 / slices
        ret = [self]

        hsl["h"] = (hsl["h"] - (int(part * results) >> 1) + 720) % 360
        for _ in range(results - 1):
            hsl["h"] = (hsl["h"] + part) % 360
            ret.append(self._with_hsl(dict(hsl)))
        return ret

    def monochromatic(self, results: int = 6) -> list["Color"]:
        """``results`` colors sharing this color's hue and saturation.

        HSV value steps up by ``1 / results`` and wraps around at 1.
        """
        hsv = self.to_hsv()
        h, s, v = hsv["h"], hsv["s"], hsv["v"]
        modification = 1 / results
        ret = []

        for _ in range(results):
            ret.append(Color.parse({"h": h, "s": s, "v": v}))
            v = (v + modification) % 1

        return ret

    def mix(self, other: Any, amount: Optional[float] = 50) -> "Color":
        """
        Blend towards ``other`` by ``amount`` percent.

        0 returns this color's channels, 100 returns ``other``'s.
        """
        if amount is None:
            amount = 50

        rgb1 = self.to_rgb()
        rgb2 = Color.parse(other).to_rgb()
        p = amount / 100

        return Color.parse(
            {
                "r": (rgb2["r"] - rgb1["r"]) * p + rgb1["r"],
                "g": (rgb2["g"] - rgb1["g"]) * p + rgb1["g"],
                "b": (rgb2["b"] - rgb1["b"]) * p + rgb1["b"],
                "a": (rgb2["a"] - rgb1["a"]) * p + rgb1["a"],
            }
        )


def parse_color(value: Any = None, options: Any = None, **overrides: Any) -> Color:
    """Parse any supported input into a :class:`Color`. See :meth:`Color.parse`."""
    return Color.parse(value, options, **overrides)
