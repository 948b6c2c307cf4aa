"""Color-related exceptions.

This module defines exceptions raised around color values:
- ColorError: Base class for color errors
- InvalidColorError: Input could not be read as a color (raised by callers
  that require a valid color; parsing itself never raises)
- ColorBoundsError: A hue has no bucket in the random generator's tables
- InvalidOptionsError: A per-call option structure failed validation
"""

from typing import Any, Optional

from .base import HueKitError


class ColorError(HueKitError):
    """A color value could not be used."""
    pass


class InvalidColorError(ColorError):
    """Input was not recognised as any supported color notation."""

    def __init__(self, value: Any):
        """
        Initialize invalid color error.

        Args:
            value: The input that failed to parse
        """
        super().__init__(
            user_message=f"Not a valid color: {value!r}",
            technical_message=f"Color input did not match any notation: {value!r}",
            recovery_hint=(
                "Use a CSS color name, hex (#f00, #ff0000, #ff000080), "
                "or rgb()/hsl()/hsv()/cmyk() notation"
            ),
        )
        self.value = value


class ColorBoundsError(ColorError):
    """A hue value could not be classified into any hue bucket.

    This indicates incomplete or corrupted bound tables and is never
    masked with a default bucket.
    """

    def __init__(self, hue: float):
        """
        Initialize color bounds error.

        Args:
            hue: The hue (degrees) that has no bucket
        """
        super().__init__(
            user_message=f"No hue bucket covers hue {hue}",
            technical_message=f"Bound table lookup failed for hue={hue!r}",
        )
        self.hue = hue


class InvalidOptionsError(HueKitError):
    """Option structure passed to an operation is invalid."""

    def __init__(self, options_name: str, error_msg: str, field: Optional[str] = None):
        """
        Initialize invalid options error.

        Args:
            options_name: Name of the option structure (e.g. "RandomOptions")
            error_msg: Why validation failed
            field: The offending field, if a single one is known
        """
        where = f"{options_name}.{field}" if field else options_name
        super().__init__(
            user_message=f"Invalid options for {where}: {error_msg}",
            technical_message=f"{options_name} validation failed: {error_msg}",
            recovery_hint=f"Check the fields accepted by {options_name}",
        )
        self.options_name = options_name
        self.field = field
