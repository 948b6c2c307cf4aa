"""Per-call option structures.

Every operation that takes options accepts one of these models, a plain
mapping with the same keys, or keyword overrides. Unknown keys are rejected
so that a misspelt option never silently falls back to its default.
"""

from collections.abc import Mapping
from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from huekit.exceptions import InvalidOptionsError, wrap_options_error

from .enums import ColorFormat, Luminosity

T = TypeVar("T", bound=BaseModel)


class ParseOptions(BaseModel):
    """Options for parsing a color."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    format: Optional[ColorFormat] = Field(
        default=None,
        description="Format tag overriding the one inferred from the input",
    )
    gradient_type: Optional[str] = Field(
        default=None,
        description="Any truthy value adds 'GradientType = 1' to the filter string",
    )


class ReadabilityOptions(BaseModel):
    """WCAG2 level and text size to judge readability against."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Optional[str] = Field(default="AA", description="WCAG2 level: AA or AAA (None means AA)")
    size: Optional[str] = Field(default="small", description="Text size: small or large (None means small)")


class MostReadableOptions(ReadabilityOptions):
    """Options for picking the most readable color from a list."""

    include_fallback_colors: bool = Field(
        default=False,
        description="Fall back to white or black when no candidate is readable",
    )


class RandomOptions(BaseModel):
    """Constraints for the random color generator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    seed: Optional[int] = Field(default=None, description="Seed for reproducible output")
    count: Optional[int] = Field(
        default=None, ge=0, description="Number of colors to generate (one when unset)"
    )
    hue: Optional[Union[int, float, str]] = Field(
        default=None,
        description="Hue in degrees, a hue bucket name, or any color whose hue to use",
    )
    luminosity: Optional[Luminosity] = Field(default=None, description="Luminosity class")
    alpha: Optional[float] = Field(default=None, description="Alpha of the generated colors")


def resolve_options(model_type: type[T], options: Any = None, **overrides: Any) -> T:
    """
    Build an option model from a model instance, a mapping, or keywords.

    Args:
        model_type: The option model class
        options: An instance of ``model_type``, a mapping, or None
        **overrides: Field values applied on top of ``options``

    Returns:
        Validated option model

    Raises:
        InvalidOptionsError: If a field is unknown or has an invalid value

    Example:
        >>> resolve_options(ReadabilityOptions, {"level": "AAA"}, size="large")
        ReadabilityOptions(level='AAA', size='large')
    """
    if isinstance(options, model_type) and not overrides:
        return options

    if options is None:
        data: dict[str, Any] = {}
    elif isinstance(options, BaseModel):
        data = options.model_dump(exclude_unset=True)
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        raise InvalidOptionsError(
            model_type.__name__, f"expected a mapping, got {type(options).__name__}"
        )

    data.update(overrides)

    try:
        return model_type.model_validate(data)
    except ValidationError as e:
        raise wrap_options_error(e, model_type.__name__) from e
