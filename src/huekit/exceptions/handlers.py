"""
Centralized error translation utilities.

Each layer translates errors to be more useful at the next level up:

```
┌─────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────┘
                  ↑
                  │ HueKitError
                  │
┌─────────────────────────────────────┐
│  LIBRARY LAYER (models, options)    │
│  - Catches pydantic ValidationError │
│  - Converts to HueKitError          │
└─────────────────────────────────────┘
```

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Config file failed to load | `raise wrap_pydantic_error(e, str(path)) from e` |
| Option structure invalid | `raise wrap_options_error(e, "RandomOptions") from e` |
| Show any error to a user | `message, hint = format_error_for_display(e)` |
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import HueKitError
from .color import InvalidOptionsError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


def _field_name(error_detail: dict) -> str:
    return ".".join(str(loc) for loc in error_detail.get("loc", ("unknown",))) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> HueKitError:
    """
    Convert Pydantic validation errors raised while loading a config file.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    error_msg = str(error)

    # Invalid JSON syntax
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    # Valid JSON but invalid values
    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            return ConfigValidationError(
                field=_field_name(first_error),
                value=first_error.get("input", None),
                error_msg=first_error.get("msg", "validation failed"),
                file_path=file_path,
            )
        if errors:
            error_lines = [
                f"  - {_field_name(err)}: {err.get('msg', 'validation failed')}"
                for err in errors
            ]
            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path,
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path,
    )


def wrap_options_error(error: ValidationError, options_name: str) -> InvalidOptionsError:
    """
    Convert a Pydantic validation error on an option structure.

    Args:
        error: The Pydantic ValidationError
        options_name: Name of the option model that failed

    Returns:
        InvalidOptionsError naming the first offending field
    """
    errors = error.errors()
    if not errors:
        return InvalidOptionsError(options_name, str(error))

    first_error = errors[0]
    msg = first_error.get("msg", "validation failed")
    if len(errors) > 1:
        msg += f" (and {len(errors) - 1} more)"

    logger.debug(f"{options_name} rejected: {error}")
    return InvalidOptionsError(options_name, msg, field=_field_name(first_error))


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, HueKitError):
        logger.debug(error.technical_message)
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
