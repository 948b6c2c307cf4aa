"""
Custom exception hierarchy for huekit.

## Exception Hierarchy

```
HueKitError (base)
├── ColorError
│   ├── InvalidColorError
│   └── ColorBoundsError
├── InvalidOptionsError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Parsing a color never raises: unreadable input becomes an invalid black
`Color`. Exceptions are reserved for programmer errors (bad option
structures, corrupted bound tables) and for the CLI and config layers.

### Example: Invalid options

```python
from huekit import from_random
from huekit.exceptions import InvalidOptionsError

try:
    from_random({"hue": "red", "colour": "blue"})
except InvalidOptionsError as e:
    print(e.user_message)   # Invalid options for RandomOptions.colour: ...
```
"""

from .base import HueKitError
from .color import ColorBoundsError, ColorError, InvalidColorError, InvalidOptionsError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_options_error, wrap_pydantic_error

__all__ = [
    # Color
    "ColorBoundsError",
    "ColorError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Base
    "HueKitError",
    "InvalidColorError",
    "InvalidOptionsError",
    # Handlers
    "format_error_for_display",
    "wrap_options_error",
    "wrap_pydantic_error",
]
