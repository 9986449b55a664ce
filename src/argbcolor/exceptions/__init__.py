"""
Custom exception hierarchy for argbcolor.

## Exception Hierarchy

```
ArgbColorError (base)
├── ColorFormatError (also a ValueError)
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ArgbColorError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: True when fixing the input is enough (otherwise the CLI also points at the log file)
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Bad Color String

```python
from argbcolor.exceptions import ColorFormatError
from argbcolor.models import Color

try:
    Color.parse("#12345")
except ColorFormatError as e:
    print(e.user_message)    # Invalid color string: '#12345'.
    print(e.input_string)    # #12345
```

See `argbcolor.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import ArgbColorError
from .color import ColorFormatError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)

__all__ = [
    # Base
    "ArgbColorError",
    # Color
    "ColorFormatError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
