"""
Centralized error handling utilities.

Errors travel up through three layers:

1. **Parsing and validation** raise `ColorFormatError` or pydantic's `ValidationError`.
2. **Persistence** converts pydantic failures into `ConfigurationError` subclasses
   with `wrap_pydantic_error`, keeping the technical message for the log.
3. **CLI** shows `user_message` and `recovery_hint` via `format_error_for_display`.

## Quick Reference

| Scenario | Use This | Example |
|----------|----------|---------|
| Bad color string | `ColorFormatError` | `raise ColorFormatError("#12345", "length must be 7 or 9")` |
| Config file syntax error | `ConfigFileInvalidError` | `raise ConfigFileInvalidError(path, "trailing comma")` |
| Config value invalid | `ConfigValidationError` | `raise ConfigValidationError("output_format", "css", "unknown format")` |

### Batch Operations (Parsing Many Values)

```python
from argbcolor.exceptions import collect_errors

collector = collect_errors("parse colors")
for value in values:
    with collector.try_operation(value):
        colors.append(Color.parse(value))

if collector.has_errors:
    click.echo(collector.get_summary(), err=True)
```

One bad value does not stop the rest from being parsed, and every failure
ends up in the summary.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import ArgbColorError
from .config import ConfigFileInvalidError, ConfigValidationError


logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: str) -> ArgbColorError:
    """
    Convert Pydantic validation errors to argbcolor exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    error_msg = str(error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        json_errors = [err for err in errors if err.get('type') == 'json_invalid']
        if json_errors:
            # msg format: "Invalid JSON: <actual error>"
            parse_error = json_errors[0].get('msg', '').removeprefix("Invalid JSON:").strip()
            return ConfigFileInvalidError(file_path, parse_error or "invalid JSON")

        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            reason = first_error.get('msg', 'validation failed')
            value = first_error.get('input', None)

            return ConfigValidationError(
                field=field,
                value=value,
                error_msg=reason,
                file_path=file_path
            )
        elif errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    logger.debug(f"Falling back to generic validation error for {file_path}: {error_msg}")
    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ArgbColorError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Args:
        operation: Description of the overall operation

    Returns:
        ErrorCollector instance
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Only ArgbColorError is collected; anything else propagates.

        Args:
            sub_operation: Description of this specific operation
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """Get a multi-line summary of collected errors."""
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        summary = f"Failed to {self.operation}: {self.error_count} of {self.error_count + self.success_count} failed\n"
        for sub_op, error in self.errors:
            if isinstance(error, ArgbColorError):
                summary += f"  - {sub_op}: {error.user_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not isinstance(exc_val, ArgbColorError):
                return False

            logger.debug(f"{self.collector.operation}: {self.sub_operation} failed: {exc_val.technical_message}")
            self.collector.errors.append((self.sub_operation, exc_val))
            return True
