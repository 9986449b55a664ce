"""Color parsing exceptions."""

from typing import Optional

from .base import ArgbColorError


class ColorFormatError(ArgbColorError, ValueError):
    """A color string could not be parsed.

    Also a ValueError, so pydantic validators report it as a regular
    validation failure.
    """

    def __init__(self, input_string: str, reason: Optional[str] = None):
        """
        Initialize color format error.

        Args:
            input_string: The string that failed to parse
            reason: Why it failed (for logs)
        """
        technical = f"Invalid color string: '{input_string}'."
        if reason:
            technical += f" {reason}"

        super().__init__(
            user_message=f"Invalid color string: '{input_string}'.",
            technical_message=technical,
            recoverable=True,
            recovery_hint=(
                "Use '#RRGGBB', '#AARRGGBB' or a color name.\n"
                "Run 'argbcolor names' to see the known color names"
            ),
        )
        self.input_string = input_string
        self.reason = reason
