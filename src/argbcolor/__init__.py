"""argbcolor: 32-bit ARGB color values with parsing and formatting."""

__version__ = "0.1.0"

from .models import AppConfig, Color
from .colors import DEFAULT_TABLE, NAMED_COLORS, NamedColorTable
from .exceptions import ArgbColorError, ColorFormatError

__all__ = [
    "AppConfig",
    "ArgbColorError",
    "Color",
    "ColorFormatError",
    "DEFAULT_TABLE",
    "NAMED_COLORS",
    "NamedColorTable",
]
