"""CLI commands for argbcolor."""

from .color import convert, parse
from .config import config
from .names import names

__all__ = ["config", "convert", "names", "parse"]
