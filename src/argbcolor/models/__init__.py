"""Data models for argbcolor."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, AppConfig

__all__ = [
    "AppConfig",
    "Color",
    "DEFAULT_CONFIG_PATH",
]
