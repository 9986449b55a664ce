"""Command-line interface for argbcolor."""

from .main import cli

__all__ = ["cli"]
